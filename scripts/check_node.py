"""
Pre-flight Check Script
Verifies configuration, node connection, artifact and deployer balance
Run from the repository root: python -m scripts.check_node
"""

import os
import sys
import asyncio
from loguru import logger

from blockchain.node_client import NodeClient
from utils.artifact_loader import load_artifact
from utils.config_loader import load_config
from wallet.keyring_manager import load_deployer_account


def check_environment_variables():
    """Check that deployer secret material is set"""
    logger.info("Checking environment variables...")

    if not os.getenv('DEPLOYER_MNEMONIC') and not os.getenv('DEPLOYER_SEED'):
        logger.error("DEPLOYER_MNEMONIC or DEPLOYER_SEED must be set")
        return False

    logger.success("✓ Deployer secret configured")
    return True


def check_node_connection(config):
    """Check the node answers and print chain metadata"""
    logger.info("Checking node connection...")

    node_client = NodeClient(
        provider_address=config['node']['provider_address'],
        ss58_format=config['node']['ss58_format']
    )

    try:
        asyncio.run(node_client.node_info())
    except Exception as e:
        logger.error(f"  ✗ {config['node']['provider_address']}: {e}")
        return False

    logger.success(f"  ✓ Connected to {config['node']['provider_address']}")
    return True


def check_artifact(config):
    """Check the program binary is readable"""
    logger.info("Checking program artifact...")

    wasm_path = config['program']['wasm_path']

    try:
        load_artifact(wasm_path)
    except (FileNotFoundError, ValueError) as e:
        logger.error(f"  ✗ {e}")
        logger.info("  Build the program first: cargo build")
        return False

    logger.success(f"  ✓ {wasm_path}")
    return True


def check_deployer_balance(config):
    """Check deployer can cover the value sent to the program"""
    logger.info("Checking deployer balance...")

    account = load_deployer_account(config)

    node_client = NodeClient(
        provider_address=config['node']['provider_address'],
        ss58_format=config['node']['ss58_format']
    )
    balance = node_client.get_free_balance(account.ss58_address)

    logger.info(f"  Free balance: {balance}")

    if balance <= config['program']['value']:
        logger.warning(
            f"  ⚠ Balance does not cover program value ({config['program']['value']}) and fees"
        )
        return False

    logger.success("  ✓ Deployer balance sufficient")
    return True


def main():
    """Run all pre-flight checks"""
    logger.info("=" * 70)
    logger.info("Vara Program Deployer Check")
    logger.info("=" * 70)

    config = load_config()

    checks = [
        ("Environment Variables", check_environment_variables),
        ("Node Connection", lambda: check_node_connection(config)),
        ("Program Artifact", lambda: check_artifact(config)),
        ("Deployer Balance", lambda: check_deployer_balance(config))
    ]

    results = []

    for name, check_func in checks:
        logger.info("")
        try:
            result = check_func()
            results.append((name, result))
        except Exception as e:
            logger.error(f"Error in {name}: {e}")
            results.append((name, False))

    # Summary
    logger.info("")
    logger.info("=" * 70)
    logger.info("Summary")
    logger.info("=" * 70)

    passed = sum(1 for _, result in results if result)
    total = len(results)

    for name, result in results:
        status = "✓ PASS" if result else "✗ FAIL"
        logger.info(f"  {status}: {name}")

    logger.info("")
    logger.info(f"Total: {passed}/{total} checks passed")

    if passed == total:
        logger.success("✅ Ready to deploy: python main.py")
        return 0

    logger.error("❌ Not ready - fix issues above")
    return 1


if __name__ == "__main__":
    sys.exit(main())

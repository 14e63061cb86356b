"""
Vara Program Deployer - Main Entry Point
Prints node info and uploads a compiled program
"""

import asyncio
import sys
from loguru import logger

from blockchain.node_client import NodeClient
from blockchain.payloads import resolve_init_payload
from blockchain.program_deployer import ProgramDeployer
from utils.artifact_loader import load_artifact
from utils.config_loader import load_config

# Configure logging
logger.remove()
logger.add(
    sys.stderr,
    format="<green>{time:YYYY-MM-DD HH:mm:ss}</green> | <level>{level: <8}</level> | <cyan>{name}</cyan>:<cyan>{function}</cyan> - <level>{message}</level>",
    level="INFO"
)
logger.add(
    "data/logs/deploy.log",
    rotation="1 day",
    retention="7 days",
    format="{time:YYYY-MM-DD HH:mm:ss} | {level: <8} | {name}:{function} - {message}",
    level="DEBUG"
)


async def main(config_path: str = "config/deploy_config.json"):
    """Main entry point"""
    config = load_config(config_path)

    code = load_artifact(config['program']['wasm_path'])
    init_payload = resolve_init_payload(config['program'])

    node_client = NodeClient(
        provider_address=config['node']['provider_address'],
        ss58_format=config['node']['ss58_format']
    )

    await node_client.node_info()

    deployer = ProgramDeployer(node_client, config)
    return await deployer.create_program(code, init_payload)


if __name__ == "__main__":
    try:
        asyncio.run(main())
    except KeyboardInterrupt:
        logger.info("Interrupted by user")
    except Exception as e:
        logger.error(f"Fatal error in main: {e}")
        sys.exit(1)

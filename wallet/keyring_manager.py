"""
Keyring Manager
Derives signing accounts from seeds, mnemonics and dev URIs
"""

from typing import Dict, Union
from substrateinterface import Keypair
from loguru import logger


VARA_SS58_FORMAT = 137


def _log_account(keypair: Keypair, name: str) -> Keypair:
    logger.info(f"Account {name}: {keypair.ss58_address}")
    return keypair


def create_account_from_seed(
    seed: Union[str, bytes],
    name: str,
    ss58_format: int = VARA_SS58_FORMAT
) -> Keypair:
    """
    Create an sr25519 account from a 32-byte seed

    Args:
        seed: Hex string (0x optional) or raw bytes
        name: Account name used in logs
        ss58_format: SS58 prefix

    Returns:
        Keypair
    """
    if isinstance(seed, str):
        seed_hex = seed[2:] if seed.startswith('0x') else seed
        try:
            seed_bytes = bytes.fromhex(seed_hex)
        except ValueError as e:
            raise ValueError(f"Seed for {name} is not valid hex") from e
    else:
        seed_bytes = bytes(seed)

    if len(seed_bytes) != 32:
        raise ValueError(f"Seed for {name} must be 32 bytes, got {len(seed_bytes)}")

    keypair = Keypair.create_from_seed(seed_bytes.hex(), ss58_format=ss58_format)
    return _log_account(keypair, name)


def create_account_from_mnemonic(
    mnemonic: str,
    name: str,
    ss58_format: int = VARA_SS58_FORMAT
) -> Keypair:
    """
    Create an sr25519 account from a BIP39 mnemonic

    Args:
        mnemonic: Space separated mnemonic words
        name: Account name used in logs
        ss58_format: SS58 prefix

    Returns:
        Keypair
    """
    if not mnemonic or not mnemonic.strip():
        raise ValueError(f"Mnemonic for {name} is empty")

    keypair = Keypair.create_from_mnemonic(
        ' '.join(mnemonic.split()),
        ss58_format=ss58_format
    )
    return _log_account(keypair, name)


def create_account_from_uri(
    suri: str,
    name: str,
    ss58_format: int = VARA_SS58_FORMAT
) -> Keypair:
    """Create an account from a secret URI such as //Alice"""
    if not suri:
        raise ValueError(f"Secret URI for {name} is empty")

    keypair = Keypair.create_from_uri(suri, ss58_format=ss58_format)
    return _log_account(keypair, name)


def load_deployer_account(config: Dict) -> Keypair:
    """
    Derive the deployer account from configured secret material

    Mnemonic wins over seed when both are set.

    Args:
        config: Loaded deploy configuration

    Returns:
        Keypair
    """
    account_config = config['account']
    ss58_format = config['node']['ss58_format']
    name = account_config['name']

    if account_config.get('mnemonic'):
        return create_account_from_mnemonic(
            account_config['mnemonic'], name, ss58_format
        )

    if account_config.get('seed'):
        return create_account_from_seed(
            account_config['seed'], name, ss58_format
        )

    raise ValueError("DEPLOYER_MNEMONIC or DEPLOYER_SEED must be set in .env")

"""
Wallet Package
Derives signing accounts for program deployment
"""

from .keyring_manager import (
    create_account_from_seed,
    create_account_from_mnemonic,
    create_account_from_uri,
    load_deployer_account
)

__all__ = [
    'create_account_from_seed',
    'create_account_from_mnemonic',
    'create_account_from_uri',
    'load_deployer_account'
]

"""
Config Loader
Reads deploy configuration from JSON and applies .env overrides
"""

import os
import json
import copy
from typing import Dict
from loguru import logger
from dotenv import load_dotenv

load_dotenv()


DEFAULT_CONFIG_PATH = 'config/deploy_config.json'

DEFAULT_CONFIG = {
    'node': {
        'provider_address': 'wss://testnet.vara.network',
        'ss58_format': 137
    },
    'program': {
        'wasm_path': 'target/wasm32-unknown-unknown/debug/dex_factory.opt.wasm',
        'gas_limit': 1000000,
        'value': 1000,
        'keep_alive': True,
        'init_payload': None,
        'router_init': None
    },
    'account': {
        'name': 'Anme'
    },
    'submission': {
        'wait_for_inclusion': True,
        'wait_for_finalization': False
    }
}

# env var -> (section, key, cast)
ENV_OVERRIDES = {
    'VARA_PROVIDER_ADDRESS': ('node', 'provider_address', str),
    'PROGRAM_WASM_PATH': ('program', 'wasm_path', str),
    'PROGRAM_GAS_LIMIT': ('program', 'gas_limit', int),
    'PROGRAM_VALUE': ('program', 'value', int),
    'DEPLOYER_NAME': ('account', 'name', str),
    'DEPLOYER_MNEMONIC': ('account', 'mnemonic', str),
    'DEPLOYER_SEED': ('account', 'seed', str)
}

SECRET_KEYS = ('mnemonic', 'seed')


def load_config(path: str = DEFAULT_CONFIG_PATH) -> Dict:
    """
    Load deploy configuration

    Missing file or sections fall back to defaults. Secrets are only
    taken from the environment.

    Args:
        path: JSON config path

    Returns:
        Config dict
    """
    config = copy.deepcopy(DEFAULT_CONFIG)

    if os.path.exists(path):
        with open(path, 'r') as f:
            file_config = json.load(f)

        for section, values in file_config.items():
            config.setdefault(section, {}).update(values)

        logger.debug(f"Loaded config from {path}")
    else:
        logger.warning(f"Config file not found: {path}, using defaults")

    for key in SECRET_KEYS:
        if config['account'].pop(key, None):
            logger.warning(f"Ignoring account {key} in {path}, set it in .env")

    for env_var, (section, key, cast) in ENV_OVERRIDES.items():
        raw = os.getenv(env_var)

        if not raw:
            continue

        try:
            config[section][key] = cast(raw)
        except ValueError as e:
            raise ValueError(f"Invalid value for {env_var}: {raw}") from e

    return config

"""
Init Payloads
SCALE-encoded init payloads for the DEX programs
"""

from typing import Dict, Optional, Union
from scalecodec.utils.ss58 import ss58_decode
from loguru import logger


ACTOR_ID_LENGTH = 32


def decode_actor_id(address: str) -> bytes:
    """
    Decode an ActorId from 0x hex or an SS58 address

    Args:
        address: 0x-prefixed 32-byte hex or SS58 address

    Returns:
        32 raw bytes
    """
    if not address:
        raise ValueError("Empty actor id")

    if address.startswith('0x'):
        try:
            actor_id = bytes.fromhex(address[2:])
        except ValueError as e:
            raise ValueError(f"Invalid actor id: {address}") from e
    else:
        try:
            actor_id = bytes.fromhex(ss58_decode(address))
        except ValueError as e:
            raise ValueError(f"Invalid SS58 address {address}: {e}") from e

    if len(actor_id) != ACTOR_ID_LENGTH:
        raise ValueError(
            f"Actor id must be {ACTOR_ID_LENGTH} bytes, got {len(actor_id)}"
        )

    return actor_id


def encode_router_init(factory: str, wvara: str) -> bytes:
    """
    Encode the router's Initialize { factory, wvara } payload

    ActorId is a fixed [u8; 32], so the SCALE encoding of the struct
    is the two ids back to back.

    Args:
        factory: Factory program id
        wvara: Wrapped VARA program id

    Returns:
        Encoded payload bytes
    """
    payload = decode_actor_id(factory) + decode_actor_id(wvara)

    logger.debug(f"Router init payload: 0x{payload.hex()}")

    return payload


def resolve_init_payload(program_config: Dict) -> Optional[Union[bytes, str]]:
    """
    Pick the init payload for the configured program

    Args:
        program_config: 'program' section of the deploy configuration

    Returns:
        Encoded router Initialize when router_init is set, else init_payload
    """
    router_init = program_config.get('router_init')

    if not router_init:
        return program_config.get('init_payload')

    if 'factory' not in router_init or 'wvara' not in router_init:
        raise ValueError("router_init needs both factory and wvara")

    logger.info(
        f"Router init: factory {router_init['factory']}, wvara {router_init['wvara']}"
    )

    return encode_router_init(router_init['factory'], router_init['wvara'])

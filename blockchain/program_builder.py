"""
Program Builder
Constructs program descriptors and the Gear upload_program call
"""

import os
import hashlib
from typing import Dict, Optional, Union
from substrateinterface import SubstrateInterface
from loguru import logger


PROGRAM_ID_PREFIX = b"program_from_user"
SALT_LENGTH = 20

DEFAULT_GAS_LIMIT = 1000000
DEFAULT_VALUE = 1000


def to_hex(data: bytes) -> str:
    """Encode bytes as 0x-prefixed hex"""
    return '0x' + bytes(data).hex()


def generate_salt() -> bytes:
    """Random salt so the same code can be deployed more than once"""
    return os.urandom(SALT_LENGTH)


def _blake2_256(data: bytes) -> bytes:
    return hashlib.blake2b(data, digest_size=32).digest()


def compute_code_id(code: bytes) -> bytes:
    """Code id is the BLAKE2b-256 hash of the WASM blob"""
    return _blake2_256(code)


def compute_program_id(code_id: bytes, salt: bytes) -> bytes:
    """
    Program id the runtime assigns to a program uploaded by a user

    Args:
        code_id: 32-byte code id
        salt: Salt sent with the upload

    Returns:
        32-byte program id
    """
    return _blake2_256(PROGRAM_ID_PREFIX + code_id + salt)


def encode_payload(payload: Optional[Union[bytes, str]]) -> bytes:
    """
    Encode an init payload to raw bytes

    None gives an empty payload, 0x-prefixed strings are hex,
    other strings are sent as UTF-8.
    """
    if payload is None:
        return b''

    if isinstance(payload, (bytes, bytearray)):
        return bytes(payload)

    if isinstance(payload, str):
        if payload.startswith('0x'):
            try:
                return bytes.fromhex(payload[2:])
            except ValueError as e:
                raise ValueError(f"Invalid hex payload: {payload}") from e
        return payload.encode('utf-8')

    raise ValueError(f"Unsupported payload type: {type(payload).__name__}")


def build_program(
    code: bytes,
    init_payload: Optional[Union[bytes, str]] = None,
    gas_limit: int = DEFAULT_GAS_LIMIT,
    value: int = DEFAULT_VALUE,
    salt: Optional[bytes] = None
) -> Dict:
    """
    Build a program descriptor for deployment

    Args:
        code: Compiled program (WASM) bytes
        init_payload: Payload passed to the program's init
        gas_limit: Gas limit for initialization
        value: Value transferred to the program
        salt: Salt (random if omitted)

    Returns:
        Program descriptor dict
    """
    if not code:
        raise ValueError("Program code is empty")

    if not isinstance(gas_limit, int) or gas_limit < 0:
        raise ValueError(f"Invalid gas limit: {gas_limit}")

    if not isinstance(value, int) or value < 0:
        raise ValueError(f"Invalid value: {value}")

    return {
        'code': bytes(code),
        'gasLimit': gas_limit,
        'value': value,
        'initPayload': encode_payload(init_payload),
        'salt': salt if salt is not None else generate_salt()
    }


def compose_upload_call(
    substrate: SubstrateInterface,
    program: Dict,
    keep_alive: Optional[bool] = True
):
    """
    Compose Gear.upload_program call for a program descriptor

    Args:
        substrate: Connected SubstrateInterface
        program: Descriptor from build_program
        keep_alive: Runtime keep_alive flag (None = omit, for older runtimes)

    Returns:
        GenericCall
    """
    call_params = {
        'code': to_hex(program['code']),
        'salt': to_hex(program['salt']),
        'init_payload': to_hex(program['initPayload']),
        'gas_limit': program['gasLimit'],
        'value': program['value']
    }

    if keep_alive is not None:
        call_params['keep_alive'] = keep_alive

    logger.debug(
        f"Composing Gear.upload_program: {len(program['code'])} bytes, "
        f"gas limit {program['gasLimit']}, value {program['value']}"
    )

    return substrate.compose_call(
        call_module='Gear',
        call_function='upload_program',
        call_params=call_params
    )

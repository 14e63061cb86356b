"""
Artifact Loader
Reads compiled program binaries from disk
"""

import os
from loguru import logger


def load_artifact(path: str) -> bytes:
    """
    Read a compiled program (.opt.wasm)

    Args:
        path: Path to the binary

    Returns:
        Raw file bytes
    """
    if not os.path.exists(path):
        raise FileNotFoundError(f"Program artifact not found: {path}")

    with open(path, 'rb') as f:
        code = f.read()

    if not code:
        raise ValueError(f"Program artifact is empty: {path}")

    logger.info(f"Loaded {len(code)} bytes from {path}")

    return code

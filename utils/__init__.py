"""
Utilities Package
Configuration and artifact loading
"""

from .config_loader import load_config
from .artifact_loader import load_artifact

__all__ = [
    'load_config',
    'load_artifact'
]

"""
Blockchain Interaction Package
Handles node sessions, program building, and program deployment
"""

from .node_client import NodeClient
from .program_deployer import ProgramDeployer
from .payloads import encode_router_init, resolve_init_payload

__all__ = ['NodeClient', 'ProgramDeployer', 'encode_router_init', 'resolve_init_payload']

"""
Node Client
Opens websocket sessions to a Vara node and reads chain metadata
"""

import asyncio
from typing import Dict
from substrateinterface import SubstrateInterface
from loguru import logger

from wallet.keyring_manager import VARA_SS58_FORMAT


DEFAULT_PROVIDER_ADDRESS = 'wss://testnet.vara.network'


class NodeClient:
    """
    Thin wrapper around SubstrateInterface

    Every operation opens its own connection and closes it when done.
    Connections are never pooled or shared between operations.
    """

    def __init__(
        self,
        provider_address: str = DEFAULT_PROVIDER_ADDRESS,
        ss58_format: int = VARA_SS58_FORMAT
    ):
        """
        Initialize Node Client

        Args:
            provider_address: Websocket RPC endpoint
            ss58_format: SS58 prefix for addresses
        """
        self.provider_address = provider_address
        self.ss58_format = ss58_format

    def connect(self) -> SubstrateInterface:
        """Open a new session to the node"""
        logger.debug(f"Connecting to {self.provider_address}")

        return SubstrateInterface(
            url=self.provider_address,
            ss58_format=self.ss58_format
        )

    def _query_node_info(self) -> Dict:
        """
        Run the system metadata RPCs on one session

        Returns:
            Dict with chain, node_name and node_version
        """
        substrate = self.connect()

        # Requests are sent in order on the same websocket
        try:
            return {
                'chain': substrate.rpc_request('system_chain', []).get('result'),
                'node_name': substrate.rpc_request('system_name', []).get('result'),
                'node_version': substrate.rpc_request('system_version', []).get('result')
            }
        finally:
            substrate.close()

    async def get_node_info(self) -> Dict:
        """
        Query chain name, node name and node version

        Returns:
            Dict with chain, node_name and node_version
        """
        return await asyncio.to_thread(self._query_node_info)

    async def node_info(self) -> Dict:
        """Query and log chain metadata"""
        info = await self.get_node_info()

        logger.info(
            f"You are connected to chain {info['chain']} "
            f"using {info['node_name']} v{info['node_version']}"
        )

        return info

    def get_free_balance(self, address: str) -> int:
        """
        Get free balance of an account

        Args:
            address: SS58 address

        Returns:
            Free balance in the chain's smallest unit
        """
        substrate = self.connect()

        try:
            account_info = substrate.query('System', 'Account', [address])
        finally:
            substrate.close()

        return int(account_info.value['data']['free'])

"""
Program Deployer
Signs and submits Gear program uploads
"""

import asyncio
from typing import Dict, Optional, Union
from loguru import logger

from blockchain.node_client import NodeClient
from blockchain.program_builder import (
    build_program,
    compose_upload_call,
    compute_code_id,
    compute_program_id,
    to_hex
)
from wallet.keyring_manager import load_deployer_account


class ProgramDeployer:
    """
    Deploys compiled programs to a Gear/Vara node
    """

    def __init__(self, node_client: NodeClient, config: Dict):
        """
        Initialize Program Deployer

        Args:
            node_client: Client used to open node sessions
            config: Loaded deploy configuration
        """
        self.node_client = node_client
        self.config = config

        self.program_config = config['program']
        self.submission_config = config['submission']

    async def create_program(
        self,
        code: bytes,
        init_payload: Optional[Union[bytes, str]] = None
    ) -> Optional[Dict]:
        """
        Upload and initialize a program

        Any failure (network, signing, runtime) is logged, not raised.

        Args:
            code: Compiled program bytes
            init_payload: Payload for the program's init

        Returns:
            Deployment result dict, or None on failure
        """
        try:
            program = build_program(
                code,
                init_payload=init_payload,
                gas_limit=self.program_config['gas_limit'],
                value=self.program_config['value']
            )
            account = load_deployer_account(self.config)

            code_id = compute_code_id(program['code'])
            program_id = compute_program_id(code_id, program['salt'])

            logger.info(f"🚀 create_program ~ programId {to_hex(program_id)}")
            logger.info(f"🚀 create_program ~ codeId {to_hex(code_id)}")
            logger.info(f"🚀 create_program ~ salt {to_hex(program['salt'])}")

            receipt = await asyncio.to_thread(self._upload_program, program, account)

            logger.info(f"Transaction sent: {receipt['extrinsic_hash']}")

            result = {
                'programId': to_hex(program_id),
                'codeId': to_hex(code_id),
                'salt': to_hex(program['salt']),
                'extrinsicHash': receipt['extrinsic_hash'],
                'blockHash': receipt['block_hash'],
                'success': receipt['is_success'],
                'events': receipt['events']
            }

            if receipt['block_hash'] is None:
                # Not included yet, no events or dispatch result
                return result

            for event_value in result['events']:
                logger.info(f"Event: {event_value}")

            if receipt['is_success']:
                logger.success(f"✅ Program {result['programId']} uploaded")
                logger.success(f"Block hash: {receipt['block_hash']}")
            else:
                logger.error(f"❌ Program upload failed: {receipt['error_message']}")

            return result

        except Exception as e:
            logger.error(f"🚀 create_program ~ error: {e}")
            return None

    def _upload_program(self, program: Dict, account) -> Dict:
        """
        Compose, sign and submit Gear.upload_program on a fresh session

        Args:
            program: Descriptor from build_program
            account: Keypair signing the extrinsic

        Returns:
            Receipt fields read before the session is closed
        """
        substrate = self.node_client.connect()

        try:
            call = compose_upload_call(
                substrate,
                program,
                keep_alive=self.program_config.get('keep_alive')
            )

            extrinsic = substrate.create_signed_extrinsic(call=call, keypair=account)
            logger.info(
                f"🚀 create_program ~ extrinsic Gear.upload_program signed by {account.ss58_address}"
            )

            receipt = substrate.submit_extrinsic(
                extrinsic,
                wait_for_inclusion=self.submission_config['wait_for_inclusion'],
                wait_for_finalization=self.submission_config['wait_for_finalization']
            )

            if receipt.block_hash is None:
                return {
                    'extrinsic_hash': receipt.extrinsic_hash,
                    'block_hash': None,
                    'is_success': None,
                    'error_message': None,
                    'events': []
                }

            # Receipt properties query the node and need the open session
            return {
                'extrinsic_hash': receipt.extrinsic_hash,
                'block_hash': receipt.block_hash,
                'is_success': receipt.is_success,
                'error_message': receipt.error_message,
                'events': [event.value for event in receipt.triggered_events]
            }

        finally:
            substrate.close()

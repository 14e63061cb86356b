"""
Unit Tests for the Deploy Entry Point
"""

import os
import sys
import pytest
from unittest.mock import AsyncMock, Mock, patch
from loguru import logger


@pytest.fixture(scope='module')
def main_module(tmp_path_factory):
    """Import main with its file sink under a temp dir, then drop its sinks"""
    cwd = os.getcwd()
    os.chdir(tmp_path_factory.mktemp('deploy'))
    try:
        import main
    finally:
        os.chdir(cwd)

    logger.remove()
    yield main
    logger.remove()
    logger.add(sys.stderr)


@pytest.fixture
def config():
    return {
        'node': {'provider_address': 'ws://127.0.0.1:9944', 'ss58_format': 42},
        'program': {
            'wasm_path': 'dex_factory.opt.wasm',
            'init_payload': '0x00',
            'router_init': None
        },
        'account': {'name': 'Anme'},
        'submission': {'wait_for_inclusion': True, 'wait_for_finalization': False}
    }


@pytest.fixture
def patched(main_module, config):
    """Patch the collaborators main wires together, recording call order"""
    calls = []

    node_client = Mock()
    node_client.node_info = AsyncMock(side_effect=lambda: calls.append('node_info'))

    deployer = Mock()
    deployer.create_program = AsyncMock(
        side_effect=lambda code, payload: calls.append('create_program') or {'success': True}
    )

    def load_artifact(path):
        calls.append('load_artifact')
        return b'\x00asm'

    with patch.object(main_module, 'load_config', return_value=config), \
            patch.object(main_module, 'load_artifact', side_effect=load_artifact) as artifact_mock, \
            patch.object(main_module, 'NodeClient', return_value=node_client) as node_client_cls, \
            patch.object(main_module, 'ProgramDeployer', return_value=deployer) as deployer_cls:
        yield {
            'calls': calls,
            'load_artifact': artifact_mock,
            'node_client_cls': node_client_cls,
            'node_client': node_client,
            'deployer_cls': deployer_cls,
            'deployer': deployer
        }


class TestMain:
    """Test deploy orchestration"""

    @pytest.mark.asyncio
    async def test_call_order(self, main_module, patched):
        result = await main_module.main()

        assert patched['calls'] == ['load_artifact', 'node_info', 'create_program']
        assert result == {'success': True}

    @pytest.mark.asyncio
    async def test_arguments(self, main_module, patched, config):
        await main_module.main('config/other.json')

        patched['load_artifact'].assert_called_once_with('dex_factory.opt.wasm')
        patched['node_client_cls'].assert_called_once_with(
            provider_address='ws://127.0.0.1:9944',
            ss58_format=42
        )
        patched['deployer_cls'].assert_called_once_with(patched['node_client'], config)
        patched['deployer'].create_program.assert_awaited_once_with(b'\x00asm', '0x00')

    @pytest.mark.asyncio
    async def test_router_init_payload(self, main_module, patched, config):
        config['program']['router_init'] = {
            'factory': '0x' + '11' * 32,
            'wvara': '0x' + '22' * 32
        }

        await main_module.main()

        patched['deployer'].create_program.assert_awaited_once_with(
            b'\x00asm', b'\x11' * 32 + b'\x22' * 32
        )

    @pytest.mark.asyncio
    async def test_missing_artifact_stops_before_node(self, main_module, patched):
        patched['load_artifact'].side_effect = FileNotFoundError("missing")

        with pytest.raises(FileNotFoundError):
            await main_module.main()

        patched['node_client'].node_info.assert_not_called()


if __name__ == "__main__":
    pytest.main([__file__, '-v'])

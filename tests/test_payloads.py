"""
Unit Tests for DEX Init Payloads
"""

import pytest

from blockchain.payloads import decode_actor_id, encode_router_init, resolve_init_payload


# Well-known development account //Alice
ALICE_SS58 = '5GrwvaEF5zXb26Fz9rcQpDWS57CtERHpNehXCPcNoHGKutQY'
ALICE_HEX = '0xd43593c715fdd31c61141abd04a99fd6822c8558854ccde39a5684e7a56da27d'


class TestDecodeActorId:
    """Test ActorId parsing"""

    def test_hex(self):
        assert decode_actor_id(ALICE_HEX) == bytes.fromhex(ALICE_HEX[2:])

    def test_ss58(self):
        """SS58 and hex forms of the same account decode equally"""
        assert decode_actor_id(ALICE_SS58) == decode_actor_id(ALICE_HEX)

    def test_wrong_length(self):
        with pytest.raises(ValueError):
            decode_actor_id('0x1234')

    def test_invalid_hex(self):
        with pytest.raises(ValueError) as excinfo:
            decode_actor_id('0x' + 'zz' * 32)

        assert isinstance(excinfo.value.__cause__, ValueError)

    def test_invalid_ss58(self):
        with pytest.raises(ValueError) as excinfo:
            decode_actor_id('not-an-address')

        assert excinfo.value.__cause__ is not None

    def test_empty(self):
        with pytest.raises(ValueError):
            decode_actor_id('')


class TestRouterInit:
    """Test router Initialize encoding"""

    def test_encode(self):
        factory = '0x' + '11' * 32
        wvara = '0x' + '22' * 32

        payload = encode_router_init(factory, wvara)

        assert len(payload) == 64
        assert payload[:32] == b'\x11' * 32
        assert payload[32:] == b'\x22' * 32


class TestResolveInitPayload:
    """Test init payload selection from program config"""

    def test_plain_payload(self):
        program_config = {'init_payload': '0x00', 'router_init': None}

        assert resolve_init_payload(program_config) == '0x00'

    def test_missing_keys(self):
        assert resolve_init_payload({}) is None

    def test_router_init(self):
        program_config = {
            'init_payload': '0x00',
            'router_init': {'factory': ALICE_SS58, 'wvara': '0x' + '22' * 32}
        }

        payload = resolve_init_payload(program_config)

        assert payload == bytes.fromhex(ALICE_HEX[2:]) + b'\x22' * 32

    def test_router_init_incomplete(self):
        with pytest.raises(ValueError):
            resolve_init_payload({'router_init': {'factory': ALICE_HEX}})


if __name__ == "__main__":
    pytest.main([__file__, '-v'])

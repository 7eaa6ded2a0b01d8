"""Tests for the DER signature codec."""

import pytest

from ethsig.der import decode_der_signature, encode_der_signature


def test_encode_small_values():
    assert encode_der_signature(1, 2) == bytes.fromhex("3006020101020102")


def test_encode_high_bit_gets_sign_padding():
    der = encode_der_signature(0x80, 1)
    # INTEGER 0x80 needs a leading zero byte to stay positive
    assert der == bytes.fromhex("3007020200800201" + "01")


def test_decode_returns_components():
    r = int("11" * 32, 16)
    s = int("22" * 32, 16)
    assert decode_der_signature(encode_der_signature(r, s)) == (r, s)


@pytest.mark.parametrize("data", [b"", b"\x00\x01", b"\x30\x06\x02\x01\x01", b"\x31\x06\x02\x01\x01\x02\x01\x02"])
def test_decode_malformed_returns_none(data):
    assert decode_der_signature(data) is None

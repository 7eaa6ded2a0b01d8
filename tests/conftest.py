import pytest

R_WORD = bytes([0x11]) * 32
S_WORD = bytes([0x22]) * 32


@pytest.fixture
def r_word():
    """32-byte r component, 0x11 repeated."""
    return R_WORD


@pytest.fixture
def s_word():
    """32-byte s component, 0x22 repeated (top bit clear)."""
    return S_WORD


@pytest.fixture
def standard_sig():
    """65-byte r || s || v with r = 0x11.., s = 0x22.., v = 1."""
    return R_WORD + S_WORD + bytes([1])


@pytest.fixture
def compact_sig():
    """64-byte EIP-2098 r || vs with the parity bit set."""
    vs = bytearray(S_WORD)
    vs[0] |= 0x80
    return R_WORD + bytes(vs)

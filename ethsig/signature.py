"""
Parsed Signature Value Type

ParsedSignature is the result of every parse call: the r and s words as
fixed 32-byte big-endian strings plus the normalized recovery parameter v.
It can be turned back into each wire form the parser accepts (65-byte
r || s || v, 64-byte EIP-2098 compact, hex) and into DER for interop with
generic ECDSA tooling.
"""

from dataclasses import dataclass

from ethsig.der import encode_der_signature
from ethsig.math_utils import bytes_to_long, long_to_bytes
from ethsig.normalize import V_BASE

WORD_SIZE = 32
PARITY_BIT = 0x80
S_MASK = ~PARITY_BIT & 0xff


@dataclass(frozen=True)
class ParsedSignature:
    r: bytes
    s: bytes
    v: int

    def __post_init__(self):
        for name in ("r", "s"):
            value = getattr(self, name)
            if not isinstance(value, (bytes, bytearray, memoryview)):
                raise TypeError(f"{name} must be bytes, got {type(value).__name__}")
            value = bytes(value)
            if len(value) != WORD_SIZE:
                raise ValueError(f"{name} must be {WORD_SIZE} bytes, got {len(value)}")
            # frozen: bypass __setattr__ to store the normalized bytes copy
            object.__setattr__(self, name, value)

    def __iter__(self):
        # allows `r, s, v = parse_signature_bytes(...)`
        return iter((self.r, self.s, self.v))

    @classmethod
    def from_ints(cls, r, s, v):
        """
        Build a signature from integer components.

        Args:
            r (int): r component, must fit in 32 bytes
            s (int): s component, must fit in 32 bytes
            v (int): recovery parameter, stored as given

        Returns:
            ParsedSignature: The signature
        """
        return cls(long_to_bytes(r, WORD_SIZE), long_to_bytes(s, WORD_SIZE), v)

    @property
    def r_int(self):
        return bytes_to_long(self.r)

    @property
    def s_int(self):
        return bytes_to_long(self.s)

    @property
    def recovery_id(self):
        """0 or 1, the parity of the R point's y coordinate."""
        self._require_canonical_v()
        return self.v - V_BASE

    @property
    def y_parity(self):
        return bool(self.recovery_id)

    def _require_canonical_v(self):
        if self.v not in (V_BASE, V_BASE + 1):
            raise ValueError(f"v={self.v} is not a canonical recovery parameter")

    def to_bytes(self):
        """
        Serialize as the standard 65-byte r || s || v layout.

        Returns:
            bytes: 65-byte signature
        """
        if not 0 <= self.v <= 0xff:
            raise ValueError(f"v={self.v} does not fit in one byte")
        return self.r + self.s + bytes([self.v])

    def to_compact(self):
        """
        Serialize as the 64-byte EIP-2098 r || vs layout.

        The y parity is stored in the top bit of s, so an s with that bit
        already set cannot be represented.

        Returns:
            bytes: 64-byte compact signature

        Raises:
            ValueError: If v is not 27/28 or s uses its top bit
        """
        self._require_canonical_v()
        if self.s[0] & PARITY_BIT:
            raise ValueError("s has its top bit set and cannot be compacted")
        vs = bytearray(self.s)
        if self.v == V_BASE + 1:
            vs[0] |= PARITY_BIT
        return self.r + bytes(vs)

    def to_hex(self):
        return "0x" + self.to_bytes().hex()

    def to_der(self):
        """
        Encode r and s as a DER signature. v is dropped.

        Returns:
            bytes: DER-encoded signature
        """
        return encode_der_signature(self.r_int, self.s_int)

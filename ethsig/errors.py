"""
Signature Parsing Errors

All errors derive from SignatureError, itself a ValueError, so callers that
only care about "bad input" can catch ValueError.
"""


class SignatureError(ValueError):
    """Base class for every signature parsing failure."""


class HexDecodeError(SignatureError):
    """The signature string is not valid hexadecimal."""

    def __init__(self, reason):
        self.reason = reason
        super().__init__(f"hex decode error: {reason}")


class InvalidLength(SignatureError):
    """The raw signature is neither 64 nor 65 bytes long."""

    def __init__(self, length):
        self.length = length
        super().__init__(f"unexpected signature length: {length} bytes")


class UnrecognizedRecoveryId(SignatureError):
    """Raised in strict mode for a v value with no canonical mapping."""

    def __init__(self, v):
        self.v = v
        super().__init__(f"unrecognized recovery id: v={v}")

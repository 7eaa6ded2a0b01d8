"""
Ethereum Signature Parsing

This module turns an Ethereum-style ECDSA signature, given either as a hex
string or as raw bytes, into its r, s and v components with v normalized
to 27 or 28.

Functions:
    parse_signature_hex(sig_hex, strict=False):
        Decodes an optionally 0x-prefixed hex string and parses the bytes.

    parse_signature_bytes(sig_bytes, strict=False):
        Parses a 65-byte (r || s || v) or 64-byte EIP-2098 (r || vs) signature.

    parse_signature(value, strict=False):
        Dispatches to one of the above based on the input type.

All functions return a ParsedSignature and raise a SignatureError subclass
on bad input.
"""

import binascii
import logging

from ethsig.errors import HexDecodeError, InvalidLength
from ethsig.normalize import V_BASE, normalize_v
from ethsig.signature import PARITY_BIT, S_MASK, WORD_SIZE, ParsedSignature

logger = logging.getLogger(__name__)

SIGNATURE_LENGTH = 65
COMPACT_SIGNATURE_LENGTH = 64


def parse_signature_hex(sig_hex, strict=False):
    """
    Parse a hex-encoded signature.

    Args:
        sig_hex (str): Hex digits, optionally prefixed with 0x or 0X
        strict (bool, optional): Reject v values with no canonical mapping

    Returns:
        ParsedSignature: The parsed signature

    Raises:
        HexDecodeError: If the string is not valid hex
        InvalidLength: If the decoded signature is not 64 or 65 bytes
    """
    if not isinstance(sig_hex, str):
        raise TypeError(f"expected a hex string, got {type(sig_hex).__name__}")

    digits = sig_hex
    if digits[:2] in ("0x", "0X"):
        digits = digits[2:]

    try:
        sig_bytes = binascii.unhexlify(digits)
    except (binascii.Error, ValueError) as e:
        raise HexDecodeError(str(e)) from e

    return parse_signature_bytes(sig_bytes, strict=strict)


def parse_signature_bytes(sig_bytes, strict=False):
    """
    Parse a raw signature.

    Args:
        sig_bytes (bytes): 65-byte r || s || v or 64-byte EIP-2098 r || vs
        strict (bool, optional): Reject v values with no canonical mapping

    Returns:
        ParsedSignature: The parsed signature

    Raises:
        InvalidLength: If the signature is not 64 or 65 bytes
    """
    if not isinstance(sig_bytes, (bytes, bytearray, memoryview)):
        raise TypeError(f"expected bytes, got {type(sig_bytes).__name__}")
    sig_bytes = bytes(sig_bytes)

    r = sig_bytes[:WORD_SIZE]

    if len(sig_bytes) == SIGNATURE_LENGTH:
        s = sig_bytes[WORD_SIZE:2 * WORD_SIZE]
        v = normalize_v(sig_bytes[2 * WORD_SIZE], strict=strict)
        logger.debug(f"Parsed 65-byte signature, v={v}")
        return ParsedSignature(r, s, v)

    if len(sig_bytes) == COMPACT_SIGNATURE_LENGTH:
        vs = bytearray(sig_bytes[WORD_SIZE:])
        v = V_BASE + 1 if vs[0] & PARITY_BIT else V_BASE
        vs[0] &= S_MASK
        logger.debug(f"Parsed 64-byte compact signature, v={v}")
        return ParsedSignature(r, bytes(vs), v)

    raise InvalidLength(len(sig_bytes))


def parse_signature(value, strict=False):
    """
    Parse a signature given either as a hex string or as raw bytes.

    Args:
        value (str or bytes): The signature
        strict (bool, optional): Reject v values with no canonical mapping

    Returns:
        ParsedSignature: The parsed signature
    """
    if isinstance(value, str):
        return parse_signature_hex(value, strict=strict)
    return parse_signature_bytes(value, strict=strict)

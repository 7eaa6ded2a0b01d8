"""
DER-Encoded ECDSA Signature Codec

Ethereum signatures carry r and s as raw 32-byte words, while most other
ECDSA tooling (OpenSSL, X.509, the cryptography library's verify calls)
expects them wrapped in an ASN.1 DER structure:

    SEQUENCE { INTEGER r, INTEGER s }

Functions:
    encode_der_signature(r, s):
        Encodes integer r and s components as a DER signature.

    decode_der_signature(sequence):
        Decodes a DER-encoded ECDSA signature and extracts its r and s components.

The recovery parameter v has no place in the DER structure and is lost on
encoding.
"""

import logging

from cryptography.hazmat.primitives.asymmetric.utils import (
    decode_dss_signature,
    encode_dss_signature,
)

logger = logging.getLogger(__name__)


def encode_der_signature(r, s):
    """
    Encode an ECDSA signature as DER.

    Args:
        r (int): r component
        s (int): s component

    Returns:
        bytes: DER-encoded signature
    """
    return encode_dss_signature(r, s)


def decode_der_signature(sequence):
    """
    Decode a DER-encoded ECDSA signature.

    Args:
        sequence (bytes): DER-encoded signature

    Returns:
        tuple: (r, s) components of the signature or None if invalid
    """
    try:
        return decode_dss_signature(bytes(sequence))
    except ValueError as e:
        logger.debug(f"Malformed DER signature: {e}")
        return None

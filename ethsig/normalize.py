"""
Recovery Parameter Normalization

Ethereum tooling has produced the ECDSA recovery parameter v in several
encodings over the years. This module maps all of them onto the canonical
pair {27, 28}.

Functions:
    normalize_v(raw, strict=False):
        Maps any accepted encoding of v to 27 or 28.

    chain_id_from_v(raw):
        Extracts the chain id folded into an EIP-155 v value.

Accepted encodings (first match wins):
    - 0 / 1        raw recovery id, as returned by most signing libraries
    - 27 / 28      already canonical (legacy Ethereum, eth_sign)
    - >= 35        EIP-155 replay protected, v = chain_id * 2 + 35 + parity
"""

import logging

from ethsig.errors import UnrecognizedRecoveryId

logger = logging.getLogger(__name__)

V_BASE = 27
EIP155_OFFSET = 35


def _check_raw(raw):
    # bool is an int subclass but never a meaningful v
    if isinstance(raw, bool) or not isinstance(raw, int):
        raise TypeError(f"v must be an integer, got {type(raw).__name__}")
    if raw < 0:
        raise ValueError(f"v must be non-negative, got {raw}")


def normalize_v(raw, strict=False):
    """
    Normalize the recovery parameter to 27 or 28.

    Values outside every known encoding (2-26, 29-34) have no canonical
    form. By default they are returned unchanged and the caller has to
    check v itself; with strict=True they are rejected.

    Args:
        raw (int): v as found in the signature
        strict (bool, optional): Raise instead of passing unknown values through

    Returns:
        int: 27 or 28 (or raw, for unknown values in lenient mode)

    Raises:
        UnrecognizedRecoveryId: If strict and raw matches no known encoding
    """
    _check_raw(raw)

    if raw in (0, 1):
        return raw + V_BASE
    if raw in (V_BASE, V_BASE + 1):
        return raw
    if raw >= EIP155_OFFSET:
        parity = (raw - EIP155_OFFSET) % 2
        logger.debug(f"EIP-155 v={raw} (chain id {(raw - EIP155_OFFSET) // 2}), parity {parity}")
        return V_BASE + parity

    if strict:
        raise UnrecognizedRecoveryId(raw)
    logger.debug(f"No canonical mapping for v={raw}, passing it through")
    return raw


def chain_id_from_v(raw):
    """
    Extract the EIP-155 chain id from v.

    Args:
        raw (int): v as found in the signature or transaction

    Returns:
        int: The chain id, or None when v is not EIP-155 encoded
    """
    _check_raw(raw)
    if raw < EIP155_OFFSET:
        return None
    return (raw - EIP155_OFFSET) // 2

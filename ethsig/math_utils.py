"""
Integer and Byte Conversions for Signature Components

Signature components travel as fixed-width big-endian byte strings but are
often needed as plain integers (DER encoding, comparisons, display). This
module holds the two conversions between those representations.

Functions:
    bytes_to_long(byte_array):
        Converts a byte string to an integer using big-endian byte order.

    long_to_bytes(n, blocksize=0):
        Converts an integer to a byte string using big-endian byte order,
        left-padded with zeros up to blocksize.
"""


def bytes_to_long(byte_array):
    """
    Convert a byte string to an integer.

    Args:
        byte_array (bytes): Bytes to convert

    Returns:
        int: Integer representation of the byte array (big-endian)
    """
    return int.from_bytes(byte_array, byteorder='big')


def long_to_bytes(n, blocksize=0):
    """
    Convert a non-negative integer to a byte string.

    Args:
        n (int): Integer to convert
        blocksize (int, optional): Minimum size of the resulting byte string

    Returns:
        bytes: Byte representation of the integer (big-endian)

    Raises:
        ValueError: If n is negative
    """
    if n < 0:
        raise ValueError(f"Cannot encode negative integer {n}")

    byte_length = (n.bit_length() + 7) // 8

    # Zero still needs one byte
    if byte_length == 0:
        byte_length = 1

    if blocksize > 0 and byte_length < blocksize:
        byte_length = blocksize

    return n.to_bytes(byte_length, byteorder='big')

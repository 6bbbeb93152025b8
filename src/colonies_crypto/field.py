"""
Integer helpers shared by the point arithmetic and the signer: the modular
inverse over the field prime or the group order, and the conversions between
integers and fixed-width big-endian byte strings used by every serialized
value (private keys, public keys and signatures).
"""

from .constants import COORDINATE_BYTES


def inv(a: int, n: int) -> int:
    """
    Compute the modular inverse of a modulo n with the extended Euclidean
    algorithm.

    Parameters:
    a (int): The value to invert. It is normalized into [0, n) first.
    n (int): The modulus, either the field prime P or the group order N.

    Returns:
    int: The inverse of a modulo n, in [0, n). The inverse of zero is zero,
    which keeps the point at infinity stable when lowered to affine form.
    """
    if a == 0:
        return 0
    lm, hm = 1, 0
    low, high = a % n, n
    while low > 1:
        r = high // low
        nm, new = hm - lm * r, high - low * r
        lm, low, hm, high = nm, new, lm, low
    return lm % n


def int_to_big_endian(value: int) -> bytes:
    """Minimal big-endian encoding of a non-negative integer; zero is one byte."""
    if value == 0:
        return b"\x00"
    return value.to_bytes((value.bit_length() + 7) // 8, "big")


def big_endian_to_int(value: bytes) -> int:
    return int.from_bytes(value, "big")


def pad32(value: bytes) -> bytes:
    """
    Fit a byte string into exactly 32 bytes.

    Longer inputs keep their first 32 bytes, shorter inputs are left-padded
    with zeros.
    """
    if len(value) >= COORDINATE_BYTES:
        return value[:COORDINATE_BYTES]
    return value.rjust(COORDINATE_BYTES, b"\x00")

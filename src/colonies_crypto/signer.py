"""
This module computes raw recoverable ECDSA signatures over secp256k1.

A signature is the triple (v, r, s). The s value is always canonicalized to
the lower half of the group order, and v is the recovery id: the parity of
the ephemeral point's y-coordinate, flipped when s had to be negated.
"""

from typing import Tuple
from .constants import N
from .field import big_endian_to_int, int_to_big_endian, inv, pad32
from .nonce import deterministic_generate_k
from .point import G, fast_multiply


def ecdsa_raw_sign(msg_hash: bytes, private_key_bytes: bytes) -> Tuple[int, int, int]:
    """
    Sign a message digest with a private key.

    The private key is expected to be in range already; the range check is
    done by the caller when the key is decoded.

    Parameters:
    msg_hash (bytes): The 32-byte message digest.
    private_key_bytes (bytes): The 32-byte private key.

    Returns:
    Tuple[int, int, int]: The signature (v, r, s) with v in {0, 1} and
    s in the lower half of [1, N).
    """
    z = big_endian_to_int(msg_hash)
    k = deterministic_generate_k(msg_hash, private_key_bytes)

    # R = k * G
    r, y = fast_multiply(G, k)
    private_key = big_endian_to_int(private_key_bytes)
    # s = k^-1 * (z + r * x)
    s_raw = (inv(k, N) * (z + r * private_key)) % N

    high_s = 0 if s_raw * 2 < N else 1
    v = (y % 2) ^ high_s
    s = N - s_raw if high_s else s_raw

    return v, r, s


def encode_signature(v: int, r: int, s: int) -> bytes:
    """Serialize a signature as r (32 bytes) || s (32 bytes) || v (1 byte)."""
    return pad32(int_to_big_endian(r)) + pad32(int_to_big_endian(s)) + bytes([v])

"""
Deterministic derivation of the per-signature nonce k.

The construction follows the HMAC-SHA256 key/value chaining of RFC 6979, but
stops after a single fixed pass: the first output block is used as k without
truncation, range checking or retrying. Signatures produced by the rest of
the system depend on this exact behavior, so it must not be replaced with the
full RFC 6979 loop.
"""

import hmac
from hashlib import sha256
from .field import big_endian_to_int


def _hmac_sha256(key: bytes, data: bytes) -> bytes:
    return hmac.new(key, data, sha256).digest()


def deterministic_generate_k(msg_hash: bytes, private_key_bytes: bytes) -> int:
    """
    Derive the nonce for signing msg_hash with the given private key.

    Parameters:
    msg_hash (bytes): The 32-byte message digest.
    private_key_bytes (bytes): The 32-byte private key.

    Returns:
    int: The nonce, the final HMAC output read as a big-endian integer.
    The same inputs always produce the same nonce.
    """
    v_0 = b"\x01" * 32
    k_0 = b"\x00" * 32

    # K_1 = HMAC(K_0, V_0 || 0x00 || x || h)
    k_1 = _hmac_sha256(k_0, v_0 + b"\x00" + private_key_bytes + msg_hash)
    # V_1 = HMAC(K_1, V_0)
    v_1 = _hmac_sha256(k_1, v_0)
    # K_2 = HMAC(K_1, V_1 || 0x01 || x || h)
    k_2 = _hmac_sha256(k_1, v_1 + b"\x01" + private_key_bytes + msg_hash)
    # V_2 = HMAC(K_2, V_1)
    v_2 = _hmac_sha256(k_2, v_1)

    return big_endian_to_int(_hmac_sha256(k_2, v_2))

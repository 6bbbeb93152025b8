"""
This module maps private keys to public keys and public keys to identities.

A public key is the 64-byte concatenation of the x and y coordinates of
x * G. An identity is the SHA3-256 hash of the text "04" followed by the hex
encoding of the public key, which gives every key pair a stable 64-character
handle.
"""

import logging
from hashlib import sha3_256
from typing import Tuple
from .constants import N
from .field import big_endian_to_int, int_to_big_endian, pad32
from .point import G, fast_multiply

logger = logging.getLogger(__name__)


class InvalidKey(ValueError):
    """Raised when a private key is not below the curve order."""


def decode_private_key(private_key: str) -> bytes:
    """
    Decode a hex-encoded private key.

    Raises:
    ValueError: If private_key is not valid hexadecimal or contains
    whitespace.
    """
    if any(c.isspace() for c in private_key):
        raise ValueError("Private key must not contain whitespace")
    return bytes.fromhex(private_key)


def check_private_key(private_key_bytes: bytes) -> int:
    """
    Interpret a private key as a big-endian integer and check its range.

    Parameters:
    private_key_bytes (bytes): The raw private key.

    Returns:
    int: The private key as an integer.

    Raises:
    InvalidKey: If the key is greater than or equal to the curve order.
    """
    private_key = big_endian_to_int(private_key_bytes)
    if private_key >= N:
        logger.debug("Rejected private key of %d bytes: not below the curve order",
                     len(private_key_bytes))
        raise InvalidKey("Invalid private key")
    return private_key


def encode_raw_public_key(raw_public_key: Tuple[int, int]) -> bytes:
    """Serialize an affine point as x (32 bytes) || y (32 bytes)."""
    left = pad32(int_to_big_endian(raw_public_key[0]))
    right = pad32(int_to_big_endian(raw_public_key[1]))
    return left + right


def private_key_to_public_key(private_key_bytes: bytes) -> bytes:
    """
    Derive the 64-byte public key for a private key.

    Raises:
    InvalidKey: If the key is greater than or equal to the curve order.
    """
    private_key = check_private_key(private_key_bytes)
    return encode_raw_public_key(fast_multiply(G, private_key))


def derive_id(private_key: str) -> str:
    """
    Derive the public identity of a private key.

    Parameters:
    private_key (str): The hex-encoded private key.

    Returns:
    str: The identity as 64 lowercase hex characters.

    Raises:
    InvalidKey: If the key is greater than or equal to the curve order.
    ValueError: If the key is not valid hexadecimal.
    """
    public_key = private_key_to_public_key(decode_private_key(private_key))
    # The hex text is hashed, not the raw public key bytes
    public_key_hex = "04" + public_key.hex()
    return sha3_256(public_key_hex.encode("utf-8")).hexdigest()

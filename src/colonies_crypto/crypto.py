"""
The public entry points used to authenticate requests: generate a private
key, derive its identity and sign a message.

The request-signing layer base64-encodes a serialized request, signs that
text with sign() and sends the hex signature next to the payload.
"""

import logging
import secrets
from hashlib import sha3_256
from .keys import check_private_key, decode_private_key, derive_id
from .signer import ecdsa_raw_sign, encode_signature

logger = logging.getLogger(__name__)


def generate_private_key() -> str:
    """
    Generate a new random private key.

    32 bytes from the operating system's secure random source are hashed
    with SHA3-256 and the digest is used as the key as is, without a
    reduction modulo the curve order.

    Returns:
    str: The hex-encoded private key (64 characters).
    """
    private_key = sha3_256(secrets.token_bytes(32)).hexdigest()
    logger.debug("Generated a new private key")
    return private_key


def sign(message: str, private_key: str) -> str:
    """
    Sign a message with a private key.

    Parameters:
    message (str): The message to sign; its UTF-8 bytes are hashed with
    SHA3-256.
    private_key (str): The hex-encoded private key.

    Returns:
    str: The hex-encoded signature (130 characters): r || s || v.

    Raises:
    InvalidKey: If the key is greater than or equal to the curve order.
    ValueError: If the key is not valid hexadecimal.
    """
    private_key_bytes = decode_private_key(private_key)
    check_private_key(private_key_bytes)

    msg_hash = sha3_256(message.encode("utf-8")).digest()
    v, r, s = ecdsa_raw_sign(msg_hash, private_key_bytes)

    return encode_signature(v, r, s).hex()


class Crypto:
    """Stateless helper bundling the key, identity and signing operations."""

    def generate_private_key(self) -> str:
        return generate_private_key()

    def id(self, private_key: str) -> str:
        return derive_id(private_key)

    def sign(self, message: str, private_key: str) -> str:
        return sign(message, private_key)

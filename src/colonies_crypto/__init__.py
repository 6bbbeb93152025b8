"""
Copyright (c) 2024 The colonies-crypto developers

Distributed under the MIT software license, see the accompanying file LICENSE
or http://www.opensource.org/licenses/mit-license.php.

The curve arithmetic in this package is not constant time. It reproduces the
reference signatures bit for bit but is not hardened against timing side
channels.

This package provides the secp256k1 cryptography used to authenticate
requests to a Colonies server: private key generation, identity derivation
and deterministic recoverable ECDSA signing.

Modules:
- constants: Holds the secp256k1 parameters P, N, A and the coordinates of G.
- field: Modular inverse and big-endian integer/byte conversions.
- point: Affine and Jacobian point arithmetic, including scalar multiplication.
- nonce: Deterministic HMAC-SHA256 nonce derivation.
- signer: Raw (v, r, s) signing with low-s canonicalization.
- keys: Public key and identity derivation, and the InvalidKey error.
- crypto: The generate_private_key, derive_id and sign entry points and the
  Crypto helper class.
"""

from .constants import P, N, A, G_x, G_y
from .point import Point, JacobianPoint, G
from .keys import InvalidKey, derive_id
from .crypto import Crypto, generate_private_key, sign

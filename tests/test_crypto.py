import re
import unittest

from hashlib import sha3_256
from colonies_crypto import Crypto, InvalidKey, G, N, derive_id, generate_private_key, sign
from colonies_crypto.keys import encode_raw_public_key, private_key_to_public_key
from colonies_crypto.nonce import deterministic_generate_k
from colonies_crypto.point import fast_multiply
from colonies_crypto.signer import ecdsa_raw_sign


HELLO_KEY = "d6eb959e9aec2e6fdc44b5862b269e987b8a4d6f2baca542d8acaa97ee5e74f6"
HELLO_SIGNATURE = (
    "e713a1bb015fecabb5a084b0fe6d6e7271fca6f79525a634183cfdb175fe6924"
    "1f4da161779d8e6b761200e1cf93766010a19072fa778f9643363e2cfadd6409"
    "00"
)
ID_KEY = "6d2fb6f546bacfd98c68769e61e0b44a697a30596c018a50e28200aa59b01c0a"
ID = "4fef2b5a82d134d058c1883c72d6d9caf77cd59ca82d73105017590dea3dcb87"

N_HEX = "%064x" % N
N_MINUS_ONE_HEX = "%064x" % (N - 1)


class Tests(unittest.TestCase):
    def setUp(self):
        self.crypto = Crypto()

    def test_generate_private_key(self):
        private_key = self.crypto.generate_private_key()

        self.assertEqual(len(private_key), 64)
        self.assertRegex(private_key, r"^[0-9a-f]{64}$")
        self.assertNotEqual(private_key, self.crypto.generate_private_key())

    def test_derive_id(self):
        self.assertEqual(self.crypto.id(ID_KEY), ID)
        self.assertEqual(derive_id(ID_KEY), ID)

    def test_generated_key_round_trip(self):
        private_key = generate_private_key()

        identity = self.crypto.id(private_key)

        self.assertRegex(identity, r"^[0-9a-f]{64}$")
        self.assertEqual(identity, self.crypto.id(private_key))

    def test_sign(self):
        signature = self.crypto.sign("hello", HELLO_KEY)

        self.assertEqual(len(signature), 130)
        self.assertEqual(signature, HELLO_SIGNATURE)

    def test_sign_generated_key(self):
        private_key = self.crypto.generate_private_key()

        signature = self.crypto.sign("test message", private_key)

        self.assertTrue(re.fullmatch(r"[0-9a-f]{130}", signature))
        self.assertEqual(signature, sign("test message", private_key))
        self.assertNotEqual(signature, sign("test message!", private_key))

    def test_signature_layout(self):
        for message in ("hello", "", "ünïcödé", "eyJtc2d0eXBlIjoiYWRkcHJvY2Vzc21zZyJ9"):
            signature = bytes.fromhex(sign(message, HELLO_KEY))
            r = int.from_bytes(signature[:32], "big")
            s = int.from_bytes(signature[32:64], "big")
            v = signature[64]

            self.assertEqual(len(signature), 65)
            self.assertIn(v, (0, 1))
            self.assertTrue(0 < r)
            self.assertTrue(0 < s and 2 * s < N)

    def test_raw_sign_uses_nonce_point(self):
        msg_hash = sha3_256(b"hello").digest()
        private_key_bytes = bytes.fromhex(HELLO_KEY)

        v, r, s = ecdsa_raw_sign(msg_hash, private_key_bytes)
        k = deterministic_generate_k(msg_hash, private_key_bytes)

        self.assertEqual(r, fast_multiply(G, k).x)
        self.assertEqual(
            "%064x%064x%02x" % (r, s, v), HELLO_SIGNATURE
        )

    def test_nonce(self):
        msg_hash = sha3_256(b"hello").digest()
        other_hash = sha3_256(b"hello!").digest()
        private_key_bytes = bytes.fromhex(HELLO_KEY)

        k = deterministic_generate_k(msg_hash, private_key_bytes)

        self.assertEqual(k, deterministic_generate_k(msg_hash, private_key_bytes))
        self.assertNotEqual(k, deterministic_generate_k(other_hash, private_key_bytes))
        self.assertNotEqual(
            k, deterministic_generate_k(msg_hash, bytes.fromhex(ID_KEY))
        )
        self.assertTrue(0 <= k < 2**256)

    def test_public_key(self):
        public_key = private_key_to_public_key((1).to_bytes(32, "big"))

        self.assertEqual(len(public_key), 64)
        self.assertEqual(public_key, G.x.to_bytes(32, "big") + G.y.to_bytes(32, "big"))
        self.assertEqual(encode_raw_public_key((1, 2)), b"\x00" * 31 + b"\x01" + b"\x00" * 31 + b"\x02")

    def test_invalid_key(self):
        for private_key in (N_HEX, "f" * 64):
            with self.assertRaises(InvalidKey):
                self.crypto.id(private_key)
            with self.assertRaises(InvalidKey):
                self.crypto.sign("hello", private_key)

        self.assertTrue(issubclass(InvalidKey, ValueError))

    def test_invalid_key_logged(self):
        with self.assertLogs("colonies_crypto.keys", level="DEBUG") as logs:
            with self.assertRaises(InvalidKey):
                derive_id(N_HEX)
        self.assertIn("not below the curve order", logs.output[0])
        self.assertNotIn(N_HEX, logs.output[0])

    def test_largest_valid_key(self):
        self.assertEqual(len(self.crypto.id(N_MINUS_ONE_HEX)), 64)
        self.assertEqual(len(self.crypto.sign("hello", N_MINUS_ONE_HEX)), 130)

    def test_zero_key(self):
        zero_key = "00" * 32

        self.assertEqual(private_key_to_public_key(b"\x00" * 32), b"\x00" * 64)
        self.assertRegex(derive_id(zero_key), r"^[0-9a-f]{64}$")
        self.assertRegex(sign("hello", zero_key), r"^[0-9a-f]{130}$")

    def test_malformed_hex(self):
        with self.assertRaises(ValueError):
            derive_id("not a key")
        with self.assertRaises(ValueError):
            sign("hello", "abc")

    def test_whitespace_in_key(self):
        for private_key in (" " + HELLO_KEY + "\n", HELLO_KEY[:32] + " " + HELLO_KEY[32:]):
            with self.assertRaises(ValueError):
                sign("hello", private_key)
            with self.assertRaises(ValueError):
                derive_id(private_key)


if __name__ == "__main__":
    unittest.main()

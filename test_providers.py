from __future__ import annotations

import unittest

from pwcipher.constants import DIGEST_NAME
from pwcipher.providers import crypto_impls, default_algorithms_available, service_types


class ProviderDiscoveryTests(unittest.TestCase):
    def test_default_algorithm_exists(self):
        self.assertTrue(default_algorithms_available())
        self.assertIn("AES", crypto_impls("Cipher"))
        self.assertIn(DIGEST_NAME, crypto_impls("Hash"))

    def test_service_types(self):
        types = service_types()
        self.assertIn("Cipher", types)
        self.assertIn("Hash", types)
        self.assertEqual(types, sorted(types))

    def test_private_modules_hidden(self):
        self.assertFalse(any(name.startswith("_") for name in crypto_impls("Cipher")))

    def test_unknown_service(self):
        self.assertEqual(crypto_impls("NoSuchService"), [])
        self.assertFalse(default_algorithms_available("no-such-digest"))


if __name__ == "__main__":
    unittest.main()

"""
pwcipher: password-based protection of short secrets in configuration files.

Features:

- Key/IV derivation by iterated SHA-256 chaining over passphrase and salt
  (OpenSSL-style), feeding AES-128-CBC with PKCS#7 padding.
- Self-contained envelope: 8-byte salt, filler-length byte, ciphertext and random
  filler rounding the blob to a 16-byte boundary, rendered as base64.
- Brace decoration (``{...}``) so encrypted values can be recognised inside
  larger text, with backslash-escaped braces passing through literally.

The envelope gives confidentiality only; there is no integrity tag. A wrong
passphrase and corrupted data are reported as the same ``DecryptionError``.
"""

from .cipher import (
    PasswordCipher,
    decrypt,
    decrypt_decorated,
    encrypt,
    encrypt_and_decorate,
    is_encrypted_string,
)
from .decoration import decorate, undecorate
from .encryption import CipherParams
from .errors import (
    CipherError,
    CorruptEnvelope,
    DecryptionError,
    EncryptionError,
    MalformedDecoration,
    WrongPassphraseOrCorruptData,
)

__version__ = "0.1"

__all__ = [
    "PasswordCipher",
    "CipherParams",
    "encrypt",
    "decrypt",
    "encrypt_and_decorate",
    "decrypt_decorated",
    "is_encrypted_string",
    "decorate",
    "undecorate",
    "CipherError",
    "EncryptionError",
    "DecryptionError",
    "CorruptEnvelope",
    "WrongPassphraseOrCorruptData",
    "MalformedDecoration",
]

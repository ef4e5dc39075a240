from __future__ import annotations

import logging
from typing import Optional

from .codec import Passphrase, TextCodec
from .decoration import decorate, is_decorated, undecorate
from .encryption import CipherParams, EnvelopeCodec
from .prng import RandomSource


logger = logging.getLogger(__name__)


class PasswordCipher:
    """Password-based encryption of short strings such as config secrets.

    Encrypted values are base64 text; decorated values wrap that text in
    ``{`` ``}`` so they can be told apart from plain values. Instances hold
    no per-call state and may be shared between threads.

    Args:
        params: Digest and key size; defaults to SHA-256 / AES-128.
        random_source: Supplies salt and filler bytes; defaults to
            ``os.urandom``. Tests may pass a ``DeterministicPRNG``.
    """

    def __init__(self, params: Optional[CipherParams] = None, random_source: Optional[RandomSource] = None):
        self._codec = TextCodec(EnvelopeCodec(params, random_source))

    @property
    def params(self) -> CipherParams:
        return self._codec.envelope.params

    def encrypt(self, text: Optional[str], passphrase: Passphrase) -> Optional[str]:
        """Encrypt ``text`` and return it base64 encoded. Empty input is returned as is."""
        return self._codec.encrypt_to_text(text, passphrase)

    def encrypt_and_decorate(self, text: Optional[str], passphrase: Passphrase) -> str:
        return decorate(self.encrypt(text, passphrase))

    def decrypt(self, text: Optional[str], passphrase: Passphrase) -> Optional[str]:
        """Decrypt base64 ``text``. Empty input is returned as is."""
        return self._codec.decrypt_from_text(text, passphrase)

    def decrypt_decorated(self, text: Optional[str], passphrase: Passphrase) -> Optional[str]:
        """Decrypt ``text`` whether or not it is wrapped in decorations."""
        if not text:
            return text
        if is_decorated(text):
            logger.debug("decrypting decorated value")
            return self.decrypt(undecorate(text), passphrase)
        return self.decrypt(text, passphrase)

    def is_encrypted_string(self, text: Optional[str]) -> bool:
        return is_decorated(text)

    def decorate(self, text: Optional[str]) -> str:
        return decorate(text)

    def undecorate(self, text: Optional[str]) -> str:
        return undecorate(text)


_default_cipher: Optional[PasswordCipher] = None


def default_cipher() -> PasswordCipher:
    global _default_cipher
    if _default_cipher is None:
        _default_cipher = PasswordCipher()
    return _default_cipher


def encrypt(text: Optional[str], passphrase: Passphrase) -> Optional[str]:
    return default_cipher().encrypt(text, passphrase)


def encrypt_and_decorate(text: Optional[str], passphrase: Passphrase) -> str:
    return default_cipher().encrypt_and_decorate(text, passphrase)


def decrypt(text: Optional[str], passphrase: Passphrase) -> Optional[str]:
    return default_cipher().decrypt(text, passphrase)


def decrypt_decorated(text: Optional[str], passphrase: Passphrase) -> Optional[str]:
    return default_cipher().decrypt_decorated(text, passphrase)


def is_encrypted_string(text: Optional[str]) -> bool:
    return is_decorated(text)

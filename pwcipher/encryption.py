from __future__ import annotations

import hashlib
import logging
from dataclasses import dataclass
from typing import Optional

from Cryptodome.Cipher import AES
from Cryptodome.Util.Padding import pad, unpad

from .constants import (
    AES_KEY_SIZES,
    CHUNK_SIZE,
    DIGEST_NAME,
    HEADER_SIZE,
    IV_SIZE,
    KEY_SIZE,
    SALT_SIZE,
)
from .errors import CorruptEnvelope, DecryptionError, EncryptionError, WrongPassphraseOrCorruptData
from .kdf import derive_key_iv
from .prng import DEFAULT_RANDOM_SOURCE, RandomSource


logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CipherParams:
    digest: str = DIGEST_NAME
    key_size: int = KEY_SIZE

    def validate(self) -> None:
        if self.key_size not in AES_KEY_SIZES:
            raise EncryptionError(f"Unsupported AES key size: {self.key_size}")
        try:
            h = hashlib.new(self.digest)
        except (ValueError, TypeError) as exc:
            raise EncryptionError(f"Unsupported digest algorithm: {self.digest!r}") from exc
        if h.digest_size == 0:
            # shake_* have no fixed output size
            raise EncryptionError(f"Digest {self.digest!r} has no fixed output size")


def filler_length(ciphertext_len: int) -> int:
    """Random bytes needed to round the envelope up to ``CHUNK_SIZE``."""
    return (CHUNK_SIZE - (HEADER_SIZE + ciphertext_len) % CHUNK_SIZE) % CHUNK_SIZE


class EnvelopeCodec:
    """Seal and open ``salt | filler_len | ciphertext | filler`` envelopes."""

    def __init__(self, params: Optional[CipherParams] = None, random_source: Optional[RandomSource] = None):
        self.params = params or CipherParams()
        self.params.validate()
        self.random_source = random_source or DEFAULT_RANDOM_SOURCE

    def _new_cipher(self, passphrase: bytes, salt: bytes):
        key, iv = derive_key_iv(
            passphrase,
            salt,
            key_size=self.params.key_size,
            iv_size=IV_SIZE,
            digest=self.params.digest,
        )
        return AES.new(key, AES.MODE_CBC, iv=iv)

    def seal(self, plaintext: bytes, passphrase: bytes) -> bytes:
        try:
            salt = self.random_source.random_bytes(SALT_SIZE)
            cipher = self._new_cipher(passphrase, salt)
            ciphertext = cipher.encrypt(pad(plaintext, AES.block_size))
            filler_len = filler_length(len(ciphertext))
            # Start from random bytes so whatever is not overwritten is filler.
            blob = bytearray(self.random_source.random_bytes(HEADER_SIZE + len(ciphertext) + filler_len))
        except (ValueError, TypeError, OSError) as exc:
            raise EncryptionError(f"Encryption failed: {exc}") from exc
        blob[0:SALT_SIZE] = salt
        blob[SALT_SIZE] = filler_len
        blob[HEADER_SIZE : HEADER_SIZE + len(ciphertext)] = ciphertext
        logger.debug("sealed %d plaintext bytes into %d byte envelope", len(plaintext), len(blob))
        return bytes(blob)

    def open(self, blob: bytes, passphrase: bytes) -> bytes:
        if len(blob) < HEADER_SIZE:
            raise CorruptEnvelope(f"Envelope too short: {len(blob)} bytes")
        salt = blob[:SALT_SIZE]
        filler_len = blob[SALT_SIZE]
        ciphertext_len = len(blob) - HEADER_SIZE - filler_len
        if ciphertext_len <= 0:
            raise CorruptEnvelope(
                f"Filler length {filler_len} leaves no ciphertext in {len(blob)} byte envelope"
            )
        if ciphertext_len % AES.block_size:
            raise CorruptEnvelope(f"Ciphertext length {ciphertext_len} is not a multiple of the block size")
        ciphertext = blob[HEADER_SIZE : HEADER_SIZE + ciphertext_len]
        try:
            cipher = self._new_cipher(passphrase, salt)
        except ValueError as exc:
            raise DecryptionError(f"Cipher setup failed: {exc}") from exc
        try:
            plaintext = unpad(cipher.decrypt(ciphertext), AES.block_size)
        except ValueError as exc:
            raise WrongPassphraseOrCorruptData("Wrong passphrase or corrupted data") from exc
        logger.debug("opened %d byte envelope", len(blob))
        return plaintext

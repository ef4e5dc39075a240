from __future__ import annotations

import base64
import binascii
from typing import Optional, Union

from .constants import STRING_ENCODING
from .encryption import EnvelopeCodec
from .errors import CorruptEnvelope, WrongPassphraseOrCorruptData


Passphrase = Union[str, bytes]


def _to_bytes(value: Passphrase) -> bytes:
    if isinstance(value, bytes):
        return value
    return value.encode(STRING_ENCODING)


class TextCodec:
    """Base64 text rendering of sealed envelopes."""

    def __init__(self, envelope: Optional[EnvelopeCodec] = None):
        self.envelope = envelope or EnvelopeCodec()

    def encrypt_to_text(self, plaintext: Optional[str], passphrase: Passphrase) -> Optional[str]:
        if not plaintext:
            return plaintext
        blob = self.envelope.seal(plaintext.encode(STRING_ENCODING), _to_bytes(passphrase))
        return base64.b64encode(blob).decode("ascii")

    def decrypt_from_text(self, text: Optional[str], passphrase: Passphrase) -> Optional[str]:
        if not text:
            return text
        # Config values may wrap long base64 across lines
        compact = "".join(text.split())
        try:
            blob = base64.b64decode(compact, validate=True)
        except (binascii.Error, ValueError) as exc:
            raise CorruptEnvelope(f"Not valid base64: {exc}") from exc
        clear = self.envelope.open(blob, _to_bytes(passphrase))
        try:
            return clear.decode(STRING_ENCODING)
        except UnicodeDecodeError as exc:
            raise WrongPassphraseOrCorruptData("Decrypted data is not valid UTF-8") from exc

from __future__ import annotations

import hashlib
from typing import Optional, Tuple

from .constants import DIGEST_NAME, IV_SIZE, KDF_SALT_BYTES, KEY_SIZE


def derive_key_iv(
    passphrase: bytes,
    salt: Optional[bytes],
    *,
    key_size: int = KEY_SIZE,
    iv_size: int = IV_SIZE,
    digest: str = DIGEST_NAME,
) -> Tuple[bytes, bytes]:
    """Derive an AES key and CBC IV from ``passphrase`` and ``salt``.

    This is the OpenSSL ``EVP_BytesToKey`` chaining with a single iteration:
    each round hashes the previous round's full digest followed by the
    passphrase and the salt, and output is taken until ``key_size + iv_size``
    bytes are collected.

    Only the first 8 bytes of the salt are hashed, matching the classic
    OpenSSL tooling. An empty or None salt means "unsalted".
    """
    salt8 = salt[:KDF_SALT_BYTES] if salt else b""
    needed = key_size + iv_size
    out = bytearray()
    prev = b""
    while len(out) < needed:
        h = hashlib.new(digest)
        h.update(prev)
        h.update(passphrase)
        h.update(salt8)
        prev = h.digest()
        # Digest may exceed what is still needed; truncate the copy only.
        out += prev[: needed - len(out)]
    return bytes(out[:key_size]), bytes(out[key_size:])

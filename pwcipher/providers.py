"""Discovery of what the crypto backend offers on this host.

Diagnostic helpers only; the codec never consults them.
"""

from __future__ import annotations

import hashlib
import importlib
import pkgutil
from typing import List

from .constants import DIGEST_NAME


# PyCryptodomex subpackages that hold algorithm implementations
_SERVICE_PACKAGES = {
    "Cipher": "Cryptodome.Cipher",
    "Hash": "Cryptodome.Hash",
    "Protocol": "Cryptodome.Protocol",
    "PublicKey": "Cryptodome.PublicKey",
    "Signature": "Cryptodome.Signature",
}


def _package_modules(package_name: str) -> List[str]:
    try:
        pkg = importlib.import_module(package_name)
    except ImportError:
        return []
    return [m.name for m in pkgutil.iter_modules(pkg.__path__) if not m.name.startswith("_")]


def service_types() -> List[str]:
    return sorted(name for name, pkg in _SERVICE_PACKAGES.items() if _package_modules(pkg))


def crypto_impls(service_type: str) -> List[str]:
    """Implementation names available for ``service_type`` (e.g. "Cipher")."""
    pkg = _SERVICE_PACKAGES.get(service_type)
    if pkg is None:
        return []
    names = set(_package_modules(pkg))
    if service_type == "Hash":
        names.update(hashlib.algorithms_available)
    return sorted(names)


def default_algorithms_available(digest: str = DIGEST_NAME) -> bool:
    return "AES" in crypto_impls("Cipher") and digest in hashlib.algorithms_available

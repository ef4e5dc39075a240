from __future__ import annotations

import sys
import logging
import argparse
import getpass as _getpass

from typing import List, Optional

from pwcipher.cipher import PasswordCipher
from pwcipher.encryption import CipherParams
from pwcipher.errors import CipherError, DecryptionError
from pwcipher.providers import crypto_impls, service_types


def _resolve_password(password: Optional[str], *, confirm: bool = False) -> str:
    """Return ``password`` or prompt for it on the terminal.

    Args:
        password: Value from the command line, if any.
        confirm: Ask twice and require both entries to match.
    """
    if password is not None:
        return password
    pw = _getpass.getpass("Password: ")
    if confirm and _getpass.getpass("Confirm password: ") != pw:
        raise ValueError("passwords do not match")
    return pw


def cmd_encrypt(text: str, *, password: Optional[str] = None, decorate: bool = False, digest: Optional[str] = None) -> str:
    cipher = PasswordCipher(CipherParams(digest=digest) if digest else None)
    pw = _resolve_password(password, confirm=True)
    out = cipher.encrypt_and_decorate(text, pw) if decorate else cipher.encrypt(text, pw)
    print(out)
    return out


def cmd_decrypt(text: str, *, password: Optional[str] = None, digest: Optional[str] = None) -> str:
    cipher = PasswordCipher(CipherParams(digest=digest) if digest else None)
    pw = _resolve_password(password)
    out = cipher.decrypt_decorated(text, pw)
    print(out)
    return out


def cmd_check(text: str) -> bool:
    encrypted = PasswordCipher().is_encrypted_string(text)
    print("encrypted" if encrypted else "plain")
    return encrypted


def cmd_providers(service: Optional[str] = None) -> None:
    """Print service types, or the implementations of one service type."""
    types = [service] if service else service_types()
    for st in types:
        impls = crypto_impls(st)
        if not impls:
            print(f"{st}: does not have any providers in this environment")
            continue
        print(f"{st}: provider list")
        for name in impls:
            print(f"        {name}")


def main(argv: Optional[List[str]] = None):
    ap = argparse.ArgumentParser(prog="pwcipher", description="Password-based encryption of config secrets")
    ap.add_argument("--verbose", "-v", action="store_true", help="Enable debug logging")
    sub = ap.add_subparsers(dest="cmd", required=True)

    ap_enc = sub.add_parser("encrypt", help="Encrypt a value and print it base64 encoded")
    ap_enc.add_argument("text", help="Clear text to encrypt")
    ap_enc.add_argument("--password", help="Passphrase (prompted if omitted)")
    ap_enc.add_argument("--decorate", action="store_true", help="Wrap the result in { }")
    ap_enc.add_argument("--digest", help="hashlib digest for key derivation (default sha256)")

    ap_dec = sub.add_parser("decrypt", help="Decrypt a bare or {decorated} value")
    ap_dec.add_argument("text", help="Encrypted value")
    ap_dec.add_argument("--password", help="Passphrase (prompted if omitted)")
    ap_dec.add_argument("--digest", help="hashlib digest for key derivation (default sha256)")

    ap_check = sub.add_parser("check", help="Report whether a value is decorated as encrypted")
    ap_check.add_argument("text", help="Value to inspect")

    ap_prov = sub.add_parser("providers", help="List crypto services available on this host")
    ap_prov.add_argument("service", nargs="?", help="Service type to list (e.g. Cipher, Hash)")

    args = ap.parse_args(argv)
    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")
    try:
        if args.cmd == "encrypt":
            cmd_encrypt(args.text, password=args.password, decorate=args.decorate, digest=args.digest)
        elif args.cmd == "decrypt":
            cmd_decrypt(args.text, password=args.password, digest=args.digest)
        elif args.cmd == "check":
            cmd_check(args.text)
        elif args.cmd == "providers":
            cmd_providers(args.service)
        else:
            raise RuntimeError("Unknown command")
    except DecryptionError as e:
        print(f"Error: could not decrypt value ({e}). Check the password.", file=sys.stderr)
        sys.exit(2)
    except (CipherError, ValueError, RuntimeError) as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(2)


if __name__ == "__main__":
    main()

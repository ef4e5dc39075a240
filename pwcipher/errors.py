class CipherError(Exception):
    """Base class for pwcipher-specific errors."""


class EncryptionError(CipherError):
    """Digest or cipher could not be set up for encryption."""


# Decryption
class DecryptionError(CipherError):
    pass


class CorruptEnvelope(DecryptionError):
    pass


class WrongPassphraseOrCorruptData(DecryptionError):
    pass


# Decoration
class MalformedDecoration(CipherError):
    pass

# Envelope layout
SALT_SIZE = 8           # bytes of random salt at offset 0
FILLER_LEN_SIZE = 1     # single unsigned byte at offset 8
HEADER_SIZE = SALT_SIZE + FILLER_LEN_SIZE

# Envelope is rounded up to this boundary with random filler
CHUNK_SIZE = 16

# Key derivation / cipher
KDF_SALT_BYTES = 8      # only this much of the salt is ever hashed
DIGEST_NAME = "sha256"
KEY_SIZE = 16           # AES-128
IV_SIZE = 16
AES_KEY_SIZES = (16, 24, 32)

STRING_ENCODING = "utf-8"

# Decoration
DECORATION_START = "{"
DECORATION_STOP = "}"
ESCAPE_CHAR = "\\"

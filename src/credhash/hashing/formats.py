"""Stored password hash formats.

A stored value is classified exactly once, here, by its prefix. Everything
bearing the Argon2id tag goes to the memory-hard verifier; everything else is
treated as a legacy unsalted SHA-256 hex digest.
"""

import enum

# Plaintext passwords arrive as text or raw bytes
Password = str | bytes

ARGON2ID_PREFIX: str = "$argon2id$"


class HashFormat(str, enum.Enum):
    """Encoding scheme of a stored password hash."""

    ARGON2ID = "argon2id"
    LEGACY_SHA256 = "legacy_sha256"


def detect_format(stored: str) -> HashFormat:
    """Classify a stored hash string.

    Args:
        stored: The encoded hash as kept by the credential store.

    Returns:
        HashFormat.ARGON2ID if the value carries the Argon2id tag,
        HashFormat.LEGACY_SHA256 otherwise.
    """
    if stored.startswith(ARGON2ID_PREFIX):
        return HashFormat.ARGON2ID
    return HashFormat.LEGACY_SHA256


def encode_password(password: Password) -> bytes:
    """Return the exact bytes the hash functions operate on.

    Text is encoded as UTF-8 so multi-byte characters count by byte length.

    Raises:
        TypeError: If the password is neither text nor a bytes-like buffer.
    """
    if isinstance(password, str):
        return password.encode("utf-8")
    if isinstance(password, (bytes, bytearray, memoryview)):
        return bytes(password)
    raise TypeError(f"Password must be str or bytes, not {type(password).__name__}")

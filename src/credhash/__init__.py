"""credhash - Argon2id password hashing with legacy SHA-256 verification."""

from credhash.exceptions import CredHashError, PasswordHashingError
from credhash.hashing import (
    HashFormat,
    hash_password,
    needs_rehash,
    verify_and_upgrade,
    verify_password,
)

__version__ = "0.1.0"

__all__ = [
    "CredHashError",
    "PasswordHashingError",
    "HashFormat",
    "hash_password",
    "verify_password",
    "needs_rehash",
    "verify_and_upgrade",
]

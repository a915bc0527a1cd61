"""Password hashing module for credhash."""

from credhash.hashing.argon2id import (
    INTERACTIVE,
    MODERATE,
    Argon2idHasher,
    CostProfile,
    interactive_hasher,
    moderate_hasher,
)
from credhash.hashing.async_ops import (
    hash_password_async,
    verify_and_upgrade_async,
    verify_password_async,
)
from credhash.hashing.formats import ARGON2ID_PREFIX, HashFormat, detect_format
from credhash.hashing.passwords import (
    hash_password,
    needs_rehash,
    verify_and_upgrade,
    verify_password,
)
from credhash.hashing.protocol import PasswordHasherProtocol

__all__ = [
    # Hashers
    "Argon2idHasher",
    "CostProfile",
    "MODERATE",
    "INTERACTIVE",
    "moderate_hasher",
    "interactive_hasher",
    "PasswordHasherProtocol",
    # Formats
    "ARGON2ID_PREFIX",
    "HashFormat",
    "detect_format",
    # Password hashing
    "hash_password",
    "verify_password",
    "needs_rehash",
    "verify_and_upgrade",
    # Async
    "hash_password_async",
    "verify_password_async",
    "verify_and_upgrade_async",
]

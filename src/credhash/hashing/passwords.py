"""Password hashing and verification using argon2.

Provides secure password hashing with argon2id under the moderate cost
profile, plus read-only support for legacy SHA-256 digests.
"""

import structlog

from credhash.hashing.argon2id import moderate_hasher
from credhash.hashing.formats import Password
from credhash.hashing.verifier import verify_password

logger = structlog.get_logger(__name__)


def hash_password(plain: Password) -> str:
    """Hash a plaintext password with argon2id.

    Args:
        plain: The plaintext password to hash.

    Returns:
        The `$argon2id$` hash string.

    Raises:
        PasswordHashingError: If the argon2 primitive fails.
    """
    return moderate_hasher.hash(plain)


def needs_rehash(hashed: str) -> bool:
    """Check if a hash needs to be rehashed due to updated parameters.

    Args:
        hashed: The stored hash.

    Returns:
        True for legacy digests and for argon2id hashes whose parameters
        differ from the moderate profile.
    """
    return moderate_hasher.needs_rehash(hashed)


def verify_and_upgrade(hashed: str, plain: Password) -> tuple[bool, str | None]:
    """Verify a password and produce a replacement hash when one is due.

    Nothing is persisted here; the caller stores the replacement.

    Args:
        hashed: The stored hash.
        plain: The candidate plaintext.

    Returns:
        (matched, replacement). replacement is a fresh argon2id hash if the
        password matched and the stored hash is legacy or outdated, else None.
    """
    if not verify_password(hashed, plain):
        return False, None

    if not needs_rehash(hashed):
        return True, None

    logger.info("password_rehash_issued")
    return True, hash_password(plain)


__all__ = ["hash_password", "verify_password", "needs_rehash", "verify_and_upgrade"]

"""Legacy SHA-256 password digests.

Accounts created before Argon2id adoption store the bare lowercase hex
SHA-256 of the password: no salt, no cost parameters. These are only ever
read. Nothing in credhash produces them for storage.
"""

import hashlib

from credhash.hashing.formats import Password, encode_password

LEGACY_DIGEST_LENGTH: int = 64


def legacy_digest(password: Password) -> str:
    """Compute the legacy lowercase hex SHA-256 digest of a password."""
    return hashlib.sha256(encode_password(password)).hexdigest()


def verify_legacy(stored: str, password: Password) -> bool:
    """Check a password against a legacy digest.

    Comparison is exact and case-sensitive: an upper-case stored digest
    never matches.

    Args:
        stored: The stored legacy digest.
        password: The candidate plaintext.

    Returns:
        True if the recomputed digest equals the stored value.
    """
    return legacy_digest(password) == stored

"""Password verification against stored hashes.

Dispatches on the stored value's format and never raises for a wrong
password or a bad hash: both come back as False so callers cannot tell
them apart.
"""

from typing import assert_never

import structlog
from argon2 import PasswordHasher
from argon2.exceptions import InvalidHashError, VerificationError

from credhash.hashing.formats import HashFormat, Password, detect_format, encode_password
from credhash.hashing.legacy import verify_legacy

logger = structlog.get_logger(__name__)

# Verification reads type, parameters and salt from the stored string,
# so one default instance serves every cost profile.
_argon2 = PasswordHasher()


def verify_argon2id(stored: str, password: Password) -> bool:
    """Verify a password against an Argon2id-encoded hash.

    Args:
        stored: A `$argon2id$` PHC string.
        password: The candidate plaintext.

    Returns:
        True on match; False on mismatch or a hash the primitive rejects.
    """
    try:
        return _argon2.verify(stored, encode_password(password))
    except VerificationError:
        # Covers VerifyMismatchError as well as primitive faults
        return False
    except (InvalidHashError, UnicodeEncodeError):
        logger.debug("argon2id_hash_malformed")
        return False


def verify_password(stored: str, password: Password) -> bool:
    """Verify a plaintext password against a stored hash.

    Args:
        stored: The stored hash, either Argon2id or legacy SHA-256 hex.
        password: The candidate plaintext.

    Returns:
        True if the password matches, False otherwise.

    Raises:
        TypeError: If the password is neither text nor bytes.
    """
    if not isinstance(stored, str):
        logger.debug("stored_hash_not_a_string", type=type(stored).__name__)
        return False

    match detect_format(stored):
        case HashFormat.ARGON2ID:
            return verify_argon2id(stored, password)
        case HashFormat.LEGACY_SHA256:
            return verify_legacy(stored, password)
        case unhandled:
            assert_never(unhandled)

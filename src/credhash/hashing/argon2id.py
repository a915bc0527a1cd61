"""Argon2id password hashing with fixed cost profiles.

Each Argon2idHasher is bound to one CostProfile at construction. Callers
that need a different cost tier use a different hasher variant rather than
passing parameters per call. The profiles mirror libsodium's
crypto_pwhash MODERATE and INTERACTIVE limits so hashes produced here match
the parameters of existing stored values.
"""

from dataclasses import dataclass

import structlog
from argon2 import PasswordHasher, Type
from argon2.exceptions import HashingError, InvalidHashError

from credhash.exceptions import PasswordHashingError
from credhash.hashing.formats import HashFormat, Password, detect_format, encode_password
from credhash.hashing.verifier import verify_password

logger = structlog.get_logger(__name__)


@dataclass(frozen=True)
class CostProfile:
    """Argon2id cost parameters.

    Attributes:
        name: Human-readable tier name, used in log events
        time_cost: Number of passes over memory (operations limit)
        memory_cost: Memory usage in KiB (memory limit)
        parallelism: Number of lanes
        hash_len: Digest length in bytes
        salt_len: Random salt length in bytes
    """

    name: str
    time_cost: int
    memory_cost: int
    parallelism: int = 1
    hash_len: int = 32
    salt_len: int = 16


# crypto_pwhash_OPSLIMIT_MODERATE / MEMLIMIT_MODERATE (256 MiB)
MODERATE = CostProfile(name="moderate", time_cost=3, memory_cost=262144)

# crypto_pwhash_OPSLIMIT_INTERACTIVE / MEMLIMIT_INTERACTIVE (64 MiB)
INTERACTIVE = CostProfile(name="interactive", time_cost=2, memory_cost=65536)


class Argon2idHasher:
    """Argon2id hasher bound to a single cost profile.

    Produces `$argon2id$` PHC strings only. Verification accepts both
    Argon2id hashes (of any profile) and legacy SHA-256 digests.

    Example:
        >>> hasher = Argon2idHasher(INTERACTIVE)
        >>> stored = hasher.hash("correct horse battery staple")
        >>> hasher.verify(stored, "correct horse battery staple")
        True
    """

    def __init__(self, profile: CostProfile = MODERATE) -> None:
        self._profile = profile
        self._hasher = PasswordHasher(
            time_cost=profile.time_cost,
            memory_cost=profile.memory_cost,
            parallelism=profile.parallelism,
            hash_len=profile.hash_len,
            salt_len=profile.salt_len,
            type=Type.ID,
        )

    @property
    def profile(self) -> CostProfile:
        return self._profile

    def hash(self, password: Password) -> str:
        """Hash a plaintext password with a fresh random salt.

        Args:
            password: The plaintext password.

        Returns:
            The encoded `$argon2id$` hash string.

        Raises:
            PasswordHashingError: If the primitive fails (e.g. it cannot
                allocate the profile's memory).
        """
        try:
            return self._hasher.hash(encode_password(password))
        except HashingError as exc:
            logger.error("password_hash_failed", profile=self._profile.name, error=str(exc))
            raise PasswordHashingError(
                f"Argon2id hashing failed under the {self._profile.name} profile"
            ) from exc

    def verify(self, stored: str, password: Password) -> bool:
        """Verify a plaintext password against a stored hash of any format."""
        return verify_password(stored, password)

    def needs_rehash(self, stored: str) -> bool:
        """Check whether a stored hash should be replaced by a fresh one.

        Legacy digests and non-string values always need rehashing. Argon2id
        hashes need it when their embedded parameters differ from this
        hasher's profile, or when they cannot be parsed.

        Args:
            stored: The stored hash.

        Returns:
            True if the hash should be re-computed with this profile.
        """
        if not isinstance(stored, str):
            return True
        if detect_format(stored) is HashFormat.LEGACY_SHA256:
            return True
        try:
            return self._hasher.check_needs_rehash(stored)
        except (InvalidHashError, ValueError):
            return True


moderate_hasher = Argon2idHasher(MODERATE)
interactive_hasher = Argon2idHasher(INTERACTIVE)

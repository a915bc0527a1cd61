"""Password hasher protocol.

Credential stores depend on this contract instead of a concrete hasher, so
a different cost tier (or a test double) can be swapped in.
"""

from typing import Protocol

from credhash.hashing.formats import Password


class PasswordHasherProtocol(Protocol):
    """Protocol for password hashers.

    Example:
        >>> def set_password(user, password: str, hasher: PasswordHasherProtocol) -> None:
        ...     user.password = hasher.hash(password)
    """

    def hash(self, password: Password) -> str:
        """Hash plaintext password for storage."""
        ...

    def verify(self, stored: str, password: Password) -> bool:
        """Verify plaintext password against stored hash."""
        ...

    def needs_rehash(self, stored: str) -> bool:
        """Report whether a stored hash should be replaced."""
        ...

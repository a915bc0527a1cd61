"""Exceptions raised by credhash."""


class CredHashError(Exception):
    """Base class for all credhash errors."""


class PasswordHashingError(CredHashError):
    """The Argon2id primitive failed to produce a hash.

    Fatal for the password-set operation that triggered it: no hash value
    exists and no weaker scheme is substituted.
    """

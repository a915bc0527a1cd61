"""Pytest configuration and shared fixtures."""

from __future__ import annotations

import hashlib
import logging
from collections.abc import Generator

import pytest
import structlog

from credhash.core.config import get_settings
from credhash.hashing.argon2id import Argon2idHasher, interactive_hasher, moderate_hasher

# Lowercase hex SHA-256 of "password"
LEGACY_PASSWORD_DIGEST = "5e884898da28047151d0e56f8dc6292773603d0d6aabbdd62a11ef721d1542d8"

PASSPHRASE = "correct horse battery staple"


@pytest.fixture
def hasher() -> Argon2idHasher:
    """Low-cost hasher variant for tests that hash many times."""
    return interactive_hasher


@pytest.fixture(scope="session")
def moderate_hash() -> str:
    """A single moderate-profile hash of PASSPHRASE, shared across tests."""
    return moderate_hasher.hash(PASSPHRASE)


@pytest.fixture(scope="session")
def interactive_hash() -> str:
    """A single interactive-profile hash of PASSPHRASE, shared across tests."""
    return interactive_hasher.hash(PASSPHRASE)


@pytest.fixture
def legacy_hash() -> str:
    """Legacy stored value for the password "password"."""
    assert hashlib.sha256(b"password").hexdigest() == LEGACY_PASSWORD_DIGEST
    return LEGACY_PASSWORD_DIGEST


@pytest.fixture(autouse=True)
def clear_settings_cache() -> Generator[None, None, None]:
    """Make every test read settings fresh from its own environment."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def restore_logging() -> Generator[None, None, None]:
    """Undo configure_logging() side effects after a test."""
    root_logger = logging.getLogger()
    handlers = list(root_logger.handlers)
    level = root_logger.level
    yield
    root_logger.handlers[:] = handlers
    root_logger.setLevel(level)
    structlog.reset_defaults()

"""Async wrappers for password hashing.

Argon2id under the moderate profile takes hundreds of milliseconds and
256 MiB per call. These wrappers run the blocking work in a worker thread
so an event loop keeps serving other requests meanwhile. No timeouts are
imposed; an abandoned call still runs to completion in its thread.
"""

import asyncio

from credhash.hashing.formats import Password
from credhash.hashing.passwords import hash_password, verify_and_upgrade, verify_password


async def hash_password_async(plain: Password) -> str:
    """Hash a password without blocking the event loop."""
    return await asyncio.to_thread(hash_password, plain)


async def verify_password_async(hashed: str, plain: Password) -> bool:
    """Verify a password without blocking the event loop."""
    return await asyncio.to_thread(verify_password, hashed, plain)


async def verify_and_upgrade_async(hashed: str, plain: Password) -> tuple[bool, str | None]:
    """Verify and maybe rehash a password without blocking the event loop."""
    return await asyncio.to_thread(verify_and_upgrade, hashed, plain)

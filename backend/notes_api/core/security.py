# notes_api/core/security.py
"""
Password hashing for user accounts.
Stored passwords are bcrypt digests with a random salt and a fixed work factor.
"""
from passlib.context import CryptContext
from starlette.concurrency import run_in_threadpool

from notes_api.config import settings

# Password hashing context
# bcrypt with the configured cost factor (10 by default)
pwd_context = CryptContext(
    schemes=["bcrypt"],
    deprecated="auto",
    bcrypt__rounds=settings.bcrypt_rounds,
)

def hash_password(plain: str) -> str:
    """
    Hash a plain text password using bcrypt.

    Args:
        plain: Plain text password to hash

    Returns:
        Hashed password string (safe to store in database)
    """
    return pwd_context.hash(plain)

async def hash_password_async(plain: str) -> str:
    """
    Hash a password in the threadpool.

    bcrypt is CPU bound; running it here keeps the event loop free for
    other requests while the digest is computed.
    """
    return await run_in_threadpool(hash_password, plain)

def verify_password(plain: str, hashed: str) -> bool:
    """
    Verify a plain text password against a hashed password.

    Nothing in the user management API logs anyone in; this is how stored
    hashes are checked by the test suite and by a future login route.

    Returns:
        True if password matches, False otherwise
    """
    return pwd_context.verify(plain, hashed)

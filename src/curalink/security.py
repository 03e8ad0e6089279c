"""
Password digests and session tokens.

Digests use passlib's bcrypt scheme. Tokens are HS256 JWTs carrying
``{id, email, userType}`` and expire seven days after issuance; the server
keeps no session state.
"""

import time

from jose import JWTError, jwt
from passlib.context import CryptContext

from curalink.constants import JWT_ALGORITHM, TOKEN_EXPIRE_SECONDS
from curalink.exceptions import ConfigurationError

pwd_context = CryptContext(schemes=["bcrypt"], deprecated="auto")


def hash_password(password: str) -> str:
    return pwd_context.hash(password)


def verify_password(password: str, digest: str) -> bool:
    """Return True if *password* matches *digest*; malformed digests never match."""
    try:
        return pwd_context.verify(password, digest)
    except ValueError:
        return False


def create_token(
    claims: dict, secret: str, issued_at: int | None = None
) -> str:
    """Sign *claims* with a 7-day expiry.

    ``issued_at`` (epoch seconds) defaults to now.
    """
    if not secret:
        raise ConfigurationError("JWT secret not set")
    iat = int(time.time()) if issued_at is None else issued_at
    payload = {**claims, "iat": iat, "exp": iat + TOKEN_EXPIRE_SECONDS}
    return jwt.encode(payload, secret, algorithm=JWT_ALGORITHM)


def decode_token(token: str, secret: str) -> dict | None:
    """Decode and validate a token. Returns None if invalid or expired."""
    try:
        return jwt.decode(token, secret, algorithms=[JWT_ALGORITHM])
    except JWTError:
        return None

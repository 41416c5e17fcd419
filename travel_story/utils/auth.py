"""
Authentication utilities with JWT tokens and bcrypt password hashing.

- bcrypt with a fresh salt per hash, cost factor configurable (10 by default)
- HS256 JWT access tokens carrying the user id in the ``sub`` claim
- 72 hour token lifetime by default, UTC timestamps throughout
"""

import uuid
from datetime import UTC, datetime, timedelta

import bcrypt
from jose import ExpiredSignatureError, JWTError, jwt

DEFAULT_BCRYPT_ROUNDS = 10
DEFAULT_ALGORITHM = "HS256"
DEFAULT_TOKEN_EXPIRE_HOURS = 72

# bcrypt only looks at the first 72 bytes of its input
BCRYPT_MAX_PASSWORD_BYTES = 72


class InvalidTokenError(Exception):
    """The token is malformed, has a bad signature, or carries no usable subject."""


class TokenExpiredError(InvalidTokenError):
    """The token was valid but its lifetime is over."""


def password_too_long(password: str) -> bool:
    return len(password.encode("utf-8")) > BCRYPT_MAX_PASSWORD_BYTES


def get_password_hash(password: str, rounds: int = DEFAULT_BCRYPT_ROUNDS) -> str:
    """Hash a plain text password using bcrypt."""
    salt = bcrypt.gensalt(rounds=rounds)
    hashed_password = bcrypt.hashpw(password=password.encode("utf-8"), salt=salt)
    return hashed_password.decode("utf-8")


def verify_password(plain_password: str, hashed_password: str) -> bool:
    """
    Verify a plain text password against a hashed password.

    Returns False on mismatch. A malformed hash raises ``ValueError``.
    """
    if password_too_long(plain_password):
        return False
    return bcrypt.checkpw(
        plain_password.encode("utf-8"), hashed_password.encode("utf-8")
    )


class TokenService:
    """Issues and verifies signed, time-limited access tokens."""

    def __init__(
        self,
        secret_key: str,
        algorithm: str = DEFAULT_ALGORITHM,
        expire_hours: int = DEFAULT_TOKEN_EXPIRE_HOURS,
    ):
        self.secret_key = secret_key
        self.algorithm = algorithm
        self.expires_delta = timedelta(hours=expire_hours)

    def issue(self, user_id: uuid.UUID, expires_delta: timedelta | None = None) -> str:
        """Create a JWT access token for the given user id."""
        now = datetime.now(UTC)
        expire = now + (expires_delta if expires_delta is not None else self.expires_delta)
        to_encode = {"sub": str(user_id), "iat": now, "exp": expire}
        return jwt.encode(to_encode, self.secret_key, algorithm=self.algorithm)

    def verify(self, token: str) -> uuid.UUID:
        """Verify a token's signature and expiry and return the user id it carries."""
        try:
            payload = jwt.decode(token, self.secret_key, algorithms=[self.algorithm])
        except ExpiredSignatureError as e:
            raise TokenExpiredError("Token has expired") from e
        except JWTError as e:
            raise InvalidTokenError("Token could not be verified") from e

        subject = payload.get("sub")
        if not subject:
            raise InvalidTokenError("Token carries no subject")
        try:
            return uuid.UUID(subject)
        except (TypeError, ValueError) as e:
            raise InvalidTokenError("Token subject is not a user id") from e

"""
Common utilities package for the Travel Story API: authentication
primitives (password hashing, access tokens) and logging.
"""

from travel_story.utils.auth import (
    InvalidTokenError,
    TokenExpiredError,
    TokenService,
    get_password_hash,
    verify_password,
)
from travel_story.utils.logger import setup_logger

__all__ = [
    "InvalidTokenError",
    "TokenExpiredError",
    "TokenService",
    "get_password_hash",
    "verify_password",
    "setup_logger",
]

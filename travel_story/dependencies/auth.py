"""
Authentication dependencies for FastAPI route protection.
"""

import uuid
from dataclasses import dataclass

from fastapi import Depends, Request
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from travel_story.errors import UnauthorizedError
from travel_story.utils.auth import InvalidTokenError, TokenExpiredError, TokenService
from travel_story.utils.logger import setup_logger

logger = setup_logger("dependencies.auth")

# Missing credentials are reported by get_auth_context with the API envelope
security = HTTPBearer(auto_error=False)


@dataclass(frozen=True)
class AuthContext:
    """Identity of the caller, resolved from a verified access token."""

    user_id: uuid.UUID


def get_token_service(request: Request) -> TokenService:
    return request.app.state.token_service


async def get_auth_context(
    credentials: HTTPAuthorizationCredentials | None = Depends(security),
    token_service: TokenService = Depends(get_token_service),
) -> AuthContext:
    """
    Dependency that verifies the bearer token and returns the caller's identity.
    """
    if credentials is None or not credentials.credentials:
        raise UnauthorizedError("Access token is missing")

    try:
        user_id = token_service.verify(credentials.credentials)
    except TokenExpiredError:
        logger.info("Rejected expired access token")
        raise UnauthorizedError("Invalid or expired token")
    except InvalidTokenError as e:
        logger.info(f"Rejected access token: {e}")
        raise UnauthorizedError("Invalid or expired token")

    return AuthContext(user_id=user_id)

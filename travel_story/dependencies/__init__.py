from travel_story.dependencies.auth import (
    AuthContext,
    get_auth_context,
    get_token_service,
)
from travel_story.dependencies.services import get_image_storage, get_settings

__all__ = [
    "AuthContext",
    "get_auth_context",
    "get_token_service",
    "get_image_storage",
    "get_settings",
]

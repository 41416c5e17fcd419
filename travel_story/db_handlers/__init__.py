from travel_story.db_handlers.base import BaseDBHandler
from travel_story.db_handlers.caption import CaptionDBHandler
from travel_story.db_handlers.user import UserDBHandler

__all__ = [
    "BaseDBHandler",
    "UserDBHandler",
    "CaptionDBHandler",
]

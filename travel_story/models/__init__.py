"""
Database models for the Travel Story API.

Architecture: User → Caption.
"""

from travel_story.models.caption import Caption
from travel_story.models.user import User

__all__ = [
    "User",
    "Caption",
]

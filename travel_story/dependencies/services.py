from fastapi import Request

from travel_story.config import Settings
from travel_story.services.image_storage import LocalImageStorage


def get_settings(request: Request) -> Settings:
    return request.app.state.settings


def get_image_storage(request: Request) -> LocalImageStorage:
    return request.app.state.image_storage

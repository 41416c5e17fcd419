"""
Caption API routes: create and list the authenticated user's travel stories.
"""

from fastapi import APIRouter, Depends, status
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from travel_story.db import get_app_db
from travel_story.db_handlers import CaptionDBHandler
from travel_story.dependencies import AuthContext, get_auth_context
from travel_story.errors import BadRequestError, InternalServerError
from travel_story.schemas import (
    CaptionCreate,
    CaptionInfo,
    CaptionListResponse,
    CaptionResponse,
)
from travel_story.utils.logger import setup_logger

logger = setup_logger("api.captions")

router = APIRouter(tags=["Captions"])


@router.post(
    "/caption", response_model=CaptionResponse, status_code=status.HTTP_201_CREATED
)
async def create_caption(
    caption_data: CaptionCreate,
    auth: AuthContext = Depends(get_auth_context),
    db: AsyncSession = Depends(get_app_db),
    caption_db_handler: CaptionDBHandler = Depends(),
):
    """Create a caption owned by the authenticated user."""
    required = (
        caption_data.title,
        caption_data.story,
        caption_data.visited_location,
        caption_data.image_url,
        caption_data.visited_date,
    )
    if not all(required):
        raise BadRequestError("All fields are required")

    try:
        caption = await caption_db_handler.create(
            {
                "user_id": auth.user_id,
                "title": caption_data.title,
                "story": caption_data.story,
                "visited_location": caption_data.visited_location,
                "image_url": caption_data.image_url,
                "visited_date": caption_data.visited_date,
                "is_favourite": caption_data.is_favourite,
            },
            db=db,
        )
    except SQLAlchemyError as e:
        logger.error(f"Post caption error: {e}", exc_info=True)
        raise InternalServerError("An error occurred while creating caption") from e

    logger.info(f"User {auth.user_id} created caption {caption.id}")
    return CaptionResponse(
        caption=CaptionInfo.model_validate(caption),
        message="Caption created successfully",
    )


@router.get("/get-caption", response_model=CaptionListResponse)
async def get_captions(
    auth: AuthContext = Depends(get_auth_context),
    db: AsyncSession = Depends(get_app_db),
    caption_db_handler: CaptionDBHandler = Depends(),
):
    """List the authenticated user's captions, favourites first."""
    try:
        captions = await caption_db_handler.get_captions_for_user(auth.user_id, db=db)
    except SQLAlchemyError as e:
        logger.error(f"Get captions error: {e}", exc_info=True)
        raise InternalServerError("An error occurred while retrieving captions") from e

    return CaptionListResponse(
        stories=[CaptionInfo.model_validate(caption) for caption in captions]
    )

# Image upload route; stored files are served by the /uploads static mount

from fastapi import APIRouter, Depends, File, UploadFile, status

from travel_story.dependencies import AuthContext, get_auth_context, get_image_storage
from travel_story.errors import BadRequestError, InternalServerError
from travel_story.schemas import ImageUploadResponse
from travel_story.services.image_storage import ImageRejectedError, LocalImageStorage
from travel_story.utils.logger import setup_logger

logger = setup_logger("api.uploads")

router = APIRouter(tags=["Uploads"])


@router.api_route(
    "/image-upload",
    methods=["GET", "POST"],
    response_model=ImageUploadResponse,
    status_code=status.HTTP_201_CREATED,
)
async def upload_image(
    image: UploadFile | None = File(default=None),
    auth: AuthContext = Depends(get_auth_context),
    storage: LocalImageStorage = Depends(get_image_storage),
):
    """Store an uploaded image (multipart field ``image``) and return its URL."""
    if image is None:
        raise BadRequestError("No image uploaded")

    try:
        stored = await storage.save(image)
    except ImageRejectedError as e:
        raise BadRequestError(str(e)) from e
    except OSError as e:
        logger.error(f"Image upload error: {e}", exc_info=True)
        raise InternalServerError("An error occurred while uploading the image") from e
    finally:
        await image.close()

    logger.info(f"User {auth.user_id} uploaded {stored.filename} ({stored.size} bytes)")
    return ImageUploadResponse(image_url=stored.url)

from travel_story.services.image_storage import (
    ImageRejectedError,
    LocalImageStorage,
    StoredImage,
)

__all__ = ["ImageRejectedError", "LocalImageStorage", "StoredImage"]

"""
Local image storage for uploaded story pictures.

Files are written under the configured upload directory with a generated,
collision-free name and served back by the application at ``/uploads``.
"""

import time
import uuid
from dataclasses import dataclass
from pathlib import Path

from fastapi import UploadFile

from travel_story.utils.logger import setup_logger

logger = setup_logger("image_storage")

UPLOAD_URL_PREFIX = "/uploads"

# Read uploads in chunks so oversized files are rejected without buffering them whole
CHUNK_SIZE = 1024 * 1024


class ImageRejectedError(Exception):
    """The upload is not an acceptable image."""


# The stored extension always comes from this map, never from the client filename,
# so /uploads only ever serves image types
IMAGE_EXTENSIONS = {
    "image/png": ".png",
    "image/jpeg": ".jpg",
    "image/gif": ".gif",
    "image/webp": ".webp",
}


@dataclass
class StoredImage:
    filename: str
    url: str
    size: int


class LocalImageStorage:
    def __init__(self, upload_dir: str | Path, public_base_url: str, max_size_bytes: int):
        self.upload_dir = Path(upload_dir)
        self.public_base_url = public_base_url.rstrip("/")
        self.max_size_bytes = max_size_bytes

    def ensure_directory(self) -> None:
        self.upload_dir.mkdir(parents=True, exist_ok=True)

    def build_filename(self, content_type: str) -> str:
        return f"{int(time.time() * 1000)}-{uuid.uuid4().hex[:12]}{IMAGE_EXTENSIONS[content_type]}"

    def url_for(self, filename: str) -> str:
        return f"{self.public_base_url}{UPLOAD_URL_PREFIX}/{filename}"

    async def save(self, upload: UploadFile) -> StoredImage:
        """Persist an uploaded image and return where it can be fetched."""
        content_type = (upload.content_type or "").split(";")[0].strip().lower()
        if content_type not in IMAGE_EXTENSIONS:
            raise ImageRejectedError("Only image files are allowed")

        self.ensure_directory()
        filename = self.build_filename(content_type)
        path = self.upload_dir / filename

        size = 0
        try:
            with path.open("wb") as out:
                while chunk := await upload.read(CHUNK_SIZE):
                    size += len(chunk)
                    if size > self.max_size_bytes:
                        raise ImageRejectedError(
                            f"Image exceeds the {self.max_size_bytes // (1024 * 1024)} MB limit"
                        )
                    out.write(chunk)
        except (ImageRejectedError, OSError):
            # No partial files are left behind
            path.unlink(missing_ok=True)
            raise

        if size == 0:
            path.unlink(missing_ok=True)
            raise ImageRejectedError("Uploaded image is empty")

        return StoredImage(filename=filename, url=self.url_for(filename), size=size)

import pytest

from travel_story.services.image_storage import ImageRejectedError, LocalImageStorage


class FakeUpload:
    """Stand-in for ``UploadFile``; an exception among the chunks is raised when reached."""

    def __init__(self, content_type, chunks, filename="photo.png"):
        self.content_type = content_type
        self.filename = filename
        self._chunks = list(chunks)

    async def read(self, size=-1):
        if not self._chunks:
            return b""
        chunk = self._chunks.pop(0)
        if isinstance(chunk, Exception):
            raise chunk
        return chunk


@pytest.fixture
def storage(tmp_path):
    return LocalImageStorage(tmp_path / "uploads", "http://testserver/", 1024)


@pytest.mark.asyncio
async def test_failed_write_leaves_no_partial_file(storage):
    upload = FakeUpload("image/png", [b"\x89PNG", OSError("connection reset")])

    with pytest.raises(OSError):
        await storage.save(upload)

    assert list(storage.upload_dir.iterdir()) == []


@pytest.mark.asyncio
async def test_extension_comes_from_content_type(storage):
    stored = await storage.save(FakeUpload("image/jpeg", [b"jpeg"], filename="page.html"))

    assert stored.filename.endswith(".jpg")
    assert stored.url == f"http://testserver/uploads/{stored.filename}"
    assert stored.size == 4
    assert (storage.upload_dir / stored.filename).read_bytes() == b"jpeg"


@pytest.mark.asyncio
async def test_content_type_parameters_are_ignored(storage):
    stored = await storage.save(FakeUpload("IMAGE/WEBP; charset=binary", [b"webp"]))
    assert stored.filename.endswith(".webp")


@pytest.mark.asyncio
async def test_empty_upload_is_rejected_and_removed(storage):
    with pytest.raises(ImageRejectedError, match="empty"):
        await storage.save(FakeUpload("image/gif", []))

    assert list(storage.upload_dir.iterdir()) == []

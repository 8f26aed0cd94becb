"""Filesystem storage for pet photos."""

import logging
from datetime import UTC, datetime
from pathlib import Path
from uuid import UUID

import aiofiles
import aiofiles.os

logger = logging.getLogger(__name__)

EXTENSIONS = {
    "image/jpeg": "jpg",
    "image/png": "png",
    "image/webp": "webp",
    "image/gif": "gif",
}


class LocalPhotoStorage:
    """Stores photos under ``upload_dir`` and serves them from ``url_prefix``."""

    def __init__(self, upload_dir: str | Path, url_prefix: str):
        self.upload_dir = Path(upload_dir)
        self.url_prefix = url_prefix.rstrip("/")

    @staticmethod
    def accepts(content_type: str | None) -> bool:
        return content_type in EXTENSIONS

    async def save(self, pet_id: UUID, content_type: str, content: bytes) -> str:
        """Write the photo and return its public URL."""
        await aiofiles.os.makedirs(self.upload_dir, exist_ok=True)

        stamp = int(datetime.now(UTC).timestamp() * 1000)
        filename = f"{pet_id}-{stamp}.{EXTENSIONS[content_type]}"
        async with aiofiles.open(self.upload_dir / filename, "wb") as f:
            await f.write(content)

        logger.info("Stored photo %s (%d bytes)", filename, len(content))
        return f"{self.url_prefix}/{filename}"

    async def delete(self, url: str) -> None:
        """Remove a photo previously returned by ``save``.

        Foreign URLs and anything resolving outside ``upload_dir`` are ignored.
        """
        if not url.startswith(self.url_prefix + "/"):
            return
        path = (self.upload_dir / url[len(self.url_prefix) + 1 :]).resolve()
        if path.parent != self.upload_dir.resolve():
            logger.warning("Refusing to delete %r outside the upload directory", url)
            return
        if await aiofiles.os.path.isfile(path):
            await aiofiles.os.remove(path)

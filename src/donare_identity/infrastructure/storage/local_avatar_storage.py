"""Avatar storage on the local filesystem."""

import asyncio
import logging
from pathlib import Path
from uuid import uuid4

from donare_identity.application.ports import (
    ALLOWED_AVATAR_TYPES,
    AvatarStorage,
    AvatarTooLargeError,
    UnsupportedAvatarTypeError,
)

logger = logging.getLogger(__name__)

PUBLIC_PREFIX = "/uploads"


class LocalAvatarStorage(AvatarStorage):
    """Write JPEG/PNG avatars into a directory served under ``/uploads``.

    Parameters
    ----------
    upload_dir
        Target directory; created on first write.
    max_bytes
        Size ceiling for a single upload.
    """

    def __init__(self, upload_dir: str | Path, max_bytes: int):
        self._upload_dir = Path(upload_dir)
        self._max_bytes = max_bytes

    async def store(
        self,
        filename: str | None,
        content_type: str | None,
        data: bytes,
    ) -> str:
        extension = self._extension_for(filename, content_type)

        if len(data) > self._max_bytes:
            raise AvatarTooLargeError(len(data), self._max_bytes)

        stored_name = f"avatar-{uuid4().hex}{extension}"
        target = self._upload_dir / stored_name
        await asyncio.to_thread(self._write, target, data)

        logger.info("Stored avatar %s (%d bytes)", stored_name, len(data))
        return f"{PUBLIC_PREFIX}/{stored_name}"

    def _write(self, target: Path, data: bytes) -> None:
        self._upload_dir.mkdir(parents=True, exist_ok=True)
        target.write_bytes(data)

    @staticmethod
    def _extension_for(filename: str | None, content_type: str | None) -> str:
        extension = ALLOWED_AVATAR_TYPES.get((content_type or "").lower())
        if extension is None:
            raise UnsupportedAvatarTypeError(content_type)

        # Keep the client's spelling (.jpeg vs .jpg) when it matches the type
        suffix = Path(filename or "").suffix.lower()
        if suffix in {".jpg", ".jpeg"} and extension == ".jpg":
            return suffix
        return extension

    async def delete(self, path: str) -> bool:
        prefix, _, stored_name = path.rpartition("/")
        if prefix != PUBLIC_PREFIX or not stored_name.startswith("avatar-"):
            return False

        target = self._upload_dir / stored_name
        removed = await asyncio.to_thread(self._unlink, target)
        if removed:
            logger.info("Removed avatar %s", stored_name)
        return removed

    @staticmethod
    def _unlink(target: Path) -> bool:
        try:
            target.unlink()
        except FileNotFoundError:
            return False
        return True

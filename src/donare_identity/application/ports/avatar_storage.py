"""Avatar file storage port."""

from abc import ABC, abstractmethod

from donare_identity.domain.shared.exceptions import ErrorCode, ValidationError

ALLOWED_AVATAR_TYPES: dict[str, str] = {
    "image/jpeg": ".jpg",
    "image/jpg": ".jpg",
    "image/png": ".png",
}


class UnsupportedAvatarTypeError(ValidationError):
    """Raised for uploads that are not JPEG or PNG."""

    def __init__(self, content_type: str | None) -> None:
        super().__init__(
            "Only JPEG and PNG images are allowed",
            ErrorCode.UNSUPPORTED_MEDIA_TYPE,
            {"content_type": content_type},
        )


class AvatarTooLargeError(ValidationError):
    """Raised when an upload exceeds the size ceiling."""

    def __init__(self, size: int, max_bytes: int) -> None:
        super().__init__(
            f"Avatar exceeds maximum size of {max_bytes // (1024 * 1024)} MB",
            ErrorCode.FILE_TOO_LARGE,
            {"size": size, "max_bytes": max_bytes},
        )


class AvatarStorage(ABC):
    """Stores avatar images and hands back the public path."""

    @abstractmethod
    async def store(
        self,
        filename: str | None,
        content_type: str | None,
        data: bytes,
    ) -> str:
        """Validate and persist an upload.

        Raises UnsupportedAvatarTypeError or AvatarTooLargeError.
        """

    @abstractmethod
    async def delete(self, path: str) -> bool:
        """Remove a stored avatar by the path ``store`` returned.

        Returns False when nothing was stored under that path.
        """

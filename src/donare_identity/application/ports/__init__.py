from donare_identity.application.ports.avatar_storage import (
    ALLOWED_AVATAR_TYPES,
    AvatarStorage,
    AvatarTooLargeError,
    UnsupportedAvatarTypeError,
)

__all__ = [
    "ALLOWED_AVATAR_TYPES",
    "AvatarStorage",
    "AvatarTooLargeError",
    "UnsupportedAvatarTypeError",
]

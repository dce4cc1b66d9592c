from donare_identity.infrastructure.storage.local_avatar_storage import (
    LocalAvatarStorage,
)

__all__ = ["LocalAvatarStorage"]

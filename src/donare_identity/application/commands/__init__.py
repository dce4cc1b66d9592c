"""Identity commands (write operations)."""

from donare_identity.application.commands.change_password_command import (
    ChangePasswordCommand,
)
from donare_identity.application.commands.update_avatar_command import (
    UpdateAvatarCommand,
)
from donare_identity.application.commands.update_identity_data_command import (
    UpdateIdentityDataCommand,
)

__all__ = [
    "ChangePasswordCommand",
    "UpdateAvatarCommand",
    "UpdateIdentityDataCommand",
]

"""Unit tests for identity commands and queries."""

from datetime import date
from unittest.mock import AsyncMock, Mock
from uuid import uuid4

import pytest

from donare_auth import PasswordHashingService
from donare_identity.application import (
    ChangePasswordCommand,
    ErrorReason,
    GetIdentityProfileQuery,
    GetIdentityQuery,
    UpdateAvatarCommand,
    UpdateIdentityDataCommand,
)
from donare_identity.domain.identity import IdentityRole
from donare_identity.domain.profiles import CompanyProfile, DonorProfile
from tests.shared.fixtures.factories import TEST_PASSWORD, make_identity


class TestChangePasswordCommand:
    def setup_method(self):
        """Set up test fixtures."""
        self.identity_repo = AsyncMock()
        self.password_service = PasswordHashingService(cost=2**4)
        self.command = ChangePasswordCommand(self.identity_repo, self.password_service)
        self.identity = make_identity(
            credential_hash=self.password_service.hash(TEST_PASSWORD),
        )

    @pytest.mark.asyncio
    async def test_change_password_success(self):
        self.identity_repo.find_by_id.return_value = self.identity
        self.identity_repo.replace_credential.return_value = self.identity

        result = await self.command.execute(self.identity.id, TEST_PASSWORD, "Xyz98765$")

        assert result.is_success
        identity_id, new_hash = self.identity_repo.replace_credential.call_args[0]
        assert identity_id == self.identity.id
        assert self.password_service.verify("Xyz98765$", new_hash)
        assert not self.password_service.verify(TEST_PASSWORD, new_hash)

    @pytest.mark.asyncio
    async def test_wrong_current_password(self):
        self.identity_repo.find_by_id.return_value = self.identity

        result = await self.command.execute(self.identity.id, "Nope1234!", "Xyz98765$")

        assert result.error == ErrorReason.INVALID_CREDENTIAL
        self.identity_repo.replace_credential.assert_not_called()

    @pytest.mark.asyncio
    async def test_unknown_identity(self):
        self.identity_repo.find_by_id.return_value = None

        result = await self.command.execute(uuid4(), TEST_PASSWORD, "Xyz98765$")

        assert result.error == ErrorReason.NOT_FOUND


class TestUpdateAvatarCommand:
    def setup_method(self):
        """Set up test fixtures."""
        self.identity_repo = AsyncMock()
        self.command = UpdateAvatarCommand(self.identity_repo)

    @pytest.mark.asyncio
    async def test_update_avatar_success(self):
        identity = make_identity()
        identity.replace_avatar("/uploads/avatar-abc.png")
        self.identity_repo.find_by_id.return_value = identity
        self.identity_repo.replace_avatar.return_value = identity

        result = await self.command.execute(identity.id, "/uploads/avatar-abc.png")

        assert result.is_success
        assert result.value.avatar_path == "/uploads/avatar-abc.png"
        self.identity_repo.replace_avatar.assert_awaited_once_with(
            identity.id,
            "/uploads/avatar-abc.png",
        )

    @pytest.mark.asyncio
    async def test_unknown_identity(self):
        self.identity_repo.find_by_id.return_value = None

        result = await self.command.execute(uuid4(), "/uploads/avatar-abc.png")

        assert result.error == ErrorReason.NOT_FOUND
        self.identity_repo.replace_avatar.assert_not_called()


class TestUpdateIdentityDataCommand:
    def setup_method(self):
        """Set up test fixtures."""
        self.identity_repo = AsyncMock()
        self.command = UpdateIdentityDataCommand(self.identity_repo)

    @pytest.mark.asyncio
    async def test_passes_fields_to_repository(self):
        identity = make_identity(city="Olinda")
        self.identity_repo.update.return_value = identity

        result = await self.command.execute(identity.id, city="Olinda")

        assert result.value.city == "Olinda"
        self.identity_repo.update.assert_awaited_once_with(
            identity.id,
            name=None,
            city="Olinda",
            region=None,
            postal_code=None,
        )

    @pytest.mark.asyncio
    async def test_unknown_identity(self):
        self.identity_repo.update.return_value = None

        result = await self.command.execute(uuid4(), name="x")

        assert result.error == ErrorReason.NOT_FOUND


class TestGetIdentityQuery:
    @pytest.mark.asyncio
    async def test_found_and_not_found(self):
        identity_repo = AsyncMock()
        query = GetIdentityQuery(identity_repo)
        identity = make_identity()

        identity_repo.find_by_id.return_value = identity
        found = await query.execute(identity.id)
        identity_repo.find_by_id.return_value = None
        missing = await query.execute(uuid4())

        assert found.value.id == identity.id
        assert missing.error == ErrorReason.NOT_FOUND


class TestGetIdentityProfileQuery:
    def setup_method(self):
        """Set up test fixtures."""
        self.identity_repo = AsyncMock()
        self.donor_repo = AsyncMock()
        self.company_repo = AsyncMock()
        self.query = GetIdentityProfileQuery(
            identity_repository=self.identity_repo,
            donor_profile_repository=self.donor_repo,
            company_profile_repository=self.company_repo,
        )

    @pytest.mark.asyncio
    async def test_donor_profile(self):
        identity = make_identity()
        profile = DonorProfile.create(identity.id, "11122233344", "A-", date(1985, 1, 2))
        self.identity_repo.find_by_id.return_value = identity
        self.donor_repo.find_by_owner_id.return_value = profile

        result = await self.query.execute(identity.id)

        assert result.value is profile
        self.company_repo.find_by_owner_id.assert_not_called()

    @pytest.mark.asyncio
    async def test_company_profile(self):
        identity = make_identity(role=IdentityRole.COMPANY)
        profile = Mock(spec=CompanyProfile)
        self.identity_repo.find_by_id.return_value = identity
        self.company_repo.find_by_owner_id.return_value = profile

        result = await self.query.execute(identity.id)

        assert result.value is profile
        self.donor_repo.find_by_owner_id.assert_not_called()

    @pytest.mark.asyncio
    async def test_role_less_identity_has_no_profile(self):
        self.identity_repo.find_by_id.return_value = make_identity(role=None)

        result = await self.query.execute(uuid4())

        assert result.error == ErrorReason.NOT_FOUND

    @pytest.mark.asyncio
    async def test_partial_registration_has_no_profile(self):
        self.identity_repo.find_by_id.return_value = make_identity()
        self.donor_repo.find_by_owner_id.return_value = None

        result = await self.query.execute(uuid4())

        assert result.error == ErrorReason.NOT_FOUND

"""Unit tests for RegistrationService."""

import logging
from unittest.mock import AsyncMock, Mock

import pytest

from donare_auth import PasswordHashingService
from donare_identity.application import ErrorReason, IdentityView, RegistrationService
from donare_identity.domain.identity import EmailAlreadyExistsError, IdentityRole
from donare_identity.domain.profiles import (
    CompanyProfile,
    DonorProfile,
    ProfileAlreadyExistsError,
)
from tests.shared.fixtures.factories import (
    TEST_PASSWORD,
    company_data,
    donor_data,
    registration_request,
)


def _echo(entity):
    return entity


class TestRegistrationService:
    """Tests for register."""

    def setup_method(self):
        """Set up test fixtures."""
        self.identity_repo = AsyncMock()
        self.identity_repo.create.side_effect = _echo
        self.donor_repo = AsyncMock()
        self.company_repo = AsyncMock()
        self.password_service = Mock(spec=PasswordHashingService)
        self.password_service.hash.return_value = "salt:key"

        self.service = RegistrationService(
            identity_repository=self.identity_repo,
            donor_profile_repository=self.donor_repo,
            company_profile_repository=self.company_repo,
            password_service=self.password_service,
        )

    @pytest.mark.asyncio
    async def test_register_donor_success(self):
        result = await self.service.register(registration_request(profile=donor_data()))

        assert result.is_success
        assert not result.is_partial
        assert isinstance(result.value, IdentityView)
        assert result.value.email == "d@x.com"
        assert result.value.role == IdentityRole.DONOR.value

        self.password_service.hash.assert_called_once_with(TEST_PASSWORD)
        created_identity = self.identity_repo.create.call_args[0][0]
        assert created_identity.credential_hash == "salt:key"

        self.donor_repo.create.assert_awaited_once()
        profile = self.donor_repo.create.call_args[0][0]
        assert isinstance(profile, DonorProfile)
        assert profile.owner_id == result.value.id
        self.company_repo.create.assert_not_called()

    @pytest.mark.asyncio
    async def test_register_company_success(self):
        result = await self.service.register(
            registration_request(email="h@x.com", profile=company_data()),
        )

        assert result.is_success
        assert result.value.role == IdentityRole.COMPANY.value
        profile = self.company_repo.create.call_args[0][0]
        assert isinstance(profile, CompanyProfile)
        assert profile.owner_id == result.value.id
        self.donor_repo.create.assert_not_called()

    @pytest.mark.asyncio
    async def test_result_never_exposes_credential(self):
        result = await self.service.register(registration_request(profile=donor_data()))

        assert not hasattr(result.value, "credential_hash")
        assert "salt:key" not in repr(result)

    @pytest.mark.asyncio
    async def test_duplicate_email_fails_without_profile(self):
        self.identity_repo.create.side_effect = EmailAlreadyExistsError("d@x.com")

        result = await self.service.register(registration_request(profile=donor_data()))

        assert result.is_failure
        assert result.error == ErrorReason.ALREADY_EXISTS
        self.donor_repo.create.assert_not_called()

    @pytest.mark.asyncio
    async def test_profile_failure_returns_partial_success(self):
        self.donor_repo.create.side_effect = ProfileAlreadyExistsError("x")

        result = await self.service.register(registration_request(profile=donor_data()))

        assert result.is_success
        assert result.is_partial
        assert result.value.email == "d@x.com"
        self.identity_repo.create.assert_awaited_once()

    @pytest.mark.asyncio
    async def test_unexpected_profile_error_returns_partial_success(self):
        self.company_repo.create.side_effect = RuntimeError("connection reset")

        result = await self.service.register(
            registration_request(profile=company_data()),
        )

        assert result.is_partial

    @pytest.mark.asyncio
    async def test_invalid_profile_data_returns_partial_success(self):
        """Profile validation happens after the identity is stored."""
        result = await self.service.register(
            registration_request(profile=donor_data(tax_id="123")),
        )

        assert result.is_partial
        self.identity_repo.create.assert_awaited_once()
        self.donor_repo.create.assert_not_called()

    @pytest.mark.asyncio
    async def test_missing_role_keeps_identity_and_fails(self):
        result = await self.service.register(registration_request(profile=None))

        assert result.is_failure
        assert result.error == ErrorReason.ROLE_MISSING
        self.identity_repo.create.assert_awaited_once()
        assert self.identity_repo.create.call_args[0][0].role is None
        self.donor_repo.create.assert_not_called()
        self.company_repo.create.assert_not_called()

    @pytest.mark.asyncio
    async def test_absent_password_is_hashed_as_empty(self):
        await self.service.register(
            registration_request(password=None, profile=donor_data()),
        )

        self.password_service.hash.assert_called_once_with("")

    @pytest.mark.asyncio
    async def test_apostrophe_address_registers(self):
        result = await self.service.register(
            registration_request(email="o'neil@example.com", profile=donor_data()),
        )

        assert result.is_success
        assert result.value.email == "o'neil@example.com"

    @pytest.mark.asyncio
    async def test_profile_failure_log_omits_error_text(self, caplog):
        self.donor_repo.create.side_effect = RuntimeError(
            "duplicate key (tax_id)=(11122233344)",
        )

        with caplog.at_level(logging.WARNING, logger="donare_identity"):
            result = await self.service.register(
                registration_request(profile=donor_data()),
            )

        assert result.is_partial
        assert "RuntimeError" in caplog.text
        assert "11122233344" not in caplog.text

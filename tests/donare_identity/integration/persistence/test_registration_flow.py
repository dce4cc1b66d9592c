"""Registration and login against a real database."""

import pytest

from donare_auth import JWTService, PasswordHashingService
from donare_identity.application import (
    AuthenticationService,
    ChangePasswordCommand,
    ErrorReason,
    GetIdentityProfileQuery,
    RegistrationService,
)
from donare_identity.domain.profiles import DonorProfile
from donare_identity.infrastructure.persistence.sqlalchemy import (
    CompanyProfileRepositorySQLAlchemy,
    DonorProfileRepositorySQLAlchemy,
    IdentityRepositorySQLAlchemy,
)
from tests.shared.fixtures.factories import (
    TEST_PASSWORD,
    company_data,
    donor_data,
    registration_request,
)


@pytest.mark.integration
class TestRegistrationFlow:
    @pytest.fixture(autouse=True)
    def _services(self, db_session):
        self.session = db_session
        self.identity_repo = IdentityRepositorySQLAlchemy(db_session)
        self.donor_repo = DonorProfileRepositorySQLAlchemy(db_session)
        self.company_repo = CompanyProfileRepositorySQLAlchemy(db_session)
        self.password_service = PasswordHashingService(cost=2**4)
        self.registration = RegistrationService(
            identity_repository=self.identity_repo,
            donor_profile_repository=self.donor_repo,
            company_profile_repository=self.company_repo,
            password_service=self.password_service,
        )
        self.auth = AuthenticationService(
            identity_repository=self.identity_repo,
            password_service=self.password_service,
            jwt_service=JWTService(secret_key="integration-secret"),
        )
        self.profile_query = GetIdentityProfileQuery(
            identity_repository=self.identity_repo,
            donor_profile_repository=self.donor_repo,
            company_profile_repository=self.company_repo,
        )

    @pytest.mark.asyncio
    async def test_register_then_login(self):
        registered = await self.registration.register(
            registration_request(profile=donor_data()),
        )
        await self.session.commit()

        assert registered.is_success and not registered.is_partial

        login = await self.auth.authenticate("d@x.com", TEST_PASSWORD)
        assert login.is_success
        assert login.value.identity.id == registered.value.id

        profile = await self.profile_query.execute(registered.value.id)
        assert isinstance(profile.value, DonorProfile)

    @pytest.mark.asyncio
    async def test_stored_credential_is_salted_scrypt(self):
        registered = await self.registration.register(
            registration_request(profile=donor_data()),
        )

        stored = await self.identity_repo.find_by_id(registered.value.id)
        salt, _, key = stored.credential_hash.partition(":")
        assert len(salt) == 32
        assert len(key) == 128
        assert TEST_PASSWORD not in stored.credential_hash

    @pytest.mark.asyncio
    async def test_second_registration_with_same_email(self):
        await self.registration.register(registration_request(profile=donor_data()))

        result = await self.registration.register(
            registration_request(profile=company_data()),
        )

        assert result.error == ErrorReason.ALREADY_EXISTS

    @pytest.mark.asyncio
    async def test_profile_conflict_keeps_identity(self):
        """Two donors with one CPF: the second account exists without a profile."""
        await self.registration.register(registration_request(profile=donor_data()))

        second = await self.registration.register(
            registration_request(email="other@x.com", profile=donor_data()),
        )
        await self.session.commit()

        assert second.is_partial
        assert await self.identity_repo.find_by_email("other@x.com") is not None
        profile = await self.profile_query.execute(second.value.id)
        assert profile.error == ErrorReason.NOT_FOUND

    @pytest.mark.asyncio
    async def test_role_missing_keeps_identity(self):
        result = await self.registration.register(registration_request(profile=None))
        await self.session.commit()

        assert result.error == ErrorReason.ROLE_MISSING
        assert await self.identity_repo.find_by_email("d@x.com") is not None

    @pytest.mark.asyncio
    async def test_change_password_then_login(self):
        registered = await self.registration.register(
            registration_request(profile=donor_data()),
        )
        command = ChangePasswordCommand(self.identity_repo, self.password_service)

        changed = await command.execute(registered.value.id, TEST_PASSWORD, "Xyz98765$")
        await self.session.commit()

        assert changed.is_success
        old = await self.auth.authenticate("d@x.com", TEST_PASSWORD)
        new = await self.auth.authenticate("d@x.com", "Xyz98765$")
        assert old.error == ErrorReason.INVALID_CREDENTIAL
        assert new.is_success

    @pytest.mark.asyncio
    async def test_wrong_current_password_keeps_credential(self):
        registered = await self.registration.register(
            registration_request(profile=donor_data()),
        )
        command = ChangePasswordCommand(self.identity_repo, self.password_service)

        changed = await command.execute(registered.value.id, "wrong", "Xyz98765$")
        await self.session.commit()

        assert changed.error == ErrorReason.INVALID_CREDENTIAL
        login = await self.auth.authenticate("d@x.com", TEST_PASSWORD)
        assert login.is_success

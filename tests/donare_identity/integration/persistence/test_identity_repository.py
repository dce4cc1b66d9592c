"""Integration tests for IdentityRepository with Testcontainers PostgreSQL."""

from uuid import uuid4

import pytest

from donare_identity.domain.identity import EmailAlreadyExistsError, IdentityRole
from donare_identity.infrastructure.persistence.sqlalchemy import (
    IdentityRepositorySQLAlchemy,
)
from tests.shared.fixtures.factories import make_identity


@pytest.fixture
def identity_repo(db_session):
    """Create IdentityRepository instance with the test session."""
    return IdentityRepositorySQLAlchemy(db_session)


@pytest.mark.integration
class TestIdentityRepositorySQLAlchemy:
    """Integration tests for IdentityRepositorySQLAlchemy."""

    @pytest.mark.asyncio
    async def test_create_and_find_by_id(self, identity_repo):
        identity = make_identity(credential_hash="aa:bb")

        await identity_repo.create(identity)
        found = await identity_repo.find_by_id(identity.id)

        assert found is not None
        assert found.id == identity.id
        assert found.email == "d@x.com"
        assert found.credential_hash == "aa:bb"
        assert found.role == IdentityRole.DONOR
        assert found.region == "PE"

    @pytest.mark.asyncio
    async def test_find_by_id_not_found(self, identity_repo):
        assert await identity_repo.find_by_id(uuid4()) is None

    @pytest.mark.asyncio
    async def test_find_by_email_case_insensitive(self, identity_repo):
        await identity_repo.create(make_identity())

        found = await identity_repo.find_by_email("D@X.COM")

        assert found is not None
        assert found.email == "d@x.com"

    @pytest.mark.asyncio
    async def test_duplicate_email_raises(self, identity_repo):
        await identity_repo.create(make_identity())

        with pytest.raises(EmailAlreadyExistsError):
            await identity_repo.create(make_identity())

    @pytest.mark.asyncio
    async def test_create_without_role(self, identity_repo):
        identity = make_identity(role=None)

        await identity_repo.create(identity)
        found = await identity_repo.find_by_id(identity.id)

        assert found.role is None

    @pytest.mark.asyncio
    async def test_replace_credential(self, identity_repo, db_session):
        identity = make_identity(credential_hash="old:hash")
        await identity_repo.create(identity)

        updated = await identity_repo.replace_credential(identity.id, "new:hash")
        await db_session.commit()

        assert updated.credential_hash == "new:hash"
        found = await identity_repo.find_by_id(identity.id)
        assert found.credential_hash == "new:hash"

    @pytest.mark.asyncio
    async def test_replace_credential_unknown_identity(self, identity_repo):
        assert await identity_repo.replace_credential(uuid4(), "x:y") is None

    @pytest.mark.asyncio
    async def test_replace_avatar(self, identity_repo):
        identity = make_identity()
        await identity_repo.create(identity)

        await identity_repo.replace_avatar(identity.id, "/uploads/avatar-1.png")
        found = await identity_repo.find_by_id(identity.id)

        assert found.avatar_path == "/uploads/avatar-1.png"

    @pytest.mark.asyncio
    async def test_update_only_given_fields(self, identity_repo):
        identity = make_identity()
        await identity_repo.create(identity)

        await identity_repo.update(identity.id, city="Olinda")
        found = await identity_repo.find_by_id(identity.id)

        assert found.city == "Olinda"
        assert found.name == "Maria Souza"
        assert found.email == "d@x.com"

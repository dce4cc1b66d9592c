"""Unit tests for the Identity aggregate and its value objects."""

import pytest

from donare_identity.domain.identity import (
    Email,
    Identity,
    IdentityRole,
    InvalidEmailError,
    InvalidRegionError,
    Region,
)
from tests.shared.fixtures.factories import make_identity


class TestEmail:
    def test_normalizes_case_and_whitespace(self):
        assert Email("  D@X.COM ").value == "d@x.com"

    @pytest.mark.parametrize(
        "value",
        ["o'neil@example.com", "a!b@x.com", "x#y@x.com", "t~z@x.com", "q=r@x.com"],
    )
    def test_accepts_rfc_atom_characters(self, value):
        assert Email(value).value == value

    @pytest.mark.parametrize("value", ["", "no-at-sign", "a@b", "a b@x.com"])
    def test_rejects_invalid_addresses(self, value):
        with pytest.raises(InvalidEmailError):
            Email(value)


class TestRegion:
    def test_upper_cases_code(self):
        assert Region("pe").value == "PE"

    @pytest.mark.parametrize("value", ["", "P", "PER", "P1"])
    def test_rejects_non_two_letter_codes(self, value):
        with pytest.raises(InvalidRegionError):
            Region(value)


class TestIdentity:
    """Tests for Identity creation and mutation."""

    def test_create_sets_fields(self):
        identity = make_identity()

        assert identity.email == "d@x.com"
        assert identity.region == "PE"
        assert identity.role == IdentityRole.DONOR
        assert identity.avatar_path is None
        assert identity.created_at is not None

    def test_create_without_role(self):
        identity = make_identity(role=None)

        assert identity.role is None

    def test_role_accepts_string_on_reconstitute(self):
        existing = make_identity()

        identity = Identity.reconstitute(
            id=existing.id,
            email=existing.email,
            credential_hash="salt:key",
            name=existing.name,
            city=existing.city,
            region=existing.region,
            postal_code=None,
            role="COMPANY",
            avatar_path="/uploads/avatar-1.png",
            created_at=existing.created_at,
            updated_at=existing.updated_at,
        )

        assert identity.role == IdentityRole.COMPANY
        assert identity == existing

    def test_replace_credential_touches_updated_at(self):
        identity = make_identity()
        before = identity.updated_at

        identity.replace_credential("new:hash")

        assert identity.credential_hash == "new:hash"
        assert identity.updated_at >= before

    def test_update_details_leaves_missing_fields(self):
        identity = make_identity()

        identity.update_details(city="Olinda", region="pe")

        assert identity.city == "Olinda"
        assert identity.region == "PE"
        assert identity.name == "Maria Souza"
        assert identity.postal_code == "50000-000"

    def test_repr_hides_credential(self):
        identity = make_identity(credential_hash="secret-salt:secret-key")

        assert "secret" not in repr(identity)

    def test_equality_by_id(self):
        a = make_identity()
        b = make_identity()

        assert a != b
        assert a == Identity(
            id=a.id,
            email="other@x.com",
            credential_hash="",
            name="x",
            city="y",
            region="SP",
        )
        assert hash(a) == hash(a.id)

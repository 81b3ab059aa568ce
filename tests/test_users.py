from datetime import datetime, timedelta, timezone

import pytest
from sqlmodel import select

from core.exceptions import ConflictError, NotFoundError
from core.security import verify_password
from models.models import Organization, Subscription, UTCTimestamp, User
from schemas import OrganizationCreate, OrganizationUpdate, UserCreate, UserUpdate
from services import organization_service, user_service
from tests.factories import signup


def test_signup_creates_default_organization_and_free_subscription(session):
    account = signup(session, email="dana@example.com", name="Dana")

    assert account.organization.name == "Dana's Organization"
    assert account.organization.owner_id == account.user.id

    subscription = account.subscription
    assert subscription.plan == "free"
    assert subscription.status == "active"
    assert (subscription.max_customers, subscription.max_projects) == (3, 3)
    assert subscription.expires_at is None


def test_signup_stores_argon2_hash_not_plain_password(session):
    account = signup(session)

    assert account.user.password_hash != "s3cret-pass"
    assert verify_password("s3cret-pass", account.user.password_hash)
    assert not verify_password("wrong-pass", account.user.password_hash)


def test_duplicate_email_is_a_conflict_and_leaves_nothing_behind(session):
    signup(session, email="taken@example.com")

    with pytest.raises(ConflictError) as exc_info:
        user_service.create_user(
            session, UserCreate(email="taken@example.com", name="Second", password="another-pass")
        )

    assert exc_info.value.message == "An account with this email already exists."
    assert len(session.exec(select(User)).all()) == 1
    assert len(session.exec(select(Organization)).all()) == 1
    assert len(session.exec(select(Subscription)).all()) == 1


def test_get_user_returns_none_when_missing(session):
    assert user_service.get_user(session, "does-not-exist") is None


def test_update_user_changes_only_sent_fields(session, account):
    before = account.user.updated_at

    updated = user_service.update_user(session, account.user.id, UserUpdate(name="Renamed"))

    assert updated.name == "Renamed"
    assert updated.email == "owner@example.com"
    assert updated.updated_at >= before


def test_update_missing_user_raises_not_found(session):
    with pytest.raises(NotFoundError):
        user_service.update_user(session, "missing", UserUpdate(name="Nobody"))


def test_create_organization_for_existing_owner(session, account):
    organization = organization_service.create_organization(
        session, OrganizationCreate(name="Side Business", owner_id=account.user.id)
    )

    assert organization.owner_id == account.user.id
    assert organization_service.get_organization(session, organization.id).name == "Side Business"


def test_create_organization_for_unknown_owner_fails(session):
    with pytest.raises(NotFoundError) as exc_info:
        organization_service.create_organization(session, OrganizationCreate(name="Ghost", owner_id="nobody"))

    assert "nobody" in exc_info.value.message


def test_update_organization_name(session, account):
    organization = organization_service.update_organization(
        session, account.organization.id, OrganizationUpdate(name="Renamed Org")
    )

    assert organization.name == "Renamed Org"
    assert organization.owner_id == account.user.id


def test_timestamps_are_stored_as_aware_utc(session, account):
    fetched = user_service.get_user(session, account.user.id)

    assert fetched.created_at.utcoffset() == timedelta(0)
    assert fetched.updated_at >= fetched.created_at


def test_utc_column_attaches_utc_to_naive_values():
    column_type = UTCTimestamp()

    assert column_type.process_result_value(datetime(2024, 1, 1, 12, 0), None) == datetime(
        2024, 1, 1, 12, 0, tzinfo=timezone.utc
    )
    assert column_type.process_bind_param(
        datetime(2024, 1, 1, 14, 0, tzinfo=timezone(timedelta(hours=2))), None
    ) == datetime(2024, 1, 1, 12, 0, tzinfo=timezone.utc)


def test_user_round_trip(session, account):
    fetched = user_service.get_user(session, account.user.id)

    assert (fetched.email, fetched.name) == ("owner@example.com", "Olivia")
    assert fetched.id == account.user.id


def test_organization_round_trip(session, account):
    created = organization_service.create_organization(
        session, OrganizationCreate(name="Consulting", owner_id=account.user.id)
    )

    fetched = organization_service.get_organization(session, created.id)

    assert (fetched.name, fetched.owner_id) == ("Consulting", account.user.id)
    assert fetched.updated_at >= fetched.created_at
    assert organization_service.get_organization(session, "missing") is None

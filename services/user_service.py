# ================================================================
# services/user_service.py — Signup & user records
# ================================================================
import logging
from typing import Optional

from sqlalchemy.exc import IntegrityError
from sqlmodel import Session

from core.database import transaction
from core.exceptions import ConflictError
from core.repository import Repository, changed_fields
from core.security import hash_password
from models.models import Organization, PlanLimitUtils, Subscription, SubscriptionPlan, SubscriptionStatus, User
from schemas.user_schema import UserCreate, UserUpdate

logger = logging.getLogger(__name__)

DUPLICATE_EMAIL_MESSAGE = "An account with this email already exists."


def _is_email_conflict(error: IntegrityError) -> bool:
    return "email" in str(error.orig).lower()


def create_user(session: Session, user_in: UserCreate) -> User:
    """
    Public signup: creates the user, a default organization they own and a
    free subscription, all in one transaction.
    """
    max_customers, max_projects = PlanLimitUtils.get_plan_limits(SubscriptionPlan.FREE.value)

    try:
        with transaction(session):
            user = Repository(session, User).insert(
                User(
                    email=user_in.email,
                    name=user_in.name,
                    password_hash=hash_password(user_in.password),
                )
            )
            Repository(session, Organization).insert(
                Organization(name=f"{user.name}'s Organization", owner_id=user.id)
            )
            Repository(session, Subscription).insert(
                Subscription(
                    user_id=user.id,
                    plan=SubscriptionPlan.FREE.value,
                    status=SubscriptionStatus.ACTIVE.value,
                    max_customers=max_customers,
                    max_projects=max_projects,
                    expires_at=None,
                )
            )
    except IntegrityError as e:
        if _is_email_conflict(e):
            logger.info(f"Signup rejected, email already registered: {user_in.email}")
            raise ConflictError(DUPLICATE_EMAIL_MESSAGE) from e
        raise

    session.refresh(user)
    logger.info(f"✅ User {user.id} signed up with default organization and free plan")
    return user


def get_user(session: Session, user_id: str) -> Optional[User]:
    return Repository(session, User).get_by_id(user_id)


def update_user(session: Session, user_id: str, user_update: UserUpdate) -> User:
    try:
        with transaction(session):
            user = Repository(session, User).update(user_id, changed_fields(user_update))
    except IntegrityError as e:
        if _is_email_conflict(e):
            raise ConflictError(DUPLICATE_EMAIL_MESSAGE) from e
        raise

    session.refresh(user)
    return user

# ================================================================
# services/subscription_service.py
# ================================================================
import logging
from typing import Optional

from sqlmodel import Session

from core.database import transaction
from core.exceptions import NotFoundError
from core.repository import Repository, changed_fields
from models.models import PlanLimitUtils, Subscription, SubscriptionPlan, SubscriptionStatus, User
from schemas.subscription_schema import SubscriptionCreate, SubscriptionUpdate

logger = logging.getLogger(__name__)


def create_subscription(session: Session, subscription_in: SubscriptionCreate) -> Subscription:
    """
    Creates an active subscription. Limits not given explicitly fall back
    to the plan defaults (free 3/3, pro 50/100, enterprise unlimited).
    """
    if Repository(session, User).get_by_id(subscription_in.user_id) is None:
        raise NotFoundError("user", "User not found")

    plan = SubscriptionPlan(subscription_in.plan).value
    default_customers, default_projects = PlanLimitUtils.get_plan_limits(plan)

    subscription = Subscription(
        user_id=subscription_in.user_id,
        plan=plan,
        status=SubscriptionStatus.ACTIVE.value,
        max_customers=(
            subscription_in.max_customers if subscription_in.max_customers is not None else default_customers
        ),
        max_projects=(
            subscription_in.max_projects if subscription_in.max_projects is not None else default_projects
        ),
        expires_at=subscription_in.expires_at,
    )
    with transaction(session):
        Repository(session, Subscription).insert(subscription)
    session.refresh(subscription)

    logger.info(f"✅ Subscription {subscription.id} ({plan}) created for user {subscription.user_id}")
    return subscription


def get_subscription(session: Session, subscription_id: str) -> Optional[Subscription]:
    return Repository(session, Subscription).get_by_id(subscription_id)


def update_subscription(session: Session, subscription_id: str, subscription_update: SubscriptionUpdate) -> Subscription:
    # Changing the plan keeps the stored limits unless new ones are sent too
    fields = changed_fields(subscription_update, nullable=("expires_at",))
    with transaction(session):
        subscription = Repository(session, Subscription).update(subscription_id, fields)
    session.refresh(subscription)

    if "status" in fields or "plan" in fields:
        logger.info(f"Subscription {subscription_id} is now {subscription.plan}/{subscription.status}")
    return subscription

# ================================================================
# services/limit_service.py — Subscription plan limit enforcement
# ================================================================
"""
Checks that run before a customer or project is created.

The organization owner's subscription governs the whole organization. The
checks count rows at write time and are not serialised against concurrent
requests, so two simultaneous creations against an almost-full quota can
both pass (soft limit).
"""
import logging

from sqlmodel import Session, col

from core.exceptions import InvalidStateError, LimitExceededError, NotFoundError
from core.repository import Repository
from models.models import Customer, Organization, PlanLimitUtils, Project, Subscription

logger = logging.getLogger(__name__)


def get_owner_subscription(session: Session, organization: Organization) -> Subscription:
    """The owner's subscription, which must be active. The latest one wins (id breaks ties)."""
    subscription = Repository(session, Subscription).first_by(
        Subscription.user_id == organization.owner_id,
        order_by=(col(Subscription.created_at).desc(), col(Subscription.id)),
    )
    if subscription is None:
        raise NotFoundError("subscription", "No subscription found for organization owner")
    if not subscription.is_active:
        logger.warning(f"Organization {organization.id} has a {subscription.status} subscription")
        raise InvalidStateError("Subscription is not active")
    return subscription


def _get_organization(session: Session, organization_id: str) -> Organization:
    organization = Repository(session, Organization).get_by_id(organization_id)
    if organization is None:
        raise NotFoundError("organization", "Organization not found")
    return organization


def check_customer_creation_allowed(session: Session, organization_id: str) -> Subscription:
    organization = _get_organization(session, organization_id)
    subscription = get_owner_subscription(session, organization)

    current = Repository(session, Customer).count_by(Customer.organization_id == organization_id)
    if not PlanLimitUtils.is_within_limit(subscription.max_customers, current):
        logger.warning(
            f"Customer limit reached for organization {organization_id} "
            f"({current}/{subscription.max_customers}, plan={subscription.plan})"
        )
        raise LimitExceededError(
            f"Customer limit reached. Maximum {subscription.max_customers} customers "
            f"allowed for {subscription.plan} plan",
            limit=subscription.max_customers,
        )
    return subscription


def check_project_creation_allowed(session: Session, organization_id: str, customer_id: str) -> Subscription:
    organization = _get_organization(session, organization_id)

    customer = Repository(session, Customer).get_by_id(customer_id)
    if customer is None:
        raise NotFoundError("customer", "Customer not found")
    if customer.organization_id != organization_id:
        raise NotFoundError(
            "customer", "Customer not found or does not belong to the specified organization"
        )

    subscription = get_owner_subscription(session, organization)

    current = Repository(session, Project).count_by(Project.organization_id == organization_id)
    if not PlanLimitUtils.is_within_limit(subscription.max_projects, current):
        logger.warning(
            f"Project limit reached for organization {organization_id} "
            f"({current}/{subscription.max_projects}, plan={subscription.plan})"
        )
        raise LimitExceededError(
            f"Project limit exceeded for current subscription. Maximum "
            f"{subscription.max_projects} projects allowed for {subscription.plan} plan",
            limit=subscription.max_projects,
        )
    return subscription

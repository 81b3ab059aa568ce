# ================================================================
# services/organization_service.py
# ================================================================
import logging
from typing import Optional

from sqlmodel import Session

from core.database import transaction
from core.exceptions import NotFoundError
from core.repository import Repository, changed_fields
from models.models import Organization, User
from schemas.organization_schema import OrganizationCreate, OrganizationUpdate

logger = logging.getLogger(__name__)


def create_organization(session: Session, organization_in: OrganizationCreate) -> Organization:
    """Creates a new organization owned by an existing user."""
    if Repository(session, User).get_by_id(organization_in.owner_id) is None:
        raise NotFoundError("user", f"User with id {organization_in.owner_id} not found")

    with transaction(session):
        organization = Repository(session, Organization).insert(
            Organization(name=organization_in.name, owner_id=organization_in.owner_id)
        )
    session.refresh(organization)

    logger.info(f"✅ Organization {organization.id} created for owner {organization.owner_id}")
    return organization


def get_organization(session: Session, organization_id: str) -> Optional[Organization]:
    return Repository(session, Organization).get_by_id(organization_id)


def update_organization(session: Session, organization_id: str, organization_update: OrganizationUpdate) -> Organization:
    with transaction(session):
        organization = Repository(session, Organization).update(
            organization_id, changed_fields(organization_update)
        )
    session.refresh(organization)
    return organization

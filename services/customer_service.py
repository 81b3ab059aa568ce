# ================================================================
# services/customer_service.py
# ================================================================
import logging
from typing import List, Optional

from sqlmodel import Session, col

from core.database import transaction
from core.repository import Repository, changed_fields
from models.models import Customer
from schemas.customer_schema import CustomerCreate, CustomerUpdate
from services import lifecycle_service
from services.limit_service import check_customer_creation_allowed

logger = logging.getLogger(__name__)

NULLABLE_FIELDS = ("email", "phone", "address")


def create_customer(session: Session, customer_in: CustomerCreate) -> Customer:
    """Creates a customer once the organization's plan has room for it."""
    with transaction(session):
        check_customer_creation_allowed(session, customer_in.organization_id)
        customer = Repository(session, Customer).insert(Customer(**customer_in.model_dump()))
    session.refresh(customer)

    logger.info(f"✅ Customer {customer.id} created in organization {customer.organization_id}")
    return customer


def get_customer(session: Session, customer_id: str) -> Optional[Customer]:
    return Repository(session, Customer).get_by_id(customer_id)


def list_customers(session: Session, organization_id: str) -> List[Customer]:
    return Repository(session, Customer).list_by(
        Customer.organization_id == organization_id,
        order_by=(col(Customer.created_at), col(Customer.id)),
    )


def update_customer(session: Session, customer_id: str, customer_update: CustomerUpdate) -> Customer:
    with transaction(session):
        customer = Repository(session, Customer).update(
            customer_id, changed_fields(customer_update, nullable=NULLABLE_FIELDS)
        )
    session.refresh(customer)
    return customer


def delete_customer(session: Session, customer_id: str) -> bool:
    return lifecycle_service.delete_customer(session, customer_id)

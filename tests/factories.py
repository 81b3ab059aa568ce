# tests/factories.py
from datetime import datetime, timedelta
from typing import List, Optional

from sqlmodel import Session, select

from models.models import Customer, Organization, Project, Subscription, TimeEntry, User
from schemas import CustomerCreate, ProjectCreate, TimeEntryCreate, UserCreate
from services import customer_service, project_service, time_entry_service, user_service


class Account:
    """A signed-up user with their default organization and subscription."""

    def __init__(self, user: User, organization: Organization, subscription: Subscription):
        self.user = user
        self.organization = organization
        self.subscription = subscription


def signup(session: Session, email: str = "owner@example.com", name: str = "Olivia") -> Account:
    user = user_service.create_user(session, UserCreate(email=email, name=name, password="s3cret-pass"))
    organization = session.exec(select(Organization).where(Organization.owner_id == user.id)).one()
    subscription = session.exec(select(Subscription).where(Subscription.user_id == user.id)).one()
    return Account(user, organization, subscription)


def make_customer(session: Session, account: Account, name: str = "Acme", **extra) -> Customer:
    return customer_service.create_customer(
        session,
        CustomerCreate(
            name=name,
            organization_id=account.organization.id,
            created_by=account.user.id,
            **extra,
        ),
    )


def make_project(session: Session, account: Account, customer: Customer, name: str = "Website") -> Project:
    return project_service.create_project(
        session,
        ProjectCreate(
            name=name,
            customer_id=customer.id,
            organization_id=account.organization.id,
            created_by=account.user.id,
        ),
    )


def make_entry(
    session: Session,
    account: Account,
    start: datetime,
    minutes: Optional[int] = None,
    customer: Optional[Customer] = None,
    project: Optional[Project] = None,
    tags: Optional[List[str]] = None,
    description: str = "Work",
) -> TimeEntry:
    """Finished entry of ``minutes`` length, or a running timer when minutes is None."""
    return time_entry_service.create_time_entry(
        session,
        TimeEntryCreate(
            user_id=account.user.id,
            customer_id=customer.id if customer else None,
            project_id=project.id if project else None,
            description=description,
            start_time=start,
            end_time=start + timedelta(minutes=minutes) if minutes is not None else None,
            tags=tags or [],
        ),
    )

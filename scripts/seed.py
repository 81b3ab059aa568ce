# scripts/seed.py

import os
import sys
import argparse
from datetime import timedelta

from sqlmodel import Session, select

# Ensure root path for relative imports
sys.path.append(os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from core.database import engine, create_db_and_tables
from core.timeutils import utcnow
from models.models import Organization, User
from schemas import CustomerCreate, ProjectCreate, TimeEntryCreate, UserCreate
from services import customer_service, project_service, time_entry_service, user_service


def _get_or_create_user(session: Session, email: str, name: str, password: str) -> User:
    user = session.exec(select(User).where(User.email == email)).first()
    if user:
        print(f"ℹ️ {email} already exists, skipping signup")
        return user

    user = user_service.create_user(session, UserCreate(email=email, name=name, password=password))
    print(f"✅ Signed up {email} (free plan)")
    return user


def _default_organization(session: Session, user: User) -> Organization:
    return session.exec(select(Organization).where(Organization.owner_id == user.id)).one()


def seed_dev_data():
    """Seed development database with a demo account, customers, projects and time."""
    print("🌱 Seeding development data...")
    create_db_and_tables()

    with Session(engine) as session:
        # -----------------------------
        # 👤 Demo account (user + org + free subscription)
        # -----------------------------
        user = _get_or_create_user(session, "demo@timeledger.dev", "Demo User", "demo12345")
        org = _default_organization(session, user)

        if customer_service.list_customers(session, org.id):
            print("ℹ️ Demo organization already has customers, nothing to do")
            return

        # -----------------------------
        # 🧾 Customers & Projects
        # -----------------------------
        acme = customer_service.create_customer(
            session,
            CustomerCreate(name="Acme Corp", email="billing@acme.example", organization_id=org.id, created_by=user.id),
        )
        globex = customer_service.create_customer(
            session,
            CustomerCreate(name="Globex", organization_id=org.id, created_by=user.id),
        )
        website = project_service.create_project(
            session,
            ProjectCreate(
                name="Website Redesign",
                description="Marketing site refresh",
                customer_id=acme.id,
                organization_id=org.id,
                created_by=user.id,
            ),
        )
        print("✅ Added demo customers and projects")

        # -----------------------------
        # ⏱️ Time entries
        # -----------------------------
        now = utcnow().replace(second=0, microsecond=0)
        samples = [
            (acme.id, website.id, "Wireframes", now - timedelta(hours=5), 120, ["design"]),
            (acme.id, website.id, "Client call", now - timedelta(days=1, hours=2), 45, ["meeting"]),
            (globex.id, None, "Invoice review", now - timedelta(days=3), 30, ["admin"]),
        ]
        for customer_id, project_id, description, start, minutes, tags in samples:
            time_entry_service.create_time_entry(
                session,
                TimeEntryCreate(
                    user_id=user.id,
                    customer_id=customer_id,
                    project_id=project_id,
                    description=description,
                    start_time=start,
                    end_time=start + timedelta(minutes=minutes),
                    tags=tags,
                ),
            )

        # A timer that is still running
        time_entry_service.create_time_entry(
            session,
            TimeEntryCreate(
                user_id=user.id,
                customer_id=globex.id,
                description="Support ticket triage",
                start_time=now - timedelta(minutes=20),
            ),
        )
        print("✅ Added sample time entries")
        print("🌱 Development data seeding complete.")


def seed_staging_data():
    """Seed staging database with minimal safe data."""
    print("🌱 Seeding staging data...")
    create_db_and_tables()

    with Session(engine) as session:
        # -----------------------------
        # 👑 Staging account
        # -----------------------------
        _get_or_create_user(session, "staging-admin@timeledger.dev", "Staging Admin", "staging123")

        print("🌱 Staging data seeding complete.")


if __name__ == "__main__":
    parser = argparse.ArgumentParser(description="Seed the TimeLedger database.")
    parser.add_argument(
        "--env",
        choices=["dev", "staging"],
        default="dev",
        help="Select environment to seed (dev or staging)",
    )
    args = parser.parse_args()

    if args.env == "dev":
        seed_dev_data()
    elif args.env == "staging":
        seed_staging_data()

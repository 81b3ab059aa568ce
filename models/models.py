# models/models.py
import uuid
from datetime import datetime
from enum import Enum
from typing import Dict, List, Optional, Tuple

from sqlalchemy import JSON, Column, DateTime
from sqlalchemy.types import TypeDecorator
from sqlmodel import Field, SQLModel

from core.timeutils import to_utc, utcnow


def new_id() -> str:
    return str(uuid.uuid4())


class UTCTimestamp(TypeDecorator):
    """
    Timezone-aware UTC column. Values are converted to UTC on the way in;
    backends that drop the offset (SQLite) get UTC re-attached on the way out.
    """

    impl = DateTime(timezone=True)
    cache_ok = True

    def process_bind_param(self, value, dialect):
        return to_utc(value)

    def process_result_value(self, value, dialect):
        return to_utc(value)


# ============================================================
# ENUMS
# ============================================================
class SubscriptionPlan(str, Enum):
    FREE = "free"
    PRO = "pro"
    ENTERPRISE = "enterprise"


class SubscriptionStatus(str, Enum):
    ACTIVE = "active"
    CANCELLED = "cancelled"
    EXPIRED = "expired"


UNLIMITED = -1


class PlanLimitUtils:
    """Default customer/project quotas per subscription plan"""

    DEFAULT_LIMITS: Dict[str, Tuple[int, int]] = {
        SubscriptionPlan.FREE.value: (3, 3),
        SubscriptionPlan.PRO.value: (50, 100),
        SubscriptionPlan.ENTERPRISE.value: (UNLIMITED, UNLIMITED),
    }

    @staticmethod
    def get_plan_limits(plan: str) -> Tuple[int, int]:
        """Return (max_customers, max_projects) for a plan."""
        return PlanLimitUtils.DEFAULT_LIMITS[SubscriptionPlan(plan).value]

    @staticmethod
    def is_within_limit(limit: int, current_count: int) -> bool:
        """True if one more record fits under the limit; -1 never runs out."""
        if limit == UNLIMITED:
            return True
        return current_count < limit


# ============================================================
# USER
# ============================================================
class User(SQLModel, table=True):
    __tablename__ = "users"

    id: str = Field(default_factory=new_id, primary_key=True)
    email: str = Field(max_length=255, unique=True, index=True, nullable=False)
    name: str = Field(max_length=100)
    password_hash: str = Field(nullable=False)

    created_at: datetime = Field(default_factory=utcnow, sa_type=UTCTimestamp)
    updated_at: datetime = Field(default_factory=utcnow, sa_type=UTCTimestamp)


# ============================================================
# ORGANIZATION (tenant)
# ============================================================
class Organization(SQLModel, table=True):
    __tablename__ = "organizations"

    id: str = Field(default_factory=new_id, primary_key=True)
    name: str = Field(max_length=100)
    owner_id: str = Field(foreign_key="users.id", nullable=False, index=True)

    created_at: datetime = Field(default_factory=utcnow, sa_type=UTCTimestamp)
    updated_at: datetime = Field(default_factory=utcnow, sa_type=UTCTimestamp)


# ============================================================
# SUBSCRIPTION
# ============================================================
class Subscription(SQLModel, table=True):
    __tablename__ = "subscriptions"

    id: str = Field(default_factory=new_id, primary_key=True)
    # One per user by convention; deliberately not unique
    user_id: str = Field(foreign_key="users.id", nullable=False, index=True)

    plan: str = Field(default=SubscriptionPlan.FREE.value, max_length=20)
    status: str = Field(default=SubscriptionStatus.ACTIVE.value, max_length=20)
    max_customers: int = Field(default=3)
    max_projects: int = Field(default=3)
    expires_at: Optional[datetime] = Field(default=None, sa_type=UTCTimestamp)

    created_at: datetime = Field(default_factory=utcnow, sa_type=UTCTimestamp)
    updated_at: datetime = Field(default_factory=utcnow, sa_type=UTCTimestamp)

    @property
    def is_active(self) -> bool:
        return self.status == SubscriptionStatus.ACTIVE.value


# ============================================================
# CUSTOMER
# ============================================================
class Customer(SQLModel, table=True):
    __tablename__ = "customers"

    id: str = Field(default_factory=new_id, primary_key=True)
    name: str = Field(max_length=200)
    email: Optional[str] = Field(default=None, max_length=255)
    phone: Optional[str] = Field(default=None, max_length=50)
    address: Optional[str] = Field(default=None, max_length=500)

    # Tenant scoping
    organization_id: str = Field(foreign_key="organizations.id", nullable=False, index=True)
    created_by: str = Field(foreign_key="users.id", nullable=False)

    created_at: datetime = Field(default_factory=utcnow, sa_type=UTCTimestamp)
    updated_at: datetime = Field(default_factory=utcnow, sa_type=UTCTimestamp)


# ============================================================
# PROJECT
# ============================================================
class Project(SQLModel, table=True):
    __tablename__ = "projects"

    id: str = Field(default_factory=new_id, primary_key=True)
    name: str = Field(max_length=200)
    description: Optional[str] = Field(default=None, max_length=1000)
    customer_id: str = Field(foreign_key="customers.id", nullable=False, index=True)

    # Tenant scoping
    organization_id: str = Field(foreign_key="organizations.id", nullable=False, index=True)
    created_by: str = Field(foreign_key="users.id", nullable=False)
    is_active: bool = Field(default=True)

    created_at: datetime = Field(default_factory=utcnow, sa_type=UTCTimestamp)
    updated_at: datetime = Field(default_factory=utcnow, sa_type=UTCTimestamp)


# ============================================================
# TIME ENTRY
# ============================================================
class TimeEntry(SQLModel, table=True):
    __tablename__ = "time_entries"

    id: str = Field(default_factory=new_id, primary_key=True)
    user_id: str = Field(foreign_key="users.id", nullable=False, index=True)
    customer_id: Optional[str] = Field(default=None, foreign_key="customers.id", index=True)
    project_id: Optional[str] = Field(default=None, foreign_key="projects.id", index=True)

    description: str = Field(max_length=1000)
    start_time: datetime = Field(index=True, nullable=False, sa_type=UTCTimestamp)
    end_time: Optional[datetime] = Field(default=None, sa_type=UTCTimestamp)
    # Derived from start_time/end_time; None while the timer is running
    duration_minutes: Optional[int] = None
    tags: List[str] = Field(default_factory=list, sa_column=Column(JSON, nullable=False))

    created_at: datetime = Field(default_factory=utcnow, sa_type=UTCTimestamp)
    updated_at: datetime = Field(default_factory=utcnow, sa_type=UTCTimestamp)

    @property
    def is_running(self) -> bool:
        return self.end_time is None

from .user_schema import UserCreate, UserRead, UserUpdate
from .organization_schema import OrganizationCreate, OrganizationRead, OrganizationUpdate
from .subscription_schema import SubscriptionCreate, SubscriptionRead, SubscriptionUpdate
from .customer_schema import CustomerCreate, CustomerRead, CustomerUpdate
from .project_schema import ProjectCreate, ProjectRead, ProjectUpdate
from .time_entry_schema import TimeEntryCreate, TimeEntryRead, TimeEntryUpdate, TimeEntryFilter
from .dashboard_schema import DashboardStats, CustomerTimeSummary, ProjectTimeSummary

__all__ = [
    # User
    "UserCreate", "UserRead", "UserUpdate",

    # Organization
    "OrganizationCreate", "OrganizationRead", "OrganizationUpdate",

    # Subscription
    "SubscriptionCreate", "SubscriptionRead", "SubscriptionUpdate",

    # Customer
    "CustomerCreate", "CustomerRead", "CustomerUpdate",

    # Project
    "ProjectCreate", "ProjectRead", "ProjectUpdate",

    # Time entry
    "TimeEntryCreate", "TimeEntryRead", "TimeEntryUpdate", "TimeEntryFilter",

    # Dashboard
    "DashboardStats", "CustomerTimeSummary", "ProjectTimeSummary",
]

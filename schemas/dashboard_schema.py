# dashboard_schema.py
from pydantic import BaseModel
from typing import List

from schemas.time_entry_schema import TimeEntryRead


class CustomerTimeSummary(BaseModel):
    customer_id: str
    customer_name: str
    total_minutes: int


class ProjectTimeSummary(BaseModel):
    project_id: str
    project_name: str
    total_minutes: int


class DashboardStats(BaseModel):
    """Aggregates for one user within one organization. Times are in minutes."""
    total_time_today: int = 0
    total_time_this_week: int = 0
    total_time_this_month: int = 0
    total_customers: int = 0
    total_projects: int = 0
    recent_entries: List[TimeEntryRead] = []
    top_customers_by_time: List[CustomerTimeSummary] = []
    top_projects_by_time: List[ProjectTimeSummary] = []

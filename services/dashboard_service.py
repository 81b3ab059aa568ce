# ================================================================
# services/dashboard_service.py — Dashboard aggregation
# ================================================================
"""
Read-only statistics for one user inside one organization.

Windows are computed in UTC relative to ``now``: today, this week (weeks
start on Sunday) and this month, each ending at ``now``. Running timers
(``duration_minutes`` is None) never count towards totals but still show up
in the recent entries.
"""
import logging
from datetime import datetime
from typing import List, Optional

from sqlalchemy import func
from sqlmodel import Session, col, select

from core.repository import Repository
from core.timeutils import start_of_day, start_of_month, start_of_week, to_utc, utcnow
from models.models import Customer, Project, TimeEntry
from schemas.dashboard_schema import CustomerTimeSummary, DashboardStats, ProjectTimeSummary
from schemas.time_entry_schema import TimeEntryRead

logger = logging.getLogger(__name__)

RECENT_ENTRIES_LIMIT = 10
TOP_RANKING_LIMIT = 5


def _finished_entries_between(user_id: str, window_start: datetime, window_end: datetime) -> list:
    return [
        TimeEntry.user_id == user_id,
        col(TimeEntry.start_time) >= window_start,
        col(TimeEntry.start_time) <= window_end,
        col(TimeEntry.duration_minutes).is_not(None),
    ]


def total_minutes(session: Session, user_id: str, window_start: datetime, window_end: datetime) -> int:
    statement = select(func.coalesce(func.sum(TimeEntry.duration_minutes), 0)).where(
        *_finished_entries_between(user_id, window_start, window_end)
    )
    return int(session.exec(statement).one())


def top_customers_by_time(
    session: Session, user_id: str, organization_id: str, window_start: datetime, window_end: datetime
) -> List[CustomerTimeSummary]:
    minutes = func.sum(TimeEntry.duration_minutes)
    statement = (
        select(Customer.id, Customer.name, minutes)
        .select_from(TimeEntry)
        .join(Customer, col(TimeEntry.customer_id) == col(Customer.id))
        .where(
            Customer.organization_id == organization_id,
            *_finished_entries_between(user_id, window_start, window_end),
        )
        .group_by(Customer.id, Customer.name)
        # Equal totals fall back to id order so rankings are stable
        .order_by(minutes.desc(), col(Customer.id))
        .limit(TOP_RANKING_LIMIT)
    )
    return [
        CustomerTimeSummary(customer_id=customer_id, customer_name=name, total_minutes=int(total or 0))
        for customer_id, name, total in session.exec(statement).all()
    ]


def top_projects_by_time(
    session: Session, user_id: str, organization_id: str, window_start: datetime, window_end: datetime
) -> List[ProjectTimeSummary]:
    minutes = func.sum(TimeEntry.duration_minutes)
    statement = (
        select(Project.id, Project.name, minutes)
        .select_from(TimeEntry)
        .join(Project, col(TimeEntry.project_id) == col(Project.id))
        .where(
            Project.organization_id == organization_id,
            *_finished_entries_between(user_id, window_start, window_end),
        )
        .group_by(Project.id, Project.name)
        .order_by(minutes.desc(), col(Project.id))
        .limit(TOP_RANKING_LIMIT)
    )
    return [
        ProjectTimeSummary(project_id=project_id, project_name=name, total_minutes=int(total or 0))
        for project_id, name, total in session.exec(statement).all()
    ]


def get_dashboard_stats(
    session: Session, user_id: str, organization_id: str, now: Optional[datetime] = None
) -> DashboardStats:
    now = to_utc(now) if now else utcnow()
    today, week, month = start_of_day(now), start_of_week(now), start_of_month(now)

    recent_entries = Repository(session, TimeEntry).list_by(
        TimeEntry.user_id == user_id,
        order_by=(col(TimeEntry.start_time).desc(), col(TimeEntry.id)),
        limit=RECENT_ENTRIES_LIMIT,
    )

    stats = DashboardStats(
        total_time_today=total_minutes(session, user_id, today, now),
        total_time_this_week=total_minutes(session, user_id, week, now),
        total_time_this_month=total_minutes(session, user_id, month, now),
        total_customers=Repository(session, Customer).count_by(Customer.organization_id == organization_id),
        total_projects=Repository(session, Project).count_by(Project.organization_id == organization_id),
        recent_entries=[TimeEntryRead.model_validate(entry) for entry in recent_entries],
        top_customers_by_time=top_customers_by_time(session, user_id, organization_id, month, now),
        top_projects_by_time=top_projects_by_time(session, user_id, organization_id, month, now),
    )
    logger.debug(f"Dashboard stats computed for user {user_id} in organization {organization_id}")
    return stats

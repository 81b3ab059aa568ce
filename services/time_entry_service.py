# ================================================================
# services/time_entry_service.py — Time entries & duration tracking
# ================================================================
import logging
from datetime import datetime, timedelta
from typing import List, Optional

from sqlmodel import Session, col

from core.database import transaction
from core.exceptions import NotFoundError
from core.repository import Repository, changed_fields
from models.models import TimeEntry
from schemas.time_entry_schema import TimeEntryCreate, TimeEntryFilter, TimeEntryUpdate

logger = logging.getLogger(__name__)

ONE_MINUTE = timedelta(minutes=1)

# Columns that may be explicitly cleared by an update
NULLABLE_FIELDS = ("customer_id", "project_id", "end_time")


def _entries(session: Session) -> Repository[TimeEntry]:
    return Repository(session, TimeEntry, resource="time entry")


def calculate_duration_minutes(start_time: datetime, end_time: Optional[datetime]) -> Optional[int]:
    """Whole minutes between start and end, rounded down; None while running."""
    if end_time is None:
        return None
    return (end_time - start_time) // ONE_MINUTE


# ==================================================================
#  ✅ Create
# ==================================================================
def create_time_entry(session: Session, entry_in: TimeEntryCreate) -> TimeEntry:
    entry = TimeEntry(
        user_id=entry_in.user_id,
        customer_id=entry_in.customer_id,
        project_id=entry_in.project_id,
        description=entry_in.description,
        start_time=entry_in.start_time,
        end_time=entry_in.end_time,
        duration_minutes=calculate_duration_minutes(entry_in.start_time, entry_in.end_time),
        tags=list(entry_in.tags),
    )
    with transaction(session):
        _entries(session).insert(entry)
    session.refresh(entry)

    state = "running" if entry.is_running else f"{entry.duration_minutes} min"
    logger.info(f"✅ Time entry {entry.id} created for user {entry.user_id} ({state})")
    return entry


# ==================================================================
#  ✅ Read
# ==================================================================
def get_time_entry(session: Session, entry_id: str) -> Optional[TimeEntry]:
    return _entries(session).get_by_id(entry_id)


def list_time_entries(session: Session, filters: TimeEntryFilter) -> List[TimeEntry]:
    """Entries matching every given filter, oldest start_time first."""
    conditions = []
    if filters.user_id:
        conditions.append(TimeEntry.user_id == filters.user_id)
    if filters.customer_id:
        conditions.append(TimeEntry.customer_id == filters.customer_id)
    if filters.project_id:
        conditions.append(TimeEntry.project_id == filters.project_id)
    # Date range applies to when the entry started
    if filters.start_date:
        conditions.append(col(TimeEntry.start_time) >= filters.start_date)
    if filters.end_date:
        conditions.append(col(TimeEntry.start_time) <= filters.end_date)

    entries = _entries(session).list_by(*conditions, order_by=(col(TimeEntry.start_time), col(TimeEntry.id)))

    # Tags live in a JSON column, so the any-of match runs here
    if filters.tags:
        wanted = set(filters.tags)
        entries = [entry for entry in entries if wanted.intersection(entry.tags or [])]
    return entries


# ==================================================================
#  ✅ Update (partial) with duration recalculation
# ==================================================================
def update_time_entry(session: Session, entry_id: str, entry_update: TimeEntryUpdate) -> TimeEntry:
    entries = _entries(session)
    existing = entries.get_by_id(entry_id)
    if existing is None:
        raise NotFoundError("time entry", f"Time entry with id {entry_id} not found")

    fields = changed_fields(entry_update, nullable=NULLABLE_FIELDS)

    start_time = fields.get("start_time", existing.start_time)
    end_time = fields.get("end_time", existing.end_time)

    if "end_time" in fields and fields["end_time"] is None:
        fields["duration_minutes"] = None
    elif start_time is not None and end_time is not None:
        fields["duration_minutes"] = calculate_duration_minutes(start_time, end_time)

    with transaction(session):
        entry = entries.update(entry_id, fields)
    session.refresh(entry)
    return entry


# ==================================================================
#  ✅ Delete
# ==================================================================
def delete_time_entry(session: Session, entry_id: str) -> bool:
    with transaction(session):
        existed = _entries(session).delete(entry_id)
    if existed:
        logger.info(f"🗑️ Deleted time entry {entry_id}")
    return existed

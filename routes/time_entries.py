# routes/time_entries.py
from datetime import datetime
from fastapi import APIRouter, Depends, Query, status
from sqlmodel import Session
from typing import Dict, List, Optional

from core.database import get_session
from schemas.time_entry_schema import TimeEntryCreate, TimeEntryFilter, TimeEntryRead, TimeEntryUpdate
from services import time_entry_service

router = APIRouter(tags=["Time Entries"])


@router.post("/", response_model=TimeEntryRead, status_code=status.HTTP_201_CREATED)
def create_time_entry(entry_in: TimeEntryCreate, session: Session = Depends(get_session)):
    """Log time; duration_minutes is derived from start_time/end_time."""
    return time_entry_service.create_time_entry(session, entry_in)


@router.get("/", response_model=List[TimeEntryRead])
def get_time_entries(
    user_id: Optional[str] = Query(None),
    customer_id: Optional[str] = Query(None),
    project_id: Optional[str] = Query(None),
    start_date: Optional[datetime] = Query(None, description="Entries starting at or after this time"),
    end_date: Optional[datetime] = Query(None, description="Entries starting at or before this time"),
    tags: Optional[List[str]] = Query(None, description="Entries carrying any of these tags"),
    session: Session = Depends(get_session),
):
    filters = TimeEntryFilter(
        user_id=user_id,
        customer_id=customer_id,
        project_id=project_id,
        start_date=start_date,
        end_date=end_date,
        tags=tags,
    )
    return time_entry_service.list_time_entries(session, filters)


@router.get("/{entry_id}", response_model=Optional[TimeEntryRead])
def get_time_entry(entry_id: str, session: Session = Depends(get_session)):
    return time_entry_service.get_time_entry(session, entry_id)


@router.patch("/{entry_id}", response_model=TimeEntryRead)
def update_time_entry(entry_id: str, entry_update: TimeEntryUpdate, session: Session = Depends(get_session)):
    return time_entry_service.update_time_entry(session, entry_id, entry_update)


@router.delete("/{entry_id}", response_model=Dict[str, bool])
def delete_time_entry(entry_id: str, session: Session = Depends(get_session)):
    return {"deleted": time_entry_service.delete_time_entry(session, entry_id)}

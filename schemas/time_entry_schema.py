# time_entry_schema.py
from pydantic import BaseModel, Field, ConfigDict
from typing import List, Optional
from datetime import datetime

from schemas.types import UTCDateTime


class TimeEntryCreate(BaseModel):
    user_id: str
    customer_id: Optional[str] = None
    project_id: Optional[str] = None
    description: str = Field(..., min_length=1, max_length=1000)
    start_time: UTCDateTime
    end_time: Optional[UTCDateTime] = None
    tags: List[str] = Field(default_factory=list)


class TimeEntryRead(BaseModel):
    id: str
    user_id: str
    customer_id: Optional[str] = None
    project_id: Optional[str] = None
    description: str
    start_time: datetime
    end_time: Optional[datetime] = None
    duration_minutes: Optional[int] = None
    tags: List[str] = []
    created_at: datetime
    updated_at: datetime

    model_config = ConfigDict(from_attributes=True)


class TimeEntryUpdate(BaseModel):
    """
    Partial update. Fields left out of the payload keep their stored value;
    an explicit ``"end_time": null`` turns the entry back into a running timer
    and clears ``duration_minutes``.
    """
    customer_id: Optional[str] = None
    project_id: Optional[str] = None
    description: Optional[str] = Field(default=None, min_length=1, max_length=1000)
    start_time: Optional[UTCDateTime] = None
    end_time: Optional[UTCDateTime] = None
    tags: Optional[List[str]] = None


class TimeEntryFilter(BaseModel):
    user_id: Optional[str] = None
    customer_id: Optional[str] = None
    project_id: Optional[str] = None
    start_date: Optional[UTCDateTime] = None
    end_date: Optional[UTCDateTime] = None
    # Matches entries carrying any of these tags
    tags: Optional[List[str]] = None

# subscription_schema.py
from pydantic import BaseModel, Field, ConfigDict
from typing import Optional
from datetime import datetime

from models.models import SubscriptionPlan, SubscriptionStatus
from schemas.types import UTCDateTime


class SubscriptionCreate(BaseModel):
    user_id: str
    plan: SubscriptionPlan = SubscriptionPlan.FREE
    # Omitted limits fall back to the plan defaults; -1 means unlimited
    max_customers: Optional[int] = Field(default=None, ge=-1)
    max_projects: Optional[int] = Field(default=None, ge=-1)
    expires_at: Optional[UTCDateTime] = None

    model_config = ConfigDict(use_enum_values=True)


class SubscriptionRead(BaseModel):
    id: str
    user_id: str
    plan: SubscriptionPlan
    status: SubscriptionStatus
    max_customers: int
    max_projects: int
    expires_at: Optional[datetime] = None
    created_at: datetime
    updated_at: datetime

    model_config = ConfigDict(from_attributes=True)


class SubscriptionUpdate(BaseModel):
    plan: Optional[SubscriptionPlan] = None
    status: Optional[SubscriptionStatus] = None
    max_customers: Optional[int] = Field(default=None, ge=-1)
    max_projects: Optional[int] = Field(default=None, ge=-1)
    expires_at: Optional[UTCDateTime] = None

    model_config = ConfigDict(use_enum_values=True)

# routes/subscriptions.py
from fastapi import APIRouter, Depends, status
from sqlmodel import Session
from typing import Optional

from core.database import get_session
from schemas.subscription_schema import SubscriptionCreate, SubscriptionRead, SubscriptionUpdate
from services import subscription_service

router = APIRouter(tags=["Subscriptions"])


# ==================================================================
#  ✅ Create Subscription (plan defaults unless limits are given)
# ==================================================================
@router.post("/", response_model=SubscriptionRead, status_code=status.HTTP_201_CREATED)
def create_subscription(subscription_in: SubscriptionCreate, session: Session = Depends(get_session)):
    return subscription_service.create_subscription(session, subscription_in)


@router.get("/{subscription_id}", response_model=Optional[SubscriptionRead])
def get_subscription(subscription_id: str, session: Session = Depends(get_session)):
    return subscription_service.get_subscription(session, subscription_id)


@router.patch("/{subscription_id}", response_model=SubscriptionRead)
def update_subscription(
    subscription_id: str,
    subscription_update: SubscriptionUpdate,
    session: Session = Depends(get_session),
):
    return subscription_service.update_subscription(session, subscription_id, subscription_update)

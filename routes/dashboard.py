# routes/dashboard.py
from fastapi import APIRouter, Depends, Query
from sqlmodel import Session

from core.database import get_session
from schemas.dashboard_schema import DashboardStats
from services import dashboard_service

router = APIRouter(tags=["Dashboard"])


@router.get("/stats", response_model=DashboardStats)
def get_dashboard_stats(
    user_id: str = Query(..., description="User ID"),
    organization_id: str = Query(..., description="Organization ID"),
    session: Session = Depends(get_session),
):
    """
    Time totals for today / this week (Sunday start) / this month, organization
    counts, the user's 10 most recent entries and this month's top 5
    customers and projects by tracked minutes.
    """
    return dashboard_service.get_dashboard_stats(session, user_id, organization_id)

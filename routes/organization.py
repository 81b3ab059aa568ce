# routes/organization.py
from fastapi import APIRouter, Depends, status
from sqlmodel import Session
from typing import Optional

from core.database import get_session
from schemas.organization_schema import OrganizationCreate, OrganizationRead, OrganizationUpdate
from services import organization_service

router = APIRouter(tags=["Organizations"])


# ==================================================================
#  ✅ CREATE ORGANIZATION
# ==================================================================
@router.post("/", response_model=OrganizationRead, status_code=status.HTTP_201_CREATED)
def create_organization(organization_in: OrganizationCreate, session: Session = Depends(get_session)):
    """Create an organization owned by an existing user"""
    return organization_service.create_organization(session, organization_in)


# ==================================================================
#  ✅ GET ORGANIZATION
# ==================================================================
@router.get("/{organization_id}", response_model=Optional[OrganizationRead])
def get_organization(organization_id: str, session: Session = Depends(get_session)):
    return organization_service.get_organization(session, organization_id)


# ==================================================================
#  ✅ UPDATE ORGANIZATION
# ==================================================================
@router.patch("/{organization_id}", response_model=OrganizationRead)
def update_organization(
    organization_id: str,
    organization_update: OrganizationUpdate,
    session: Session = Depends(get_session),
):
    return organization_service.update_organization(session, organization_id, organization_update)

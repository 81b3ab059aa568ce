# routes/customers.py
from fastapi import APIRouter, Depends, Query, status
from sqlmodel import Session
from typing import Dict, List, Optional

from core.database import get_session
from schemas.customer_schema import CustomerCreate, CustomerRead, CustomerUpdate
from services import customer_service

router = APIRouter(tags=["Customers"])


# ==================================================================
#  ✅ Create Customer (subscription limits enforced)
# ==================================================================
@router.post("/", response_model=CustomerRead, status_code=status.HTTP_201_CREATED)
def create_customer(customer_in: CustomerCreate, session: Session = Depends(get_session)):
    return customer_service.create_customer(session, customer_in)


# ==================================================================
#  ✅ Get All Customers (filtered by organization)
# ==================================================================
@router.get("/", response_model=List[CustomerRead])
def get_customers(
    organization_id: str = Query(..., description="Organization ID"),
    session: Session = Depends(get_session),
):
    return customer_service.list_customers(session, organization_id)


@router.get("/{customer_id}", response_model=Optional[CustomerRead])
def get_customer(customer_id: str, session: Session = Depends(get_session)):
    return customer_service.get_customer(session, customer_id)


@router.patch("/{customer_id}", response_model=CustomerRead)
def update_customer(customer_id: str, customer_update: CustomerUpdate, session: Session = Depends(get_session)):
    return customer_service.update_customer(session, customer_id, customer_update)


# ==================================================================
#  ✅ Delete Customer (cascades to projects and time entries)
# ==================================================================
@router.delete("/{customer_id}", response_model=Dict[str, bool])
def delete_customer(customer_id: str, session: Session = Depends(get_session)):
    return {"deleted": customer_service.delete_customer(session, customer_id)}

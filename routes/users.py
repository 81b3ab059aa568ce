# routes/users.py
from fastapi import APIRouter, Depends, status
from sqlmodel import Session
from typing import Optional

from core.database import get_session
from schemas.user_schema import UserCreate, UserRead, UserUpdate
from services import user_service

router = APIRouter(tags=["Users"])


# ----------------------------------------------------------------------
# ✅ Signup — creates user + default organization + free subscription
# ----------------------------------------------------------------------
@router.post("/", response_model=UserRead, status_code=status.HTTP_201_CREATED)
def create_user(user_data: UserCreate, session: Session = Depends(get_session)):
    return user_service.create_user(session, user_data)


# ----------------------------------------------------------------------
# ✅ Get User (null when missing)
# ----------------------------------------------------------------------
@router.get("/{user_id}", response_model=Optional[UserRead])
def get_user(user_id: str, session: Session = Depends(get_session)):
    return user_service.get_user(session, user_id)


# ----------------------------------------------------------------------
# ✅ Update User (partial)
# ----------------------------------------------------------------------
@router.patch("/{user_id}", response_model=UserRead)
def update_user(user_id: str, user_update: UserUpdate, session: Session = Depends(get_session)):
    return user_service.update_user(session, user_id, user_update)

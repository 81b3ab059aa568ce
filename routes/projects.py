# routes/projects.py
from fastapi import APIRouter, Depends, Query, status
from sqlmodel import Session
from typing import Dict, List, Optional

from core.database import get_session
from schemas.project_schema import ProjectCreate, ProjectRead, ProjectUpdate
from services import project_service

router = APIRouter(tags=["Projects"])


# ==================================================================
#  ✅ Create New Project (customer must be in the same organization)
# ==================================================================
@router.post("/", response_model=ProjectRead, status_code=status.HTTP_201_CREATED)
def create_project(project_in: ProjectCreate, session: Session = Depends(get_session)):
    return project_service.create_project(session, project_in)


# ==================================================================
#  ✅ Get All Projects (filtered by organization, optionally customer)
# ==================================================================
@router.get("/", response_model=List[ProjectRead])
def get_projects(
    organization_id: str = Query(..., description="Organization ID"),
    customer_id: Optional[str] = Query(None, description="Only projects of this customer"),
    session: Session = Depends(get_session),
):
    return project_service.list_projects(session, organization_id, customer_id)


@router.get("/{project_id}", response_model=Optional[ProjectRead])
def get_project(project_id: str, session: Session = Depends(get_session)):
    return project_service.get_project(session, project_id)


@router.patch("/{project_id}", response_model=ProjectRead)
def update_project(project_id: str, project_update: ProjectUpdate, session: Session = Depends(get_session)):
    return project_service.update_project(session, project_id, project_update)


# ==================================================================
#  ✅ Delete Project (cascades to time entries)
# ==================================================================
@router.delete("/{project_id}", response_model=Dict[str, bool])
def delete_project(project_id: str, session: Session = Depends(get_session)):
    return {"deleted": project_service.delete_project(session, project_id)}

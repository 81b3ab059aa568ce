# ================================================================
# services/project_service.py
# ================================================================
import logging
from typing import List, Optional

from sqlmodel import Session, col

from core.database import transaction
from core.repository import Repository, changed_fields
from models.models import Project
from schemas.project_schema import ProjectCreate, ProjectUpdate
from services import lifecycle_service
from services.limit_service import check_project_creation_allowed

logger = logging.getLogger(__name__)


def create_project(session: Session, project_in: ProjectCreate) -> Project:
    """
    Creates a project for a customer of the same organization, once the
    organization's plan has room for it.
    """
    with transaction(session):
        check_project_creation_allowed(session, project_in.organization_id, project_in.customer_id)
        project = Repository(session, Project).insert(Project(**project_in.model_dump(), is_active=True))
    session.refresh(project)

    logger.info(f"✅ Project {project.id} created for customer {project.customer_id}")
    return project


def get_project(session: Session, project_id: str) -> Optional[Project]:
    return Repository(session, Project).get_by_id(project_id)


def list_projects(session: Session, organization_id: str, customer_id: Optional[str] = None) -> List[Project]:
    conditions = [Project.organization_id == organization_id]
    if customer_id:
        conditions.append(Project.customer_id == customer_id)
    return Repository(session, Project).list_by(
        *conditions, order_by=(col(Project.created_at), col(Project.id))
    )


def update_project(session: Session, project_id: str, project_update: ProjectUpdate) -> Project:
    with transaction(session):
        project = Repository(session, Project).update(
            project_id, changed_fields(project_update, nullable=("description",))
        )
    session.refresh(project)
    return project


def delete_project(session: Session, project_id: str) -> bool:
    return lifecycle_service.delete_project(session, project_id)

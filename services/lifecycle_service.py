# ================================================================
# services/lifecycle_service.py — Cascading deletes
# ================================================================
"""
The store has no ON DELETE CASCADE, so removing a customer or project
deletes its dependents here, child rows first, in one transaction.
"""
import logging

from sqlmodel import Session

from core.database import transaction
from core.repository import Repository
from models.models import Customer, Project, TimeEntry

logger = logging.getLogger(__name__)


def delete_customer(session: Session, customer_id: str) -> bool:
    """
    Delete a customer together with its projects and every time entry that
    references the customer or one of those projects.
    Returns False when the customer does not exist.
    """
    projects = Repository(session, Project)
    entries = Repository(session, TimeEntry)

    with transaction(session):
        removed_entries = entries.delete_by(TimeEntry.customer_id == customer_id)

        project_ids = [project.id for project in projects.list_by(Project.customer_id == customer_id)]
        for project_id in project_ids:
            removed_entries += entries.delete_by(TimeEntry.project_id == project_id)

        removed_projects = projects.delete_by(Project.customer_id == customer_id)
        existed = Repository(session, Customer).delete(customer_id)

    if existed:
        logger.info(
            f"🗑️ Deleted customer {customer_id} "
            f"({removed_projects} projects, {removed_entries} time entries)"
        )
    return existed


def delete_project(session: Session, project_id: str) -> bool:
    """Delete a project and its time entries. Returns False when it does not exist."""
    with transaction(session):
        removed_entries = Repository(session, TimeEntry).delete_by(TimeEntry.project_id == project_id)
        existed = Repository(session, Project).delete(project_id)

    if existed:
        logger.info(f"🗑️ Deleted project {project_id} ({removed_entries} time entries)")
    return existed

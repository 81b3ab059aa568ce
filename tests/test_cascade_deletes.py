from datetime import datetime, timezone

from sqlmodel import select

from models.models import Customer, Project, TimeEntry
from services import customer_service, project_service
from tests.factories import make_customer, make_entry, make_project, signup

UTC = timezone.utc

START = datetime(2024, 1, 10, 9, 0, tzinfo=UTC)


def test_deleting_customer_removes_projects_and_entries(session, account):
    customer = make_customer(session, account)
    project = make_project(session, account, customer)
    make_entry(session, account, START, 30, customer=customer, project=project)
    make_entry(session, account, START, 45, project=project)
    customer_id, project_id = customer.id, project.id

    assert customer_service.delete_customer(session, customer_id) is True

    assert session.get(Customer, customer_id) is None
    assert session.get(Project, project_id) is None
    assert session.exec(select(TimeEntry)).all() == []


def test_deleting_customer_leaves_unrelated_data(session, account):
    doomed = make_customer(session, account, name="Doomed")
    kept = make_customer(session, account, name="Kept")
    kept_project = make_project(session, account, kept)
    kept_entry = make_entry(session, account, START, 60, customer=kept, project=kept_project)
    loose_entry = make_entry(session, account, START, 15)
    make_entry(session, account, START, 30, customer=doomed)

    other = signup(session, email="other@example.com", name="Other")
    other_customer = make_customer(session, other, name="Elsewhere")

    customer_service.delete_customer(session, doomed.id)

    remaining = {entry.id for entry in session.exec(select(TimeEntry)).all()}
    assert remaining == {kept_entry.id, loose_entry.id}
    assert session.get(Project, kept_project.id) is not None
    assert session.get(Customer, other_customer.id) is not None


def test_deleting_project_removes_only_its_entries(session, account):
    customer = make_customer(session, account)
    project = make_project(session, account, customer)
    make_entry(session, account, START, 30, customer=customer, project=project)
    customer_only = make_entry(session, account, START, 20, customer=customer)

    assert project_service.delete_project(session, project.id) is True

    assert [e.id for e in session.exec(select(TimeEntry)).all()] == [customer_only.id]
    assert session.get(Customer, customer.id) is not None


def test_deleting_missing_records_reports_false(session, account):
    customer_id = make_customer(session, account).id
    customer_service.delete_customer(session, customer_id)

    assert customer_service.delete_customer(session, customer_id) is False
    assert project_service.delete_project(session, "missing") is False


def test_deleted_customer_frees_a_quota_slot(session, account):
    customers = [make_customer(session, account, name=name) for name in ("A", "B", "C")]

    customer_service.delete_customer(session, customers[0].id)

    assert make_customer(session, account, name="D").name == "D"

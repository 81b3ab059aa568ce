from datetime import datetime, timedelta, timezone

import pytest

from core.exceptions import NotFoundError
from schemas import TimeEntryCreate, TimeEntryFilter, TimeEntryUpdate
from services import time_entry_service
from services.time_entry_service import calculate_duration_minutes
from tests.factories import make_customer, make_entry, make_project

UTC = timezone.utc

START = datetime(2024, 1, 15, 9, 0, tzinfo=UTC)


def test_duration_is_derived_from_start_and_end(session, account):
    entry = time_entry_service.create_time_entry(
        session,
        TimeEntryCreate(
            user_id=account.user.id,
            description="Design review",
            start_time=START,
            end_time=START + timedelta(hours=2, minutes=30),
        ),
    )

    assert entry.duration_minutes == 150
    assert entry.is_running is False


def test_durations_round_down_to_whole_minutes():
    assert calculate_duration_minutes(START, START + timedelta(seconds=30)) == 0
    assert calculate_duration_minutes(START, START + timedelta(minutes=1, seconds=59)) == 1
    assert calculate_duration_minutes(START, None) is None


def test_running_timer_has_no_duration(session, account):
    entry = make_entry(session, account, START)

    assert entry.end_time is None
    assert entry.duration_minutes is None
    assert entry.is_running is True


def test_aware_timestamps_are_stored_as_utc(session, account):
    plus_two = timezone(timedelta(hours=2))
    entry = time_entry_service.create_time_entry(
        session,
        TimeEntryCreate(
            user_id=account.user.id,
            description="Offsite",
            start_time=datetime(2024, 1, 15, 11, 0, tzinfo=plus_two),
            end_time=datetime(2024, 1, 15, 12, 0, tzinfo=plus_two),
        ),
    )

    assert entry.start_time == datetime(2024, 1, 15, 9, 0, tzinfo=UTC)
    assert entry.duration_minutes == 60


def test_stopping_a_timer_computes_duration(session, account):
    entry = make_entry(session, account, START)

    updated = time_entry_service.update_time_entry(
        session, entry.id, TimeEntryUpdate(end_time=START + timedelta(minutes=42))
    )

    assert updated.duration_minutes == 42


def test_moving_start_time_recomputes_duration(session, account):
    entry = make_entry(session, account, START, 60)

    updated = time_entry_service.update_time_entry(
        session, entry.id, TimeEntryUpdate(start_time=START + timedelta(minutes=15))
    )

    assert updated.duration_minutes == 45


def test_explicit_null_end_time_restarts_the_timer(session, account):
    entry = make_entry(session, account, START, 60)

    updated = time_entry_service.update_time_entry(
        session, entry.id, TimeEntryUpdate.model_validate({"end_time": None})
    )

    assert updated.end_time is None
    assert updated.duration_minutes is None


def test_description_only_update_keeps_duration(session, account):
    entry = make_entry(session, account, START, 60, tags=["billable"])

    updated = time_entry_service.update_time_entry(
        session, entry.id, TimeEntryUpdate(description="Renamed")
    )

    assert updated.description == "Renamed"
    assert updated.duration_minutes == 60
    assert updated.tags == ["billable"]


def test_update_missing_entry_raises_not_found(session):
    with pytest.raises(NotFoundError) as exc_info:
        time_entry_service.update_time_entry(session, "missing", TimeEntryUpdate(description="x"))

    assert exc_info.value.message == "Time entry with id missing not found"


def test_delete_time_entry(session, account):
    entry_id = make_entry(session, account, START, 10).id

    assert time_entry_service.delete_time_entry(session, entry_id) is True
    assert time_entry_service.get_time_entry(session, entry_id) is None
    assert time_entry_service.delete_time_entry(session, entry_id) is False


def test_filters_combine_and_results_are_ordered_by_start(session, account):
    customer = make_customer(session, account)
    project = make_project(session, account, customer)
    late = make_entry(session, account, START + timedelta(days=2), 30, customer=customer, project=project)
    early = make_entry(session, account, START, 30, customer=customer)
    make_entry(session, account, START + timedelta(days=1), 30)

    by_customer = time_entry_service.list_time_entries(session, TimeEntryFilter(customer_id=customer.id))
    by_project = time_entry_service.list_time_entries(session, TimeEntryFilter(project_id=project.id))

    assert [e.id for e in by_customer] == [early.id, late.id]
    assert [e.id for e in by_project] == [late.id]


def test_date_range_filter_uses_start_time(session, account):
    make_entry(session, account, START - timedelta(days=1), 30)
    inside = make_entry(session, account, START, 30)
    make_entry(session, account, START + timedelta(days=3), 30)

    entries = time_entry_service.list_time_entries(
        session,
        TimeEntryFilter(
            user_id=account.user.id,
            start_date=START,
            end_date=START + timedelta(days=1),
        ),
    )

    assert [e.id for e in entries] == [inside.id]


def test_tag_filter_matches_any_tag(session, account):
    billable = make_entry(session, account, START, 30, tags=["billable", "design"])
    meeting = make_entry(session, account, START + timedelta(hours=1), 30, tags=["meeting"])
    make_entry(session, account, START + timedelta(hours=2), 30, tags=["internal"])
    make_entry(session, account, START + timedelta(hours=3), 30)

    entries = time_entry_service.list_time_entries(
        session, TimeEntryFilter(tags=["design", "meeting"])
    )

    assert [e.id for e in entries] == [billable.id, meeting.id]


def test_time_entry_round_trip(session, account):
    customer = make_customer(session, account)
    project = make_project(session, account, customer)
    created = make_entry(
        session, account, START, 90, customer=customer, project=project, tags=["billable", "design"]
    )

    fetched = time_entry_service.get_time_entry(session, created.id)

    assert (fetched.customer_id, fetched.project_id) == (customer.id, project.id)
    assert fetched.start_time == START
    assert fetched.end_time == START + timedelta(minutes=90)
    assert fetched.duration_minutes == 90
    assert fetched.tags == ["billable", "design"]
    assert fetched.updated_at >= fetched.created_at


def test_null_end_time_wins_over_new_start_time(session, account):
    entry = make_entry(session, account, START, 60)

    updated = time_entry_service.update_time_entry(
        session,
        entry.id,
        TimeEntryUpdate.model_validate({"start_time": "2024-01-15T08:00:00Z", "end_time": None}),
    )

    assert updated.start_time == datetime(2024, 1, 15, 8, 0, tzinfo=UTC)
    assert updated.duration_minutes is None

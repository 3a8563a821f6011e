"""
Tests for the repository layer over the commands table.

All tests use a real SQLite session (via test_fixtures) so the SQL the
repositories emit is actually executed.
"""

from sqlalchemy.orm import Session

from domain.enums import CommandStatus
from domain.models import CommandRecord
from repositories import CommandRepository

from test_fixtures import queue_engine, db_session  # noqa: F401


# =============================================================================
# BASE REPOSITORY BEHAVIOUR
# =============================================================================


def test_create_get_and_delete(db_session: Session):
    repo = CommandRepository(db_session)

    record = repo.create(CommandRecord(queue="q", command="{}", status=0))

    assert record.id is not None
    assert record.created_at is not None
    assert repo.exists(record.id)
    assert repo.get_by_id(record.id).command == "{}"

    assert repo.delete(record.id) is True
    assert repo.get_by_id(record.id) is None
    assert repo.delete(record.id) is False


def test_get_all_paginates(db_session: Session):
    repo = CommandRepository(db_session)
    for i in range(5):
        repo.enqueue("q", f'{{"n": {i}}}')

    assert len(repo.get_all()) == 5
    assert len(repo.get_all(skip=3, limit=10)) == 2


# =============================================================================
# COMMAND REPOSITORY
# =============================================================================


def test_enqueue_stores_pending_row(db_session: Session):
    repo = CommandRepository(db_session)

    record = repo.enqueue("documents", '{"type": "X", "data": {}}')

    assert record.queue == "documents"
    assert record.status == CommandStatus.PENDING.value
    assert repo.count_pending("documents") == 1
    assert repo.count_pending("elsewhere") == 0


def test_get_next_pending_skips_completed_rows(db_session: Session):
    repo = CommandRepository(db_session)
    first = repo.enqueue("q", "first")
    second = repo.enqueue("q", "second")

    assert repo.get_next_pending("q").id == first.id

    repo.update_status(first.id, CommandStatus.COMPLETED)

    assert repo.get_next_pending("q").id == second.id
    assert repo.count_pending("q") == 1


def test_get_next_pending_on_empty_queue(db_session: Session):
    assert CommandRepository(db_session).get_next_pending("nothing") is None


def test_update_status_missing_row_returns_none(db_session: Session):
    assert CommandRepository(db_session).update_status(12345, CommandStatus.COMPLETED) is None


def test_get_by_queue_filters_by_status(db_session: Session):
    repo = CommandRepository(db_session)
    done = repo.enqueue("q", "done")
    repo.enqueue("q", "waiting")
    repo.enqueue("other", "not mine")
    repo.update_status(done.id, CommandStatus.COMPLETED)

    assert [r.command for r in repo.get_by_queue("q")] == ["done", "waiting"]
    assert [r.command for r in repo.get_by_queue("q", status=CommandStatus.PENDING)] == ["waiting"]
    assert [r.command for r in repo.get_by_queue("q", status=CommandStatus.COMPLETED)] == ["done"]

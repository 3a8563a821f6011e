"""
Tests for the SQLite-backed command queue and the commands that run on it.

Covers:
- FIFO order and per-queue isolation
- status persistence and the pending/completed lifecycle
- termination of work() and failure behaviour
- JSON serialization of every registered command type
- the document processing and web scraping demos
"""

import json

import pytest
from sqlalchemy.orm import sessionmaker

from app.exceptions import NotFoundError, ServiceValidationError
from domain.enums import CommandStatus
from domain.models import CommandRecord
from patterns.behavioral.command.document_processing import (
    ConvertDocumentCommand,
    PrintDocumentCommand,
    SaveDocumentCommand,
)
from patterns.behavioral.command.queue import COMMAND_TYPES, CommandQueue, QueuedCommand
from patterns.behavioral.command.web_scraping import (
    GENRES_URL,
    IMDBGenrePageScrapingCommand,
    IMDBGenresScrapingCommand,
    IMDBMovieScrapingCommand,
    SamplePageSource,
)

from test_fixtures import queue_engine, fresh_queues, run_example  # noqa: F401


class RecordingCommand(QueuedCommand):
    label: str

    def execute(self, queue: CommandQueue) -> None:
        print(f"ran {self.label}")
        self.complete(queue)


class ExplodingCommand(QueuedCommand):
    def execute(self, queue: CommandQueue) -> None:
        raise RuntimeError("boom")


class ForgetfulCommand(QueuedCommand):
    def execute(self, queue: CommandQueue) -> None:
        print("done, but never marked complete")


def _rows(engine, queue_name):
    with sessionmaker(bind=engine, future=True)() as db:
        return [
            (r.id, r.status)
            for r in db.query(CommandRecord)
            .filter(CommandRecord.queue == queue_name)
            .order_by(CommandRecord.id)
        ]


# =============================================================================
# SERIALIZATION
# =============================================================================


def test_serialize_produces_type_and_data_envelope():
    payload = json.loads(PrintDocumentCommand(document="a.pdf").serialize())

    assert payload["type"] == "PrintDocumentCommand"
    assert payload["data"]["document"] == "a.pdf"
    assert payload["data"]["status"] == CommandStatus.PENDING.value
    assert "id" not in payload["data"]


@pytest.mark.parametrize(
    "command",
    [
        PrintDocumentCommand(document="Document1.pdf"),
        SaveDocumentCommand(document="Document1.pdf"),
        ConvertDocumentCommand(document="Document1.pdf"),
        IMDBGenresScrapingCommand(),
        IMDBGenrePageScrapingCommand(url="https://www.imdb.com/search/title?genres=drama", page=3),
        IMDBMovieScrapingCommand(url="https://www.imdb.com/title/tt0111161/"),
    ],
    ids=lambda c: type(c).__name__,
)
def test_registered_commands_survive_json(command):
    restored = QueuedCommand.deserialize(command.serialize())

    assert type(restored) is type(command)
    assert restored == command


def test_subclasses_register_by_class_name():
    assert COMMAND_TYPES["RecordingCommand"] is RecordingCommand
    assert COMMAND_TYPES["IMDBMovieScrapingCommand"] is IMDBMovieScrapingCommand


def test_deserialize_unknown_type_raises():
    with pytest.raises(ServiceValidationError) as exc:
        QueuedCommand.deserialize('{"type": "NoSuchCommand", "data": {}}')

    assert exc.value.code == "UNKNOWN_COMMAND"


def test_abstract_command_bases_are_not_registered():
    assert "DocumentCommand" not in COMMAND_TYPES
    assert "WebScrapingCommand" not in COMMAND_TYPES
    assert "QueuedCommand" not in COMMAND_TYPES

    with pytest.raises(ServiceValidationError) as exc:
        QueuedCommand.deserialize('{"type": "DocumentCommand", "data": {"document": "x"}}')

    assert exc.value.code == "UNKNOWN_COMMAND"


@pytest.mark.parametrize(
    "payload",
    [
        "not json",
        '{"data": {}}',
        '{"type": "PrintDocumentCommand", "data": {}}',
        '{"type": "PrintDocumentCommand", "data": {"document": "a.pdf", "status": 7}}',
    ],
)
def test_deserialize_malformed_payload_raises(payload):
    with pytest.raises(ServiceValidationError) as exc:
        QueuedCommand.deserialize(payload)

    assert exc.value.code == "INVALID_COMMAND"
    assert exc.value.http_status == 400


# =============================================================================
# QUEUE CONTRACT
# =============================================================================


def test_new_queue_is_empty(queue_engine):
    queue = CommandQueue("contract", engine=queue_engine)

    assert queue.is_empty()
    assert queue.get_command() is None


def test_add_returns_row_id_and_stores_pending(queue_engine):
    queue = CommandQueue("contract", engine=queue_engine)

    first = queue.add(RecordingCommand(label="one"))
    second = queue.add(RecordingCommand(label="two"))

    assert second > first
    assert _rows(queue_engine, "contract") == [
        (first, CommandStatus.PENDING.value),
        (second, CommandStatus.PENDING.value),
    ]


def test_get_command_is_fifo_and_sets_id(queue_engine):
    queue = CommandQueue("contract", engine=queue_engine)
    first = queue.add(RecordingCommand(label="one"))
    queue.add(RecordingCommand(label="two"))

    command = queue.get_command()

    assert isinstance(command, RecordingCommand)
    assert command.label == "one"
    assert command.id == first


def test_complete_command_persists_status(queue_engine):
    queue = CommandQueue("contract", engine=queue_engine)
    row_id = queue.add(RecordingCommand(label="one"))

    command = queue.get_command()
    command.complete(queue)

    assert _rows(queue_engine, "contract") == [(row_id, CommandStatus.COMPLETED.value)]
    assert queue.is_empty()


def test_complete_command_without_id_raises(queue_engine):
    queue = CommandQueue("contract", engine=queue_engine)

    with pytest.raises(ServiceValidationError) as exc:
        queue.complete_command(RecordingCommand(label="never queued"))

    assert exc.value.code == "COMMAND_NOT_QUEUED"


def test_complete_command_for_missing_row_raises(queue_engine):
    queue = CommandQueue("contract", engine=queue_engine)
    command = RecordingCommand(label="ghost", id=999)

    with pytest.raises(NotFoundError):
        queue.complete_command(command)


def test_work_runs_each_pending_row_once_in_order(queue_engine, capsys):
    queue = CommandQueue("contract", engine=queue_engine)
    for label in ("one", "two", "three"):
        queue.add(RecordingCommand(label=label))

    processed = queue.work()

    assert processed == 3
    assert capsys.readouterr().out.splitlines() == ["ran one", "ran two", "ran three"]
    assert queue.is_empty()
    # A second pass finds nothing to do
    assert queue.work() == 0


def test_queues_sharing_a_database_are_isolated(queue_engine):
    docs = CommandQueue("docs", engine=queue_engine)
    other = CommandQueue("other", engine=queue_engine)
    docs.add(RecordingCommand(label="doc"))

    assert other.is_empty()
    assert other.work() == 0
    assert not docs.is_empty()


def test_failing_command_propagates_and_stays_pending(queue_engine):
    queue = CommandQueue("failing", engine=queue_engine)
    row_id = queue.add(ExplodingCommand())

    with pytest.raises(RuntimeError, match="boom"):
        queue.work()

    assert _rows(queue_engine, "failing") == [(row_id, CommandStatus.PENDING.value)]


def test_command_that_never_completes_stops_the_loop(queue_engine):
    queue = CommandQueue("forgetful", engine=queue_engine)
    queue.add(ForgetfulCommand())

    with pytest.raises(ServiceValidationError) as exc:
        queue.work()

    assert exc.value.code == "COMMAND_NOT_COMPLETED"


def test_get_returns_one_instance_per_name(fresh_queues):
    assert CommandQueue.get("shared") is CommandQueue.get("shared")
    assert CommandQueue.get("shared") is not CommandQueue.get("elsewhere")


# =============================================================================
# DEMOS ON THE QUEUE
# =============================================================================


def test_document_commands_print_their_action(queue_engine, capsys):
    queue = CommandQueue("documents", engine=queue_engine)
    queue.add(PrintDocumentCommand(document="Document1.pdf"))
    queue.add(SaveDocumentCommand(document="Document1.pdf"))
    queue.add(ConvertDocumentCommand(document="Document1.pdf"))

    assert queue.work() == 3

    out = capsys.readouterr().out
    assert out.index("Printing document 'Document1.pdf'") < out.index(
        "Saving document 'Document1.pdf'"
    ) < out.index("Converting document 'Document1.pdf'")


def test_document_processing_demo_is_repeatable(fresh_queues):
    first = run_example("command.document_processing")
    second = run_example("command.document_processing")

    assert "The queue processed 3 command(s)." in first
    assert "The queue processed 3 command(s)." in second


def test_web_scraping_crawls_sample_site(queue_engine, capsys):
    queue = CommandQueue("crawl", engine=queue_engine)
    queue.add(IMDBGenresScrapingCommand())

    processed = queue.work()

    out = capsys.readouterr().out
    # genres page, comedy pages 1-2, drama page 1 and four movies
    assert processed == 8
    assert "Discovered 2 genres." in out
    for title in (
        "Groundhog Day",
        "The Big Lebowski",
        "Some Like It Hot",
        "The Shawshank Redemption",
    ):
        assert f"Parsed movie {title}." in out
    assert all(status == CommandStatus.COMPLETED.value for _, status in _rows(queue_engine, "crawl"))


def test_genre_page_url_carries_page_number():
    command = IMDBGenrePageScrapingCommand(
        url="https://www.imdb.com/search/title?genres=comedy", page=2
    )

    assert command.get_url() == "https://www.imdb.com/search/title?genres=comedy&page=2"


def test_sample_page_source_rejects_unknown_url():
    with pytest.raises(NotFoundError):
        SamplePageSource().fetch("https://example.com/nowhere")

    assert "genre" in SamplePageSource().fetch(GENRES_URL)


def test_web_scraping_demo_reports_crawl(fresh_queues):
    output = run_example("command.web_scraping")

    assert "Client: Crawl finished after 8 command(s)." in output

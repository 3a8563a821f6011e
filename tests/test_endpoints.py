"""
HTTP API tests: health, catalog browsing, running examples and queue inspection.
"""

import pytest

from app.config import settings
from app.exceptions import NotFoundError, ServiceValidationError
from patterns.catalog import EXAMPLES

from test_fixtures import client


def test_health_check():
    r = client.get("/health-check")
    assert r.status_code == 200
    body = r.json()
    assert body["status"] == "ok"
    assert body["service"] == settings.app_name
    assert body["examples"] == len(EXAMPLES)


def test_responses_carry_request_headers():
    r = client.get("/health-check")
    assert "X-Request-ID" in r.headers
    assert "X-Process-Time" in r.headers


# =============================================================================
# EXAMPLES
# =============================================================================


def test_list_examples():
    r = client.get("/examples")
    assert r.status_code == 200
    slugs = [e["slug"] for e in r.json()]
    assert len(slugs) == len(EXAMPLES)
    assert "command.document_processing" in slugs


@pytest.mark.parametrize("group", ["creational", "structural", "behavioral"])
def test_list_examples_by_group(group):
    r = client.get("/examples", params={"group": group})
    assert r.status_code == 200
    data = r.json()
    assert data
    assert {e["group"] for e in data} == {group}


def test_list_examples_invalid_group():
    r = client.get("/examples", params={"group": "architectural"})
    assert r.status_code == 422
    body = r.json()
    assert body["success"] is False
    assert body["error"]["code"] == "VALIDATION_ERROR"


def test_get_example():
    r = client.get("/examples/strategy.conceptual")
    assert r.status_code == 200
    body = r.json()
    assert body["pattern"] == "Strategy"
    assert body["group"] == "behavioral"
    assert body["module"] == "patterns.behavioral.strategy.conceptual"


def test_get_unknown_example_returns_error_envelope():
    r = client.get("/examples/strategy.nope")
    assert r.status_code == 404
    body = r.json()
    assert body["success"] is False
    assert body["error"]["code"] == "EXAMPLE_NOT_FOUND"
    assert body["error"]["details"] == {"slug": "strategy.nope"}
    assert "timestamp" in body


def test_domain_error_to_dict():
    error = NotFoundError("gone", details={"slug": "x"}, code="EXAMPLE_NOT_FOUND")

    assert error.to_dict() == {
        "message": "gone",
        "code": "EXAMPLE_NOT_FOUND",
        "details": {"slug": "x"},
    }
    assert ServiceValidationError().to_dict() == {"message": "Invalid input"}


def test_domain_error_envelope_matches_to_dict():
    r = client.get("/examples/strategy.nope")
    error = r.json()["error"]

    assert {k: error[k] for k in ("code", "message", "details")} == {
        "code": "EXAMPLE_NOT_FOUND",
        "message": "Example 'strategy.nope' not found",
        "details": {"slug": "strategy.nope"},
    }


def test_run_example_returns_output():
    r = client.post("/examples/strategy.conceptual/run")
    assert r.status_code == 200
    body = r.json()
    assert body["slug"] == "strategy.conceptual"
    assert "a,b,c,d,e" in body["output"]
    assert "e,d,c,b,a" in body["output"]


def test_run_unknown_example():
    r = client.post("/examples/nope.nope/run")
    assert r.status_code == 404


def test_run_example_twice_gives_same_output():
    first = client.post("/examples/composite.file_system/run").json()["output"]
    second = client.post("/examples/composite.file_system/run").json()["output"]
    assert first == second


# =============================================================================
# QUEUES
# =============================================================================


def test_queue_rows_after_running_document_demo():
    assert client.post("/examples/command.document_processing/run").status_code == 200

    r = client.get("/queues/document_processing/commands")
    assert r.status_code == 200
    rows = r.json()
    assert len(rows) >= 3
    assert all(row["queue"] == "document_processing" for row in rows)
    assert "PrintDocumentCommand" in rows[0]["command"]

    pending = client.get("/queues/document_processing/commands", params={"status": 0})
    assert pending.status_code == 200
    assert pending.json() == []


def test_queue_pagination():
    client.post("/examples/command.document_processing/run")

    r = client.get("/queues/document_processing/commands", params={"limit": 1})
    assert r.status_code == 200
    assert len(r.json()) == 1


def test_unknown_queue_is_empty():
    r = client.get("/queues/no_such_queue/commands")
    assert r.status_code == 200
    assert r.json() == []


@pytest.mark.parametrize("params", [{"status": 2}, {"status": "done"}, {"limit": 0}])
def test_queue_filters_are_validated(params):
    r = client.get("/queues/document_processing/commands", params=params)
    assert r.status_code == 422
    assert r.json()["error"]["code"] == "VALIDATION_ERROR"

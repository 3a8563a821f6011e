"""
Shared test fixtures and utilities for the design patterns test suite.

Holds the API test client, a per-test SQLite queue engine and a helper that
runs a catalog example and returns what it printed.
"""

from typing import Generator

import pytest
from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session, sessionmaker

from domain.models import init_database, make_engine
from patterns.behavioral.command.queue import CommandQueue
from services import CatalogService

# The module-level client does not run the lifespan, so create the table here
init_database()

from fastapi.testclient import TestClient  # noqa: E402
from main import app  # noqa: E402

client = TestClient(app)


def run_example(slug: str) -> str:
    """Run a catalog example and return its console output"""
    return CatalogService.run_example(slug)


@pytest.fixture(scope="function")
def queue_engine(tmp_path) -> Generator[Engine, None, None]:
    """
    A fresh SQLite database file per test.

    Yields:
        Engine: engine with the queue tables already created
    """
    engine = make_engine(f"sqlite:///{tmp_path / 'queue.sqlite'}")
    init_database(engine)
    try:
        yield engine
    finally:
        engine.dispose()


@pytest.fixture(scope="function")
def db_session(queue_engine: Engine) -> Generator[Session, None, None]:
    """Session on the per-test queue database"""
    session = sessionmaker(bind=queue_engine, future=True)()
    try:
        yield session
    finally:
        session.rollback()
        session.close()


@pytest.fixture(scope="function")
def fresh_queues() -> Generator[None, None, None]:
    """Forget process-wide queue instances before and after a test"""
    CommandQueue.reset_instances()
    yield
    CommandQueue.reset_instances()

"""
Catalog registry and CatalogService tests.
"""

import importlib

import pytest

from app.exceptions import NotFoundError
from domain.enums import PatternGroup
from patterns.catalog import EXAMPLES
from services import CatalogService

from test_fixtures import run_example


def test_catalog_lists_every_example():
    assert len(EXAMPLES) == 61
    counts = {group: 0 for group in PatternGroup}
    for entry in EXAMPLES.values():
        counts[entry.group] += 1
    assert counts == {
        PatternGroup.CREATIONAL: 22,
        PatternGroup.STRUCTURAL: 20,
        PatternGroup.BEHAVIORAL: 19,
    }


def test_queue_module_is_not_an_example():
    assert "command.queue" not in EXAMPLES


@pytest.mark.parametrize("slug", sorted(EXAMPLES))
def test_every_entry_points_at_a_runnable_module(slug):
    entry = EXAMPLES[slug]
    module = importlib.import_module(entry.module)

    assert callable(getattr(module, "main", None))
    assert entry.slug == slug


def test_list_examples_filters_by_group():
    entries = CatalogService.list_examples(PatternGroup.STRUCTURAL)

    assert entries
    assert all(entry.group is PatternGroup.STRUCTURAL for entry in entries)


def test_get_unknown_example():
    with pytest.raises(NotFoundError) as exc_info:
        CatalogService.get_example("singleton.nope")

    assert exc_info.value.code == "EXAMPLE_NOT_FOUND"


def test_run_example_captures_stdout(capsys):
    output = run_example("proxy.image_proxy")

    assert output.count("Loading image: photo.jpg") == 1
    assert capsys.readouterr().out == ""


@pytest.mark.parametrize(
    "slug,expected",
    [
        ("singleton.conceptual", "Singleton works, both variables contain the same instance."),
        ("flyweight.forest_simulation", "4 trees share 3 tree types."),
        ("iterator.csv_iterator", "1: ['Name', 'Age'"),
        ("state.order_state", "Order is new. Cancelling the order."),
    ],
)
def test_run_example_output(slug, expected):
    assert expected in run_example(slug)

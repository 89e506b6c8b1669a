"""Pytest fixtures for sunburst chart tests."""

import logging

import pytest


@pytest.fixture(autouse=True)
def reset_package_logger():
    """Drop handlers the CLI installs so they do not leak between tests."""
    yield
    package_logger = logging.getLogger("sunburst_chart")
    for handler in list(package_logger.handlers):
        package_logger.removeHandler(handler)
    package_logger.setLevel(logging.NOTSET)


@pytest.fixture
def flat_tree() -> dict:
    """Root with three leaves of values 1, 2, 1."""
    return {
        "name": "root",
        "value": 4,
        "children": [
            {"name": "a", "value": 1},
            {"name": "b", "value": 2},
            {"name": "c", "value": 1},
        ],
    }


@pytest.fixture
def nested_tree() -> dict:
    """Three levels: root -> (A -> A1, A2), (B -> B1)."""
    return {
        "name": "root",
        "value": 10,
        "children": [
            {
                "name": "A",
                "value": 6,
                "children": [
                    {"name": "A1", "value": 4},
                    {"name": "A2", "value": 2},
                ],
            },
            {
                "name": "B",
                "value": 4,
                "children": [{"name": "B1", "value": 4}],
            },
        ],
    }


@pytest.fixture
def chain_tree() -> dict:
    """Chain of single children: root -> mid -> leaf."""
    return {
        "name": "root",
        "value": 8,
        "children": [
            {"name": "mid", "value": 4, "children": [{"name": "leaf", "value": 2}]},
        ],
    }


@pytest.fixture
def invalid_child_tree() -> dict:
    """Root whose second child outweighs it."""
    return {
        "name": "root",
        "value": 10,
        "children": [
            {"name": "ok", "value": 5},
            {"name": "too-big", "value": 20},
        ],
    }

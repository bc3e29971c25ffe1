"""
Pytest fixtures for QueryMapper tests.
"""

import pytest

from querymapper.query.parser import FilterParser


@pytest.fixture
def sample_query() -> str:
    """Query string mixing filters and predefined parameters."""
    return "age-min=18&name-lk=John&sort=name"


@pytest.fixture
def sample_parser(sample_query: str) -> FilterParser:
    """Parser over the sample query."""
    return FilterParser("/users", sample_query)


@pytest.fixture
def empty_parser() -> FilterParser:
    """Parser without a query string."""
    return FilterParser("/users", None)


@pytest.fixture
def config_file(tmp_path):
    """Write a YAML settings file and return its path."""
    def _write(content: str) -> str:
        path = tmp_path / "settings.yaml"
        path.write_text(content)
        return str(path)
    return _write

"""Shared pytest fixtures for bindQL unit and integration tests."""
from __future__ import annotations

import pytest

from tests.fixtures import Record, three_records


@pytest.fixture()
def records() -> list[Record]:
    """Three records, as used by the multi-row and batch insert tests."""
    return three_records()

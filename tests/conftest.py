"""Pytest configuration and shared fixtures."""

from __future__ import annotations

import pytest

from epoch_archive import Codec


@pytest.fixture
def codec() -> Codec:
    """Codec at the default level."""
    return Codec()


@pytest.fixture
def sample_payload() -> bytes:
    """Sample binary payload for testing."""
    return bytes([1, 2, 3, 4, 5])


@pytest.fixture
def redundant_text() -> str:
    """Large, highly repetitive text that compresses well."""
    return "timestamp,value\n" + "1700000000.250,42.0\n" * 2000

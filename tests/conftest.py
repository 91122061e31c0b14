"""
Pytest configuration for reducekit.

Provides fixtures for:
- The sample driver names and records used by the lessons
- A settings cache reset so environment overrides take effect per test
"""

from __future__ import annotations

from typing import Dict, Generator, List

import pytest

from reducekit.config import get_settings


@pytest.fixture
def drivers() -> List[str]:
    return ["Bobby", "Sammy", "Sally", "Annette", "Sarah", "bobby"]


@pytest.fixture
def driver_records() -> List[Dict[str, str]]:
    return [
        {"name": "Bobby", "hometown": "Pittsburgh"},
        {"name": "Sammy", "hometown": "New York"},
        {"name": "Sally", "hometown": "Cleveland"},
        {"name": "Bobby", "hometown": "Tampa Bay"},
    ]


@pytest.fixture(autouse=True)
def fresh_settings() -> Generator[None, None, None]:
    """
    Clear the cached Settings before and after each test.

    Tests that monkeypatch environment variables rely on this to see them.
    """
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()

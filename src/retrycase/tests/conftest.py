"""Shared fixtures."""

from __future__ import annotations

import pytest

from retrycase import clear_settings_cache

from .support import RecordingHook, RecordingSleep


@pytest.fixture(autouse=True)
def clean_settings() -> object:
    """Re-read settings from the environment in every test."""
    clear_settings_cache()
    yield
    clear_settings_cache()


@pytest.fixture
def events() -> list[tuple[str, object]]:
    return []


@pytest.fixture
def sleep(events: list[tuple[str, object]]) -> RecordingSleep:
    return RecordingSleep(events=events)


@pytest.fixture
def hook(events: list[tuple[str, object]]) -> RecordingHook:
    return RecordingHook(events=events)

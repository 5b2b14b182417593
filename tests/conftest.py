"""Shared fixtures for hrquery tests."""

from __future__ import annotations

from typing import Any

import pytest


class RecordingGetter:
    """HttpGetter double that records requested paths."""

    def __init__(self, response: Any = None) -> None:
        self.response = response if response is not None else {'activities-heart': []}
        self.paths: list[str] = []

    def get(self, path: str) -> Any:
        self.paths.append(path)
        return self.response


@pytest.fixture
def getter() -> RecordingGetter:
    return RecordingGetter(response={'activities-heart': [{'dateTime': '2018-01-01'}]})

"""Shared fixtures: config, fake OpenAI client, scripted line editor."""

from __future__ import annotations

import json
from types import SimpleNamespace
from typing import Any
from unittest.mock import MagicMock

import pytest

from ata.schemas import Config


def make_raw_response(payload: Any, status_code: int = 200):
    """Stand-in for the SDK's raw response: only .text and .status_code are read."""
    text = payload if isinstance(payload, str) else json.dumps(payload)
    return SimpleNamespace(text=text, status_code=status_code)


def make_client(payload: Any = None, *, side_effect: Any = None) -> MagicMock:
    client = MagicMock()
    create = client.completions.with_raw_response.create
    if side_effect is not None:
        create.side_effect = side_effect
    else:
        create.return_value = make_raw_response(payload)
    return client


class ScriptedSession:
    """Line editor double: returns queued lines, then raises EOFError."""

    def __init__(self, lines: list[Any]):
        self._lines = list(lines)
        self.labels: list[str] = []

    def prompt(self, label: str) -> str:
        self.labels.append(label)
        if not self._lines:
            raise EOFError
        item = self._lines.pop(0)
        if isinstance(item, BaseException):
            raise item
        return item


@pytest.fixture
def config() -> Config:
    return Config(api_key="sk-test", model="text-davinci-003", max_tokens=100, temperature=0)


@pytest.fixture
def config_file(tmp_path):
    path = tmp_path / "ata.toml"
    path.write_text(
        'api_key = "sk-test"\n'
        'model = "text-davinci-003"\n'
        "max_tokens = 100\n"
        "temperature = 1\n",
        encoding="utf-8",
    )
    return path

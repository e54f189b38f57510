# Copyright (c) 2025-2026 provide.io llc
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Pytest configuration and fixtures."""

from __future__ import annotations

from collections.abc import Iterator

import pyte
import pytest
import structlog

from termout import api
from termout.sinks import BufferSink
from termout.terminal import TerminalOutput


@pytest.fixture(autouse=True)
def _isolate_environment(monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    """Keep TERMOUT_* variables, structlog config and the shared terminal per-test."""
    monkeypatch.delenv("TERMOUT_LOG_LEVEL", raising=False)
    monkeypatch.delenv("TERMOUT_INVALID_CODE_POINTS", raising=False)
    api.reset_terminal()
    yield
    api.reset_terminal()
    structlog.reset_defaults()


@pytest.fixture
def sink() -> BufferSink:
    """In-memory sink capturing every write."""
    return BufferSink()


@pytest.fixture
def terminal(sink: BufferSink) -> TerminalOutput:
    """TerminalOutput writing to the buffer sink with the default policy."""
    return TerminalOutput(sink)


@pytest.fixture
def mock_screen() -> pyte.Screen:
    """Emulated 80x24 VT100 screen."""
    return pyte.Screen(80, 24)


@pytest.fixture
def mock_stream(mock_screen: pyte.Screen) -> pyte.Stream:
    """pyte Stream feeding the emulated screen."""
    return pyte.Stream(mock_screen)

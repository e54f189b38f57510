# Copyright (c) 2025-2026 provide.io llc
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Tests for the process-wide terminal functions."""

from __future__ import annotations

import io
from contextlib import redirect_stdout

import pytest

import termout
from termout import api
from termout.sinks import BufferSink, StdoutSink
from termout.terminal import TerminalOutput


@pytest.fixture
def captured() -> BufferSink:
    sink = BufferSink()
    api.set_terminal(TerminalOutput(sink))
    return sink


def test_default_terminal_targets_stdout() -> None:
    terminal = api.get_terminal()
    assert isinstance(terminal.sink, StdoutSink)
    assert api.get_terminal() is terminal


def test_set_terminal_returns_previous() -> None:
    first = api.get_terminal()
    replacement = TerminalOutput(BufferSink())

    assert api.set_terminal(replacement) is first
    assert api.get_terminal() is replacement


def test_module_functions_draw_on_shared_terminal(captured: BufferSink) -> None:
    termout.clear_screen()
    termout.move_cursor(2, 1)
    termout.put_code_point(0x20AC)
    termout.put_char("!")
    termout.put_byte(0x2A)
    termout.newline()
    termout.flush()

    assert captured.getvalue() == b"\x1b[2J\x1b[H\x1b[2;3H\xe2\x82\xac!*\r\n"
    assert captured.flush_count == 1


def test_module_try_put_code_point(captured: BufferSink) -> None:
    assert not termout.try_put_code_point(0x110000).ok
    assert termout.try_put_code_point(0x41).ok
    assert captured.getvalue() == b"A"


def test_reset_terminal_rebuilds_from_settings(monkeypatch: pytest.MonkeyPatch) -> None:
    api.set_terminal(TerminalOutput(BufferSink()))
    api.reset_terminal()
    monkeypatch.setenv("TERMOUT_INVALID_CODE_POINTS", "raise")

    with pytest.raises(termout.InvalidCodePointError):
        termout.put_code_point(-1)


def test_stdout_end_to_end(capsysbinary: pytest.CaptureFixture[bytes]) -> None:
    termout.move_cursor(0, 0)
    termout.put_code_point(0x1F600)
    termout.flush()

    assert capsysbinary.readouterr().out == b"\x1b[1;1H\xf0\x9f\x98\x80"


def test_module_functions_with_text_only_stdout() -> None:
    out = io.StringIO()
    with redirect_stdout(out):
        termout.move_cursor(0, 0)
        termout.put_code_point(0x41)
        termout.newline()
        termout.flush()

    assert out.getvalue() == "\x1b[1;1HA\r\n"

# Copyright (c) 2025-2026 provide.io llc
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Process-wide terminal output.

Module-level functions draw on one shared TerminalOutput bound to stdout,
created on first use. set_terminal() swaps it, e.g. for a BufferSink in tests.
"""

from __future__ import annotations

from termout.logging import get_logger
from termout.terminal.encoding import EncodeResult
from termout.terminal.output import TerminalOutput

logger = get_logger(__name__)

_terminal: TerminalOutput | None = None


def get_terminal() -> TerminalOutput:
    """Return the process-wide TerminalOutput, creating it if needed."""
    global _terminal
    if _terminal is None:
        _terminal = TerminalOutput()
    return _terminal


def set_terminal(terminal: TerminalOutput) -> TerminalOutput | None:
    """Replace the process-wide TerminalOutput.

    Returns:
        The previous instance, or None if none had been created
    """
    global _terminal
    previous = _terminal
    _terminal = terminal
    logger.debug("terminal_replaced", sink=type(terminal.sink).__name__)
    return previous


def reset_terminal() -> None:
    """Drop the shared instance; the next call rebuilds it from settings."""
    global _terminal
    _terminal = None


def move_cursor(x: int, y: int) -> None:
    get_terminal().move_cursor(x, y)


def clear_screen() -> None:
    get_terminal().clear_screen()


def put_code_point(ch: int) -> None:
    get_terminal().put_code_point(ch)


def try_put_code_point(ch: int) -> EncodeResult:
    return get_terminal().try_put_code_point(ch)


def put_char(c: str) -> None:
    get_terminal().put_char(c)


def put_byte(c: int) -> None:
    get_terminal().put_byte(c)


def newline() -> None:
    get_terminal().newline()


def flush() -> None:
    get_terminal().flush()

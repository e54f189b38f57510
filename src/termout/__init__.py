# Copyright (c) 2025-2026 provide.io llc
# SPDX-License-Identifier: AGPL-3.0-or-later

"""termout - ANSI terminal output primitives."""

from __future__ import annotations

from termout.api import (
    clear_screen,
    flush,
    get_terminal,
    move_cursor,
    newline,
    put_byte,
    put_char,
    put_code_point,
    reset_terminal,
    set_terminal,
    try_put_code_point,
)
from termout.errors import InvalidCodePointError, TerminalOutputError
from termout.settings import InvalidCodePointPolicy, Settings
from termout.sinks import BufferSink, LockedSink, OutputSink, StdoutSink
from termout.terminal import EncodeResult, TerminalOutput, encode_code_point

__all__ = [
    "BufferSink",
    "EncodeResult",
    "InvalidCodePointError",
    "InvalidCodePointPolicy",
    "LockedSink",
    "OutputSink",
    "Settings",
    "StdoutSink",
    "TerminalOutput",
    "TerminalOutputError",
    "clear_screen",
    "encode_code_point",
    "flush",
    "get_terminal",
    "move_cursor",
    "newline",
    "put_byte",
    "put_char",
    "put_code_point",
    "reset_terminal",
    "set_terminal",
    "try_put_code_point",
]

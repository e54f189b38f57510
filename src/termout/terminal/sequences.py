# Copyright (c) 2025-2026 provide.io llc
# SPDX-License-Identifier: AGPL-3.0-or-later

"""ANSI/VT100 control sequence builders."""

from __future__ import annotations

from termout.constants import CLEAR_SCREEN, CSI, CURSOR_HOME

__all__ = ["clear_and_home", "cursor_position"]


def cursor_position(x: int, y: int) -> bytes:
    """Build the CUP sequence for zero-based column x and row y.

    The terminal expects one-based row;column, so both are shifted by one.
    Out-of-range values are passed through for the terminal to clamp.
    """
    return CSI + f"{y + 1};{x + 1}H".encode("ascii")


def clear_and_home() -> bytes:
    """Erase the whole screen, then home the cursor."""
    return CLEAR_SCREEN + CURSOR_HOME

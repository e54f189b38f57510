# Copyright (c) 2025-2026 provide.io llc
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Exception hierarchy for terminal output."""

from __future__ import annotations


class TerminalOutputError(Exception):
    """Base exception for terminal output operations."""

    pass


class InvalidCodePointError(TerminalOutputError, ValueError):
    """Code point outside the Unicode range [0, 0x10FFFF]."""

    def __init__(self, code_point: int) -> None:
        self.code_point = code_point
        super().__init__(f"invalid code point: {code_point:#x}")

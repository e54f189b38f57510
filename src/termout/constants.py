# Copyright (c) 2025-2026 provide.io llc
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Shared constants for termout."""

from __future__ import annotations

ESC = b"\x1b"
CSI = ESC + b"["

CLEAR_SCREEN = CSI + b"2J"
CURSOR_HOME = CSI + b"H"
CRLF = b"\r\n"

# Highest Unicode scalar value
MAX_CODE_POINT = 0x10FFFF

# Upper bounds of the 1, 2 and 3 byte UTF-8 ranges
MAX_ONE_BYTE = 0x7F
MAX_TWO_BYTE = 0x7FF
MAX_THREE_BYTE = 0xFFFF

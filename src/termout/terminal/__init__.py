# Copyright (c) 2025-2026 provide.io llc
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Terminal output layer."""

from __future__ import annotations

from termout.terminal.encoding import EncodeResult, encode_code_point, encode_result, is_valid_code_point
from termout.terminal.output import TerminalOutput
from termout.terminal.sequences import clear_and_home, cursor_position

__all__ = [
    "EncodeResult",
    "TerminalOutput",
    "clear_and_home",
    "cursor_position",
    "encode_code_point",
    "encode_result",
    "is_valid_code_point",
]

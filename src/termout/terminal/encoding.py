# Copyright (c) 2025-2026 provide.io llc
# SPDX-License-Identifier: AGPL-3.0-or-later

"""UTF-8 encoding of single code points.

The encoder works on the integer directly instead of going through
``chr(ch).encode("utf-8")``: Python refuses to encode lone surrogates,
while terminal output writes them like any other three-byte value.
"""

from __future__ import annotations

from dataclasses import dataclass

from termout.constants import MAX_CODE_POINT, MAX_ONE_BYTE, MAX_THREE_BYTE, MAX_TWO_BYTE

__all__ = ["EncodeResult", "encode_code_point", "encode_result", "is_valid_code_point"]


@dataclass(frozen=True, slots=True)
class EncodeResult:
    """Outcome of encoding one code point.

    ``data`` is empty exactly when the code point was out of range.
    """

    code_point: int
    data: bytes = b""

    @property
    def ok(self) -> bool:
        return bool(self.data)


def is_valid_code_point(ch: int) -> bool:
    """Return True if ch lies in [0, 0x10FFFF]."""
    return 0 <= ch <= MAX_CODE_POINT


def encode_code_point(ch: int) -> bytes:
    """Encode a code point as 1-4 UTF-8 bytes.

    Args:
        ch: Unicode code point

    Returns:
        Encoded bytes, or b"" when ch is negative or above 0x10FFFF
    """
    if ch < 0:
        return b""
    if ch <= MAX_ONE_BYTE:
        return bytes((ch,))
    if ch <= MAX_TWO_BYTE:
        return bytes((0xC0 | (ch >> 6), 0x80 | (ch & 0x3F)))
    if ch <= MAX_THREE_BYTE:
        return bytes(
            (
                0xE0 | (ch >> 12),
                0x80 | ((ch >> 6) & 0x3F),
                0x80 | (ch & 0x3F),
            )
        )
    if ch <= MAX_CODE_POINT:
        return bytes(
            (
                0xF0 | (ch >> 18),
                0x80 | ((ch >> 12) & 0x3F),
                0x80 | ((ch >> 6) & 0x3F),
                0x80 | (ch & 0x3F),
            )
        )
    return b""


def encode_result(ch: int) -> EncodeResult:
    """Encode ch and wrap the outcome in an EncodeResult."""
    return EncodeResult(code_point=ch, data=encode_code_point(ch))

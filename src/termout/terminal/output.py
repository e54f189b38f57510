# Copyright (c) 2025-2026 provide.io llc
# SPDX-License-Identifier: AGPL-3.0-or-later

"""TerminalOutput: cursor, clear, character and flush primitives."""

from __future__ import annotations

from typing import TYPE_CHECKING

from termout.constants import CRLF
from termout.errors import InvalidCodePointError
from termout.logging import ensure_logging, get_logger
from termout.settings import InvalidCodePointPolicy, Settings
from termout.sinks.stdout import StdoutSink
from termout.terminal.encoding import EncodeResult, encode_result
from termout.terminal.sequences import clear_and_home, cursor_position

if TYPE_CHECKING:
    from termout.sinks.base import OutputSink

logger = get_logger(__name__)


class TerminalOutput:
    """Translate terminal operations into ANSI bytes on a sink.

    Nothing here flushes except flush(), and nothing is locked; wrap the
    sink in LockedSink when several threads draw on the same terminal.

    If the application has not configured structlog yet, constructing a
    TerminalOutput configures it globally (stderr, TERMOUT_LOG_LEVEL) so
    that log lines never reach the terminal's stdout. Call
    configure_logging() or structlog.configure() first to keep your own.
    """

    def __init__(
        self,
        sink: OutputSink | None = None,
        *,
        invalid_code_points: InvalidCodePointPolicy | str | None = None,
        settings: Settings | None = None,
    ) -> None:
        """Initialize terminal output.

        Args:
            sink: Destination for bytes (defaults to StdoutSink)
            invalid_code_points: Policy for out-of-range code points;
                defaults to the policy in settings
            settings: Settings to read defaults from; loaded from the
                environment only when a default is needed
        """
        if invalid_code_points is None:
            if settings is None:
                settings = Settings()
            invalid_code_points = settings.invalid_code_points
        ensure_logging(settings)
        self.sink = sink if sink is not None else StdoutSink()
        self.invalid_code_points = InvalidCodePointPolicy(invalid_code_points)

    def move_cursor(self, x: int, y: int) -> None:
        """Move the cursor to zero-based column x, row y."""
        self.sink.write(cursor_position(x, y))

    def clear_screen(self) -> None:
        """Erase the visible screen and home the cursor."""
        self.sink.write(clear_and_home())

    def try_put_code_point(self, ch: int) -> EncodeResult:
        """Write ch as UTF-8 if it is a valid code point.

        Never raises for out-of-range input; inspect the result's ``ok``.
        """
        result = encode_result(ch)
        if result.ok:
            self.sink.write(result.data)
        return result

    def put_code_point(self, ch: int) -> None:
        """Write ch as UTF-8.

        Out-of-range values write nothing. Under the "ignore" policy the call
        returns silently; under "raise" it raises InvalidCodePointError.
        """
        result = self.try_put_code_point(ch)
        if result.ok:
            return
        if self.invalid_code_points is InvalidCodePointPolicy.RAISE:
            raise InvalidCodePointError(ch)
        logger.debug("code_point_dropped", code_point=ch)

    def put_char(self, c: str) -> None:
        """Write a single-character string."""
        if len(c) != 1:
            raise ValueError(f"put_char expects a single character, got {len(c)}")
        self.put_code_point(ord(c))

    def put_byte(self, c: int) -> None:
        """Write one raw byte without UTF-8 interpretation."""
        if not 0 <= c <= 0xFF:
            raise ValueError(f"byte out of range: {c}")
        self.sink.write(bytes((c,)))

    def newline(self) -> None:
        """Write CR LF."""
        self.sink.write(CRLF)

    def flush(self) -> None:
        self.sink.flush()

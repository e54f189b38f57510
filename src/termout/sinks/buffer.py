# Copyright (c) 2025-2026 provide.io llc
# SPDX-License-Identifier: AGPL-3.0-or-later

"""In-memory sink."""

from __future__ import annotations

from termout.sinks.base import OutputSink


class BufferSink(OutputSink):
    """Capture written bytes in memory.

    Used to render off-screen and by tests to inspect exactly what a
    TerminalOutput emitted.
    """

    def __init__(self) -> None:
        self._buffer = bytearray()
        self.writes: list[bytes] = []
        self.flush_count = 0

    def write(self, data: bytes) -> None:
        self._buffer.extend(data)
        self.writes.append(bytes(data))

    def flush(self) -> None:
        self.flush_count += 1

    def getvalue(self) -> bytes:
        return bytes(self._buffer)

    def clear(self) -> None:
        """Drop captured bytes and reset counters."""
        self._buffer.clear()
        self.writes.clear()
        self.flush_count = 0

# Copyright (c) 2025-2026 provide.io llc
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Sink backed by the process standard output."""

from __future__ import annotations

import sys
from typing import BinaryIO

from termout.sinks.base import OutputSink


class StdoutSink(OutputSink):
    """Write bytes to stdout, or to an explicit binary stream.

    Without an explicit stream, ``sys.stdout`` is looked up on every call,
    so redirecting it (pytest capture, contextlib.redirect_stdout) is honoured.
    A text-only stdout such as ``io.StringIO`` receives the bytes decoded as
    UTF-8; bytes that do not decode are kept as surrogate escapes.
    """

    def __init__(self, stream: BinaryIO | None = None) -> None:
        self._stream = stream

    def write(self, data: bytes) -> None:
        if self._stream is not None:
            self._stream.write(data)
            return
        buffer = getattr(sys.stdout, "buffer", None)
        if buffer is not None:
            buffer.write(data)
        else:
            # Each write holds whole sequences or code points, so it decodes alone
            sys.stdout.write(data.decode("utf-8", "surrogateescape"))

    def flush(self) -> None:
        if self._stream is not None:
            self._stream.flush()
        else:
            sys.stdout.flush()

# Copyright (c) 2025-2026 provide.io llc
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Lock-serialised sink wrapper for multi-threaded callers."""

from __future__ import annotations

import contextlib
import threading
from typing import TYPE_CHECKING

from termout.sinks.base import OutputSink

if TYPE_CHECKING:
    from collections.abc import Iterator


class LockedSink(OutputSink):
    """Serialise access to an inner sink.

    Each write and flush is atomic. A multi-call visual update (move, draw,
    flush) must run inside hold() so no other thread's bytes land inside an
    escape sequence or split a UTF-8 encoding.
    """

    def __init__(self, inner: OutputSink) -> None:
        self._inner = inner
        self._lock = threading.RLock()

    @property
    def inner(self) -> OutputSink:
        return self._inner

    def write(self, data: bytes) -> None:
        with self._lock:
            self._inner.write(data)

    def flush(self) -> None:
        with self._lock:
            self._inner.flush()

    @contextlib.contextmanager
    def hold(self) -> Iterator[None]:
        """Keep the lock for the duration of the block."""
        with self._lock:
            yield

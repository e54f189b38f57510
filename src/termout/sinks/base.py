# Copyright (c) 2025-2026 provide.io llc
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Abstract base class for output sinks."""

from __future__ import annotations

from abc import ABC, abstractmethod


class OutputSink(ABC):
    """Destination for raw terminal bytes (stdout, a buffer, a pipe)."""

    @abstractmethod
    def write(self, data: bytes) -> None:
        """Write raw bytes.

        May buffer. Bytes written here are not guaranteed to reach the
        device until flush() is called.

        Args:
            data: Bytes to write, already encoded

        Raises:
            OSError: If the underlying stream fails (e.g. broken pipe)
        """

    @abstractmethod
    def flush(self) -> None:
        """Deliver any buffered bytes to the underlying device.

        Raises:
            OSError: If the underlying stream fails
        """

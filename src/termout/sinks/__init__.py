# Copyright (c) 2025-2026 provide.io llc
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Byte sinks that terminal output is written to."""

from __future__ import annotations

from termout.sinks.base import OutputSink
from termout.sinks.buffer import BufferSink
from termout.sinks.locked import LockedSink
from termout.sinks.stdout import StdoutSink

__all__ = ["BufferSink", "LockedSink", "OutputSink", "StdoutSink"]

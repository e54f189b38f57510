# Copyright (c) 2025-2026 provide.io llc
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Application settings."""

from __future__ import annotations

from enum import StrEnum

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class InvalidCodePointPolicy(StrEnum):
    """What put_code_point does with a value outside [0, 0x10FFFF]."""

    IGNORE = "ignore"
    RAISE = "raise"


class LoggingSettings(BaseSettings):
    """The subset of settings logging needs; loads even if other TERMOUT_ vars are bad."""

    log_level: str = "WARNING"

    model_config = SettingsConfigDict(
        env_prefix="TERMOUT_",
        extra="ignore",
    )


class Settings(LoggingSettings):
    invalid_code_points: InvalidCodePointPolicy = Field(
        default=InvalidCodePointPolicy.IGNORE,
        description="ignore: drop silently; raise: InvalidCodePointError",
    )

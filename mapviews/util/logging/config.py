# SPDX-License-Identifier: GPLv3-or-later
# Copyright © 2025 mapviews Rui Pinheiro

import re

from collections.abc import Mapping
from pathlib import Path
from typing import Any

from frozendict import frozendict
from pydantic import DirectoryPath, Field, field_validator

from ..config.models import BaseConfigModel
from ..helpers.frozendict import FrozenDict
from .levels import LoggingLevel


class LoggingLevels(BaseConfigModel):
    file: LoggingLevel = Field(default=LoggingLevel.OFF, description="Log level for log file output")
    tty: LoggingLevel = Field(default=LoggingLevel.NOTSET, description="Log level for TTY output")
    root: LoggingLevel = Field(default=LoggingLevel.NOTSET, description="Log level for the root log handler")
    default: LoggingLevel = Field(default=LoggingLevel.WARNING, description="Default log level for loggers not matched by 'custom'")

    custom: FrozenDict[re.Pattern[str], LoggingLevel] = Field(
        default_factory=frozendict,
        description="Custom logging levels, where the key is a regex matched against the logger name.",
    )

    @field_validator("custom", mode="before")
    @classmethod
    def compile_custom_level_patterns(cls, value: Any) -> frozendict[re.Pattern[str], Any]:
        if not isinstance(value, Mapping):
            msg = f"Custom logging levels must be a mapping, got {type(value)}"
            raise TypeError(msg)

        levels: dict[re.Pattern[str], Any] = {}
        for pattern, level in value.items():
            if isinstance(pattern, str):
                pattern = re.compile(pattern, re.IGNORECASE)  # noqa: PLW2901
            if not isinstance(pattern, re.Pattern):
                msg = f"Custom logging level keys must be str or compiled regex patterns, got {type(pattern)}"
                raise TypeError(msg)
            levels[pattern] = level

        return frozendict(levels)


class LoggingConfig(BaseConfigModel):
    dir: DirectoryPath = Field(default_factory=Path.cwd, description="Log file directory")
    levels: LoggingLevels = Field(default_factory=LoggingLevels, description="Logging levels configuration")
    rich: bool = Field(default=True, description="Use rich for TTY output and tracebacks")

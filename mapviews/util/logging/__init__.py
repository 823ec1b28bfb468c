# SPDX-License-Identifier: GPLv3-or-later
# Copyright © 2025 mapviews Rui Pinheiro

# Template string support for log messages
from . import tstring
from .config import LoggingConfig, LoggingLevels
from .levels import LoggingLevel
from .logger import LoggableProtocol, Logger, getLogger
from .manager import LoggingManager


__all__ = [
    "LoggableProtocol",
    "Logger",
    "LoggingConfig",
    "LoggingLevel",
    "LoggingLevels",
    "LoggingManager",
    "getLogger",
    "tstring",
]

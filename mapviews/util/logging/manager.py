# SPDX-License-Identifier: GPLv3-or-later
# Copyright © 2025 mapviews Rui Pinheiro

"""Process-wide logging setup.

Configures the file and TTY handlers, log levels and (optionally) rich output from a :class:`LoggingConfig`.
"""

import logging
import sys

from typing import TYPE_CHECKING, Any, ClassVar, Self
from typing import cast as typing_cast

from ..helpers import script_info
from .config import LoggingConfig, LoggingLevels
from .formatters import ConditionalFormatter, HandlerFilter


if TYPE_CHECKING:
    from .levels import LoggingLevel


class LoggingManager:
    _instance: ClassVar[LoggingManager | None] = None

    initialized: bool
    config: LoggingConfig
    fh: logging.Handler | None
    ch: logging.Handler | None
    managed: set[str]

    def __new__(cls, *args, **kwargs) -> Self:
        if (instance := cls._instance) is None:
            instance = cls._instance = super().__new__(cls, *args, **kwargs)
            instance.initialized = False
            instance.fh = None
            instance.ch = None
            instance.managed = set()
        return typing_cast("Self", instance)

    def initialize(self, config: LoggingConfig | dict[str, Any]) -> None:
        if not isinstance(config, LoggingConfig):
            config = LoggingConfig.model_validate(config)

        if self.initialized:
            msg = f"Must not initialise {type(self).__name__} twice"
            raise RuntimeError(msg)
        self.initialized = True

        self.config = config
        self.log_file_path = config.dir / script_info.get_log_file_name()

        self._configure_root_logger()
        self._configure_file_handler()
        self._configure_tty_handler()
        self._configure_exception_handler()
        self._configure_custom_logger_levels()

    def _configure_root_logger(self) -> None:
        logging.captureWarnings(capture=True)
        logging.root.setLevel(self.config.levels.root.value)

    def _configure_file_handler(self) -> None:
        self.fh = None
        if not self.config.levels.file.enabled:
            return

        self.log_file_path.parent.mkdir(parents=True, exist_ok=True)

        self.fh = logging.FileHandler(self.log_file_path, mode="w")
        self.fh.setLevel(self.config.levels.file.value)
        self.fh.setFormatter(ConditionalFormatter("%(asctime)s [%(levelname)s:%(name)s] %(message)s"))
        self.fh.addFilter(HandlerFilter("file"))
        logging.root.addHandler(self.fh)

    def _configure_tty_handler(self) -> None:
        self.ch = None
        if not self.config.levels.tty.enabled:
            return

        if self.config.rich:
            from rich.console import Console
            from rich.logging import RichHandler

            self.ch = RichHandler(console=Console(stderr=True), rich_tracebacks=True, show_time=False)
        else:
            self.ch = logging.StreamHandler(sys.stderr)
            self.ch.setFormatter(ConditionalFormatter("[%(levelname).1s:%(name)s] %(message)s"))

        self.ch.setLevel(self.config.levels.tty.value)
        self.ch.addFilter(HandlerFilter("tty"))

        # pytest captures log records itself
        if not script_info.is_unit_test():
            logging.root.addHandler(self.ch)

    def _configure_exception_handler(self) -> None:
        if self.config.rich and not script_info.is_unit_test():
            from rich.traceback import install

            install(extra_lines=1, show_locals=False, word_wrap=False)

    def apply_logging_level(self, logger: logging.Logger) -> None:
        # Explicitly configured loggers are left alone
        if logger.level != logging.NOTSET:
            return

        # The longest matching custom pattern wins, otherwise the default level applies
        level: LoggingLevel = self.config.levels.default
        matched_len = 0

        for pattern, custom_level in self.config.levels.custom.items():
            if (match := pattern.match(logger.name)) is not None and len(match.group(0)) > matched_len:
                level = custom_level
                matched_len = len(match.group(0))

        if level == logging.NOTSET:
            return

        logger.setLevel(level.value if level.enabled else logging.CRITICAL + 1)
        self.managed.add(logger.name)

    def configure_levels(self, levels: LoggingLevels) -> None:
        """Replace the active logging levels without reinstalling any handlers.

        Loggers whose level was set by this manager are reset and re-evaluated against ``levels``.
        """
        if not self.initialized:
            msg = f"{type(self).__name__} must be initialised before its levels can be changed"
            raise RuntimeError(msg)

        self.config = self.config.model_copy(update={"levels": levels})

        for name in self.managed:
            logging.getLogger(name).setLevel(logging.NOTSET)
        self.managed.clear()

        logging.root.setLevel(levels.root.value)
        if self.fh is not None:
            self.fh.setLevel(levels.file.value)
        if self.ch is not None:
            self.ch.setLevel(levels.tty.value)

        self._configure_custom_logger_levels()

    def _configure_custom_logger_levels(self) -> None:
        for name in list(logging.root.manager.loggerDict):
            logger = logging.getLogger(name)
            self.apply_logging_level(logger)

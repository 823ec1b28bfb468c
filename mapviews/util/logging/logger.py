# SPDX-License-Identifier: GPLv3-or-later
# Copyright © 2025 mapviews Rui Pinheiro

import logging

from abc import abstractmethod
from typing import Any, Protocol, override, runtime_checkable


@runtime_checkable
class LoggableProtocol(Protocol):
    @property
    @abstractmethod
    def log(self) -> logging.Logger:
        msg = "Subclasses must implement log property"
        raise NotImplementedError(msg)


class Logger(logging.Logger):
    @override
    def isEnabledFor(self, level: int, *, handler: str | None = None) -> bool:
        if handler is None:
            return super().isEnabledFor(level)
        elif handler == "tty":
            return self.isEnabledForTty(level)
        elif handler == "file":
            return self.isEnabledForFile(level)
        else:
            msg = f"Unknown handler: {handler}. Expected 'tty' or 'file'."
            raise ValueError(msg)

    def isEnabledForTty(self, level: int) -> bool:  # noqa: N802 matches isEnabledFor
        from .manager import LoggingManager

        ch = getattr(LoggingManager(), "ch", None)
        if ch is None or ch.level > level:
            return False
        return super().isEnabledFor(level)

    def isEnabledForFile(self, level: int) -> bool:  # noqa: N802 matches isEnabledFor
        from .manager import LoggingManager

        fh = getattr(LoggingManager(), "fh", None)
        if fh is None or fh.level > level:
            return False
        return super().isEnabledFor(level)


logging.setLoggerClass(Logger)


def getLogger(obj: object, parent: Any = None, name: str | None = None) -> Logger:  # noqa: N802 matches logging.getLogger
    """Return a :class:`Logger` for ``obj``.

    The logger name is ``name`` if given, ``obj`` itself if it is a string, or the name of ``obj``'s class.
    If ``parent`` is a logger or a loggable object, the result is a child of the parent's logger.
    """
    if name is None:
        name = obj if isinstance(obj, str) else type(obj).__name__

    if isinstance(parent, logging.Logger):
        logger = parent.getChild(name)
    elif isinstance(parent, LoggableProtocol):
        logger = parent.log.getChild(name)
    else:
        logger = logging.getLogger(name)

    if not isinstance(logger, Logger):
        msg = f"Expected a Logger instance, got: {type(logger)}"
        raise TypeError(msg)

    from .manager import LoggingManager

    manager = LoggingManager()
    if manager.initialized:
        manager.apply_logging_level(logger)

    return logger

# SPDX-License-Identifier: GPLv3-or-later
# Copyright © 2025 mapviews Rui Pinheiro

from typing import ClassVar

from ..helpers.script_info import PACKAGE_NAME
from ..logging import Logger, getLogger


class LoggableMixin:
    """Mixin that adds a ``log`` property to a class.

    Loggers are named after the class and nested under the ``mapviews`` logger, and are shared by all instances.
    """

    __log_name__: ClassVar[str | None] = None

    @classmethod
    def _get_class_log(cls) -> Logger:
        log = cls.__dict__.get("_LoggableMixin__log")
        if log is None:
            log = getLogger(cls, parent=getLogger(PACKAGE_NAME), name=cls.__log_name__ or cls.__name__)
            setattr(cls, "_LoggableMixin__log", log)  # noqa: B010
        return log

    @property
    def log(self) -> Logger:
        return type(self)._get_class_log()

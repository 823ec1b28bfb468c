# SPDX-License-Identifier: GPLv3-or-later
# Copyright © 2025 mapviews Rui Pinheiro

import contextlib
import functools

from typing import TYPE_CHECKING, Any

import yaml

from ..helpers import script_info
from .models import BaseConfigModel


if TYPE_CHECKING:
    from collections.abc import Iterator


class ConfigManager[C: BaseConfigModel]:
    """Holds the process-wide configuration.

    Until :meth:`load` is called, attribute access falls through to a default-constructed ``config_class`` instance.
    """

    def __init__(self, config_class: type[C]) -> None:
        self.config_class = config_class
        self._config: C | None = None

    @functools.cached_property
    def default(self) -> C:
        return self.config_class()

    @property
    def loaded(self) -> bool:
        return self._config is not None

    @property
    def config(self) -> C:
        if self._config is None:
            return self.default
        return self._config

    def load(self, config: str | dict[str, Any] | C) -> C:
        if isinstance(config, str):
            config = yaml.load(config, yaml.SafeLoader) or {}  # noqa: S506 SafeLoader

        if isinstance(config, self.config_class):
            self._config = config
        elif isinstance(config, dict):
            self._config = self.config_class.model_validate(config)
        else:
            msg = f"Expected {self.config_class.__name__}, dict or YAML string, got {type(config).__name__}"
            raise TypeError(msg)

        self._init_logging_manager(self._config)
        return self._config

    def _init_logging_manager(self, config: C) -> None:
        from ..logging import LoggingConfig, LoggingManager

        # Only an explicitly provided logging section is applied
        if "logging" not in config.model_fields_set:
            return
        logging_config = getattr(config, "logging", None)
        if not isinstance(logging_config, LoggingConfig):
            return

        manager = LoggingManager()
        if manager.initialized:
            manager.configure_levels(logging_config.levels)
        else:
            manager.initialize(logging_config)

    def reset(self) -> None:
        if not script_info.is_unit_test():
            msg = "Cannot reset configuration outside of unit tests"
            raise RuntimeError(msg)
        self._config = None

    @contextlib.contextmanager
    def override(self, **fields: Any) -> Iterator[C]:
        previous = self._config
        self._config = self.config.model_copy(update=fields)
        try:
            yield self._config
        finally:
            self._config = previous

    def __getattr__(self, name: str) -> Any:
        if name.startswith("_"):
            raise AttributeError(name)
        return getattr(self.config, name)

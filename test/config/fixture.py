# SPDX-License-Identifier: GPLv3-or-later
# Copyright © 2025 mapviews Rui Pinheiro

from typing import Any

import pytest

from mapviews.config import CFG, ViewsConfig
from mapviews.util.logging import LoggingManager


class ConfigFixture:
    def __init__(self):
        self.config = CFG
        self.logging_levels = LoggingManager().config.levels

    def create(self, data: dict[str, Any] | str) -> ViewsConfig:
        """Reset and load the configuration with the provided data."""
        self.config.reset()
        return self.config.load(data)

    def cleanup(self):
        self.config.reset()
        # Loading a logging section changes process-wide logger levels
        LoggingManager().configure_levels(self.logging_levels)

    def __getattr__(self, name) -> Any:
        return getattr(self.config, name)


@pytest.fixture
def config():
    fixture = ConfigFixture()
    yield fixture
    fixture.cleanup()

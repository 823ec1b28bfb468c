# SPDX-License-Identifier: GPLv3-or-later
# Copyright © 2025 mapviews Rui Pinheiro

from ..util.config import ConfigManager
from .main import ViewsConfig


# Process-wide configuration
CFG = ConfigManager(ViewsConfig)


__all__ = [
    "CFG",
    "ViewsConfig",
]

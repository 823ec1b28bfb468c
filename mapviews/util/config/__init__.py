# SPDX-License-Identifier: GPLv3-or-later
# Copyright © 2025 mapviews Rui Pinheiro

from .manager import ConfigManager
from .models import BaseConfigModel


__all__ = [
    "BaseConfigModel",
    "ConfigManager",
]

# SPDX-License-Identifier: GPLv3-or-later
# Copyright © 2025 mapviews Rui Pinheiro

from pydantic import Field

from ..util.config import BaseConfigModel
from ..util.logging import LoggingConfig


class ViewsConfig(BaseConfigModel):
    check_key_consistency: bool = Field(
        default=False,
        description="Verify on mutation and lookup that ValueView values derive the key they are stored under",
    )
    logging: LoggingConfig = Field(default_factory=LoggingConfig, description="Logging configuration")

# SPDX-License-Identifier: GPLv3-or-later
# Copyright © 2025 mapviews Rui Pinheiro

from .base import MapSetView
from .key_view import KeyView
from .protocols import SetLike
from .value_view import ValueView


__all__ = [
    "KeyView",
    "MapSetView",
    "SetLike",
    "ValueView",
]

# SPDX-License-Identifier: GPLv3-or-later
# Copyright © 2025 mapviews Rui Pinheiro

"""Set views over mappings.

:class:`KeyView` presents a mapping's keys as a read-only set, and :class:`ValueView` presents its values as a mutable
set whose elements are stored under a key derived from each value. Neither view stores anything itself.
"""

from .collections import KeyView, SetLike, ValueView
from .config import CFG, ViewsConfig
from .errors import (
    EmptyCollectionError,
    KeyConsistencyError,
    MapViewsError,
    TooManyElementsError,
    UnsupportedOperationError,
)


__version__ = "0.1.0"

__all__ = [
    "CFG",
    "EmptyCollectionError",
    "KeyConsistencyError",
    "KeyView",
    "MapViewsError",
    "SetLike",
    "TooManyElementsError",
    "UnsupportedOperationError",
    "ValueView",
    "ViewsConfig",
]

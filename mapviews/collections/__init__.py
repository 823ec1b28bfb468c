# SPDX-License-Identifier: GPLv3-or-later
# Copyright © 2025 mapviews Rui Pinheiro

from .delegating import (
    DelegatingBase,
    DelegatingCollection,
    DelegatingContainer,
    DelegatingIterable,
    DelegatingSized,
)
from .views import (
    KeyView,
    MapSetView,
    SetLike,
    ValueView,
)


__all__ = [
    "DelegatingBase",
    "DelegatingCollection",
    "DelegatingContainer",
    "DelegatingIterable",
    "DelegatingSized",
    "KeyView",
    "MapSetView",
    "SetLike",
    "ValueView",
]

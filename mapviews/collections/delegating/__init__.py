# SPDX-License-Identifier: GPLv3-or-later
# Copyright © 2025 mapviews Rui Pinheiro

from .base import DelegatingBase
from .collection import DelegatingCollection
from .container import DelegatingContainer
from .iterable import DelegatingIterable
from .sized import DelegatingSized


__all__ = [
    "DelegatingBase",
    "DelegatingCollection",
    "DelegatingContainer",
    "DelegatingIterable",
    "DelegatingSized",
]

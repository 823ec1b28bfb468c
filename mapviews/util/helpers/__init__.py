# SPDX-License-Identifier: GPLv3-or-later
# Copyright © 2025 mapviews Rui Pinheiro

from . import generics, script_info
from .frozendict import FrozenDict, PydanticFrozenDictAnnotation
from .tstring import tstring_as_fstring


__all__ = [
    "FrozenDict",
    "PydanticFrozenDictAnnotation",
    "generics",
    "script_info",
    "tstring_as_fstring",
]

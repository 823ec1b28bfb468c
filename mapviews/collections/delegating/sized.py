# SPDX-License-Identifier: GPLv3-or-later
# Copyright © 2025 mapviews Rui Pinheiro

from abc import ABCMeta
from collections.abc import Sized
from typing import cast as typing_cast
from typing import override

from .base import DelegatingBase


class DelegatingSized[
    T_Item: object,
    T_Instance: object,
](
    DelegatingBase[T_Item, T_Instance],
    Sized,
    metaclass=ABCMeta,
):
    @override
    def __len__(self) -> int:
        return len(typing_cast("Sized", self._get_source()))

    @property
    def is_empty(self) -> bool:
        return len(self) == 0

    @property
    def is_not_empty(self) -> bool:
        return len(self) != 0

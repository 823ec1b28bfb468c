# SPDX-License-Identifier: GPLv3-or-later
# Copyright © 2025 mapviews Rui Pinheiro

from abc import ABCMeta
from collections.abc import Container
from typing import override

from .base import DelegatingBase


class DelegatingContainer[
    T_Item: object,
    T_Instance: object,
](
    DelegatingBase[T_Item, T_Instance],
    Container,
    metaclass=ABCMeta,
):
    @override
    def __contains__(self, item: object) -> bool:
        return item in self._get_source()

# SPDX-License-Identifier: GPLv3-or-later
# Copyright © 2025 mapviews Rui Pinheiro

from abc import ABCMeta
from collections.abc import Collection

from .container import DelegatingContainer
from .iterable import DelegatingIterable
from .sized import DelegatingSized


class DelegatingCollection[
    T_Item: object,
    T_Instance: object,
](
    DelegatingIterable[T_Item, T_Instance],
    DelegatingContainer[T_Item, T_Instance],
    DelegatingSized[T_Item, T_Instance],
    Collection,
    metaclass=ABCMeta,
):
    pass

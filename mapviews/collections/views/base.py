# SPDX-License-Identifier: GPLv3-or-later
# Copyright © 2025 mapviews Rui Pinheiro

from abc import ABCMeta, abstractmethod
from collections.abc import Container, Iterable, Mapping
from collections.abc import Set as AbstractSet
from typing import override

from ...util.mixins import LoggableMixin
from ..delegating import DelegatingCollection


class MapSetView[
    T_Item: object,
    T_Mapping: Mapping,
](
    DelegatingCollection[T_Item, T_Mapping],
    LoggableMixin,
    AbstractSet[T_Item],
    metaclass=ABCMeta,
):
    """A set-shaped projection of a mapping.

    Nothing is cached: size, membership and iteration order are read from the live mapping on every call.
    Set algebra (``difference``, ``intersection``, ``union`` and the ``&``, ``|``, ``-``, ``^`` operators) returns a new plain
    :class:`set` that is not linked to the mapping. Those sets use Python's default hashing and equality, which can
    differ from how the mapping compares its keys.
    """

    @property
    def mapping(self) -> T_Mapping:
        return self._get_instance()

    @override
    def __len__(self) -> int:
        return len(self._get_instance())

    @classmethod
    @override
    def _from_iterable[T](cls, it: Iterable[T]) -> set[T]:
        return set(it)

    @abstractmethod
    def lookup(self, item: object) -> T_Item | None:
        msg = "Subclasses must implement lookup"
        raise NotImplementedError(msg)

    # MARK: Set algebra
    @staticmethod
    def _as_container(other: Iterable[object]) -> Container[object]:
        if isinstance(other, Container):
            return other
        return set(other)

    def difference(self, other: Iterable[object]) -> set[T_Item]:
        container = self._as_container(other)
        return {item for item in self if item not in container}

    def intersection(self, other: Iterable[object]) -> set[T_Item]:
        container = self._as_container(other)
        return {item for item in self if item in container}

    def union[T](self, other: Iterable[T]) -> set[T_Item | T]:
        result: set[T_Item | T] = set(self.to_set())
        result.update(other)
        return result

    # MARK: Printing
    @override
    def __str__(self) -> str:
        return "{" + ", ".join(repr(item) for item in self) + "}"

    @override
    def __repr__(self) -> str:
        return f"{type(self).__name__}({self})"

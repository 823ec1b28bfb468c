# SPDX-License-Identifier: GPLv3-or-later
# Copyright © 2025 mapviews Rui Pinheiro

from collections.abc import Iterable, Iterator
from typing import Protocol, runtime_checkable


@runtime_checkable
class SetLike[E](Protocol):
    """Read surface shared by every map-backed set view."""

    def __contains__(self, item: object) -> bool: ...
    def __iter__(self) -> Iterator[E]: ...
    def __len__(self) -> int: ...

    @property
    def is_empty(self) -> bool: ...

    def contains_all(self, items: Iterable[object]) -> bool: ...
    def lookup(self, item: object) -> E | None: ...
    def difference(self, other: Iterable[object]) -> set[E]: ...
    def intersection(self, other: Iterable[object]) -> set[E]: ...
    def union[T](self, other: Iterable[T]) -> set[E | T]: ...
    def to_set(self) -> set[E]: ...

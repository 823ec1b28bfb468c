# SPDX-License-Identifier: GPLv3-or-later
# Copyright © 2025 mapviews Rui Pinheiro

"""Iteration and aggregate queries over a delegated iterable.

Every query reads the live source when it runs; the lazy transformers (:meth:`DelegatingIterable.where`,
:meth:`DelegatingIterable.map`, ...) read it when the returned iterator is consumed.

>>> from mapviews import KeyView
>>> keys = KeyView({"a": 1, "bb": 2, "ccc": 3})
>>> keys.fold(0, lambda total, key: total + len(key))
6
>>> list(keys.where(lambda key: len(key) > 1))
['bb', 'ccc']
>>> keys.join(", ")
'a, bb, ccc'
"""

import functools
import itertools

from abc import ABCMeta
from collections.abc import Callable, Iterable, Iterator
from typing import Any, override

from ...errors import EmptyCollectionError, TooManyElementsError
from .base import DelegatingBase


class DelegatingIterable[
    T_Item: object,
    T_Instance: object,
](
    DelegatingBase[T_Item, T_Instance],
    Iterable[T_Item],
    metaclass=ABCMeta,
):
    @override
    def __iter__(self) -> Iterator[T_Item]:
        return iter(self._get_source())

    # MARK: Predicates
    def any(self, test: Callable[[T_Item], bool]) -> bool:
        return any(test(item) for item in self)

    def every(self, test: Callable[[T_Item], bool]) -> bool:
        return all(test(item) for item in self)

    def contains_all(self, items: Iterable[object]) -> bool:
        return all(item in self for item in items)

    # MARK: Folding
    def fold[R](self, initial: R, combine: Callable[[R, T_Item], R]) -> R:
        return functools.reduce(combine, self, initial)

    def reduce(self, combine: Callable[[T_Item, T_Item], T_Item]) -> T_Item:
        iterator = iter(self)
        try:
            first = next(iterator)
        except StopIteration:
            msg = f"Cannot reduce an empty {type(self).__name__}"
            raise EmptyCollectionError(msg) from None
        return functools.reduce(combine, iterator, first)

    def for_each(self, action: Callable[[T_Item], Any]) -> None:
        for item in self:
            action(item)

    def join(self, separator: str = "") -> str:
        return separator.join(str(item) for item in self)

    # MARK: Element access
    @property
    def first(self) -> T_Item:
        for item in self:
            return item
        msg = f"{type(self).__name__} is empty"
        raise EmptyCollectionError(msg)

    @property
    def last(self) -> T_Item:
        return self.last_where(lambda _: True)

    @property
    def single(self) -> T_Item:
        return self.single_where(lambda _: True)

    def first_where(self, test: Callable[[T_Item], bool], or_else: Callable[[], T_Item] | None = None) -> T_Item:
        for item in self:
            if test(item):
                return item
        return self._no_match(or_else)

    def last_where(self, test: Callable[[T_Item], bool], or_else: Callable[[], T_Item] | None = None) -> T_Item:
        found = False
        result = None
        for item in self:
            if test(item):
                found = True
                result = item
        if not found:
            return self._no_match(or_else)
        return result  # pyright: ignore[reportReturnType]

    def single_where(self, test: Callable[[T_Item], bool], or_else: Callable[[], T_Item] | None = None) -> T_Item:
        found = False
        result = None
        for item in self:
            if not test(item):
                continue
            if found:
                msg = f"{type(self).__name__} has more than one matching element"
                raise TooManyElementsError(msg)
            found = True
            result = item
        if not found:
            return self._no_match(or_else)
        return result  # pyright: ignore[reportReturnType]

    def _no_match(self, or_else: Callable[[], T_Item] | None) -> T_Item:
        if or_else is not None:
            return or_else()
        msg = f"{type(self).__name__} has no matching element"
        raise EmptyCollectionError(msg)

    def element_at(self, index: int) -> T_Item:
        if index < 0:
            msg = f"Index {index} out of range"
            raise IndexError(msg)
        for item in itertools.islice(self, index, None):
            return item
        msg = f"Index {index} out of range"
        raise IndexError(msg)

    # MARK: Lazy transformers
    def where(self, test: Callable[[T_Item], bool]) -> Iterator[T_Item]:
        return (item for item in self if test(item))

    def where_type[T](self, type_: type[T]) -> Iterator[T]:
        return (item for item in self if isinstance(item, type_))

    def map[R](self, f: Callable[[T_Item], R]) -> Iterator[R]:
        return (f(item) for item in self)

    def expand[R](self, f: Callable[[T_Item], Iterable[R]]) -> Iterator[R]:
        return (result for item in self for result in f(item))

    def followed_by(self, other: Iterable[T_Item]) -> Iterator[T_Item]:
        return itertools.chain(self, other)

    def skip(self, n: int) -> Iterator[T_Item]:
        return itertools.islice(self, n, None)

    def skip_while(self, test: Callable[[T_Item], bool]) -> Iterator[T_Item]:
        return itertools.dropwhile(test, self)

    def take(self, n: int) -> Iterator[T_Item]:
        return itertools.islice(self, n)

    def take_while(self, test: Callable[[T_Item], bool]) -> Iterator[T_Item]:
        return itertools.takewhile(test, self)

    # MARK: Materialisation
    def to_list(self) -> list[T_Item]:
        return list(self)

    def to_set(self) -> set[T_Item]:
        return set(self)

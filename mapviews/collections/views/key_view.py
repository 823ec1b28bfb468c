# SPDX-License-Identifier: GPLv3-or-later
# Copyright © 2025 mapviews Rui Pinheiro

"""Read-only set view of a mapping's keys.

A mapping holds each key once, so its keys can always be seen as a set.
The view has no mutators; membership only changes when the mapping does.

>>> from mapviews import KeyView
>>> scores = {"a": 1, "b": 2, "c": 3}
>>> keys = KeyView(scores)
>>> list(keys)
['a', 'b', 'c']
>>> del scores["b"]
>>> list(keys), len(keys), "b" in keys
(['a', 'c'], 2, False)
"""

from collections.abc import Iterable, Mapping
from typing import Any, NoReturn, override

from ...errors import UnsupportedOperationError
from .base import MapSetView


class KeyView[K](MapSetView[K, Mapping[K, Any]]):
    def __init__(self, mapping: Mapping[K, Any], *, weakref: bool = False) -> None:
        super().__init__(mapping, weakref=weakref)

    @override
    def _get_source(self) -> Iterable[K]:
        return self._get_instance().keys()

    @override
    def __contains__(self, item: object) -> bool:
        return item in self._get_instance()

    @override
    def lookup(self, item: object) -> NoReturn:
        """Always raises :class:`UnsupportedOperationError`.

        A mapping offers no way to retrieve the stored key object that is equal to a probe.
        """
        msg = f"{type(self).__name__} does not support lookup()"
        raise UnsupportedOperationError(msg)

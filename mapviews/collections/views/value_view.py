# SPDX-License-Identifier: GPLv3-or-later
# Copyright © 2025 mapviews Rui Pinheiro

"""Mutable set view of a mapping's values.

Each value is stored under the key that ``key_of`` derives from it, so the mapping acts as an index for the set:
``records.add(record)`` and ``records_by_id[record.id]`` refer to the same entry.

``key_of`` must be consistent with equality: ``v1 == v2`` if and only if ``key_of(v1)`` and ``key_of(v2)`` are
equal keys for the mapping. This is not verified unless key consistency checking is enabled, and a mapping whose
contents break it makes the view give meaningless answers.

>>> from mapviews import ValueView
>>> names = {1: "alice", 2: "bob"}
>>> people = ValueView(names, {"alice": 1, "bob": 2, "carol": 3}.__getitem__)
>>> people.remove("alice")
True
>>> people.add("carol"), people.add("bob")
(True, False)
>>> names
{2: 'bob', 3: 'carol'}
"""

from collections.abc import Callable, Iterable, MutableMapping
from collections.abc import MutableSet as AbstractMutableSet
from typing import override

from ...config import CFG
from ...errors import KeyConsistencyError
from ...util.helpers import generics
from .base import MapSetView


class ValueView[K, V](
    MapSetView[V, MutableMapping[K, V]],
    AbstractMutableSet[V],
):
    _key_of: Callable[[V], K]
    _value_type: type[V] | None
    _check_key_consistency: bool | None

    def __init__(
        self,
        mapping: MutableMapping[K, V],
        key_of: Callable[[V], K],
        *,
        value_type: type[V] | None = None,
        check_key_consistency: bool | None = None,
        weakref: bool = False,
    ) -> None:
        """Create a view of ``mapping``'s values.

        Args:
            mapping: The mapping to project. It is referenced, not copied.
            key_of: Returns the key a value is stored under.
            value_type: If given, objects that are not instances of it are never contained, removed or looked up,
                and adding one raises :class:`TypeError`. Defaults to the value type argument of a parametrised view.
            check_key_consistency: Verify that values derive the key they are stored under. ``None`` uses the
                ``check_key_consistency`` setting of the global configuration.
            weakref: Hold only a weak reference to ``mapping``.

        """
        super().__init__(mapping, weakref=weakref)
        self._key_of = key_of
        self._value_type = value_type
        self._check_key_consistency = check_key_consistency

    @property
    def key_of(self) -> Callable[[V], K]:
        return self._key_of

    @property
    def value_type(self) -> type[V] | None:
        """The type members must have, if known.

        This is either the ``value_type`` argument or the value type argument of a parametrised view, as in
        ``ValueView[int, Record](mapping, key_of)`` or a subclass of ``ValueView[int, Record]``.
        """
        if self._value_type is not None:
            return self._value_type
        source = getattr(self, "__orig_class__", type(self))
        return generics.get_concrete_parent_argument_or_none(source, ValueView, V)

    @property
    def check_key_consistency(self) -> bool:
        if self._check_key_consistency is None:
            return CFG.check_key_consistency
        return self._check_key_consistency

    @override
    def _get_source(self) -> Iterable[V]:
        return self._get_instance().values()

    # MARK: Key derivation
    def _accepts(self, item: object) -> bool:
        value_type = self.value_type
        return value_type is None or isinstance(item, value_type)

    def _verify(self, key: K, value: V) -> None:
        derived = self._key_of(value)
        if derived != key:
            self.log.error(t"Key consistency violated: {value!r} derives {derived!r}, expected {key!r}")
            raise KeyConsistencyError(key=key, derived_key=derived, value=value)

    def _scan(self, test: Callable[[K, V], bool]) -> list[K]:
        mapping = self._get_instance()
        check = self.check_key_consistency

        keys = []
        for key, value in mapping.items():
            if check:
                self._verify(key, value)
            if test(key, value):
                keys.append(key)
        return keys

    def _delete_keys(self, operation: str, keys: Iterable[K], *, scanned: int) -> int:
        mapping = self._get_instance()

        removed = 0
        for key in keys:
            # Keys may repeat when collected from caller-supplied values
            if key in mapping:
                del mapping[key]
                removed += 1

        self.log.debug(t"{operation}: scanned {scanned}, removed {removed}, {len(mapping)} remaining")
        return removed

    # MARK: Queries
    @override
    def __contains__(self, item: object) -> bool:
        if not self._accepts(item):
            return False
        return self._key_of(item) in self._get_instance()  # pyright: ignore[reportArgumentType]

    @override
    def lookup(self, item: object) -> V | None:
        """Return the stored value that shares ``item``'s key, or ``None``.

        The result may be a different object than ``item``, e.g. the canonical record for a probe value.
        """
        if not self._accepts(item):
            return None

        key = self._key_of(item)  # pyright: ignore[reportArgumentType]
        mapping = self._get_instance()
        if key not in mapping:
            return None

        stored = mapping[key]
        if self.check_key_consistency:
            self._verify(key, stored)
        return stored

    # MARK: Single element mutation
    @override
    def add(self, value: V) -> bool:
        """Insert ``value`` unless a value with the same key is present.

        Returns:
            bool: True if the value was inserted, False if its key was already present (the existing entry is kept).

        """
        if not self._accepts(value):
            msg = f"Expected {self.value_type.__name__}, got {type(value).__name__}"  # pyright: ignore[reportOptionalMemberAccess]
            raise TypeError(msg)

        key = self._key_of(value)
        if self.check_key_consistency:
            self._verify(key, value)

        mapping = self._get_instance()
        if key in mapping:
            return False
        mapping[key] = value
        return True

    @override
    def remove(self, value: object) -> bool:
        """Remove the entry keyed by ``value``'s key.

        Unlike :meth:`set.remove` a missing value is not an error.

        Returns:
            bool: True if an entry was removed.

        """
        if not self._accepts(value):
            return False

        key = self._key_of(value)  # pyright: ignore[reportArgumentType]
        mapping = self._get_instance()
        if key not in mapping:
            return False
        del mapping[key]
        return True

    @override
    def discard(self, value: object) -> None:
        self.remove(value)

    @override
    def clear(self) -> None:
        self._get_instance().clear()

    # MARK: Batch mutation
    # Keys are always collected into a list before anything is deleted, so the mapping is never mutated while it
    # (or this view, which may be the argument) is being iterated.
    def add_all(self, values: Iterable[V]) -> int:
        """Add each value in order. Values added before a failure stay added.

        Returns:
            int: The number of values inserted.

        """
        return sum(1 for value in values if self.add(value))

    update = add_all

    def remove_all(self, values: Iterable[object]) -> int:
        mapping = self._get_instance()
        keys = []
        scanned = 0
        for value in values:
            scanned += 1
            if not self._accepts(value):
                continue
            key = self._key_of(value)  # pyright: ignore[reportArgumentType]
            if key in mapping:
                keys.append(key)
        return self._delete_keys("remove_all", keys, scanned=scanned)

    def retain_all(self, values: Iterable[object]) -> int:
        """Remove every entry whose value is not (by key) among ``values``.

        Returns:
            int: The number of entries removed.

        """
        mapping = self._get_instance()

        # Stored values are matched by identity so unhashable values can be retained
        retained: set[int] = set()
        for value in values:
            if not self._accepts(value):
                continue
            key = self._key_of(value)  # pyright: ignore[reportArgumentType]
            if key in mapping:
                retained.add(id(mapping[key]))

        keys = self._scan(lambda _key, stored: id(stored) not in retained)
        return self._delete_keys("retain_all", keys, scanned=len(mapping))

    def remove_where(self, test: Callable[[V], bool]) -> int:
        mapping = self._get_instance()
        keys = self._scan(lambda _key, value: test(value))
        return self._delete_keys("remove_where", keys, scanned=len(mapping))

    def retain_where(self, test: Callable[[V], bool]) -> int:
        mapping = self._get_instance()
        keys = self._scan(lambda _key, value: not test(value))
        return self._delete_keys("retain_where", keys, scanned=len(mapping))

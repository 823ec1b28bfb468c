# SPDX-License-Identifier: GPLv3-or-later
# Copyright © 2025 mapviews Rui Pinheiro


class MapViewsError(Exception):
    pass


class UnsupportedOperationError(MapViewsError, NotImplementedError):
    """Raised for operations a view structurally cannot provide."""


class EmptyCollectionError(MapViewsError, ValueError):
    pass


class TooManyElementsError(MapViewsError, ValueError):
    pass


class KeyConsistencyError(MapViewsError, ValueError):
    """A value's derived key does not match the key it is stored under, or is not stable.

    Only raised when key consistency checking is enabled.
    """

    def __init__(self, *, key: object, derived_key: object, value: object) -> None:
        self.key = key
        self.derived_key = derived_key
        self.value = value
        super().__init__(f"Value {value!r} derives key {derived_key!r} but is stored under {key!r}")

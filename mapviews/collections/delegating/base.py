# SPDX-License-Identifier: GPLv3-or-later
# Copyright © 2025 mapviews Rui Pinheiro

import weakref as _weakref

from abc import ABCMeta, abstractmethod
from typing import TYPE_CHECKING, override
from typing import cast as typing_cast


if TYPE_CHECKING:
    from collections.abc import Iterable


class DelegatingBase[
    T_Item: object,
    T_Instance: object,
](
    metaclass=ABCMeta,
):
    """Base for collections that forward to an object they do not own.

    The backing ``instance`` is referenced, never copied. With ``weakref=True`` the reference does not keep it alive,
    and any access after it has been collected raises :class:`ValueError`.
    """

    _instance: _weakref.ref[T_Instance] | T_Instance

    def __init__(self, instance: T_Instance, *, weakref: bool = False) -> None:
        self._instance = _weakref.ref(instance) if weakref else instance

    def _get_instance(self) -> T_Instance:
        if isinstance(self._instance, _weakref.ref):
            instance = self._instance()
            if instance is None:
                msg = "Instance has been garbage collected"
                raise ValueError(msg)
            return typing_cast("T_Instance", instance)
        return self._instance

    @abstractmethod
    def _get_source(self) -> Iterable[T_Item]:
        """Return the live iterable this collection delegates to."""
        msg = "Subclasses must implement _get_source"
        raise NotImplementedError(msg)

    @override
    def __str__(self) -> str:
        return str(self._get_source())

    @override
    def __repr__(self) -> str:
        return f"<{type(self).__name__}: {self._get_instance()!r}>"

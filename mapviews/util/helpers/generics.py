# SPDX-License-Identifier: GPLv3-or-later
# Copyright © 2025 mapviews Rui Pinheiro

"""Utilities for resolving the type arguments of generic classes.

A generic parent's parameter can be bound in two places: on a parametrised alias used to build an instance
(``ValueView[int, Record](...)``, recorded in ``__orig_class__``) or on a subclass's bases
(``class RecordView(ValueView[int, Record])``). Both are followed here, through any number of intermediate
generic subclasses.

Lookups are cached, so resolving the same alias repeatedly is constant time.
"""

import functools
import types
import typing

from typing import Any


class GenericsError(TypeError):
    pass


def get_origin_or_none(cls: Any) -> type | None:
    """Return the typing origin for *cls* or ``None`` when it is not a parametrised alias."""
    return typing.get_origin(cls)


def get_origin(cls: Any, *, passthrough: bool = False) -> Any:
    """Return the typing origin for *cls*, or ``cls`` itself when ``passthrough`` is ``True``.

    Raises:
        GenericsError: If *cls* has no origin and ``passthrough`` is ``False``.

    """
    if (origin := get_origin_or_none(cls)) is not None:
        return origin
    elif not passthrough:
        msg = f"{cls!r} is not a parametrised generic"
        raise GenericsError(msg)
    else:
        return cls


@functools.cache
def get_parent_argument_or_none(cls: Any, parent: type, param: typing.TypeVar) -> Any:
    """Return the argument *cls* binds to *parent*'s ``param``, or ``None`` if it binds none.

    The result may itself be a :class:`typing.TypeVar` when *cls* leaves the parameter open.
    """
    origin = get_origin(cls, passthrough=True)
    if not isinstance(origin, type):
        return None

    if param not in parent.__type_params__:
        msg = f"{parent.__name__} has no type parameter {param}"
        raise GenericsError(msg)

    args = typing.get_args(cls)
    if origin is parent:
        return args[parent.__type_params__.index(param)] if args else None

    bindings = dict(zip(origin.__type_params__, args, strict=False))
    for base in types.get_original_bases(origin):
        base_origin = get_origin(base, passthrough=True)
        if not isinstance(base_origin, type) or not issubclass(base_origin, parent):
            continue

        arg = get_parent_argument_or_none(base, parent, param)
        if isinstance(arg, typing.TypeVar):
            arg = bindings.get(arg, arg)
        if arg is not None:
            return arg
    return None


def get_concrete_parent_argument_or_none(cls: Any, parent: type, param: typing.TypeVar) -> type | None:
    """Like :func:`get_parent_argument_or_none`, but only return arguments usable with :func:`isinstance`.

    Parametrised arguments such as ``list[int]`` resolve to their origin. Unbound parameters, ``Any`` and other
    typing constructs resolve to ``None``.
    """
    arg = get_parent_argument_or_none(cls, parent, param)
    if arg is None or arg is Any or isinstance(arg, typing.TypeVar):
        return None
    origin = get_origin(arg, passthrough=True)
    return origin if isinstance(origin, type) else None

# Copyright (c) 2023-2025, HaiyangLi <quantocean.li at gmail dot com>
#
# SPDX-License-Identifier: Apache-2.0

from collections.abc import Iterable, Sized
from functools import singledispatch
from numbers import Number
from typing import Any

from ..config import get_settings
from .base import PV, add_builtin

__all__ = ("is_empty", "not_empty", "not_null")

_MISSING = object()


@singledispatch
def is_empty(value: Any) -> bool:
    """Shape-specific emptiness; register more types with ``is_empty.register``."""
    # sized but not iterable
    return isinstance(value, Sized) and len(value) == 0


@is_empty.register(type(None))
def _(value: None) -> bool:
    return True


@is_empty.register
def _(value: str) -> bool:
    if get_settings().WHITESPACE_IS_EMPTY:
        return not value.strip()
    return not value


@is_empty.register
def _(value: Iterable) -> bool:
    # registering Sized too would make list dispatch ambiguous
    if isinstance(value, Sized):
        return len(value) == 0
    # consumes at most one element of a one-shot iterator
    return next(iter(value), _MISSING) is _MISSING


@is_empty.register
def _(value: Number) -> bool:
    # zero is the default of every numeric type, False included
    return value == 0


def not_null(pv: PV) -> PV:
    return add_builtin(pv, "NotNullValidator", lambda value: value is None)


def not_empty(pv: PV) -> PV:
    return add_builtin(pv, "NotEmptyValidator", is_empty)

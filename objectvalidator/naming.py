# Copyright (c) 2023-2025, HaiyangLi <quantocean.li at gmail dot com>
#
# SPDX-License-Identifier: Apache-2.0

"""Turn property accessors into getters and name suppliers.

A string accessor names itself: ``"subject"`` reads the ``subject``
attribute (or mapping key) and is reported as ``subject``. A dotted string
such as ``"person.first_name"`` walks each segment, yielding None as soon as
an intermediate value is None. Callable accessors cannot be named reliably,
so they need an explicit ``name``.
"""

from collections.abc import Callable, Mapping
from typing import Any

from ._errors import ConfigurationError

__all__ = ("NameSupplier", "resolve_accessor", "resolve_name", "read_path")

NameSupplier = Callable[[], str]


def read_path(obj: Any, path: str) -> Any:
    for segment in path.split("."):
        if obj is None:
            return None
        if isinstance(obj, Mapping):
            obj = obj.get(segment)
        else:
            obj = getattr(obj, segment)
    return obj


def _string_getter(path: str) -> Callable[[Any], Any]:
    def _get(obj: Any) -> Any:
        return read_path(obj, path)

    _get.__qualname__ = f"read_path<{path}>"
    return _get


def resolve_name(name: str | NameSupplier) -> NameSupplier:
    if isinstance(name, str):
        return lambda: name
    if callable(name):
        return name
    raise ConfigurationError.from_value(
        name, expected="str or zero-argument callable"
    )


def resolve_accessor(
    accessor: str | Callable[[Any], Any],
    name: str | NameSupplier | None = None,
) -> tuple[Callable[[Any], Any], NameSupplier]:
    """Return ``(getter, name_supplier)`` for a property accessor.

    Raises:
        ConfigurationError: If the accessor is neither a non-empty string nor
            a callable, or if a callable accessor comes without ``name``.
    """
    if isinstance(accessor, str):
        if not accessor or any(not s for s in accessor.split(".")):
            raise ConfigurationError.from_value(
                accessor, message="Property path must not have empty segments"
            )
        supplier = resolve_name(name) if name is not None else resolve_name(accessor)
        return _string_getter(accessor), supplier

    if not callable(accessor):
        raise ConfigurationError.from_value(
            accessor, expected="attribute name or callable"
        )
    if name is None:
        raise ConfigurationError.from_value(
            accessor,
            message=(
                "Cannot derive a property name from a callable accessor; "
                "pass name= or use an attribute name string"
            ),
        )
    return accessor, resolve_name(name)

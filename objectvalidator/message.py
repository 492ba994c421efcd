# Copyright (c) 2023-2025, HaiyangLi <quantocean.li at gmail dot com>
#
# SPDX-License-Identifier: Apache-2.0

"""Placeholder substitution for message templates.

Templates use ``{Name}`` tokens for named values and ``{0}``, ``{1}`` for
positional ones. Substitution is a single pass: replaced text is never
scanned again, unknown tokens are left as they are, and there is no brace
escaping.
"""

import re
from collections.abc import Iterable, Sequence
from typing import Any

__all__ = (
    "placeholder",
    "replace_placeholders",
    "format_positional",
    "to_text",
)

_TOKEN = re.compile(r"\{([^{}]+)\}")
_POSITIONAL = re.compile(r"\{(\d+)\}")


def to_text(value: Any) -> str:
    return "" if value is None else str(value)


def placeholder(name: str, value: Any) -> tuple[str, Any]:
    """Build a ``(name, value)`` pair for ``replace_placeholders``."""
    return name, value


def replace_placeholders(
    template: str, *pairs: tuple[str, Any], **named: Any
) -> str:
    """Replace every ``{Key}`` in ``template`` with the matching value.

    Args:
        template: Message template.
        *pairs: ``(key, value)`` tuples, see ``placeholder``.
        **named: Additional values by keyword; these win over ``pairs``.

    Returns:
        The rendered message.

    Examples:
        >>> replace_placeholders("'{PropertyName}' is {What}.", ("PropertyName", "Age"), What="{x}")
        "'Age' is {x}."
    """
    values = _collect(pairs)
    values.update(named)
    if not values:
        return template

    def _sub(match: re.Match) -> str:
        key = match.group(1)
        if key in values:
            return to_text(values[key])
        return match.group(0)

    return _TOKEN.sub(_sub, template)


def format_positional(template: str, args: Sequence[Any]) -> str:
    """Replace ``{0}``, ``{1}``, ... with ``args``; out of range stays as is."""
    if not args:
        return template

    def _sub(match: re.Match) -> str:
        index = int(match.group(1))
        if index < len(args):
            return to_text(args[index])
        return match.group(0)

    return _POSITIONAL.sub(_sub, template)


def _collect(pairs: Iterable[tuple[str, Any]]) -> dict[str, Any]:
    values: dict[str, Any] = {}
    for key, value in pairs:
        values[key] = value
    return values

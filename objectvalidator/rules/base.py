# Copyright (c) 2023-2025, HaiyangLi <quantocean.li at gmail dot com>
#
# SPDX-License-Identifier: Apache-2.0

from collections.abc import Awaitable, Callable
from typing import TYPE_CHECKING, Any, TypeVar

from ..failure import FailureData
from ..message import replace_placeholders
from ..resources import resource
from ..utils import call_maybe_async

if TYPE_CHECKING:
    from ..validators import PropertyValidator

__all__ = (
    "MessageSource",
    "add",
    "add_builtin",
    "create_failure_data",
    "if_",
)

PV = TypeVar("PV", bound="PropertyValidator")
MessageSource = str | Callable[[], str]


def create_failure_data(
    pv: "PropertyValidator",
    message: MessageSource,
    fmt: Callable[[str], str] | None = None,
    *,
    error_code: str | None = None,
    **placeholders: Any,
) -> FailureData:
    """Build a failure for ``pv`` from a message template.

    Args:
        pv: Property the failure belongs to.
        message: Template string or zero-argument supplier of one. A
            ``resource(code)`` reference also provides the error code.
        fmt: Optional extra formatting applied after placeholder
            substitution, e.g. ``lambda t: replace_placeholders(t, ...)``.
        error_code: Explicit code; defaults to the message reference's code.
        **placeholders: Named values substituted together with
            ``PropertyName`` in a single pass.
    """
    template = message() if callable(message) else message
    display_name = pv.display_name
    text = replace_placeholders(template, PropertyName=display_name, **placeholders)
    if fmt is not None:
        text = fmt(text)
    if error_code is None:
        error_code = getattr(message, "code", None)
    return FailureData(
        error_message=text,
        property_name=pv.property_name,
        property_localized_name=display_name,
        error_code=error_code,
    )


def add(
    pv: PV,
    func: Callable[[PV], FailureData | None | Awaitable[FailureData | None]],
) -> PV:
    """Register ``func(pv)`` as a rule on ``pv``'s path."""
    pv.command.add(lambda: func(pv), pv.property_name)
    return pv


def if_(
    pv: PV,
    predicate: Callable[[PV], Any],
    message: MessageSource,
    *arg_fns: Callable[[PV], Any],
    error_code: str | None = None,
) -> PV:
    """Fail with ``message`` when ``predicate(pv)`` is truthy.

    The predicate and the argument functions may be async. Argument values
    fill ``{0}``, ``{1}``, ... in the same pass as ``{PropertyName}``, so
    neither the display name nor an argument value is scanned for tokens.
    """

    async def _rule(v: PV) -> FailureData | None:
        if not await call_maybe_async(predicate, v):
            return None
        positional = {
            str(index): await call_maybe_async(fn, v)
            for index, fn in enumerate(arg_fns)
        }
        return create_failure_data(
            v, message, error_code=error_code, **positional
        )

    return add(pv, _rule)


def add_builtin(
    pv: PV,
    code: str,
    is_invalid: Callable[[Any], bool],
    describe: Callable[[Any], dict[str, Any]] | None = None,
) -> PV:
    """Register a built-in rule whose template is looked up by ``code``.

    ``describe(value)`` supplies the rule-specific placeholders.
    """

    def _rule(v: PV) -> FailureData | None:
        value = v.value
        if not is_invalid(value):
            return None
        placeholders = describe(value) if describe is not None else {}
        return create_failure_data(v, resource(code), **placeholders)

    return add(pv, _rule)

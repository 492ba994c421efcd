# Copyright (c) 2023-2025, HaiyangLi <quantocean.li at gmail dot com>
#
# SPDX-License-Identifier: Apache-2.0

"""Message templates keyed by error code.

The built-in rules look their templates up by error code through a
pluggable lookup, so applications can route codes to their own
translations with ``set_resource_lookup``.
"""

from collections.abc import Callable
from types import MappingProxyType

from ._errors import MessageNotFoundError

__all__ = (
    "DEFAULT_MESSAGES",
    "MessageRef",
    "ResourceLookup",
    "get_template",
    "resource",
    "set_resource_lookup",
)

ResourceLookup = Callable[[str], str]

DEFAULT_MESSAGES = MappingProxyType(
    {
        "NotNullValidator": "'{PropertyName}' must not be empty.",
        "NotEmptyValidator": "'{PropertyName}' should not be empty.",
        "NotEqualValidator": "'{PropertyName}' should not be equal to '{ComparisonValue}'.",
        "LengthValidator": (
            "'{PropertyName}' must be between {MinLength} and {MaxLength} "
            "characters. You entered {TotalLength} characters."
        ),
        "InclusiveBetweenValidator": (
            "'{PropertyName}' must be between {From} and {To}. "
            "You entered {Value}."
        ),
        "ExclusiveBetweenValidator": (
            "'{PropertyName}' must be between {From} and {To} (exclusive). "
            "You entered {Value}."
        ),
        "EmailAddressValidator": "'{PropertyName}' is not a valid email address.",
    }
)


def _default_lookup(code: str) -> str:
    return DEFAULT_MESSAGES[code]


_lookup: ResourceLookup = _default_lookup


def set_resource_lookup(lookup: ResourceLookup | None) -> ResourceLookup:
    """Install ``lookup`` as the active template source.

    Passing None restores the built-in English templates. Returns the
    previously active lookup.
    """
    global _lookup
    previous = _lookup
    _lookup = lookup if lookup is not None else _default_lookup
    return previous


def get_template(code: str) -> str:
    try:
        template = _lookup(code)
    except KeyError as e:
        raise MessageNotFoundError(
            f"No message template for code '{code}'",
            details={"code": code},
            cause=e,
        )
    if template is None:
        raise MessageNotFoundError(
            f"No message template for code '{code}'", details={"code": code}
        )
    return template


class MessageRef:
    """Lazy reference to a template; resolved each time it is called.

    The ``code`` doubles as the failure's ``error_code``.
    """

    __slots__ = ("code",)

    def __init__(self, code: str):
        self.code = code

    def __call__(self) -> str:
        return get_template(self.code)

    def __repr__(self) -> str:
        return f"MessageRef({self.code!r})"

    def __eq__(self, other) -> bool:
        return isinstance(other, MessageRef) and other.code == self.code

    def __hash__(self) -> int:
        return hash((MessageRef, self.code))


def resource(code: str) -> MessageRef:
    return MessageRef(code)

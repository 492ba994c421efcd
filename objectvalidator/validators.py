# Copyright (c) 2023-2025, HaiyangLi <quantocean.li at gmail dot com>
#
# SPDX-License-Identifier: Apache-2.0

"""Validators bind a subject to a shared command and a property path.

Example:
    >>> v = validator(message)
    >>> v.for_("subject").not_empty().length(3, 50)
    >>> v.for_("person").for_("first_name").not_null()
    >>> v.for_("attachments").for_each(
    ...     lambda item: item.for_("file_name").not_empty()
    ... )
    >>> failures = await v.validate()
"""

from collections.abc import Awaitable, Callable, Iterable, Iterator
from typing import Any, Generic, TypeVar

import anyio

from . import rules
from ._errors import ConfigurationError, ValidationFailedError
from .command import ValidationCommand
from .failure import FailureData
from .naming import NameSupplier, resolve_accessor
from .rules.base import MessageSource

__all__ = ("Validator", "PropertyValidator", "validator")

T = TypeVar("T")
P = TypeVar("P")


def _join(prefix: str, name: str) -> str:
    return ".".join(s for s in (prefix, name) if s)


class Validator(Generic[T]):
    """A subject plus the command its rules are registered on.

    Args:
        value: The subject.
        command: Shared rule container; a fresh one when omitted.
        property_prefix: Path of the subject within the root, ``""`` at root.
        source: Optional getter used instead of ``value`` so that nested
            subjects are re-read at evaluation time.
    """

    __slots__ = ("_value", "_source", "command", "property_prefix")

    def __init__(
        self,
        value: T = None,
        command: ValidationCommand | None = None,
        property_prefix: str = "",
        *,
        source: Callable[[], T] | None = None,
    ):
        self._value = value
        self._source = source
        self.command = command if command is not None else ValidationCommand()
        self.property_prefix = property_prefix

    @property
    def value(self) -> T:
        if self._source is not None:
            return self._source()
        return self._value

    def for_(
        self,
        accessor: str | Callable[[T], P] | None = None,
        display_name: str | None = None,
        *,
        name: str | NameSupplier | None = None,
    ) -> "PropertyValidator[T, P]":
        """Bind a property of the subject.

        Args:
            accessor: Attribute name, mapping key or dotted path, or a
                callable taking the subject. None binds the subject itself.
            display_name: Name shown in messages instead of the property name.
            name: Property name for callable accessors.

        Raises:
            ConfigurationError: If no property name can be determined.
        """
        if accessor is None:
            return self.this(display_name)
        getter, name_supplier = resolve_accessor(accessor, name)
        return PropertyValidator(self, getter, name_supplier, display_name)

    def this(self, display_name: str | None = None) -> "PropertyValidator[T, T]":
        """Bind the subject itself, e.g. a collection item."""
        return PropertyValidator(self, _identity, _empty_name, display_name)

    async def validate(self) -> list[FailureData]:
        return await self.command.validate()

    def validate_sync(self) -> list[FailureData]:
        """Run ``validate`` from synchronous code via ``anyio.run``."""
        return anyio.run(self.command.validate)

    async def validate_or_raise(self) -> None:
        """Raise ``ValidationFailedError`` when any rule fails."""
        failures = await self.validate()
        if failures:
            raise ValidationFailedError(failures)

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(prefix={self.property_prefix!r}, "
            f"command={self.command!r})"
        )


def _identity(obj: Any) -> Any:
    return obj


def _empty_name() -> str:
    return ""


class PropertyValidator(Generic[T, P]):
    """A property of a validator's subject, addressed by an absolute path.

    The accessor is not evaluated until a rule runs, so changes made to the
    subject between registration and ``validate()`` are observed.
    """

    __slots__ = ("parent", "accessor", "name_supplier", "_display_name")

    def __init__(
        self,
        parent: Validator[T],
        accessor: Callable[[T], P],
        name_supplier: NameSupplier,
        display_name: str | None = None,
    ):
        self.parent = parent
        self.accessor = accessor
        self.name_supplier = name_supplier
        self._display_name = display_name

    @property
    def command(self) -> ValidationCommand:
        return self.parent.command

    @property
    def object(self) -> T:
        """The parent's subject."""
        return self.parent.value

    @property
    def value(self) -> P:
        return self.accessor(self.parent.value)

    @property
    def short_name(self) -> str:
        return self.name_supplier()

    @property
    def property_name(self) -> str:
        return _join(self.parent.property_prefix, self.short_name)

    @property
    def display_name(self) -> str:
        """Explicit display name, else the short name, else the full path.

        A root identity binding has no path and falls back to the subject's
        type name.
        """
        if self._display_name is not None:
            return self._display_name
        return (
            self.short_name
            or self.property_name
            or type(self.parent.value).__name__
        )

    # nesting

    def validator(self) -> Validator[P]:
        """Validator over this property's value, sharing the command."""
        return Validator(
            command=self.command,
            property_prefix=self.property_name,
            source=lambda: self.value,
        )

    def validators(self) -> Iterator[Validator[Any]]:
        """One validator per element of the (iterable) value.

        Items are addressed as ``name[index]``. None or an empty collection
        yields nothing.

        Raises:
            ConfigurationError: If the value is a string or not iterable.
        """
        items = self.value
        if items is None:
            return iter(())
        if isinstance(items, (str, bytes)) or not isinstance(items, Iterable):
            raise ConfigurationError.from_value(
                items,
                expected="iterable of items",
                property=self.property_name,
            )
        return self._item_validators(items, self.property_name)

    def _item_validators(
        self, items: Iterable[Any], prefix: str
    ) -> Iterator[Validator[Any]]:
        for index, item in enumerate(items):
            yield Validator(item, self.command, f"{prefix}[{index}]")

    def for_each(
        self, action: Callable[[Validator[Any]], Any]
    ) -> "PropertyValidator[T, P]":
        for item_validator in self.validators():
            action(item_validator)
        return self

    def for_(
        self,
        accessor: str | Callable[[P], Any] | None = None,
        display_name: str | None = None,
        *,
        name: str | NameSupplier | None = None,
    ) -> "PropertyValidator[P, Any]":
        """Shortcut for ``self.validator().for_(...)``."""
        return self.validator().for_(accessor, display_name, name=name)

    # rules

    def not_null(self) -> "PropertyValidator[T, P]":
        return rules.not_null(self)

    def not_empty(self) -> "PropertyValidator[T, P]":
        return rules.not_empty(self)

    def not_equal(self, comparison_value: Any) -> "PropertyValidator[T, P]":
        return rules.not_equal(self, comparison_value)

    def length(
        self, min_length: int, max_length: int | None = None
    ) -> "PropertyValidator[T, P]":
        return rules.length(self, min_length, max_length)

    def inclusive_between(self, from_: Any, to: Any) -> "PropertyValidator[T, P]":
        return rules.inclusive_between(self, from_, to)

    def exclusive_between(self, from_: Any, to: Any) -> "PropertyValidator[T, P]":
        return rules.exclusive_between(self, from_, to)

    def email_address(self) -> "PropertyValidator[T, P]":
        return rules.email_address(self)

    def if_(
        self,
        predicate: Callable[["PropertyValidator[T, P]"], Any],
        message: MessageSource,
        *arg_fns: Callable[["PropertyValidator[T, P]"], Any],
        error_code: str | None = None,
    ) -> "PropertyValidator[T, P]":
        return rules.if_(self, predicate, message, *arg_fns, error_code=error_code)

    def add(
        self,
        func: Callable[
            ["PropertyValidator[T, P]"],
            FailureData | None | Awaitable[FailureData | None],
        ],
    ) -> "PropertyValidator[T, P]":
        return rules.add(self, func)

    def create_failure_data(
        self,
        message: MessageSource,
        fmt: Callable[[str], str] | None = None,
        *,
        error_code: str | None = None,
        **placeholders: Any,
    ) -> FailureData:
        return rules.create_failure_data(
            self, message, fmt, error_code=error_code, **placeholders
        )

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.property_name!r})"


def validator(subject: T) -> Validator[T]:
    """Wrap ``subject`` in a root validator with a fresh command."""
    return Validator(subject, ValidationCommand())

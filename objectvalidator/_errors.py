# Copyright (c) 2023-2025, HaiyangLi <quantocean.li at gmail dot com>
#
# SPDX-License-Identifier: Apache-2.0

from typing import TYPE_CHECKING, Any, ClassVar

if TYPE_CHECKING:
    from .failure import FailureData


class ObjectValidatorError(Exception):
    default_message: ClassVar[str] = "objectvalidator error"
    __slots__ = ("message", "details")

    def __init__(
        self,
        message: str | None = None,
        *,
        details: dict[str, Any] | None = None,
        cause: Exception | None = None,
    ):
        super().__init__(message or self.default_message)
        if cause:
            self.__cause__ = cause  # preserves traceback
        self.message = message or self.default_message
        self.details = details or {}

    def to_dict(self, *, include_cause: bool = False) -> dict[str, Any]:
        data = {
            "error": self.__class__.__name__,
            "message": self.message,
            **({"details": self.details} if self.details else {}),
        }
        if include_cause and (cause := self.get_cause()):
            data["cause"] = repr(cause)
        return data

    def get_cause(self) -> Exception | None:
        """Get the cause of this error, if any."""
        return self.__cause__ if hasattr(self, "__cause__") else None


class ConfigurationError(ObjectValidatorError):
    """Raised while building a validator graph with unusable arguments."""

    default_message = "Invalid validator configuration"
    __slots__ = ()

    @classmethod
    def from_value(
        cls,
        value: Any,
        *,
        expected: str | None = None,
        message: str | None = None,
        cause: Exception | None = None,
        **extra: Any,
    ):
        """Create a ConfigurationError describing the offending value."""
        details = {
            "value": repr(value),
            "type": type(value).__name__,
            **({"expected": expected} if expected else {}),
            **extra,
        }
        return cls(message=message, details=details, cause=cause)


class MessageNotFoundError(ObjectValidatorError):
    default_message = "Message template not found"
    __slots__ = ()


class ValidationFailedError(ObjectValidatorError):
    """Raised by ``validate_or_raise`` when at least one rule failed."""

    default_message = "Validation failed"
    __slots__ = ("failures",)

    def __init__(self, failures: "list[FailureData]", message: str | None = None):
        super().__init__(
            message or f"Validation failed with {len(failures)} error(s)",
            details={"failures": [f.to_dict() for f in failures]},
        )
        self.failures = failures

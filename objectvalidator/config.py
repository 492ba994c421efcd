# Copyright (c) 2023-2025, HaiyangLi <quantocean.li at gmail dot com>
#
# SPDX-License-Identifier: Apache-2.0

from typing import Any, ClassVar

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_EMAIL_PATTERN = r"^[^@\s]+@[^@\s]+\.[^@\s]+$"


class ValidatorSettings(BaseSettings, frozen=True):
    """Library settings with environment variable support.

    Every field can be overridden with an ``OBJECTVALIDATOR_`` prefixed
    environment variable, e.g. ``OBJECTVALIDATOR_WHITESPACE_IS_EMPTY=false``.
    """

    model_config = SettingsConfigDict(
        env_prefix="OBJECTVALIDATOR_",
        env_file=(".env", ".env.local"),
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    WHITESPACE_IS_EMPTY: bool = Field(
        default=True,
        description="Treat whitespace-only strings as empty in not_empty",
    )
    EMAIL_PATTERN: str = Field(
        default=DEFAULT_EMAIL_PATTERN,
        description="Regular expression used by the email_address rule",
    )

    _instance: ClassVar[Any] = None


# Defaults as loaded at import. configure() does not change this object;
# read get_settings() for the active settings.
settings = ValidatorSettings()
ValidatorSettings._instance = settings


def get_settings() -> ValidatorSettings:
    """Return the active settings; rules read this at evaluation time."""
    return ValidatorSettings._instance


def configure(**overrides: Any) -> ValidatorSettings:
    """Replace the active settings with a copy carrying ``overrides``.

    Returns the previously active settings so callers can restore them.
    """
    previous = ValidatorSettings._instance
    ValidatorSettings._instance = previous.model_copy(update=overrides)
    return previous


def reset(to: ValidatorSettings | None = None) -> None:
    ValidatorSettings._instance = to if to is not None else settings

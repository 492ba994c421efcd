# Copyright (c) 2023-2025, HaiyangLi <quantocean.li at gmail dot com>
#
# SPDX-License-Identifier: Apache-2.0

import re
from functools import lru_cache

from .._errors import ConfigurationError
from ..config import get_settings
from .base import PV, add_builtin

__all__ = ("length", "email_address")


def _total_length(value) -> int:
    return 0 if value is None else len(value)


def length(pv: PV, min_length: int, max_length: int | None = None) -> PV:
    """Fail when the length is outside ``[min_length, max_length]``.

    None counts as length 0; ``max_length=None`` leaves the upper end open.
    """
    if min_length < 0:
        raise ConfigurationError(
            "min_length must not be negative", details={"min": min_length}
        )
    if max_length is not None and max_length < min_length:
        raise ConfigurationError(
            "max_length must not be less than min_length",
            details={"min": min_length, "max": max_length},
        )

    def _is_invalid(value) -> bool:
        total = _total_length(value)
        if total < min_length:
            return True
        return max_length is not None and total > max_length

    return add_builtin(
        pv,
        "LengthValidator",
        _is_invalid,
        lambda value: {
            "MinLength": min_length,
            "MaxLength": max_length,
            "TotalLength": _total_length(value),
        },
    )


@lru_cache(maxsize=8)
def _compile(pattern: str) -> re.Pattern:
    return re.compile(pattern)


def email_address(pv: PV) -> PV:
    """Fail when a non-None value does not look like an e-mail address."""

    def _is_invalid(value) -> bool:
        if value is None:
            return False
        return _compile(get_settings().EMAIL_PATTERN).match(str(value)) is None

    return add_builtin(pv, "EmailAddressValidator", _is_invalid)

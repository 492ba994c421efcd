# Copyright (c) 2023-2025, HaiyangLi <quantocean.li at gmail dot com>
#
# SPDX-License-Identifier: Apache-2.0

from typing import Any

from .._errors import ConfigurationError
from .base import PV, add_builtin

__all__ = ("not_equal", "inclusive_between", "exclusive_between")


def not_equal(pv: PV, comparison_value: Any) -> PV:
    return add_builtin(
        pv,
        "NotEqualValidator",
        lambda value: value == comparison_value,
        lambda value: {"ComparisonValue": comparison_value},
    )


def _check_range(from_: Any, to: Any) -> None:
    if from_ > to:
        raise ConfigurationError(
            f"'to' ({to}) must not be less than 'from' ({from_})",
            details={"from": from_, "to": to},
        )


def inclusive_between(pv: PV, from_: Any, to: Any) -> PV:
    """Fail when the value lies outside ``[from_, to]``; None passes."""
    _check_range(from_, to)
    return add_builtin(
        pv,
        "InclusiveBetweenValidator",
        lambda value: value is not None and (value < from_ or value > to),
        lambda value: {"From": from_, "To": to, "Value": value},
    )


def exclusive_between(pv: PV, from_: Any, to: Any) -> PV:
    """Fail when the value lies outside ``(from_, to)``; None passes."""
    _check_range(from_, to)
    return add_builtin(
        pv,
        "ExclusiveBetweenValidator",
        lambda value: value is not None and (value <= from_ or value >= to),
        lambda value: {"From": from_, "To": to, "Value": value},
    )

# Copyright (c) 2023-2025, HaiyangLi <quantocean.li at gmail dot com>
#
# SPDX-License-Identifier: Apache-2.0

from .base import add, add_builtin, create_failure_data, if_
from .comparison import exclusive_between, inclusive_between, not_equal
from .presence import is_empty, not_empty, not_null
from .string import email_address, length

__all__ = [
    # Base helpers
    "add",
    "add_builtin",
    "create_failure_data",
    "if_",
    # Built-in rules
    "email_address",
    "exclusive_between",
    "inclusive_between",
    "is_empty",
    "length",
    "not_empty",
    "not_equal",
    "not_null",
]

# Copyright (c) 2023-2025, HaiyangLi <quantocean.li at gmail dot com>
#
# SPDX-License-Identifier: Apache-2.0

import inspect
from collections.abc import Callable
from typing import Any

__all__ = ("maybe_await", "call_maybe_async")


async def maybe_await(value: Any) -> Any:
    """Await ``value`` if it is awaitable, otherwise return it unchanged."""
    if inspect.isawaitable(value):
        return await value
    return value


async def call_maybe_async(func: Callable[..., Any], *args, **kwargs) -> Any:
    """Call a sync or async callable and return its resolved result.

    Sync callables that hand back an awaitable (e.g. a lambda wrapping a
    coroutine function) are awaited as well.
    """
    return await maybe_await(func(*args, **kwargs))

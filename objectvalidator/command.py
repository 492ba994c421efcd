# Copyright (c) 2023-2025, HaiyangLi <quantocean.li at gmail dot com>
#
# SPDX-License-Identifier: Apache-2.0

"""Deferred rule container shared by a whole validator tree.

Rules are registered while the graph is built and evaluated only when
``validate()`` is awaited. Evaluation is strictly sequential in registration
order: each rule's result is committed to the context before the next rule
starts, which is what makes "skip if this path already failed" well defined.

Builders are not thread-safe. Register rules from one thread and do not
register concurrently with an in-flight ``validate()``; a run iterates over
a snapshot of the rules taken when it starts.
"""

import logging
from collections.abc import Awaitable, Callable

from ._errors import ConfigurationError
from .context import ValidationContext
from .failure import FailureData
from .utils import call_maybe_async

__all__ = ("ValidationCommand", "RuleFunc", "ContextAction")

logger = logging.getLogger(__name__)

RuleFunc = Callable[[], FailureData | None | Awaitable[FailureData | None]]
ContextAction = Callable[[ValidationContext], None | Awaitable[None]]


class ValidationCommand:
    """Ordered, append-only list of deferred rules."""

    __slots__ = ("_actions",)

    def __init__(self):
        self._actions: list[ContextAction] = []

    def add_action(self, action: ContextAction) -> None:
        """Register a raw step that receives the context directly."""
        self._actions.append(action)

    def add(self, func: RuleFunc, property_name: str | None = None) -> None:
        """Register a rule.

        Args:
            func: Zero-argument callable, sync or async, returning a
                ``FailureData`` on failure and None on success.
            property_name: Path the rule is bound to. When given, the rule is
                skipped entirely if the path already failed earlier in the
                same run, and a failure marks the path as failed. When None,
                the rule always runs and its failure does not affect dedup.

        Raises:
            ConfigurationError: At evaluation time, if ``func`` returns
                anything other than a ``FailureData`` or None.
        """
        if property_name is None:

            async def _unconditional(context: ValidationContext) -> None:
                failure = _check_result(await call_maybe_async(func))
                if failure is not None:
                    context.add(failure)

            self.add_action(_unconditional)
            return

        async def _scoped(context: ValidationContext) -> None:
            if context.contains(property_name):
                logger.debug(
                    f"Skipping rule on '{property_name}': path already failed"
                )
                return
            failure = _check_result(await call_maybe_async(func), property_name)
            if failure is not None:
                context.add(failure, property_name)

        self.add_action(_scoped)

    def add_failure(self, failure: FailureData) -> None:
        """Register a failure that is always reported."""
        self.add_action(lambda context: context.add(failure))

    async def validate(self) -> list[FailureData]:
        """Run every registered rule in order against a fresh context.

        Exceptions raised by rule bodies propagate unchanged and abort the run.
        """
        context = ValidationContext()
        actions = tuple(self._actions)
        logger.debug(f"Running {len(actions)} validation rules")

        for action in actions:
            await call_maybe_async(action, context)

        logger.debug(f"Validation finished with {len(context.errors)} failures")
        return context.errors

    def __len__(self) -> int:
        return len(self._actions)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(rules={len(self._actions)})"


def _check_result(
    result: object, property_name: str | None = None
) -> FailureData | None:
    if result is None or isinstance(result, FailureData):
        return result
    raise ConfigurationError.from_value(
        result,
        expected="FailureData or None",
        message="Rule returned a value that is not a FailureData",
        property=property_name,
    )

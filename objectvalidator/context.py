# Copyright (c) 2023-2025, HaiyangLi <quantocean.li at gmail dot com>
#
# SPDX-License-Identifier: Apache-2.0

from .failure import FailureData

__all__ = ("ValidationContext",)


class ValidationContext:
    """Failures collected during one ``validate()`` run.

    Paths that already produced a failure are remembered so later rules on
    the same path can be skipped.
    """

    __slots__ = ("errors", "_seen")

    def __init__(self):
        self.errors: list[FailureData] = []
        self._seen: set[str] = set()

    def contains(self, property_name: str) -> bool:
        return property_name in self._seen

    def __contains__(self, property_name: str) -> bool:
        return self.contains(property_name)

    def add(
        self, failure: FailureData, property_name: str | None = None
    ) -> None:
        """Record a failure.

        With ``property_name`` the path is marked as failed; without it the
        failure is appended only and dedup is unaffected.
        """
        self.errors.append(failure)
        if property_name is not None:
            self._seen.add(property_name)

    @property
    def seen(self) -> frozenset[str]:
        return frozenset(self._seen)

    def __len__(self) -> int:
        return len(self.errors)

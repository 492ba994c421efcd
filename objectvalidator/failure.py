# Copyright (c) 2023-2025, HaiyangLi <quantocean.li at gmail dot com>
#
# SPDX-License-Identifier: Apache-2.0

from typing import Any

from pydantic import BaseModel, ConfigDict, Field

__all__ = ("FailureData",)


class FailureData(BaseModel):
    """One validation failure.

    Attributes:
        error_message: Rendered, human readable message.
        property_name: Absolute property path (``person.first_name``,
            ``attachments[1].file_name``), or None for failures not tied
            to a single property.
        property_localized_name: Display name substituted into the message.
        error_code: Stable rule identifier, e.g. ``NotEmptyValidator``.
    """

    model_config = ConfigDict(frozen=True)

    error_message: str
    property_name: str | None = None
    property_localized_name: str | None = None
    error_code: str | None = Field(default=None)

    def __str__(self) -> str:
        if self.property_name:
            return f"{self.property_name}: {self.error_message}"
        return self.error_message

    def to_dict(self) -> dict[str, Any]:
        return self.model_dump()

# Copyright (c) 2023-2025, HaiyangLi <quantocean.li at gmail dot com>
# SPDX-License-Identifier: Apache-2.0

import logging

from ._errors import (
    ConfigurationError,
    MessageNotFoundError,
    ObjectValidatorError,
    ValidationFailedError,
)
from .command import ValidationCommand
from .config import ValidatorSettings, configure, get_settings, settings
from .context import ValidationContext
from .failure import FailureData
from .message import format_positional, placeholder, replace_placeholders
from .resources import (
    DEFAULT_MESSAGES,
    MessageRef,
    get_template,
    resource,
    set_resource_lookup,
)
from .rules import create_failure_data
from .validators import PropertyValidator, Validator, validator
from .version import __version__

logger = logging.getLogger(__name__)
logger.addHandler(logging.NullHandler())

__all__ = (
    "ConfigurationError",
    "DEFAULT_MESSAGES",
    "FailureData",
    "MessageNotFoundError",
    "MessageRef",
    "ObjectValidatorError",
    "PropertyValidator",
    "ValidationCommand",
    "ValidationContext",
    "ValidationFailedError",
    "Validator",
    "ValidatorSettings",
    "__version__",
    "configure",
    "create_failure_data",
    "format_positional",
    "get_settings",
    "get_template",
    "placeholder",
    "replace_placeholders",
    "resource",
    "set_resource_lookup",
    "settings",
    "validator",
)

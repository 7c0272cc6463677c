# Copyright (c) 2025, crud-mixin contributors
# SPDX-License-Identifier: Apache-2.0

import logging

from ._errors import (
    CrudMixinError,
    InvalidOperationError,
    InvalidSlotError,
    MissingTypeError,
)
from ._sentinel import Undefined
from ._types import SLOTS, Slot
from .bundle import Bundle
from .config import settings
from .group import Group
from .registry import Registry
from .version import __version__

logger = logging.getLogger(__name__)
logger.setLevel(settings.LOG_LEVEL)

__all__ = (
    "__version__",
    "Bundle",
    "CrudMixinError",
    "Group",
    "InvalidOperationError",
    "InvalidSlotError",
    "MissingTypeError",
    "Registry",
    "SLOTS",
    "Slot",
    "Undefined",
    "logger",
    "settings",
)

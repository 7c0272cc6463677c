# Copyright (c) 2025, crud-mixin contributors
# SPDX-License-Identifier: Apache-2.0

from collections.abc import Callable
from enum import Enum
from typing import Any, Optional, Union

from typing_extensions import TypedDict

from ._errors import InvalidSlotError

__all__ = (
    "Operation",
    "OperationMap",
    "ProtectionMap",
    "Slot",
    "SLOTS",
    "SlotLike",
    "to_slot",
)

Operation = Callable[..., Any]


class Slot(str, Enum):
    MAKE = "make"
    GET = "get"
    SET = "set"
    DEL = "del"

    @classmethod
    def allowed(cls) -> tuple[str, ...]:
        return tuple(e.value for e in cls)

    def __str__(self) -> str:
        return self.value


SLOTS: tuple[Slot, ...] = (Slot.MAKE, Slot.GET, Slot.SET, Slot.DEL)
"""Fixed merge order."""

SlotLike = Union[Slot, str]

# "del" is a keyword, so keyword arguments spell it "del_"
_ALIASES = {"del_": Slot.DEL}


def to_slot(name: SlotLike) -> Slot:
    if isinstance(name, Slot):
        return name
    if name in _ALIASES:
        return _ALIASES[name]
    try:
        return Slot(name)
    except ValueError as e:
        raise InvalidSlotError(
            f"Unknown operation slot {name!r}, "
            f"expected one of {Slot.allowed()}",
            details={"slot": name},
        ) from e


OperationMap = TypedDict(
    "OperationMap",
    {
        "make": Optional[Operation],
        "get": Optional[Operation],
        "set": Optional[Operation],
        "del": Optional[Operation],
    },
    total=False,
)

ProtectionMap = TypedDict(
    "ProtectionMap",
    {"make": bool, "get": bool, "set": bool, "del": bool},
)

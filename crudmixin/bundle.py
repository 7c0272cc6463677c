# Copyright (c) 2025, crud-mixin contributors
# SPDX-License-Identifier: Apache-2.0

"""Operation bundles: per-type carriers of make/get/set/del callables.

A bundle records up to four operations for one logical type. Bundles of
the same type patch each other's missing operations through ``merge_one``
and ``merge_all``. Every slot is write-protected: once it holds an
operation, a merge may only replace it after ``unprotect`` has been called,
and each replacement re-protects the slot.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from ._errors import InvalidOperationError
from ._sentinel import MaybeUndefined, Undefined
from ._types import (
    SLOTS,
    Operation,
    OperationMap,
    ProtectionMap,
    SlotLike,
    to_slot,
)

__all__ = ("Bundle",)


def _check_operation(slot: str, value: Any) -> None:
    if value is not None and not callable(value):
        raise InvalidOperationError(
            f"Operation for slot {slot!r} must be callable or None, "
            f"got {type(value).__name__}",
            details={"slot": slot, "value_type": type(value).__name__},
        )


class Bundle:
    """CRUD operations for one logical type.

    Args:
        type_: Type label shared by every bundle that should merge with
            this one. Not validated here; the registry rejects empty types.
        operations: Optional mapping of slot name to callable or None.
        make, get, set, del_: Keyword forms of the same slots. They take
            precedence over ``operations``.

    Slots that are not given stay unrecorded and have nothing to offer a
    merge. All four slots start write-protected.

    Usage:
        users = Bundle("User", make=create_user, get=load_user)
        users.get(42)
    """

    __slots__ = ("_type", "_operations", "_write_protected")

    def __init__(
        self,
        type_: str,
        operations: Mapping[str, Operation | None] | None = None,
        *,
        make: MaybeUndefined[Operation | None] = Undefined,
        get: MaybeUndefined[Operation | None] = Undefined,
        set: MaybeUndefined[Operation | None] = Undefined,
        del_: MaybeUndefined[Operation | None] = Undefined,
    ):
        self._type = type_
        self._operations: dict[str, MaybeUndefined[Operation | None]] = {
            s.value: Undefined for s in SLOTS
        }

        initial = dict(operations or {})
        for key, value in (
            ("make", make),
            ("get", get),
            ("set", set),
            ("del", del_),
        ):
            if value is not Undefined:
                initial[key] = value

        for key, value in initial.items():
            slot = to_slot(key).value
            _check_operation(slot, value)
            self._operations[slot] = value

        # construction is not a merge; protection is applied uniformly
        self._write_protected: dict[str, bool] = {s.value: True for s in SLOTS}

    @property
    def type(self) -> str:
        return self._type

    @property
    def make(self) -> Operation | None:
        return self["make"]

    @property
    def get(self) -> Operation | None:
        return self["get"]

    @property
    def set(self) -> Operation | None:
        return self["set"]

    @property
    def del_(self) -> Operation | None:
        return self["del"]

    def __getitem__(self, slot: SlotLike) -> Operation | None:
        value = self._operations[to_slot(slot).value]
        return None if value is Undefined else value

    @property
    def operations(self) -> OperationMap:
        """All four slots, with ``None`` for empty ones."""
        return {s.value: self[s] for s in SLOTS}

    @property
    def write_protected(self) -> ProtectionMap:
        return dict(self._write_protected)

    def is_protected(self, slot: SlotLike) -> bool:
        return self._write_protected[to_slot(slot).value]

    def has_operation(self, slot: SlotLike) -> bool:
        return self[slot] is not None

    def unprotect(
        self,
        *,
        allow_make: bool = True,
        allow_get: bool = True,
        allow_set: bool = True,
        allow_del: bool = True,
    ) -> None:
        """Mark slots as overridable by the next merge.

        Each flag set to True lets one later merge replace that slot; a
        flag set to False protects the slot again.
        """
        self._write_protected["make"] = not allow_make
        self._write_protected["get"] = not allow_get
        self._write_protected["set"] = not allow_set
        self._write_protected["del"] = not allow_del

    def merge_one(self, source: Bundle, slot: SlotLike) -> bool:
        """Copy one slot from ``source`` unless this slot is protected.

        Returns:
            True if the slot was copied. ``source`` is never modified.
        """
        key = to_slot(slot).value
        incoming = source._operations[key]
        if incoming is Undefined:
            return False

        current = self._operations[key]
        if current is not Undefined and current is not None:
            if self._write_protected[key]:
                return False

        # one overwrite per unprotect
        self._write_protected[key] = True
        self._operations[key] = incoming
        return True

    def merge_all(self, source: Bundle) -> int:
        """Merge every slot from ``source`` in make/get/set/del order.

        Returns:
            Number of slots copied.
        """
        return sum(self.merge_one(source, slot) for slot in SLOTS)

    def __repr__(self) -> str:
        filled = ", ".join(s.value for s in SLOTS if self.has_operation(s))
        return f"Bundle(type={self._type!r}, operations=[{filled}])"

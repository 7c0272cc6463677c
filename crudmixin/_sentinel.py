# Copyright (c) 2025, crud-mixin contributors
# SPDX-License-Identifier: Apache-2.0

from __future__ import annotations

from typing import Final, Literal, TypeVar, Union

__all__ = (
    "MaybeUndefined",
    "Undefined",
    "UndefinedType",
)

T = TypeVar("T")


class _SingletonMeta(type):
    """Metaclass that guarantees exactly one instance per subclass."""

    _cache: dict[type, SingletonType] = {}

    def __call__(cls, *a, **kw):
        if cls not in cls._cache:
            cls._cache[cls] = super().__call__(*a, **kw)
        return cls._cache[cls]


class SingletonType(metaclass=_SingletonMeta):
    """Base class for singleton sentinel types.

    Identity survives copy and deepcopy, so ``is`` checks stay safe.
    """

    __slots__: tuple[str, ...] = ()

    def __deepcopy__(self, memo):
        return self

    def __copy__(self):
        return self


class UndefinedType(SingletonType):
    """Sentinel for an operation slot that was never given a value.

    ``None`` in a slot means "recorded, but empty"; ``Undefined`` means
    nothing was ever recorded, so a merge has nothing to copy from it.

    Example:
        >>> ops = {"make": None}
        >>> ops.get("get", Undefined) is Undefined
        True
    """

    __slots__ = ()

    def __bool__(self) -> Literal[False]:
        return False

    def __repr__(self) -> Literal["Undefined"]:
        return "Undefined"

    def __str__(self) -> Literal["Undefined"]:
        return "Undefined"

    def __reduce__(self):
        """Ensure pickle preservation of singleton identity."""
        return "Undefined"


Undefined: Final = UndefinedType()
"""An operation slot with no recorded value"""

MaybeUndefined = Union[T, UndefinedType]

# Copyright (c) 2025, crud-mixin contributors
# SPDX-License-Identifier: Apache-2.0

from typing import Any, ClassVar

__all__ = (
    "CrudMixinError",
    "MissingTypeError",
    "InvalidSlotError",
    "InvalidOperationError",
)


class CrudMixinError(Exception):
    default_message: ClassVar[str] = "crud-mixin error"

    def __init__(
        self,
        message: str | None = None,
        *,
        details: dict[str, Any] | None = None,
        cause: Exception | None = None,
    ):
        super().__init__(message or self.default_message)
        if cause:
            self.__cause__ = cause  # preserves traceback
        self.message = message or self.default_message
        self.details = details or {}

    def to_dict(self, *, include_cause: bool = False) -> dict[str, Any]:
        data = {
            "error": self.__class__.__name__,
            "message": self.message,
            **({"details": self.details} if self.details else {}),
        }
        if include_cause and (cause := self.get_cause()):
            data["cause"] = repr(cause)
        return data

    def get_cause(self) -> Exception | None:
        """Get the cause of this error, if any."""
        return self.__cause__


class MissingTypeError(CrudMixinError, TypeError):
    """Raised when a bundle handed to the registry has no type definition."""

    default_message = "Bundle missing type definition"

    @classmethod
    def from_value(cls, value: Any):
        return cls(
            f"Bundle missing type definition: {value!r}",
            details={"value": repr(value), "value_type": type(value).__name__},
        )


class InvalidSlotError(CrudMixinError, ValueError):
    """Raised when an operation slot name is not one of make/get/set/del."""

    default_message = "Unknown operation slot"


class InvalidOperationError(CrudMixinError, TypeError):
    """Raised when a slot value is neither None nor callable."""

    default_message = "Operation must be callable or None"

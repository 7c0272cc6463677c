# Copyright (c) 2025, crud-mixin contributors
# SPDX-License-Identifier: Apache-2.0

from __future__ import annotations

from collections.abc import Callable, Mapping
from typing import Any, ClassVar

from pydantic import BaseModel, ConfigDict, Field

from .bundle import Bundle
from .config import settings

__all__ = ("Group",)


class Group(BaseModel):
    """A named, versioned set of bundles contributed by one plugin.

    Attributes:
        name: Registry key. Defaults to ``settings.DEFAULT_GROUP_NAME``.
        version: Opaque version string.
        allow_override_all: Unprotect every member bundle on construction,
            so other plugins may replace its operations once per slot.
        on_ready: Called by ``Registry.init_groups`` after merging, with
            the group as first argument. May be sync or async.
        load_guard: Called by ``Registry.add_group``; a falsy result skips
            the whole group.
        bundles: Member bundles by name, in registration order.
    """

    model_config = ConfigDict(
        arbitrary_types_allowed=True,
        frozen=True,
        extra="forbid",
    )

    RESERVED: ClassVar[frozenset[str]] = frozenset(
        {"name", "version", "allow_override_all", "on_ready", "load_guard"}
    )

    name: str | None = Field(
        default_factory=lambda: settings.DEFAULT_GROUP_NAME
    )
    version: str = Field(
        default_factory=lambda: settings.DEFAULT_GROUP_VERSION
    )
    allow_override_all: bool = False
    on_ready: Callable[..., Any] | None = None
    load_guard: Callable[[], Any] | None = None
    bundles: dict[str, Bundle] = Field(default_factory=dict)

    def model_post_init(self, __context: Any) -> None:
        if self.allow_override_all:
            for bundle in self.bundles.values():
                bundle.unprotect()

    @classmethod
    def from_spec(cls, spec: Mapping[str, Any]) -> Group:
        """Build a group from a flat record.

        Reserved keys become metadata; every other key names a member
        bundle.

        Usage:
            Group.from_spec({"name": "files", "User": user_bundle})
        """
        meta = {k: v for k, v in spec.items() if k in cls.RESERVED}
        bundles = {k: v for k, v in spec.items() if k not in cls.RESERVED}
        return cls(**meta, bundles=bundles)

    def bundle(self, name: str) -> Bundle | None:
        return self.bundles.get(name)

# Copyright (c) 2025, crud-mixin contributors
# SPDX-License-Identifier: Apache-2.0

"""Registry that composes bundles contributed by many groups."""

from __future__ import annotations

import inspect
import logging
from collections.abc import Iterable
from functools import partial
from typing import Any

import anyio

from ._errors import MissingTypeError
from .bundle import Bundle
from .config import settings
from .group import Group

__all__ = ("Registry",)

logger = logging.getLogger(__name__)


class Registry:
    """Index of groups and of bundles by type.

    Each bundle added is merged both ways with every earlier bundle of the
    same type, so all bundles of a type converge on the same operations
    while staying distinct objects. Write protection on each side decides
    which operations survive.

    Not safe for concurrent use: ``add_group`` and ``add_bundle`` must not
    interleave, and at most one ``init_groups`` call may be in flight.
    """

    def __init__(self, groups: Iterable[Group] | None = None):
        self.groups: dict[str, Group] = {}
        self.bundles_by_type: dict[str, list[Bundle]] = {}
        for group in groups or ():
            self.add_group(group)

    def add_group(self, group: Group) -> bool:
        """Register a group and every bundle it carries.

        Returns:
            False if the group's load guard rejected it, True otherwise.
        """
        name = group.name or settings.DEFAULT_GROUP_NAME
        if group.load_guard is not None and not group.load_guard():
            return False

        if name in self.groups:
            logger.debug(f"Replacing group entry {name!r}")
        self.groups[name] = group
        logger.debug(
            f"Registered group {name!r} v{group.version} "
            f"with {len(group.bundles)} bundle(s)"
        )

        for bundle in group.bundles.values():
            self.add_bundle(bundle)
        return True

    def add_bundle(self, bundle: Bundle) -> None:
        """Index a bundle and merge it with earlier bundles of its type.

        Raises:
            MissingTypeError: If the bundle has no type.
        """
        type_ = getattr(bundle, "type", None)
        if not type_:
            raise MissingTypeError.from_value(bundle)

        existing = self.bundles_by_type.setdefault(type_, [])
        if any(b is bundle for b in existing):
            logger.debug(f"Bundle {bundle!r} already indexed, skipping")
            return

        copied = 0
        for other in existing:
            copied += bundle.merge_all(other)
            copied += other.merge_all(bundle)
        existing.append(bundle)

        logger.debug(
            f"Indexed {bundle!r} as #{len(existing)} of type {type_!r}, "
            f"{copied} slot(s) exchanged"
        )

    def get_bundles(self, type_: str) -> tuple[Bundle, ...]:
        return tuple(self.bundles_by_type.get(type_, ()))

    def has_type(self, type_: str) -> bool:
        return type_ in self.bundles_by_type

    @property
    def types(self) -> tuple[str, ...]:
        return tuple(self.bundles_by_type)

    def get_group(self, name: str) -> Group | None:
        return self.groups.get(name)

    async def init_groups(self, *args: Any, **kwargs: Any) -> Registry:
        """Run each group's ``on_ready`` in registration order.

        Every initializer receives the group first, then ``args`` and
        ``kwargs``, and is awaited before the next one starts. The first
        exception propagates and the remaining groups are not run.
        """
        for name, group in list(self.groups.items()):
            if group.on_ready is None:
                continue
            logger.debug(f"Initializing group {name!r}")
            result = group.on_ready(group, *args, **kwargs)
            if inspect.isawaitable(result):
                await result
        return self

    def run_init_groups(self, *args: Any, **kwargs: Any) -> Registry:
        """Blocking form of ``init_groups`` for synchronous hosts.

        Starts its own event loop, so it cannot be called from async code.
        """
        return anyio.run(partial(self.init_groups, *args, **kwargs))

    def __repr__(self) -> str:
        return (
            f"Registry(groups={list(self.groups)}, "
            f"types={list(self.bundles_by_type)})"
        )

# Copyright (c) 2025, crud-mixin contributors
# SPDX-License-Identifier: Apache-2.0

from typing import Any, ClassVar, Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

__all__ = ("CrudMixinSettings", "settings")


class CrudMixinSettings(BaseSettings, frozen=True):
    """Package settings with environment variable support."""

    model_config = SettingsConfigDict(
        env_prefix="CRUDMIXIN_",
        env_file=(".env", ".env.local"),
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    DEFAULT_GROUP_NAME: str = Field(
        default="Untitled Plugin",
        description="Registry key for groups registered without a name",
    )
    DEFAULT_GROUP_VERSION: str = Field(
        default="0.0.0",
        description="Version assigned to groups that do not declare one",
    )
    LOG_LEVEL: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = (
        "WARNING"
    )

    _instance: ClassVar[Any] = None


settings = CrudMixinSettings()
CrudMixinSettings._instance = settings

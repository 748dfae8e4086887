# Copyright 2026 Firefly Software Solutions Inc.
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.
"""Locale configuration properties (``intent.i18n.*``)."""

from __future__ import annotations

from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from intent_locale.core.config import config_properties


class LocaleCookieProperties(BaseModel):
    """Attributes of the cookie that stores the visitor's locale."""

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    name: str = "ids_locale"
    path: str = "/"
    max_age: int = Field(default=60 * 60 * 24 * 365, alias="max-age", ge=0)
    same_site: Literal["lax", "strict", "none"] = Field(default="lax", alias="same-site")
    http_only: bool = Field(default=False, alias="http-only")
    secure: bool = False


@config_properties(prefix="intent.i18n")
class LocaleProperties(BaseModel):
    """Supported locales, default locale, and request-transport settings.

    Fixed at startup; ``default`` must be one of ``supported``.
    """

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    supported: list[str] = Field(default_factory=lambda: ["en", "fr"], min_length=1)
    default: str = "en"
    query_param: str = Field(default="lang", alias="query-param")
    copy_path: str = Field(default="copy/", alias="copy-path")
    exclude_patterns: list[str] = Field(
        default_factory=lambda: ["/_next/*", "/favicon.ico", "/robots.txt", "/sitemap.xml", "*.*"],
        alias="exclude-patterns",
    )
    cookie: LocaleCookieProperties = Field(default_factory=LocaleCookieProperties)

    @field_validator("supported", mode="before")
    @classmethod
    def _split_supported(cls, value: Any) -> Any:
        # Environment overrides arrive as "en,fr".
        if isinstance(value, str):
            value = value.split(",")
        if isinstance(value, list):
            return [str(v).strip().lower() for v in value if str(v).strip()]
        return value

    @field_validator("exclude_patterns", mode="before")
    @classmethod
    def _split_patterns(cls, value: Any) -> Any:
        if isinstance(value, str):
            return [p.strip() for p in value.split(",") if p.strip()]
        return value

    @field_validator("default", mode="before")
    @classmethod
    def _normalize_default(cls, value: Any) -> Any:
        return value.strip().lower() if isinstance(value, str) else value

    @model_validator(mode="after")
    def _default_is_supported(self) -> LocaleProperties:
        if self.default not in self.supported:
            raise ValueError(f"default locale '{self.default}' is not in supported {self.supported}")
        return self

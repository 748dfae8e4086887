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
"""Locale resolution from explicit, stored, and header signals.

Priority is fixed: explicit override > stored preference > preference
header > default.  Resolution is pure; callers pass the decoded string
values they read from their own transport (query string, cookie jar,
request headers).
"""

from __future__ import annotations

from collections.abc import Iterable
from typing import TYPE_CHECKING

from intent_locale.i18n.accept_language import parse_accept_language
from intent_locale.i18n.types import (
    DEFAULT_LOCALE,
    SUPPORTED_LOCALES,
    Locale,
    ResolutionReason,
    ResolutionResult,
)
from intent_locale.kernel.exceptions import ConfigurationException

if TYPE_CHECKING:
    from intent_locale.i18n.properties import LocaleProperties


class LocaleResolver:
    """Reconciles the three locale signals into one supported locale.

    *supported_locales* is the closed set of values the resolver may
    return.  Entries naming a :class:`Locale` member are stored as that
    member, so with the built-in configuration every result is a
    ``Locale``.  *default_locale* must belong to the set.
    """

    def __init__(
        self,
        supported_locales: Iterable[str] = SUPPORTED_LOCALES,
        default_locale: str = DEFAULT_LOCALE,
    ) -> None:
        self._supported: dict[str, str] = {}
        for value in supported_locales:
            key = value.strip().lower()
            if key:
                self._supported[key] = _as_locale(key)

        if not self._supported:
            raise ConfigurationException(
                "At least one supported locale is required",
                code="LOCALE_CONFIG_001",
            )

        default_key = default_locale.strip().lower()
        if default_key not in self._supported:
            raise ConfigurationException(
                f"Default locale '{default_locale}' is not one of the supported locales",
                code="LOCALE_CONFIG_002",
                context={"default": default_locale, "supported": list(self._supported)},
            )
        self._default = self._supported[default_key]

    @classmethod
    def from_properties(cls, properties: LocaleProperties) -> LocaleResolver:
        return cls(properties.supported, properties.default)

    @property
    def supported_locales(self) -> tuple[str, ...]:
        return tuple(self._supported.values())

    @property
    def default_locale(self) -> str:
        return self._default

    def is_supported(self, value: str | None) -> bool:
        """Exact membership test, without normalization."""
        return value is not None and value in self._supported

    def normalize(self, value: str | None) -> str | None:
        """Map a raw tag or header fragment onto a supported locale.

        ``"FR-ca"``, ``" fr "`` and ``"fr-FR,fr;q=0.9"`` all normalize to
        ``fr`` when it is supported.  Returns ``None`` for anything else.
        """
        if not value:
            return None

        v = value.lower().strip()
        if v in self._supported:
            return self._supported[v]

        base = v.split(",")[0].split(";")[0].split("-")[0].strip()
        return self._supported.get(base) if base else None

    def resolve(
        self,
        explicit: str | None = None,
        stored: str | None = None,
        header: str | None = None,
    ) -> ResolutionResult:
        """Pick the locale for a request.  Never raises."""
        locale = self.normalize(explicit)
        if locale is not None:
            return ResolutionResult(locale, ResolutionReason.EXPLICIT)

        locale = self.normalize(stored)
        if locale is not None:
            return ResolutionResult(locale, ResolutionReason.STORED)

        locale = self._match_header(header)
        if locale is not None:
            return ResolutionResult(locale, ResolutionReason.HEADER)

        return ResolutionResult(self._default, ResolutionReason.DEFAULT)

    def _match_header(self, header: str | None) -> str | None:
        # First supported candidate by descending weight; later candidates
        # are not consulted even if they share the winning weight.
        for candidate in parse_accept_language(header):
            locale = self.normalize(candidate.primary_subtag)
            if locale is not None:
                return locale
        return None


def pick_locale_from_accept_language(header: str | None, resolver: LocaleResolver | None = None) -> str:
    """Resolve from the ``Accept-Language`` header alone."""
    return (resolver or _default_resolver).resolve(header=header).locale


def resolve_locale(
    explicit: str | None = None,
    stored: str | None = None,
    header: str | None = None,
) -> ResolutionResult:
    """Resolve against the built-in locales with ``en`` as the default."""
    return _default_resolver.resolve(explicit, stored, header)


def _as_locale(value: str) -> str:
    try:
        return Locale(value)
    except ValueError:
        return value


_default_resolver = LocaleResolver()

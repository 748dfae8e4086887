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
"""Tests for LocaleResolver — priority, normalization, and fallback."""

from __future__ import annotations

import pytest

from intent_locale.i18n.locale import (
    LocaleResolver,
    pick_locale_from_accept_language,
    resolve_locale,
)
from intent_locale.i18n.properties import LocaleProperties
from intent_locale.i18n.types import Locale, ResolutionReason, ResolutionResult
from intent_locale.kernel.exceptions import ConfigurationException


@pytest.fixture
def resolver() -> LocaleResolver:
    return LocaleResolver(["en", "fr"], "en")


class TestNormalize:
    @pytest.mark.parametrize("raw", ["fr", "FR", " fr ", "fr-ca", "FR-CA", "fr-FR,fr;q=0.9", "fr;q=0.8"])
    def test_variants_map_to_supported(self, resolver: LocaleResolver, raw: str) -> None:
        assert resolver.normalize(raw) == "fr"

    @pytest.mark.parametrize("raw", [None, "", "   ", "de", "de-DE", "-fr", ",fr", "english"])
    def test_unsupported_is_none(self, resolver: LocaleResolver, raw: str | None) -> None:
        assert resolver.normalize(raw) is None

    def test_returns_locale_members(self, resolver: LocaleResolver) -> None:
        assert resolver.normalize("EN-gb") is Locale.EN

    def test_is_supported_is_exact(self, resolver: LocaleResolver) -> None:
        assert resolver.is_supported("fr")
        assert not resolver.is_supported("FR")
        assert not resolver.is_supported("fr-FR")
        assert not resolver.is_supported(None)


class TestResolvePriority:
    def test_explicit_wins_over_everything(self, resolver: LocaleResolver) -> None:
        result = resolver.resolve(explicit="en", stored="fr", header="fr")
        assert result == ResolutionResult(Locale.EN, ResolutionReason.EXPLICIT)

    def test_stored_used_when_explicit_absent(self, resolver: LocaleResolver) -> None:
        result = resolver.resolve(explicit=None, stored="fr", header="en")
        assert result == ResolutionResult(Locale.FR, ResolutionReason.STORED)

    def test_unsupported_explicit_falls_through_to_stored(self, resolver: LocaleResolver) -> None:
        result = resolver.resolve(explicit="de", stored="fr", header=None)
        assert result.locale == "fr"
        assert result.reason is ResolutionReason.STORED

    def test_header_used_when_no_explicit_or_stored(self, resolver: LocaleResolver) -> None:
        result = resolver.resolve(header="fr-FR,en;q=0.7")
        assert result == ResolutionResult(Locale.FR, ResolutionReason.HEADER)

    def test_header_skips_unsupported_candidates(self, resolver: LocaleResolver) -> None:
        result = resolver.resolve(header="de-DE,de;q=0.9,en;q=0.8,fr;q=0.7")
        assert result.locale == "en"
        assert result.reason is ResolutionReason.HEADER

    def test_header_tie_goes_to_first_listed(self, resolver: LocaleResolver) -> None:
        assert resolver.resolve(header="en;q=0.5,fr;q=0.5").locale == "en"
        assert resolver.resolve(header="fr;q=0.5,en;q=0.5").locale == "fr"

    @pytest.mark.parametrize(
        ("explicit", "stored", "header"),
        [
            (None, None, None),
            ("", "", ""),
            ("de", "es", "de-DE,it;q=0.5"),
            ("   ", ";", ","),
        ],
    )
    def test_default_when_nothing_matches(
        self, resolver: LocaleResolver, explicit: str | None, stored: str | None, header: str | None
    ) -> None:
        assert resolver.resolve(explicit, stored, header) == ResolutionResult(Locale.EN, ResolutionReason.DEFAULT)

    def test_resolution_is_repeatable(self, resolver: LocaleResolver) -> None:
        first = resolver.resolve("de", None, "fr-CH,fr;q=0.9,en;q=0.8")
        second = resolver.resolve("de", None, "fr-CH,fr;q=0.9,en;q=0.8")
        assert first == second

    def test_result_is_frozen(self, resolver: LocaleResolver) -> None:
        result = resolver.resolve()
        with pytest.raises(AttributeError):
            result.locale = "fr"  # type: ignore[misc]


class TestRestrictedSupportedSet:
    def test_only_english_supported(self) -> None:
        resolver = LocaleResolver(["en"], "en")
        result = resolver.resolve(header="fr-CH,fr;q=0.9,en;q=0.8")
        assert result == ResolutionResult(Locale.EN, ResolutionReason.HEADER)

    def test_custom_locale_values_are_plain_strings(self) -> None:
        resolver = LocaleResolver(["en", "de"], "de")
        result = resolver.resolve(explicit="DE-at")
        assert result.locale == "de"
        assert not isinstance(result.locale, Locale)

    def test_french_default(self) -> None:
        resolver = LocaleResolver(["en", "fr"], "fr")
        assert resolver.resolve().locale is Locale.FR

    def test_default_outside_set_rejected(self) -> None:
        with pytest.raises(ConfigurationException) as exc_info:
            LocaleResolver(["en", "fr"], "de")
        assert exc_info.value.code == "LOCALE_CONFIG_002"
        assert exc_info.value.context["default"] == "de"

    def test_empty_set_rejected(self) -> None:
        with pytest.raises(ConfigurationException):
            LocaleResolver([], "en")

    def test_from_properties(self) -> None:
        resolver = LocaleResolver.from_properties(LocaleProperties(supported=["fr"], default="fr"))
        assert resolver.supported_locales == (Locale.FR,)
        assert resolver.default_locale is Locale.FR


class TestModuleHelpers:
    def test_resolve_locale_uses_builtin_locales(self) -> None:
        assert resolve_locale(header="fr-FR,en;q=0.7") == ResolutionResult(Locale.FR, ResolutionReason.HEADER)
        assert resolve_locale("de", "fr") == ResolutionResult(Locale.FR, ResolutionReason.STORED)

    def test_pick_from_header(self) -> None:
        assert pick_locale_from_accept_language("de,fr;q=0.1") == "fr"
        assert pick_locale_from_accept_language("de") == "en"
        assert pick_locale_from_accept_language(None) == "en"

    def test_pick_from_header_ignores_nothing_but_header(self) -> None:
        resolver = LocaleResolver(["en", "fr"], "fr")
        assert pick_locale_from_accept_language("", resolver) == "fr"


class TestLocaleEnum:
    def test_members_compare_equal_to_values(self) -> None:
        assert Locale.EN == "en"
        assert Locale.FR == "fr"
        assert str(Locale.FR) == "fr"
        assert str(ResolutionReason.HEADER) == "header"

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
"""intent-locale — per-request locale negotiation for the Intent front-end.

Quick use::

    from intent_locale import resolve_locale

    resolve_locale(explicit=None, stored=None, header="fr-FR,en;q=0.7")
    # ResolutionResult(locale=<Locale.FR: 'fr'>, reason=<ResolutionReason.HEADER: 'header'>)
"""

from intent_locale.i18n import (
    DEFAULT_LOCALE,
    SUPPORTED_LOCALES,
    Locale,
    LocaleResolver,
    PreferenceCandidate,
    ResolutionReason,
    ResolutionResult,
    parse_accept_language,
    resolve_locale,
)

__version__ = "0.1.0"

__all__ = [
    "DEFAULT_LOCALE",
    "SUPPORTED_LOCALES",
    "Locale",
    "LocaleResolver",
    "PreferenceCandidate",
    "ResolutionReason",
    "ResolutionResult",
    "parse_accept_language",
    "resolve_locale",
]

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
"""intent-locale i18n — locale negotiation and copy tables.

Import concrete adapter types from the adapter package::

    from intent_locale.i18n.adapters.resource_bundle import ResourceBundleCopySource
"""

from intent_locale.i18n.accept_language import parse_accept_language
from intent_locale.i18n.locale import (
    LocaleResolver,
    pick_locale_from_accept_language,
    resolve_locale,
)
from intent_locale.i18n.ports.outbound import CopySource
from intent_locale.i18n.properties import LocaleCookieProperties, LocaleProperties
from intent_locale.i18n.types import (
    DEFAULT_LOCALE,
    SUPPORTED_LOCALES,
    Locale,
    PreferenceCandidate,
    ResolutionReason,
    ResolutionResult,
)

__all__ = [
    "DEFAULT_LOCALE",
    "SUPPORTED_LOCALES",
    "CopySource",
    "Locale",
    "LocaleCookieProperties",
    "LocaleProperties",
    "LocaleResolver",
    "PreferenceCandidate",
    "ResolutionReason",
    "ResolutionResult",
    "parse_accept_language",
    "pick_locale_from_accept_language",
    "resolve_locale",
]

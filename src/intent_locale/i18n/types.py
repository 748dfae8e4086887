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
"""Value types shared by the header parser and the locale resolver."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class Locale(str, Enum):
    """Locales this build ships copy for.

    Members are strings, so ``Locale.FR == "fr"`` holds and a member can be
    used directly as a cookie value or an HTML ``lang`` attribute.
    """

    EN = "en"
    FR = "fr"

    def __str__(self) -> str:
        return self.value


DEFAULT_LOCALE = Locale.EN
SUPPORTED_LOCALES: tuple[Locale, ...] = tuple(Locale)


class ResolutionReason(str, Enum):
    """Which signal produced a resolved locale. Diagnostic only."""

    EXPLICIT = "explicit"
    STORED = "stored"
    HEADER = "header"
    DEFAULT = "default"

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class PreferenceCandidate:
    """One entry of a parsed ``Accept-Language`` header."""

    primary_subtag: str
    weight: float = 1.0


@dataclass(frozen=True)
class ResolutionResult:
    """The locale chosen for a request and the signal it came from."""

    locale: str
    reason: ResolutionReason

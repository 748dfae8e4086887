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
"""Parser for the weighted ``Accept-Language`` preference header.

Handles the common browser format, e.g. ``fr-CH,fr;q=0.9,en;q=0.8``.
Only the primary subtag of each language tag is kept; regions, scripts
and wildcard semantics are ignored.
"""

from __future__ import annotations

import math
import re

from intent_locale.i18n.types import PreferenceCandidate

DEFAULT_WEIGHT = 1.0

# Plain ASCII decimal or exponent notation; float() alone also takes "0_9".
_WEIGHT_RE = re.compile(r"[+-]?(\d+(\.\d*)?|\.\d+)([eE][+-]?\d+)?", re.ASCII)


def parse_accept_language(header: str | None) -> list[PreferenceCandidate]:
    """Return the header's candidates ordered by descending weight.

    The sort is stable, so candidates sharing a weight keep the order in
    which the header lists them.  Malformed segments never raise: a missing
    or unparsable ``q`` falls back to a weight of 1.
    """
    if not header:
        return []

    candidates = [_parse_part(part.strip()) for part in header.split(",")]
    return sorted(candidates, key=lambda c: c.weight, reverse=True)


def _parse_part(part: str) -> PreferenceCandidate:
    tag, *params = (piece.strip() for piece in part.split(";"))
    q_param = next((p for p in params if p.startswith("q=")), None)
    weight = _parse_weight(q_param[2:]) if q_param is not None else DEFAULT_WEIGHT
    return PreferenceCandidate(primary_subtag=tag.lower().split("-")[0], weight=weight)


def _parse_weight(raw: str) -> float:
    if not _WEIGHT_RE.fullmatch(raw):
        return DEFAULT_WEIGHT
    weight = float(raw)
    return weight if math.isfinite(weight) else DEFAULT_WEIGHT

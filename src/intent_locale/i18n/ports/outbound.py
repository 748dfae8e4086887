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
"""CopySource protocol — port for per-locale copy tables."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class CopySource(Protocol):
    """Supplies the text tree a page renders for a resolved locale."""

    def get_copy(self, locale: str) -> Mapping[str, Any]:
        """Return the nested copy table for *locale*.

        Locales without a table fall back to the default locale's table.
        """
        ...

    def get_text(self, key: str, locale: str) -> str:
        """Return the text at dot-path *key* for *locale*.

        Falls back to the default locale; raises ``CopyNotFoundException``
        (a ``KeyError``) when neither has the key.
        """
        ...

    def get_text_or_default(self, key: str, default: str, locale: str) -> str:
        """Like :meth:`get_text`, returning *default* on a miss."""
        ...

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
"""Resource-bundle copy source — loads per-locale copy tables from YAML/JSON."""

from __future__ import annotations

import json
from collections.abc import Mapping
from pathlib import Path
from types import MappingProxyType
from typing import Any

import structlog
import yaml  # type: ignore[import-untyped]

from intent_locale.kernel.exceptions import CopyNotFoundException

logger = structlog.get_logger("intent_locale.i18n")

_EMPTY: Mapping[str, Any] = MappingProxyType({})


class ResourceBundleCopySource:
    """Serves copy tables stored as one file per locale.

    File naming convention::

        {base_path}/copy_{locale}.yaml   (preferred)
        {base_path}/copy_{locale}.yml
        {base_path}/copy_{locale}.json   (fallback)

    A table is a nested mapping; leaves are addressed with dot paths, so::

        hero:
          title_line1: "Design interfaces"

    is read as ``get_text("hero.title_line1", "en")``.
    """

    def __init__(self, base_path: str | Path = "copy/", default_locale: str = "en") -> None:
        self._base_path = Path(base_path)
        self._default_locale = str(default_locale)
        self._cache: dict[str, Mapping[str, Any]] = {}

    # ------------------------------------------------------------------
    # Public API (CopySource protocol)
    # ------------------------------------------------------------------

    def get_copy(self, locale: str) -> Mapping[str, Any]:
        table = self._load(str(locale))
        if not table and str(locale) != self._default_locale:
            table = self._load(self._default_locale)
        return table

    def get_text(self, key: str, locale: str) -> str:
        value = _lookup(self._load(str(locale)), key)
        if value is None and str(locale) != self._default_locale:
            value = _lookup(self._load(self._default_locale), key)

        if value is None:
            raise CopyNotFoundException(
                f"No copy found for key '{key}' in locale '{locale}'",
                context={"key": key, "locale": str(locale)},
            )
        return value

    def get_text_or_default(self, key: str, default: str, locale: str) -> str:
        try:
            return self.get_text(key, locale)
        except CopyNotFoundException:
            return default

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------

    def _load(self, locale: str) -> Mapping[str, Any]:
        if locale in self._cache:
            return self._cache[locale]

        table: Mapping[str, Any] = _EMPTY
        for suffix in (".yaml", ".yml", ".json"):
            path = self._base_path / f"copy_{locale}{suffix}"
            if path.is_file():
                table = MappingProxyType(self._read(path))
                logger.debug("copy_table_loaded", locale=locale, path=str(path))
                break

        self._cache[locale] = table
        return table

    @staticmethod
    def _read(path: Path) -> dict[str, Any]:
        with path.open(encoding="utf-8") as fh:
            data = json.load(fh) if path.suffix == ".json" else yaml.safe_load(fh)
        if data is None:
            return {}
        if not isinstance(data, dict):
            raise ValueError(f"Copy table {path} must contain a mapping at the top level")
        return data


def _lookup(table: Mapping[str, Any], key: str) -> str | None:
    """Follow a dot path through nested mappings to a leaf."""
    current: Any = table
    for part in key.split("."):
        if not isinstance(current, Mapping) or part not in current:
            return None
        current = current[part]
    if isinstance(current, Mapping) or current is None:
        return None
    return str(current)

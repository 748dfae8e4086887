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
"""Deploy-time configuration: YAML/TOML files, env vars, and typed binding."""

from __future__ import annotations

import dataclasses
import importlib.resources
import os
import re
import tomllib
from collections.abc import Callable
from pathlib import Path
from typing import Any, TypeVar, get_type_hints

import yaml  # type: ignore[import-untyped]

T = TypeVar("T")

CONFIG_NAME = "intent"
ENV_PREFIX = "INTENT_"

_PLACEHOLDER_RE = re.compile(r"\$\{([^}]+)\}")
_MAX_PLACEHOLDER_DEPTH = 10

_CONFIG_PROPERTIES_ATTR = "__intent_config_prefix__"
_MISSING = object()


def config_properties(prefix: str) -> Callable[[type[T]], type[T]]:
    """Mark a dataclass or pydantic model as bindable to a config prefix.

    Usage::

        @config_properties(prefix="intent.i18n")
        class LocaleProperties(BaseModel):
            supported: list[str] = ["en", "fr"]
            default: str = "en"
    """

    def decorator(cls: type[T]) -> type[T]:
        setattr(cls, _CONFIG_PROPERTIES_ATTR, prefix)
        return cls

    return decorator


def env_key_for(key: str) -> str:
    """Map a dotted config key to its environment override name.

    ``intent.i18n.default`` -> ``INTENT_I18N_DEFAULT``
    """
    base = key.removeprefix(f"{CONFIG_NAME}.")
    return ENV_PREFIX + base.upper().replace(".", "_").replace("-", "_")


class Config:
    """Hierarchical configuration with dot-notation access.

    Priority (highest wins):
    1. Environment variables (``INTENT_SECTION_KEY``)
    2. Values loaded from files or passed as a dict
    3. Defaults declared on the bound properties class
    """

    def __init__(self, data: dict[str, Any] | None = None) -> None:
        self._data: dict[str, Any] = data or {}
        self._loaded_sources: list[str] = []

    @property
    def loaded_sources(self) -> list[str]:
        """Config sources that were merged, in merge order."""
        return list(self._loaded_sources)

    def to_dict(self) -> dict[str, Any]:
        return dict(self._data)

    # ------------------------------------------------------------------
    # Loading
    # ------------------------------------------------------------------

    @classmethod
    def from_sources(
        cls,
        base_dir: str | Path,
        active_profiles: list[str] | None = None,
        load_defaults: bool = True,
    ) -> Config:
        """Load and merge every config file found under *base_dir*.

        Merge order (later wins):
        1. Packaged defaults (``intent_locale/resources/intent-defaults.yaml``)
        2. ``config/intent.yaml`` or ``config/intent.toml``
        3. ``intent.yaml`` or ``intent.toml``
        4. Profile overlays ``intent-{profile}.yaml|toml`` in both locations
        """
        base_dir = Path(base_dir)
        data: dict[str, Any] = {}
        sources: list[str] = []

        if load_defaults:
            data = cls._load_packaged_defaults()
            sources.append("intent-defaults.yaml (packaged defaults)")

        search_dirs = [base_dir / "config", base_dir]
        stems = [CONFIG_NAME] + [f"{CONFIG_NAME}-{p}" for p in active_profiles or []]

        for stem in stems:
            for search_dir in search_dirs:
                for ext in (".yaml", ".toml"):
                    candidate = search_dir / f"{stem}{ext}"
                    if candidate.is_file():
                        data = cls._deep_merge(data, cls._load_file(candidate))
                        sources.append(str(candidate))

        instance = cls(data)
        instance._loaded_sources = sources
        return instance

    @classmethod
    def from_file(cls, path: str | Path, load_defaults: bool = True) -> Config:
        """Load a single YAML or TOML file on top of the packaged defaults."""
        path = Path(path)
        data: dict[str, Any] = {}
        sources: list[str] = []

        if load_defaults:
            data = cls._load_packaged_defaults()
            sources.append("intent-defaults.yaml (packaged defaults)")

        if path.is_file():
            data = cls._deep_merge(data, cls._load_file(path))
            sources.append(str(path))

        instance = cls(data)
        instance._loaded_sources = sources
        return instance

    @staticmethod
    def _load_file(path: Path) -> dict[str, Any]:
        if path.suffix == ".toml":
            with open(path, "rb") as f:
                return tomllib.load(f) or {}
        with open(path, encoding="utf-8") as f:
            return yaml.safe_load(f) or {}

    @staticmethod
    def _load_packaged_defaults() -> dict[str, Any]:
        defaults_file = importlib.resources.files("intent_locale.resources").joinpath("intent-defaults.yaml")
        with importlib.resources.as_file(defaults_file) as p, open(p, encoding="utf-8") as f:
            return yaml.safe_load(f) or {}

    @staticmethod
    def _deep_merge(base: dict[str, Any], override: dict[str, Any]) -> dict[str, Any]:
        merged = dict(base)
        for key, value in override.items():
            if isinstance(merged.get(key), dict) and isinstance(value, dict):
                merged[key] = Config._deep_merge(merged[key], value)
            else:
                merged[key] = value
        return merged

    # ------------------------------------------------------------------
    # Access
    # ------------------------------------------------------------------

    def _lookup(self, key: str) -> Any:
        """Walk the nested data for *key*; ``_MISSING`` when absent."""
        current: Any = self._data
        for part in key.split("."):
            if not isinstance(current, dict) or current.get(part) is None:
                return _MISSING
            current = current[part]
        return current

    def get(self, key: str, default: Any = None) -> Any:
        """Get a value by dot-notation key; environment overrides win.

        String values may contain ``${ENV_VAR}``, ``${config.key}`` or
        ``${key:default}`` placeholders.
        """
        env_val = os.environ.get(env_key_for(key))
        if env_val is not None:
            return env_val

        value = self._lookup(key)
        if value is _MISSING:
            return default
        if isinstance(value, str) and "${" in value:
            return self._resolve_placeholders(value)
        return value

    def _resolve_placeholders(self, value: str, _depth: int = 0) -> str:
        if _depth > _MAX_PLACEHOLDER_DEPTH:
            raise ValueError(f"Placeholder recursion too deep in '{value}'; check for circular references")

        def _replace(match: re.Match[str]) -> str:
            ref_key, sep, fallback = match.group(1).partition(":")

            env_val = os.environ.get(ref_key)
            if env_val is not None:
                return env_val

            found = self._lookup(ref_key)
            if found is not _MISSING:
                resolved = str(found)
                if "${" in resolved:
                    resolved = self._resolve_placeholders(resolved, _depth + 1)
                return resolved

            if sep:
                return fallback

            raise ValueError(f"Cannot resolve placeholder '${{{match.group(1)}}}'")

        return _PLACEHOLDER_RE.sub(_replace, value)

    def get_section(self, prefix: str) -> dict[str, Any]:
        """Return the nested dict stored under *prefix* (empty when absent)."""
        section = self._lookup(prefix)
        return section if isinstance(section, dict) else {}

    # ------------------------------------------------------------------
    # Binding
    # ------------------------------------------------------------------

    def bind(self, config_cls: type[T]) -> T:
        """Bind the section under the class's prefix to a properties class.

        Pydantic models are validated with ``model_validate``; validation
        errors surface as ``ValueError`` naming the prefix.  Dataclasses get
        simple scalar coercion from string values.
        """
        from pydantic import BaseModel, ValidationError

        prefix = getattr(config_cls, _CONFIG_PROPERTIES_ATTR, None)
        if prefix is None:
            raise ValueError(f"{config_cls.__name__} is not decorated with @config_properties")

        section = self._with_env_overrides(prefix, self.get_section(prefix))

        if isinstance(config_cls, type) and issubclass(config_cls, BaseModel):
            try:
                return config_cls.model_validate(section)
            except ValidationError as exc:
                raise ValueError(
                    f"Configuration validation failed for '{config_cls.__name__}' (prefix='{prefix}'):\n{exc}"
                ) from exc

        hints = get_type_hints(config_cls)
        kwargs: dict[str, Any] = {}
        for field in dataclasses.fields(config_cls):  # type: ignore[arg-type]
            if field.name not in section:
                continue
            value = section[field.name]
            expected = hints.get(field.name)
            if isinstance(value, str):
                if expected is int:
                    value = int(value)
                elif expected is float:
                    value = float(value)
                elif expected is bool:
                    value = value.lower() in ("true", "1", "yes")
            kwargs[field.name] = value
        return config_cls(**kwargs)

    def _with_env_overrides(self, prefix: str, section: dict[str, Any]) -> dict[str, Any]:
        """Apply env overrides to every key of *section*, nested ones included.

        ``intent.i18n.cookie.secure`` is overridden by ``INTENT_I18N_COOKIE_SECURE``,
        matching what :meth:`get` returns for the same key.
        """
        merged = dict(section)
        for key, value in section.items():
            if isinstance(value, dict):
                merged[key] = self._with_env_overrides(f"{prefix}.{key}", value)
                continue
            env_val = os.environ.get(env_key_for(f"{prefix}.{key}"))
            if env_val is not None:
                merged[key] = env_val
        return merged

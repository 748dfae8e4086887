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
"""StructlogAdapter — LoggingPort implementation backed by structlog."""

from __future__ import annotations

import logging
import sys
from enum import Enum
from typing import Any

import structlog
from structlog.types import EventDict, Processor, WrappedLogger

from intent_locale.core.config import Config

FORMATS = ("console", "json", "keyvalue")


def render_enum_values(_logger: WrappedLogger, _method: str, event_dict: EventDict) -> EventDict:
    """Log ``Locale.FR`` and ``ResolutionReason.HEADER`` as ``fr`` / ``header``."""
    for key, value in event_dict.items():
        if isinstance(value, Enum):
            event_dict[key] = value.value
    return event_dict


class StructlogAdapter:
    """Configures structlog from the ``intent.logging`` section.

    Recognised keys::

        intent:
          logging:
            format: console      # console | json | keyvalue
            colors: false        # console only
            level:
              root: INFO
              intent_locale.web: DEBUG

    An unknown format falls back to ``console``.
    """

    def __init__(self) -> None:
        self._root_level: str = "INFO"
        self._format: str = "console"
        self._colors: bool = False
        self._module_levels: dict[str, str] = {}

    def configure(self, config: Config) -> None:
        levels = {k: str(v).upper() for k, v in config.get_section("intent.logging.level").items()}
        self._root_level = levels.pop("root", "INFO")
        self._module_levels = levels

        fmt = str(config.get("intent.logging.format", "console")).lower()
        self._format = fmt if fmt in FORMATS else "console"
        self._colors = str(config.get("intent.logging.colors", False)).lower() in ("true", "1", "yes")

        structlog.configure(
            processors=self.processors(),
            logger_factory=structlog.stdlib.LoggerFactory(),
            wrapper_class=structlog.stdlib.BoundLogger,
            cache_logger_on_first_use=True,
        )
        logging.basicConfig(
            format="%(message)s",
            stream=sys.stdout,
            level=getattr(logging, self._root_level, logging.INFO),
            force=True,
        )
        for module, level in self._module_levels.items():
            self.set_level(module, level)

    def get_logger(self, name: str) -> Any:
        return structlog.get_logger(name)

    def set_level(self, name: str, level: str) -> None:
        logging.getLogger(name).setLevel(getattr(logging, level.upper(), logging.INFO))

    def processors(self) -> list[Processor]:
        """The processor chain for the configured format, renderer last."""
        chain: list[Processor] = [
            structlog.contextvars.merge_contextvars,
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            render_enum_values,
        ]
        if self._format == "json":
            chain += [structlog.processors.format_exc_info, structlog.processors.JSONRenderer()]
        elif self._format == "keyvalue":
            chain += [
                structlog.processors.format_exc_info,
                structlog.processors.KeyValueRenderer(key_order=["timestamp", "level", "logger", "event"]),
            ]
        else:
            chain += [structlog.processors.StackInfoRenderer(), structlog.dev.ConsoleRenderer(colors=self._colors)]
        return chain

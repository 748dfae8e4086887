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
"""Web application factory built on Starlette."""

from __future__ import annotations

from collections.abc import Sequence
from pathlib import Path

import structlog
from starlette.applications import Starlette
from starlette.middleware import Middleware
from starlette.routing import BaseRoute

from intent_locale.core.config import Config
from intent_locale.i18n.adapters.resource_bundle import ResourceBundleCopySource
from intent_locale.i18n.locale import LocaleResolver
from intent_locale.i18n.ports.outbound import CopySource
from intent_locale.i18n.properties import LocaleProperties
from intent_locale.logging.port import LoggingPort
from intent_locale.logging.structlog_adapter import StructlogAdapter
from intent_locale.web.adapters.starlette.locale_middleware import LocaleMiddleware

logger = structlog.get_logger("intent_locale.web")


def create_app(
    config: Config | None = None,
    routes: Sequence[BaseRoute] = (),
    copy_source: CopySource | None = None,
    logging_port: LoggingPort | None = None,
    debug: bool = False,
) -> Starlette:
    """Create a Starlette application with locale resolution installed.

    - Logging is configured from ``intent.logging.*``.
    - ``intent.i18n.*`` is bound to :class:`LocaleProperties`; an invalid
      locale configuration fails here, before any request is served.
    - ``app.state.locale_resolver`` and ``app.state.copy_source`` are
      available to route handlers.
    """
    config = config or Config.from_sources(Path.cwd())

    (logging_port or StructlogAdapter()).configure(config)

    properties = config.bind(LocaleProperties)
    resolver = LocaleResolver.from_properties(properties)
    if copy_source is None:
        copy_source = ResourceBundleCopySource(properties.copy_path, resolver.default_locale)

    app = Starlette(
        debug=debug,
        routes=list(routes),
        middleware=[Middleware(LocaleMiddleware, properties=properties, resolver=resolver)],
    )
    app.state.locale_resolver = resolver
    app.state.copy_source = copy_source

    logger.info(
        "locale_app_created",
        supported=[str(loc) for loc in resolver.supported_locales],
        default=str(resolver.default_locale),
        config_sources=config.loaded_sources,
    )
    return app

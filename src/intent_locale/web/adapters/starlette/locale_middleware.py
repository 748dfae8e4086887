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
"""Locale middleware — resolves the request locale and persists it as a cookie."""

from __future__ import annotations

from fnmatch import fnmatch

import structlog
from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import RedirectResponse, Response
from starlette.types import ASGIApp

from intent_locale.i18n.locale import LocaleResolver
from intent_locale.i18n.properties import LocaleProperties
from intent_locale.i18n.types import ResolutionReason, ResolutionResult

logger = structlog.get_logger("intent_locale.web")

ACCEPT_LANGUAGE_HEADER = "accept-language"
CONTENT_LANGUAGE_HEADER = "Content-Language"


class LocaleMiddleware(BaseHTTPMiddleware):
    """Resolves the locale for each request from query, cookie and header.

    - ``?lang=<supported>`` redirects to the same URL without the
      parameter and stores the locale in the cookie.
    - A locale taken from ``Accept-Language`` is stored once, when the
      visitor has no cookie yet.
    - Handlers read the result from ``request.state.locale`` and
      ``request.state.locale_reason``.

    Paths matching ``exclude_patterns`` (static assets by default) pass
    through untouched.
    """

    def __init__(
        self,
        app: ASGIApp,
        properties: LocaleProperties | None = None,
        resolver: LocaleResolver | None = None,
    ) -> None:
        super().__init__(app)
        self._props = properties or LocaleProperties()
        self._resolver = resolver or LocaleResolver.from_properties(self._props)

    def should_not_filter(self, request: Request) -> bool:
        path = request.url.path
        return any(fnmatch(path, pattern) for pattern in self._props.exclude_patterns)

    async def dispatch(self, request: Request, call_next: RequestResponseEndpoint) -> Response:
        if self.should_not_filter(request):
            return await call_next(request)

        query_lang = request.query_params.get(self._props.query_param)
        cookie_lang = request.cookies.get(self._props.cookie.name)
        result = self._resolver.resolve(
            explicit=query_lang,
            stored=cookie_lang,
            header=request.headers.get(ACCEPT_LANGUAGE_HEADER),
        )

        request.state.locale = result.locale
        request.state.locale_reason = result.reason

        logger.debug(
            "locale_resolved",
            locale=result.locale,
            reason=result.reason,
            path=request.url.path,
        )

        if self._resolver.is_supported(query_lang):
            clean_url = request.url.remove_query_params(self._props.query_param)
            response: Response = RedirectResponse(str(clean_url), status_code=307)
            self._store(response, result)
        else:
            response = await call_next(request)
            if not cookie_lang and result.reason is ResolutionReason.HEADER:
                self._store(response, result)

        response.headers[CONTENT_LANGUAGE_HEADER] = str(result.locale)
        return response

    def _store(self, response: Response, result: ResolutionResult) -> None:
        cookie = self._props.cookie
        response.set_cookie(
            cookie.name,
            str(result.locale),
            max_age=cookie.max_age,
            path=cookie.path,
            secure=cookie.secure,
            httponly=cookie.http_only,
            samesite=cookie.same_site,
        )


def get_request_locale(request: Request, default: str | None = None) -> str | None:
    """Return the locale the middleware stored on *request*."""
    return getattr(request.state, "locale", default)

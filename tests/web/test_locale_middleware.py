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
"""Tests for LocaleMiddleware."""

from __future__ import annotations

import pytest
from starlette.applications import Starlette
from starlette.middleware import Middleware
from starlette.requests import Request
from starlette.responses import JSONResponse, PlainTextResponse
from starlette.routing import Route
from starlette.testclient import TestClient

from intent_locale.i18n.properties import LocaleProperties
from intent_locale.web.adapters.starlette.locale_middleware import LocaleMiddleware, get_request_locale


async def _whoami(request: Request) -> JSONResponse:
    return JSONResponse(
        {
            "locale": str(get_request_locale(request)),
            "reason": str(request.state.locale_reason),
        }
    )


async def _asset(request: Request) -> PlainTextResponse:
    return PlainTextResponse(str(get_request_locale(request, "unset")))


def _make_client(properties: LocaleProperties | None = None) -> TestClient:
    if properties:
        middleware = [Middleware(LocaleMiddleware, properties=properties)]
    else:
        middleware = [Middleware(LocaleMiddleware)]
    app = Starlette(
        routes=[
            Route("/", _whoami),
            Route("/doc", _whoami),
            Route("/favicon.ico", _asset),
            Route("/_next/chunk", _asset),
        ],
        middleware=middleware,
    )
    return TestClient(app, follow_redirects=False)


class TestResolutionOnRequest:
    def test_default_without_signals(self) -> None:
        resp = _make_client().get("/doc")
        assert resp.status_code == 200
        assert resp.json() == {"locale": "en", "reason": "default"}
        assert resp.headers["Content-Language"] == "en"
        assert "set-cookie" not in resp.headers

    def test_header_signal(self) -> None:
        resp = _make_client().get("/doc", headers={"Accept-Language": "fr-FR,en;q=0.7"})
        assert resp.json() == {"locale": "fr", "reason": "header"}
        assert resp.headers["Content-Language"] == "fr"

    def test_cookie_beats_header(self) -> None:
        client = _make_client()
        client.cookies.set("ids_locale", "fr")
        resp = client.get("/doc", headers={"Accept-Language": "en"})
        assert resp.json() == {"locale": "fr", "reason": "stored"}

    def test_unsupported_query_is_ignored(self) -> None:
        client = _make_client()
        client.cookies.set("ids_locale", "fr")
        resp = client.get("/doc?lang=de")
        assert resp.status_code == 200
        assert resp.json() == {"locale": "fr", "reason": "stored"}

    def test_region_query_resolves_without_redirect(self) -> None:
        resp = _make_client().get("/doc?lang=fr-CA")
        assert resp.status_code == 200
        assert resp.json() == {"locale": "fr", "reason": "explicit"}
        assert "set-cookie" not in resp.headers


class TestQueryRedirect:
    def test_supported_query_redirects_and_sets_cookie(self) -> None:
        resp = _make_client().get("/doc?lang=fr&tab=api")
        assert resp.status_code == 307
        assert resp.headers["location"] == "http://testserver/doc?tab=api"
        cookie = resp.headers["set-cookie"]
        assert cookie.startswith("ids_locale=fr;")
        assert "Max-Age=31536000" in cookie
        assert "Path=/" in cookie
        assert "SameSite=lax" in cookie
        assert "HttpOnly" not in cookie

    def test_redirect_target_sees_cookie(self) -> None:
        client = _make_client()
        first = client.get("/doc?lang=fr", headers={"Accept-Language": "en"})
        assert first.status_code == 307
        client.cookies.set("ids_locale", "fr")
        second = client.get("/doc", headers={"Accept-Language": "en"})
        assert second.json() == {"locale": "fr", "reason": "stored"}

    def test_custom_query_param_and_cookie(self) -> None:
        props = LocaleProperties.model_validate(
            {"query-param": "locale", "cookie": {"name": "site_lang", "secure": True, "http-only": True}}
        )
        resp = _make_client(props).get("/?locale=en")
        assert resp.status_code == 307
        assert resp.headers["location"] == "http://testserver/"
        cookie = resp.headers["set-cookie"]
        assert cookie.startswith("site_lang=en;")
        assert "Secure" in cookie
        assert "HttpOnly" in cookie


class TestHeaderPersistence:
    def test_header_choice_persisted_once(self) -> None:
        resp = _make_client().get("/doc", headers={"Accept-Language": "fr"})
        assert resp.headers["set-cookie"].startswith("ids_locale=fr;")

    def test_existing_cookie_not_overwritten(self) -> None:
        client = _make_client()
        client.cookies.set("ids_locale", "de")
        resp = client.get("/doc", headers={"Accept-Language": "fr"})
        # An unsupported cookie value still counts as present.
        assert resp.json() == {"locale": "fr", "reason": "header"}
        assert "set-cookie" not in resp.headers

    def test_default_not_persisted(self) -> None:
        resp = _make_client().get("/doc", headers={"Accept-Language": "de"})
        assert resp.json()["reason"] == "default"
        assert "set-cookie" not in resp.headers


class TestExcludedPaths:
    @pytest.mark.parametrize("path", ["/favicon.ico", "/_next/chunk"])
    def test_excluded_paths_pass_through(self, path: str) -> None:
        resp = _make_client().get(path + "?lang=fr", headers={"Accept-Language": "fr"})
        assert resp.status_code == 200
        assert resp.text == "unset"
        assert "Content-Language" not in resp.headers
        assert "set-cookie" not in resp.headers

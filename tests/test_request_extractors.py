# SPDX-License-Identifier: MIT
# Copyright (c) 2025 cloud-error-reporting contributors

"""Tests for request information extractors."""

from types import SimpleNamespace

import pytest

from cloud_error_reporting.request_extractors.manual import extract_manual_request_information
from cloud_error_reporting.request_extractors.wsgi import (
    extract_wsgi_request_information,
    remote_address_from_forwarded_for,
)


class TestManualExtractor:
    """Tests for extract_manual_request_information."""

    def test_mapping_with_snake_case_keys(self):
        info = extract_manual_request_information({
            "method": "GET",
            "url": "/x",
            "user_agent": "agent",
            "referrer": "https://ref",
            "status_code": 500,
            "remote_address": "10.0.0.1",
        })

        assert info.as_dict() == {
            "method": "GET",
            "url": "/x",
            "user_agent": "agent",
            "referrer": "https://ref",
            "status_code": 500,
            "remote_address": "10.0.0.1",
        }

    def test_mapping_with_camel_case_keys(self):
        info = extract_manual_request_information({
            "userAgent": "agent",
            "statusCode": 404,
            "remoteAddress": "::1",
        })

        assert info.user_agent == "agent"
        assert info.status_code == 404
        assert info.remote_address == "::1"

    def test_object_attributes(self):
        request = SimpleNamespace(method="PUT", url="/y", status_code=201)

        info = extract_manual_request_information(request)

        assert info.as_dict() == {"method": "PUT", "url": "/y", "status_code": 201}

    def test_wrong_types_are_skipped(self):
        info = extract_manual_request_information({"method": 1, "status_code": "500"})

        assert info.as_dict() == {}

    @pytest.mark.parametrize("request_value", [None, "GET /", 42, b"raw"])
    def test_scalars_produce_empty_container(self, request_value):
        assert extract_manual_request_information(request_value).as_dict() == {}


class TestWsgiExtractor:
    """Tests for extract_wsgi_request_information."""

    def test_environ(self):
        environ = {
            "REQUEST_METHOD": "POST",
            "wsgi.url_scheme": "https",
            "HTTP_HOST": "example.com",
            "SCRIPT_NAME": "",
            "PATH_INFO": "/orders",
            "QUERY_STRING": "page=2",
            "HTTP_USER_AGENT": "agent",
            "HTTP_REFERER": "https://ref",
            "REMOTE_ADDR": "10.0.0.1",
        }

        info = extract_wsgi_request_information(environ, status_code=500)

        assert info.as_dict() == {
            "method": "POST",
            "url": "https://example.com/orders?page=2",
            "user_agent": "agent",
            "referrer": "https://ref",
            "status_code": 500,
            "remote_address": "10.0.0.1",
        }

    def test_url_without_host_header(self):
        environ = {
            "REQUEST_METHOD": "GET",
            "wsgi.url_scheme": "http",
            "SERVER_NAME": "localhost",
            "SERVER_PORT": "8080",
            "PATH_INFO": "/",
        }

        assert extract_wsgi_request_information(environ).url == "http://localhost:8080/"

    def test_forwarded_for_wins_over_remote_addr(self):
        environ = {"HTTP_X_FORWARDED_FOR": "203.0.113.7, 10.0.0.2", "REMOTE_ADDR": "10.0.0.2"}

        assert extract_wsgi_request_information(environ).remote_address == "203.0.113.7"

    def test_forwarded_for_parsing(self):
        assert remote_address_from_forwarded_for(None) is None
        assert remote_address_from_forwarded_for("") is None
        assert remote_address_from_forwarded_for(" 1.2.3.4 ") == "1.2.3.4"


class TestFlaskExtractor:
    """Tests for extract_flask_request_information."""

    def test_flask_request(self):
        flask = pytest.importorskip("flask")
        from cloud_error_reporting.request_extractors.flask import extract_flask_request_information

        app = flask.Flask(__name__)
        with app.test_request_context(
            "/items?id=3",
            method="DELETE",
            headers={"User-Agent": "agent", "Referer": "https://ref", "X-Forwarded-For": "1.2.3.4"},
        ):
            info = extract_flask_request_information(flask.request, status_code=500)

        assert info.method == "DELETE"
        assert info.url == "http://localhost/items?id=3"
        assert info.user_agent == "agent"
        assert info.referrer == "https://ref"
        assert info.status_code == 500
        assert info.remote_address == "1.2.3.4"


class TestStarletteExtractor:
    """Tests for extract_starlette_request_information."""

    def test_starlette_request(self):
        pytest.importorskip("starlette")
        from starlette.requests import Request

        from cloud_error_reporting.request_extractors.starlette import (
            extract_starlette_request_information,
        )

        scope = {
            "type": "http",
            "method": "GET",
            "scheme": "http",
            "server": ("testserver", 80),
            "path": "/health",
            "query_string": b"",
            "headers": [(b"host", b"testserver"), (b"user-agent", b"agent")],
            "client": ("127.0.0.1", 5000),
        }

        info = extract_starlette_request_information(Request(scope))

        assert info.method == "GET"
        assert info.url == "http://testserver/health"
        assert info.user_agent == "agent"
        assert info.remote_address == "127.0.0.1"
        assert info.status_code is None

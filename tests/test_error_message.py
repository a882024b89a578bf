# SPDX-License-Identifier: MIT
# Copyright (c) 2025 cloud-error-reporting contributors

"""Tests for the ErrorMessage payload."""

from cloud_error_reporting.error_message import DEFAULT_SERVICE_NAME, ErrorMessage
from cloud_error_reporting.request_information import RequestInformationContainer


class TestErrorMessageSetters:
    """Tests for chainable setters."""

    def test_defaults(self):
        em = ErrorMessage()

        assert em.service_context.service == DEFAULT_SERVICE_NAME
        assert em.service_context.version is None
        assert em.message == ""
        assert em.event_time.endswith("Z")
        assert not em.has_stack_trace_marker

    def test_set_event_time_to_now(self, mocker):
        mocker.patch(
            "cloud_error_reporting.error_message._utc_now",
            return_value="2026-01-02T03:04:05.000006Z",
        )
        em = ErrorMessage()
        em.event_time = "2000-01-01T00:00:00Z"

        assert em.set_event_time_to_now() is em
        assert em.event_time == "2026-01-02T03:04:05.000006Z"
        assert em.to_dict()["eventTime"] == "2026-01-02T03:04:05.000006Z"

    def test_setters_chain(self):
        em = (
            ErrorMessage()
            .set_message("boom")
            .set_user("root@nexus")
            .set_http_method("GET")
            .set_url("https://example.com/a")
            .set_response_status_code(500)
        )

        assert em.message == "boom"
        assert em.context.user == "root@nexus"
        assert em.context.http_request.method == "GET"
        assert em.context.http_request.response_status_code == 500

    def test_service_context_type_checks(self):
        """Test non-string service falls back and non-string version is dropped."""
        em = ErrorMessage().set_service_context(123, 4)

        assert em.service_context.service == DEFAULT_SERVICE_NAME
        assert em.service_context.version is None

    def test_wrong_types_are_ignored(self):
        em = ErrorMessage().set_response_status_code("500").set_line_number(True).set_user(None)

        assert em.context.http_request.response_status_code == 0
        assert em.context.report_location.line_number == 0
        assert em.context.user == ""


class TestConsumeRequestInformation:
    """Tests for merging request information."""

    def test_only_extracted_fields_overwrite(self):
        em = ErrorMessage().set_http_method("POST").set_referrer("https://ref")
        container = RequestInformationContainer().set_method("GET").set_status_code(404)

        em.consume_request_information(container)

        http = em.context.http_request
        assert http.method == "GET"
        assert http.response_status_code == 404
        assert http.referrer == "https://ref"

    def test_remote_address_maps_to_remote_ip(self):
        em = ErrorMessage()

        em.consume_request_information(RequestInformationContainer().set_remote_address("10.0.0.1"))

        assert em.context.http_request.remote_ip == "10.0.0.1"

    def test_non_container_is_ignored(self):
        em = ErrorMessage().set_url("/keep")

        em.consume_request_information({"url": "/x"})

        assert em.context.http_request.url == "/keep"


class TestStackTraceMarker:
    """Tests for the consume-once construction-site trace."""

    def test_consume_clears_marker(self):
        em = ErrorMessage().set_stack_trace_marker("trace")

        assert em.consume_stack_trace_marker() == "trace"
        assert em.consume_stack_trace_marker() is None
        assert not em.has_stack_trace_marker


class TestToDict:
    """Tests for the wire representation."""

    def test_minimal_body(self):
        em = ErrorMessage().set_service_context("svc").set_message("boom")

        body = em.to_dict()

        assert body == {
            "eventTime": em.event_time,
            "serviceContext": {"service": "svc"},
            "message": "boom",
        }

    def test_full_body_uses_camel_case(self):
        em = (
            ErrorMessage()
            .set_service_context("svc", "v1")
            .set_message("boom")
            .set_http_method("GET")
            .set_url("/x")
            .set_user_agent("agent")
            .set_referrer("https://ref")
            .set_response_status_code(500)
            .set_remote_ip("10.0.0.1")
            .set_user("root")
            .set_file_path("app.py")
            .set_line_number(12)
            .set_function_name("handler")
        )

        body = em.to_dict()

        assert body["serviceContext"] == {"service": "svc", "version": "v1"}
        assert body["context"] == {
            "httpRequest": {
                "method": "GET",
                "url": "/x",
                "userAgent": "agent",
                "referrer": "https://ref",
                "responseStatusCode": 500,
                "remoteIp": "10.0.0.1",
            },
            "user": "root",
            "reportLocation": {
                "filePath": "app.py",
                "lineNumber": 12,
                "functionName": "handler",
            },
        }

    def test_marker_never_serialized(self):
        em = ErrorMessage().set_message("m").set_stack_trace_marker("secret trace")

        assert "secret trace" not in str(em.to_dict())

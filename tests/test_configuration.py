# SPDX-License-Identifier: MIT
# Copyright (c) 2025 cloud-error-reporting contributors

"""Tests for configuration loading."""

import pytest

from cloud_error_reporting.configuration import (
    DEFAULT_API_BASE_URL,
    Configuration,
    ConfigurationOptions,
)
from cloud_error_reporting.exceptions import ConfigurationError
from cloud_error_reporting.silent_logger import SilentLogger


def make_config(options=None, environ=None, logger=None):
    return Configuration(options, logger or SilentLogger(), environ=environ or {})


class TestProjectId:
    """Tests for project id resolution."""

    def test_from_options(self):
        assert make_config(ConfigurationOptions(project_id="p1")).get_project_id() == "p1"

    def test_number_converted_to_string(self):
        assert make_config(ConfigurationOptions(project_id=1234)).get_project_id() == "1234"

    def test_from_environment(self):
        config = make_config(environ={"GCLOUD_PROJECT": "env-project"})

        assert config.get_project_id() == "env-project"

    def test_google_cloud_project_fallback(self):
        config = make_config(environ={"GOOGLE_CLOUD_PROJECT": "fallback"})

        assert config.get_project_id() == "fallback"

    def test_missing_project_id_is_none(self):
        assert make_config().get_project_id() is None

    @pytest.mark.parametrize("project_id", [1.5, True, ["p"]])
    def test_invalid_project_id(self, project_id):
        with pytest.raises(ConfigurationError, match="project_id"):
            make_config(ConfigurationOptions(project_id=project_id))


class TestCredentials:
    """Tests for key and access token validation."""

    def test_key_and_token(self):
        config = make_config(ConfigurationOptions(key="k", access_token="t"))

        assert config.get_key() == "k"
        assert config.get_access_token() == "t"

    @pytest.mark.parametrize("field", ["key", "access_token"])
    def test_non_string_rejected(self, field):
        with pytest.raises(ConfigurationError, match=field):
            make_config(ConfigurationOptions(**{field: 123}))


class TestServiceContext:
    """Tests for service context resolution."""

    def test_default(self):
        assert make_config().get_service_context() == {"service": "python", "version": None}

    def test_app_engine(self):
        config = make_config(environ={"GAE_SERVICE": "web", "GAE_VERSION": "20250101"})

        assert config.get_service_context() == {"service": "web", "version": "20250101"}

    def test_legacy_app_engine(self):
        config = make_config(environ={"GAE_MODULE_NAME": "worker", "GAE_MODULE_VERSION": "v2"})

        assert config.get_service_context() == {"service": "worker", "version": "v2"}

    def test_cloud_run(self):
        config = make_config(environ={"K_SERVICE": "api", "K_REVISION": "api-00001"})

        assert config.get_service_context() == {"service": "api", "version": "api-00001"}

    def test_cloud_functions_have_no_version(self):
        config = make_config(environ={"FUNCTION_NAME": "resize", "GAE_VERSION": "ignored"})

        assert config.get_service_context() == {"service": "resize", "version": None}

    def test_options_override_environment(self):
        config = make_config(
            ConfigurationOptions(service_context={"service": "explicit", "version": "9"}),
            environ={"GAE_SERVICE": "web", "GAE_VERSION": "1"},
        )

        assert config.get_service_context() == {"service": "explicit", "version": "9"}

    def test_partial_options_keep_environment_values(self):
        config = make_config(
            ConfigurationOptions(service_context={"version": "9"}),
            environ={"GAE_SERVICE": "web"},
        )

        assert config.get_service_context() == {"service": "web", "version": "9"}

    def test_returns_copy(self):
        config = make_config()

        config.get_service_context()["service"] = "mutated"

        assert config.get_service_context()["service"] == "python"

    def test_non_mapping_rejected(self):
        with pytest.raises(ConfigurationError, match="service_context"):
            make_config(ConfigurationOptions(service_context="web"))


class TestReportingGate:
    """Tests for the environment check."""

    def test_disabled_outside_production(self):
        logger = SilentLogger()

        config = make_config(logger=logger)

        assert config.get_should_report_errors_to_api() is False
        assert logger.has_log("ENVIRONMENT", level="WARNING")

    def test_enabled_in_production(self):
        logger = SilentLogger()

        config = make_config(environ={"ENVIRONMENT": "Production"}, logger=logger)

        assert config.get_should_report_errors_to_api() is True
        assert logger.logs == []

    def test_ignore_environment_check(self):
        config = make_config(ConfigurationOptions(ignore_environment_check=True))

        assert config.get_should_report_errors_to_api() is True


class TestDeliverySettings:
    """Tests for API URL and retry settings."""

    def test_defaults(self):
        config = make_config()

        assert config.get_api_base_url() == DEFAULT_API_BASE_URL
        assert config.get_max_attempts() == 4
        assert config.get_timeout_seconds() == 10.0

    def test_trailing_slash_removed(self):
        config = make_config(ConfigurationOptions(api_base_url="http://localhost:8080/v1/projects/"))

        assert config.get_api_base_url() == "http://localhost:8080/v1/projects"

    @pytest.mark.parametrize(
        "options",
        [
            ConfigurationOptions(max_attempts=0),
            ConfigurationOptions(backoff_seconds=-1),
            ConfigurationOptions(timeout_seconds=0),
        ],
    )
    def test_invalid_retry_settings(self, options):
        with pytest.raises(ConfigurationError):
            make_config(options)

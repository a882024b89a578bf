# SPDX-License-Identifier: MIT
# Copyright (c) 2025 cloud-error-reporting contributors

"""Runtime configuration for the error reporting client.

Values come from ``ConfigurationOptions`` first and from the environment of
the hosting platform (App Engine, Cloud Run, Cloud Functions) second.
"""

import os
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

from .error_message import DEFAULT_SERVICE_NAME
from .exceptions import ConfigurationError
from .logger import Logger

DEFAULT_API_BASE_URL = "https://clouderrorreporting.googleapis.com/v1beta1/projects"

PROJECT_ID_ENV_VARS = ("GCLOUD_PROJECT", "GOOGLE_CLOUD_PROJECT")
SERVICE_ENV_VARS = ("FUNCTION_NAME", "K_SERVICE", "GAE_SERVICE", "GAE_MODULE_NAME")
VERSION_ENV_VARS = ("K_REVISION", "GAE_VERSION", "GAE_MODULE_VERSION")
ENVIRONMENT_ENV_VAR = "ENVIRONMENT"
PRODUCTION = "production"


@dataclass
class ConfigurationOptions:
    """Options accepted when initializing error reporting.

    Attributes:
        project_id: Google Cloud project id (string or number)
        key: API key used to authenticate with the service
        access_token: OAuth 2.0 bearer token used instead of an API key
        log_level: Library log level, 0 (silent) to 5 (debug)
        service_context: Mapping with optional "service" and "version" keys
        ignore_environment_check: Send errors even when ENVIRONMENT is not "production"
        api_base_url: Base URL of the projects collection
        max_attempts: Delivery attempts per report, including the first
        backoff_seconds: Base delay between delivery attempts
        timeout_seconds: HTTP timeout per attempt
    """
    project_id: str | int | None = None
    key: str | None = None
    access_token: str | None = None
    log_level: int | str | None = None
    service_context: Mapping[str, Any] | None = None
    ignore_environment_check: bool = False
    api_base_url: str = DEFAULT_API_BASE_URL
    max_attempts: int = 4
    backoff_seconds: float = 1.0
    timeout_seconds: float = 10.0


class Configuration:
    """Validated, environment-aware configuration.

    Args:
        options: User supplied options
        logger: Logger for configuration warnings
        environ: Environment mapping, defaults to os.environ

    Raises:
        ConfigurationError: If an option has the wrong type
    """

    def __init__(
        self,
        options: ConfigurationOptions | None,
        logger: Logger,
        environ: Mapping[str, str] | None = None,
    ):
        self._options = options or ConfigurationOptions()
        self._logger = logger
        self._environ = environ if environ is not None else os.environ

        self._project_id = self._determine_project_id()
        self._key = self._check_optional_string("key", self._options.key)
        self._access_token = self._check_optional_string("access_token", self._options.access_token)
        self._service_context = self._determine_service_context()
        self._should_report_errors_to_api = self._determine_reporting_gate()
        self._check_retry_settings()

    def _env(self, *names: str) -> str | None:
        for name in names:
            value = self._environ.get(name)
            if value:
                return value
        return None

    def _determine_project_id(self) -> str | None:
        project_id = self._options.project_id
        if project_id is None:
            return self._env(*PROJECT_ID_ENV_VARS)
        if isinstance(project_id, bool) or not isinstance(project_id, (str, int)):
            raise ConfigurationError("project_id must be a string or a number")
        return str(project_id)

    @staticmethod
    def _check_optional_string(name: str, value: Any) -> str | None:
        if value is not None and not isinstance(value, str):
            raise ConfigurationError(f"{name} must be a string")
        return value

    def _determine_service_context(self) -> dict[str, str | None]:
        service = self._env(*SERVICE_ENV_VARS) or DEFAULT_SERVICE_NAME
        # Cloud Functions do not expose a version
        version = None if self._env("FUNCTION_NAME") else self._env(*VERSION_ENV_VARS)

        configured = self._options.service_context
        if configured is not None:
            if not isinstance(configured, Mapping):
                raise ConfigurationError("service_context must be a mapping")
            if isinstance(configured.get("service"), str):
                service = configured["service"]
            if isinstance(configured.get("version"), str):
                version = configured["version"]

        return {"service": service, "version": version}

    def _determine_reporting_gate(self) -> bool:
        in_production = self._environ.get(ENVIRONMENT_ENV_VAR, "").lower() == PRODUCTION
        if in_production or self._options.ignore_environment_check:
            return True

        self._logger.warning(
            "Error reporting has not been configured to send errors. Set the "
            f"{ENVIRONMENT_ENV_VAR} environment variable to \"{PRODUCTION}\" or set "
            "ignore_environment_check=True in the configuration options."
        )
        return False

    def _check_retry_settings(self) -> None:
        if not isinstance(self._options.max_attempts, int) or self._options.max_attempts < 1:
            raise ConfigurationError("max_attempts must be a positive integer")
        if self._options.backoff_seconds < 0:
            raise ConfigurationError("backoff_seconds must not be negative")
        if self._options.timeout_seconds <= 0:
            raise ConfigurationError("timeout_seconds must be positive")

    def get_project_id(self) -> str | None:
        return self._project_id

    def get_key(self) -> str | None:
        return self._key

    def get_access_token(self) -> str | None:
        return self._access_token

    def get_service_context(self) -> dict[str, str | None]:
        """Return the service context attached to every report.

        Returns:
            Dictionary with "service" and "version" keys
        """
        return dict(self._service_context)

    def get_should_report_errors_to_api(self) -> bool:
        return self._should_report_errors_to_api

    def get_api_base_url(self) -> str:
        return self._options.api_base_url.rstrip("/")

    def get_max_attempts(self) -> int:
        return self._options.max_attempts

    def get_backoff_seconds(self) -> float:
        return self._options.backoff_seconds

    def get_timeout_seconds(self) -> float:
        return self._options.timeout_seconds

# SPDX-License-Identifier: MIT
# Copyright (c) 2025 cloud-error-reporting contributors

"""Factory function for creating the library's logger."""

import os
from collections.abc import Mapping
from typing import Any

from .exceptions import ConfigurationError
from .logger import DEFAULT_LOG_LEVEL, LOG_LEVEL_NAMES, Logger
from .silent_logger import SilentLogger
from .stdout_logger import StdoutLogger

LOG_LEVEL_ENV_VAR = "GCLOUD_ERRORS_LOGLEVEL"


def _parse_log_level(value: Any) -> int:
    if isinstance(value, bool):
        raise ConfigurationError("log_level must be a number or a numeric string")
    if isinstance(value, str):
        try:
            value = int(value.strip())
        except ValueError as exc:
            raise ConfigurationError(
                f"log_level must be a number or a numeric string, got {value!r}"
            ) from exc
    if not isinstance(value, int):
        raise ConfigurationError(
            f"log_level must be a number or a numeric string, got {type(value).__name__}"
        )
    return min(max(value, 0), max(LOG_LEVEL_NAMES))


def resolve_log_level(log_level: Any = None, environ: Mapping[str, str] | None = None) -> str:
    """Resolve the numeric log level to a level name.

    The GCLOUD_ERRORS_LOGLEVEL environment variable takes precedence over the
    configured value, so operators can raise verbosity without code changes.

    Args:
        log_level: Configured level, 0 (silent) to 5 (debug)
        environ: Environment mapping, defaults to os.environ

    Returns:
        Level name (SILENT, ERROR, WARNING, INFO or DEBUG)

    Raises:
        ConfigurationError: If the level is not numeric
    """
    environ = environ if environ is not None else os.environ
    env_value = environ.get(LOG_LEVEL_ENV_VAR)
    if env_value:
        numeric = _parse_log_level(env_value)
    elif log_level is not None:
        numeric = _parse_log_level(log_level)
    else:
        numeric = DEFAULT_LOG_LEVEL
    return LOG_LEVEL_NAMES[numeric]


def create_logger(
    log_level: Any = None,
    name: str | None = None,
    logger_type: str = "stdout",
    environ: Mapping[str, str] | None = None,
) -> Logger:
    """Create the logger used for the library's own diagnostics.

    Args:
        log_level: Numeric level, 0 (silent) to 5 (debug). Defaults to 2 (warnings)
        name: Logger name
        logger_type: "stdout" for JSON lines on stdout, "silent" for in-memory
        environ: Environment mapping, defaults to os.environ

    Returns:
        Logger instance

    Raises:
        ValueError: If logger_type is not recognized
        ConfigurationError: If log_level is not numeric

    Example:
        >>> logger = create_logger(log_level=3, name="my-service")
        >>> logger.info("Error reporting initialized")
    """
    level = resolve_log_level(log_level, environ)
    logger_type = logger_type.lower()

    if logger_type == "stdout":
        return StdoutLogger(level=level, name=name)
    elif logger_type == "silent":
        return SilentLogger(level=level, name=name)
    else:
        raise ValueError(
            f"Unknown logger_type: {logger_type}. Must be one of: stdout, silent"
        )

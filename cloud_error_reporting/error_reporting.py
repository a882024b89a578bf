# SPDX-License-Identifier: MIT
# Copyright (c) 2025 cloud-error-reporting contributors

"""Entry point that wires logging, configuration and the API client together."""

from collections.abc import Mapping
from typing import Any, Callable

import requests

from .client import ErrorReportingClient
from .configuration import Configuration, ConfigurationOptions
from .error_message import ErrorMessage
from .interfaces.flask import make_flask_handler
from .interfaces.wsgi import ErrorReportingWSGIMiddleware
from .logger import Logger
from .logger_factory import create_logger
from .manual import make_manual_handler
from .message_builder import make_message_builder
from .uncaught import UnhandledErrorSubscription


class ErrorReporting:
    """Report application errors to Google Cloud Error Reporting.

    Each instance owns its own logger, configuration and client; there is
    no process-wide default instance and nothing global is installed on
    construction.

    Attributes:
        report: Manual reporting function, see ``manual.ManualErrorHandler.report``
        event: Factory for hand-built ErrorMessage instances

    Example:
        >>> errors = ErrorReporting(ConfigurationOptions(project_id="my-project", key="..."))
        >>> try:
        ...     do_work()
        ... except Exception as e:
        ...     errors.report(e, lambda err, body: print("done"))
    """

    def __init__(
        self,
        options: ConfigurationOptions | None = None,
        *,
        environ: Mapping[str, str] | None = None,
        session: requests.Session | None = None,
        logger: Logger | None = None,
    ):
        """Initialize error reporting.

        Args:
            options: Configuration options
            environ: Environment mapping, defaults to os.environ
            session: requests session used by the API client
            logger: Logger overriding the one built from options.log_level

        Raises:
            ConfigurationError: If the options are invalid
        """
        options = options or ConfigurationOptions()
        self._logger = logger or create_logger(log_level=options.log_level, environ=environ)
        self._config = Configuration(options, self._logger, environ=environ)
        self._client = ErrorReportingClient(self._config, self._logger, session=session)

        self.report: Callable[..., ErrorMessage] = make_manual_handler(
            self._client, self._config, self._logger
        )
        self.event: Callable[[], ErrorMessage] = make_message_builder(self._config)
        self._flask = None

    @property
    def config(self) -> Configuration:
        return self._config

    @property
    def client(self) -> ErrorReportingClient:
        return self._client

    def flask(self, app: Any) -> Any:
        """Report unhandled exceptions of a Flask application.

        Args:
            app: Flask application

        Returns:
            The same application
        """
        if self._flask is None:
            self._flask = make_flask_handler(self._client, self._config)
        return self._flask(app)

    def wsgi(self, app: Any) -> ErrorReportingWSGIMiddleware:
        """Wrap a WSGI application so its exceptions are reported."""
        return ErrorReportingWSGIMiddleware(app, self._client, self._config)

    @property
    def starlette_middleware(self) -> type:
        """Starlette/FastAPI middleware class, used with ``middleware_options()``."""
        from .interfaces.starlette import ErrorReportingMiddleware

        return ErrorReportingMiddleware

    def middleware_options(self) -> dict[str, Any]:
        """Keyword arguments for ``app.add_middleware(errors.starlette_middleware, ...)``."""
        return {"client": self._client, "config": self._config}

    def subscribe_unhandled_errors(self, flush_timeout: float = 5.0) -> UnhandledErrorSubscription:
        """Start reporting uncaught exceptions.

        Args:
            flush_timeout: Seconds to wait for delivery before the interpreter
                handles an uncaught exception in the main thread

        Returns:
            Active subscription; call ``unsubscribe()`` to stop
        """
        return UnhandledErrorSubscription(
            self.report, self._logger, flush=self._client.flush, flush_timeout=flush_timeout
        ).subscribe()

    def flush(self, timeout: float | None = None) -> bool:
        """Wait for queued reports, see ``ErrorReportingClient.flush``."""
        return self._client.flush(timeout)

    def close(self) -> None:
        """Wait for queued reports and release the client's resources."""
        self._client.close()

    def __enter__(self) -> "ErrorReporting":
        return self

    def __exit__(self, *exc_info: Any) -> None:
        self.close()

# SPDX-License-Identifier: MIT
# Copyright (c) 2025 cloud-error-reporting contributors

"""WSGI middleware that reports unhandled application errors."""

from typing import Any, Callable, Iterable, Iterator

from ..client import ErrorReportingClient
from ..configuration import Configuration
from ..request_extractors.wsgi import extract_wsgi_request_information
from .common import report_request_error

WSGIApp = Callable[[dict[str, Any], Callable[..., Any]], Iterable[bytes]]


class ErrorReportingWSGIMiddleware:
    """Wrap a WSGI application and report exceptions it raises.

    Exceptions raised by the application call and by iterating its response
    body are both reported. The exception is re-raised after reporting so
    the server (or an outer middleware) still produces its error response.

    Example:
        >>> app.wsgi_app = ErrorReportingWSGIMiddleware(app.wsgi_app, client, config)
    """

    def __init__(self, app: WSGIApp, client: ErrorReportingClient, config: Configuration):
        self.app = app
        self.client = client
        self.config = config

    def __call__(self, environ: dict[str, Any], start_response: Callable[..., Any]) -> Iterable[bytes]:
        try:
            body = self.app(environ, start_response)
        except Exception as e:
            self._report(environ, e)
            raise
        return self._iterate(environ, body)

    def _iterate(self, environ: dict[str, Any], body: Iterable[bytes]) -> Iterator[bytes]:
        try:
            for chunk in body:
                yield chunk
        except Exception as e:
            self._report(environ, e)
            raise
        finally:
            # PEP 3333: the server closes our iterable, we close the app's
            close = getattr(body, "close", None)
            if close is not None:
                close()

    def _report(self, environ: dict[str, Any], error: Exception) -> None:
        report_request_error(
            self.client,
            self.config,
            error,
            extract_wsgi_request_information(environ, status_code=500),
        )

# SPDX-License-Identifier: MIT
# Copyright (c) 2025 cloud-error-reporting contributors

"""Starlette / FastAPI middleware that reports unhandled errors.

Usage:
    from fastapi import FastAPI
    from cloud_error_reporting import ErrorReporting

    errors = ErrorReporting()
    app = FastAPI()
    app.add_middleware(ErrorReportingMiddleware, **errors.middleware_options())
"""

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response
from starlette.types import ASGIApp

from ..client import ErrorReportingClient
from ..configuration import Configuration
from ..request_extractors.starlette import extract_starlette_request_information
from .common import report_request_error


class ErrorReportingMiddleware(BaseHTTPMiddleware):
    """Report exceptions raised by downstream handlers, then re-raise them.

    Attributes:
        client: API client used to send reports
        config: Runtime configuration
    """

    def __init__(self, app: ASGIApp, client: ErrorReportingClient, config: Configuration):
        super().__init__(app)
        self.client = client
        self.config = config

    async def dispatch(self, request: Request, call_next: RequestResponseEndpoint) -> Response:
        try:
            return await call_next(request)
        except Exception as e:
            report_request_error(
                self.client,
                self.config,
                e,
                extract_starlette_request_information(request, status_code=500),
            )
            raise

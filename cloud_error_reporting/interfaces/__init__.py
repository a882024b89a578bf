# SPDX-License-Identifier: MIT
# Copyright (c) 2025 cloud-error-reporting contributors

"""Integrations that report errors raised inside web applications.

Each integration imports its framework lazily, so importing this package
does not require Flask or Starlette.
"""

from .wsgi import ErrorReportingWSGIMiddleware

__all__ = [
    "ErrorReportingWSGIMiddleware",
]

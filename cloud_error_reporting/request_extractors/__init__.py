# SPDX-License-Identifier: MIT
# Copyright (c) 2025 cloud-error-reporting contributors

"""Extractors that turn framework request objects into request information.

Framework specific extractors import their framework lazily so the core
library works without Flask or Starlette installed.
"""

from .manual import extract_manual_request_information
from .wsgi import extract_wsgi_request_information

__all__ = [
    "extract_manual_request_information",
    "extract_wsgi_request_information",
]

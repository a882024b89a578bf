# SPDX-License-Identifier: MIT
# Copyright (c) 2025 cloud-error-reporting contributors

"""Flask integration.

Reports every exception Flask treats as unhandled (the ones that end in a
500 response) through the ``got_request_exception`` signal, leaving the
application's own error handlers in charge of the response.
"""

from typing import TYPE_CHECKING, Any, Callable

from ..client import ErrorReportingClient
from ..configuration import Configuration
from ..request_extractors.flask import extract_flask_request_information
from .common import report_request_error

if TYPE_CHECKING:
    from flask import Flask


def make_flask_handler(
    client: ErrorReportingClient,
    config: Configuration,
) -> Callable[["Flask"], "Flask"]:
    """Create the function that attaches error reporting to a Flask app.

    Args:
        client: Initialized API client
        config: Runtime configuration

    Returns:
        ``register(app)`` which subscribes the app and returns it

    Example:
        >>> app = Flask(__name__)
        >>> errors.flask(app)
    """
    from flask import got_request_exception, request

    def _on_exception(sender: "Flask", exception: BaseException, **extra: Any) -> None:
        report_request_error(
            client,
            config,
            exception,
            extract_flask_request_information(request, status_code=500),
        )

    def register(app: "Flask") -> "Flask":
        # weak=False: the receiver is a closure that would otherwise be collected
        got_request_exception.connect(_on_exception, app, weak=False)
        return app

    return register

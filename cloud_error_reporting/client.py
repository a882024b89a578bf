# SPDX-License-Identifier: MIT
# Copyright (c) 2025 cloud-error-reporting contributors

"""HTTP client that delivers error reports to the Cloud Error Reporting API.

Delivery runs on a small thread pool so reporting never blocks the caller.
The outcome is reported through an optional callback and through the
returned ``Future``.
"""

import threading
from concurrent.futures import Future, ThreadPoolExecutor, wait
from typing import Any, Callable, Optional

import requests

from .configuration import Configuration
from .error_message import ErrorMessage
from .exceptions import ClientClosedError, ConfigurationError, ReportingDisabledError
from .logger import Logger
from .retry_helper import retry_with_backoff

# callback(error, response_body): exactly one of the two is None
Callback = Callable[[Optional[BaseException], Optional[dict[str, Any]]], None]

RETRYABLE_STATUS_CODES = frozenset({429, 500, 502, 503, 504})


def is_retryable(error: Exception) -> bool:
    """Return True for failures worth another delivery attempt."""
    if isinstance(error, (requests.ConnectionError, requests.Timeout)):
        return True
    if isinstance(error, requests.HTTPError) and error.response is not None:
        return error.response.status_code in RETRYABLE_STATUS_CODES
    return False


class ErrorReportingClient:
    """Transport for ``events:report`` calls.

    Attributes:
        config: Runtime configuration
        logger: Logger for delivery diagnostics
        session: requests session used for every call
    """

    def __init__(
        self,
        config: Configuration,
        logger: Logger,
        session: requests.Session | None = None,
        max_workers: int = 2,
    ):
        """Initialize the client.

        Args:
            config: Runtime configuration
            logger: Logger for delivery diagnostics
            session: Optional requests session (a new one is created if omitted)
            max_workers: Number of delivery threads
        """
        self.config = config
        self.logger = logger
        self.session = session or requests.Session()
        self._executor = ThreadPoolExecutor(
            max_workers=max_workers, thread_name_prefix="error-reporting"
        )
        self._pending: set[Future] = set()
        self._pending_lock = threading.Lock()

        if not config.get_key() and not config.get_access_token():
            logger.warning(
                "Neither an API key nor an access token was configured; "
                "the Error Reporting API will reject unauthenticated reports."
            )

    @property
    def report_url(self) -> str:
        project_id = self.config.get_project_id()
        if not project_id:
            raise ConfigurationError(
                "Unable to determine the project id. Set project_id in the configuration "
                "options or the GCLOUD_PROJECT environment variable."
            )
        return f"{self.config.get_api_base_url()}/{project_id}/events:report"

    def send_error(self, error_message: ErrorMessage, callback: Callback | None = None) -> Future:
        """Queue an error report for delivery.

        Args:
            error_message: Report to send
            callback: Optional ``callback(error, response_body)`` invoked once
                from a delivery thread when delivery finishes

        Returns:
            Future resolving to the API response body. After ``close()`` the
            future is already failed with ClientClosedError.
        """
        try:
            future = self._executor.submit(self._deliver, error_message)
        except RuntimeError:
            self.logger.warning("Error report dropped: the client is closed")
            future = Future()
            future.set_exception(ClientClosedError("The error reporting client is closed"))
            if callback is not None:
                self._invoke_callback(callback, future)
            return future

        with self._pending_lock:
            self._pending.add(future)
        future.add_done_callback(self._forget)
        if callback is not None:
            future.add_done_callback(lambda f: self._invoke_callback(callback, f))
        return future

    def _forget(self, future: Future) -> None:
        with self._pending_lock:
            self._pending.discard(future)

    def _invoke_callback(self, callback: Callback, future: Future) -> None:
        error = future.exception()
        try:
            if error is not None:
                callback(error, None)
            else:
                callback(None, future.result())
        except Exception:
            self.logger.exception("Error reporting callback raised an exception")

    def _deliver(self, error_message: ErrorMessage) -> dict[str, Any]:
        if not self.config.get_should_report_errors_to_api():
            raise ReportingDisabledError(
                "Not sending error to the Error Reporting API: the ENVIRONMENT variable "
                "is not \"production\" and ignore_environment_check is not set."
            )

        url = self.report_url
        body = error_message.to_dict()

        def _post() -> requests.Response:
            response = self.session.post(
                url,
                json=body,
                params=self._query_params(),
                headers=self._headers(),
                timeout=self.config.get_timeout_seconds(),
            )
            response.raise_for_status()
            return response

        def _on_retry(error: Exception, attempt: int) -> None:
            self.logger.debug(
                "Retrying error report delivery",
                attempt=attempt,
                error=str(error),
            )

        try:
            response = retry_with_backoff(
                _post,
                max_attempts=self.config.get_max_attempts(),
                backoff_seconds=self.config.get_backoff_seconds(),
                should_retry=is_retryable,
                on_retry=_on_retry,
            )
        except requests.RequestException as e:
            self.logger.error("Failed to deliver error report", error=str(e))
            raise

        self.logger.debug("Delivered error report", status_code=response.status_code)
        return response.json() if response.content else {}

    def _query_params(self) -> dict[str, str]:
        key = self.config.get_key()
        return {"key": key} if key else {}

    def _headers(self) -> dict[str, str]:
        headers = {"Content-Type": "application/json"}
        token = self.config.get_access_token()
        if token:
            headers["Authorization"] = f"Bearer {token}"
        return headers

    def flush(self, timeout: float | None = None) -> bool:
        """Wait for queued reports to finish.

        Args:
            timeout: Maximum seconds to wait, None to wait indefinitely

        Returns:
            True if every pending delivery finished within the timeout
        """
        with self._pending_lock:
            pending = list(self._pending)
        _, not_done = wait(pending, timeout=timeout)
        return not not_done

    def close(self) -> None:
        """Wait for pending reports and stop the delivery threads."""
        self._executor.shutdown(wait=True)
        self.session.close()

    def __enter__(self) -> "ErrorReportingClient":
        return self

    def __exit__(self, *exc_info: Any) -> None:
        self.close()

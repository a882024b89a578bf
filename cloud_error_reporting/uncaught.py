# SPDX-License-Identifier: MIT
# Copyright (c) 2025 cloud-error-reporting contributors

"""Opt-in reporting of uncaught exceptions.

Nothing here runs unless the application subscribes:

    >>> subscription = errors.subscribe_unhandled_errors()
    >>> subscription.attach_event_loop(asyncio.get_running_loop())
    >>> ...
    >>> subscription.unsubscribe()

Previously installed hooks keep running after the report is queued.
"""

import asyncio
import sys
import threading
from types import TracebackType
from typing import Any, Callable

from .error_message import ErrorMessage
from .logger import Logger

ReportFunction = Callable[..., ErrorMessage]
FlushFunction = Callable[[float | None], bool]


class UnhandledErrorSubscription:
    """Hooks that report uncaught exceptions until unsubscribed.

    Args:
        report: Bound manual ``report`` function
        logger: Logger for diagnostics
        flush: Function waiting for queued reports; called before the
            interpreter handles an uncaught exception in the main thread,
            which usually terminates the process
        flush_timeout: Seconds to wait in ``flush``
    """

    def __init__(
        self,
        report: ReportFunction,
        logger: Logger,
        flush: FlushFunction | None = None,
        flush_timeout: float = 5.0,
    ):
        self._report = report
        self._logger = logger
        self._flush = flush
        self._flush_timeout = flush_timeout
        self._previous_excepthook: Callable[..., Any] | None = None
        self._previous_threading_excepthook: Callable[..., Any] | None = None
        self._loops: dict[asyncio.AbstractEventLoop, Any] = {}
        self.active = False

    def subscribe(self) -> "UnhandledErrorSubscription":
        """Install the ``sys`` and ``threading`` exception hooks."""
        if self.active:
            return self
        self._previous_excepthook = sys.excepthook
        self._previous_threading_excepthook = threading.excepthook
        sys.excepthook = self._excepthook
        threading.excepthook = self._threading_excepthook
        self.active = True
        return self

    def attach_event_loop(self, loop: asyncio.AbstractEventLoop) -> None:
        """Report exceptions that reach an event loop's exception handler.

        This covers tasks whose exception is never retrieved.
        """
        if loop in self._loops:
            return
        self._loops[loop] = loop.get_exception_handler()
        loop.set_exception_handler(self._loop_exception_handler)

    def unsubscribe(self) -> None:
        """Restore every hook and loop handler replaced by this subscription."""
        if self.active:
            # Leave hooks alone if someone replaced ours in the meantime
            if sys.excepthook == self._excepthook:
                sys.excepthook = self._previous_excepthook
            if threading.excepthook == self._threading_excepthook:
                threading.excepthook = self._previous_threading_excepthook
            self.active = False

        for loop, previous_handler in self._loops.items():
            if not loop.is_closed():
                loop.set_exception_handler(previous_handler)
        self._loops.clear()

    def _report_safely(self, value: Any) -> None:
        try:
            self._report(value)
        except Exception:
            self._logger.exception("Failed to report an uncaught exception")

    def _excepthook(
        self,
        exc_type: type[BaseException],
        exc_value: BaseException,
        exc_traceback: TracebackType | None,
    ) -> None:
        if not issubclass(exc_type, KeyboardInterrupt):
            self._report_safely(exc_value)
            if self._flush is not None:
                self._flush(self._flush_timeout)
        if self._previous_excepthook is not None:
            self._previous_excepthook(exc_type, exc_value, exc_traceback)

    def _threading_excepthook(self, args: Any) -> None:
        if args.exc_value is not None and not issubclass(args.exc_type, SystemExit):
            self._report_safely(args.exc_value)
        if self._previous_threading_excepthook is not None:
            self._previous_threading_excepthook(args)

    def _loop_exception_handler(self, loop: asyncio.AbstractEventLoop, context: dict[str, Any]) -> None:
        exception = context.get("exception")
        reason = exception if exception is not None else context.get("message", "unknown error")
        self._logger.warning(
            f"Unhandled exception in event loop: {reason}. This exception has been "
            "reported to the error reporting console."
        )
        self._report_safely(reason)

        previous_handler = self._loops.get(loop)
        if previous_handler is not None:
            previous_handler(loop, context)
        else:
            loop.default_exception_handler(context)

    def __enter__(self) -> "UnhandledErrorSubscription":
        return self.subscribe()

    def __exit__(self, *exc_info: Any) -> None:
        self.unsubscribe()

# SPDX-License-Identifier: MIT
# Copyright (c) 2025 cloud-error-reporting contributors

"""Builder for hand-crafted error reports."""

from typing import Callable

from .configuration import Configuration
from .error_message import ErrorMessage
from .stack_trace import build_stack_trace


def make_message_builder(config: Configuration) -> Callable[[], ErrorMessage]:
    """Create the ``event()`` factory bound to a configuration.

    The API only accepts reports whose message contains a stack trace, so
    each event records the stack of the place it was created. The manual
    handler appends that trace to the message when the event is reported.

    Args:
        config: Runtime configuration supplying the service context

    Returns:
        Function returning a new ErrorMessage on each call

    Example:
        >>> em = errors.event().set_message("Quota exceeded").set_user("root@nexus")
        >>> errors.report(em)
    """

    def event() -> ErrorMessage:
        service_context = config.get_service_context()
        return (
            ErrorMessage()
            .set_service_context(service_context["service"], service_context["version"])
            .set_stack_trace_marker(build_stack_trace())
        )

    return event

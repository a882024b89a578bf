# SPDX-License-Identifier: MIT
# Copyright (c) 2025 cloud-error-reporting contributors

"""Transcribe arbitrary error values into an ErrorMessage."""

import json
import traceback
from collections.abc import Mapping
from typing import Any

from .error_message import ErrorMessage
from .exceptions import InvalidReportableError
from .stack_trace import TRACEBACK_HEADER, build_stack_trace, capture_call_site, innermost_frame


def populate_error_message(value: Any, error_message: ErrorMessage) -> None:
    """Fill the message, user and service context of ``error_message``.

    Args:
        value: Exception, mapping or any other value describing the error
        error_message: Payload to fill in place

    Raises:
        InvalidReportableError: If value is None or an empty string
    """
    if value is None:
        raise InvalidReportableError("Cannot report None as an error")
    if isinstance(value, str) and not value:
        raise InvalidReportableError("Cannot report an empty string as an error")

    if isinstance(value, BaseException):
        _populate_from_exception(value, error_message)
    elif isinstance(value, Mapping):
        _populate_from_mapping(value, error_message)
    else:
        error_message.set_message(build_stack_trace(str(value)))


def _populate_from_exception(error: BaseException, error_message: ErrorMessage) -> None:
    if error.__traceback__ is not None:
        message = "".join(traceback.format_exception(type(error), error, error.__traceback__))
        frames = traceback.extract_tb(error.__traceback__)
    else:
        # Never raised, so there is no traceback; use where it is being reported
        frames = capture_call_site()
        exception_line = "".join(traceback.format_exception_only(type(error), error))
        message = TRACEBACK_HEADER + "".join(traceback.format_list(frames)) + exception_line

    error_message.set_message(message.rstrip("\n"))

    location = innermost_frame(frames)
    if location is not None:
        error_message.set_file_path(location.filename)
        error_message.set_line_number(location.lineno)
        error_message.set_function_name(location.name)

    user = getattr(error, "user", None)
    if isinstance(user, str):
        error_message.set_user(user)

    _copy_service_context(getattr(error, "service_context", None), error_message)


def _populate_from_mapping(value: Mapping, error_message: ErrorMessage) -> None:
    message = value.get("message")
    if not isinstance(message, str):
        message = json.dumps(dict(value), default=str)

    stack = value.get("stack")
    if isinstance(stack, str) and stack:
        error_message.set_message(f"{message}\n{stack}")
    else:
        error_message.set_message(build_stack_trace(message))

    user = value.get("user")
    if isinstance(user, str):
        error_message.set_user(user)

    service_context = value.get("service_context", value.get("serviceContext"))
    _copy_service_context(service_context, error_message)


def _copy_service_context(service_context: Any, error_message: ErrorMessage) -> None:
    if not isinstance(service_context, Mapping):
        return
    service = service_context.get("service")
    if isinstance(service, str):
        error_message.set_service_context(service, service_context.get("version"))

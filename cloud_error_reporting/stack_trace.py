# SPDX-License-Identifier: MIT
# Copyright (c) 2025 cloud-error-reporting contributors

"""Helpers for capturing call-site stack traces.

Error Reporting groups Python errors by parsing a traceback out of the
message, so reports built from values that are not raised exceptions get a
traceback of the caller's stack instead. Frames that belong to this package
are dropped so the trace ends in application code.
"""

import os
import traceback

TRACEBACK_HEADER = "Traceback (most recent call last):\n"

_PACKAGE_DIR = os.path.dirname(os.path.abspath(__file__))


def _is_library_frame(frame: traceback.FrameSummary) -> bool:
    return os.path.abspath(frame.filename).startswith(_PACKAGE_DIR + os.sep)


def capture_call_site() -> list[traceback.FrameSummary]:
    """Return the current call stack without this package's frames.

    Returns:
        Frames ordered outermost first, like ``traceback.extract_stack``
    """
    return [frame for frame in traceback.extract_stack() if not _is_library_frame(frame)]


def build_stack_trace(message: str = "") -> str:
    """Format the caller's stack as a Python traceback.

    Args:
        message: Line appended after the frames, in the position Python puts
            the exception line

    Returns:
        Traceback text without a trailing newline
    """
    frames = "".join(traceback.format_list(capture_call_site()))
    return (TRACEBACK_HEADER + frames + message).rstrip("\n")


def innermost_frame(
    frames: list[traceback.FrameSummary] | traceback.StackSummary,
) -> traceback.FrameSummary | None:
    """Return the innermost application frame, if any."""
    app_frames = [frame for frame in frames if not _is_library_frame(frame)]
    return app_frames[-1] if app_frames else None

# DashTrace - Dashed Outline Renderer
# Copyright (c) 2025-2026 Scott Bowman
# SPDX-License-Identifier: AGPL-3.0-or-later

"""
Error codes and exceptions.

Configuration problems surface synchronously when options are resolved.
Resource problems (no rasterisation context, failed tile build) surface
through the awaited texture acquisition. Degenerate geometry never raises.
"""

from __future__ import annotations

from typing import NoReturn

# error types
RANGECHECK = 0
TYPECHECK = 1
CONFIGURATIONERROR = 2
UNDEFINEDRESOURCE = 3
LIMITCHECK = 4

error_names = (
    "rangecheck",
    "typecheck",
    "configurationerror",
    "undefinedresource",
    "limitcheck",
)


class DashTraceError(Exception):
    """Base class for every error raised by dashtrace."""

    def __init__(self, code: int, func_name: str, detail: str = "") -> None:
        self.code = code
        self.func_name = func_name
        self.detail = detail
        message = f"/{error_names[code]} in --{func_name}--"
        if detail:
            message = f"{message}: {detail}"
        super().__init__(message)


class ConfigurationError(DashTraceError, ValueError):
    """Rejected dash/stroke configuration."""


class TextureUnavailableError(DashTraceError, RuntimeError):
    """A dash texture could not be rasterised."""


_ERROR_CLASSES: dict[int, type[DashTraceError]] = {
    RANGECHECK: ConfigurationError,
    TYPECHECK: ConfigurationError,
    CONFIGURATIONERROR: ConfigurationError,
    UNDEFINEDRESOURCE: TextureUnavailableError,
    LIMITCHECK: TextureUnavailableError,
}


def e(error_code: int, func_name: str, detail: str = "") -> NoReturn:
    """Raise the exception registered for *error_code*.

    Args:
        error_code: One of the module level error codes.
        func_name: Name of the operation that failed.
        detail: Human readable description of the offending value.

    Raises:
        DashTraceError: Always; the concrete subclass depends on the code.
    """
    raise _ERROR_CLASSES[error_code](error_code, func_name, detail)

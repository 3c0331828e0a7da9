"""Errors raised when a Result is unwrapped on the wrong variant.

Both are programmer errors: they mean the caller did not check the tag
before extracting. Recoverable failures travel inside ``Err`` instead.
"""

from typing import Any

UNWRAP_ON_FAILURE_MESSAGE = "This result is error"
UNWRAP_ERROR_ON_SUCCESS_MESSAGE = "This result is OK"


class UnwrapError(Exception):
    """Result unwrapped on the wrong variant."""


class UnwrapOnFailure(UnwrapError):
    """``unwrap()`` called on an ``Err``."""

    def __init__(self, error: Any):
        super().__init__(UNWRAP_ON_FAILURE_MESSAGE)
        self.error = error


class UnwrapErrorOnSuccess(UnwrapError):
    """``unwrap_error()`` called on an ``Ok``."""

    def __init__(self, value: Any):
        super().__init__(UNWRAP_ERROR_ON_SUCCESS_MESSAGE)
        self.value = value

# Copyright (c) 2024 Ian Hill
# SPDX-License-Identifier: Apache-2.0

"""Custom exceptions and error handling types for simplexopt"""

__all__ = [
    'UserConfigError',
    'InvalidTypeError',
]


class UserConfigError(Exception):
    """Error raised when user specified options or inputs are missing, incorrectly shaped, or otherwise unsuitable."""


class InvalidTypeError(Exception):
    """Error raised when the user requests an option keyword or callable that is not a valid value."""

# Copyright (c) 2023 Ian Hill
# SPDX-License-Identifier: Apache-2.0

"""
This submodule provides common benchmark objective functions as prebuilt callables to aid users in quickly trying out
the optimizer or checking its behaviour on problems with known minima.
"""

from . import test_funcs
from .test_funcs import *

__all__ = list(test_funcs.__all__)

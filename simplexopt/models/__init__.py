# Copyright (c) 2024 Ian Hill
# SPDX-License-Identifier: Apache-2.0

"""Custom complex data types/classes used in the simplexopt package."""

from . import settings, simplex, reports
from .settings import *
from .simplex import *
from .reports import *

__all__ = list(settings.__all__)
__all__ += simplex.__all__
__all__ += reports.__all__

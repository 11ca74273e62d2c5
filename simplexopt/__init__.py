# Copyright (c) 2023 Ian Hill
# SPDX-License-Identifier: Apache-2.0

"""
simplexopt Derivative-Free Optimizer (module simplexopt)

Description
-----------
The simplexopt module minimizes a scalar function of a real vector using the Nelder-Mead simplex method. Only
pointwise evaluations of the objective function are needed, making the module useful for problems where gradients are
unavailable, expensive, or unreliable, such as fitting the parameters of a simulation to measured data.

The method keeps a simplex of d+1 candidate points in the d-dimensional search space. Each iteration the points are
ranked by objective value, and the worst point is reflected through the centroid of the others. Depending on how good
the reflected point turns out to be, the simplex then accepts the reflection, expands further in that direction,
contracts towards the centroid, or shrinks towards its anchor point. The run ends once the distance between the best and
worst points drops below the convergence tolerance, or when the iteration cap is reached. A run that hits the cap is
not an error, a warning is logged and the best point found so far is still returned.

All coefficients and termination parameters have standard defaults and can be adjusted through the 'SimplexSettings'
class or as keyword arguments. The included 'cookbook' provides a handful of common benchmark functions with known
minima that are useful for trying out different settings.

Core Interface
---------
nelder_mead - Minimize a function and return the best point found as a numpy array
optimize - Minimize a function and return an 'OptimReport' with convergence info and the per-iteration history
SimplexSettings - Class that is instantiated to customize coefficients, tolerance, iteration cap, and shrink anchor
"""

# This value determines the project version for PyPi as well
__version__ = '0.1.0'

from . import models
from . import cookbook
from .models import *
from .cookbook import *
from .minimize import optimize, nelder_mead
from .helpers import configure_logger

__all__ = ['optimize', 'nelder_mead', 'configure_logger', 'models', 'cookbook']
__all__.extend(models.__all__)
__all__.extend(cookbook.__all__)

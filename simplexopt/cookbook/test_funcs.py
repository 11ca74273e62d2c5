# Copyright (c) 2023 Ian Hill
# SPDX-License-Identifier: Apache-2.0

import numpy as np

__all__ = ['sphere', 'shifted_sphere', 'rosenbrock', 'booth', 'himmelblau', 'flat', 'linear_slope',
           'HIMMELBLAU_MINIMA']

# Locations of the four global minima of Himmelblau's function, all with a function value of 0
HIMMELBLAU_MINIMA = np.array([[3.0, 2.0], [-2.805118, 3.131312], [-3.779310, -3.283186], [3.584428, -1.848126]])


def sphere(x) -> float:
    """Sum of squares, convex with its single minimum of 0 at the origin. Works for any dimension."""
    return float(np.sum(np.square(x)))


def shifted_sphere(centre):
    """
    Build a sphere function whose minimum is moved away from the origin.

    Parameters
    ----------
    centre: list or numpy.ndarray
        Location of the minimum, also determines the dimension of the function

    Returns
    -------
    callable
        Objective function with a minimum of 0 at 'centre'
    """
    centre = np.asarray(centre, dtype=float)

    def shifted(x):
        return float(np.sum(np.square(np.asarray(x) - centre)))
    return shifted


def rosenbrock(x) -> float:
    """Rosenbrock's banana valley function, minimum of 0 at (1, 1, ..., 1). Requires at least 2 dimensions."""
    x = np.asarray(x)
    return float(np.sum(100.0 * np.square(x[1:] - np.square(x[:-1])) + np.square(1.0 - x[:-1])))


def booth(x) -> float:
    """Booth's 2D function, minimum of 0 at (1, 3)."""
    return float((x[0] + 2 * x[1] - 7) ** 2 + (2 * x[0] + x[1] - 5) ** 2)


def himmelblau(x) -> float:
    """Himmelblau's 2D function, has four separate minima all with value 0 (see HIMMELBLAU_MINIMA)."""
    return float((x[0] ** 2 + x[1] - 11) ** 2 + (x[0] + x[1] ** 2 - 7) ** 2)


def flat(x) -> float: # noqa: UnusedParameter
    """Constant function, every point is a minimum."""
    return 0.0


def linear_slope(x) -> float:
    """Unbounded plane descending along the first axis, has no minimum so the simplex never collapses."""
    return float(-x[0])

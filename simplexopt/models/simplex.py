# Copyright (c) 2024 Ian Hill
# SPDX-License-Identifier: Apache-2.0

"""Simplex state class, the working population of points that the Nelder-Mead method reshapes each iteration"""

from __future__ import annotations

import numbers
import numpy as np

from simplexopt.models.settings import SimplexSettings
from simplexopt.exceptions import UserConfigError, InvalidTypeError

__all__ = ['Simplex', 'CONTRACTION_MODES']

CONTRACTION_MODES = ('outside', 'inside')


class Simplex:
    """
    A set of d+1 points in d-dimensional space along with the cached objective function value of each point. Intended
    to be mutated in place as the optimization progresses.

    Attributes
    ----------
    dims: int
        The dimension d of the vector space being searched
    points: numpy.ndarray
        Array of shape (d+1, d), once ordered row 0 is the best point and row d the worst
    values: numpy.ndarray
        The objective value of each row of 'points', only meaningful for rows that have been evaluated
    centroid: numpy.ndarray or None
        Mean of the d best points, computed by order() and invalidated whenever any point is changed
    evals: int
        Running count of the number of objective function evaluations performed
    settings: SimplexSettings
        The fixed coefficients used by the geometric transformations
    """

    def __init__(self, dims: int, func, settings: SimplexSettings = None, init_points: np.ndarray = None,
                 centre: np.ndarray | list = None, seed: int = None):
        """
        Parameters
        ----------
        dims: int
            The dimension of the objective function input vector, must be a positive integer
        func: callable
            The objective function, takes a length dims array and returns a real scalar
        settings: SimplexSettings, optional
            Coefficients for the transformations, defaults are used if not provided
        init_points: numpy.ndarray, optional
            An explicit starting simplex of shape (dims+1, dims), replaces the random initialization
        centre: numpy.ndarray or list, optional
            The centre of the box that random starting points are drawn from (default is the origin)
        seed: int, optional
            Seed for the random generator used to build the starting simplex, makes runs reproducible
        """
        if isinstance(dims, bool) or not isinstance(dims, numbers.Integral) or dims < 1:
            raise UserConfigError(f'Simplex dimension must be a positive integer, got {dims!r}.')
        if not callable(func):
            raise InvalidTypeError(f'Objective function must be callable, got object of type {type(func).__name__}.')
        self.dims = int(dims)
        self.settings = settings if settings else SimplexSettings()
        self._func = func

        if init_points is not None:
            points = np.array(init_points, dtype=float)
            if points.shape != (self.dims + 1, self.dims):
                raise UserConfigError(f'Initial simplex must have shape {(self.dims + 1, self.dims)}, '
                                      f'got {points.shape}.')
        else:
            if centre is None:
                centre = np.zeros(self.dims)
            centre = np.asarray(centre, dtype=float)
            if centre.shape != (self.dims,):
                raise UserConfigError(f'Initial simplex centre must have length {self.dims}, got shape {centre.shape}.')
            spread = self.settings.init_spread
            points = centre + np.random.default_rng(seed).uniform(-spread, spread, size=(self.dims + 1, self.dims))
        self.points = points

        self.values = np.full(self.dims + 1, np.nan)
        # Tracks which rows have a cached value, NaN cannot be used as the marker since objectives may return NaN
        self._known = np.zeros(self.dims + 1, dtype=bool)
        self.centroid = None
        self.evals = 0

    def evaluate(self, point: np.ndarray) -> float:
        """Call the objective function on a read-only copy of a point, counting the evaluation."""
        arg = np.array(point, dtype=float)
        arg.flags.writeable = False
        self.evals += 1
        return float(self._func(arg))

    def order(self):
        """
        Sort the points in ascending order of objective value and compute the centroid of the best d points. Each point
        is evaluated at most once over its lifetime, the sort itself only ever compares cached values.
        """
        for i in np.flatnonzero(~self._known):
            self.values[i] = self.evaluate(self.points[i])
            self._known[i] = True
        ranking = np.argsort(self.values, kind='stable')
        self.points = self.points[ranking]
        self.values = self.values[ranking]
        self.centroid = self.points[:-1].mean(axis=0)

    def _check_centroid(self):
        if self.centroid is None:
            raise UserConfigError('Simplex must be ordered before computing a transformation, call order() first.')

    def reflection(self) -> np.ndarray:
        self._check_centroid()
        return self.centroid + self.settings.alpha * (self.centroid - self.points[-1])

    def expansion(self, xr: np.ndarray) -> np.ndarray:
        self._check_centroid()
        return self.centroid + self.settings.gamma * (xr - self.centroid)

    def contraction(self, xr: np.ndarray, mode: str = 'outside') -> np.ndarray:
        """
        Contract towards the centroid, either from the reflected point ('outside') or from the worst point ('inside').

        Parameters
        ----------
        xr: numpy.ndarray
            The reflected point, only used for outside contractions
        mode: str, optional
            One of 'outside' or 'inside' (default 'outside')

        Returns
        -------
        numpy.ndarray
            The contracted candidate point, the simplex itself is not modified
        """
        self._check_centroid()
        if mode == 'outside':
            return self.centroid + self.settings.rho * (xr - self.centroid)
        elif mode == 'inside':
            return self.centroid + self.settings.rho * (self.points[-1] - self.centroid)
        else:
            raise InvalidTypeError(f"Contraction mode can only be one of {list(CONTRACTION_MODES)}, got '{mode}'.")

    def shrink(self):
        """
        Pull every point ranked after the anchor point towards the anchor, scaling its distance by sigma. With the
        default 'best' anchor this is the textbook shrink, with the 'second' anchor the best point is left untouched.
        """
        k = self.settings.anchor_index
        anchor = self.points[k].copy()
        self.points[k + 1:] = anchor + self.settings.sigma * (self.points[k + 1:] - anchor)
        self._known[k + 1:] = False
        self.centroid = None

    def replace_worst(self, point: np.ndarray, value: float):
        self.points[-1] = point
        self.values[-1] = value
        self._known[-1] = True
        self.centroid = None

    @property
    def best(self) -> np.ndarray:
        return self.points[0]

    @property
    def second_worst(self) -> np.ndarray:
        return self.points[-2]

    @property
    def worst(self) -> np.ndarray:
        return self.points[-1]

    @property
    def best_value(self) -> float:
        """Lowest cached objective value, the rows are not necessarily in order between calls to order()."""
        return float(np.min(self.values[self._known]))

    @property
    def worst_value(self) -> float:
        """Highest cached objective value, NaN if any point has moved without being evaluated again (after a shrink)."""
        return float(np.max(self.values)) if self._known.all() else np.nan

    @property
    def spread(self) -> float:
        """L2 distance between the first and last rows, the quantity used to test for convergence."""
        return float(np.linalg.norm(self.points[-1] - self.points[0]))

# Copyright (c) 2024 Ian Hill
# SPDX-License-Identifier: Apache-2.0

"""Configuration class bundling the tunable constants of a Nelder-Mead run"""

from __future__ import annotations

import numpy as np

from simplexopt.exceptions import UserConfigError, InvalidTypeError

__all__ = ['SimplexSettings', 'SHRINK_ANCHORS']

DEFAULT_TOL = 1e-8
DEFAULT_MAX_ITERS = 1_000_000
DEFAULT_INIT_SPREAD = 0.1

# Mapping from shrink anchor names to the index of the sorted simplex point that the other points are pulled towards
SHRINK_ANCHORS = {'best': 0, 'second': 1}


class SimplexSettings:
    """
    Fixed coefficients and termination parameters for a single optimization run. The coefficients are read-only once
    constructed, a new settings object must be created to change them.

    Attributes
    ----------
    alpha: float
        Reflection coefficient, how far past the centroid the worst point is mirrored
    gamma: float
        Expansion coefficient, must exceed 1 so that expansion goes further than the reflection did
    rho: float
        Contraction coefficient, fraction of the distance from the centroid that contracted points are placed at
    sigma: float
        Shrink coefficient, fraction of the distance to the anchor point that each point retains on a shrink
    tol: float
        The simplex is considered converged once the L2 distance between its best and worst points drops below this
    max_iters: int
        Iteration cap, a run that reaches this many iterations stops and reports that it did not converge
    shrink_anchor: str
        Either 'best' (textbook behaviour, all points pulled towards the best) or 'second' (points pulled towards the
        second best point, the anchor used by earlier versions of this routine)
    init_spread: float
        Half-width of the uniform box that random initial simplex points are drawn from
    """

    def __init__(self, alpha: float = 1.0, gamma: float = 2.0, rho: float = 0.5, sigma: float = 0.5,
                 tol: float = DEFAULT_TOL, max_iters: int = DEFAULT_MAX_ITERS, shrink_anchor: str = 'best',
                 init_spread: float = DEFAULT_INIT_SPREAD):
        for prm, val in (('alpha', alpha), ('gamma', gamma), ('rho', rho), ('sigma', sigma), ('tol', tol),
                         ('max_iters', max_iters), ('init_spread', init_spread)):
            # NaN slips through every comparison below, an infinite cap or tolerance would never end or never start
            if not np.isfinite(val):
                raise UserConfigError(f'Setting {prm} must be a finite number, got {val}.')
        if alpha <= 0:
            raise UserConfigError(f'Reflection coefficient alpha must be positive, got {alpha}.')
        if gamma <= 1:
            raise UserConfigError(f'Expansion coefficient gamma must be greater than 1, got {gamma}.')
        if not 0 < rho < 1:
            raise UserConfigError(f'Contraction coefficient rho must lie strictly between 0 and 1, got {rho}.')
        if not 0 < sigma < 1:
            raise UserConfigError(f'Shrink coefficient sigma must lie strictly between 0 and 1, got {sigma}.')
        if tol <= 0:
            raise UserConfigError(f'Convergence tolerance must be positive, got {tol}.')
        if int(max_iters) != max_iters or max_iters < 1:
            raise UserConfigError(f'Iteration cap must be a positive integer, got {max_iters}.')
        if init_spread <= 0:
            raise UserConfigError(f'Initial simplex spread must be positive, got {init_spread}.')
        if shrink_anchor not in SHRINK_ANCHORS:
            raise InvalidTypeError(f"Shrink anchor can only be one of {list(SHRINK_ANCHORS)}, got '{shrink_anchor}'.")
        self._alpha, self._gamma, self._rho, self._sigma = float(alpha), float(gamma), float(rho), float(sigma)
        self._tol = float(tol)
        self._max_iters = int(max_iters)
        self._shrink_anchor = shrink_anchor
        self._init_spread = float(init_spread)

    @property
    def alpha(self):
        return self._alpha

    @property
    def gamma(self):
        return self._gamma

    @property
    def rho(self):
        return self._rho

    @property
    def sigma(self):
        return self._sigma

    @property
    def tol(self):
        return self._tol

    @property
    def max_iters(self):
        return self._max_iters

    @property
    def shrink_anchor(self):
        return self._shrink_anchor

    @property
    def anchor_index(self) -> int:
        """Position within the sorted simplex of the point that shrinks are anchored on."""
        return SHRINK_ANCHORS[self._shrink_anchor]

    @property
    def init_spread(self):
        return self._init_spread

    def as_dict(self) -> dict:
        return {'alpha': self.alpha, 'gamma': self.gamma, 'rho': self.rho, 'sigma': self.sigma, 'tol': self.tol,
                'max_iters': self.max_iters, 'shrink_anchor': self.shrink_anchor, 'init_spread': self.init_spread}

    def __repr__(self):
        return 'SimplexSettings(' + ', '.join(f'{key}={val!r}' for key, val in self.as_dict().items()) + ')'

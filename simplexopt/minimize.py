# Copyright (c) 2024 Ian Hill
# SPDX-License-Identifier: Apache-2.0

"""simplexopt top-level optimization execution functions"""

from __future__ import annotations

import numpy as np

from simplexopt.models import Simplex, SimplexSettings, OptimReport
from simplexopt.exceptions import UserConfigError
from simplexopt.helpers import logger

__all__ = ['optimize', 'nelder_mead']


def _nelder_mead_step(simplex: Simplex) -> str:
    """
    Perform one iteration of the Nelder-Mead decision tree on the simplex, mutating it in place.

    Returns
    -------
    str
        Name of the transformation that was applied to the simplex
    """
    simplex.order()
    # All three reference values come from the cache populated by order(), only new candidates are evaluated
    f_best, f_second_worst, f_worst = simplex.values[0], simplex.values[-2], simplex.values[-1]
    xr = simplex.reflection()
    f_xr = simplex.evaluate(xr)

    if f_best <= f_xr < f_second_worst:
        simplex.replace_worst(xr, f_xr)
        return 'reflect'
    elif f_xr < f_best:
        # The reflected point is a new best, see whether moving further in the same direction does even better
        xe = simplex.expansion(xr)
        f_xe = simplex.evaluate(xe)
        if f_xe < f_xr:
            simplex.replace_worst(xe, f_xe)
            return 'expand'
        simplex.replace_worst(xr, f_xr)
        return 'reflect'
    elif f_xr < f_worst:
        xc = simplex.contraction(xr, 'outside')
        f_xc = simplex.evaluate(xc)
        if f_xc < f_xr:
            simplex.replace_worst(xc, f_xc)
            return 'contract outside'
    else:
        xc = simplex.contraction(xr, 'inside')
        f_xc = simplex.evaluate(xc)
        if f_xc < f_worst:
            simplex.replace_worst(xc, f_xc)
            return 'contract inside'
    # Neither contraction improved on the point it was contracted from
    simplex.shrink()
    return 'shrink'


def optimize(func, dims: int, settings: SimplexSettings = None, x0: np.ndarray | list = None,
             init_points: np.ndarray = None, seed: int = None, callback=None, record_history: bool = True,
             name: str = None, **setting_kwargs) -> OptimReport:
    """
    Minimize a scalar function of a real vector using the Nelder-Mead simplex method

    Parameters
    ----------
    func: callable
        The objective function, called with a read-only length 'dims' numpy array and returning a real scalar. Must be
        deterministic and free of side effects, closures and callable objects are fine.
    dims: int
        The number of elements in the objective function input vector
    settings: SimplexSettings, optional
        Coefficients and termination parameters, cannot be combined with individual keyword settings
    x0: numpy.ndarray or list, optional
        Centre of the box the random initial simplex is drawn from (default is the origin)
    init_points: numpy.ndarray, optional
        Explicit (dims+1, dims) starting simplex, used instead of a random one
    seed: int, optional
        Seed for the random initial simplex, makes the run reproducible
    callback: callable, optional
        Called after every iteration (the converging one included) with its history row, returning True stops the run
    record_history: bool, optional
        Whether to collect the per-iteration history table in the report (default True)
    name: str, optional
        A descriptive name for the run, used in the report
    setting_kwargs:
        Any of the SimplexSettings arguments, e.g. tol=1e-6 or shrink_anchor='second'

    Returns
    -------
    OptimReport
        The best point found along with convergence information and the optimization history
    """
    if settings and setting_kwargs:
        raise UserConfigError(f'Cannot override settings {list(setting_kwargs)} when a SimplexSettings object is '
                              'provided, pass one or the other.')
    if init_points is not None and x0 is not None:
        raise UserConfigError('Cannot use both an explicit initial simplex and a centre for a random one, pass one or '
                              'the other.')
    if not settings:
        settings = SimplexSettings(**setting_kwargs)
    simplex = Simplex(dims, func, settings, init_points=init_points, centre=x0, seed=seed)
    report = OptimReport(settings, name)
    logger.debug(f'Starting Nelder-Mead run on a {dims}-dimensional problem with {settings}.')

    status = 'max iterations'
    completed_iters = 0
    for i in range(settings.max_iters):
        operation = _nelder_mead_step(simplex)
        completed_iters = i + 1
        if record_history or callback:
            row = report.add_iteration(i, operation, simplex, keep=record_history)

        if simplex.spread < settings.tol:
            logger.info(f'Terminal condition met at iteration {i}: l2 norm < {settings.tol:g}')
            status = 'converged'
        # The callback sees every iteration, including the converging one
        stop_requested = callback(row) if callback else False
        if status == 'converged':
            break
        if stop_requested:
            logger.info(f'Optimization stopped by callback at iteration {i}.')
            status = 'stopped'
            break

    if status == 'max iterations':
        logger.warning(f'Nelder-Mead algorithm failed to converge within {settings.max_iters} iterations, '
                       'returning the best point found.')
    # The last iteration may have placed a new best in the final row, or moved points during a shrink
    simplex.order()
    report.finalize(simplex, completed_iters, status)
    return report


def nelder_mead(func, dims: int, **kwargs) -> np.ndarray:
    """
    Minimize a scalar function using the Nelder-Mead simplex method, returning only the best point found. Accepts all
    the optional arguments of optimize().

    Returns
    -------
    numpy.ndarray
        The best point found, of length 'dims'. Returned even if the run did not converge.
    """
    return optimize(func, dims, **kwargs).x

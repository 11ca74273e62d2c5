# Copyright (c) 2024 Ian Hill
# SPDX-License-Identifier: Apache-2.0

"""Custom class for reporting the results of simplexopt optimization runs"""

from __future__ import annotations

import json
from io import StringIO
from pathlib import Path

import numpy as np
import pandas as pd

from simplexopt.models.settings import SimplexSettings
from simplexopt.models.simplex import Simplex
from simplexopt.helpers import logger

__all__ = ['OptimReport', 'HISTORY_COLUMNS', 'RUN_STATUSES']

HISTORY_COLUMNS = ['iteration', 'operation', 'best value', 'worst value', 'spread']
RUN_STATUSES = ('converged', 'max iterations', 'stopped')


class OptimReport:
    """
    Class for structuring the results of an optimization run, such as the best point found, whether the run
    converged, and the per-iteration progress of the simplex

    Attributes
    ----------
    name: str
        An optional descriptive name for the run
    settings: SimplexSettings
        The coefficients and termination parameters the run used
    x: numpy.ndarray
        The best point found, a 1D array of length equal to the problem dimension
    fun: float
        The objective function value at the best point
    iterations: int
        The number of iterations that were executed
    evals: int
        The number of objective function evaluations performed
    converged: bool
        Whether the simplex spread dropped below the convergence tolerance
    status: str
        One of 'converged', 'max iterations', or 'stopped' (early exit requested by a callback)
    history: pandas.DataFrame
        One row per iteration with the operation applied and the best value, worst value and spread afterwards
    """

    def __init__(self, settings: SimplexSettings = None, name: str = None, file: str = None):
        """
        Parameters
        ----------
        settings: SimplexSettings, optional
            The settings of the run being reported on
        name: str, optional
            A descriptive name for the run
        file: str, optional
            Path and filename (absolute or relative to CWD) to a JSON containing a report to load
        """
        self._rows = []
        if file:
            try:
                with open(file) as f:
                    report_json = json.load(f)
            except FileNotFoundError as e:
                msg = f'Could not find the requested report file {file}, the file does not appear to exist.'
                raise FileNotFoundError(msg) from e
            self.name = report_json['Name']
            self.settings = SimplexSettings(**report_json['Settings'])
            self.x = np.array(report_json['Best Point'], dtype=float)
            self.fun = report_json['Best Value']
            self.iterations = report_json['Iterations']
            self.evals = report_json['Evaluations']
            self.converged = report_json['Converged']
            self.status = report_json['Status']
            self.history = pd.read_json(StringIO(report_json['History']))
            if self.history.empty:
                self.history = pd.DataFrame(columns=HISTORY_COLUMNS)
        else:
            self.name = name
            self.settings = settings if settings else SimplexSettings()
            self.x, self.fun = None, None
            self.iterations, self.evals = 0, 0
            self.converged, self.status = False, None
            self.history = pd.DataFrame(columns=HISTORY_COLUMNS)

    def add_iteration(self, iteration: int, operation: str, simplex: Simplex, keep: bool = True) -> dict:
        """
        Build the history row describing the simplex after an iteration, storing it only if 'keep' is set.
        Values are the lowest and highest cached objective values, after a shrink the moved points are not yet
        evaluated so the worst value is NaN.

        Returns
        -------
        dict
            The recorded row, keyed by the history column names
        """
        row = {
            'iteration': iteration,
            'operation': operation,
            'best value': simplex.best_value,
            'worst value': simplex.worst_value,
            'spread': simplex.spread,
        }
        if keep:
            self._rows.append(row)
        return row

    def finalize(self, simplex: Simplex, iterations: int, status: str):
        """Fill in the final results from the (ordered) simplex and build the history table."""
        self.x = simplex.best.copy()
        self.fun = float(simplex.values[0])
        self.iterations = iterations
        self.evals = simplex.evals
        self.status = status
        self.converged = status == 'converged'
        if self._rows:
            self.history = pd.DataFrame(self._rows, columns=HISTORY_COLUMNS)
            self._rows = []

    def summary(self) -> pd.Series:
        """Scalar results of the run as a labelled series, convenient for tabulating several runs together."""
        return pd.Series({'name': self.name, 'status': self.status, 'converged': self.converged,
                          'fun': self.fun, 'iterations': self.iterations, 'evals': self.evals,
                          'x': self.x})

    def export_to_json(self, file: str = None) -> dict:
        """
        Formats the report as a JSON dictionary so that it can be saved as a file for storage or sharing

        Parameters
        ----------
        file: str, optional
            The path and file (absolute or relative to CWD) to save the report to

        Returns
        -------
        dict
            The JSON dictionary format for the report, returned whether or not it was also saved to file
        """
        report_json = {
            'Name': self.name,
            'Settings': self.settings.as_dict(),
            'Best Point': None if self.x is None else [float(v) for v in self.x],
            'Best Value': self.fun,
            'Iterations': self.iterations,
            'Evaluations': self.evals,
            'Converged': self.converged,
            'Status': self.status,
            'History': self.history.to_json(),
        }
        if file:
            # Make the directory if it doesn't yet exist, otherwise the file open will fail
            Path(file).parent.mkdir(parents=True, exist_ok=True)
            with open(file, 'w') as f:
                json.dump(report_json, f)
            logger.info(f'Successfully exported optimization report {self.name} to file.')
        return report_json

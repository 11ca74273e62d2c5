# Copyright (c) 2023 Ian Hill
# SPDX-License-Identifier: Apache-2.0

"""Helper classes and functions to improve testing of the optimizer."""

import pytest
import numpy as np


class CountingObjective:
    """Callable wrapper that records every point an objective function is evaluated at."""
    def __init__(self, func):
        self.func = func
        self.calls = []

    def __call__(self, x):
        self.calls.append(np.array(x))
        return self.func(x)

    @property
    def count(self):
        return len(self.calls)


@pytest.fixture
def counting_objective():
    return CountingObjective


def bumped_sphere(x):
    """Sphere with a tall bump around (0.25, 0.5) so that contracting the unit right triangle onto it fails."""
    bump = 10.0 if abs(x[0] - 0.25) < 0.1 and abs(x[1] - 0.5) < 0.1 else 0.0
    return float(np.sum(np.square(x))) + bump


@pytest.fixture
def shrink_triggering_func():
    return bumped_sphere

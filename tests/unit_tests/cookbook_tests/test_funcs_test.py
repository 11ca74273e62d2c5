# Copyright (c) 2023 Ian Hill
# SPDX-License-Identifier: Apache-2.0

import numpy as np

from simplexopt.cookbook.test_funcs import *


def test_known_minimum_values():
    assert sphere(np.zeros(4)) == 0
    assert sphere(np.array([1, 2])) == 5
    assert rosenbrock(np.ones(3)) == 0
    assert rosenbrock(np.array([0, 0])) == 1
    assert booth(np.array([1, 3])) == 0
    for minimum in HIMMELBLAU_MINIMA:
        assert round(himmelblau(minimum), 6) == 0
    assert flat(np.array([3, 4])) == 0
    assert linear_slope(np.array([2, 7])) == -2


def test_shifted_sphere():
    func = shifted_sphere([1, -1])
    assert func(np.array([1, -1])) == 0
    assert func(np.array([0, 0])) == 2
    assert type(func(np.array([0.5, 0.5]))) is float

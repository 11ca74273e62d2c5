# Copyright (c) 2023 Ian Hill
# SPDX-License-Identifier: Apache-2.0

import os
import sys
# Welcome to the worst parts of Python! This line adds the parent directory of this file to module search path, from
# which the simplexopt module can be seen and then imported. Without this line the script cannot find the module without
# installing it as a package from pip (which is undesirable because you would have to rebuild the package every time
# you changed part of the code).
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))
import simplexopt # noqa: ImportNotAtTopOfFile
from simplexopt.models import * # noqa: ImportNotAtTopOfFile
from simplexopt.cookbook import rosenbrock # noqa: ImportNotAtTopOfFile
from simplexopt.helpers import _on_demand_import # noqa: ImportNotAtTopOfFile

click = _on_demand_import('click')
plt = _on_demand_import('matplotlib.pyplot', 'matplotlib')
sb = _on_demand_import('seaborn')

DATA_FILE_NAME = 'basic_report'


def run_optimization(save_file: str = None, anchor: str = 'best'):
    """
    Demonstration of the simplest use of simplexopt, useful as a template and starting point for your own problems.
    """

    ########################################################################
    ### 1. Define the objective function to minimize                     ###
    ########################################################################
    # Rosenbrock's function has a long curved valley that makes it a classic stress test for simplex methods
    objective = rosenbrock

    ########################################################################
    ### 2. Choose the optimizer settings                                 ###
    ########################################################################
    settings = SimplexSettings(tol=1e-10, max_iters=10_000, shrink_anchor=anchor)

    ########################################################################
    ### 3. Run the optimization                                          ###
    ########################################################################
    report = simplexopt.optimize(objective, 2, settings=settings, x0=[-1.2, 1.0], seed=2024,
                                 name=f'Rosenbrock, {anchor} shrink anchor')
    print(report.summary())

    # Save the results to a JSON file for reuse if desired
    if save_file:
        report.export_to_json(save_file)
    return report


def visualize(report):
    history = report.history

    # Set up the figure area
    sb.set_theme(style='whitegrid', font='Times New Roman')
    sb.set_context('talk')
    f1, (p1, p2) = plt.subplots(2, 1, figsize=(8, 8), sharex=True)

    # Objective value of the best point and the size of the simplex over the run, both on log scales
    p1.semilogy(history['iteration'], history['best value'], color='mediumpurple')
    p2.semilogy(history['iteration'], history['spread'], color='cornflowerblue')
    p2.axhline(report.settings.tol, color='green', linestyle='--')

    # Set some plot properties for a clean look
    p1.set(ylabel='Best Value', title=report.name)
    p2.set(ylabel='Simplex Spread', xlabel='Iteration')
    sb.despine()
    plt.show()


@click.command
@click.option('--data-file', default=None, help='Use an existing optimization report from a JSON file.')
@click.option('--save-data', is_flag=True, default=False, help='If provided, the report will be saved to a JSON.')
@click.option('--anchor', type=click.Choice(['best', 'second']), default='best', help='Point to anchor shrinks on.')
def entry(data_file, save_data, anchor):
    if data_file is not None:
        report = OptimReport(file=data_file)
    else:
        data_file = os.path.join(os.path.dirname(__file__), f"data/{DATA_FILE_NAME}.json") if save_data else None
        report = run_optimization(save_file=data_file, anchor=anchor)
    visualize(report)


if __name__ == '__main__':
    entry()

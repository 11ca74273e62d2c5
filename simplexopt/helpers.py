# Copyright (c) 2024 Ian Hill
# SPDX-License-Identifier: Apache-2.0

"""Package logger shared by every optimization run, plus the optional dependency import used by the demos."""

import logging
import coloredlogs
import importlib


### Package logger, set up on import so that runs report their outcome without any user configuration ###
# Runs log their settings at DEBUG, convergence at INFO and a failure to converge at WARNING
logger = logging.getLogger("simplexopt")
# The logger itself passes everything, the handlers decide what is shown
logger.setLevel(logging.DEBUG)

# Dim the timestamp and logger name so the iteration count in convergence messages stands out
custom_field_styles = coloredlogs.DEFAULT_FIELD_STYLES
custom_field_styles['asctime']['color'] = 24
custom_field_styles['name']['color'] = 22
custom_level_styles = coloredlogs.DEFAULT_LEVEL_STYLES
custom_level_styles['info']['color'] = 'white'
# A single console handler at INFO, the per-run settings dump at DEBUG stays hidden unless asked for
coloredlogs.install(level='INFO', logger=logger, fmt='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
                    level_styles=custom_level_styles, field_styles=custom_field_styles)


def configure_logger(logging_level: int = None,
                     file_handler: logging.FileHandler = None, stream_handler: logging.StreamHandler = None):
    """
    Adjust what the 'simplexopt' logger reports. Every call to optimize() or nelder_mead() emits one INFO message
    when the simplex converges ('Terminal condition met at iteration ...') or one WARNING when the iteration cap is
    hit first, and a DEBUG message with the run settings before it starts. Sweeps over many starting points or
    objectives usually only care about the warnings, while debugging a single run benefits from the settings dump.

    Parameters
    ----------
    logging_level: int, optional
        Level applied to the logger itself, messages below it are dropped before any handler sees them. Setting
        logging.WARNING silences the per-run convergence messages, logging.DEBUG is needed for the settings dump.
    file_handler: logging.FileHandler, optional
        Handler replacing the current file handler (if any), e.g. to keep a record of which runs of a long batch
        failed to converge. Its own level still filters what is written.
    stream_handler: logging.StreamHandler, optional
        Handler replacing the colourized console handler installed on import.

    Returns
    -------
    None

    Notes
    -----
    The logger is assumed to hold at most one stream handler and one file handler.

    Example
    -------
    # Only report runs that fail to converge
    configure_logger(logging_level=logging.WARNING)

    # Show the settings of each run on the console and log convergence of a batch of runs to a file
    file_handler = logging.FileHandler('batch_runs.log')
    file_handler.setLevel(logging.INFO)
    console = logging.StreamHandler()
    console.setLevel(logging.DEBUG)
    configure_logger(logging_level=logging.DEBUG, file_handler=file_handler, stream_handler=console)
    """
    logger = logging.getLogger('simplexopt')
    if logging_level:
        logger.setLevel(logging_level)

    # FileHandler subclasses StreamHandler, so file handlers have to be excluded when looking for the console one
    existing_stream_handler = None
    existing_file_handler = None
    for handler in logger.handlers:
        if isinstance(handler, logging.StreamHandler) and not isinstance(handler, logging.FileHandler):
            existing_stream_handler = handler
        elif isinstance(handler, logging.FileHandler):
            existing_file_handler = handler

    if stream_handler:
        if existing_stream_handler:
            logger.removeHandler(existing_stream_handler)
        logger.addHandler(stream_handler)
    if file_handler:
        if existing_file_handler:
            logger.removeHandler(existing_file_handler)
        logger.addHandler(file_handler)


def _on_demand_import(module: str, pypi_name: str = None):
    """Import a module only needed by the demos (click, matplotlib, seaborn), deferring the error until it is used."""
    try:
        mod = importlib.import_module(module)
        return mod
    except ImportError:
        # Module name and pypi package name do not always match, we want to tell the user the package to install
        if not pypi_name:
            pypi_name = module
        hint = f"Trying to use a feature that requires the optional {module} module. " \
               f"Please install package '{pypi_name}' first, e.g. with the 'demos' extra of simplexopt."

        class FailedImport:
            """Stand-in that raises the install hint as soon as any attribute of the missing module is accessed"""
            def __getattr__(self, attr):
                raise ImportError(hint)

        return FailedImport()

# Copyright (c) 2024 Ian Hill
# SPDX-License-Identifier: Apache-2.0

"""Tests for the package logger and its configuration"""

import os
import logging
import tempfile
from io import StringIO
from unittest import TestCase

from simplexopt import optimize
from simplexopt.cookbook import sphere, linear_slope
from simplexopt.helpers import logger, configure_logger


class TestLogger(TestCase):
    def setUp(self):
        self._handlers = list(logger.handlers)
        self._level = logger.level

    def tearDown(self):
        for handler in list(logger.handlers):
            logger.removeHandler(handler)
        for handler in self._handlers:
            logger.addHandler(handler)
        logger.setLevel(self._level)

    @staticmethod
    def get_stream_handler(level):
        log_stream = StringIO()
        stream_handler = logging.StreamHandler(stream=log_stream)
        stream_handler.setLevel(level)
        return log_stream, stream_handler

    def test_logger_name(self):
        """Test that the logger has the correct name."""
        with self.assertLogs('simplexopt') as captured_logs:
            logger.info("Testing logger's name.")
        self.assertEqual(captured_logs.records[0].name, 'simplexopt')

    def test_convergence_messages(self):
        with self.assertLogs('simplexopt', level='INFO') as captured_logs:
            optimize(sphere, 2, seed=10)
        self.assertEqual(captured_logs.records[-1].levelname, 'INFO')
        self.assertIn('Terminal condition met at iteration', captured_logs.records[-1].getMessage())

        with self.assertLogs('simplexopt', level='WARNING') as captured_logs:
            report = optimize(linear_slope, 2, seed=10, max_iters=20)
        self.assertFalse(report.converged)
        self.assertEqual(captured_logs.records[-1].levelname, 'WARNING')
        self.assertIn('failed to converge', captured_logs.records[-1].getMessage())

    def test_configure_logger(self):
        # The handler only passes warnings, a converging run should produce no output
        log_stream, stream_handler = self.get_stream_handler(logging.WARNING)
        configure_logger(stream_handler=stream_handler)
        optimize(sphere, 2, seed=10)
        stream_handler.flush()
        self.assertEqual(len(log_stream.getvalue()), 0)

        # At INFO the convergence message comes through
        log_stream, stream_handler = self.get_stream_handler(logging.INFO)
        configure_logger(stream_handler=stream_handler)
        optimize(sphere, 2, seed=10)
        stream_handler.flush()
        self.assertTrue(log_stream.getvalue().startswith('Terminal condition met at iteration'))

        # Raising the global level silences it again even though the handler would accept INFO
        log_stream, stream_handler = self.get_stream_handler(logging.INFO)
        configure_logger(logging_level=logging.WARNING, stream_handler=stream_handler)
        optimize(sphere, 2, seed=10)
        stream_handler.flush()
        self.assertEqual(len(log_stream.getvalue()), 0)
        # Non-convergence still gets reported
        optimize(linear_slope, 2, seed=10, max_iters=20)
        stream_handler.flush()
        self.assertIn('failed to converge', log_stream.getvalue())

    def test_file_handler(self):
        with tempfile.TemporaryDirectory() as tmp_dir:
            log_file = os.path.join(tmp_dir, 'test.log')
            file_handler = logging.FileHandler(log_file)
            file_handler.setLevel(logging.INFO)
            configure_logger(file_handler=file_handler)
            optimize(sphere, 2, seed=10)
            file_handler.close()
            with open(log_file, 'r') as file:
                log_content = file.read().rstrip()
        self.assertIn('Terminal condition met at iteration', log_content)

    def test_debug_run_settings(self):
        # Hidden by the default console handler, but a DEBUG handler gets the settings of each run
        log_stream, stream_handler = self.get_stream_handler(logging.DEBUG)
        configure_logger(stream_handler=stream_handler)
        optimize(sphere, 2, seed=10, tol=1e-5)
        stream_handler.flush()
        first_line = log_stream.getvalue().splitlines()[0]
        self.assertTrue(first_line.startswith('Starting Nelder-Mead run on a 2-dimensional problem'))
        self.assertIn('tol=1e-05', first_line)

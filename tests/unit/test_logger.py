from unittest import TestCase
import logging
import os
from unittest import mock

from artledger import logger


class TestLogger(TestCase):
    def test_get_logger_has_colored_handler(self):
        log = logger.get_logger('artledger-test')

        self.assertIsInstance(log, logging.Logger)
        self.assertTrue(any(isinstance(h, logger.ColoredStreamHandler) for h in log.handlers))

    def test_handlers_are_not_duplicated(self):
        a = logger.get_logger('artledger-dup')
        b = logger.get_logger('artledger-dup')

        self.assertIs(a, b)
        self.assertEqual(len(b.handlers), 1)

    def test_level_comes_from_environment(self):
        with mock.patch.dict(os.environ, {'LOG_LEVEL': 'DEBUG'}):
            self.assertEqual(logger._level_from_env(), logging.DEBUG)

    def test_default_level_is_warning(self):
        with mock.patch.dict(os.environ, clear=True):
            self.assertEqual(logger._level_from_env(), logging.WARNING)

    def test_unknown_level_rejected(self):
        with mock.patch.dict(os.environ, {'LOG_LEVEL': 'LOUD'}):
            with self.assertRaises(AssertionError):
                logger._level_from_env()

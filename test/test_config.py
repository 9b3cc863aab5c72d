import math
import sys
import unittest
from unittest import mock

from slippytile.config import Config, LOG_LEVEL_ENV, MAX_LATITUDE


class TestConfig(unittest.TestCase):

    def test_default_log_level(self):
        self.assertEqual(Config(environ={}).log_level, 'INFO')

    def test_log_level_from_env(self):
        self.assertEqual(Config(environ={LOG_LEVEL_ENV: 'debug'}).log_level, 'DEBUG')

    def test_unknown_log_level_falls_back_to_info(self):
        config = Config(environ={LOG_LEVEL_ENV: 'loud'})
        with mock.patch('slippytile.config.logger') as log:
            log.level.side_effect = ValueError("Level 'LOUD' does not exist")
            config.setup_logging()
        log.add.assert_called_once_with(sys.stderr, level='INFO')
        log.warning.assert_called_once()

    def test_known_log_level_is_used(self):
        config = Config(environ={LOG_LEVEL_ENV: 'warning'})
        with mock.patch('slippytile.config.logger') as log:
            config.setup_logging()
        log.add.assert_called_once_with(sys.stderr, level='WARNING')
        log.warning.assert_not_called()

    def test_max_latitude(self):
        self.assertAlmostEqual(MAX_LATITUDE, math.degrees(math.atan(math.sinh(math.pi))), delta=1e-12)


if __name__ == '__main__':
    unittest.main()

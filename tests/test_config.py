# Test Configuration Loading and Logging Setup

import logging
import os
import sys
import tempfile
import unittest

# Add src to path
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..', 'src'))

from funcutil.utils.io import load_config
from funcutil.utils.logging import (
    DATE_FORMAT,
    ROOT_LOGGER,
    configure_logging,
    get_logger,
)
from funcutil.decorators.timer import new

class TestLoadConfig(unittest.TestCase):

    def setUp(self):
        self.tmp = tempfile.TemporaryDirectory()
        self.addCleanup(self.tmp.cleanup)

    def _write(self, content):
        path = os.path.join(self.tmp.name, 'config.yaml')
        with open(path, 'w') as f:
            f.write(content)
        return path

    def test_loads_mapping(self):
        config = load_config(self._write("logging:\n  level: DEBUG\n"))
        self.assertEqual(config, {'logging': {'level': 'DEBUG'}})

    def test_empty_file(self):
        self.assertEqual(load_config(self._write("")), {})

    def test_non_mapping_rejected(self):
        with self.assertRaises(ValueError):
            load_config(self._write("- a\n- b\n"))

    def test_missing_file(self):
        with self.assertRaises(FileNotFoundError):
            load_config(os.path.join(self.tmp.name, 'missing.yaml'))

    def test_default_config_file(self):
        path = os.path.join(os.path.dirname(__file__), '..', 'configs', 'default.yaml')
        config = load_config(path)
        self.assertEqual(config['logging']['level'], 'INFO')

class TestConfigureLogging(unittest.TestCase):

    def setUp(self):
        self.root = logging.getLogger(ROOT_LOGGER)
        self.handlers = list(self.root.handlers)

    def tearDown(self):
        self._drop_added_handlers()
        configure_logging({})

    def _drop_added_handlers(self):
        for handler in list(self.root.handlers):
            if handler not in self.handlers:
                self.root.removeHandler(handler)
                handler.close()

    def test_defaults(self):
        root = configure_logging(None)
        self.assertIs(root, self.root)
        self.assertEqual(root.level, logging.INFO)
        self.assertTrue(root.propagate)

    def test_level_and_format(self):
        configure_logging({'logging': {'level': 'debug', 'format': '%(levelname)s %(message)s'}})
        self.assertEqual(self.root.level, logging.DEBUG)

        console = [h for h in self.root.handlers if not isinstance(h, logging.FileHandler)]
        self.assertTrue(console)
        self.assertEqual(console[0].formatter._fmt, '%(levelname)s %(message)s')
        self.assertEqual(console[0].formatter.datefmt, DATE_FORMAT)

    def test_log_file_receives_timing_lines(self):
        with tempfile.TemporaryDirectory() as tmp:
            log_file = os.path.join(tmp, 'logs', 'funcutil.log')
            configure_logging({'logging': {'log_file': log_file}})

            new(lambda: None)()

            for handler in self.root.handlers:
                handler.flush()
            with open(log_file, encoding='utf-8') as f:
                contents = f.read()

            # Release the file before the directory is removed
            self._drop_added_handlers()

        self.assertIn("-- func executed in ", contents)
        self.assertIn("funcutil.timer INFO", contents)

class TestGetLogger(unittest.TestCase):

    def test_handler_added_once(self):
        first = get_logger("funcutil_test_once")
        second = get_logger("funcutil_test_once")
        self.assertIs(first, second)
        self.assertEqual(len(second.handlers), 1)

    def test_console_format(self):
        logger = get_logger("funcutil_test_format")
        formatter = logger.handlers[0].formatter
        self.assertEqual(formatter._fmt, '%(asctime)s %(message)s')
        self.assertEqual(formatter.datefmt, '%Y/%m/%d %H:%M:%S')

if __name__ == '__main__':
    unittest.main()

# SPDX-License-Identifier: MIT

import logging
import tempfile
import unittest
from pathlib import Path

import pendulum
import yaml

from zenote.configuration import get_default_configuration
from zenote.logger import LOGGER_NAME, configure_logging
from zenote.repository.configuration import ConfigurationRepository
from zenote.time import datetime_from_untrusted, datetime_to_date_stamp


class ConfigurationRepositoryTest(unittest.TestCase):
    def setUp(self) -> None:
        self.tmpdir = tempfile.TemporaryDirectory()
        self.addCleanup(self.tmpdir.cleanup)
        self.path = Path(self.tmpdir.name) / "zenote" / "config.yaml"

    def test_defaults_are_written_on_first_flush(self) -> None:
        repository = ConfigurationRepository(self.path)

        self.assertEqual(repository.get_config(), get_default_configuration())
        self.assertTrue(repository.flush())
        self.assertFalse(repository.flush())

        saved = yaml.safe_load(self.path.read_text(encoding="utf-8"))
        self.assertEqual(saved["export_prefix"], "zenote")
        self.assertEqual(saved["max_import_file_size"], 10 * 1024 * 1024)

    def test_missing_keys_are_back_filled(self) -> None:
        self.path.parent.mkdir(parents=True)
        self.path.write_text("export_prefix: mynotes\n", encoding="utf-8")

        repository = ConfigurationRepository(self.path)
        config = repository.get_config()

        self.assertEqual(config["export_prefix"], "mynotes")
        self.assertEqual(config["json_indent"], 2)
        self.assertTrue(repository.is_dirty)

    def test_update_config(self) -> None:
        repository = ConfigurationRepository(self.path)
        repository.update_config(json_indent=4, default_tag_color="sage", log_level="debug")
        repository.flush()

        reloaded = ConfigurationRepository(self.path).get_config()
        self.assertEqual(reloaded["json_indent"], 4)
        self.assertEqual(reloaded["default_tag_color"], "sage")
        self.assertEqual(reloaded["log_level"], "DEBUG")

    def test_update_config_rejects_invalid_values(self) -> None:
        repository = ConfigurationRepository(self.path)
        with self.assertRaises(ValueError):
            repository.update_config(default_tag_color="neon")
        with self.assertRaises(ValueError):
            repository.update_config(max_import_file_size=0)

    def test_get_config_returns_a_copy(self) -> None:
        repository = ConfigurationRepository(self.path)
        config = repository.get_config()
        config["export_prefix"] = "changed"
        self.assertEqual(repository.get_config()["export_prefix"], "zenote")


class LoggingTest(unittest.TestCase):
    def setUp(self) -> None:
        logger = logging.getLogger(LOGGER_NAME)
        self.previous = (logger.level, list(logger.handlers))
        logger.handlers.clear()

    def tearDown(self) -> None:
        logger = logging.getLogger(LOGGER_NAME)
        logger.setLevel(self.previous[0])
        logger.handlers[:] = self.previous[1]

    def test_single_handler(self) -> None:
        configure_logging("info")
        logger = configure_logging("debug")

        self.assertEqual(len(logger.handlers), 1)
        self.assertEqual(logger.level, logging.DEBUG)
        self.assertEqual(logging.getLogger("zenote.codec.document").getEffectiveLevel(), logging.DEBUG)


class TimeTest(unittest.TestCase):
    def test_untrusted_dates(self) -> None:
        self.assertIsNone(datetime_from_untrusted("invalid"))
        self.assertIsNone(datetime_from_untrusted(""))
        self.assertIsNone(datetime_from_untrusted(123))
        self.assertIsNone(datetime_from_untrusted(None))
        self.assertEqual(
            datetime_from_untrusted("2024-01-01T12:00:00.000Z"),
            pendulum.datetime(2024, 1, 1, 12, tz="UTC"),
        )

    def test_date_stamp(self) -> None:
        self.assertEqual(
            datetime_to_date_stamp(pendulum.datetime(2024, 12, 31, 23, 30, tz="UTC")),
            "2024-12-31",
        )


if __name__ == "__main__":
    unittest.main()

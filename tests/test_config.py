"""Unit tests for Settings validation and logging configuration."""

import logging
import os
import tempfile
import unittest
from pathlib import Path
from unittest.mock import patch

from pydantic import ValidationError

from gatekeeper.core.config import Settings
from gatekeeper.core.database import build_engine
from gatekeeper.core.logging_config import configure_logging


class TestSettingsDefaults(unittest.TestCase):
    def test_defaults(self) -> None:
        with patch.dict(os.environ, {}, clear=True):
            settings = Settings(_env_file=None)
        self.assertEqual(settings.APP_ENV, "dev")
        self.assertFalse(settings.is_production)
        self.assertEqual(settings.JWT_ALGORITHM, "HS256")
        self.assertEqual(settings.JWT_EXPIRE_MINUTES, 1440)
        self.assertEqual(settings.COOKIE_MAX_AGE_SECONDS, 900)
        self.assertTrue(settings.DATABASE_URL.startswith("postgresql+psycopg2://"))
        self.assertEqual(settings.cors_origins, [])

    def test_default_url_uses_declared_driver(self) -> None:
        with patch.dict(os.environ, {}, clear=True):
            engine = build_engine(Settings(_env_file=None))
        try:
            self.assertEqual(engine.dialect.driver, "psycopg2")
        finally:
            engine.dispose()

    def test_reads_environment(self) -> None:
        env = {"APP_ENV": "prod", "JWT_SECRET": "from-env-secret", "DATABASE_URL": "sqlite://"}
        with patch.dict(os.environ, env, clear=True):
            settings = Settings(_env_file=None)
        self.assertTrue(settings.is_production)
        self.assertEqual(settings.JWT_SECRET.get_secret_value(), "from-env-secret")

    def test_settings_are_immutable(self) -> None:
        settings = Settings(_env_file=None, DATABASE_URL="sqlite://")
        with self.assertRaises(ValidationError):
            settings.APP_ENV = "prod"


class TestSettingsValidation(unittest.TestCase):
    def test_rejects_non_postgres_or_sqlite_url(self) -> None:
        with self.assertRaises(ValidationError):
            Settings(_env_file=None, DATABASE_URL="mysql://root@localhost/db")

    def test_rejects_empty_secret(self) -> None:
        with self.assertRaises(ValidationError):
            Settings(_env_file=None, DATABASE_URL="sqlite://", JWT_SECRET="   ")

    def test_rejects_out_of_range_expiry(self) -> None:
        with self.assertRaises(ValidationError):
            Settings(_env_file=None, DATABASE_URL="sqlite://", JWT_EXPIRE_MINUTES=0)

    def test_rejects_unknown_log_level(self) -> None:
        with self.assertRaises(ValidationError):
            Settings(_env_file=None, DATABASE_URL="sqlite://", LOG_LEVEL="chatty")

    def test_rejects_unparseable_rate_limit(self) -> None:
        with self.assertRaises(ValidationError):
            Settings(_env_file=None, DATABASE_URL="sqlite://", RATE_LIMIT="lots per hour")

    def test_log_level_normalized(self) -> None:
        settings = Settings(_env_file=None, DATABASE_URL="sqlite://", LOG_LEVEL=" debug ")
        self.assertEqual(settings.LOG_LEVEL, "DEBUG")

    def test_cors_origins_parsed(self) -> None:
        settings = Settings(
            _env_file=None,
            DATABASE_URL="sqlite://",
            CORS_ORIGINS="http://localhost:3000, https://app.example.com,",
        )
        self.assertEqual(
            settings.cors_origins, ["http://localhost:3000", "https://app.example.com"]
        )

    def test_wildcard_origin_dropped_in_production(self) -> None:
        settings = Settings(
            _env_file=None, DATABASE_URL="sqlite://", APP_ENV="prod", CORS_ORIGINS="*,https://app.example.com"
        )
        self.assertEqual(settings.cors_origins, ["https://app.example.com"])


class TestConfigureLogging(unittest.TestCase):
    def setUp(self) -> None:
        self.root = logging.getLogger()
        self.handlers_before = list(self.root.handlers)
        self.level_before = self.root.level

    def tearDown(self) -> None:
        for handler in list(self.root.handlers):
            if handler not in self.handlers_before:
                self.root.removeHandler(handler)
                handler.close()
        self.root.setLevel(self.level_before)

    def test_sets_root_level(self) -> None:
        configure_logging(Settings(_env_file=None, DATABASE_URL="sqlite://", LOG_LEVEL="ERROR"))
        self.assertEqual(self.root.level, logging.ERROR)

    def test_log_dir_adds_file_handlers_once(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            settings = Settings(_env_file=None, DATABASE_URL="sqlite://", LOG_DIR=tmp)
            configure_logging(settings)
            configure_logging(settings)
            logging.getLogger("gatekeeper.test").error("disk full")
            file_handlers = [
                h for h in self.root.handlers if isinstance(h, logging.FileHandler)
                and h not in self.handlers_before
            ]
            self.assertEqual(len(file_handlers), 2)
            for handler in file_handlers:
                handler.flush()
            self.assertIn("disk full", (Path(tmp) / "error.log").read_text(encoding="utf-8"))
            self.assertIn("disk full", (Path(tmp) / "combined.log").read_text(encoding="utf-8"))
            for handler in file_handlers:
                self.root.removeHandler(handler)
                handler.close()


if __name__ == "__main__":
    unittest.main()

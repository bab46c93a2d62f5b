"""Unit tests for journal.core.config.Settings validators."""

import unittest

from pydantic import ValidationError

from journal.core.config import Settings


def _settings(**overrides: object) -> Settings:
    return Settings(_env_file=None, **overrides)


class TestSettingsDefaults(unittest.TestCase):
    def test_defaults_are_usable(self) -> None:
        settings = _settings()
        self.assertFalse(settings.SESSION_COOKIE_SECURE)
        self.assertEqual(settings.SESSION_ALGORITHM, "HS256")


class TestSettingsValidation(unittest.TestCase):
    def test_postgres_url_accepted(self) -> None:
        settings = _settings(DATABASE_URL=" postgresql://u:p@localhost:5432/journal ")
        self.assertEqual(settings.DATABASE_URL, "postgresql://u:p@localhost:5432/journal")

    def test_blank_database_url_rejected(self) -> None:
        with self.assertRaises(ValidationError):
            _settings(DATABASE_URL="   ")

    def test_unsupported_database_url_rejected(self) -> None:
        with self.assertRaises(ValidationError):
            _settings(DATABASE_URL="mongodb://localhost:27017/blog")

    def test_empty_session_secret_rejected(self) -> None:
        with self.assertRaises(ValidationError):
            _settings(SESSION_SECRET="   ")

    def test_port_out_of_range_rejected(self) -> None:
        with self.assertRaises(ValidationError):
            _settings(PORT=70000)

    def test_session_expiry_bounds(self) -> None:
        with self.assertRaises(ValidationError):
            _settings(SESSION_EXPIRE_MINUTES=0)
        self.assertEqual(_settings(SESSION_EXPIRE_MINUTES=30).SESSION_EXPIRE_MINUTES, 30)


if __name__ == "__main__":
    unittest.main()

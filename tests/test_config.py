"""Settings validation for token secrets, bcrypt cost and the database URL."""

import unittest

from pydantic import ValidationError

from app.core.config import Settings


class TestSettingsValidation(unittest.TestCase):
    def test_defaults_are_valid(self) -> None:
        s = Settings()
        self.assertGreaterEqual(s.BCRYPT_ROUNDS, 10)
        self.assertNotEqual(
            s.JWT_SECRET.get_secret_value(), s.JWT_REFRESH_SECRET.get_secret_value()
        )

    def test_access_and_refresh_secrets_must_differ(self) -> None:
        with self.assertRaises(ValidationError):
            Settings(JWT_SECRET="same-secret-value", JWT_REFRESH_SECRET="same-secret-value")

    def test_refresh_must_outlive_access(self) -> None:
        with self.assertRaises(ValidationError):
            Settings(JWT_EXPIRE_MINUTES=60, JWT_REFRESH_EXPIRE_MINUTES=30)

    def test_bcrypt_rounds_floor(self) -> None:
        with self.assertRaises(ValidationError):
            Settings(BCRYPT_ROUNDS=4)

    def test_database_url_must_be_postgres(self) -> None:
        with self.assertRaises(ValidationError):
            Settings(DATABASE_URL="mysql://localhost/db")

    def test_log_level_is_normalized(self) -> None:
        self.assertEqual(Settings(LOG_LEVEL="debug").LOG_LEVEL, "DEBUG")

    def test_admin_email_domain_is_normalized_like_login_requests(self) -> None:
        self.assertEqual(Settings(ADMIN_EMAIL="Admin@MediQ.com").ADMIN_EMAIL, "Admin@mediq.com")

    def test_admin_email_must_be_an_address(self) -> None:
        with self.assertRaises(ValidationError):
            Settings(ADMIN_EMAIL="not-an-email")

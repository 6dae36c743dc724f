"""Unit tests for seed_admin_if_needed: the four bootstrap paths plus error swallowing."""

import unittest
from unittest.mock import MagicMock

from pydantic import SecretStr

from app.core.security import verify_secret
from app.models import Role
from app.repositories.user import UserRepository
from app.services.admin_seed import SeedOutcome, seed_admin_if_needed
from tests.helpers import add_user, make_session


def _settings(disabled: bool = False) -> MagicMock:
    settings = MagicMock()
    settings.DISABLE_ADMIN_SEED = disabled
    settings.ADMIN_EMAIL = "admin@mediq.com"
    settings.ADMIN_PASSWORD = SecretStr("admin123")
    settings.ADMIN_NAME = "Administrator"
    return settings


class TestSeedDisabled(unittest.TestCase):
    """When DISABLE_ADMIN_SEED is set, nothing touches the store."""

    def test_no_store_calls_and_skip_logged(self) -> None:
        users = MagicMock()
        with self.assertLogs("app.services.admin_seed", level="INFO") as logs:
            outcome = seed_admin_if_needed(users, _settings(disabled=True))
        self.assertEqual(outcome, SeedOutcome.SKIPPED)
        self.assertEqual(users.method_calls, [])
        self.assertTrue(any("skipping" in line for line in logs.output))


class TestSeedWithMockStore(unittest.TestCase):
    """Branches decided by the existing account's role."""

    def test_existing_admin_is_left_alone(self) -> None:
        users = MagicMock()
        users.find_by_email.return_value = MagicMock(id="u1", role=Role.ADMIN_FASKES)
        outcome = seed_admin_if_needed(users, _settings())
        self.assertEqual(outcome, SeedOutcome.UNCHANGED)
        users.find_by_email.assert_called_once_with("admin@mediq.com")
        users.update_role.assert_not_called()
        users.create.assert_not_called()
        users.update_refresh_token_hash.assert_not_called()

    def test_existing_account_with_wrong_role_gets_role_only(self) -> None:
        users = MagicMock()
        users.find_by_email.return_value = MagicMock(id="u1", role=Role.PASIEN)
        outcome = seed_admin_if_needed(users, _settings())
        self.assertEqual(outcome, SeedOutcome.ROLE_UPDATED)
        users.update_role.assert_called_once_with("u1", Role.ADMIN_FASKES)
        users.create.assert_not_called()

    def test_missing_account_is_created(self) -> None:
        users = MagicMock()
        users.find_by_email.return_value = None
        outcome = seed_admin_if_needed(users, _settings())
        self.assertEqual(outcome, SeedOutcome.CREATED)
        users.create.assert_called_once()
        fields = users.create.call_args.kwargs
        self.assertEqual(fields["email"], "admin@mediq.com")
        self.assertEqual(fields["name"], "Administrator")
        self.assertEqual(fields["role"], Role.ADMIN_FASKES)
        self.assertTrue(fields["nik"].startswith("ADM-"))
        self.assertNotEqual(fields["password_hash"], "admin123")
        self.assertTrue(verify_secret("admin123", fields["password_hash"]))

    def test_store_errors_are_logged_and_swallowed(self) -> None:
        users = MagicMock()
        users.find_by_email.side_effect = RuntimeError("database unavailable")
        with self.assertLogs("app.services.admin_seed", level="ERROR"):
            outcome = seed_admin_if_needed(users, _settings())
        self.assertEqual(outcome, SeedOutcome.FAILED)


class TestSeedIntegration(unittest.TestCase):
    """Against a real (SQLite) store: idempotent across repeated runs."""

    def setUp(self) -> None:
        self.session = make_session()
        self.users = UserRepository(self.session)

    def tearDown(self) -> None:
        self.session.close()

    def test_repeated_runs_create_exactly_one_admin(self) -> None:
        self.assertEqual(seed_admin_if_needed(self.users, _settings()), SeedOutcome.CREATED)
        self.assertEqual(seed_admin_if_needed(self.users, _settings()), SeedOutcome.UNCHANGED)
        admins = [u for u in self.users.list_all() if u.role == Role.ADMIN_FASKES]
        self.assertEqual(len(admins), 1)

    def test_role_fix_keeps_existing_password(self) -> None:
        user = add_user(self.users, email="admin@mediq.com", password="original", role=Role.OPERATOR)
        original_hash = user.password_hash
        self.assertEqual(seed_admin_if_needed(self.users, _settings()), SeedOutcome.ROLE_UPDATED)
        refreshed = self.users.get(user.id)
        self.assertEqual(refreshed.role, Role.ADMIN_FASKES)
        self.assertEqual(refreshed.password_hash, original_hash)
        self.assertEqual(len(self.users.list_all()), 1)

"""Startup hook: the admin seed never stops the app from starting."""

import unittest
from unittest.mock import patch

from sqlalchemy.exc import OperationalError

from app import main
from app.services.admin_seed import SeedOutcome


class TestRunStartupSeed(unittest.TestCase):
    def test_session_failure_is_logged_and_swallowed(self) -> None:
        error = OperationalError("SELECT 1", {}, Exception("connection refused"))
        with patch.object(main, "session_scope", side_effect=error):
            with self.assertLogs("app.main", level="ERROR") as logs:
                main.run_startup_seed()
        self.assertTrue(any("could not open a database session" in line for line in logs.output))

    def test_seed_outcome_is_logged(self) -> None:
        with patch.object(main, "session_scope"), patch.object(
            main, "seed_admin_if_needed", return_value=SeedOutcome.UNCHANGED
        ) as seed:
            with self.assertLogs("app.main", level="INFO") as logs:
                main.run_startup_seed()
        seed.assert_called_once()
        self.assertIn("Admin seed finished: unchanged", logs.output[-1])

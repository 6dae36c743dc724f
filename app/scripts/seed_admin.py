"""
Run the admin bootstrap on demand (it also runs at API startup):

  python -m app.scripts.seed_admin
"""

import logging
import sys

from app.core.config import get_settings
from app.core.database import session_scope
from app.repositories.user import UserRepository
from app.services.admin_seed import SeedOutcome, seed_admin_if_needed

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s %(levelname)s %(name)s %(message)s",
    datefmt="%Y-%m-%dT%H:%M:%SZ",
)
logger = logging.getLogger(__name__)


def main() -> int:
    """Seed the admin account; exit 1 only when seeding failed."""
    settings = get_settings()
    with session_scope() as db:
        outcome = seed_admin_if_needed(UserRepository(db), settings)
    logger.info("Admin seed completed: outcome=%s", outcome.value)
    return 1 if outcome == SeedOutcome.FAILED else 0


if __name__ == "__main__":
    sys.exit(main())

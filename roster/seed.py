"""
CLI entrypoint for the bootstrap seed (default roles, admin and user accounts):

  python -m roster.seed

Safe to run repeatedly; the API also runs it on startup unless SEED_DEFAULTS=false.
"""

import logging
import sys

from roster.core.config import get_settings
from roster.core.database import build_engine, build_session_factory
from roster.models import Base
from roster.services.bootstrap import seed_defaults

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s %(levelname)s %(name)s %(message)s",
    datefmt="%Y-%m-%dT%H:%M:%SZ",
)
logger = logging.getLogger(__name__)


def main() -> int:
    """Create missing tables (if enabled) and seed defaults."""
    settings = get_settings()
    engine = build_engine(settings)
    try:
        if settings.AUTO_CREATE_TABLES:
            Base.metadata.create_all(bind=engine)
        db = build_session_factory(engine)()
        try:
            result = seed_defaults(db, settings.BCRYPT_ROUNDS)
        finally:
            db.close()
        logger.info(
            "Seed job finished: %s role(s) and %s user(s) created",
            len(result.roles_created),
            len(result.users_created),
        )
        return 0
    except Exception as e:
        logger.exception("Seed failed: %s", e)
        return 1
    finally:
        engine.dispose()


if __name__ == "__main__":
    sys.exit(main())

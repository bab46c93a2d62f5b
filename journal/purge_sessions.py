"""
CLI entrypoint for clearing expired login sessions. Run from cron, e.g.:

  python -m journal.purge_sessions

Or hourly: 0 * * * * cd /path/to/journal && .venv/bin/python -m journal.purge_sessions
"""

import logging
import sys

from journal.core.database import SessionLocal
from journal.services.sessions import purge_expired_sessions

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s %(levelname)s %(name)s %(message)s",
    datefmt="%Y-%m-%dT%H:%M:%SZ",
)
logger = logging.getLogger(__name__)


def main() -> int:
    """Delete session records whose expiry has passed."""
    db = SessionLocal()
    try:
        sessions_deleted = purge_expired_sessions(db)
        logger.info("Session purge completed: sessions_deleted=%s", sessions_deleted)
        return 0
    except Exception as e:
        logger.exception("Session purge failed: %s", e)
        return 1
    finally:
        db.close()


if __name__ == "__main__":
    sys.exit(main())

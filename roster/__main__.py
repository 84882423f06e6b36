"""
Run the API server:

  python -m roster

Host and port come from HOST and PORT (see roster.core.config).
"""

import logging
import sys

import uvicorn

from roster.core.config import get_settings

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s %(levelname)s %(name)s %(message)s",
    datefmt="%Y-%m-%dT%H:%M:%SZ",
)
logger = logging.getLogger(__name__)


def main() -> int:
    settings = get_settings()
    logger.info("Starting server on %s:%s (env=%s)", settings.HOST, settings.PORT, settings.APP_ENV)
    uvicorn.run(
        "roster.main:create_app",
        factory=True,
        host=settings.HOST,
        port=settings.PORT,
        log_level="debug" if settings.DEBUG else "info",
    )
    return 0


if __name__ == "__main__":
    sys.exit(main())

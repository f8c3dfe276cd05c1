"""
cardserver/__main__.py

Process entry point: ``python -m cardserver`` or the ``cardserver`` script.

The listening socket is created here by uvicorn and lives until the
process exits.
"""

import uvicorn

from cardserver.core.config import settings
from cardserver.core.logger import get_logger, log_level

logger = get_logger(__name__)


def main() -> None:
    logger.info(
        "Starting %s %s on %s:%d — root=%s",
        settings.app_name,
        settings.app_version,
        settings.host,
        settings.port,
        settings.static_root,
    )
    uvicorn.run(
        "cardserver.main:app",
        host=settings.host,
        port=settings.port,
        log_config=None,
        log_level=log_level(),
    )


if __name__ == "__main__":
    main()

from __future__ import annotations

import logging
import sys

from beavertask.config import SETTINGS
from beavertask.infra.db import configure_engine, init_db
from beavertask.infra.logging import setup_logging

from .app import create_app

logger = logging.getLogger(__name__)


def main() -> None:
    setup_logging("beavertask_server")
    engine = configure_engine(SETTINGS.database_url)
    try:
        missing = init_db(engine)
    except Exception as exc:  # noqa: BLE001
        logger.critical("Database unavailable: %s", exc)
        sys.exit(1)
    if missing:
        logger.warning(
            "Database is missing tables %s; run `alembic upgrade head` first",
            ", ".join(missing),
        )

    app = create_app()
    logger.info("BeaverTask server listening on http://%s:%s", SETTINGS.server_host, SETTINGS.server_port)
    app.run(host=SETTINGS.server_host, port=SETTINGS.server_port)


if __name__ == "__main__":
    main()

from __future__ import annotations

import importlib
import logging
from typing import Optional

from dotenv import load_dotenv
from flask import Flask

from config import get_settings_module

from .container import Container, build_container
from .core.constants import OVERTIME_TOLERANCE_MINUTES, STANDARD_JOURNEY_MINUTES
from .database.bootstrap import apply_schema, list_tables
from .punches.controller import register as register_punches
from .reports.controller import register as register_reports

logger = logging.getLogger(__name__)


def create_app(container: Optional[Container] = None) -> Flask:
    load_dotenv(override=False)
    app = Flask(__name__)

    settings_module = get_settings_module()
    settings = importlib.import_module(settings_module)
    app.secret_key = getattr(settings, "SECRET_KEY")
    db_config = getattr(settings, "DB_CONFIG")
    app.config["DEBUG"] = bool(getattr(settings, "DEBUG", False))
    app.config["TESTING"] = bool(getattr(settings, "TESTING", False))

    logging.basicConfig(
        level=getattr(settings, "LOG_LEVEL", "INFO"),
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )
    logger.info("settings=%s", settings_module)

    if container is None:
        container = build_container(
            db_config=db_config,
            standard_minutes=int(getattr(settings, "STANDARD_JOURNEY_MINUTES", STANDARD_JOURNEY_MINUTES)),
            tolerance_minutes=int(getattr(settings, "OVERTIME_TOLERANCE_MINUTES", OVERTIME_TOLERANCE_MINUTES)),
        )
        logger.info(
            "db=%s@%s:%s/%s",
            db_config.get("user"),
            db_config.get("host"),
            db_config.get("port", 3306),
            db_config.get("database"),
        )

        if bool(getattr(settings, "AUTO_INIT_DB", False)):
            apply_schema(container.conn)
            logger.info("schema ready (tables=%s)", len(list_tables(container.conn)))

    register_punches(app, container)
    register_reports(app, container)

    return app

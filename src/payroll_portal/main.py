from __future__ import annotations

import importlib
import logging
from typing import Optional

from dotenv import load_dotenv
from flask import Flask

from .api.http import register as register_http
from .api.routes import build_dispatcher
from .config import get_settings_module
from .container import build_container
from .database.bootstrap import apply_schema, list_tables

logger = logging.getLogger(__name__)


def create_app(settings_module: Optional[str] = None) -> Flask:
    load_dotenv(override=False)
    app = Flask(__name__)

    settings_module = settings_module or get_settings_module()
    settings = importlib.import_module(settings_module)

    logging.basicConfig(
        level=getattr(settings, "LOG_LEVEL", "INFO"),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    app.secret_key = getattr(settings, "SECRET_KEY")
    app.config["DEBUG"] = bool(getattr(settings, "DEBUG", False))
    db_config = getattr(settings, "DB_CONFIG", None)
    storage_backend = getattr(settings, "STORAGE_BACKEND", "mysql")

    logger.info("settings=%s storage=%s", settings_module, storage_backend)

    if storage_backend == "mysql" and bool(getattr(settings, "AUTO_INIT_DB", False)):
        apply_schema(db_config)
        logger.info("schema ready (tables=%d)", len(list_tables(db_config)))

    container = build_container(
        db_config=db_config,
        storage_backend=storage_backend,
        session_ttl_hours=int(getattr(settings, "SESSION_TTL_HOURS", 24)),
        rate_limit_per_minute=int(getattr(settings, "RATE_LIMIT_PER_MINUTE", 30)),
    )
    dispatcher = build_dispatcher(container)
    app.extensions["payroll_portal"] = container

    register_http(app, dispatcher)

    return app

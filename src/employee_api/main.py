from __future__ import annotations

import importlib
from typing import Optional

from dotenv import load_dotenv
from flask import Flask
from flask_cors import CORS

from .common.logger import configure_logging, get_logger
from .config import get_settings_module
from .container import Container, build_container
from .core.exceptions import PersistenceError
from .database.bootstrap import SQL_DIR, apply_schema, apply_seed_sql, list_tables
from .database.connection import DBConfig
from .employees.controller import register as register_employees

logger = get_logger(__name__)


def _register_error_handlers(app: Flask) -> None:
    @app.errorhandler(PersistenceError)
    def handle_persistence_error(e: PersistenceError):
        logger.exception("Storage failure: %s", e)
        return "", 500


def create_app(container: Optional[Container] = None) -> Flask:
    load_dotenv(override=False)
    app = Flask(__name__)

    settings_module = get_settings_module()
    settings = importlib.import_module(settings_module)
    app.config["DEBUG"] = bool(getattr(settings, "DEBUG", False))
    app.config["TESTING"] = bool(getattr(settings, "TESTING", False))
    configure_logging(getattr(settings, "LOG_LEVEL", "INFO"))

    if container is None:
        db_config = getattr(settings, "DB_CONFIG")
        logger.info("settings=%s db=%s", settings_module, DBConfig.from_dict(db_config).describe())

        if bool(getattr(settings, "AUTO_INIT_DB", False)):
            apply_schema(db_config, schema_path=SQL_DIR / "schema.sql")
            logger.info("schema ready (tables=%d)", len(list_tables(db_config)))
        if bool(getattr(settings, "AUTO_SEED_DB", False)):
            apply_seed_sql(db_config, seed_path=SQL_DIR / "seed.sql")

        container = build_container(db_config=db_config)

    # Any origin may call the API, with any request headers.
    CORS(app, resources={r"/api/*": {"origins": "*"}})
    _register_error_handlers(app)
    register_employees(app, container)

    return app

from __future__ import annotations

import importlib
import sys
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT / "src") not in sys.path:
    sys.path.insert(0, str(REPO_ROOT / "src"))

from employee_api.common.logger import configure_logging, get_logger
from employee_api.config import get_settings_module
from employee_api.database.bootstrap import SQL_DIR, apply_schema, list_tables
from employee_api.database.connection import DBConfig

logger = get_logger("init_db")


def main() -> None:
    configure_logging()
    settings = importlib.import_module(get_settings_module())
    db_config = dict(settings.DB_CONFIG)

    apply_schema(db_config, schema_path=SQL_DIR / "schema.sql")
    tables = list_tables(db_config)
    logger.info("OK: Applied schema.sql -> %s (tables=%d)", DBConfig.from_dict(db_config).describe(), len(tables))


if __name__ == "__main__":
    main()

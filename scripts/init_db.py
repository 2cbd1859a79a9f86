from __future__ import annotations

import importlib
import logging

from dotenv import load_dotenv

from punctuality_rewards.config import get_settings_module
from punctuality_rewards.database.bootstrap import apply_schema, list_tables
from punctuality_rewards.database.connection import DBConfig, DatabaseConnection

logger = logging.getLogger("init_db")


def main() -> None:
    load_dotenv(override=False)
    settings = importlib.import_module(get_settings_module())
    logging.basicConfig(
        level=getattr(settings, "LOG_LEVEL", "INFO"),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    db_config = DBConfig.from_dict(settings.DB_CONFIG)
    conn = DatabaseConnection.get_instance(db_config)
    apply_schema(conn)
    tables = list_tables(conn)
    logger.info(
        "Applied schema.sql -> %s@%s:%s/%s (tables=%s)",
        db_config.user,
        db_config.host,
        db_config.port,
        db_config.database,
        len(tables),
    )


if __name__ == "__main__":
    main()

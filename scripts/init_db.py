from __future__ import annotations

import importlib

from attendance_register.config import get_settings_module
from attendance_register.database.bootstrap import apply_schema
from attendance_register.database.connection import DBConfig, DatabaseConnection


def main() -> None:
    settings = importlib.import_module(get_settings_module())
    db_config = dict(settings.DB_CONFIG)

    apply_schema(DatabaseConnection.get_instance(DBConfig.from_dict(db_config)))
    print(
        "OK: Applied schema.sql -> "
        f"{db_config.get('user')}@{db_config.get('host')}:{db_config.get('port', 3306)}/{db_config.get('database')}"
    )


if __name__ == "__main__":
    main()

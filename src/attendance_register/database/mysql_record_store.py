from __future__ import annotations

import json
import logging
from typing import Any

import mysql.connector

from ..core.enums import StoreKey
from ..core.exceptions import StoreError
from .connection import DatabaseConnection
from .mysql_base import db_cursor, fetchone
from .record_store import RecordStore

logger = logging.getLogger(__name__)


class MySQLRecordStore(RecordStore):
    """Record store kept in a single MySQL table, one JSON payload per key."""

    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def get(self, key: StoreKey, default: Any) -> Any:
        try:
            with db_cursor(self._conn_factory) as (_, cur):
                cur.execute("SELECT payload FROM record_store WHERE store_key=%s", (key.value,))
                row = fetchone(cur)
        except mysql.connector.Error as e:
            logger.error("failed to read %s from record store: %s", key.value, e)
            raise StoreError(f"Failed to load {key.value} from storage") from e

        if not row:
            return default
        try:
            return json.loads(row["payload"])
        except ValueError as e:
            logger.error("corrupt payload for %s: %s", key.value, e)
            raise StoreError(f"Stored {key.value} data is corrupt") from e

    def save(self, key: StoreKey, value: Any) -> None:
        payload = json.dumps(value, ensure_ascii=False)
        try:
            with db_cursor(self._conn_factory) as (_, cur):
                cur.execute(
                    """
                    INSERT INTO record_store(store_key, payload)
                    VALUES(%s,%s)
                    ON DUPLICATE KEY UPDATE payload=VALUES(payload)
                    """,
                    (key.value, payload),
                )
        except mysql.connector.Error as e:
            logger.error("failed to write %s to record store: %s", key.value, e)
            raise StoreError(f"Failed to save {key.value} to storage") from e
        logger.debug("saved %s (%d bytes)", key.value, len(payload))

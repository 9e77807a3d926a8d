from __future__ import annotations

from contextlib import contextmanager
from typing import Any, Dict, List, Optional

import mysql.connector

from ..common.logger import get_logger
from ..core.exceptions import PersistenceError
from .connection import DatabaseConnection

logger = get_logger(__name__)


def _rollback_quietly(conn) -> None:
    # The error that triggered the rollback is the one callers must see.
    try:
        conn.rollback()
    except mysql.connector.Error as e:
        logger.warning("Rollback failed: %s", e)


def _close_quietly(conn) -> None:
    try:
        conn.close()
    except mysql.connector.Error as e:
        logger.warning("Closing connection failed: %s", e)


@contextmanager
def db_cursor(conn_factory: DatabaseConnection, *, dictionary: bool = True):
    """Yield ``(conn, cur)`` on a fresh connection; commit on success, rollback on error.

    Driver errors surface as :class:`PersistenceError` with the original chained.
    """
    try:
        conn = conn_factory.connect()
    except mysql.connector.Error as e:
        raise PersistenceError(f"Cannot connect to database: {e}") from e

    try:
        cur = conn.cursor(dictionary=dictionary)
        try:
            yield conn, cur
            conn.commit()
        finally:
            cur.close()
    except mysql.connector.Error as e:
        _rollback_quietly(conn)
        raise PersistenceError(str(e)) from e
    except Exception:
        _rollback_quietly(conn)
        raise
    finally:
        _close_quietly(conn)


def fetchone(cur) -> Optional[Dict[str, Any]]:
    row = cur.fetchone()
    return row if row else None


def fetchall(cur) -> List[Dict[str, Any]]:
    rows = cur.fetchall()
    return list(rows or [])

from __future__ import annotations

import logging
from contextlib import contextmanager
from typing import Any, Dict, List, Optional

import mysql.connector
from mysql.connector import errorcode

from ..core.exceptions import RecordConflict, StorageError
from .connection import DatabaseConnection

logger = logging.getLogger(__name__)

_TRANSIENT_ERRORS = (mysql.connector.errors.InterfaceError, mysql.connector.errors.OperationalError)


def _rollback(conn) -> None:
    try:
        conn.rollback()
    except mysql.connector.Error:
        # Caller re-raises the first error.
        logger.warning("rollback failed", exc_info=True)


@contextmanager
def db_cursor(conn_factory: DatabaseConnection, *, dictionary: bool = True):
    """Yield (conn, cursor) inside one transaction.

    Commits on success and rolls back on error. Duplicate-key violations
    surface as RecordConflict; lost or refused connections as StorageError.
    """

    try:
        conn = conn_factory.connect()
    except _TRANSIENT_ERRORS as e:
        raise StorageError(f"database unavailable: {e}") from e

    try:
        cur = conn.cursor(dictionary=dictionary)
        try:
            yield conn, cur
            conn.commit()
        finally:
            cur.close()
    except mysql.connector.errors.IntegrityError as e:
        _rollback(conn)
        if e.errno == errorcode.ER_DUP_ENTRY:
            raise RecordConflict(str(e)) from e
        raise
    except _TRANSIENT_ERRORS as e:
        _rollback(conn)
        raise StorageError(f"database error: {e}") from e
    except Exception:
        _rollback(conn)
        raise
    finally:
        conn.close()


def fetchone(cur) -> Optional[Dict[str, Any]]:
    row = cur.fetchone()
    return row if row else None


def fetchall(cur) -> List[Dict[str, Any]]:
    rows = cur.fetchall()
    return list(rows or [])

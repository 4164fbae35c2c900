from __future__ import annotations

from contextlib import contextmanager
from typing import Any, Dict, List, Optional, Sequence, Tuple

import mysql.connector

from ..core.exceptions import StoreError
from .connection import DatabaseConnection


@contextmanager
def db_cursor(conn_factory: DatabaseConnection, *, dictionary: bool = True):
    """Yield ``(conn, cursor)`` inside one transaction.

    Commits when the block exits cleanly, rolls back otherwise. Driver errors
    surface as StoreError.
    """

    try:
        conn = conn_factory.connect()
    except mysql.connector.Error as exc:
        raise StoreError(str(exc)) from exc

    try:
        cur = conn.cursor(dictionary=dictionary)
        try:
            yield conn, cur
            conn.commit()
        finally:
            cur.close()
    except mysql.connector.Error as exc:
        conn.rollback()
        raise StoreError(str(exc)) from exc
    except Exception:
        conn.rollback()
        raise
    finally:
        conn.close()


def fetchone(cur) -> Optional[Dict[str, Any]]:
    row = cur.fetchone()
    return row if row else None


def fetchall(cur) -> List[Dict[str, Any]]:
    rows = cur.fetchall()
    return list(rows or [])


def build_set_clause(
    changes: Sequence[Tuple[str, Any]],
    *,
    allowed: Sequence[str],
) -> Tuple[str, List[Any]]:
    """Fold ``(column, value)`` pairs into ``"a=%s, b=%s"`` plus its parameters.

    Column names must come from ``allowed``; values only ever travel as
    parameters.
    """

    placeholders: List[str] = []
    params: List[Any] = []
    for column, value in changes:
        if column not in allowed:
            raise ValueError(f"Column not updatable: {column!r}")
        placeholders.append(f"{column}=%s")
        params.append(value)
    return ", ".join(placeholders), params

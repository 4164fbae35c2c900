from __future__ import annotations

import pytest
from mysql.connector import errors

from attendx.core.exceptions import StoreError
from attendx.database import connection as connection_module
from attendx.database.connection import DatabaseConnection, DBConfig
from attendx.database.mysql_base import db_cursor
from tests.fakes import ScriptedConnection


class FakeClock:
    def __init__(self):
        self.now = 0.0

    def monotonic(self) -> float:
        return self.now

    def sleep(self, seconds: float) -> None:
        self.now += seconds


class BusyPool:
    """Pool that is exhausted for the first ``busy_for`` checkouts."""

    def __init__(self, busy_for: int):
        self.busy_for = busy_for
        self.attempts = 0

    def get_connection(self):
        self.attempts += 1
        if self.attempts <= self.busy_for:
            raise errors.PoolError("Failed getting connection; pool exhausted")
        return ScriptedConnection([[{"now": "2024-01-01 00:00:00"}]])


@pytest.fixture
def clock(monkeypatch):
    fake = FakeClock()
    monkeypatch.setattr(connection_module, "time", fake)
    return fake


def _connection(pool, *, connect_timeout: int) -> DatabaseConnection:
    conn = DatabaseConnection(
        DBConfig(host="db", port=3306, user="u", password="p", database="d", pool_size=1, connect_timeout=connect_timeout)
    )
    conn._pool = pool
    return conn


def test_connect_waits_for_a_released_connection(clock):
    pool = BusyPool(busy_for=3)
    conn = _connection(pool, connect_timeout=10)

    with db_cursor(conn) as (_, cur):
        cur.execute("SELECT NOW() AS now")
        assert cur.fetchone() == {"now": "2024-01-01 00:00:00"}

    assert pool.attempts == 4
    assert 0 < clock.now < 10


def test_connect_gives_up_after_the_timeout(clock):
    pool = BusyPool(busy_for=10**9)
    conn = _connection(pool, connect_timeout=2)

    with pytest.raises(StoreError, match="pool exhausted"):
        with db_cursor(conn):
            pass

    assert clock.now >= 2
    assert pool.attempts > 1


def test_connect_without_timeout_tries_once(clock):
    pool = BusyPool(busy_for=1)
    conn = _connection(pool, connect_timeout=0)

    with pytest.raises(errors.PoolError):
        conn.connect()
    assert pool.attempts == 1

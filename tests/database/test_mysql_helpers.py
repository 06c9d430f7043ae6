from __future__ import annotations

import mysql.connector
import pytest

from src.class_attendance.class_attendance.core.exceptions import StoreUnavailable
from src.class_attendance.class_attendance.database.bootstrap import SCHEMA_PATH, iter_sql_statements
from src.class_attendance.class_attendance.database.mysql_base import db_cursor, join_id_list, split_id_list


class FakeCursor:
    def __init__(self, error=None):
        self._error = error
        self.closed = False

    def execute(self, *_):
        if self._error:
            raise self._error

    def close(self):
        self.closed = True


class FakeConn:
    def __init__(self, cursor):
        self._cursor = cursor
        self.committed = self.rolled_back = self.closed = False

    def cursor(self, dictionary=True):
        return self._cursor

    def commit(self):
        self.committed = True

    def rollback(self):
        self.rolled_back = True

    def close(self):
        self.closed = True


class FakeFactory:
    def __init__(self, conn=None, error=None):
        self._conn = conn
        self._error = error

    def connect(self):
        if self._error:
            raise self._error
        return self._conn


def test_minister_ids_round_trip_in_order():
    assert split_id_list(join_id_list([4, 1, 7])) == (4, 1, 7)
    assert join_id_list([]) is None
    assert split_id_list(None) == ()


def test_cursor_commits_on_success():
    conn = FakeConn(FakeCursor())
    with db_cursor(FakeFactory(conn)) as (_, cur):
        cur.execute("SELECT 1")

    assert conn.committed and conn.closed and not conn.rolled_back


def test_driver_error_becomes_store_unavailable():
    conn = FakeConn(FakeCursor(error=mysql.connector.Error("boom")))

    with pytest.raises(StoreUnavailable):
        with db_cursor(FakeFactory(conn)) as (_, cur):
            cur.execute("UPDATE attendance SET present=1")

    assert conn.rolled_back and conn.closed and not conn.committed


def test_connect_failure_becomes_store_unavailable():
    with pytest.raises(StoreUnavailable):
        with db_cursor(FakeFactory(error=mysql.connector.Error("refused"))):
            pass


def test_sql_splitter_ignores_semicolons_in_quotes():
    sql = "-- note; here\nINSERT INTO t VALUES ('a;b');\nSELECT 1;"

    assert list(iter_sql_statements(sql)) == ["INSERT INTO t VALUES ('a;b')", "SELECT 1"]


def test_schema_declares_attendance_uniqueness():
    statements = list(iter_sql_statements(SCHEMA_PATH.read_text(encoding="utf-8")))

    attendance = next(s for s in statements if "CREATE TABLE IF NOT EXISTS attendance" in s)
    assert "UNIQUE KEY uq_attendance_student_date (student_id, class_date)" in attendance
    assert "ON DELETE CASCADE" in attendance

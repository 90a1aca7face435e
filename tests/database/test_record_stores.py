import json

import mysql.connector
import pytest

from attendance_register.attendance.model import DailyAttendance
from attendance_register.attendance.store_attendance_repository import StoreAttendanceRepository
from attendance_register.core.enums import AttendanceStatus, StoreKey
from attendance_register.core.exceptions import StoreError
from attendance_register.database.latency import SimulatedLatencyStore
from attendance_register.database.mysql_record_store import MySQLRecordStore
from attendance_register.institute.store_institute_repository import StoreInstituteRepository


class FakeCursor:
    def __init__(self, conn):
        self.conn = conn
        self.row = None

    def execute(self, sql, params=()):
        if self.conn.fail:
            raise mysql.connector.Error("connection lost")
        self.conn.executed.append((" ".join(sql.split()), params))
        if sql.lstrip().startswith("SELECT"):
            payload = self.conn.rows.get(params[0])
            self.row = None if payload is None else {"payload": payload}
        else:
            self.conn.rows[params[0]] = params[1]

    def fetchone(self):
        return self.row

    def close(self):
        pass


class FakeConnection:
    def __init__(self):
        self.rows = {}
        self.executed = []
        self.fail = False
        self.commits = 0
        self.rollbacks = 0

    def cursor(self, dictionary=False):
        return FakeCursor(self)

    def commit(self):
        self.commits += 1

    def rollback(self):
        self.rollbacks += 1

    def close(self):
        pass


class FakeConnectionFactory:
    def __init__(self):
        self.conn = FakeConnection()

    def connect(self, with_database=True):
        return self.conn


def test_mysql_store_returns_default_for_missing_key():
    store = MySQLRecordStore(FakeConnectionFactory())
    assert store.get(StoreKey.CLASSES, []) == []


def test_mysql_store_upserts_json_payload():
    factory = FakeConnectionFactory()
    store = MySQLRecordStore(factory)

    store.save(StoreKey.CLASSES, [{"id": "_a", "name": "10-A"}])
    store.save(StoreKey.CLASSES, [{"id": "_a", "name": "10-B"}])

    assert store.get(StoreKey.CLASSES, []) == [{"id": "_a", "name": "10-B"}]
    assert "ON DUPLICATE KEY UPDATE" in factory.conn.executed[0][0]
    assert factory.conn.commits == 3


def test_mysql_failures_become_store_errors():
    factory = FakeConnectionFactory()
    factory.conn.fail = True
    store = MySQLRecordStore(factory)

    with pytest.raises(StoreError):
        store.get(StoreKey.STUDENTS, [])
    with pytest.raises(StoreError):
        store.save(StoreKey.STUDENTS, [])
    assert factory.conn.rollbacks == 2


def test_corrupt_payload_is_a_store_error():
    factory = FakeConnectionFactory()
    factory.conn.rows["holidays"] = "{not json"
    with pytest.raises(StoreError):
        MySQLRecordStore(factory).get(StoreKey.HOLIDAYS, [])


def test_latency_store_waits_before_each_call(store):
    waits = []
    slow = SimulatedLatencyStore(
        store,
        latency_ms=200,
        save_latency_ms={StoreKey.ATTENDANCE: 500},
        sleep=waits.append,
    )

    slow.save(StoreKey.CLASSES, [])
    slow.get(StoreKey.CLASSES, [])
    slow.save(StoreKey.ATTENDANCE, {})

    assert waits == [0.2, 0.2, 0.5]
    assert store.saves == [StoreKey.CLASSES, StoreKey.ATTENDANCE]


def test_zero_latency_never_sleeps(store):
    waits = []
    SimulatedLatencyStore(store, latency_ms=0, sleep=waits.append).get(StoreKey.CLASSES, [])
    assert waits == []


def test_institute_defaults_when_absent(store):
    institute = StoreInstituteRepository(store).get()
    assert (institute.name, institute.address) == ("My Institute", "123 Education Lane")


def test_override_log_round_trip_drops_empty_students(store):
    repo = StoreAttendanceRepository(store)
    repo.save_overrides(
        {
            "_s1": {"2025-09-08": DailyAttendance(AttendanceStatus.PRESENT, "09:10", "16:40")},
            "_s2": {},
        }
    )

    assert json.loads(store.data["attendance"]) == {
        "_s1": {"2025-09-08": {"status": "P", "in_time": "09:10", "out_time": "16:40"}}
    }
    assert repo.load_overrides() == {
        "_s1": {"2025-09-08": DailyAttendance(AttendanceStatus.PRESENT, "09:10", "16:40")}
    }

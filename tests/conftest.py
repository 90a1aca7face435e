from __future__ import annotations

import json
from typing import Any

import pytest

from attendance_register.attendance.time_source import fixed_time_drawer
from attendance_register.container import build_container
from attendance_register.core.enums import StoreKey
from attendance_register.core.exceptions import StoreError


class InMemoryRecordStore:
    """Record store fake; values are JSON round-tripped like the real store."""

    def __init__(self, initial: dict | None = None):
        self.data: dict[str, str] = {}
        self.saves: list[StoreKey] = []
        self.fail_on_save: set[StoreKey] = set()
        for key, value in (initial or {}).items():
            self.data[StoreKey(key).value] = json.dumps(value)

    def get(self, key: StoreKey, default: Any) -> Any:
        raw = self.data.get(key.value)
        return default if raw is None else json.loads(raw)

    def save(self, key: StoreKey, value: Any) -> None:
        if key in self.fail_on_save:
            raise StoreError(f"Failed to save {key.value} to storage")
        self.saves.append(key)
        self.data[key.value] = json.dumps(value)

    def raw(self, key: StoreKey) -> Any:
        raw = self.data.get(key.value)
        return None if raw is None else json.loads(raw)


@pytest.fixture
def store() -> InMemoryRecordStore:
    return InMemoryRecordStore()


@pytest.fixture
def container(store):
    return build_container(store=store, draw_time=fixed_time_drawer())


@pytest.fixture
def app(monkeypatch, container):
    monkeypatch.setenv("APP_ENV", "testing")
    from attendance_register.main import create_app

    return create_app(container=container)


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def logged_in(client):
    resp = client.post("/api/login", json={"username": "admin", "password": "password"})
    assert resp.status_code == 200
    return client

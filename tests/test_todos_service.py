"""
Tests for TodosService wired to the SQLite store, plus bootstrap wiring.

Run with: python -m pytest tests/test_todos_service.py -v
"""
from __future__ import annotations

import asyncio
import os
import tempfile
from datetime import datetime, timezone
from pathlib import Path

from todos.bootstrap import build_service, build_store
from todos.config import Settings
from todos.domain.todos.builder import TodoBuilder
from todos.domain.todos.models import CreateTodoRequest, UpdateTodoRequest
from todos.domain.todos.ports import Clock, IdGenerator
from todos.domain.todos.service import TodosService
from todos.infra.db.connection import Database
from todos.infra.db.repo.todos_sqlite import TodosSqliteRepo
from todos.infra.dynamodb.todos_access import DynamoTodosAccess


class FixedClock(Clock):
    def now(self) -> datetime:
        return datetime(2024, 3, 1, 9, 30, tzinfo=timezone.utc)


class SeqIds(IdGenerator):
    def __init__(self) -> None:
        self._n = 0

    def new_id(self) -> str:
        self._n += 1
        return f"t{self._n}"


def _settings(backend: str, db_path: str = "unused.db") -> Settings:
    return Settings(
        backend=backend,
        todos_table="Todos-test",
        todos_index="TodoIdIndex",
        is_offline=True,
        dynamodb_endpoint="http://localhost:8000",
        aws_region=None,
        db_path=Path(db_path),
        log_level="INFO",
    )


async def _run_with_service(test_fn):
    fd, path = tempfile.mkstemp(suffix=".db")
    os.close(fd)
    try:
        repo = TodosSqliteRepo(Database(path))
        await repo.init()
        await test_fn(TodosService(repo, TodoBuilder(FixedClock(), SeqIds())))
    finally:
        for suffix in ("", "-wal", "-shm"):
            if os.path.exists(path + suffix):
                os.unlink(path + suffix)


def test_create_todo_builds_and_persists():
    async def run(service: TodosService):
        todo = await service.create_todo(CreateTodoRequest(name="Write report"), "u1")

        assert todo.todo_id == "t1"
        assert todo.created_at == "2024-03-01T09:30:00+00:00"
        assert await service.get_todos("u1") == [todo]
        assert await service.get_todo("t1") == todo

    asyncio.run(_run_with_service(run))


def test_update_then_delete():
    async def run(service: TodosService):
        todo = await service.create_todo(CreateTodoRequest(name="Write report"), "u1")
        updated = await service.update_todo(
            todo.todo_id, UpdateTodoRequest.from_dict({"name": "v2", "dueDate": "2024-01-01", "done": True}), "u1",
        )
        assert updated.done is True
        assert updated.name == "v2"

        await service.delete_todo(todo.todo_id, "u1")
        assert await service.get_todos("u1") == []

    asyncio.run(_run_with_service(run))


def test_set_attachment_url_for_owner():
    async def run(service: TodosService):
        todo = await service.create_todo(CreateTodoRequest(name="Buy milk"), "u1")

        result = await service.set_attachment_url(todo.todo_id, "u1", "https://x/y.png")

        assert result is not None
        assert result.attachment_url == "https://x/y.png"
        assert result.name == "Buy milk"

    asyncio.run(_run_with_service(run))


def test_set_attachment_url_ignores_missing_or_foreign_todo():
    async def run(service: TodosService):
        todo = await service.create_todo(CreateTodoRequest(name="Mine"), "u1")

        assert await service.set_attachment_url("missing", "u1", "https://x/y.png") is None
        assert await service.set_attachment_url(todo.todo_id, "u2", "https://x/y.png") is None
        assert (await service.get_todo(todo.todo_id)).attachment_url == ""

    asyncio.run(_run_with_service(run))


def test_build_store_sqlite_creates_schema(tmp_path):
    settings = _settings("sqlite", str(tmp_path / "nested" / "todos.db"))

    store = asyncio.run(build_store(settings))

    assert isinstance(store, TodosSqliteRepo)
    assert (tmp_path / "nested" / "todos.db").exists()
    assert asyncio.run(store.get_all_todos_by_user_id("u1")) == []


def test_build_service_dynamodb_points_at_configured_table(monkeypatch):
    monkeypatch.setenv("AWS_ACCESS_KEY_ID", "local")
    monkeypatch.setenv("AWS_SECRET_ACCESS_KEY", "local")

    service = asyncio.run(build_service(_settings("dynamodb")))

    store = service._store
    assert isinstance(store, DynamoTodosAccess)
    assert store._table.name == "Todos-test"
    assert store._index_name == "TodoIdIndex"
    assert store._table.meta.client.meta.endpoint_url == "http://localhost:8000"

# -*- coding: utf-8 -*-
"""Local TodosStore: the DynamoDB table shape, kept in a SQLite file."""
from __future__ import annotations

import logging
from typing import List, Optional

from todos.domain.todos.models import TodoItem, UpdateTodoRequest
from todos.domain.todos.ports import TodosStore
from todos.infra.db.connection import Database

logger = logging.getLogger(__name__)

SCHEMA = """
CREATE TABLE IF NOT EXISTS todos (
    user_id TEXT NOT NULL,
    todo_id TEXT NOT NULL,
    created_at TEXT NOT NULL DEFAULT '',
    name TEXT NOT NULL DEFAULT '',
    due_date TEXT,
    done INTEGER NOT NULL DEFAULT 0,
    attachment_url TEXT NOT NULL DEFAULT '',
    PRIMARY KEY (user_id, todo_id)
);
CREATE INDEX IF NOT EXISTS idx_todos_todo_id ON todos(todo_id);
"""


class TodosSqliteRepo(TodosStore):
    """
    Same semantics as the DynamoDB backend: puts overwrite, updates on a
    missing key insert the key with only the updated columns, deletes never
    check existence. aiosqlite errors propagate.
    """

    def __init__(self, db: Database) -> None:
        self._db = db

    async def init(self) -> None:
        await self._db.executescript(SCHEMA)

    async def create_todo(self, todo: TodoItem) -> TodoItem:
        await self._db.execute(
            """
            INSERT OR REPLACE INTO todos(
              user_id, todo_id, created_at, name, due_date, done, attachment_url
            ) VALUES (?, ?, ?, ?, ?, ?, ?);
            """,
            (todo.user_id, todo.todo_id, todo.created_at, todo.name, todo.due_date, int(todo.done), todo.attachment_url),
        )
        logger.info("Created new Todo in SQLite: %s", todo.todo_id)
        return todo

    async def get_all_todos_by_user_id(self, user_id: str) -> List[TodoItem]:
        # DynamoDB returns a partition ordered by sort key
        rows = await self._db.fetchall(
            "SELECT * FROM todos WHERE user_id = ? ORDER BY todo_id;",
            (user_id,),
        )
        logger.info(f"Fetched {len(rows)} todos for user with id of {user_id}")
        return [self._row_to_todo(r) for r in rows]

    async def get_todo_by_id(self, todo_id: str) -> Optional[TodoItem]:
        rows = await self._db.fetchall(
            "SELECT * FROM todos WHERE todo_id = ? LIMIT 1;",
            (todo_id,),
        )
        logger.info(f"Fetched a todo by id {todo_id}: found={bool(rows)}")
        return self._row_to_todo(rows[0]) if rows else None

    async def update_todo(self, todo_id: str, update: UpdateTodoRequest, user_id: str) -> TodoItem:
        row = await self._db.execute_returning(
            """
            INSERT INTO todos(user_id, todo_id, name, due_date, done)
            VALUES (?, ?, ?, ?, ?)
            ON CONFLICT(user_id, todo_id) DO UPDATE SET
                name = excluded.name,
                due_date = excluded.due_date,
                done = excluded.done
            RETURNING *;
            """,
            (user_id, todo_id, update.name, update.due_date, int(update.done)),
        )
        logger.info(f"Updated todo with id of {todo_id} and userId {user_id}")
        return self._row_to_todo(row)

    async def update_todo_attachment_url(self, todo: TodoItem) -> TodoItem:
        row = await self._db.execute_returning(
            """
            INSERT INTO todos(user_id, todo_id, attachment_url)
            VALUES (?, ?, ?)
            ON CONFLICT(user_id, todo_id) DO UPDATE SET
                attachment_url = excluded.attachment_url
            RETURNING *;
            """,
            (todo.user_id, todo.todo_id, todo.attachment_url),
        )
        logger.info(f"Updated attachment url for todo with id of {todo.todo_id} and userId {todo.user_id}")
        return self._row_to_todo(row)

    async def delete_todo(self, todo_id: str, user_id: str) -> None:
        await self._db.execute(
            "DELETE FROM todos WHERE user_id = ? AND todo_id = ?;",
            (user_id, todo_id),
        )
        logger.info(f"Deleted todo with id of {todo_id} and userId {user_id}")

    def _row_to_todo(self, row) -> TodoItem:
        return TodoItem(
            todo_id=row["todo_id"],
            user_id=row["user_id"],
            created_at=row["created_at"],
            name=row["name"],
            due_date=row["due_date"],
            done=bool(row["done"]),
            attachment_url=row["attachment_url"],
        )

from __future__ import annotations

import logging
from dataclasses import replace
from typing import List, Optional

from todos.domain.todos.builder import TodoBuilder
from todos.domain.todos.models import CreateTodoRequest, TodoItem, UpdateTodoRequest
from todos.domain.todos.ports import TodosStore

logger = logging.getLogger(__name__)


class TodosService:
    """
    Todo business logic for the host runtime. No boto3. No sqlite.

    The owner identity is extracted by the caller and passed in as user_id.
    """

    def __init__(self, store: TodosStore, builder: TodoBuilder) -> None:
        self._store = store
        self._builder = builder

    async def create_todo(self, request: CreateTodoRequest, user_id: str) -> TodoItem:
        todo = self._builder.build(request, user_id)
        return await self._store.create_todo(todo)

    async def get_todos(self, user_id: str) -> List[TodoItem]:
        return await self._store.get_all_todos_by_user_id(user_id)

    async def get_todo(self, todo_id: str) -> Optional[TodoItem]:
        return await self._store.get_todo_by_id(todo_id)

    async def update_todo(self, todo_id: str, request: UpdateTodoRequest, user_id: str) -> TodoItem:
        return await self._store.update_todo(todo_id, request, user_id)

    async def set_attachment_url(self, todo_id: str, user_id: str, attachment_url: str) -> Optional[TodoItem]:
        todo = await self._store.get_todo_by_id(todo_id)
        if todo is None or todo.user_id != user_id:
            logger.info(f"No todo {todo_id} for user {user_id}, attachment url not set")
            return None
        return await self._store.update_todo_attachment_url(replace(todo, attachment_url=attachment_url))

    async def delete_todo(self, todo_id: str, user_id: str) -> None:
        await self._store.delete_todo(todo_id, user_id)

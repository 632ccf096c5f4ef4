from __future__ import annotations

from abc import ABC, abstractmethod
from datetime import datetime
from typing import List, Optional

from todos.domain.todos.models import TodoItem, UpdateTodoRequest


class Clock(ABC):
    @abstractmethod
    def now(self) -> datetime: ...


class IdGenerator(ABC):
    @abstractmethod
    def new_id(self) -> str: ...


class TodosStore(ABC):
    """
    Single-table todo storage keyed by (user_id, todo_id), with a secondary
    index on todo_id alone. Backend errors propagate unchanged.
    """

    @abstractmethod
    async def create_todo(self, todo: TodoItem) -> TodoItem: ...

    @abstractmethod
    async def get_all_todos_by_user_id(self, user_id: str) -> List[TodoItem]: ...

    @abstractmethod
    async def get_todo_by_id(self, todo_id: str) -> Optional[TodoItem]: ...

    @abstractmethod
    async def update_todo(self, todo_id: str, update: UpdateTodoRequest, user_id: str) -> TodoItem: ...

    @abstractmethod
    async def update_todo_attachment_url(self, todo: TodoItem) -> TodoItem: ...

    @abstractmethod
    async def delete_todo(self, todo_id: str, user_id: str) -> None: ...

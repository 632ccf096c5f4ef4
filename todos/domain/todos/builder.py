from __future__ import annotations

import logging
from dataclasses import asdict

from todos.domain.common.time import to_iso
from todos.domain.todos.models import CreateTodoRequest, TodoItem
from todos.domain.todos.ports import Clock, IdGenerator

logger = logging.getLogger(__name__)


class TodoBuilder:
    """
    Turns a create request into a complete, ready-to-persist TodoItem.

    Request fields are applied first and generated fields last, so the id,
    owner and createdAt are always assigned here.
    """

    def __init__(self, clock: Clock, ids: IdGenerator) -> None:
        self._clock = clock
        self._ids = ids

    def build(self, request: CreateTodoRequest, user_id: str) -> TodoItem:
        if not user_id:
            raise ValueError("user_id must be a non-empty string")

        fields = {
            "done": False,
            "attachment_url": "",
        }
        fields.update(asdict(request))
        fields.update(
            todo_id=self._ids.new_id(),
            user_id=user_id,
            created_at=to_iso(self._clock.now()),
        )
        todo = TodoItem(**fields)

        logger.info("New Todo %s", todo.to_item())
        return todo


def build_todo(request: CreateTodoRequest, user_id: str) -> TodoItem:
    """Build with the system clock and uuid4 ids."""
    from todos.infra.runtime import SystemClock, UuidGenerator

    return TodoBuilder(SystemClock(), UuidGenerator()).build(request, user_id)

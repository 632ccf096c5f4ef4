from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Optional


@dataclass(frozen=True)
class TodoItem:
    todo_id: str
    user_id: str
    created_at: str
    name: str
    due_date: Optional[str] = None
    done: bool = False
    attachment_url: str = ""

    def to_item(self) -> Dict[str, Any]:
        """Stored representation, using the table's attribute names."""
        item: Dict[str, Any] = {
            "todoId": self.todo_id,
            "userId": self.user_id,
            "createdAt": self.created_at,
            "name": self.name,
            "done": self.done,
            "attachmentUrl": self.attachment_url,
        }
        if self.due_date is not None:
            item["dueDate"] = self.due_date
        return item

    @classmethod
    def from_item(cls, item: Dict[str, Any]) -> "TodoItem":
        # updates on a missing key leave only the key and the set attributes
        return cls(
            todo_id=item["todoId"],
            user_id=item["userId"],
            created_at=item.get("createdAt", ""),
            name=item.get("name", ""),
            due_date=item.get("dueDate"),
            done=bool(item.get("done", False)),
            attachment_url=item.get("attachmentUrl", ""),
        )


@dataclass(frozen=True)
class CreateTodoRequest:
    name: str
    due_date: Optional[str] = None

    @classmethod
    def from_dict(cls, body: Dict[str, Any]) -> "CreateTodoRequest":
        return cls(name=body["name"], due_date=body.get("dueDate"))


@dataclass(frozen=True)
class UpdateTodoRequest:
    name: str
    due_date: Optional[str]
    done: bool

    @classmethod
    def from_dict(cls, body: Dict[str, Any]) -> "UpdateTodoRequest":
        return cls(name=body["name"], due_date=body.get("dueDate"), done=bool(body["done"]))

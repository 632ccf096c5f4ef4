from __future__ import annotations

import asyncio
import logging
from typing import Any, List, Optional

from todos.domain.todos.models import TodoItem, UpdateTodoRequest
from todos.domain.todos.ports import TodosStore

logger = logging.getLogger(__name__)


class DynamoTodosAccess(TodosStore):
    """
    TodosStore over a DynamoDB table (boto3 Table resource).

    Partition key userId, sort key todoId; the secondary index is keyed by
    todoId alone. Each operation is one blocking boto3 call run in a worker
    thread. botocore errors are not caught.
    """

    def __init__(self, table: Any, index_name: str) -> None:
        self._table = table
        self._index_name = index_name

    async def create_todo(self, todo: TodoItem) -> TodoItem:
        await asyncio.to_thread(self._table.put_item, Item=todo.to_item())
        logger.info("Created new Todo in DynamoDB: %s", todo.todo_id)
        return todo

    async def get_all_todos_by_user_id(self, user_id: str) -> List[TodoItem]:
        result = await asyncio.to_thread(
            self._table.query,
            KeyConditionExpression="userId = :userId",
            ExpressionAttributeValues={":userId": user_id},
        )
        items = result.get("Items", [])
        logger.info(f"Fetched {len(items)} todos for user with id of {user_id}")
        return [TodoItem.from_item(i) for i in items]

    async def get_todo_by_id(self, todo_id: str) -> Optional[TodoItem]:
        result = await asyncio.to_thread(
            self._table.query,
            IndexName=self._index_name,
            KeyConditionExpression="todoId = :todoId",
            ExpressionAttributeValues={":todoId": todo_id},
        )
        items = result.get("Items", [])
        logger.info(f"Fetched a todo by id {todo_id}: found={bool(items)}")
        if not items:
            return None
        return TodoItem.from_item(items[0])

    async def update_todo(self, todo_id: str, update: UpdateTodoRequest, user_id: str) -> TodoItem:
        result = await asyncio.to_thread(
            self._table.update_item,
            Key={"userId": user_id, "todoId": todo_id},
            UpdateExpression="set #todoName = :name, #todoDueDate = :dueDate, #todoDone = :done",
            ExpressionAttributeValues={
                ":name": update.name,
                ":dueDate": update.due_date,
                ":done": update.done,
            },
            ExpressionAttributeNames={
                "#todoName": "name",
                "#todoDueDate": "dueDate",
                "#todoDone": "done",
            },
            ReturnValues="ALL_NEW",
        )
        logger.info(f"Updated todo with id of {todo_id} and userId {user_id}")
        return TodoItem.from_item(result["Attributes"])

    async def update_todo_attachment_url(self, todo: TodoItem) -> TodoItem:
        result = await asyncio.to_thread(
            self._table.update_item,
            Key={"userId": todo.user_id, "todoId": todo.todo_id},
            UpdateExpression="set attachmentUrl = :attachmentUrl",
            ExpressionAttributeValues={":attachmentUrl": todo.attachment_url},
            ReturnValues="ALL_NEW",
        )
        logger.info(f"Updated attachment url for todo with id of {todo.todo_id} and userId {todo.user_id}")
        return TodoItem.from_item(result["Attributes"])

    async def delete_todo(self, todo_id: str, user_id: str) -> None:
        await asyncio.to_thread(
            self._table.delete_item,
            Key={"userId": user_id, "todoId": todo_id},
        )
        logger.info(f"Deleted todo with id of {todo_id} and userId {user_id}")

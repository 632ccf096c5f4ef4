"""
Process-start wiring: settings -> store -> service.

Call build_service() once when the runtime starts and share the returned
TodosService between invocations; the store client inside it holds only
connection configuration.
"""
from __future__ import annotations

import logging
import os
from typing import Optional

from todos.config import BACKEND_SQLITE, Settings, load_settings
from todos.domain.todos.builder import TodoBuilder
from todos.domain.todos.ports import TodosStore
from todos.domain.todos.service import TodosService
from todos.infra.db.connection import Database
from todos.infra.db.repo.todos_sqlite import TodosSqliteRepo
from todos.infra.dynamodb.client import create_dynamodb_table
from todos.infra.dynamodb.todos_access import DynamoTodosAccess
from todos.infra.runtime import SystemClock, UuidGenerator
from todos.logging_setup import setup_logging

logger = logging.getLogger(__name__)


async def build_store(settings: Settings) -> TodosStore:
    if settings.backend == BACKEND_SQLITE:
        os.makedirs(os.path.dirname(settings.db_path) or ".", exist_ok=True)
        repo = TodosSqliteRepo(Database(str(settings.db_path)))
        await repo.init()
        logger.info(f"Using SQLite todos store at {settings.db_path}")
        return repo

    table = create_dynamodb_table(settings)
    logger.info(f"Using DynamoDB todos table {settings.todos_table} (index {settings.todos_index})")
    return DynamoTodosAccess(table, settings.todos_index)


async def build_service(settings: Optional[Settings] = None) -> TodosService:
    if settings is None:
        settings = load_settings()
        setup_logging(settings.log_level)
    store = await build_store(settings)
    return TodosService(store, TodoBuilder(SystemClock(), UuidGenerator()))

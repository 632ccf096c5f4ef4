from dataclasses import dataclass
import os
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv

BACKEND_DYNAMODB = "dynamodb"
BACKEND_SQLITE = "sqlite"


@dataclass(frozen=True)
class Settings:
    backend: str
    todos_table: str
    todos_index: str
    is_offline: bool
    dynamodb_endpoint: str
    aws_region: Optional[str]
    db_path: Path
    log_level: str


def _env_flag(name: str) -> bool:
    return os.getenv(name, "").strip().lower() in ("1", "true", "yes", "on")


def load_settings() -> Settings:
    load_dotenv()

    backend = os.getenv("TODOS_BACKEND", BACKEND_DYNAMODB).strip().lower()
    table = os.getenv("TODOS_TABLE", "").strip()
    index = os.getenv("TODOS_CREATED_AT_INDEX", "").strip()
    endpoint = os.getenv("DYNAMODB_ENDPOINT", "http://localhost:8000").strip()
    region = os.getenv("AWS_REGION", "").strip() or None
    db_raw = os.getenv("DB_PATH", "data/todos.db").strip()
    log_level = os.getenv("LOG_LEVEL", "INFO").strip().upper()

    if backend not in (BACKEND_DYNAMODB, BACKEND_SQLITE):
        raise RuntimeError(f"TODOS_BACKEND must be '{BACKEND_DYNAMODB}' or '{BACKEND_SQLITE}', got '{backend}'")
    if backend == BACKEND_DYNAMODB:
        if not table:
            raise RuntimeError("TODOS_TABLE missing in environment")
        if not index:
            raise RuntimeError("TODOS_CREATED_AT_INDEX missing in environment")

    return Settings(
        backend=backend,
        todos_table=table,
        todos_index=index,
        is_offline=_env_flag("IS_OFFLINE"),
        dynamodb_endpoint=endpoint,
        aws_region=region,
        db_path=Path(db_raw),
        log_level=log_level,
    )

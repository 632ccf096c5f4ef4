"""Production Clock and IdGenerator."""
from __future__ import annotations

import uuid
from datetime import datetime, timezone

from todos.domain.todos.ports import Clock, IdGenerator


class SystemClock(Clock):
    # createdAt is always stamped in UTC
    def now(self) -> datetime:
        return datetime.now(timezone.utc)


class UuidGenerator(IdGenerator):
    def new_id(self) -> str:
        return str(uuid.uuid4())

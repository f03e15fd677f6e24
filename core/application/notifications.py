import itertools
import threading
import time
from dataclasses import dataclass, field
from enum import Enum
from typing import Callable

DEFAULT_TTL = 5.0


class NotificationLevel(str, Enum):
    SUCCESS = "success"
    ERROR = "error"
    INFO = "info"


@dataclass(slots=True)
class Notification:
    id: int
    title: str
    message: str
    level: NotificationLevel
    expires_at: float
    dismissed: bool = field(default=False)


class NotificationCenter:
    """Avisos efímeros (caducan tras `ttl` segundos) y descartables."""

    def __init__(
        self,
        ttl: float = DEFAULT_TTL,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        self.ttl = ttl
        self._clock = clock
        self._ids = itertools.count(1)
        self._items: list[Notification] = []
        self._lock = threading.Lock()

    def push(
        self,
        title: str,
        message: str,
        level: NotificationLevel = NotificationLevel.INFO,
    ) -> Notification:
        notification = Notification(
            id=next(self._ids),
            title=title,
            message=message,
            level=level,
            expires_at=self._clock() + self.ttl,
        )
        with self._lock:
            self._items.append(notification)
        return notification

    def success(self, title: str, message: str) -> Notification:
        return self.push(title, message, NotificationLevel.SUCCESS)

    def error(self, title: str, message: str) -> Notification:
        return self.push(title, message, NotificationLevel.ERROR)

    def dismiss(self, notification_id: int) -> bool:
        with self._lock:
            for item in self._items:
                if item.id == notification_id and not item.dismissed:
                    item.dismissed = True
                    return True
        return False

    def active(self) -> list[Notification]:
        now = self._clock()
        with self._lock:
            self._items = [
                n for n in self._items if not n.dismissed and n.expires_at > now
            ]
            return list(self._items)

    def clear(self) -> None:
        with self._lock:
            self._items.clear()

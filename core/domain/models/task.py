from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum

from bson import ObjectId


class TaskStatus(str, Enum):
    TODO = "todo"
    IN_PROGRESS = "in-progress"
    COMPLETED = "completed"

    @classmethod
    def _missing_(cls, value: object) -> "TaskStatus | None":
        # "not-started" es el nombre de negocio del estado inicial.
        if isinstance(value, str) and value.strip().lower() in {
            "not-started",
            "not_started",
        }:
            return cls.TODO
        return None

    @property
    def label(self) -> str:
        return _STATUS_LABELS[self]


_STATUS_LABELS = {
    TaskStatus.TODO: "To Do",
    TaskStatus.IN_PROGRESS: "In Progress",
    TaskStatus.COMPLETED: "Completed",
}

DEFAULT_STATUS = TaskStatus.TODO


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


def new_task_id() -> str:
    """Genera un identificador nuevo con el formato del document store."""
    return str(ObjectId())


def is_valid_task_id(task_id: object) -> bool:
    return isinstance(task_id, str) and ObjectId.is_valid(task_id)


@dataclass(slots=True)
class Task:
    id: str
    title: str
    description: str
    status: TaskStatus = DEFAULT_STATUS
    created_at: datetime = field(default_factory=utcnow)


@dataclass(slots=True)
class TaskPatch:
    """
    Actualización parcial de una tarea.

    Solo los campos presentes en `fields_set` se validan y se aplican;
    un campo presente con valor None cuenta como enviado (y vacío).
    """

    title: str | None = None
    description: str | None = None
    status: TaskStatus | str | None = None
    fields_set: frozenset[str] = frozenset()

    @classmethod
    def of(cls, **values: object) -> "TaskPatch":
        unknown = set(values) - {"title", "description", "status"}
        if unknown:
            raise TypeError(f"Campos no editables: {sorted(unknown)}")
        return cls(**values, fields_set=frozenset(values))  # type: ignore[arg-type]

    def is_empty(self) -> bool:
        return not self.fields_set

    def apply_to(self, task: Task) -> Task:
        """Devuelve una copia de la tarea con el patch aplicado (ya validado)."""
        return Task(
            id=task.id,
            title=self.title if "title" in self.fields_set else task.title,
            description=(
                self.description
                if "description" in self.fields_set
                else task.description
            ),
            status=(
                TaskStatus(self.status)
                if "status" in self.fields_set
                else task.status
            ),
            created_at=task.created_at,
        )

    def to_dict(self) -> dict[str, object]:
        data: dict[str, object] = {}
        for name in ("title", "description", "status"):
            if name in self.fields_set:
                value = getattr(self, name)
                data[name] = value.value if isinstance(value, TaskStatus) else value
        return data

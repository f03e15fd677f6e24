from datetime import datetime, timezone

from bson import ObjectId
from pydantic import BaseModel, ConfigDict, Field, field_validator

from core.domain.models.task import Task, TaskStatus


class TaskMongo(BaseModel):
    """
    Modelo de Tarea para MongoDB.
    Representa cómo se almacena la tarea en la base de datos.
    """

    model_config = ConfigDict(populate_by_name=True, arbitrary_types_allowed=True)

    id: ObjectId = Field(alias="_id")
    title: str
    description: str
    status: str
    created_at: datetime = Field(alias="createdAt")

    @field_validator("created_at")
    @classmethod
    def _ensure_utc(cls, value: datetime) -> datetime:
        # Documentos antiguos o clientes sin tz_aware devuelven fechas naive en UTC.
        if value.tzinfo is None:
            return value.replace(tzinfo=timezone.utc)
        return value

    def to_domain(self) -> Task:
        """
        Convierte el modelo de MongoDB al modelo de dominio.

        Retorna:
            Task: La entidad de dominio.
        """
        return Task(
            id=str(self.id),
            title=self.title,
            description=self.description,
            status=TaskStatus(self.status),
            created_at=self.created_at,
        )

    @classmethod
    def from_domain(cls, task: Task) -> "TaskMongo":
        """
        Crea una instancia de TaskMongo a partir de una entidad de dominio.

        Argumentos:
            task (Task): La entidad de dominio.

        Retorna:
            TaskMongo: El modelo de MongoDB.
        """
        return cls(
            id=ObjectId(task.id),
            title=task.title,
            description=task.description,
            status=task.status.value,
            created_at=task.created_at,
        )

    def to_document(self) -> dict:
        return self.model_dump(by_alias=True)

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field

from core.domain.models.task import Task, TaskPatch, TaskStatus


class TaskCreateRequest(BaseModel):
    # Sin restricciones aquí: la validación de negocio devuelve la lista
    # completa de errores desde el dominio.
    title: str | None = None
    description: str | None = None
    status: str | None = None


class TaskUpdateRequest(BaseModel):
    title: str | None = None
    description: str | None = None
    status: str | None = None

    def to_patch(self) -> TaskPatch:
        return TaskPatch.of(**self.model_dump(exclude_unset=True))


class TaskResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    id: str
    title: str
    description: str
    status: TaskStatus
    created_at: datetime = Field(serialization_alias="createdAt")

    @classmethod
    def from_domain(cls, task: Task) -> "TaskResponse":
        return cls(
            id=task.id,
            title=task.title,
            description=task.description,
            status=task.status,
            created_at=task.created_at,
        )


class MessageResponse(BaseModel):
    message: str


class ErrorsResponse(BaseModel):
    errors: list[str]

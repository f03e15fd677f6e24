import logging
from datetime import datetime
from typing import Any

import requests
from pydantic import AliasChoices, BaseModel, Field, ValidationError

from core.domain.errors import TaskNotFoundError, TaskValidationError
from core.domain.models.task import Task, TaskPatch, TaskStatus
from core.domain.ports.task_gateway import (
    RemoteRequestError,
    RemoteUnavailableError,
    TaskGateway,
)

logger = logging.getLogger(__name__)


class TaskPayload(BaseModel):
    """Representación de una tarea tal como llega del servidor."""

    id: str = Field(validation_alias=AliasChoices("id", "_id"))
    title: str
    description: str
    status: TaskStatus
    created_at: datetime = Field(validation_alias=AliasChoices("createdAt", "created_at"))

    def to_domain(self) -> Task:
        return Task(
            id=self.id,
            title=self.title,
            description=self.description,
            status=self.status,
            created_at=self.created_at,
        )


class HttpTaskGateway(TaskGateway):
    """
    Cliente del API REST de tareas.

    Traduce las respuestas HTTP a las excepciones del dominio y los fallos
    de transporte a RemoteUnavailableError.
    """

    def __init__(
        self,
        base_url: str,
        timeout: float = 10.0,
        session: requests.Session | None = None,
    ) -> None:
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self._session = session or requests.Session()
        self._session.headers.setdefault("Content-Type", "application/json")
        logger.debug(f"API configurada en {self.base_url}")

    def _request(self, method: str, path: str, **kwargs: Any) -> Any:
        url = f"{self.base_url}{path}"
        try:
            response = self._session.request(method, url, timeout=self.timeout, **kwargs)
        except (requests.ConnectionError, requests.Timeout) as e:
            logger.warning(f"🔌 {method} {url} sin respuesta: {e}")
            raise RemoteUnavailableError(str(e)) from e

        if response.status_code >= 400:
            self._raise_for_status(response, path)
        try:
            return response.json()
        except ValueError as e:
            logger.error(f"❌ {method} {url} devolvió un cuerpo que no es JSON")
            raise RemoteRequestError(502, f"Respuesta inesperada del servidor: {e}") from e

    @staticmethod
    def _raise_for_status(response: requests.Response, path: str) -> None:
        try:
            body = response.json()
        except ValueError:
            body = {}
        if not isinstance(body, dict):
            body = {}

        if response.status_code == 400:
            errors = body.get("errors") or [body.get("message", "Invalid request")]
            raise TaskValidationError([str(e) for e in errors])
        if response.status_code == 404:
            task_id = path.rsplit("/", 1)[-1]
            raise TaskNotFoundError(task_id, body.get("message", "Task not found"))

        message = body.get("message") or response.reason or "Unexpected error"
        logger.error(f"❌ Error {response.status_code} del servidor: {message}")
        raise RemoteRequestError(response.status_code, message)

    @staticmethod
    def _parse(data: Any) -> Task:
        try:
            return TaskPayload.model_validate(data).to_domain()
        except ValidationError as e:
            raise RemoteRequestError(502, f"Respuesta inesperada del servidor: {e}") from e

    def list_tasks(self) -> list[Task]:
        data = self._request("GET", "/tasks")
        return [self._parse(item) for item in data]

    def get_task(self, task_id: str) -> Task:
        return self._parse(self._request("GET", f"/tasks/{task_id}"))

    def create_task(
        self, title: str, description: str, status: TaskStatus | None = None
    ) -> Task:
        body: dict[str, Any] = {"title": title, "description": description}
        if status is not None:
            body["status"] = TaskStatus(status).value
        return self._parse(self._request("POST", "/tasks", json=body))

    def update_task(self, task_id: str, patch: TaskPatch) -> Task:
        return self._parse(self._request("PUT", f"/tasks/{task_id}", json=patch.to_dict()))

    def delete_task(self, task_id: str) -> None:
        self._request("DELETE", f"/tasks/{task_id}")

    def health(self) -> bool:
        try:
            self._request("GET", "/health")
        except (RemoteUnavailableError, RemoteRequestError, TaskNotFoundError):
            return False
        return True

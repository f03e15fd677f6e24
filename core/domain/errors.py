class TaskError(Exception):
    """Error base del dominio de tareas."""


class TaskValidationError(TaskError):
    def __init__(self, errors: list[str]) -> None:
        super().__init__("; ".join(errors))
        self.errors = list(errors)


class TaskNotFoundError(TaskError):
    def __init__(self, task_id: str, message: str = "Task not found") -> None:
        super().__init__(message)
        self.task_id = task_id
        self.message = message


class InvalidTaskIdError(TaskNotFoundError):
    """El identificador no tiene el formato que espera el store."""

    def __init__(self, task_id: str) -> None:
        super().__init__(task_id, message="Task not found, invalid ID")


class TaskStorageError(TaskError):
    """Fallo inesperado del almacenamiento subyacente."""

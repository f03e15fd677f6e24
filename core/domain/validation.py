"""
Reglas de validación de tareas.

Cada función devuelve la lista completa de mensajes legibles (vacía si
todo es correcto), nunca solo el primer error.
"""

from core.domain.models.task import TaskPatch, TaskStatus

STATUS_ERROR = "Status must be one of: " + ", ".join(s.value for s in TaskStatus)


def _is_blank(value: object) -> bool:
    return not isinstance(value, str) or value.strip() == ""


def status_missing(status: object) -> bool:
    """Un estado vacío en la creación equivale a no enviarlo."""
    return status is None or status == ""


def _is_valid_status(value: object) -> bool:
    if isinstance(value, TaskStatus):
        return True
    try:
        TaskStatus(value)
    except ValueError:
        return False
    return True


def validate_new_task(
    title: object, description: object, status: object = None
) -> list[str]:
    errors: list[str] = []
    if _is_blank(title):
        errors.append("Title is required")
    if _is_blank(description):
        errors.append("Description is required")
    if not status_missing(status) and not _is_valid_status(status):
        errors.append(STATUS_ERROR)
    return errors


def validate_patch(patch: TaskPatch) -> list[str]:
    errors: list[str] = []
    if "title" in patch.fields_set and _is_blank(patch.title):
        errors.append("Title cannot be empty")
    if "description" in patch.fields_set and _is_blank(patch.description):
        errors.append("Description cannot be empty")
    if "status" in patch.fields_set and not _is_valid_status(patch.status):
        errors.append(STATUS_ERROR)
    return errors

from fastapi import APIRouter, Depends, status

from backend_fastapi.api.deps import (
    create_task_use_case,
    delete_task_use_case,
    get_task_use_case,
    list_tasks_use_case,
    update_task_use_case,
)
from backend_fastapi.api.schemas import (
    ErrorsResponse,
    MessageResponse,
    TaskCreateRequest,
    TaskResponse,
    TaskUpdateRequest,
)
from core.application.create_task import CreateTaskCommand, CreateTaskUseCase
from core.application.delete_task import DeleteTaskCommand, DeleteTaskUseCase
from core.application.get_task import GetTaskUseCase
from core.application.list_tasks import ListTasksUseCase
from core.application.update_task import UpdateTaskCommand, UpdateTaskUseCase

router = APIRouter(prefix="/tasks", tags=["tasks"])

_NOT_FOUND = {404: {"model": MessageResponse}}
_INVALID = {400: {"model": ErrorsResponse}}


@router.get(
    "",
    response_model=list[TaskResponse],
    summary="Listar todas las tareas",
)
def list_tasks(
    use_case: ListTasksUseCase = Depends(list_tasks_use_case),
) -> list[TaskResponse]:
    """
    Obtiene todas las tareas, de la más reciente a la más antigua.
    """
    return [TaskResponse.from_domain(t) for t in use_case.execute()]


@router.get(
    "/{task_id}",
    response_model=TaskResponse,
    responses=_NOT_FOUND,
    summary="Obtener una tarea",
)
def get_task(
    task_id: str,
    use_case: GetTaskUseCase = Depends(get_task_use_case),
) -> TaskResponse:
    return TaskResponse.from_domain(use_case.execute(task_id))


@router.post(
    "",
    response_model=TaskResponse,
    status_code=status.HTTP_201_CREATED,
    responses=_INVALID,
    summary="Crear una nueva tarea",
)
def create_task(
    payload: TaskCreateRequest,
    use_case: CreateTaskUseCase = Depends(create_task_use_case),
) -> TaskResponse:
    """
    Crea una nueva tarea en el sistema.

    - **title**: Título de la tarea (obligatorio).
    - **description**: Descripción de la tarea (obligatoria).
    - **status**: Estado inicial (por defecto `todo`).
    """
    cmd = CreateTaskCommand(
        title=payload.title,
        description=payload.description,
        status=payload.status,
    )
    return TaskResponse.from_domain(use_case.execute(cmd))


@router.put(
    "/{task_id}",
    response_model=TaskResponse,
    responses={**_INVALID, **_NOT_FOUND},
    summary="Editar una tarea existente",
)
def update_task(
    task_id: str,
    payload: TaskUpdateRequest,
    use_case: UpdateTaskUseCase = Depends(update_task_use_case),
) -> TaskResponse:
    """
    Modifica solo los campos enviados de una tarea existente.

    - **task_id**: ID de la tarea a modificar.
    - **title** / **description** / **status**: opcionales.
    """
    cmd = UpdateTaskCommand(task_id=task_id, patch=payload.to_patch())
    return TaskResponse.from_domain(use_case.execute(cmd))


@router.delete(
    "/{task_id}",
    response_model=MessageResponse,
    responses=_NOT_FOUND,
    summary="Eliminar una tarea",
)
def delete_task(
    task_id: str,
    use_case: DeleteTaskUseCase = Depends(delete_task_use_case),
) -> MessageResponse:
    """
    Elimina una tarea del sistema.

    - **task_id**: ID de la tarea a eliminar.
    """
    use_case.execute(DeleteTaskCommand(id=task_id))
    return MessageResponse(message="Task deleted successfully")

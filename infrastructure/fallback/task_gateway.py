import logging
from typing import Any, Callable

from core.domain.errors import TaskError
from core.domain.models.task import Task, TaskPatch, TaskStatus
from core.domain.ports.task_gateway import (
    RemoteRequestError,
    RemoteUnavailableError,
    TaskGateway,
)
from infrastructure.fallback.circuit_breaker import CircuitBreaker
from infrastructure.fallback.retry import retry_with_backoff
from infrastructure.local.task_gateway import LocalTaskGateway

logger = logging.getLogger(__name__)

# ── Configuración de resiliencia ──────────────────────────────────────────────
_CIRCUIT_FAILURE_THRESHOLD = 3    # Fallos consecutivos para abrir circuito
_CIRCUIT_RECOVERY_TIMEOUT = 30.0  # Segundos antes de probar reconexión
_RETRY_MAX_RETRIES = 2            # Reintentos por operación
_RETRY_BASE_DELAY = 0.5           # Delay base (se duplica por retry)


class FallbackTaskGateway(TaskGateway):
    """
    Gateway remoto con espejo local como modo degradado.

    - Cada operación va primero al servidor (con Circuit Breaker + Retry).
    - Si el servidor no es alcanzable, la operación se ejecuta sobre el
      espejo local y `offline` pasa a True.
    - Los errores de negocio (validación, 404, 5xx) del servidor NO
      provocan fallback: se propagan tal cual.
    - Un list() remoto exitoso sustituye el espejo local completo. Los
      cambios hechos offline no se reconcilian con el servidor.
    """

    def __init__(
        self,
        remote: TaskGateway,
        local: LocalTaskGateway,
        circuit: CircuitBreaker | None = None,
        max_retries: int = _RETRY_MAX_RETRIES,
        base_delay: float = _RETRY_BASE_DELAY,
    ) -> None:
        self._remote = remote
        self._local = local
        self._circuit = circuit or CircuitBreaker(
            name="API remota",
            failure_threshold=_CIRCUIT_FAILURE_THRESHOLD,
            recovery_timeout=_CIRCUIT_RECOVERY_TIMEOUT,
        )
        self._max_retries = max_retries
        self._base_delay = base_delay
        self.offline = False

    # ──────────────────────────────────────────────────────────────────────────
    # Métodos privados de infraestructura
    # ──────────────────────────────────────────────────────────────────────────

    def _dispatch(
        self,
        operacion: str,
        remote_func: Callable[[], Any],
        local_func: Callable[[], Any],
        on_remote_success: Callable[[Any], None] | None = None,
    ) -> Any:
        if not self._circuit.allow_request():
            logger.info(f"⚡ Circuito remoto OPEN, {operacion} directo al espejo local")
            return self._run_local(operacion, local_func)

        try:
            result = retry_with_backoff(
                remote_func,
                max_retries=self._max_retries,
                base_delay=self._base_delay,
                retryable_exceptions=(RemoteUnavailableError,),
            )
        except RemoteUnavailableError as e:
            self._circuit.record_failure()
            logger.warning(f"⚠️ Servidor no disponible en {operacion}: {e}")
            return self._run_local(operacion, local_func)
        except (TaskError, RemoteRequestError):
            # El servidor respondió: está alcanzable aunque rechace la operación
            self._mark_reachable()
            raise

        self._mark_reachable()
        if on_remote_success is not None:
            self._mirror(operacion, lambda: on_remote_success(result))
        return result

    def _mark_reachable(self) -> None:
        self._circuit.record_success()
        if self.offline:
            logger.info("✅ Servidor disponible de nuevo")
        self.offline = False

    def _run_local(self, operacion: str, local_func: Callable[[], Any]) -> Any:
        self.offline = True
        result = local_func()
        logger.info(f"💾 {operacion} ejecutado en el espejo local")
        return result

    def _mirror(self, operacion: str, func: Callable[[], None]) -> None:
        # El servidor ya confirmó la operación; un fallo del espejo solo se avisa.
        try:
            func()
        except TaskError as e:
            logger.warning(f"⚠️ No se pudo reflejar {operacion} en el espejo local: {e}")

    # ──────────────────────────────────────────────────────────────────────────
    # Interfaz pública
    # ──────────────────────────────────────────────────────────────────────────

    @property
    def circuit(self) -> CircuitBreaker:
        return self._circuit

    def list_tasks(self) -> list[Task]:
        return self._dispatch(
            "list",
            self._remote.list_tasks,
            self._local.list_tasks,
            on_remote_success=self._local.replace_all,
        )

    def get_task(self, task_id: str) -> Task:
        return self._dispatch(
            "get",
            lambda: self._remote.get_task(task_id),
            lambda: self._local.get_task(task_id),
        )

    def create_task(
        self, title: str, description: str, status: TaskStatus | None = None
    ) -> Task:
        return self._dispatch(
            "create",
            lambda: self._remote.create_task(title, description, status),
            lambda: self._local.create_task(title, description, status),
            on_remote_success=self._local.repository.add,
        )

    def update_task(self, task_id: str, patch: TaskPatch) -> Task:
        return self._dispatch(
            "update",
            lambda: self._remote.update_task(task_id, patch),
            lambda: self._local.update_task(task_id, patch),
            on_remote_success=self._local.repository.save,
        )

    def delete_task(self, task_id: str) -> None:
        self._dispatch(
            "delete",
            lambda: self._remote.delete_task(task_id),
            lambda: self._local.delete_task(task_id),
            on_remote_success=lambda _: self._local.repository.delete(task_id),
        )

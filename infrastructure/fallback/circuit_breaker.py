"""
Circuit Breaker para las llamadas al servidor de tareas.

Mientras el servidor está caído las operaciones van directas al espejo
local, sin esperar a que cada petición agote su timeout.

Estados:
    CLOSED    → Funciona normal. Cuenta fallos consecutivos.
    OPEN      → Servidor considerado caído. Se usa el espejo local.
    HALF_OPEN → Deja pasar 1 request de prueba para verificar recuperación.
"""

import time
import logging
import threading
from typing import Callable

logger = logging.getLogger(__name__)


class CircuitBreaker:
    """
    Circuit Breaker thread-safe.

    Args:
        name:              Nombre descriptivo para logs, ej: "API remota".
        failure_threshold: Fallos consecutivos necesarios para abrir el circuito.
        recovery_timeout:  Segundos en OPEN antes de pasar a HALF_OPEN.
        clock:             Reloj monotónico (inyectable en tests).
    """

    CLOSED = "CLOSED"
    OPEN = "OPEN"
    HALF_OPEN = "HALF_OPEN"

    def __init__(
        self,
        name: str = "default",
        failure_threshold: int = 3,
        recovery_timeout: float = 30.0,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        self.name = name
        self.failure_threshold = failure_threshold
        self.recovery_timeout = recovery_timeout
        self._clock = clock

        self._state = self.CLOSED
        self._failure_count = 0
        self._opened_at: float | None = None
        self._lock = threading.Lock()

    @property
    def state(self) -> str:
        """Estado actual, evaluando la transición OPEN → HALF_OPEN."""
        with self._lock:
            if self._state == self.OPEN and self._opened_at is not None:
                elapsed = self._clock() - self._opened_at
                if elapsed >= self.recovery_timeout:
                    self._state = self.HALF_OPEN
                    logger.info(
                        f"🔄 Circuit Breaker [{self.name}]: OPEN → HALF_OPEN "
                        f"(tras {elapsed:.1f}s)"
                    )
            return self._state

    @property
    def failure_count(self) -> int:
        return self._failure_count

    @property
    def is_open(self) -> bool:
        return self.state == self.OPEN

    def allow_request(self) -> bool:
        return self.state != self.OPEN

    def record_success(self) -> None:
        with self._lock:
            if self._state != self.CLOSED:
                logger.info(
                    f"✅ Circuit Breaker [{self.name}]: {self._state} → CLOSED"
                )
            self._state = self.CLOSED
            self._failure_count = 0
            self._opened_at = None

    def record_failure(self) -> None:
        with self._lock:
            self._failure_count += 1

            if self._state == self.HALF_OPEN:
                self._state = self.OPEN
                self._opened_at = self._clock()
                logger.warning(
                    f"🔴 Circuit Breaker [{self.name}]: HALF_OPEN → OPEN (prueba falló)"
                )
            elif (
                self._state == self.CLOSED
                and self._failure_count >= self.failure_threshold
            ):
                self._state = self.OPEN
                self._opened_at = self._clock()
                logger.warning(
                    f"🔴 Circuit Breaker [{self.name}]: CLOSED → OPEN "
                    f"(fallos consecutivos: {self._failure_count})"
                )

    def reset(self) -> None:
        with self._lock:
            self._state = self.CLOSED
            self._failure_count = 0
            self._opened_at = None

"""
Retry con Exponential Backoff para operaciones de infraestructura.

Solo reintenta errores TRANSITORIOS de red/conexión, no errores de lógica.
"""

import time
import logging
from typing import Any, Callable

logger = logging.getLogger(__name__)

# RemoteUnavailableError hereda de ConnectionError, así que también entra aquí.
RETRYABLE_EXCEPTIONS: tuple[type[BaseException], ...] = (
    ConnectionError,
    TimeoutError,
    OSError,
)


def retry_with_backoff(
    func: Callable[[], Any],
    max_retries: int = 2,
    base_delay: float = 0.5,
    retryable_exceptions: tuple[type[BaseException], ...] = RETRYABLE_EXCEPTIONS,
) -> Any:
    """
    Ejecuta `func()` con reintentos y backoff exponencial.

    Solo reintenta las excepciones indicadas en `retryable_exceptions`.
    Cualquier otra excepción se propaga inmediatamente sin reintentar.

    Args:
        func:                  Callable sin argumentos a ejecutar.
        max_retries:           Número máximo de reintentos (sin contar el intento original).
        base_delay:            Delay base en segundos (se duplica en cada retry).
        retryable_exceptions:  Tupla de excepciones que justifican un retry.

    Returns:
        El resultado de `func()`.

    Raises:
        La última excepción si se agotan los reintentos,
        o la excepción original si no es retryable.
    """
    last_exception: BaseException | None = None

    for attempt in range(1, max_retries + 2):
        try:
            return func()
        except retryable_exceptions as e:
            last_exception = e
            if attempt <= max_retries:
                delay = base_delay * (2 ** (attempt - 1))
                logger.warning(
                    f"🔁 Retry {attempt}/{max_retries} tras error transitorio: {e}. "
                    f"Esperando {delay:.1f}s..."
                )
                time.sleep(delay)
            else:
                logger.error(
                    f"❌ Agotados {max_retries} reintentos. Último error: {e}"
                )

    raise last_exception  # type: ignore[misc]

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from backend_fastapi.api.errors import register_exception_handlers
from backend_fastapi.api.routes.tasks import router as tasks_router
from infrastructure.config import ServerSettings
from infrastructure.mongo.session.client import close_client

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    yield
    # El cliente de MongoDB solo existe si se llegó a usar
    close_client()


def create_app(settings: ServerSettings | None = None) -> FastAPI:
    settings = settings or ServerSettings.from_env()

    app = FastAPI(title="Task Tracker API", lifespan=lifespan)

    # Configure CORS for the frontend from environment variables
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=settings.cors_allow_credentials,
        allow_methods=settings.cors_allow_methods,
        allow_headers=settings.cors_allow_headers,
    )

    register_exception_handlers(app)
    app.include_router(tasks_router)

    @app.get("/health", tags=["health"])
    def health() -> dict[str, str]:
        return {"status": "ok"}

    logger.info(f"API de tareas lista (store={settings.task_store})")
    return app


app = create_app()

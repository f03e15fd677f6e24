import uvicorn

from infrastructure.config import ServerSettings


def run() -> None:
    settings = ServerSettings.from_env()

    print(
        f"Starting server at http://{settings.host}:{settings.port} "
        f"(Reload: {settings.reload}, store: {settings.task_store})"
    )

    uvicorn.run(
        "backend_fastapi.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.reload,
        log_level=settings.log_level,
    )


if __name__ == "__main__":
    run()

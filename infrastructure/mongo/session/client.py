import os
from typing import Any

from pymongo import MongoClient
from pymongo.database import Database

_client: MongoClient[Any] | None = None


def get_client() -> MongoClient[Any]:
    """
    Obtiene el cliente de MongoDB (Singleton).
    """
    global _client
    if _client is None:
        mongo_uri = os.getenv(
            "MONGODB_URI", "mongodb://localhost:27017/task-management"
        )
        _client = MongoClient(mongo_uri, tz_aware=True)
    return _client


def get_db() -> Database[Any]:
    """
    Obtiene la base de datos de MongoDB.

    Usa la base indicada en la URI y, si no hay, `MONGO_DB_NAME`.

    Retorna:
        Database: La instancia de la base de datos de MongoDB.
    """
    client = get_client()
    return client.get_default_database(os.getenv("MONGO_DB_NAME", "task-management"))


def close_client() -> None:
    global _client
    if _client is not None:
        _client.close()
        _client = None

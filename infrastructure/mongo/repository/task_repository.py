import logging
from typing import Any

from bson import ObjectId
from pymongo import DESCENDING
from pymongo.collection import Collection
from pymongo.errors import PyMongoError

from core.domain.errors import TaskStorageError
from core.domain.models.task import Task
from core.domain.ports.task_repository import TaskRepository
from infrastructure.mongo.models.task import TaskMongo
from infrastructure.mongo.session.client import get_db

logger = logging.getLogger(__name__)


def _to_domain(doc: dict) -> Task:
    # Un documento con campos o estado desconocidos no es un Task válido
    try:
        return TaskMongo(**doc).to_domain()
    except ValueError as e:
        logger.error(f"❌ Documento de tarea inválido {doc.get('_id')}: {e}")
        raise TaskStorageError(f"Invalid task document: {e}") from e


class MongoTaskRepository(TaskRepository):
    """
    Implementación de TaskRepository usando MongoDB (Synchronous).

    Los errores del driver se envuelven en TaskStorageError.
    """

    def __init__(self, collection: Collection[Any] | None = None) -> None:
        if collection is None:
            collection = get_db().tasks
        self.collection: Collection[Any] = collection

    def list(self) -> list[Task]:
        """
        Lista todas las tareas, las más recientes primero.

        Retorna:
            list[Task]: Lista de todas las tareas.
        """
        try:
            docs = self.collection.find().sort("createdAt", DESCENDING)
            return [_to_domain(doc) for doc in docs]
        except PyMongoError as e:
            logger.error(f"❌ Error listando tareas en MongoDB: {e}")
            raise TaskStorageError(str(e)) from e

    def get(self, task_id: str) -> Task | None:
        """
        Obtiene una tarea por su ID.

        Argumentos:
            task_id (str): El ID de la tarea.

        Retorna:
            Task | None: La tarea encontrada o None si no existe.
        """
        try:
            doc = self.collection.find_one({"_id": ObjectId(task_id)})
        except PyMongoError as e:
            logger.error(f"❌ Error obteniendo tarea {task_id}: {e}")
            raise TaskStorageError(str(e)) from e
        if not doc:
            return None
        return _to_domain(doc)

    def add(self, task: Task) -> None:
        """
        Inserta una tarea nueva.

        Argumentos:
            task (Task): La tarea a guardar.
        """
        try:
            self.collection.insert_one(TaskMongo.from_domain(task).to_document())
        except PyMongoError as e:
            logger.error(f"❌ Error insertando tarea {task.id}: {e}")
            raise TaskStorageError(str(e)) from e

    def save(self, task: Task) -> bool:
        """
        Sobrescribe los campos editables de una tarea existente.

        `_id` y `createdAt` no se tocan.
        """
        doc = TaskMongo.from_domain(task).to_document()
        changes = {k: v for k, v in doc.items() if k not in ("_id", "createdAt")}
        try:
            result = self.collection.update_one({"_id": doc["_id"]}, {"$set": changes})
        except PyMongoError as e:
            logger.error(f"❌ Error actualizando tarea {task.id}: {e}")
            raise TaskStorageError(str(e)) from e
        return result.matched_count > 0

    def delete(self, task_id: str) -> bool:
        """
        Elimina una tarea por su ID.

        Argumentos:
            task_id (str): El ID de la tarea a eliminar.
        """
        try:
            result = self.collection.delete_one({"_id": ObjectId(task_id)})
        except PyMongoError as e:
            logger.error(f"❌ Error eliminando tarea {task_id}: {e}")
            raise TaskStorageError(str(e)) from e
        return result.deleted_count > 0

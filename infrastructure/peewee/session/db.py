import os

from peewee import Database, DatabaseProxy
from playhouse.db_url import connect

# Se inicializa con init_db(); por defecto SQLite.
db = DatabaseProxy()


def init_db(database_url: str | None = None) -> Database:
    url = database_url or os.getenv("DATABASE_URL", "sqlite:///tasks.db")
    database = connect(url)
    db.initialize(database)
    return database


def get_db() -> DatabaseProxy:
    if db.obj is None:
        init_db()
    return db

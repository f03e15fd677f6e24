from peewee import CharField, DateTimeField, Model, TextField

from infrastructure.peewee.session.db import db


class TaskModel(Model):
    id = CharField(primary_key=True, max_length=24)
    title = CharField()
    description = TextField()
    status = CharField()
    # UTC sin tzinfo: SQLite no guarda zona horaria.
    created_at = DateTimeField(index=True)

    class Meta:
        database = db
        table_name = "tasks"

from peewee import (
    Model,
    SqliteDatabase,
    BlobField,
    CharField,
    DateTimeField,
)

from ..codec import to_bytes, from_bytes
from ..rational import Rational
import datetime
import logging
import os


logging.getLogger("peewee").setLevel(logging.INFO)


# Defer initialization
class DB:
    # Adding foreign_keys pragma is necessary for ON DELETE behavior
    items = SqliteDatabase(None, pragmas={"foreign_keys": 1})


class RationalField(BlobField):
    """Stores a Rational in its 8-byte binary layout.

    Byte order does not follow numeric order, so rows must be sorted in
    Python (see queries.getItems) rather than with ORDER BY.
    """

    def db_value(self, value):
        if value is None:
            return None
        if not isinstance(value, Rational):
            raise TypeError(f"RationalField expects a Rational, got {value!r}")
        return super().db_value(to_bytes(value))

    def python_value(self, value):
        if value is None:
            return None
        return from_bytes(value)


class Item(Model):
    name = CharField()
    rank = RationalField()
    created = DateTimeField(default=datetime.datetime.now)

    class Meta:
        database = DB.items

    def as_dict(self):
        return dict(
            id=self.id,
            name=self.name,
            rank=str(self.rank),
        )


MODELS = [Item]


def file_exists(path: str) -> bool:
    try:
        return os.stat(path).st_size > 0
    except OSError:
        return False


def init_db(db_path, logger=None):
    db = DB.items
    needs_init = not file_exists(db_path)
    db.init(None)
    db.init(db_path)
    db.connect(reuse_if_open=True)
    if needs_init and logger is not None:
        logger.debug("Initializing items DB")
    db.create_tables(MODELS, safe=True)
    return db

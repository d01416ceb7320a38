from contextlib import contextmanager
from os import makedirs
from os.path import abspath, dirname

from sqlalchemy import URL, create_engine
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from .base import Base
from ..config import db_path
from ..errors import StoreError


@contextmanager
def connect(sqlite_path: str | None = None):
    """Open the ledger, ensure its schema exists, and yield a `Session`.

    Every call builds and disposes its own engine; nothing is shared between calls, so the
    SQLite file may be deleted or replaced between them. Any driver failure, including one
    caused by the file changing between schema creation and the statement itself, surfaces as
    a `StoreError`.
    """
    path = abspath(sqlite_path or db_path())
    try:
        makedirs(dirname(path), exist_ok=True)
    except OSError as e:
        raise StoreError(f'Unable to open event store {path}: {e}') from e
    engine = create_engine(URL.create('sqlite', database=path))
    try:
        Base.metadata.create_all(engine)
        with Session(engine, expire_on_commit=False) as session:
            yield session
    except SQLAlchemyError as e:
        raise StoreError(str(e.orig) if getattr(e, 'orig', None) else str(e)) from e
    finally:
        engine.dispose()

"""Named JSON documents with whole-document read and overwrite.

The signup service only ever talks to a ``DocumentStore``; the backend is
picked from settings by ``build_store``.
"""

from __future__ import annotations

import json
import os
import tempfile
from pathlib import Path
from typing import Any, Union

from sqlalchemy.exc import SQLAlchemyError

from ..core.config import Settings
from ..core.errors import StorageError
from .base import Base
from .models import Document
from .session import make_engine, make_session_factory

EVENTS = "events"
VOLUNTEERS = "volunteers"


class DocumentStore:
    def get(self, name: str) -> Any:
        raise NotImplementedError

    def put(self, name: str, value: Any) -> None:
        raise NotImplementedError

    def exists(self, name: str) -> bool:
        raise NotImplementedError

    def initialize(self) -> None:
        """Prepare the backend (directories, tables). Safe to call twice."""


class JsonFileStore(DocumentStore):
    """One pretty-printed ``<name>.json`` file per document."""

    def __init__(self, data_dir: Union[str, os.PathLike]):
        self.data_dir = Path(data_dir)

    def path_for(self, name: str) -> Path:
        return self.data_dir / f"{name}.json"

    def initialize(self) -> None:
        try:
            self.data_dir.mkdir(parents=True, exist_ok=True)
        except OSError as exc:
            raise StorageError(f"Cannot create data directory {self.data_dir}: {exc}") from exc

    def exists(self, name: str) -> bool:
        return self.path_for(name).exists()

    def get(self, name: str) -> Any:
        path = self.path_for(name)
        try:
            with open(path, "r", encoding="utf-8") as fh:
                return json.load(fh)
        except (OSError, ValueError) as exc:
            raise StorageError(f"Cannot read {path}: {exc}") from exc

    def put(self, name: str, value: Any) -> None:
        path = self.path_for(name)
        try:
            fd, tmp_path = tempfile.mkstemp(dir=self.data_dir, prefix=f".{name}.", suffix=".tmp")
            try:
                with os.fdopen(fd, "w", encoding="utf-8") as fh:
                    json.dump(value, fh, indent=2, ensure_ascii=False)
                os.replace(tmp_path, path)
            except BaseException:
                if os.path.exists(tmp_path):
                    os.unlink(tmp_path)
                raise
        except (OSError, TypeError, ValueError) as exc:
            raise StorageError(f"Cannot write {path}: {exc}") from exc


class SqlDocumentStore(DocumentStore):
    """Documents kept as JSON rows of the ``documents`` table."""

    def __init__(self, database_url: str, echo: bool = False):
        self.engine = make_engine(database_url, echo=echo)
        self.SessionLocal = make_session_factory(self.engine)

    def initialize(self) -> None:
        try:
            Base.metadata.create_all(bind=self.engine)
        except SQLAlchemyError as exc:
            raise StorageError(f"Cannot create documents table: {exc}") from exc

    def exists(self, name: str) -> bool:
        try:
            with self.SessionLocal() as db:
                return db.get(Document, name) is not None
        except SQLAlchemyError as exc:
            raise StorageError(f"Cannot look up document {name}: {exc}") from exc

    def get(self, name: str) -> Any:
        try:
            with self.SessionLocal() as db:
                row = db.get(Document, name)
                if row is None:
                    raise StorageError(f"Document {name} not found")
                return row.body
        except SQLAlchemyError as exc:
            raise StorageError(f"Cannot read document {name}: {exc}") from exc

    def put(self, name: str, value: Any) -> None:
        try:
            with self.SessionLocal() as db:
                row = db.get(Document, name)
                if row is None:
                    db.add(Document(name=name, body=value))
                else:
                    row.body = value
                db.commit()
        except SQLAlchemyError as exc:
            raise StorageError(f"Cannot write document {name}: {exc}") from exc


def build_store(settings: Settings) -> DocumentStore:
    backend = settings.storage_backend.lower()
    if backend == "json":
        return JsonFileStore(settings.data_dir)
    if backend == "sql":
        return SqlDocumentStore(settings.database_url, echo=settings.debug)
    raise ValueError(f"Unknown storage backend: {settings.storage_backend}")


def describe_store(store: DocumentStore) -> str:
    if isinstance(store, JsonFileStore):
        return f"json files in {store.data_dir}"
    if isinstance(store, SqlDocumentStore):
        return f"sql documents at {store.engine.url}"
    return type(store).__name__


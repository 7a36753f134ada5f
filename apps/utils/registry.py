"""Query handles binding mongoengine documents to their collections."""

from __future__ import annotations

import logging
from contextlib import contextmanager
from typing import Dict, Iterable, Iterator, List, Type

import mongoengine as me
from bson import ObjectId
from mongoengine.connection import ConnectionFailure as MongoEngineConnectionFailure
from pymongo.errors import ConnectionFailure

from .exceptions import DatabaseUnavailable
from .lookup import Found, LookupResult, MalformedId, NotFound


logger = logging.getLogger(__name__)


@contextmanager
def database_guard(name: str) -> Iterator[None]:
    """Turn driver connection errors into :class:`DatabaseUnavailable`."""
    try:
        yield
    except (ConnectionFailure, MongoEngineConnectionFailure) as exc:
        logger.error("Query on %s failed: %s", name, exc)
        raise DatabaseUnavailable() from exc


class ModelHandle:
    """Query and insert operations for one document class."""

    def __init__(self, document: Type[me.Document]) -> None:
        self.document = document

    @property
    def name(self) -> str:
        return self.document.__name__

    @property
    def collection_name(self) -> str:
        return self.document._get_collection_name()

    def find(self, **filters) -> List[me.Document]:
        with database_guard(self.name):
            return list(self.document.objects(**filters))

    def find_by_id(self, raw_id: str) -> LookupResult:
        if not ObjectId.is_valid(raw_id):
            return MalformedId(raw_id)
        with database_guard(self.name):
            document = self.document.objects(id=ObjectId(raw_id)).first()
        if document is None:
            return NotFound(raw_id)
        return Found(document)

    def count(self, **filters) -> int:
        with database_guard(self.name):
            return self.document.objects(**filters).count()

    def insert_one(self, **values) -> me.Document:
        document = self.document(**values)
        with database_guard(self.name):
            return document.save()

    def insert_many(self, documents: Iterable[me.Document]) -> List[me.Document]:
        """Validate every document, then write them in a single batch."""
        documents = list(documents)
        if not documents:
            return []
        for document in documents:
            document.validate()
        with database_guard(self.name):
            return self.document.objects.insert(documents)

    def drop(self) -> None:
        with database_guard(self.name):
            self.document.drop_collection()

    def __repr__(self) -> str:
        return f"<ModelHandle {self.name} -> {self.collection_name}>"


class ModelRegistry:
    """Named handles, one per registered document class."""

    def __init__(self) -> None:
        self._handles: Dict[str, ModelHandle] = {}

    def register(self, document: Type[me.Document]) -> ModelHandle:
        name = document.__name__
        if name in self._handles:
            raise ValueError(f"Model '{name}' is already registered.")
        handle = ModelHandle(document)
        self._handles[name] = handle
        return handle

    def get(self, name: str) -> ModelHandle:
        try:
            return self._handles[name]
        except KeyError:
            raise LookupError(f"Model '{name}' is not registered.") from None

    def __contains__(self, name: object) -> bool:
        return name in self._handles

    def __iter__(self) -> Iterator[ModelHandle]:
        return iter(self._handles.values())

    def __len__(self) -> int:
        return len(self._handles)

"""MongoDB connection handling with mongoengine."""

from __future__ import annotations

import logging
from typing import Any, Optional

import mongoengine
from django.conf import settings
from mongoengine.connection import DEFAULT_CONNECTION_NAME, get_db
from mongoengine.connection import ConnectionFailure as MongoEngineConnectionFailure
from pymongo import MongoClient, monitoring
from pymongo.errors import PyMongoError


logger = logging.getLogger(__name__)


class QueryLogger(monitoring.CommandListener):
    """Log every command sent to MongoDB at DEBUG level."""

    def started(self, event):
        logger.debug(
            "%s.%s(%s)",
            event.database_name,
            event.command_name,
            event.command.get(event.command_name),
        )

    def succeeded(self, event):
        logger.debug("%s succeeded in %.3f ms", event.command_name, event.duration_micros / 1000)

    def failed(self, event):
        logger.debug("%s failed in %.3f ms: %s", event.command_name, event.duration_micros / 1000, event.failure)


def connect_mongodb(
    host: Optional[str] = None,
    db: Optional[str] = None,
    alias: str = DEFAULT_CONNECTION_NAME,
    **client_kwargs: Any,
) -> Optional[MongoClient]:
    """Open the mongoengine connection and check that the server answers.

    Failure is logged and ``None`` is returned; the caller keeps running and
    later queries fail with a database-unavailable error.
    """
    host = host or getattr(settings, "MONGO_URI", "mongodb://127.0.0.1:27017")
    db = db or getattr(settings, "MONGODB_DB_NAME", "productsDatabase")
    client_kwargs.setdefault("serverSelectionTimeoutMS", getattr(settings, "MONGODB_TIMEOUT_MS", 5000))
    if getattr(settings, "MONGODB_DEBUG", False):
        client_kwargs.setdefault("event_listeners", [QueryLogger()])

    try:
        client = mongoengine.connect(db=db, host=host, alias=alias, **client_kwargs)
        client.admin.command("ping")
    except (PyMongoError, MongoEngineConnectionFailure) as exc:
        logger.error("Connection error %s", exc)
        return None

    logger.info("Successfully connected to MongoDB: %s", get_db(alias).name)
    return client


def ensure_mongodb_connection(alias: str = DEFAULT_CONNECTION_NAME) -> None:
    try:
        mongoengine.connection.get_connection(alias)
    except MongoEngineConnectionFailure:
        connect_mongodb(alias=alias)


def disconnect_mongodb(alias: str = DEFAULT_CONNECTION_NAME) -> None:
    """Close the connection registered under ``alias``."""
    mongoengine.disconnect(alias=alias)
    logger.info("Disconnected from MongoDB")

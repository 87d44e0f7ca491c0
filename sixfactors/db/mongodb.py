"""
MongoDB connection utilities.

Provides a lazily created, process-wide MongoDB client and a
collection accessor with connection validation and error logging.
"""

import threading
import time
from typing import Any, Optional

import certifi
from pymongo import MongoClient
from pymongo.collection import Collection
from pymongo.database import Database
from pymongo.errors import (
    ConfigurationError,
    ConnectionFailure,
    OperationFailure,
    PyMongoError,
    ServerSelectionTimeoutError,
)

from sixfactors.config import get_settings
from sixfactors.utils.logger import get_logger

logger = get_logger(__name__)

_client: Optional[MongoClient] = None
_database: Optional[Database] = None
_connection_lock = threading.Lock()


def _parse_mongo_uri(uri: str) -> dict:
    """
    Extract connection details from a MongoDB URI for logging.

    Credentials never appear in the result.

    Args:
        uri: MongoDB connection string

    Returns:
        Dictionary with parsed connection details
    """
    if uri.startswith("mongodb://") or uri.startswith("mongodb+srv://"):
        is_srv = uri.startswith("mongodb+srv://")
        remainder = uri.split("://", 1)[1]
        host_part = remainder.rsplit("@", 1)[-1].split("/")[0].split("?")[0]

        return {
            "host": host_part or "unknown",
            "is_atlas": "mongodb.net" in host_part,
            "is_srv": is_srv,
            "protocol": "mongodb+srv" if is_srv else "mongodb",
        }

    logger.warning("Unrecognised MongoDB URI scheme")
    return {
        "host": "unknown",
        "is_atlas": False,
        "is_srv": False,
        "protocol": "unknown",
    }


def _validate_connection(client: MongoClient) -> bool:
    """
    Validate a MongoDB connection by pinging the server.

    Args:
        client: MongoDB client instance

    Returns:
        True if connection is valid, False otherwise
    """
    try:
        client.admin.command("ping")
        logger.info("MongoDB connection validated")
        return True

    except ServerSelectionTimeoutError as exc:
        logger.error(
            "MongoDB server selection timeout",
            extra={
                "error": str(exc),
                "possible_causes": [
                    "Invalid hostname",
                    "Firewall blocking connection",
                    "MongoDB server is down",
                    "IP not whitelisted in MongoDB Atlas",
                ],
            },
        )
        return False

    except OperationFailure as exc:
        logger.error(
            "MongoDB authentication or permission failure",
            extra={"error": str(exc)},
        )
        return False

    except ConnectionFailure as exc:
        logger.error(
            "MongoDB connection failure",
            extra={"error": str(exc)},
        )
        return False


def _initialize_connection() -> tuple[MongoClient, Database]:
    """
    Create the MongoDB client and select the configured database.

    Returns:
        Tuple of (client, database)

    Raises:
        RuntimeError: If connection cannot be established
    """
    settings = get_settings()
    uri_info = _parse_mongo_uri(settings.MONGO_URI)

    logger.info(
        "Initializing MongoDB connection",
        extra={
            "database": settings.MONGO_DB,
            "protocol": uri_info["protocol"],
            "host": uri_info["host"],
            "is_atlas": uri_info["is_atlas"],
        },
    )

    start_time = time.time()

    options: dict[str, Any] = {
        "serverSelectionTimeoutMS": 10000,
        "connectTimeoutMS": 10000,
        "socketTimeoutMS": 10000,
    }
    if settings.MONGO_TLS:
        options["tls"] = True
        options["tlsCAFile"] = certifi.where()

    try:
        client = MongoClient(settings.MONGO_URI, **options)
    except ConfigurationError as exc:
        logger.critical(
            "MongoDB configuration error",
            extra={"error": str(exc)},
        )
        raise RuntimeError(f"MongoDB configuration error: {exc}") from exc

    if not _validate_connection(client):
        client.close()
        raise RuntimeError(
            "MongoDB connection validation failed for host "
            f"{uri_info['host']}"
        )

    logger.info(
        "MongoDB connection established",
        extra={
            "database": settings.MONGO_DB,
            "host": uri_info["host"],
            "connection_time_ms": round((time.time() - start_time) * 1000, 2),
        },
    )

    return client, client[settings.MONGO_DB]


def get_collection(collection_name: str) -> Collection:
    """
    Retrieve a MongoDB collection by name.

    The client is created on first call; concurrent first calls
    share one client.

    Args:
        collection_name (str): Name of the MongoDB collection.

    Returns:
        Collection: MongoDB collection instance.

    Raises:
        RuntimeError: If the connection cannot be initialized.
    """
    global _client, _database

    if _database is None:
        with _connection_lock:
            if _database is None:
                _client, _database = _initialize_connection()

    logger.debug(
        "Accessing MongoDB collection",
        extra={"collection": collection_name},
    )
    return _database[collection_name]


def check_connection_health() -> dict:
    """
    Check the health of the MongoDB connection.

    Returns:
        Dictionary with connection health status
    """
    if _client is None:
        return {"status": "disconnected", "message": "MongoDB client not initialized"}

    try:
        _client.admin.command("ping")
        return {"status": "connected", "database": get_settings().MONGO_DB}

    except PyMongoError as exc:
        logger.warning("MongoDB health check failed", extra={"error": str(exc)})
        return {"status": "unhealthy", "error": str(exc)}


def close_connection() -> None:
    """Close the shared client, if one was created."""
    global _client, _database

    with _connection_lock:
        if _client is not None:
            _client.close()
            logger.info("MongoDB connection closed")

        _client = None
        _database = None


__all__ = ["get_collection", "check_connection_health", "close_connection"]

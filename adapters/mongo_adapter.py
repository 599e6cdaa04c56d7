"""MongoDB adapter: client bootstrap and the per-entity collection handles.
"""

from dataclasses import dataclass
from typing import Any
import logging

from pymongo import MongoClient
from pymongo.collection import Collection
from pymongo.database import Database

logger = logging.getLogger("restaurant.mongo")

FOOD_COLLECTION = "food"
MENU_COLLECTION = "menu"
ORDER_COLLECTION = "order"
ORDER_ITEM_COLLECTION = "order_item"
TABLE_COLLECTION = "table"
INVOICE_COLLECTION = "invoice"
EMPLOYEE_COLLECTION = "employee"


@dataclass(frozen=True)
class Collections:
    """One handle per entity collection, all opened on the same database.

    Built once at startup and handed to services; tests build one from mocks.
    """

    food: Collection
    menu: Collection
    order: Collection
    order_item: Collection
    table: Collection
    invoice: Collection
    employee: Collection


# ------------------ Connection ------------------
def connect(uri: str, connect_timeout_ms: int = 10_000) -> MongoClient:
    """Create a client and ping the server.

    A failure here propagates and aborts application startup.

    Raises:
        pymongo.errors.PyMongoError: if the server cannot be reached
    """
    client: MongoClient = MongoClient(
        uri,
        serverSelectionTimeoutMS=connect_timeout_ms,
        connectTimeoutMS=connect_timeout_ms,
        tz_aware=True,
    )
    try:
        client.admin.command("ping")
    except Exception:
        client.close()
        logger.error("Could not reach MongoDB at %s", uri)
        raise
    logger.info("Connected to MongoDB %s", uri)
    return client


def open_collections(db: Database) -> Collections:
    """Open every entity collection on ``db``."""
    return Collections(
        food=db[FOOD_COLLECTION],
        menu=db[MENU_COLLECTION],
        order=db[ORDER_COLLECTION],
        order_item=db[ORDER_ITEM_COLLECTION],
        table=db[TABLE_COLLECTION],
        invoice=db[INVOICE_COLLECTION],
        employee=db[EMPLOYEE_COLLECTION],
    )


def ping(db: Database) -> bool:
    """Return True when the server answers a ping."""
    try:
        result: Any = db.command("ping")
        return bool(result.get("ok"))
    except Exception:
        logger.exception("MongoDB ping failed")
        return False


def close(client: MongoClient) -> None:
    """Close MongoDB connection."""
    try:
        client.close()
        logger.info("MongoDB client closed")
    except Exception:
        logger.exception("Error closing MongoDB client")

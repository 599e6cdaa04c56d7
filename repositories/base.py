"""
Base repository for the MongoDB data access layer.
This follows the Repository pattern to separate business logic from data access.
"""

from typing import Any, Dict, List, Mapping, Optional, Sequence

import pymongo
from pymongo.collection import Collection
from pymongo.results import UpdateResult

Document = Dict[str, Any]

DEFAULT_TIMEOUT_SEC = 100.0


class BaseRepository:
    """
    Base repository providing the CRUD operations shared by every collection.

    Documents are addressed by their business identifier (``id_field``), never
    by the storage ``_id``. Every call runs under ``pymongo.timeout`` so a slow
    server surfaces as a timeout error instead of hanging the request.
    """

    id_field: str = ""

    def __init__(self, collection: Collection, timeout: float = DEFAULT_TIMEOUT_SEC):
        if not self.id_field:
            raise NotImplementedError(
                f"{self.__class__.__name__} must declare id_field"
            )
        self.collection = collection
        self.timeout = timeout

    def get_all(self) -> List[Document]:
        """Return every document in the collection"""
        with pymongo.timeout(self.timeout):
            return list(self.collection.find({}))

    def get_by_id(self, entity_id: str) -> Optional[Document]:
        """
        Get a document by its business identifier.

        Args:
            entity_id: value of ``id_field``

        Returns:
            Document or None if not found
        """
        with pymongo.timeout(self.timeout):
            return self.collection.find_one({self.id_field: entity_id})

    def exists(self, entity_id: str) -> bool:
        """Check if a document with this business identifier exists"""
        with pymongo.timeout(self.timeout):
            found = self.collection.find_one(
                {self.id_field: entity_id}, projection={"_id": 1}
            )
        return found is not None

    def create(self, document: Document) -> str:
        """Insert a new document and return its storage id as a string"""
        with pymongo.timeout(self.timeout):
            result = self.collection.insert_one(document)
        return str(result.inserted_id)

    def upsert(
        self,
        entity_id: str,
        set_document: Mapping[str, Any],
        on_insert: Optional[Mapping[str, Any]] = None,
    ) -> UpdateResult:
        """
        Apply a ``$set`` to the document with this business identifier.

        When nothing matches, MongoDB inserts a new document built from the
        filter, ``set_document`` and ``on_insert``.
        """
        update: Dict[str, Any] = {"$set": dict(set_document)}
        if on_insert:
            update["$setOnInsert"] = dict(on_insert)
        with pymongo.timeout(self.timeout):
            return self.collection.update_one(
                {self.id_field: entity_id}, update, upsert=True
            )

    def aggregate(self, pipeline: Sequence[Mapping[str, Any]]) -> List[Document]:
        """Run an aggregation pipeline and materialize the results"""
        with pymongo.timeout(self.timeout):
            return list(self.collection.aggregate(list(pipeline)))

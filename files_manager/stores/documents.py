"""Document collection contract and its MongoDB implementation."""

from typing import Any, Dict, List, Optional, Sequence, Tuple

from pymongo.collection import Collection
from pymongo.errors import PyMongoError

from common.logging_config import get_logger

logger = get_logger(__name__)


class DocumentCollection:
    """
    Contract for a collection supporting filter-based find/insert/update and
    aggregation pipelines made of ``$match``, ``$skip`` and ``$limit``.
    """

    def find_one(self, filter: Dict[str, Any]) -> Optional[Dict[str, Any]]:
        raise NotImplementedError

    def insert_one(self, document: Dict[str, Any]) -> Dict[str, Any]:
        """Insert ``document`` and return a copy carrying its generated ``_id``."""
        raise NotImplementedError

    def update_one(self, filter: Dict[str, Any], changes: Dict[str, Any]) -> int:
        """Apply ``changes`` to the first match; return the number matched."""
        raise NotImplementedError

    def aggregate(self, pipeline: List[Dict[str, Any]]) -> List[Dict[str, Any]]:
        raise NotImplementedError

    def count(self, filter: Optional[Dict[str, Any]] = None) -> int:
        raise NotImplementedError

    def ensure_index(self, keys: Sequence[Tuple[str, int]], unique: bool = False) -> None:
        raise NotImplementedError

    def is_alive(self) -> bool:
        raise NotImplementedError


class MongoCollection(DocumentCollection):
    """Thin wrapper over a pymongo collection."""

    def __init__(self, collection: Collection):
        self.collection = collection

    def find_one(self, filter: Dict[str, Any]) -> Optional[Dict[str, Any]]:
        return self.collection.find_one(filter)

    def insert_one(self, document: Dict[str, Any]) -> Dict[str, Any]:
        document = dict(document)
        result = self.collection.insert_one(document)
        document["_id"] = result.inserted_id
        logger.debug(f"Inserted document into {self.collection.name} with _id={result.inserted_id}")
        return document

    def update_one(self, filter: Dict[str, Any], changes: Dict[str, Any]) -> int:
        result = self.collection.update_one(filter, {"$set": changes})
        return result.matched_count

    def aggregate(self, pipeline: List[Dict[str, Any]]) -> List[Dict[str, Any]]:
        return list(self.collection.aggregate(pipeline))

    def count(self, filter: Optional[Dict[str, Any]] = None) -> int:
        return self.collection.count_documents(filter or {})

    def ensure_index(self, keys: Sequence[Tuple[str, int]], unique: bool = False) -> None:
        self.collection.create_index(list(keys), unique=unique)

    def is_alive(self) -> bool:
        try:
            self.collection.database.client.admin.command("ping")
            return True
        except PyMongoError as e:
            logger.warning(f"MongoDB ping failed: {e}")
            return False

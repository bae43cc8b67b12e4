"""User repository for document store operations."""

from dataclasses import dataclass
from typing import Any, Dict, Optional

from bson import ObjectId

from common.logging_config import get_logger
from files_manager.stores.documents import DocumentCollection
from files_manager.types import is_valid_id

logger = get_logger(__name__)


@dataclass
class User:
    user_id: str
    email: str
    password_hash: str

    @classmethod
    def from_document(cls, doc: Dict[str, Any]) -> "User":
        return cls(
            user_id=str(doc["_id"]),
            email=doc["email"],
            password_hash=doc["password"],
        )


class UserRepository:
    def __init__(self, collection: DocumentCollection):
        self.collection = collection

    def create_user(self, email: str, password_hash: str) -> User:
        logger.debug(f"Creating user: {email}")
        doc = self.collection.insert_one({"email": email, "password": password_hash})
        logger.info(f"User created successfully: {email} [user_id={doc['_id']}]")
        return User.from_document(doc)

    def get_by_email(self, email: str) -> Optional[User]:
        logger.debug(f"Fetching user by email: {email}")
        doc = self.collection.find_one({"email": email})
        if doc is None:
            logger.debug(f"User not found: {email}")
            return None
        return User.from_document(doc)

    def get_by_user_id(self, user_id: str) -> Optional[User]:
        if not is_valid_id(user_id):
            return None
        doc = self.collection.find_one({"_id": ObjectId(user_id)})
        if doc is None:
            return None
        return User.from_document(doc)

    def count(self) -> int:
        return self.collection.count()

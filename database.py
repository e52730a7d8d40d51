"""
MongoDB connection and document helpers.

`db` is None when DATABASE_URL or DATABASE_NAME is not set; callers fall back
to in-memory behavior in that case.
"""
import logging
import os
from datetime import datetime, timezone
from typing import Optional, Union

from pydantic import BaseModel
from pymongo import MongoClient

logger = logging.getLogger(__name__)

DATABASE_URL = os.getenv("DATABASE_URL")
DATABASE_NAME = os.getenv("DATABASE_NAME")
SNAPSHOT_COLLECTION = "storesnapshot"

_client = None
db = None

if DATABASE_URL and DATABASE_NAME:
    _client = MongoClient(DATABASE_URL)
    db = _client[DATABASE_NAME]


def create_document(collection_name: str, data: Union[BaseModel, dict]) -> str:
    """Insert a document with created/updated timestamps and return its id."""
    if db is None:
        raise Exception("Database not available. Check DATABASE_URL and DATABASE_NAME environment variables.")
    doc = data.model_dump(by_alias=True) if isinstance(data, BaseModel) else dict(data)
    now = datetime.now(timezone.utc)
    doc["created_at"] = now
    doc["updated_at"] = now
    result = db[collection_name].insert_one(doc)
    return str(result.inserted_id)


class SnapshotStore:
    """One named snapshot document per client session.

    Documents are keyed by (name, session_id) in the storesnapshot collection
    and replaced whole on every save.
    """

    def __init__(self, database, name: str, session_id: str):
        self.collection = database[SNAPSHOT_COLLECTION]
        self.key = {"name": name, "session_id": session_id}

    def load(self) -> Optional[dict]:
        doc = self.collection.find_one(self.key)
        if not doc:
            return None
        return doc.get("state")

    def save(self, state: dict) -> None:
        self.collection.replace_one(
            self.key,
            {**self.key, "state": state, "updated_at": datetime.now(timezone.utc)},
            upsert=True,
        )

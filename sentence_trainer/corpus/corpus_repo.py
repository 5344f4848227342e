"""
MongoDB repository for the sentence corpus.

Exercises are stored one document per sentence with a `position` field that
preserves corpus order.
"""

from __future__ import annotations

import logging
from typing import Iterable, Optional

from pymongo import MongoClient, UpdateOne
from pymongo.collection import Collection

from sentence_trainer.config import get_mongo_uri
from sentence_trainer.schemas import Exercise

logger = logging.getLogger(__name__)

# Configuration
DB_NAME = "sentence_trainer"
COLLECTION_NAME = "exercises"

# Global connection pool (reused across requests)
_client: Optional[MongoClient] = None
_collection: Optional[Collection] = None


# ---- Connection Management ----

def get_collection() -> Collection:
    """
    Get a connection to the MongoDB exercise collection.

    Uses a persistent connection pool that's reused across requests.

    Returns:
        MongoDB collection object
    """
    global _client, _collection

    if _collection is not None:
        return _collection

    _client = MongoClient(
        get_mongo_uri(),
        maxPoolSize=10,
        minPoolSize=1,
        maxIdleTimeMS=60000
    )
    _collection = _client[DB_NAME][COLLECTION_NAME]

    return _collection


# ---- Query Functions ----

def get_all_exercises(
    tag: Optional[str] = None,
    collection: Optional[Collection] = None
) -> list[Exercise]:
    """
    Get every exercise in corpus order.

    Args:
        tag: If provided, only exercises carrying this tag
        collection: Collection to read from (default: configured collection)

    Returns:
        Validated Exercise objects sorted by position
    """
    if collection is None:
        collection = get_collection()

    query = {}
    if tag:
        query["tags"] = tag

    docs = collection.find(query, {"_id": 0}).sort("position", 1)
    return [Exercise.model_validate(doc) for doc in docs]


def upsert_exercises(
    exercises: Iterable[Exercise],
    collection: Optional[Collection] = None
) -> int:
    """
    Insert or replace exercises, keyed by their position.

    Exercises without a position are numbered in the order given, after
    the positions already present in the batch.

    Returns:
        Number of documents written
    """
    if collection is None:
        collection = get_collection()

    exercises = list(exercises)
    next_position = max(
        (e.position for e in exercises if e.position is not None),
        default=-1
    ) + 1

    operations = []
    for exercise in exercises:
        if exercise.position is None:
            exercise = exercise.model_copy(update={"position": next_position})
            next_position += 1
        operations.append(UpdateOne(
            {"position": exercise.position},
            {"$set": exercise.model_dump()},
            upsert=True
        ))

    if not operations:
        return 0

    collection.bulk_write(operations)
    logger.info("Upserted %d exercises into %s", len(operations), collection.name)
    return len(operations)

"""
Integer ID sequences on top of MongoDB.

Each entity collection has one document in the counters collection,
{_id: <sequence name>, value: <last issued id>}, incremented atomically.
"""
# Standard library imports
from typing import Optional

# External package imports
from motor.motor_asyncio import AsyncIOMotorCollection
from pymongo import ReturnDocument

# Local application imports
from .mongo_connection import get_counter_collection


class MongoSequence:
    """Issues increasing integer IDs for one named sequence"""

    VALUE_FIELD = "value"

    def __init__(self, name: str, counter_collection: Optional[AsyncIOMotorCollection] = None) -> None:
        self.name = name
        self.counter_collection = counter_collection if counter_collection is not None else get_counter_collection()

    async def next_value(self) -> int:
        document = await self.counter_collection.find_one_and_update(
            {"_id": self.name},
            {"$inc": {self.VALUE_FIELD: 1}},
            upsert=True,
            return_document=ReturnDocument.AFTER,
        )
        return int(document[self.VALUE_FIELD])

"""
MongoDB Database - Infrastructure Layer

This module provides a MongoDB database client for interacting with MongoDB.
pymongo is synchronous, so every call is moved off the event loop with
``asyncio.to_thread``.
"""

import asyncio
from typing import Any, Dict, List, Optional, Union

import pymongo.errors
from pymongo import MongoClient, ReturnDocument
from pymongo.collection import Collection
from pymongo.database import Database

from src.shared import get_logger

logger = get_logger(__name__)


class MongoDatabase:
    """MongoDB database client."""

    def __init__(self, mongo_uri: str, db_name: str):
        """
        Initialize the MongoDB database client.

        Args:
            mongo_uri: MongoDB connection URI
            db_name: Name of the database to use
        """
        self.client: MongoClient = MongoClient(mongo_uri)
        self.db: Database = self.client[db_name]

    def get_collection(self, collection_name: str) -> Collection:
        """
        Get a collection from the database.

        Args:
            collection_name: Name of the collection

        Returns:
            MongoDB collection
        """
        return self.db[collection_name]

    async def find_one(
        self, collection_name: str, query: Dict[str, Any]
    ) -> Optional[Dict[str, Any]]:
        """
        Find a single document in a collection.

        Args:
            collection_name: Name of the collection
            query: Query to match documents

        Returns:
            The document if found, None otherwise
        """
        return await asyncio.to_thread(self.db[collection_name].find_one, query)

    async def find_one_and_update(
        self,
        collection_name: str,
        query: Dict[str, Any],
        update: Union[Dict[str, Any], List[Dict[str, Any]]],
        upsert: bool = False,
    ) -> Optional[Dict[str, Any]]:
        """
        Atomically update a single document and return it after the update.

        Args:
            collection_name: Name of the collection
            query: Query to match the document
            update: Update operators to apply
            upsert: Insert the document when no match exists

        Returns:
            The updated document, or None when nothing matched and
            ``upsert`` is False
        """
        return await asyncio.to_thread(
            self.db[collection_name].find_one_and_update,
            query,
            update,
            upsert=upsert,
            return_document=ReturnDocument.AFTER,
        )

    async def ping(self) -> None:
        """Round-trip to the server; raises if it is unreachable."""
        await asyncio.to_thread(self.client.admin.command, "ping")

    def close(self) -> None:
        """Close the database connection."""
        self.client.close()

    async def create_indexes(self, collection_name: str) -> None:
        """
        Create the indexes used by the device state collection.

        Records are keyed by ``_id`` (the device id), so only the
        bookkeeping timestamp needs an index.
        """
        try:
            await asyncio.to_thread(
                self.db[collection_name].create_index,
                "updated_at",
                name="updated_at_idx",
            )
        except pymongo.errors.OperationFailure as e:
            logger.warning(
                "mongo.indexes.create_failed",
                collection=collection_name,
                error=str(e),
            )

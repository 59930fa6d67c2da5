from motor.motor_asyncio import AsyncIOMotorClient, AsyncIOMotorDatabase
from pymongo.errors import PyMongoError
from bson import ObjectId
import settings
import logging

logger = logging.getLogger(__name__)


class StoreError(Exception):
    """
    Raised when a call to the document store fails
    """


class MongoStore:
    """
    Thin adapter over one motor database, addressed by collection name
    """

    def __init__(self, client: AsyncIOMotorClient, database: AsyncIOMotorDatabase):
        self.client = client
        self.database = database

    async def find(self, collection: str, filter: dict) -> list[dict]:
        try:
            return await self.database[collection].find(filter).to_list(None)
        except PyMongoError as exc:
            logger.exception("find on %s failed", collection)
            raise StoreError(str(exc)) from exc

    async def find_one(self, collection: str, filter: dict) -> dict | None:
        try:
            return await self.database[collection].find_one(filter)
        except PyMongoError as exc:
            logger.exception("find_one on %s failed", collection)
            raise StoreError(str(exc)) from exc

    async def insert_one(self, collection: str, document: dict) -> ObjectId:
        try:
            result = await self.database[collection].insert_one(document)
        except PyMongoError as exc:
            logger.exception("insert_one on %s failed", collection)
            raise StoreError(str(exc)) from exc
        return result.inserted_id

    async def update_one(self, collection: str, filter: dict, update: dict) -> int:
        """
        Returns the number of matched documents (0 or 1)
        """
        try:
            result = await self.database[collection].update_one(filter, update)
        except PyMongoError as exc:
            logger.exception("update_one on %s failed", collection)
            raise StoreError(str(exc)) from exc
        return result.matched_count

    async def delete_one(self, collection: str, filter: dict) -> int:
        try:
            result = await self.database[collection].delete_one(filter)
        except PyMongoError as exc:
            logger.exception("delete_one on %s failed", collection)
            raise StoreError(str(exc)) from exc
        return result.deleted_count

    def close(self):
        self.client.close()


async def connect_to_mongo(
    uri: str | None = None, name: str | None = None
) -> MongoStore:
    uri = uri or settings.MONGODB_URI
    name = name or settings.MONGODB_DB
    logger.info("Connecting to mongo...")
    client = AsyncIOMotorClient(uri)
    # Fails fast when the server is unreachable
    await client.list_database_names()
    logger.info("connected to %s...", name)
    return MongoStore(client, client[name])


async def close_mongo_connection(store: MongoStore):
    logger.info("closing connection...")
    store.close()
    logger.info("closed connection")

import copy
import re

import pytest
from bson import ObjectId
from fastapi.testclient import TestClient

import main
from database import StoreError
from utils import get_store


def _values_at(document, path: str):
    values = [document]
    for key in path.split("."):
        found = []
        for value in values:
            if isinstance(value, list):
                found.extend(item[key] for item in value if isinstance(item, dict) and key in item)
            elif isinstance(value, dict) and key in value:
                found.append(value[key])
        values = found
    flattened = []
    for value in values:
        flattened.extend(value if isinstance(value, list) else [value])
    return flattened


def _matches(document, filter: dict) -> bool:
    for path, condition in filter.items():
        values = _values_at(document, path)
        if isinstance(condition, dict) and "$regex" in condition:
            flags = re.IGNORECASE if "i" in condition.get("$options", "") else 0
            pattern = re.compile(condition["$regex"], flags)
            if not any(isinstance(value, str) and pattern.search(value) for value in values):
                return False
        elif condition not in values:
            return False
    return True


class FakeStore:
    """In-memory stand-in for MongoStore, recording every call."""

    def __init__(self):
        self.collections = {}
        self.calls = []
        self.fail_with = None

    def _collection(self, name):
        if self.fail_with:
            raise StoreError(self.fail_with)
        return self.collections.setdefault(name, [])

    async def find(self, collection, filter):
        self.calls.append(("find", collection, filter))
        return [copy.deepcopy(doc) for doc in self._collection(collection) if _matches(doc, filter)]

    async def find_one(self, collection, filter):
        self.calls.append(("find_one", collection, filter))
        for doc in self._collection(collection):
            if _matches(doc, filter):
                return copy.deepcopy(doc)
        return None

    async def insert_one(self, collection, document):
        self.calls.append(("insert_one", collection, document))
        document = copy.deepcopy(document)
        document.setdefault("_id", ObjectId())
        self._collection(collection).append(document)
        return document["_id"]

    async def update_one(self, collection, filter, update):
        self.calls.append(("update_one", collection, filter, update))
        for doc in self._collection(collection):
            if _matches(doc, filter):
                doc.update(copy.deepcopy(update["$set"]))
                return 1
        return 0

    async def delete_one(self, collection, filter):
        self.calls.append(("delete_one", collection, filter))
        docs = self._collection(collection)
        for index, doc in enumerate(docs):
            if _matches(doc, filter):
                del docs[index]
                return 1
        return 0


@pytest.fixture
def store():
    return FakeStore()


@pytest.fixture
def client(store):
    main.app.dependency_overrides[get_store] = lambda: store
    # Not entered as a context manager, so startup never dials MongoDB
    yield TestClient(main.app)
    main.app.dependency_overrides.clear()

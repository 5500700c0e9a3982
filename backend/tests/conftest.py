"""
Portfolio Backend — Test Configuration (conftest.py)
======================================================

What:  Shared pytest fixtures for the entire test suite.
Why:   Tests run without a MongoDB server: collections are replaced by an
       in-memory double that returns real pymongo result objects.

Fixtures:
    ├── fake_db:      In-memory database (dict of FakeCollection)
    ├── fake_mongo:   Stand-in for MongoContext (ping only)
    └── test_client:  HTTPX AsyncClient wired to the app with both overridden
"""

import copy
import os

# Must be set before portfolio.config is imported anywhere
os.environ["MONGODB_URI"] = "mongodb://localhost:27017"
os.environ["MONGODB_DB_NAME"] = "portfolio_test"
os.environ["JWT_SECRET"] = "test-secret-that-is-long-enough-for-hs256"
os.environ["EXPIRES_IN"] = "1h"
os.environ["BCRYPT_ROUNDS"] = "4"  # bcrypt minimum; keeps hashing fast
os.environ["LOG_LEVEL"] = "WARNING"

import pytest
import pytest_asyncio
from bson import ObjectId
from httpx import ASGITransport, AsyncClient
from pymongo.results import DeleteResult, InsertOneResult, UpdateResult


# ══════════════════════════════════════════════════════════════════════════
# In-memory collection double
# ══════════════════════════════════════════════════════════════════════════

def _matches(document: dict, query: dict) -> bool:
    return all(document.get(key) == value for key, value in query.items())


class FakeCursor:
    def __init__(self, documents):
        self._documents = documents

    async def to_list(self, length=None):
        if length is None:
            return list(self._documents)
        return list(self._documents[:length])


class FakeCollection:
    """
    Supports exactly the calls the services make: find, find_one,
    insert_one, replace_one and delete_one with equality filters.
    Documents keep insertion order, like a fresh Mongo collection.
    """

    def __init__(self):
        self.documents = []

    def find(self, query=None):
        query = query or {}
        return FakeCursor([copy.deepcopy(d) for d in self.documents if _matches(d, query)])

    async def find_one(self, query):
        for document in self.documents:
            if _matches(document, query):
                return copy.deepcopy(document)
        return None

    async def insert_one(self, document):
        document.setdefault("_id", ObjectId())
        self.documents.append(copy.deepcopy(document))
        return InsertOneResult(document["_id"], True)

    async def replace_one(self, query, replacement):
        for index, document in enumerate(self.documents):
            if _matches(document, query):
                new_document = {"_id": document["_id"], **copy.deepcopy(replacement)}
                modified = int(new_document != document)
                self.documents[index] = new_document
                return UpdateResult({"n": 1, "nModified": modified, "ok": 1.0}, True)
        return UpdateResult({"n": 0, "nModified": 0, "ok": 1.0}, True)

    async def delete_one(self, query):
        for index, document in enumerate(self.documents):
            if _matches(document, query):
                del self.documents[index]
                return DeleteResult({"n": 1, "ok": 1.0}, True)
        return DeleteResult({"n": 0, "ok": 1.0}, True)


class FakeDatabase:
    def __init__(self):
        self.collections = {}

    def __getitem__(self, name):
        return self.collections.setdefault(name, FakeCollection())


class FakeMongo:
    def __init__(self, db, reachable=True):
        self.db = db
        self.reachable = reachable

    async def ping(self):
        return self.reachable


# ══════════════════════════════════════════════════════════════════════════
# Fixtures
# ══════════════════════════════════════════════════════════════════════════

@pytest.fixture
def fake_db():
    return FakeDatabase()


@pytest.fixture
def fake_mongo(fake_db):
    return FakeMongo(fake_db)


@pytest_asyncio.fixture
async def test_client(fake_db, fake_mongo):
    """
    HTTPX AsyncClient talking to the app through ASGITransport.

    The lifespan does not run under ASGITransport, so no real connection is
    attempted; both database dependencies point at the in-memory double.
    """
    from portfolio.database import get_database, get_mongo
    from portfolio.main import app

    app.dependency_overrides[get_database] = lambda: fake_db
    app.dependency_overrides[get_mongo] = lambda: fake_mongo
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client
    app.dependency_overrides.clear()

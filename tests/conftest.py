"""
Shared fixtures: an in-memory stand-in for the two MongoDB collections and a
temporary identity file.
"""

import copy
from types import SimpleNamespace

import pytest
from pymongo.errors import DuplicateKeyError, OperationFailure

from logic.dashboard import Dashboard
from logic.identity_store import IdentityStore
from logic.mongo_db import MongoDB


# ---------------------------------------------------------------------------
# Fake database
# ---------------------------------------------------------------------------

def _matches(doc, flt):
    return all(doc.get(k) == v for k, v in flt.items())


class FakeCursor:
    def __init__(self, docs):
        self._docs = docs

    def sort(self, key, direction):
        self._docs = sorted(self._docs, key=lambda d: d.get(key), reverse=direction < 0)
        return self

    def __iter__(self):
        return iter(self._docs)


class FakeCollection:
    def __init__(self, name, database):
        self.name = name
        self.database = database
        self.docs = []
        self.indexes = []

    def _call(self, op, flt=None):
        self.database.calls.append((self.name, op, flt))
        if (self.name, op) in self.database.failures:
            raise OperationFailure(f"{op} on {self.name} failed")

    def find(self, flt, projection=None):
        self._call("find", flt)
        out = []
        for doc in self.docs:
            if _matches(doc, flt):
                doc = copy.deepcopy(doc)
                if projection:
                    doc = {k: v for k, v in doc.items() if projection.get(k)}
                out.append(doc)
        return FakeCursor(out)

    def insert_one(self, doc):
        self._call("insert_one", {"_id": doc.get("_id")})
        if any(d.get("_id") == doc.get("_id") for d in self.docs):
            raise DuplicateKeyError("E11000 duplicate key error")
        self.docs.append(copy.deepcopy(doc))
        return SimpleNamespace(inserted_id=doc.get("_id"))

    def delete_many(self, flt):
        self._call("delete_many", flt)
        before = len(self.docs)
        self.docs = [d for d in self.docs if not _matches(d, flt)]
        return SimpleNamespace(deleted_count=before - len(self.docs))

    def delete_one(self, flt):
        self._call("delete_one", flt)
        for i, d in enumerate(self.docs):
            if _matches(d, flt):
                del self.docs[i]
                return SimpleNamespace(deleted_count=1)
        return SimpleNamespace(deleted_count=0)

    def create_index(self, keys):
        self._call("create_index")
        self.indexes.append(keys)


class FakeDatabase:
    def __init__(self):
        self.collections = {}
        self.calls = []
        self.failures = set()

    def __getitem__(self, name):
        if name not in self.collections:
            self.collections[name] = FakeCollection(name, self)
        return self.collections[name]


# ---------------------------------------------------------------------------
# Fixtures
# ---------------------------------------------------------------------------

@pytest.fixture
def fake_db():
    return FakeDatabase()


@pytest.fixture
def repo(fake_db):
    return MongoDB(database=fake_db, cases_collection="case_config", responses_collection="responses")


@pytest.fixture
def identity_store(tmp_path):
    return IdentityStore(state_dir=str(tmp_path / "state"))


@pytest.fixture
def dashboard(repo, identity_store):
    return Dashboard(repo, identity_store)

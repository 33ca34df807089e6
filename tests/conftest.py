import os
from types import SimpleNamespace

os.environ.setdefault("MONGODB_URI", "mongodb://localhost:27017")
os.environ.setdefault("DJANGO_SETTINGS_MODULE", "scoreboard.settings")

import django  # noqa: E402

django.setup()

import pytest  # noqa: E402
from bson import ObjectId  # noqa: E402
from rest_framework.test import APIClient  # noqa: E402

from leaderboard import mongo  # noqa: E402


def _matches(doc, query):
    for key, cond in query.items():
        if key == "$or":
            if not any(_matches(doc, sub) for sub in cond):
                return False
            continue
        value = doc.get(key)
        if isinstance(cond, dict):
            if "$lt" in cond and not (value is not None and value < cond["$lt"]):
                return False
            if "$gt" in cond and not (value is not None and value > cond["$gt"]):
                return False
        elif value != cond:
            return False
    return True


class FakeCursor:
    def __init__(self, docs):
        self._docs = docs

    def sort(self, keys):
        docs = list(self._docs)
        for key, direction in reversed(keys):
            docs.sort(key=lambda d: d[key], reverse=direction < 0)
        return FakeCursor(docs)

    def limit(self, n):
        return FakeCursor(self._docs[:n] if n else self._docs)

    def __iter__(self):
        return iter([dict(d) for d in self._docs])


class FakeCollection:
    """In-memory stand-in for the pymongo collection API the store uses."""

    def __init__(self):
        self.docs = []
        self.indexes = []

    def create_index(self, keys, **kwargs):
        self.indexes.append((keys, kwargs))
        return kwargs.get("name")

    def insert_one(self, doc):
        doc.setdefault("_id", ObjectId())
        self.docs.append(dict(doc))
        return SimpleNamespace(inserted_id=doc["_id"])

    def find(self, query=None):
        return FakeCursor([d for d in self.docs if _matches(d, query or {})])

    def delete_many(self, query):
        before = len(self.docs)
        self.docs = [d for d in self.docs if not _matches(d, query)]
        return SimpleNamespace(deleted_count=before - len(self.docs))


@pytest.fixture
def collection(monkeypatch):
    fake = FakeCollection()
    monkeypatch.setattr(mongo, "get_collection", lambda: fake)
    return fake


@pytest.fixture
def client(collection):
    return APIClient()

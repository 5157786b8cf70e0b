"""Document collections backed by MongoDB or by memory."""

from __future__ import annotations

import copy
import uuid
from dataclasses import dataclass
from enum import IntEnum
from typing import Any, Callable, Iterable

_MISSING = object()


class MsgType(IntEnum):
    """Kinds of content a saved message can carry."""

    TEXT = 1
    STICKER = 2
    DOCUMENT = 3
    PHOTO = 4
    AUDIO = 5
    VOICE = 6
    VIDEO = 7
    VIDEO_NOTE = 8


@dataclass
class Button:
    """An inline keyboard button stored with a note, filter or greeting."""

    name: str = ""
    url: str = ""
    same_line: bool = False

    def to_document(self) -> dict[str, Any]:
        doc: dict[str, Any] = {}
        if self.name:
            doc["name"] = self.name
        if self.url:
            doc["url"] = self.url
        doc["btn_sameline"] = self.same_line
        return doc

    @classmethod
    def from_document(cls, doc: dict[str, Any]) -> "Button":
        return cls(
            name=doc.get("name", ""),
            url=doc.get("url", ""),
            same_line=bool(doc.get("btn_sameline", False)),
        )


def _is_operator_dict(value: Any) -> bool:
    return isinstance(value, dict) and bool(value) and all(str(k).startswith("$") for k in value)


def _matches(doc: dict[str, Any], query: dict[str, Any]) -> bool:
    for key, expected in query.items():
        actual = doc.get(key, _MISSING)
        if _is_operator_dict(expected):
            for op, operand in expected.items():
                if op == "$ne":
                    if actual is not _MISSING and actual == operand:
                        return False
                elif op == "$in":
                    if actual is _MISSING or actual not in operand:
                        return False
                else:
                    raise ValueError(f"unsupported query operator: {op}")
        elif actual is _MISSING:
            if expected is not None:
                return False
        elif actual != expected:
            return False
    return True


class MemoryCollection:
    """A collection of documents held in memory with Mongo-like queries."""

    def __init__(self) -> None:
        self._docs: list[dict[str, Any]] = []

    def find_one(self, query: dict[str, Any]) -> dict[str, Any] | None:
        for doc in self._docs:
            if _matches(doc, query):
                return copy.deepcopy(doc)
        return None

    def find(self, query: dict[str, Any]) -> list[dict[str, Any]]:
        return [copy.deepcopy(doc) for doc in self._docs if _matches(doc, query)]

    def update_one(self, query: dict[str, Any], data: dict[str, Any]) -> None:
        """Set the given fields on the first match, inserting a document if none matches."""
        for doc in self._docs:
            if _matches(doc, query):
                doc.update(copy.deepcopy(data))
                return
        new_doc = {k: copy.deepcopy(v) for k, v in query.items() if not _is_operator_dict(v)}
        new_doc.update(copy.deepcopy(data))
        new_doc.setdefault("_id", uuid.uuid4().hex)
        self._docs.append(new_doc)

    def count(self, query: dict[str, Any]) -> int:
        return sum(1 for doc in self._docs if _matches(doc, query))

    def delete_one(self, query: dict[str, Any]) -> int:
        for position, doc in enumerate(self._docs):
            if _matches(doc, query):
                del self._docs[position]
                return 1
        return 0

    def delete_many(self, query: dict[str, Any]) -> int:
        kept = [doc for doc in self._docs if not _matches(doc, query)]
        removed = len(self._docs) - len(kept)
        self._docs = kept
        return removed


class MongoCollection:
    """A thin wrapper giving a pymongo collection the same interface."""

    def __init__(self, collection: Any) -> None:
        self._collection = collection

    def find_one(self, query: dict[str, Any]) -> dict[str, Any] | None:
        return self._collection.find_one(query)

    def find(self, query: dict[str, Any]) -> list[dict[str, Any]]:
        return list(self._collection.find(query))

    def update_one(self, query: dict[str, Any], data: dict[str, Any]) -> None:
        self._collection.update_one(query, {"$set": data}, upsert=True)

    def count(self, query: dict[str, Any]) -> int:
        return self._collection.count_documents(query)

    def delete_one(self, query: dict[str, Any]) -> int:
        return self._collection.delete_one(query).deleted_count

    def delete_many(self, query: dict[str, Any]) -> int:
        return self._collection.delete_many(query).deleted_count


AnyCollection = MemoryCollection | MongoCollection


class Database:
    """Named collections, created on first use."""

    def __init__(self, factory: Callable[[str], AnyCollection]) -> None:
        self._factory = factory
        self._collections: dict[str, AnyCollection] = {}

    def collection(self, name: str) -> AnyCollection:
        try:
            return self._collections[name]
        except KeyError:
            created = self._collections[name] = self._factory(name)
            return created

    def __iter__(self) -> Iterable[str]:
        return iter(self._collections)


def open_memory_database() -> Database:
    """Return a database whose collections live in memory."""
    return Database(lambda _name: MemoryCollection())


def open_mongo_database(uri: str, name: str) -> Database:
    """Connect to MongoDB and return the named database."""
    from pymongo import MongoClient

    client = MongoClient(uri, serverSelectionTimeoutMS=10_000)
    mongo_db = client[name]
    return Database(lambda coll_name: MongoCollection(mongo_db[coll_name]))
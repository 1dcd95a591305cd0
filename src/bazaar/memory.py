"""In-memory backend — the development stand-in for a document store.

Implements the QueryModel contract over plain lists of dicts. Queries are
lazy: refinements accumulate on a MemoryQuery and nothing is evaluated
until the query is awaited. Results are copies; a query never mutates the
store.
"""

from __future__ import annotations

import copy
import itertools
import re
import uuid
from typing import Any, Iterable, Mapping

from bazaar.errors import DataAccessError
from bazaar.interface import Document


def _matches(doc: Document, filter: Mapping[str, Any]) -> bool:
    for key, expected in filter.items():
        if key == "$or":
            if not any(_matches(doc, clause) for clause in expected):
                return False
            continue
        actual = doc.get(key)
        if isinstance(expected, Mapping):
            if not _matches_operators(actual, expected):
                return False
        elif actual != expected:
            return False
    return True


def _matches_operators(actual: Any, ops: Mapping[str, Any]) -> bool:
    for op, operand in ops.items():
        if op == "$ne":
            if actual == operand:
                return False
        elif op == "$in":
            if actual not in operand:
                return False
        elif op == "$regex":
            flags = re.IGNORECASE if "i" in ops.get("$options", "") else 0
            if not isinstance(actual, str) or not re.search(operand, actual, flags):
                return False
        elif op == "$options":
            continue
        else:
            raise DataAccessError(f"Unsupported query operator: {op}")
    return True


def _project(doc: Document, projection: str) -> Document:
    fields = projection.split()
    if all(f.startswith("-") for f in fields):
        excluded = {f[1:] for f in fields}
        return {k: v for k, v in doc.items() if k not in excluded}
    if any(f.startswith("-") for f in fields):
        raise DataAccessError(f"Cannot mix inclusion and exclusion: {projection!r}")
    included = set(fields) | {"_id"}
    return {k: v for k, v in doc.items() if k in included}


class MemoryQuery:
    """A chainable, awaitable query against a MemoryModel."""

    def __init__(self, model: MemoryModel, filter: Mapping[str, Any], *, single: bool = False):
        self._model = model
        self._filter = dict(filter)
        self._single = single
        self._populate: list[str] = []
        self._projection: str | None = None
        self._skip = 0
        self._limit: int | None = None
        self._sort: list[tuple[str, int]] = []

    def populate(self, *paths: str) -> MemoryQuery:
        self._populate.extend(paths)
        return self

    def select(self, projection: str) -> MemoryQuery:
        self._projection = projection
        return self

    def skip(self, count: int) -> MemoryQuery:
        if not isinstance(count, int) or count < 0:
            raise DataAccessError(f"skip must be a non-negative integer, got {count!r}")
        self._skip = count
        return self

    def limit(self, count: int) -> MemoryQuery:
        if not isinstance(count, int) or count < 0:
            raise DataAccessError(f"limit must be a non-negative integer, got {count!r}")
        self._limit = count
        return self

    def sort(self, order: Mapping[str, int]) -> MemoryQuery:
        self._sort = list(order.items())
        return self

    def __await__(self):
        return self._execute().__await__()

    async def _execute(self) -> Any:
        docs = [d for d in self._model.documents if _matches(d, self._filter)]
        # Stable sorts applied from the last key to the first. Missing values
        # sort lowest: first ascending, last descending.
        for field, direction in reversed(self._sort):
            docs.sort(
                key=lambda d: (d.get(field) is not None, d.get(field)),
                reverse=direction < 0,
            )
        docs = docs[self._skip:]
        if self._limit:  # limit(0) means no limit
            docs = docs[: self._limit]
        results = [self._shape(d) for d in docs]
        if self._single:
            return results[0] if results else None
        return results

    def _shape(self, doc: Document) -> Document:
        shaped = copy.deepcopy(doc)
        if self._projection:
            shaped = _project(shaped, self._projection)
        for path in self._populate:
            related = self._model.relations.get(path)
            if related is None:
                raise DataAccessError(f"{self._model.name} has no relation {path!r}")
            if path in shaped:
                target = related.get(shaped[path])
                shaped[path] = copy.deepcopy(target) if target is not None else None
        return shaped


class MemoryModel:
    """A named collection of documents implementing QueryModel."""

    def __init__(
        self,
        name: str,
        documents: Iterable[Document] = (),
        relations: Mapping[str, MemoryModel] | None = None,
    ):
        self.name = name
        self.documents: list[Document] = []
        self.relations: dict[str, MemoryModel] = dict(relations or {})
        self._clock = itertools.count(1)
        for doc in documents:
            self.insert(doc)

    def insert(self, doc: Document) -> Document:
        stored = copy.deepcopy(doc)
        stored.setdefault("_id", uuid.uuid4().hex)
        stored.setdefault("created_at", next(self._clock))
        if self.get(stored["_id"]) is not None:
            raise DataAccessError(f"Duplicate _id in {self.name}: {stored['_id']}")
        self.documents.append(stored)
        return copy.deepcopy(stored)

    def get(self, id: str) -> Document | None:
        for doc in self.documents:
            if doc["_id"] == id:
                return doc
        return None

    def count(self) -> int:
        return len(self.documents)

    def find(self, filter: Mapping[str, Any] | None = None) -> MemoryQuery:
        return MemoryQuery(self, filter or {})

    def find_one(self, filter: Mapping[str, Any]) -> MemoryQuery:
        return MemoryQuery(self, filter, single=True)

    def find_by_id(self, id: str) -> MemoryQuery:
        return MemoryQuery(self, {"_id": id}, single=True)

    def __repr__(self) -> str:
        return f"MemoryModel({self.name!r}, {len(self.documents)} documents)"

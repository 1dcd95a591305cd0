"""The data-access contract controllers are written against.

Models expose three retrieval entry points; each returns a query that can
be refined and finally awaited. The whitelist is closed: a data-access
layer with more chain points needs the whitelist extended, not patched.
"""

from __future__ import annotations

from typing import Any, Generator, Mapping, Protocol, TypeVar

T_co = TypeVar("T_co", covariant=True)

RETRIEVAL_METHODS = ("find", "find_one", "find_by_id")
REFINEMENT_METHODS = ("populate", "select", "skip", "limit", "sort")
CHAIN_METHODS = RETRIEVAL_METHODS + REFINEMENT_METHODS

Document = dict[str, Any]


class Query(Protocol[T_co]):
    """A pending query. Refinements return the query; awaiting runs it."""

    def populate(self, *paths: str) -> Query[T_co]: ...

    def select(self, projection: str) -> Query[T_co]: ...

    def skip(self, count: int) -> Query[T_co]: ...

    def limit(self, count: int) -> Query[T_co]: ...

    def sort(self, order: Mapping[str, int]) -> Query[T_co]: ...

    def __await__(self) -> Generator[Any, None, T_co]: ...


class QueryModel(Protocol):
    """A collection of documents that can be queried."""

    def find(self, filter: Mapping[str, Any] | None = None) -> Query[list[Document]]: ...

    def find_one(self, filter: Mapping[str, Any]) -> Query[Document | None]: ...

    def find_by_id(self, id: str) -> Query[Document | None]: ...

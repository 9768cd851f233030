"""Shared staging logic for the JSON-file repositories.

Saves are serialized immediately and staged in memory until the owning
unit of work commits. Reads see staged rows first, then the file, and
always return freshly built domain objects: mutating a loaded aggregate
has no effect until it is saved.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, Callable, Generic, TypeVar

from bookstore.infrastructure.persistence.json_store import JsonStore

E = TypeVar("E")


class JsonRepository(ABC, Generic[E]):

    table: str

    def __init__(self, store: JsonStore) -> None:
        self._store = store
        self._staged: dict[int, dict] = {}

    # --- Unit-of-work hooks ---------------------------------------------------

    def staged_changes(self) -> dict[int, dict]:
        return dict(self._staged)

    def discard(self) -> None:
        self._staged.clear()

    # --- Helpers for subclasses -----------------------------------------------

    def next_id(self) -> int:
        return self._store.next_id(self.table)

    def _rows(self) -> list[dict]:
        rows = {raw["id"]: raw for raw in self._store.load(self.table)}
        rows.update(self._staged)
        return list(rows.values())

    def _get(self, row_id: int) -> E | None:
        return self._find(lambda raw: raw["id"] == row_id)

    def _find(self, predicate: Callable[[dict], bool]) -> E | None:
        for raw in self._rows():
            if predicate(raw):
                return self._to_domain(raw)
        return None

    def _filter(self, predicate: Callable[[dict], bool]) -> list[E]:
        return [self._to_domain(raw) for raw in self._rows() if predicate(raw)]

    def _stage(self, entity: Any) -> None:
        if entity.id is None:
            entity.id = self.next_id()
        self._staged[entity.id] = self._to_raw(entity)

    # --- Serialization --------------------------------------------------------

    @staticmethod
    @abstractmethod
    def _to_raw(entity: Any) -> dict:
        """Serialize an aggregate to a JSON-compatible dict."""

    @staticmethod
    @abstractmethod
    def _to_domain(raw: dict) -> Any:
        """Rebuild an aggregate from its stored dict."""

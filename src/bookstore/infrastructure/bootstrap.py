"""Composition root: wires concrete implementations to the abstractions.

This is the only place in the codebase that knows about *all* layers.
Every other module depends only on abstractions.
"""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path

from bookstore.infrastructure.persistence.json_store import JsonStore
from bookstore.infrastructure.persistence.json_unit_of_work import JsonUnitOfWork


@lru_cache(maxsize=None)
def json_store(data_dir: Path) -> JsonStore:
    """One store (and one row-lock registry) per data directory per process."""
    return JsonStore(data_dir.resolve())


def unit_of_work(data_dir: Path) -> JsonUnitOfWork:
    return JsonUnitOfWork(json_store(data_dir.resolve()))

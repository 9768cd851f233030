"""JSON-file table store shared by every JsonUnitOfWork in the process.

Each table is one ``<name>.json`` file holding a list of row dicts keyed
by an integer ``id``. Ids come from per-table sequences that, like
database sequences, are not rolled back.

Commits merge only the rows a transaction actually saved, so two
transactions on different clients never overwrite each other's rows.
"""

from __future__ import annotations

import json
import os
import threading
from pathlib import Path

import structlog

from bookstore.infrastructure.persistence.row_locks import RowLocks

logger = structlog.get_logger(__name__)

TABLES = ("books", "users", "carts", "orders")


class JsonStore:

    def __init__(self, data_dir: Path) -> None:
        self._data_dir = data_dir
        self._write_lock = threading.Lock()
        self._sequences: dict[str, int] = {}
        self.row_locks = RowLocks()
        for table in TABLES:
            self._ensure_file(table)

    @property
    def data_dir(self) -> Path:
        return self._data_dir

    # --- Reads ----------------------------------------------------------------

    def load(self, table: str) -> list[dict]:
        return json.loads(self._path(table).read_text(encoding="utf-8"))

    # --- Writes ---------------------------------------------------------------

    def next_id(self, table: str) -> int:
        with self._write_lock:
            if table not in self._sequences:
                self._sequences[table] = max(
                    (raw["id"] for raw in self.load(table)), default=0
                )
            self._sequences[table] += 1
            return self._sequences[table]

    def apply(self, changes: dict[str, dict[int, dict]]) -> None:
        """Upsert the changed rows of each table.

        All temp files are written before any of them replaces its table,
        so a failure while serializing leaves every table untouched.
        """
        with self._write_lock:
            pending: list[tuple[Path, Path]] = []
            try:
                for table, rows in changes.items():
                    if not rows:
                        continue
                    records = self.load(table)
                    index = {raw["id"]: i for i, raw in enumerate(records)}
                    for row_id, raw in rows.items():
                        if row_id in index:
                            records[index[row_id]] = raw
                        else:
                            records.append(raw)
                    target = self._path(table)
                    tmp = target.with_suffix(".json.tmp")
                    tmp.write_text(json.dumps(records, indent=2) + "\n", encoding="utf-8")
                    pending.append((tmp, target))
            except BaseException:
                for tmp, _ in pending:
                    tmp.unlink(missing_ok=True)
                raise

            for tmp, target in pending:
                os.replace(tmp, target)

        logger.debug(
            "store_committed",
            rows={table: len(rows) for table, rows in changes.items() if rows},
        )

    # --- File helpers ---------------------------------------------------------

    def _path(self, table: str) -> Path:
        return self._data_dir / f"{table}.json"

    def _ensure_file(self, table: str) -> None:
        path = self._path(table)
        if not path.exists():
            path.parent.mkdir(parents=True, exist_ok=True)
            path.write_text("[]", encoding="utf-8")

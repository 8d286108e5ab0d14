"""In-memory database for the entity API mock server.

Provides CRUD and simple equality filtering for every resource table.
"""

from __future__ import annotations

from typing import Any, Dict, List, Optional

_SEED: Dict[str, List[dict]] = {
    "rooms": [
        {"id": "1", "name": "Blue Room", "capacity": 20, "is_active": True},
        {"id": "2", "name": "Gym", "capacity": 60, "is_active": True},
        {"id": "3", "name": "Library", "capacity": 15, "is_active": False},
    ],
    "groups": [
        {"id": "1", "name": "Class 1a", "room_id": "1"},
        {"id": "2", "name": "Class 2b", "room_id": "2"},
    ],
    "students": [
        {"id": "1", "first_name": "Ada", "last_name": "Lovelace", "school_class": "1a"},
        {"id": "2", "first_name": "Alan", "last_name": "Turing", "school_class": "1a"},
        {"id": "3", "first_name": "Grace", "last_name": "Hopper", "school_class": "2b"},
    ],
}


def _matches(record: dict, key: str, expected: str) -> bool:
    value = record.get(key)
    if value is None:
        return False
    if isinstance(value, bool):
        return ("true" if value else "false") == expected.lower()
    return str(value) == expected


class InMemoryDB:
    """Simple in-memory store keyed by table name."""

    def __init__(self) -> None:
        self.tables: Dict[str, Dict[str, dict]] = {name: {} for name in _SEED}
        self._id_counters: Dict[str, int] = {}

    # --- ID generation ---

    def _next_id(self, table: str) -> str:
        counter = self._id_counters.get(table, 0) + 1
        self._id_counters[table] = counter
        return str(counter)

    # --- CRUD ---

    def insert(self, table: str, record: dict) -> dict:
        if not record.get("id"):
            record["id"] = self._next_id(table)
        else:
            try:
                num = int(record["id"])
                if num >= self._id_counters.get(table, 0):
                    self._id_counters[table] = num
            except ValueError:
                pass
        self.tables[table][record["id"]] = record
        return record

    def get(self, table: str, record_id: str) -> Optional[dict]:
        return self.tables.get(table, {}).get(record_id)

    def update(self, table: str, record_id: str, data: dict) -> Optional[dict]:
        existing = self.get(table, record_id)
        if existing is None:
            return None
        existing.update(data)
        existing["id"] = record_id  # prevent id overwrite
        return existing

    def delete(self, table: str, record_id: str) -> bool:
        return self.tables.get(table, {}).pop(record_id, None) is not None

    def query(self, table: str, filters: Dict[str, str]) -> List[dict]:
        return [
            record
            for record in self.tables.get(table, {}).values()
            if all(_matches(record, key, value) for key, value in filters.items())
        ]

    def load_seed_data(self, seed: Dict[str, List[dict]]) -> None:
        for table, records in seed.items():
            for record in records:
                self.insert(table, dict(record))


def paginate(records: List[dict], page: int, page_size: int) -> tuple[List[dict], Dict[str, Any]]:
    """Slices one page and builds the wire pagination object."""
    total = len(records)
    total_pages = max(1, -(-total // page_size))
    start = (page - 1) * page_size
    return records[start:start + page_size], {
        "current_page": page,
        "page_size": page_size,
        "total_pages": total_pages,
        "total_records": total,
    }


# --- Singleton ---

_db: Optional[InMemoryDB] = None


def get_db() -> InMemoryDB:
    global _db
    if _db is None:
        _db = InMemoryDB()
        _db.load_seed_data(_SEED)
    return _db


def reset_db() -> InMemoryDB:
    """Reset the database (useful for testing)."""
    global _db
    _db = None
    return get_db()

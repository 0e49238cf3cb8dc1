from orbitregistry.db.models.kv_entry import KeyValueEntry

__all__ = [
    "KeyValueEntry",
]

from sqlalchemy import delete
from sqlalchemy.orm import Session, sessionmaker

from orbitregistry.db.models.kv_entry import KeyValueEntry
from orbitregistry.storage.kv import KeyValueStore


class SqlKeyValueStore(KeyValueStore):
    """KeyValueStore persisted in the kv_entries table. One session per call."""

    def __init__(self, session_factory: sessionmaker[Session]) -> None:
        self._session_factory = session_factory

    def get_item(self, key: str) -> str | None:
        with self._session_factory() as session:
            entry = session.get(KeyValueEntry, key)
            return entry.value if entry is not None else None

    def set_item(self, key: str, value: str) -> None:
        with self._session_factory() as session:
            entry = session.get(KeyValueEntry, key)
            if entry is None:
                session.add(KeyValueEntry(key=key, value=value))
            else:
                entry.value = value
            session.commit()

    def remove_item(self, key: str) -> None:
        with self._session_factory() as session:
            session.execute(delete(KeyValueEntry).where(KeyValueEntry.key == key))
            session.commit()

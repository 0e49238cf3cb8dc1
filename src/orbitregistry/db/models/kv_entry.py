"""Key-value rows backing the persisted custom chain collection."""

from sqlalchemy import String, Text
from sqlalchemy.orm import Mapped, mapped_column

from orbitregistry.db.session import Base, TimestampMixin


class KeyValueEntry(TimestampMixin, Base):
    __tablename__ = "kv_entries"

    key: Mapped[str] = mapped_column(String(255), primary_key=True)
    value: Mapped[str] = mapped_column(Text)

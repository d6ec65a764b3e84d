"""
Storage model: a single key/value table.

The inventory keeps its three collections as JSON documents, one row
per collection key:

  inventory_rooms     → JSON array of rooms
  inventory_items     → JSON array of items
  inventory_projects  → JSON array of projects

The table knows nothing about rooms or items; shape is the
repository's business.
"""

from datetime import datetime

from sqlalchemy import DateTime, String, Text, func
from sqlalchemy.orm import Mapped, mapped_column

from home_inventory.core.database import Base


class StorageEntry(Base):
    """One serialized collection, addressed by key."""

    __tablename__ = "storage_entries"

    key: Mapped[str] = mapped_column(
        String(100),
        primary_key=True,
        comment="Collection key: inventory_rooms, inventory_items, ...",
    )
    value: Mapped[str] = mapped_column(
        Text,
        nullable=False,
        default="[]",
        comment="JSON-serialized collection.",
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        server_default=func.now(),
        onupdate=func.now(),
    )

    def __repr__(self) -> str:
        return f"<StorageEntry {self.key}>"

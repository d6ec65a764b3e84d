"""All models must be imported here so SQLAlchemy registers them."""

from home_inventory.models.core import StorageEntry  # noqa: F401

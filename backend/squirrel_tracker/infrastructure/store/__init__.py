"""Record store adapters used by the sighting controller."""

from .http_record_store import HttpRecordStore

__all__ = ["HttpRecordStore"]

"""
Services module containing the record store.
"""

from .record_store import RecordStore

__all__ = [
    "RecordStore",
]

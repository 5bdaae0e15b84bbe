"""
Persistence Module.

Snapshot schema plus the gateways that load and save it.
"""

from tracker.persistence.gateway import InMemoryGateway, PersistenceGateway, SaveResult
from tracker.persistence.json_store import JsonFileGateway
from tracker.persistence.snapshot import StoreSnapshot, dump_store, load_store

__all__ = [
    "PersistenceGateway",
    "SaveResult",
    "InMemoryGateway",
    "JsonFileGateway",
    "StoreSnapshot",
    "dump_store",
    "load_store",
]

"""
Base service class.
Services contain business rules and talk to Storage, never to the session directly.
"""

from abc import ABC

from app.db.storage import Storage


class BaseService(ABC):
    """Base service class for all storage-backed services."""

    def __init__(self, storage: Storage):
        self.storage = storage

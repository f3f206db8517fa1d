"""
Experience Storage Backends

Key-value blob stores used by the experience store. A blob store only knows
string keys and string values; collections are serialized by the caller.
"""
from typing import Dict, Optional, Protocol

from django.db import transaction

from .models import StorageEntry


class BlobStore(Protocol):
    """Minimal key-value capability the experience store depends on."""

    def get(self, key: str) -> Optional[str]: ...

    def set(self, key: str, value: str) -> None: ...


class InMemoryBlobStore:
    """
    Process-local blob store backed by a dict.

    Used by tests and scripts that should not touch the database.
    """

    def __init__(self, initial: Optional[Dict[str, str]] = None):
        self._data: Dict[str, str] = dict(initial or {})

    def get(self, key: str) -> Optional[str]:
        return self._data.get(key)

    def set(self, key: str, value: str) -> None:
        self._data[key] = value


class DatabaseBlobStore:
    """
    Blob store persisted as StorageEntry rows, scoped to one user.

    Each user gets an independent set of keys, the same way each browser
    profile gets its own local storage.
    """

    def __init__(self, user):
        self.user = user

    def get(self, key: str) -> Optional[str]:
        entries = StorageEntry.objects.filter(user=self.user, key=key)
        if transaction.get_connection().in_atomic_block:
            # Row stays locked until the surrounding read-modify-write commits.
            entries = entries.select_for_update()
        entry = entries.first()
        return entry.value if entry else None

    def set(self, key: str, value: str) -> None:
        StorageEntry.objects.update_or_create(
            user=self.user,
            key=key,
            defaults={'value': value},
        )

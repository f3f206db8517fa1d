"""
Experience Service Layer
Persists skills, experiences and geographic preferences of a model profile.
"""
import json
import logging
import uuid
from typing import Dict, List, Optional

from .storage import BlobStore

logger = logging.getLogger(__name__)


SKILL = 'skill'
EXPERIENCE = 'experience'
GEO_PREFERENCE = 'geoPreference'

STORAGE_KEYS = {
    SKILL: 'model_skills',
    EXPERIENCE: 'model_experiences',
    GEO_PREFERENCE: 'model_geographic_preferences',
}

SKILL_LEVELS = ['beginner', 'intermediate', 'advanced', 'expert']
SKILL_CATEGORIES = ['languages', 'artistic', 'sports', 'modeling', 'other']
EXPERIENCE_TYPES = ['runway', 'photoshoot', 'campaign', 'event', 'other']


def stamp_order(experiences: List[Dict]) -> List[Dict]:
    """Return copies of the experiences with order set to their 1-based position."""
    return [{**exp, 'order': index + 1} for index, exp in enumerate(experiences)]


class ExperienceStore:
    """
    CRUD over the three profile collections kept in a blob store.

    Every collection lives under its own key as a JSON array. Each mutating
    call reads the collection, changes it and writes the whole array back
    exactly once. Experiences additionally keep `order` dense (1..N) and equal
    to their position.

    Errors raised by the blob store are not caught here.
    """

    def __init__(self, blob_store: BlobStore):
        self.blob_store = blob_store

    @staticmethod
    def storage_key(kind: str) -> str:
        try:
            return STORAGE_KEYS[kind]
        except KeyError:
            raise ValueError(
                f"Unknown record kind '{kind}', expected one of: {', '.join(STORAGE_KEYS)}"
            ) from None

    def _read(self, kind: str) -> List[Dict]:
        key = self.storage_key(kind)
        raw = self.blob_store.get(key)
        if not raw:
            return []
        records = json.loads(raw)
        if not isinstance(records, list):
            raise ValueError(f"Stored value for '{key}' is not a JSON array")
        return records

    def _write(self, kind: str, records: List[Dict]) -> None:
        self.blob_store.set(self.storage_key(kind), json.dumps(records))

    def list(self, kind: str) -> List[Dict]:
        """
        Get the full collection of a kind.

        Args:
            kind: One of 'skill', 'experience', 'geoPreference'

        Returns:
            List of records, empty if nothing was stored yet
        """
        return self._read(kind)

    def create(self, kind: str, fields: Dict) -> Dict:
        """
        Append a new record with a freshly generated id.

        Experiences are placed last: their order is the collection size + 1.

        Args:
            kind: Record kind
            fields: Record fields without id

        Returns:
            The created record
        """
        records = self._read(kind)
        record = {**fields, 'id': str(uuid.uuid4())}
        if kind == EXPERIENCE:
            record['order'] = len(records) + 1

        records.append(record)
        self._write(kind, records)

        logger.info("Created %s %s", kind, record['id'])
        return record

    def update(self, kind: str, record_id: str, updates: Dict) -> Optional[Dict]:
        """
        Shallow-merge updates into an existing record.

        Nested values are replaced, never merged.

        Args:
            kind: Record kind
            record_id: Id of the record to change
            updates: Fields to overwrite

        Returns:
            The updated record, or None if no record has this id
        """
        records = self._read(kind)
        for index, record in enumerate(records):
            if record.get('id') == record_id:
                break
        else:
            logger.warning("Cannot update %s %s: not found", kind, record_id)
            return None

        updated = {**records[index], **updates}
        records[index] = updated
        self._write(kind, records)

        logger.info("Updated %s %s", kind, record_id)
        return updated

    def delete(self, kind: str, record_id: str) -> bool:
        """
        Remove a record by id.

        Remaining experiences are renumbered so that order stays dense.

        Returns:
            True if a record was removed, False if the id was unknown
        """
        records = self._read(kind)
        remaining = [record for record in records if record.get('id') != record_id]
        if len(remaining) == len(records):
            logger.warning("Cannot delete %s %s: not found", kind, record_id)
            return False

        if kind == EXPERIENCE:
            remaining = stamp_order(remaining)
        self._write(kind, remaining)

        logger.info("Deleted %s %s", kind, record_id)
        return True

    def reorder(self, experiences: List[Dict]) -> List[Dict]:
        """
        Persist experiences in the given sequence.

        The list is stored as given: callers must pass the complete, reconciled
        set of experiences.

        Returns:
            The experiences with order stamped from their new position
        """
        reordered = stamp_order(experiences)
        self._write(EXPERIENCE, reordered)

        logger.info("Reordered %d experiences", len(reordered))
        return reordered

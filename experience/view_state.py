"""
Experience view state

In-memory mirror of the experience collections used by the profile screen.
Every intent goes through the ExperienceStore first; the mirror only takes
values the store returned.
"""
import logging
from typing import Callable, Dict, List, Literal, Optional

from .services import EXPERIENCE, GEO_PREFERENCE, SKILL, ExperienceStore

logger = logging.getLogger(__name__)


FieldName = Literal['skills', 'experiences', 'geo_preferences']
Subscriber = Callable[[List[Dict]], None]


def move_item(items: List[Dict], old_index: int, new_index: int) -> List[Dict]:
    """Return a new list with the item at old_index moved to new_index."""
    moved = list(items)
    moved.insert(new_index, moved.pop(old_index))
    return moved


class ExperienceViewState:
    """
    Observable state for the skills, experiences and geographic preferences.

    Subscribers listen to one field and are called with the new list every
    time it changes.
    """

    FIELDS = ('skills', 'experiences', 'geo_preferences')

    def __init__(self, store: ExperienceStore):
        self.store = store
        self.skills: List[Dict] = []
        self.experiences: List[Dict] = []
        self.geo_preferences: List[Dict] = []
        self._subscribers: Dict[str, List[Subscriber]] = {field: [] for field in self.FIELDS}

    def subscribe(self, field: FieldName, fn: Subscriber) -> Callable[[], None]:
        """
        Subscribe to a field; returns an unsubscribe callable.
        Invokes the callback immediately with the current value.
        """
        if field not in self._subscribers:
            raise ValueError(f"Unknown field '{field}'")

        self._subscribers[field].append(fn)
        fn(getattr(self, field))

        def unsubscribe() -> None:
            try:
                self._subscribers[field].remove(fn)
            except ValueError:
                pass

        return unsubscribe

    def load(self) -> None:
        """Read all collections from the store."""
        self._set('skills', self.store.list(SKILL))
        self._set('experiences', self.store.list(EXPERIENCE))
        self._set('geo_preferences', self.store.list(GEO_PREFERENCE))

    # ---- skills ----

    def skills_in_category(self, category: str) -> List[Dict]:
        return [skill for skill in self.skills if skill.get('category') == category]

    def add_skill(self, fields: Dict) -> Dict:
        skill = self.store.create(SKILL, fields)
        self._set('skills', self.skills + [skill])
        return skill

    def edit_skill(self, skill_id: str, updates: Dict) -> Optional[Dict]:
        return self._edit('skills', SKILL, skill_id, updates)

    def delete_skill(self, skill_id: str) -> bool:
        return self._delete('skills', SKILL, skill_id)

    # ---- experiences ----

    def add_experience(self, fields: Dict) -> Dict:
        experience = self.store.create(EXPERIENCE, fields)
        self._set('experiences', self.experiences + [experience])
        return experience

    def edit_experience(self, experience_id: str, updates: Dict) -> Optional[Dict]:
        return self._edit('experiences', EXPERIENCE, experience_id, updates)

    def delete_experience(self, experience_id: str) -> bool:
        if not self.store.delete(EXPERIENCE, experience_id):
            return False
        # The store renumbered the remaining records.
        self._set('experiences', self.store.list(EXPERIENCE))
        return True

    def toggle_featured(self, experience_id: str) -> Optional[Dict]:
        experience = self._find(self.experiences, experience_id)
        if experience is None:
            return None
        return self.edit_experience(
            experience_id, {'featured': not experience.get('featured', False)}
        )

    def move_experience(self, active_id: str, over_id: str) -> List[Dict]:
        """
        Move an experience onto the position of another one (drag and drop).

        The new order is published before it is persisted. If persisting
        fails, the list is reloaded from the store and the error re-raised.
        """
        if active_id == over_id:
            return self.experiences

        ids = [exp.get('id') for exp in self.experiences]
        if active_id not in ids or over_id not in ids:
            return self.experiences

        moved = move_item(self.experiences, ids.index(active_id), ids.index(over_id))
        self._set('experiences', moved)

        try:
            reordered = self.store.reorder(moved)
        except Exception as e:
            logger.error(f"Failed to persist experience order, reloading from store: {e}")
            self._set('experiences', self.store.list(EXPERIENCE))
            raise

        self._set('experiences', reordered)
        return reordered

    # ---- geographic preferences ----

    def add_geo_preference(self, fields: Dict) -> Dict:
        preference = self.store.create(GEO_PREFERENCE, fields)
        self._set('geo_preferences', self.geo_preferences + [preference])
        return preference

    def edit_geo_preference(self, preference_id: str, updates: Dict) -> Optional[Dict]:
        return self._edit('geo_preferences', GEO_PREFERENCE, preference_id, updates)

    def delete_geo_preference(self, preference_id: str) -> bool:
        return self._delete('geo_preferences', GEO_PREFERENCE, preference_id)

    # ---- internal ----

    @staticmethod
    def _find(records: List[Dict], record_id: str) -> Optional[Dict]:
        for record in records:
            if record.get('id') == record_id:
                return record
        return None

    def _edit(self, field: str, kind: str, record_id: str, updates: Dict) -> Optional[Dict]:
        updated = self.store.update(kind, record_id, updates)
        if updated is None:
            return None
        self._set(field, [
            updated if record.get('id') == record_id else record
            for record in getattr(self, field)
        ])
        return updated

    def _delete(self, field: str, kind: str, record_id: str) -> bool:
        if not self.store.delete(kind, record_id):
            return False
        self._set(field, [record for record in getattr(self, field) if record.get('id') != record_id])
        return True

    def _set(self, field: str, records: List[Dict]) -> None:
        setattr(self, field, records)
        for fn in list(self._subscribers[field]):
            fn(records)

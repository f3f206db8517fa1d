import json

from django.test import SimpleTestCase

from experience.services import (
    EXPERIENCE,
    GEO_PREFERENCE,
    SKILL,
    STORAGE_KEYS,
    ExperienceStore,
)
from experience.storage import InMemoryBlobStore


class CountingBlobStore(InMemoryBlobStore):
    """In-memory blob store that records every write."""

    def __init__(self, initial=None):
        super().__init__(initial)
        self.writes = []

    def set(self, key, value):
        self.writes.append(key)
        super().set(key, value)


def experience_fields(client: str) -> dict:
    return {
        'type': 'runway',
        'client': client,
        'startDate': '2024-02-20',
        'location': 'Paris',
        'description': 'Spring/Summer collection show',
        'role': 'Model',
        'featured': False,
    }


class ExperienceStoreSkillTests(SimpleTestCase):
    """CRUD behaviour shared by all collections, exercised on skills."""

    def setUp(self) -> None:
        self.blob_store = CountingBlobStore()
        self.store = ExperienceStore(self.blob_store)

    def test_list_is_empty_when_nothing_stored(self) -> None:
        self.assertEqual(self.store.list(SKILL), [])
        self.assertEqual(self.store.list(EXPERIENCE), [])
        self.assertEqual(self.store.list(GEO_PREFERENCE), [])

    def test_list_treats_empty_value_as_empty_collection(self) -> None:
        self.blob_store.set(STORAGE_KEYS[SKILL], '')
        self.assertEqual(self.store.list(SKILL), [])

    def test_create_skill_scenario(self) -> None:
        skill = self.store.create(
            SKILL, {'name': 'Catwalk', 'category': 'modeling', 'level': 'advanced'}
        )

        self.assertEqual(skill['name'], 'Catwalk')
        self.assertEqual(skill['category'], 'modeling')
        self.assertEqual(skill['level'], 'advanced')
        self.assertEqual(set(skill), {'id', 'name', 'category', 'level'})
        self.assertEqual(self.store.list(SKILL), [skill])

    def test_create_assigns_distinct_ids(self) -> None:
        ids = [
            self.store.create(SKILL, {'name': f'Skill {i}', 'category': 'other', 'level': 'beginner'})['id']
            for i in range(20)
        ]
        self.assertEqual(len(set(ids)), 20)

    def test_create_overrides_supplied_id(self) -> None:
        skill = self.store.create(SKILL, {'id': 'fixed', 'name': 'Tango', 'category': 'artistic', 'level': 'expert'})
        self.assertNotEqual(skill['id'], 'fixed')

    def test_create_round_trips_through_serialized_blob(self) -> None:
        skill = self.store.create(
            SKILL, {'name': 'French', 'category': 'languages', 'level': 'expert', 'verified': True}
        )
        raw = self.blob_store.get(STORAGE_KEYS[SKILL])

        self.assertEqual(json.loads(raw), [skill])
        self.assertIs(self.store.list(SKILL)[0]['verified'], True)

    def test_update_merges_fields(self) -> None:
        skill = self.store.create(SKILL, {'name': 'Swimming', 'category': 'sports', 'level': 'beginner'})

        updated = self.store.update(SKILL, skill['id'], {'level': 'intermediate', 'verified': True})

        self.assertEqual(updated, {**skill, 'level': 'intermediate', 'verified': True})
        self.assertEqual(self.store.list(SKILL), [updated])

    def test_update_is_shallow(self) -> None:
        pref = self.store.create(GEO_PREFERENCE, {
            'city': 'Milan', 'country': 'Italy', 'radius': 50, 'preferred': True,
            'notes': {'agency': 'A', 'contact': 'B'},
        })

        updated = self.store.update(GEO_PREFERENCE, pref['id'], {'notes': {'agency': 'C'}})

        self.assertEqual(updated['notes'], {'agency': 'C'})

    def test_update_missing_id_returns_none_without_writing(self) -> None:
        self.store.create(SKILL, {'name': 'Singing', 'category': 'artistic', 'level': 'advanced'})
        before = self.store.list(SKILL)
        writes = len(self.blob_store.writes)

        self.assertIsNone(self.store.update(SKILL, 'nonexistent', {'level': 'expert'}))
        self.assertEqual(self.store.list(SKILL), before)
        self.assertEqual(len(self.blob_store.writes), writes)

    def test_delete(self) -> None:
        first = self.store.create(SKILL, {'name': 'Yoga', 'category': 'sports', 'level': 'expert'})
        second = self.store.create(SKILL, {'name': 'Italian', 'category': 'languages', 'level': 'beginner'})

        self.assertTrue(self.store.delete(SKILL, first['id']))
        self.assertEqual(self.store.list(SKILL), [second])

    def test_delete_missing_id_returns_false_without_writing(self) -> None:
        self.store.create(SKILL, {'name': 'Yoga', 'category': 'sports', 'level': 'expert'})
        writes = len(self.blob_store.writes)

        self.assertFalse(self.store.delete(SKILL, 'nonexistent'))
        self.assertEqual(len(self.blob_store.writes), writes)

    def test_each_mutation_writes_its_collection_once(self) -> None:
        skill = self.store.create(SKILL, {'name': 'Yoga', 'category': 'sports', 'level': 'expert'})
        self.store.update(SKILL, skill['id'], {'level': 'advanced'})
        self.store.delete(SKILL, skill['id'])

        self.assertEqual(self.blob_store.writes, [STORAGE_KEYS[SKILL]] * 3)

    def test_unknown_kind_raises(self) -> None:
        with self.assertRaises(ValueError):
            self.store.list('measurement')
        with self.assertRaises(ValueError):
            self.store.create('measurement', {})

    def test_non_array_value_raises(self) -> None:
        self.blob_store.set(STORAGE_KEYS[SKILL], '{"name": "Yoga"}')
        with self.assertRaises(ValueError):
            self.store.list(SKILL)


class ExperienceStoreOrderingTests(SimpleTestCase):
    """Experience order stays dense and matches position."""

    def setUp(self) -> None:
        self.store = ExperienceStore(InMemoryBlobStore())

    def _create(self, *clients):
        return [self.store.create(EXPERIENCE, experience_fields(client)) for client in clients]

    def test_create_appends_with_next_order(self) -> None:
        a, b, c = self._create('Dior', 'Chanel', 'Hermès')

        self.assertEqual([a['order'], b['order'], c['order']], [1, 2, 3])
        self.assertEqual(self.store.list(EXPERIENCE), [a, b, c])

    def test_delete_renumbers_remaining_experiences(self) -> None:
        a, b, c, d = self._create('A', 'B', 'C', 'D')

        self.assertTrue(self.store.delete(EXPERIENCE, b['id']))

        remaining = self.store.list(EXPERIENCE)
        self.assertEqual([exp['id'] for exp in remaining], [a['id'], c['id'], d['id']])
        self.assertEqual([exp['order'] for exp in remaining], [1, 2, 3])

    def test_delete_first_of_three(self) -> None:
        a, b, c = self._create('A', 'B', 'C')

        self.store.delete(EXPERIENCE, a['id'])

        remaining = self.store.list(EXPERIENCE)
        self.assertEqual([exp['client'] for exp in remaining], ['B', 'C'])
        self.assertEqual([exp['order'] for exp in remaining], [1, 2])

    def test_reorder_stamps_positions(self) -> None:
        a, b, c = self._create('A', 'B', 'C')

        result = self.store.reorder([c, a, b])

        self.assertEqual([exp['id'] for exp in result], [c['id'], a['id'], b['id']])
        self.assertEqual([exp['order'] for exp in result], [1, 2, 3])
        self.assertEqual(self.store.list(EXPERIENCE), result)

    def test_reorder_does_not_mutate_input(self) -> None:
        a, b = self._create('A', 'B')

        self.store.reorder([b, a])

        self.assertEqual(a['order'], 1)
        self.assertEqual(b['order'], 2)

    def test_create_after_reorder_and_delete_keeps_order_dense(self) -> None:
        a, b, c = self._create('A', 'B', 'C')
        self.store.reorder([c, b, a])
        self.store.delete(EXPERIENCE, b['id'])
        d = self.store.create(EXPERIENCE, experience_fields('D'))

        self.assertEqual(d['order'], 3)
        self.assertEqual(
            [(exp['client'], exp['order']) for exp in self.store.list(EXPERIENCE)],
            [('C', 1), ('A', 2), ('D', 3)],
        )


class FailingBlobStore(InMemoryBlobStore):
    """Blob store whose writes fail once `fail_writes` is set, like a full quota."""

    fail_writes = False

    def set(self, key, value):
        if self.fail_writes:
            raise OSError("storage quota exceeded")
        super().set(key, value)


class ExperienceStoreWriteTests(SimpleTestCase):
    """Experience mutations write once and let storage errors through."""

    def test_experience_mutations_write_once_each(self) -> None:
        blob_store = CountingBlobStore()
        store = ExperienceStore(blob_store)

        a = store.create(EXPERIENCE, experience_fields('A'))
        b = store.create(EXPERIENCE, experience_fields('B'))
        c = store.create(EXPERIENCE, experience_fields('C'))
        store.delete(EXPERIENCE, b['id'])
        store.reorder([c, a])

        self.assertEqual(blob_store.writes, [STORAGE_KEYS[EXPERIENCE]] * 5)

    def test_storage_errors_propagate_and_leave_collections_unchanged(self) -> None:
        blob_store = FailingBlobStore()
        store = ExperienceStore(blob_store)
        skill = store.create(SKILL, {'name': 'Catwalk', 'category': 'modeling', 'level': 'advanced'})
        exp = store.create(EXPERIENCE, experience_fields('A'))
        other = store.create(EXPERIENCE, experience_fields('B'))
        skills_before = store.list(SKILL)
        experiences_before = store.list(EXPERIENCE)

        blob_store.fail_writes = True

        with self.assertRaises(OSError):
            store.create(SKILL, {'name': 'French', 'category': 'languages', 'level': 'expert'})
        with self.assertRaises(OSError):
            store.update(SKILL, skill['id'], {'level': 'expert'})
        with self.assertRaises(OSError):
            store.delete(EXPERIENCE, exp['id'])
        with self.assertRaises(OSError):
            store.reorder([other, exp])

        self.assertEqual(store.list(SKILL), skills_before)
        self.assertEqual(store.list(EXPERIENCE), experiences_before)

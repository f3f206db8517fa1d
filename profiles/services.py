"""
Profile Service Layer
Persists a model's personal information, biography and body measurements.

Both are single JSON documents per user, kept in the same blob store as the
experience collections:
  - model_profile
  - model_measurements
"""
import json
import logging
import uuid
from datetime import date
from typing import Dict, Optional

from django.utils import timezone

from experience.storage import BlobStore

logger = logging.getLogger(__name__)


PROFILE_KEY = 'model_profile'
MEASUREMENTS_KEY = 'model_measurements'

LANGUAGES = ['fr', 'en']
UNIT_SYSTEMS = ['metric', 'imperial']
BIOGRAPHY_MAX_CHARS = 1000

CM_PER_INCH = 2.54


def empty_profile() -> Dict:
    return {
        'firstName': '',
        'lastName': '',
        'artistName': '',
        'birthDate': '',
        'nationality': '',
        'gender': '',
        'pronouns': '',
        'email': '',
        'phone': '',
        'socialLinks': {},
        'biography': {'fr': '', 'en': ''},
    }


def empty_measurements() -> Dict:
    return {
        'currentMeasurements': None,
        'measurementHistory': [],
        'clothingSizes': {'eu': '', 'uk': '', 'us': '', 'international': ''},
        'physicalCharacteristics': {
            'eyeColor': '',
            'hairColor': '',
            'distinctiveFeatures': {'tattoos': [], 'piercings': [], 'scars': []},
        },
        'preferredUnits': 'metric',
        'lastUpdated': None,
    }


def convert_length(value: float, from_units: str, to_units: str) -> float:
    """
    Convert a length between centimetres (metric) and inches (imperial).

    Args:
        value: Length to convert
        from_units: 'metric' or 'imperial'
        to_units: 'metric' or 'imperial'

    Raises:
        ValueError: If a unit system is unknown
    """
    for units in (from_units, to_units):
        if units not in UNIT_SYSTEMS:
            raise ValueError(f"Unknown unit system '{units}'")
    if from_units == to_units:
        return value
    if from_units == 'metric':
        return value / CM_PER_INCH
    return value * CM_PER_INCH


class ProfileStore:
    """
    Read and update the profile and measurements documents of one user.

    Updates are shallow merges: a nested object such as `biography` or
    `clothingSizes` given in an update replaces the stored one entirely.
    """

    def __init__(self, blob_store: BlobStore):
        self.blob_store = blob_store

    def _read(self, key: str, default: Dict) -> Dict:
        raw = self.blob_store.get(key)
        if not raw:
            return default
        document = json.loads(raw)
        if not isinstance(document, dict):
            raise ValueError(f"Stored value for '{key}' is not a JSON object")
        return {**default, **document}

    def _write(self, key: str, document: Dict) -> None:
        self.blob_store.set(key, json.dumps(document))

    # ---- profile ----

    def get_profile(self) -> Dict:
        """Profile document, with empty values for anything never saved."""
        return self._read(PROFILE_KEY, empty_profile())

    def update_profile(self, updates: Dict) -> Dict:
        profile = {**self.get_profile(), **updates}
        self._write(PROFILE_KEY, profile)
        logger.info("Updated profile fields: %s", ', '.join(sorted(updates)))
        return profile

    def set_biography(self, language: str, text: str) -> Dict:
        """
        Replace the biography in one language, keeping the other.

        Raises:
            ValueError: If the language is not supported
        """
        if language not in LANGUAGES:
            raise ValueError(f"Unsupported biography language '{language}'")
        biography = {**self.get_profile()['biography'], language: text}
        return self.update_profile({'biography': biography})

    # ---- measurements ----

    def get_measurements(self) -> Dict:
        return self._read(MEASUREMENTS_KEY, empty_measurements())

    def update_measurements(self, updates: Dict) -> Dict:
        """
        Shallow-merge updates into the measurements document.

        `lastUpdated` is set to the current time.
        """
        measurements = {
            **self.get_measurements(),
            **updates,
            'lastUpdated': timezone.now().isoformat(),
        }
        self._write(MEASUREMENTS_KEY, measurements)
        logger.info("Updated measurements fields: %s", ', '.join(sorted(updates)))
        return measurements

    def record_measurement(self, values: Dict, measured_on: Optional[date] = None) -> Dict:
        """
        Store a new set of body measurements.

        The entry becomes the current measurements and is appended to the
        history.

        Returns:
            The recorded measurement with its id and date
        """
        measurement = {
            **values,
            'id': str(uuid.uuid4()),
            'date': (measured_on or timezone.localdate()).isoformat(),
        }
        document = self.get_measurements()
        self.update_measurements({
            'currentMeasurements': measurement,
            'measurementHistory': document['measurementHistory'] + [measurement],
        })
        return measurement

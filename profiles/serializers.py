"""
Profiles app serializers

Validate personal information, biography and measurements payloads.
Field names match the persisted document keys.
"""
from rest_framework import serializers

from .services import BIOGRAPHY_MAX_CHARS, LANGUAGES, UNIT_SYSTEMS


class SocialLinksSerializer(serializers.Serializer):
    instagram = serializers.URLField(required=False, error_messages={'invalid': 'Invalid Instagram URL.'})
    facebook = serializers.URLField(required=False, error_messages={'invalid': 'Invalid Facebook URL.'})
    tiktok = serializers.URLField(required=False, error_messages={'invalid': 'Invalid TikTok URL.'})
    website = serializers.URLField(required=False, error_messages={'invalid': 'Invalid website URL.'})


class BiographySerializer(serializers.Serializer):
    fr = serializers.CharField(allow_blank=True, max_length=BIOGRAPHY_MAX_CHARS, trim_whitespace=False)
    en = serializers.CharField(allow_blank=True, max_length=BIOGRAPHY_MAX_CHARS, trim_whitespace=False)


class ProfileSerializer(serializers.Serializer):
    """
    Personal information of a model.

    Used with partial=True: only the submitted fields are validated and
    stored. Nested objects are replaced as a whole.
    """

    firstName = serializers.CharField(
        min_length=2,
        error_messages={'min_length': 'First name must contain at least 2 characters.'},
    )
    lastName = serializers.CharField(
        min_length=2,
        error_messages={'min_length': 'Last name must contain at least 2 characters.'},
    )
    artistName = serializers.CharField(required=False, allow_blank=True)
    birthDate = serializers.CharField(allow_blank=True)
    nationality = serializers.CharField(
        min_length=2,
        error_messages={'min_length': 'Nationality is required.'},
    )
    gender = serializers.CharField(min_length=1)
    pronouns = serializers.CharField(allow_blank=True)
    email = serializers.EmailField(error_messages={'invalid': 'Invalid email.'})
    phone = serializers.CharField(
        min_length=10,
        error_messages={'min_length': 'Invalid phone number.'},
    )
    socialLinks = SocialLinksSerializer()
    biography = BiographySerializer()
    profileImage = serializers.URLField(required=False, allow_blank=True)


class BiographyUpdateSerializer(serializers.Serializer):
    """Biography text for a single language."""

    language = serializers.ChoiceField(choices=LANGUAGES)
    text = serializers.CharField(allow_blank=True, max_length=BIOGRAPHY_MAX_CHARS, trim_whitespace=False)


class MeasurementSerializer(serializers.Serializer):
    """One set of body measurements, in centimetres and kilograms."""

    id = serializers.CharField(read_only=True)
    date = serializers.DateField(required=False)
    height = serializers.FloatField(min_value=100, max_value=250)
    weight = serializers.FloatField(min_value=30, max_value=150)
    bust = serializers.FloatField(min_value=60, max_value=150)
    waist = serializers.FloatField(min_value=40, max_value=130)
    hips = serializers.FloatField(min_value=60, max_value=150)
    inseam = serializers.FloatField(min_value=50, max_value=120)
    shoeSize = serializers.FloatField(min_value=34, max_value=50)
    notes = serializers.CharField(required=False, allow_blank=True)


class ClothingSizesSerializer(serializers.Serializer):
    eu = serializers.CharField(allow_blank=True)
    uk = serializers.CharField(allow_blank=True)
    us = serializers.CharField(allow_blank=True)
    international = serializers.CharField(allow_blank=True)


class DistinctiveFeaturesSerializer(serializers.Serializer):
    tattoos = serializers.ListField(child=serializers.CharField(), default=list)
    piercings = serializers.ListField(child=serializers.CharField(), default=list)
    scars = serializers.ListField(child=serializers.CharField(), default=list)


class PhysicalCharacteristicsSerializer(serializers.Serializer):
    eyeColor = serializers.CharField(min_length=1)
    hairColor = serializers.CharField(min_length=1)
    distinctiveFeatures = DistinctiveFeaturesSerializer(required=False)


class MeasurementsSerializer(serializers.Serializer):
    """
    Editable parts of the measurements document.

    Current measurements and history are only changed by recording a new
    measurement.
    """

    clothingSizes = ClothingSizesSerializer()
    physicalCharacteristics = PhysicalCharacteristicsSerializer()
    preferredUnits = serializers.ChoiceField(choices=UNIT_SYSTEMS)

"""
Experience app serializers

Validate incoming skill, experience and geographic preference payloads.
Field names match the persisted record keys.
"""
from rest_framework import serializers

from .services import EXPERIENCE_TYPES, SKILL_CATEGORIES, SKILL_LEVELS


class SkillSerializer(serializers.Serializer):
    """Skill payload. Category is free text, the known taxonomy is not enforced."""

    id = serializers.CharField(read_only=True)
    name = serializers.CharField(
        min_length=2,
        error_messages={'min_length': 'Name must contain at least 2 characters.'},
    )
    category = serializers.CharField(
        default=SKILL_CATEGORIES[-1],
        help_text=f"Free text; known categories: {', '.join(SKILL_CATEGORIES)}",
    )
    level = serializers.ChoiceField(choices=SKILL_LEVELS)
    verified = serializers.BooleanField(required=False)


class ExperienceSerializer(serializers.Serializer):
    """
    Professional experience payload.

    `order` is managed by the store and cannot be written directly;
    use the reorder endpoint instead.
    """

    id = serializers.CharField(read_only=True)
    type = serializers.ChoiceField(choices=EXPERIENCE_TYPES)
    client = serializers.CharField(
        min_length=2,
        error_messages={'min_length': 'Client name is required.'},
    )
    brand = serializers.CharField(required=False, allow_blank=True)
    startDate = serializers.CharField(
        error_messages={'required': 'Start date is required.'},
    )
    endDate = serializers.CharField(required=False, allow_blank=True)
    location = serializers.CharField(
        min_length=2,
        error_messages={'min_length': 'Location is required.'},
    )
    description = serializers.CharField(
        min_length=10,
        error_messages={'min_length': 'Description must contain at least 10 characters.'},
    )
    role = serializers.CharField(
        min_length=2,
        error_messages={'min_length': 'Role is required.'},
    )
    media = serializers.ListField(child=serializers.CharField(), required=False)
    featured = serializers.BooleanField(default=False)
    order = serializers.IntegerField(read_only=True)


class GeographicPreferenceSerializer(serializers.Serializer):
    """Preferred work area: a city and the radius around it, in km."""

    id = serializers.CharField(read_only=True)
    city = serializers.CharField(
        min_length=2,
        error_messages={'min_length': 'City is required.'},
    )
    country = serializers.CharField(
        min_length=2,
        error_messages={'min_length': 'Country is required.'},
    )
    radius = serializers.FloatField(min_value=0, max_value=1000)
    preferred = serializers.BooleanField(default=False)


class ReorderSerializer(serializers.Serializer):
    """Experience ids in their new display order."""

    ids = serializers.ListField(child=serializers.CharField(), allow_empty=True)

    def validate_ids(self, value):
        if len(set(value)) != len(value):
            raise serializers.ValidationError('ids must not contain duplicates.')
        return value

"""
Experience app views

ViewSets exposing the authenticated user's skills, experiences and
geographic preferences.
"""
from django.db import transaction
from rest_framework import status, viewsets
from rest_framework.decorators import action
from rest_framework.exceptions import NotFound, ValidationError
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response

from .serializers import (
    ExperienceSerializer,
    GeographicPreferenceSerializer,
    ReorderSerializer,
    SkillSerializer,
)
from .services import EXPERIENCE, GEO_PREFERENCE, SKILL, ExperienceStore
from .storage import DatabaseBlobStore


class RecordViewSet(viewsets.ViewSet):
    """
    Base ViewSet for one record collection.

    GET    /<collection>/       - List records
    POST   /<collection>/       - Create a record
    PATCH  /<collection>/<id>/  - Partially update a record
    DELETE /<collection>/<id>/  - Delete a record

    Subclasses set `kind` and `serializer_class`.
    """

    permission_classes = [IsAuthenticated]
    kind = None
    serializer_class = None

    def get_store(self) -> ExperienceStore:
        """Store bound to the current user's blob storage."""
        return ExperienceStore(DatabaseBlobStore(self.request.user))

    def list(self, request):
        return Response(self.get_store().list(self.kind))

    def create(self, request):
        serializer = self.serializer_class(data=request.data)
        serializer.is_valid(raise_exception=True)
        with transaction.atomic():
            record = self.get_store().create(self.kind, serializer.validated_data)
        return Response(record, status=status.HTTP_201_CREATED)

    def partial_update(self, request, pk=None):
        serializer = self.serializer_class(data=request.data, partial=True)
        serializer.is_valid(raise_exception=True)
        with transaction.atomic():
            record = self.get_store().update(self.kind, pk, serializer.validated_data)
        if record is None:
            raise NotFound(f"No {self.kind} with id '{pk}'.")
        return Response(record)

    def destroy(self, request, pk=None):
        with transaction.atomic():
            deleted = self.get_store().delete(self.kind, pk)
        if not deleted:
            raise NotFound(f"No {self.kind} with id '{pk}'.")
        return Response(status=status.HTTP_204_NO_CONTENT)


class SkillViewSet(RecordViewSet):
    kind = SKILL
    serializer_class = SkillSerializer


class ExperienceViewSet(RecordViewSet):
    """Experiences, returned in their display order."""

    kind = EXPERIENCE
    serializer_class = ExperienceSerializer

    @action(detail=False, methods=['post'])
    def reorder(self, request):
        """
        Persist a new display order.

        POST /experiences/reorder/ with {"ids": [...]}

        The ids must be exactly the ids currently stored.
        """
        serializer = ReorderSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        ids = serializer.validated_data['ids']

        store = self.get_store()
        with transaction.atomic():
            by_id = {exp['id']: exp for exp in store.list(EXPERIENCE)}
            if set(ids) != set(by_id):
                raise ValidationError({'ids': 'ids must match the stored experiences exactly.'})
            reordered = store.reorder([by_id[exp_id] for exp_id in ids])

        return Response(reordered)


class GeographicPreferenceViewSet(RecordViewSet):
    kind = GEO_PREFERENCE
    serializer_class = GeographicPreferenceSerializer

"""
Profiles app views

Endpoints for the authenticated user's profile, biography and measurements.
"""
from django.db import transaction
from rest_framework import status
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response
from rest_framework.views import APIView

from experience.storage import DatabaseBlobStore

from .serializers import (
    BiographyUpdateSerializer,
    MeasurementSerializer,
    MeasurementsSerializer,
    ProfileSerializer,
)
from .services import ProfileStore


class ProfileStoreMixin:
    permission_classes = [IsAuthenticated]

    def get_store(self) -> ProfileStore:
        """Store bound to the current user's blob storage."""
        return ProfileStore(DatabaseBlobStore(self.request.user))


class ProfileView(ProfileStoreMixin, APIView):
    """
    Retrieve or update the authenticated user's profile.

    GET /api/profile/ - Get the profile, empty fields if never saved
    PATCH /api/profile/ - Update the submitted fields
    """

    def get(self, request):
        return Response(self.get_store().get_profile())

    def patch(self, request):
        serializer = ProfileSerializer(data=request.data, partial=True)
        serializer.is_valid(raise_exception=True)
        with transaction.atomic():
            profile = self.get_store().update_profile(serializer.validated_data)
        return Response(profile)


class BiographyView(ProfileStoreMixin, APIView):
    """
    Replace the biography in one language.

    PUT /api/profile/biography/ with {"language": "fr", "text": "..."}
    """

    def put(self, request):
        serializer = BiographyUpdateSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        with transaction.atomic():
            profile = self.get_store().set_biography(
                serializer.validated_data['language'],
                serializer.validated_data['text'],
            )
        return Response(profile['biography'])


class MeasurementsView(ProfileStoreMixin, APIView):
    """
    Retrieve or update the measurements document.

    GET /api/profile/measurements/
    PATCH /api/profile/measurements/ - clothing sizes, physical characteristics, units
    """

    def get(self, request):
        return Response(self.get_store().get_measurements())

    def patch(self, request):
        serializer = MeasurementsSerializer(data=request.data, partial=True)
        serializer.is_valid(raise_exception=True)
        with transaction.atomic():
            measurements = self.get_store().update_measurements(serializer.validated_data)
        return Response(measurements)


class MeasurementHistoryView(ProfileStoreMixin, APIView):
    """
    List or record body measurements.

    GET /api/profile/measurements/history/
    POST /api/profile/measurements/history/ - Record new current measurements
    """

    def get(self, request):
        return Response(self.get_store().get_measurements()['measurementHistory'])

    def post(self, request):
        serializer = MeasurementSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        values = dict(serializer.validated_data)
        measured_on = values.pop('date', None)
        with transaction.atomic():
            measurement = self.get_store().record_measurement(values, measured_on)
        return Response(measurement, status=status.HTTP_201_CREATED)

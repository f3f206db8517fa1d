"""
Profiles app URLs
"""
from django.urls import path
from .views import BiographyView, MeasurementHistoryView, MeasurementsView, ProfileView

urlpatterns = [
    path('', ProfileView.as_view(), name='profile'),
    path('biography/', BiographyView.as_view(), name='profile-biography'),
    path('measurements/', MeasurementsView.as_view(), name='profile-measurements'),
    path('measurements/history/', MeasurementHistoryView.as_view(), name='profile-measurement-history'),
]

"""
Experience app URLs
"""
from django.urls import include, path
from rest_framework.routers import DefaultRouter

from .views import ExperienceViewSet, GeographicPreferenceViewSet, SkillViewSet

router = DefaultRouter()
router.register(r'skills', SkillViewSet, basename='skill')
router.register(r'experiences', ExperienceViewSet, basename='experience')
router.register(r'geo-preferences', GeographicPreferenceViewSet, basename='geo-preference')

urlpatterns = [
    path('', include(router.urls)),
]

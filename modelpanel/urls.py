"""
URL configuration for modelpanel project.

The `urlpatterns` list routes URLs to views. For more information please see:
    https://docs.djangoproject.com/en/4.2/topics/http/urls/
"""
from django.contrib import admin
from django.urls import path, include

from accounts.views import navigation

urlpatterns = [
    path('admin/', admin.site.urls),
    path('api/navigation/', navigation, name='navigation'),
    path('api/experience/', include('experience.urls')),
    path('api/profile/', include('profiles.urls')),
    path('api-auth/', include('rest_framework.urls')),
]

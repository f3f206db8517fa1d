from django.contrib import admin
from .models import StorageEntry


@admin.register(StorageEntry)
class StorageEntryAdmin(admin.ModelAdmin):
    """Admin interface for StorageEntry."""

    list_display = ['user', 'key', 'updated_at']
    list_filter = ['key', 'updated_at']
    search_fields = ['user__username', 'user__email', 'key']
    readonly_fields = ['updated_at']

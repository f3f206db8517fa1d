"""
Experience app models

StorageEntry model holding one serialized collection per user and key.

The three experience collections are stored as JSON arrays:
  - model_skills
  - model_experiences
  - model_geographic_preferences
"""
from django.conf import settings
from django.db import models


class StorageEntry(models.Model):
    """
    A single key-value blob owned by a user.

    The value is kept as raw text; parsing and serialization belong to the
    experience store so that every backend persists byte-identical payloads.
    """

    user = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        related_name='storage_entries',
    )
    key = models.CharField(max_length=100)
    value = models.TextField(blank=True)
    updated_at = models.DateTimeField(auto_now=True)

    def __str__(self):
        return f"{self.key} for {self.user.username}"

    class Meta:
        verbose_name = 'Storage Entry'
        verbose_name_plural = 'Storage Entries'
        constraints = [
            models.UniqueConstraint(fields=['user', 'key'], name='unique_storage_entry_per_user'),
        ]

"""Django app configuration for the track scheduler."""

from django.apps import AppConfig


class DjangoTracksConfig(AppConfig):
    """Configuration for the track scheduler app."""

    name = "django_tracks"
    label = "django_tracks"
    verbose_name = "Conference Tracks"

"""Django settings for the example track scheduling project.

Run the scheduler against the bundled proposals::

    cd examples
    python manage.py schedule_tracks --proposals proposals.toml

Venue windows and the event name can be overridden through ``.env``.
"""

import os
from pathlib import Path

from dotenv import load_dotenv

BASE_DIR = Path(__file__).resolve().parent
load_dotenv(BASE_DIR / ".env")

SECRET_KEY = "example-dev-key-not-for-production"
DEBUG = True
ALLOWED_HOSTS = ["*"]

INSTALLED_APPS = [
    "django.contrib.contenttypes",
    "django_tracks",
]

DATABASES = {
    "default": {
        "ENGINE": "django.db.backends.sqlite3",
        "NAME": BASE_DIR / "db.sqlite3",
    }
}

DEFAULT_AUTO_FIELD = "django.db.models.BigAutoField"
USE_TZ = True

LOGGING = {
    "version": 1,
    "disable_existing_loggers": False,
    "formatters": {
        "simple": {"format": "%(levelname)s %(name)s: %(message)s"},
    },
    "handlers": {
        "console": {"class": "logging.StreamHandler", "formatter": "simple"},
    },
    "loggers": {
        "django_tracks": {
            "handlers": ["console"],
            "level": os.environ.get("DJANGO_TRACKS_LOG_LEVEL", "INFO"),
        },
    },
}

DJANGO_TRACKS = {
    "event_name": os.environ.get("DJANGO_TRACKS_EVENT_NAME", "Vrluckyin Events"),
    "venue": {
        "morning_start": os.environ.get("DJANGO_TRACKS_MORNING_START", "09:00"),
        "networking_end": os.environ.get("DJANGO_TRACKS_NETWORKING_END", "17:00"),
    },
}

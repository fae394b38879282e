"""
=============================================================================
SHIFTBOARD SETTINGS
=============================================================================

Django settings for the shiftboard project.

Every deployment-specific value is read from a SHIFTBOARD_* environment
variable so the same settings module serves development, tests and
production:

- SHIFTBOARD_SECRET_KEY    - Django secret key
- SHIFTBOARD_DEBUG         - "1"/"true" enables debug mode
- SHIFTBOARD_ALLOWED_HOSTS - comma-separated host names
- SHIFTBOARD_DB_PATH       - SQLite database file
- SHIFTBOARD_LOG_LEVEL     - level for the scheduling app loggers

=============================================================================
"""
from __future__ import annotations

import os
from pathlib import Path

BASE_DIR = Path(__file__).resolve().parent.parent


def _env_bool(name: str, default: bool = False) -> bool:
    raw = os.environ.get(name)
    if raw is None:
        return default
    return raw.strip().lower() in ("1", "true", "yes", "on")


def _env_list(name: str, default: str = "") -> list[str]:
    raw = os.environ.get(name, default)
    return [item.strip() for item in raw.split(",") if item.strip()]


# =============================================================================
# CORE
# =============================================================================

SECRET_KEY = os.environ.get("SHIFTBOARD_SECRET_KEY", "django-insecure-shiftboard-dev-key")
DEBUG = _env_bool("SHIFTBOARD_DEBUG", default=False)
ALLOWED_HOSTS = _env_list("SHIFTBOARD_ALLOWED_HOSTS", "localhost,127.0.0.1,testserver")

INSTALLED_APPS = [
    "django.contrib.admin",
    "django.contrib.auth",
    "django.contrib.contenttypes",
    "django.contrib.sessions",
    "django.contrib.messages",
    "django.contrib.staticfiles",
    "apps.scheduling",
]

MIDDLEWARE = [
    "django.middleware.security.SecurityMiddleware",
    "django.contrib.sessions.middleware.SessionMiddleware",
    "django.middleware.common.CommonMiddleware",
    "django.middleware.csrf.CsrfViewMiddleware",
    "django.contrib.auth.middleware.AuthenticationMiddleware",
    "django.contrib.messages.middleware.MessageMiddleware",
    "django.middleware.clickjacking.XFrameOptionsMiddleware",
]

ROOT_URLCONF = "shiftboard.urls"
WSGI_APPLICATION = "shiftboard.wsgi.application"

TEMPLATES = [
    {
        "BACKEND": "django.template.backends.django.DjangoTemplates",
        "DIRS": [],
        "APP_DIRS": True,
        "OPTIONS": {
            "context_processors": [
                "django.template.context_processors.request",
                "django.contrib.auth.context_processors.auth",
                "django.contrib.messages.context_processors.messages",
            ],
        },
    },
]


# =============================================================================
# DATABASE
# =============================================================================

DATABASES = {
    "default": {
        "ENGINE": "django.db.backends.sqlite3",
        "NAME": os.environ.get("SHIFTBOARD_DB_PATH", str(BASE_DIR / "db.sqlite3")),
    }
}

DEFAULT_AUTO_FIELD = "django.db.models.BigAutoField"


# =============================================================================
# I18N / TIME
# =============================================================================
# Shift dates and times are naive civil values; only Week.published_at is
# an instant, stored in UTC.

LANGUAGE_CODE = "en-us"
TIME_ZONE = "UTC"
USE_I18N = True
USE_TZ = True

STATIC_URL = "static/"


# =============================================================================
# LOGGING
# =============================================================================

LOG_LEVEL = os.environ.get("SHIFTBOARD_LOG_LEVEL", "INFO").upper()

LOGGING = {
    "version": 1,
    "disable_existing_loggers": False,
    "formatters": {
        "standard": {
            "format": "%(asctime)s %(levelname)s [%(name)s] %(message)s",
        },
    },
    "handlers": {
        "console": {
            "class": "logging.StreamHandler",
            "formatter": "standard",
        },
    },
    "loggers": {
        "apps": {
            "handlers": ["console"],
            "level": LOG_LEVEL,
            "propagate": False,
        },
        "django.request": {
            "handlers": ["console"],
            "level": "WARNING",
            "propagate": False,
        },
    },
}

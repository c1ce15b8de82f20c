"""
ESS - Django Settings (Infrastructure Only)
=============================================
Django is the container for configuration, logging and the HTTP
adapter. The event log is not stored in a database.
"""

import os
from pathlib import Path

# ── Paths ─────────────────────────────────────────────────────
BASE_DIR = Path(__file__).resolve().parent.parent

# ── Security ──────────────────────────────────────────────────
SECRET_KEY = os.environ.get("ESS_SECRET_KEY", "ess-dev-key-replace-before-deployment")

DEBUG = os.environ.get("ESS_DEBUG", "1") == "1"

ALLOWED_HOSTS = ["localhost", "127.0.0.1", "testserver"]

# ── Installed Apps ────────────────────────────────────────────
INSTALLED_APPS = [
    "django.contrib.contenttypes",
]

# ── Middleware ────────────────────────────────────────────────
MIDDLEWARE = [
    "django.middleware.security.SecurityMiddleware",
    "django.middleware.common.CommonMiddleware",
]

# ── URL ───────────────────────────────────────────────────────
ROOT_URLCONF = "config.urls"

# ── Database ──────────────────────────────────────────────────
# Unused by ESS itself; Django requires a default entry.
DATABASES = {
    "default": {
        "ENGINE": "django.db.backends.sqlite3",
        "NAME": BASE_DIR / "db.sqlite3",
    }
}

# ── Internationalization ──────────────────────────────────────
LANGUAGE_CODE = "en-us"
TIME_ZONE = "UTC"
USE_I18N = True
USE_TZ = True

DEFAULT_AUTO_FIELD = "django.db.models.BigAutoField"

# ── ESS ───────────────────────────────────────────────────────
ESS_APPLICATION_NAME = os.environ.get("ESS_APPLICATION_NAME", "ess")
ESS_EVENT_STORE = os.environ.get("ESS_EVENT_STORE", "memory")
ESS_EVENT_LOG = os.environ.get("ESS_EVENT_LOG", str(BASE_DIR / "var" / "events.jsonl"))

# ── Logging ───────────────────────────────────────────────────
LOGGING = {
    "version": 1,
    "disable_existing_loggers": False,
    "formatters": {
        "plain": {"format": "%(asctime)s %(name)s %(levelname)s %(message)s"},
    },
    "handlers": {
        "console": {"class": "logging.StreamHandler", "formatter": "plain"},
    },
    "loggers": {
        "ess": {
            "handlers": ["console"],
            "level": os.environ.get("ESS_LOG_LEVEL", "INFO"),
        },
    },
}

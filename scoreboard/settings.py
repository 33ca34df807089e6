"""
Django settings for scoreboard project.

모든 값은 환경 변수에서 읽습니다. MONGODB_URI 가 없으면 서버가 시작되지 않습니다.
"""

import os
from pathlib import Path

from django.core.exceptions import ImproperlyConfigured

BASE_DIR = Path(__file__).resolve().parent.parent

MONGODB_URI = os.environ.get("MONGODB_URI")
if not MONGODB_URI:
    raise ImproperlyConfigured("MONGODB_URI is not defined in environment variables")

MONGODB_DB_NAME = os.environ.get("MONGODB_DB_NAME", "mydb")
MONGODB_COLLECTION = os.environ.get("MONGODB_COLLECTION", "entries")
MONGODB_TIMEOUT_MS = int(os.environ.get("MONGODB_TIMEOUT_MS", "5000"))

# 리더보드에 남겨둘 기록 수
LEADERBOARD_SIZE = int(os.environ.get("LEADERBOARD_SIZE", "3"))

SECRET_KEY = os.environ.get(
    "DJANGO_SECRET_KEY", "django-insecure-scoreboard-development-key"
)
DEBUG = os.environ.get("DJANGO_DEBUG", "False").lower() in ("1", "true", "yes")
ALLOWED_HOSTS = [
    host.strip()
    for host in os.environ.get("DJANGO_ALLOWED_HOSTS", "*").split(",")
    if host.strip()
]

INSTALLED_APPS = [
    "rest_framework",
    "leaderboard",
]

MIDDLEWARE = [
    "django.middleware.security.SecurityMiddleware",
    "django.middleware.common.CommonMiddleware",
]

ROOT_URLCONF = "scoreboard.urls"
WSGI_APPLICATION = "scoreboard.wsgi.application"
ASGI_APPLICATION = "scoreboard.asgi.application"

# 기록은 MongoDB 에만 저장합니다.
DATABASES = {}

LANGUAGE_CODE = "en-us"
TIME_ZONE = "UTC"
USE_I18N = False
USE_TZ = True

APPEND_SLASH = False

REST_FRAMEWORK = {
    "DEFAULT_AUTHENTICATION_CLASSES": [],
    "DEFAULT_PERMISSION_CLASSES": [],
    "UNAUTHENTICATED_USER": None,
    "DEFAULT_RENDERER_CLASSES": ["rest_framework.renderers.JSONRenderer"],
    "DEFAULT_PARSER_CLASSES": [
        "rest_framework.parsers.JSONParser",
        "leaderboard.parsers.PlainTextParser",
    ],
    "EXCEPTION_HANDLER": "leaderboard.exceptions.exception_handler",
}

LOG_LEVEL = os.environ.get("LOG_LEVEL", "INFO").upper()

LOGGING = {
    "version": 1,
    "disable_existing_loggers": False,
    "formatters": {
        "simple": {
            "format": "[{asctime}] {levelname} {name}: {message}",
            "style": "{",
        },
    },
    "handlers": {
        "console": {
            "class": "logging.StreamHandler",
            "formatter": "simple",
        },
    },
    "root": {
        "handlers": ["console"],
        "level": "WARNING",
    },
    "loggers": {
        "leaderboard": {
            "handlers": ["console"],
            "level": LOG_LEVEL,
            "propagate": False,
        },
    },
}

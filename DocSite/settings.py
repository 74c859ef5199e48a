"""
Minimal Django settings for rendering documentation comments.

Sites embedding the ``xmldoc`` app set the XMLDOC_* keys in their own
settings module; these values are the stand-alone defaults used by the
management command and the Celery worker.
"""

import os

SECRET_KEY = os.environ.get("DJANGO_SECRET_KEY", "docsite-insecure-development-key")
DEBUG = os.environ.get("DJANGO_DEBUG", "0") == "1"
ALLOWED_HOSTS = []

INSTALLED_APPS = [
    "xmldoc",
]

TEMPLATES = [
    {
        "BACKEND": "django.template.backends.django.DjangoTemplates",
        "DIRS": [],
        "APP_DIRS": True,
        "OPTIONS": {},
    },
]

DATABASES = {}

USE_TZ = True

LOGGING = {
    "version": 1,
    "disable_existing_loggers": False,
    "handlers": {
        "console": {"class": "logging.StreamHandler"},
    },
    "loggers": {
        "xmldoc": {
            "handlers": ["console"],
            "level": os.environ.get("XMLDOC_LOG_LEVEL", "WARNING"),
        },
    },
}

# Celery
CELERY_BROKER_URL = os.environ.get("CELERY_BROKER_URL", "redis://localhost:6379/0")
CELERY_RESULT_BACKEND = os.environ.get("CELERY_RESULT_BACKEND", "redis://localhost:6379/0")
CELERY_TASK_SERIALIZER = "json"
CELERY_RESULT_SERIALIZER = "json"
CELERY_ACCEPT_CONTENT = ["json"]

# Documentation comments
XMLDOC_CSS_CLASSES = {
    "code": "lang-csharp",
    "table": "table",
}
XMLDOC_SANITIZE = True
XMLDOC_MAX_DEPTH = 200
XMLDOC_WORKERS = 4

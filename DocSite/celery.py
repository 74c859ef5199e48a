import os

from celery import Celery

# Documentation workers need the XMLDOC_* settings
os.environ.setdefault("DJANGO_SETTINGS_MODULE", "DocSite.settings")

app = Celery("DocSite")

# CELERY_BROKER_URL, CELERY_RESULT_BACKEND, ... come from Django settings
app.config_from_object("django.conf:settings", namespace="CELERY")

# Picks up xmldoc.tasks once Django is ready
app.autodiscover_tasks(lambda: ["xmldoc"])

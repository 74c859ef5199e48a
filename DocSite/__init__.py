# Expose the Celery app as "celery_app" so `celery -A DocSite` finds it
from .celery import app as celery_app

__all__ = ("celery_app",)

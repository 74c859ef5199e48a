from django.apps import AppConfig


class XmldocConfig(AppConfig):
    default_auto_field = 'django.db.models.BigAutoField'
    name = 'xmldoc'
    verbose_name = 'XML documentation comments'

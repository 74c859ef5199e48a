from django.conf import settings

from .registry import StylingClassRegistry
from .rewriters import DEFAULT_MAX_DEPTH

DEFAULTS = {
    "css_classes": {},
    "sanitize": True,
    "max_depth": DEFAULT_MAX_DEPTH,
    "workers": 4,
}


def get_xmldoc_config():
    """
    Configuration for documentation comment rendering.

    Read from Django settings on every call so that ``override_settings``
    and per-site settings modules take effect:

        XMLDOC_CSS_CLASSES = {"code": "lang-cs", "table": "table table-striped"}
        XMLDOC_SANITIZE = True
        XMLDOC_MAX_DEPTH = 200
        XMLDOC_WORKERS = 4
    """
    return {
        "css_classes": dict(getattr(settings, "XMLDOC_CSS_CLASSES", DEFAULTS["css_classes"]) or {}),
        "sanitize": bool(getattr(settings, "XMLDOC_SANITIZE", DEFAULTS["sanitize"])),
        "max_depth": int(getattr(settings, "XMLDOC_MAX_DEPTH", DEFAULTS["max_depth"])),
        "workers": int(getattr(settings, "XMLDOC_WORKERS", DEFAULTS["workers"])),
    }


def get_css_classes() -> StylingClassRegistry:
    return StylingClassRegistry(get_xmldoc_config()["css_classes"])

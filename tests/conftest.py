"""
Root pytest configuration.

Configures Django in-process so that the settings-driven parts of the app
(config, template tags, management command) can run without a settings
module on disk.
"""

from __future__ import annotations

import django
import pytest
from django.conf import settings

from xmldoc.comments import CrefTarget, CrossReferenceRegistry, DocumentedSymbol, XmlDocumentationParser


def pytest_configure(config) -> None:
    if not settings.configured:
        settings.configure(
            INSTALLED_APPS=["xmldoc"],
            TEMPLATES=[
                {
                    "BACKEND": "django.template.backends.django.DjangoTemplates",
                    "APP_DIRS": True,
                }
            ],
            XMLDOC_CSS_CLASSES={},
            XMLDOC_SANITIZE=True,
            XMLDOC_WORKERS=2,
        )
        django.setup()


class RecordingTrace:
    """Diagnostic sink that keeps every warning it receives."""

    def __init__(self) -> None:
        self.warnings: list[str] = []

    def warning(self, message: str) -> None:
        self.warnings.append(message)


@pytest.fixture
def trace() -> RecordingTrace:
    return RecordingTrace()


@pytest.fixture
def crefs() -> CrossReferenceRegistry:
    return CrossReferenceRegistry(
        {
            "T:Foo": CrefTarget(link="/foo.html", display_name="Foo"),
            "T:Bar": CrefTarget(link="/bar.html", display_name="Bar"),
            "T:System.ArgumentException": CrefTarget(
                link="/system/argumentexception.html", display_name="ArgumentException"
            ),
        }
    )


@pytest.fixture
def make_parser(crefs, trace):
    """Build a parser for a raw comment with the shared fixtures."""

    def _make(xml, css_classes=None, **kwargs):
        symbol = DocumentedSymbol(comment_id="T:Widget", name="Widget", documentation_xml=xml)
        return XmlDocumentationParser(symbol, crefs, css_classes or {}, trace=trace, **kwargs)

    return _make

# xmldoc/templatetags/xmldoc_tags.py

from django import template
from django.utils.safestring import mark_safe

from xmldoc.comments.config import get_xmldoc_config
from xmldoc.comments.sanitizer import sanitize_fragment

register = template.Library()


def _finish(html):
    if get_xmldoc_config()["sanitize"]:
        html = sanitize_fragment(html)
    return mark_safe(html)


def _join_section(parser, section):
    if parser is None:
        return ""
    return _finish("".join(entry.html for entry in parser.section(section)))


@register.filter(name="xmldoc_summary")
def xmldoc_summary_filter(parser):
    return _join_section(parser, "summary")


@register.filter(name="xmldoc_remarks")
def xmldoc_remarks_filter(parser):
    return _join_section(parser, "remarks")


@register.filter(name="xmldoc_example")
def xmldoc_example_filter(parser):
    return _join_section(parser, "example")


@register.filter(name="xmldoc_returns")
def xmldoc_returns_filter(parser):
    return _join_section(parser, "returns")


@register.simple_tag
def xmldoc_section(parser, section):
    """Template tag rendering any repeatable section by name"""
    return _join_section(parser, section)


@register.simple_tag
def xmldoc_params(parser):
    """
    Parameter entries as (name, html) pairs for iteration in templates:

        {% xmldoc_params parser as params %}
        {% for name, html in params %}<dt>{{ name }}</dt><dd>{{ html }}</dd>{% endfor %}
    """
    if parser is None:
        return []
    return [(entry.key, _finish(entry.html)) for entry in parser.params()]


@register.simple_tag
def xmldoc_see_also(parser):
    """Comment-level see-also links, already rendered as HTML"""
    if parser is None:
        return []
    return [_finish(link) for link in parser.see_also()]

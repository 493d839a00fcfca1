from django import template

from locations.manager import format_coordinate

register = template.Library()


@register.filter
def get_id(document):
    """Backend documents key their identifier as ``$id``, which templates can't address."""
    if isinstance(document, dict):
        return document.get("$id", "")
    return ""


@register.filter
def coordinate(value):
    return format_coordinate(value)

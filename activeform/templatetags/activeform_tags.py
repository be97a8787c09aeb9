"""Template tags exposing :class:`ActiveForm` to Django templates.

Example::

    {% load activeform_tags %}
    {% active_form form type="horizontal" form_config=layout as af %}
    {{ af.begin }}
    {% active_field af "email" %}
    {% active_field af "password" input="password_input" %}
    {% active_field af "remember_me" input="checkbox" %}
    {{ af.end }}
"""

from __future__ import annotations

from django import template
from django.core.exceptions import ImproperlyConfigured
from django.utils.html import mark_safe

from ..forms import ActiveForm

register = template.Library()

INPUT_METHODS = (
    "auto_input",
    "text_input",
    "password_input",
    "textarea",
    "dropdown_list",
    "list_box",
    "file_input",
    "checkbox",
    "radio",
    "checkbox_list",
    "radio_list",
    "checkbox_button_group",
    "radio_button_group",
    "multiselect",
    "static_input",
)


@register.simple_tag
def active_form(form, type=None, **options):
    """Wrap ``form`` in an :class:`ActiveForm`; use with ``as`` to keep it in the context."""

    return ActiveForm(form, type, **options)


@register.simple_tag
def active_field(active_form, name, input="auto_input", label=None, hint=None, **options):
    """Render field ``name`` of ``active_form``.

    ``input`` names the input method, ``label`` and ``hint`` replace the
    field's own texts.  Remaining keyword arguments are field options.
    """

    if input not in INPUT_METHODS:
        raise ImproperlyConfigured(f"Unknown input method {input!r} for field '{name}'.")
    field = active_form.field(name, **options)
    if label is not None:
        field.label(label)
    if hint is not None:
        field.hint(hint)
    getattr(field, input)()
    return field.render()


@register.simple_tag
def render_field(active_form, name, **attrs):
    """Render only the input of field ``name``, applying the form's states and extra HTML attributes."""

    field = active_form.field(name).widget(with_class=True, **attrs)
    return mark_safe(field.parts["{input}"])

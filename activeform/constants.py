"""Layout enumerations and the immutable Bootstrap class tables."""

from __future__ import annotations

from types import MappingProxyType

from django.db import models

NOT_SET = ""
DEFAULT_LABEL_SPAN = 2
FULL_SPAN = 12
SCREEN_READER = "sr-only"
MULTI_SELECT_HEIGHT = "145px"

TYPE_CHECKBOX = "checkbox"
TYPE_RADIO = "radio"

HINT_DEFAULT = 1
HINT_SPECIAL = 2

BS_VERSIONS = (3, 4, 5)


class LayoutType(models.TextChoices):
    VERTICAL = "vertical", "Vertical"
    HORIZONTAL = "horizontal", "Horizontal"
    INLINE = "inline", "Inline"
    FLOATING = "floating", "Floating"


class DeviceSize(models.TextChoices):
    TINY = "xs", "Tiny"
    SMALL = "sm", "Small"
    MEDIUM = "md", "Medium"
    LARGE = "lg", "Large"


def _frozen(table):
    return MappingProxyType({key: MappingProxyType(dict(value)) for key, value in table.items()})


FORM_TYPE_DEFAULTS = _frozen({
    LayoutType.VERTICAL: {"show_labels": True, "show_errors": True, "show_hints": True},
    LayoutType.HORIZONTAL: {"show_labels": True, "show_errors": True, "show_hints": True},
    LayoutType.INLINE: {"show_labels": False, "show_errors": False, "show_hints": True},
    LayoutType.FLOATING: {"show_labels": True, "show_errors": True, "show_hints": True},
})

COL_CSS_PREFIXES = _frozen({
    3: {"xs": "col-xs-", "sm": "col-sm-", "md": "col-md-", "lg": "col-lg-"},
    4: {"xs": "col-", "sm": "col-sm-", "md": "col-md-", "lg": "col-lg-"},
    5: {"xs": "col-", "sm": "col-sm-", "md": "col-md-", "lg": "col-lg-"},
})

OFFSET_CSS_PREFIXES = _frozen({
    3: {"xs": "col-xs-offset-", "sm": "col-sm-offset-", "md": "col-md-offset-", "lg": "col-lg-offset-"},
    4: {"xs": "offset-", "sm": "offset-sm-", "md": "offset-md-", "lg": "offset-lg-"},
    5: {"xs": "offset-", "sm": "offset-sm-", "md": "offset-md-", "lg": "offset-lg-"},
})

# CSS class name variants keyed by Bootstrap major version.
BS_CSS = _frozen({
    3: {
        "field": "form-group",
        "control_label": "control-label",
        "form_control": "form-control",
        "select": "form-control",
        "form_control_static": "form-control-static",
        "screen_reader": "sr-only",
        "error": "help-block help-block-error",
        "hint": "help-block",
        "has_error": "has-error",
        "default_btn": "btn-default",
        "icon_prefix": "glyphicon glyphicon-",
        "hint_icon": "glyphicon glyphicon-question-sign",
        "addon_text": "input-group-addon",
        "addon_button": "input-group-btn",
        "size_lg": "input-lg",
        "size_sm": "input-sm",
    },
    4: {
        "field": "form-group",
        "control_label": "col-form-label",
        "form_control": "form-control",
        "select": "form-control",
        "form_control_static": "form-control-plaintext",
        "screen_reader": "sr-only",
        "error": "invalid-feedback",
        "hint": "form-text text-muted",
        "has_error": "",
        "default_btn": "btn-secondary",
        "icon_prefix": "fas fa-",
        "hint_icon": "fas fa fa-question-circle",
        "addon_text": "input-group-text",
        "addon_button": "",
        "size_lg": "form-control-lg",
        "size_sm": "form-control-sm",
    },
    5: {
        "field": "mb-3",
        "control_label": "col-form-label",
        "form_control": "form-control",
        "select": "form-select",
        "form_control_static": "form-control-plaintext",
        "screen_reader": "visually-hidden",
        "error": "invalid-feedback",
        "hint": "form-text",
        "has_error": "",
        "default_btn": "btn-outline-secondary",
        "icon_prefix": "bi bi-",
        "hint_icon": "bi bi-question-circle",
        "addon_text": "input-group-text",
        "addon_button": "",
        "size_lg": "form-control-lg",
        "size_sm": "form-control-sm",
    },
})

PLACEHOLDERS = (
    "{beginLabel}",
    "{labelTitle}",
    "{endLabel}",
    "{label}",
    "{beginWrapper}",
    "{endWrapper}",
    "{input}",
    "{hint}",
    "{error}",
)

DEFAULT_TEMPLATE = "{label}\n{beginWrapper}\n{input}\n{hint}\n{error}\n{endWrapper}"
CHECK_TEMPLATE = "{input}\n{label}\n{error}\n{hint}"
CHECK_ENCLOSED_TEMPLATE = "{beginLabel}\n{input}\n{labelTitle}\n{endLabel}\n{error}\n{hint}"
FLOATING_TEMPLATE = "{beginWrapper}\n{input}\n{label}\n{hint}\n{error}\n{endWrapper}"
CUSTOM_FILE_TEMPLATE = '<div class="custom-file">\n{input}\n{label}\n</div>\n{error}\n{hint}'

# Hint settings forwarded to the client side popover as data attributes.
PLUGIN_HINT_KEYS = (
    "icon_css_class",
    "label_css_class",
    "content_css_class",
    "hide_on_escape",
    "hide_on_click_out",
    "title",
    "placement",
    "container",
    "animation",
    "delay",
    "template",
    "selector",
    "viewport",
)

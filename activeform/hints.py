"""Helpers for ``HINT_SPECIAL`` hints.

Special hints are displayed by the client side popover plugin instead of a
text block below the input.  The server side emits the hintable CSS hooks, the
help icon and the plugin settings as ``data-*`` attributes on the container.
"""

from __future__ import annotations

import json
from dataclasses import replace

from . import html
from .composer import substitute
from .config import HintSettings
from .constants import BS_CSS, PLUGIN_HINT_KEYS


def resolve_settings(settings: HintSettings, bs_version: int, container: str = "") -> HintSettings:
    """Fill in the version dependent icon and the popover container."""

    updates = {}
    if settings.icon is None:
        updates["icon"] = f'<i class="{BS_CSS[bs_version]["hint_icon"]} text-info"></i>'
    if settings.container is None:
        updates["container"] = container or ("table" if settings.icon_beside_input else "form")
    return replace(settings, **updates) if updates else settings


def data_attributes(settings: HintSettings) -> dict:
    attrs = {}
    for key in PLUGIN_HINT_KEYS:
        value = getattr(settings, key)
        if value is None:
            continue
        if isinstance(value, bool):
            value = int(value)
        elif not isinstance(value, (str, int, float)):
            value = json.dumps(dict(value) if hasattr(value, "items") else value)
        attrs[f"data-{key.replace('_', '-')}"] = value
    return attrs


def hintable_css(settings: HintSettings, kind: str) -> list:
    """CSS hooks for the ``label`` or ``icon`` element that opens the hint."""

    css = ["kv-hintable"]
    if kind == "icon":
        css.append("hide")
    if getattr(settings, f"on_{kind}_click"):
        css.append("kv-hint-click")
    if getattr(settings, f"on_{kind}_hover"):
        css.append("kv-hint-hover")
    return css


def hint_icon(settings: HintSettings) -> str:
    if not settings.show_icon:
        return ""
    return html.tag("span", settings.icon or "", {"class": " ".join(hintable_css(settings, "icon"))})


def hintable_label(settings: HintSettings, label: str) -> str:
    """Wrap label text so hovering or clicking it opens the hint."""

    options = {"class": "kv-type-label"}
    html.add_css_class(options, hintable_css(settings, "label"))
    markup = html.tag("span", label, options)
    if settings.show_icon and not settings.icon_beside_input:
        markup = substitute(settings.label_template, {"{label}": markup, "{help}": hint_icon(settings)})
    return markup


def input_template(settings: HintSettings, container_id: str = "") -> str:
    """Template placing the help icon beside the input, or ``""`` when not used."""

    if not (settings.icon_beside_input and settings.show_icon):
        return ""
    id_attr = f' id="{container_id}"' if container_id else ""
    return substitute(settings.input_template, {"{help}": hint_icon(settings), "{id}": id_attr})

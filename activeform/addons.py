"""Markup for input group addons and feedback icons."""

from __future__ import annotations

from django.utils.html import conditional_escape

from . import html
from .config import Addon, AddonPart, FeedbackIcon
from .constants import BS_CSS

FEEDBACK_CATEGORIES = ("default", "success", "error")


def _addon_part(part: AddonPart, bs_version: int) -> str:
    css = BS_CSS[bs_version]
    options = dict(part.options)
    if part.as_button:
        if bs_version == 3:
            html.add_css_class(options, css["addon_button"])
            return html.tag("div", part.content, options)
        if options:
            return html.tag("div", part.content, options)
        return part.content
    html.add_css_class(options, css["addon_text"])
    return html.tag("span", part.content, options)


def _addon_side(parts, side: str, bs_version: int) -> str:
    content = "".join(_addon_part(part, bs_version) for part in parts)
    if content and bs_version == 4:
        return html.tag("div", content, {"class": f"input-group-{side}"})
    return content


def render_addon(addon: Addon | None, input_markup: str, bs_version: int = 5) -> str:
    """Wrap ``input_markup`` in an ``input-group`` holding the prepend/append parts.

    Without an addon the input is returned unchanged.
    """

    if not addon:
        return input_markup
    prepend = _addon_side(addon.prepend, "prepend", bs_version)
    append = _addon_side(addon.append, "append", bs_version)
    group = dict(addon.group_options)
    html.add_css_class(group, "input-group")
    content = f"{addon.content_before}{prepend}{input_markup}{append}{addon.content_after}"
    return html.tag("div", content, group)


def render_feedback_icon(icon: FeedbackIcon | None, input_id: str, bs_version: int = 5):
    """Return ``(markup, described_by)`` for the configured feedback icons.

    ``described_by`` lists the ids of the screen reader descriptions, which the
    caller adds to the input's ``aria-describedby`` attribute.
    """

    if not icon:
        return "", []
    prefix = icon.prefix if icon.prefix is not None else BS_CSS[bs_version]["icon_prefix"]
    markup, described_by = [], []
    for category in FEEDBACK_CATEGORIES:
        value = getattr(icon, category)
        if value is None:
            continue
        options = dict(getattr(icon, f"{category}_options"))
        description = options.pop("description", f"({category})")
        options["aria-hidden"] = "true"
        html.add_css_class(options, ["form-control-feedback", f"kv-feedback-{category}"])
        content = value if icon.type == "raw" else html.tag("i", "", {"class": f"{prefix}{value}"})
        key = f"{input_id}-{category}"
        described_by.append(key)
        markup.append(html.tag("span", content, options))
        markup.append(
            html.tag(
                "span",
                conditional_escape(description),
                {"id": key, "class": BS_CSS[bs_version]["screen_reader"]},
            )
        )
    return "".join(markup), described_by

"""Template composition for a single field.

:class:`TemplateBuilder` turns a base template such as
``"{label}\\n{beginWrapper}\\n{input}\\n{hint}\\n{error}\\n{endWrapper}"`` into the
final field template: content decorations are spliced around the placeholders,
hidden blocks are dropped and the wrapper parts are filled in.  The result is a
``(template, parts)`` pair; :func:`substitute` performs the final single pass
replacement.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Optional

from . import html
from .addons import render_addon, render_feedback_icon
from .config import Addon, FeedbackIcon
from .constants import (
    CHECK_ENCLOSED_TEMPLATE,
    CHECK_TEMPLATE,
    DEFAULT_TEMPLATE,
    FLOATING_TEMPLATE,
    PLACEHOLDERS,
    LayoutType,
)
from .layout import ResolvedLayout


@dataclass(frozen=True)
class Decorations:
    content_before_field: str = ""
    content_after_field: str = ""
    content_before_label: str = ""
    content_after_label: str = ""
    content_before_input: str = ""
    content_after_input: str = ""
    content_before_error: str = ""
    content_after_error: str = ""
    content_before_hint: str = ""
    content_after_hint: str = ""
    addon: Optional[Addon] = None
    feedback_icon: Optional[FeedbackIcon] = None
    input_id: str = ""
    hint_input_template: str = ""


def substitute(template: str, replacements: dict) -> str:
    """Replace every key of ``replacements`` found in ``template`` in one pass.

    Replaced content is never scanned again, so placeholders appearing inside
    substituted markup stay as they are.
    """

    if not replacements:
        return template
    keys = sorted(replacements, key=len, reverse=True)
    pattern = re.compile("|".join(re.escape(key) for key in keys))
    return pattern.sub(lambda match: str(replacements[match.group(0)]), template)


def select_base_template(layout_type=LayoutType.VERTICAL, is_toggle=False, enclosed_by_label=False) -> str:
    if is_toggle:
        return CHECK_ENCLOSED_TEMPLATE if enclosed_by_label else CHECK_TEMPLATE
    if layout_type == LayoutType.FLOATING:
        return FLOATING_TEMPLATE
    return DEFAULT_TEMPLATE


def effective_show_errors(layout: ResolvedLayout, is_static: bool = False) -> bool:
    """Static fields hide validation errors unless the field forced them on."""

    if is_static and not layout.errors_forced:
        return False
    return layout.show_errors


class TemplateBuilder:
    def __init__(self, bs_version: int = 5):
        self.bs_version = bs_version

    def input_markup(self, decorations: Decorations, input_markup: str = "{input}") -> str:
        feedback, _ = render_feedback_icon(decorations.feedback_icon, decorations.input_id, self.bs_version)
        return (
            f"{decorations.content_before_input}"
            f"{render_addon(decorations.addon, input_markup, self.bs_version)}"
            f"{feedback}"
            f"{decorations.content_after_input}"
        )

    def build(
        self,
        base_template: str,
        layout: ResolvedLayout,
        decorations: Optional[Decorations] = None,
        is_static: bool = False,
        *,
        has_label: bool = True,
        multiselect: str = "",
        parts: Optional[dict] = None,
        wrapper_options: Optional[dict] = None,
    ):
        decorations = decorations or Decorations()
        parts = dict(parts or {})
        show_errors = effective_show_errors(layout, is_static)
        # Second pass: a field without label content never shows a label block.
        show_labels = bool(layout.show_labels) and has_label

        input_slot = "{input}"
        if multiselect:
            input_slot = multiselect.replace("{input}", input_slot)
        if decorations.hint_input_template:
            input_slot = input_slot.replace("{input}", decorations.hint_input_template)

        before_label, after_label = decorations.content_before_label, decorations.content_after_label
        before_error, after_error = decorations.content_before_error, decorations.content_after_error
        replacements = {
            "{beginLabel}": "{beginLabel}" if show_labels else "",
            "{endLabel}": "{endLabel}" if show_labels else "",
            "{label}": f"{before_label}{{label}}{after_label}" if show_labels else "",
            "{labelTitle}": f"{before_label}{{labelTitle}}{after_label}" if show_labels else "",
            "{input}": input_slot.replace("{input}", self.input_markup(decorations)),
            "{error}": f"{before_error}{{error}}{after_error}" if show_errors else "",
            "{hint}": "{hint}" if layout.show_hints else "",
        }
        template = substitute(base_template, replacements)

        if not show_errors:
            parts["{error}"] = ""
        if not show_labels:
            for key in ("{label}", "{beginLabel}", "{labelTitle}", "{endLabel}"):
                parts[key] = ""
        self._wrapper_parts(layout, parts, wrapper_options, show_labels)
        for key in PLACEHOLDERS:
            parts.setdefault(key, "")
        return template, parts

    def _wrapper_parts(self, layout, parts, wrapper_options, show_labels):
        if layout.skip_form_layout:
            for key in ("{beginWrapper}", "{endWrapper}", "{beginLabel}", "{labelTitle}", "{endLabel}"):
                parts[key] = ""
            return
        if "{beginWrapper}" in parts:
            return
        options = dict(wrapper_options or {})
        input_css = layout.input_css
        if not show_labels and layout.labels_visible and layout.full_css:
            input_css = layout.full_css
        if input_css:
            html.add_css_class(options, input_css)
        if layout.render_empty_wrapper or options:
            tag_name = options.pop("tag", "div")
            parts["{beginWrapper}"] = html.begin_tag(tag_name, options)
            parts["{endWrapper}"] = html.end_tag(tag_name)
        else:
            parts["{beginWrapper}"] = parts["{endWrapper}"] = ""

    def render(self, base_template, layout, decorations=None, is_static=False, **kwargs) -> str:
        template, parts = self.build(base_template, layout, decorations, is_static, **kwargs)
        return substitute(template, parts)

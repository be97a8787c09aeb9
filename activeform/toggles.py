"""Checkbox and radio lists.

Each list item is produced by an item renderer: any callable with the
signature ``(index, label, name, checked, value) -> str``.
:class:`ToggleItemRenderer` is the default one and knows the Bootstrap markup
for stacked, inline and button group lists.
"""

from __future__ import annotations

from django.utils.html import conditional_escape
from django.utils.safestring import mark_safe

from . import html
from .constants import TYPE_CHECKBOX


def flatten_choices(choices):
    """Yield ``(value, label)`` pairs, descending one level into option groups."""

    for value, label in choices:
        if isinstance(label, (list, tuple)):
            yield from flatten_choices(label)
        else:
            yield value, label


def selected_values(value) -> set:
    if value is None:
        return set()
    if isinstance(value, (list, tuple, set)):
        return {str(item) for item in value}
    return {str(value)}


class ToggleItemRenderer:
    def __init__(
        self,
        input_type=TYPE_CHECKBOX,
        bs_version=5,
        *,
        list_id="",
        as_button_group=False,
        inline=False,
        custom=False,
        disabled=False,
        readonly=False,
        disabled_items=(),
        readonly_items=(),
        item_options=None,
        btn_css="btn-secondary",
    ):
        self.input_type = input_type
        self.bs_version = bs_version
        self.list_id = list_id
        self.as_button_group = as_button_group
        self.inline = inline
        self.custom = custom and bs_version == 4
        self.switch = custom and bs_version == 5 and input_type == TYPE_CHECKBOX
        self.disabled = disabled
        self.readonly = readonly
        self.disabled_items = {str(item) for item in disabled_items}
        self.readonly_items = {str(item) for item in readonly_items}
        self.item_options = dict(item_options or {})
        self.btn_css = btn_css

    @property
    def prefix(self):
        return "custom-control" if self.custom else "form-check"

    @property
    def enclosed_label(self):
        if self.as_button_group:
            return self.bs_version < 5
        return self.bs_version < 4

    def item_id(self, index, name):
        base = self.list_id or "".join(char if char.isalnum() else "-" for char in name).lower()
        return f"{base}-{index}"

    def __call__(self, index, label, name, checked, value):
        options = dict(self.item_options)
        label_options = dict(options.pop("label_options", {}))
        options.update({"type": self.input_type, "name": name, "value": value, "data-index": index})
        options.setdefault("id", self.item_id(index, name))
        options["checked"] = bool(checked)
        wrapper = {}

        if self.as_button_group:
            if self.bs_version == 5:
                html.add_css_class(options, "btn-check")
                options["autocomplete"] = "off"
            html.add_css_class(label_options, ["btn", self.btn_css])
            if checked and self.bs_version < 5:
                html.add_css_class(label_options, "active")
        elif self.bs_version >= 4:
            html.add_css_class(options, f"{self.prefix}-input")
            html.add_css_class(label_options, f"{self.prefix}-label")
            html.add_css_class(wrapper, self.prefix)
            if self.custom:
                html.add_css_class(wrapper, f"custom-{self.input_type}")
            if self.switch:
                html.add_css_class(wrapper, "form-switch")
            if self.inline:
                html.add_css_class(wrapper, f"{self.prefix}-inline")
        elif self.inline:
            html.add_css_class(label_options, f"{self.input_type}-inline")
        else:
            html.add_css_class(wrapper, self.input_type)

        svalue = str(value)
        if self.disabled or svalue in self.disabled_items:
            html.add_css_class(label_options, "disabled")
            options["disabled"] = True
        if self.readonly or svalue in self.readonly_items:
            html.add_css_class(label_options, "disabled")
            options["readonly"] = True
        if self.bs_version == 3 and wrapper and (self.disabled or self.readonly):
            html.add_css_class(wrapper, "disabled")

        text = conditional_escape(label)
        control = html.tag("input", "", options)
        if self.enclosed_label:
            out = html.tag("label", f"{control} {text}", label_options)
        else:
            out = control + html.tag("label", text, {**label_options, "for": options["id"]})
        if self.as_button_group or not wrapper:
            return mark_safe(out)
        return html.tag("div", out, wrapper)


def render_toggle_list(choices, name, value, item, options=None, separator="\n") -> str:
    """Render every choice through ``item`` inside a container ``<div>``."""

    selected = selected_values(value)
    items = [
        item(index, label, name, str(choice) in selected, choice)
        for index, (choice, label) in enumerate(flatten_choices(choices))
    ]
    return html.tag("div", mark_safe(separator.join(items)), options)

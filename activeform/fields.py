"""Bootstrap aware rendering of a single form field.

An :class:`ActiveField` wraps a Django ``BoundField``.  The input methods
(``text_input()``, ``checkbox()``, ``radio_list()``...) fill the ``{input}``
part using Django widgets, while :meth:`ActiveField.render` resolves the layout,
builds the field template and substitutes the parts::

    af = ActiveForm(form, type=ActiveForm.TYPE_HORIZONTAL)
    af.field("email", addon={"prepend": {"content": "@"}})
    af.field("password").password_input()
    af.field("remember_me").checkbox(enclosed_by_label=True)
"""

from __future__ import annotations

import logging
from dataclasses import fields, replace

from django import forms
from django.core.exceptions import ImproperlyConfigured
from django.utils.html import conditional_escape
from django.utils.safestring import mark_safe

from . import hints, html
from .addons import render_feedback_icon
from .composer import Decorations, TemplateBuilder, effective_show_errors, select_base_template, substitute
from .config import FieldLayoutOverride
from .constants import (
    BS_CSS,
    CUSTOM_FILE_TEMPLATE,
    MULTI_SELECT_HEIGHT,
    TYPE_CHECKBOX,
    TYPE_RADIO,
)
from .layout import ResolvedLayout
from .toggles import ToggleItemRenderer, render_toggle_list

logger = logging.getLogger(__name__)

FIELD_OPTIONS = (
    "template",
    "options",
    "label_options",
    "input_options",
    "error_options",
    "hint_options",
    "wrapper_options",
    "check_wrapper_options",
    "add_class",
    "static_value",
    "show_required_indicator",
    "highlight_addon",
)
OVERRIDE_OPTIONS = tuple(item.name for item in fields(FieldLayoutOverride))
CONTENT_OPTIONS = tuple(item.name for item in fields(Decorations) if item.name.startswith("content_"))


class ActiveField:
    def __init__(self, form, bound_field, **options):
        unknown = sorted(set(options) - set(FIELD_OPTIONS) - set(OVERRIDE_OPTIONS) - set(CONTENT_OPTIONS))
        if unknown:
            raise ImproperlyConfigured(
                f"Unknown option(s) for field '{bound_field.name}': {', '.join(unknown)}"
            )
        self.form = form
        self.bound_field = bound_field
        self.override = FieldLayoutOverride.from_options(
            {key: value for key, value in options.items() if key in OVERRIDE_OPTIONS}
        )
        self.content = {key: options.get(key, "") for key in CONTENT_OPTIONS}
        self.template = options.get("template")
        self.options = dict(options.get("options") or {})
        self.label_options = dict(options.get("label_options") or {})
        self.input_options = dict(options.get("input_options") or {})
        self.error_options = dict(options.get("error_options") or {})
        self.hint_options = dict(options.get("hint_options") or {})
        self.wrapper_options = dict(options.get("wrapper_options") or {})
        self.check_wrapper_options = dict(options.get("check_wrapper_options") or {})
        self.add_class = options.get("add_class", self.css("form_control"))
        self.static_value = options.get("static_value")
        self.show_required_indicator = options.get("show_required_indicator", True)
        self.highlight_addon = options.get("highlight_addon", True)

        self.parts = {}
        self._toggle = False
        self._custom = False
        self._multiselect = ""
        self._is_static = False
        self._label_text = None
        self._label_extra = {}
        self._hint_content = None
        self._hint_extra = {}
        self._error_extra = {}
        self._size_css = []
        self.hint_settings = None
        self.layout = self.resolve_layout()
        self._init_active_field()

    def __str__(self):
        return self.render()

    def __html__(self):
        return self.render()

    @property
    def bs_version(self):
        return self.form.bs_version

    @property
    def input_id(self):
        return self.bound_field.auto_id or self.bound_field.html_name

    def css(self, key):
        return BS_CSS[self.bs_version][key]

    def resolve_layout(self) -> ResolvedLayout:
        return self.form.resolver.resolve(self.override, self._toggle, self._custom)

    def _init_active_field(self):
        bs_version = self.bs_version
        if bs_version >= 4:
            error_css = "invalid-tooltip" if self.form.tooltip_style_feedback else "invalid-feedback"
        else:
            error_css = self.css("error")
        html.add_css_class(self.error_options, error_css)
        if "class" not in self.label_options:
            if self.form.is_horizontal() or (bs_version == 3 and not self.form.is_inline()):
                self.label_options["class"] = self.css("control_label")
            elif bs_version == 5 and self.form.is_vertical():
                self.label_options["class"] = "form-label"
        if self.show_required_indicator:
            html.add_css_class(self.label_options, "has-star")
        if self.highlight_addon:
            html.add_css_class(self.options, "highlight-addon")
        if self.override.is_hint_special:
            if self.override.hint_settings.icon_beside_input:
                container = f"#{self.input_id}-table"
            else:
                form_id = self.form.options.get("id")
                container = f"#{form_id}" if form_id else ""
            self.hint_settings = hints.resolve_settings(self.override.hint_settings, bs_version, container)

    # Input preparation

    def _init_disability(self, attrs):
        if self.form.disabled and "disabled" not in attrs:
            attrs["disabled"] = True
        if self.form.readonly and "readonly" not in attrs:
            attrs["readonly"] = True

    def _init_field_size(self, attrs):
        group = self.override.addon.group_options if self.override.addon else {}
        for size in ("lg", "sm"):
            if html.has_css_class(attrs, self.css(f"size_{size}")) or html.has_css_class(
                group, f"input-group-{size}"
            ):
                if f"has-size-{size}" not in self._size_css:
                    self._size_css.append(f"has-size-{size}")

    def _pop_custom(self, attrs) -> bool:
        return bool(attrs.pop("custom", False)) and self.bs_version >= 4

    def _prepare(self, attrs, css=None):
        attrs = html.merge_attrs(self.input_options, attrs)
        self._init_field_size(attrs)
        label = self.bound_field.label
        if self.layout.auto_placeholder:
            attrs["placeholder"] = label
        elif self.form.is_floating() and not self._toggle:
            attrs.setdefault("placeholder", label)
        if self.bs_version >= 4 and self.bound_field.errors:
            html.add_css_class(attrs, "is-invalid")
        if css:
            html.add_css_class(attrs, css)
        self._init_disability(attrs)
        described_by = self._feedback_ids()
        if described_by:
            current = attrs.get("aria-describedby", "")
            attrs["aria-describedby"] = " ".join(filter(None, [current, *described_by]))
        return attrs

    def _feedback_ids(self):
        _, described_by = render_feedback_icon(self.override.feedback_icon, self.input_id, self.bs_version)
        return described_by

    def _render_widget(self, widget, attrs):
        self.parts["{input}"] = self.bound_field.as_widget(widget=widget, attrs=attrs)
        return self

    def _choices(self, choices):
        if choices is not None:
            return list(choices)
        field = self.bound_field.field
        return list(getattr(field, "choices", None) or getattr(field.widget, "choices", ()))

    # Input methods

    def input(self, input_type, **attrs):
        custom = self._pop_custom(attrs)
        css = None
        if custom and input_type == "range":
            css = "custom-range" if self.bs_version == 4 else "form-range"
        elif input_type not in ("range", "color"):
            css = self.add_class
        attrs = self._prepare(attrs, css)
        return self._render_widget(forms.TextInput(attrs={"type": input_type}), attrs)

    def text_input(self, **attrs):
        return self._render_widget(forms.TextInput(), self._prepare(attrs, self.add_class))

    def password_input(self, **attrs):
        return self._render_widget(forms.PasswordInput(), self._prepare(attrs, self.add_class))

    def textarea(self, **attrs):
        return self._render_widget(forms.Textarea(), self._prepare(attrs, self.add_class))

    def _select_css(self, custom):
        if custom and self.bs_version == 4:
            return "custom-select"
        if self.bs_version == 5:
            return self.css("select")
        return self.add_class

    def dropdown_list(self, choices=None, **attrs):
        custom = self._pop_custom(attrs)
        widget_class = forms.SelectMultiple if attrs.get("multiple") else forms.Select
        attrs = self._prepare(attrs, self._select_css(custom))
        return self._render_widget(widget_class(choices=self._choices(choices)), attrs)

    def list_box(self, choices=None, **attrs):
        custom = self._pop_custom(attrs)
        attrs.setdefault("size", 4)
        multiple = isinstance(self.bound_field.field, forms.MultipleChoiceField)
        widget_class = forms.SelectMultiple if multiple else forms.Select
        attrs = self._prepare(attrs, self._select_css(custom))
        return self._render_widget(widget_class(choices=self._choices(choices)), attrs)

    def file_input(self, **attrs):
        custom = self._pop_custom(attrs)
        css = None if self.bs_version == 3 else self.add_class
        if custom and self.bs_version == 4:
            css = "custom-file-input"
            html.add_css_class(self.label_options, "custom-file-label")
            html.remove_css_class(self.label_options, [self.css("control_label"), "form-label"])
            self.template = CUSTOM_FILE_TEMPLATE
        attrs = self._prepare(attrs, css)
        widget = self.bound_field.field.widget
        if not isinstance(widget, forms.FileInput):
            widget = forms.FileInput()
        return self._render_widget(widget, attrs)

    def widget(self, widget=None, *, with_class=False, **attrs):
        """Render ``widget`` (the field's own widget by default) with the form's states applied."""

        if widget is None:
            widget = self.bound_field.field.widget
        if widget.attrs.get("class"):
            attrs = html.merge_attrs({"class": widget.attrs["class"]}, attrs)
        attrs = self._prepare(attrs, self.add_class if with_class else None)
        return self._render_widget(widget, attrs)

    def static_input(self, **attrs):
        """Render the value as display only text; errors are hidden unless forced on."""

        if self.static_value is not None:
            content = mark_safe(self.static_value)
        else:
            value = self.bound_field.value()
            content = conditional_escape("" if value is None else value)
        html.add_css_class(attrs, self.css("form_control_static"))
        self.parts["{input}"] = html.tag("div", content, attrs)
        self._is_static = True
        return self

    def checkbox(self, enclosed_by_label=None, **attrs):
        return self._toggle_field(TYPE_CHECKBOX, attrs, enclosed_by_label)

    def radio(self, enclosed_by_label=None, **attrs):
        return self._toggle_field(TYPE_RADIO, attrs, enclosed_by_label)

    def _toggle_field(self, input_type, attrs, enclosed_by_label):
        attrs = dict(attrs)
        custom = self._pop_custom(attrs)
        label = attrs.pop("label", None)
        template = attrs.pop("template", None)
        if enclosed_by_label is not None:
            self.override = replace(self.override, enclosed_by_label=enclosed_by_label)
        # Inline toggles keep their label text next to the box.
        if self.form.is_inline() and self.override.show_labels is None and self.override.enable_label is None:
            self.override = replace(self.override, show_labels=True)
        self._toggle, self._custom = True, custom
        layout = self.layout = self.resolve_layout()
        enclosed = layout.enclosed_by_label
        bs_version = self.bs_version

        if template is None:
            template = select_base_template(layout.layout_type, True, enclosed)
        if bs_version >= 4:
            prefix = "custom-control" if custom and bs_version == 4 else "form-check"
        else:
            prefix = input_type
        html.remove_css_class(self.label_options, [self.css("control_label"), "form-label"])
        wrapper = dict(self.check_wrapper_options)
        html.add_css_class(wrapper, prefix)
        if bs_version >= 4:
            html.add_css_class(self.label_options, f"{prefix}-label")
            html.add_css_class(attrs, f"{prefix}-input")
            if custom and bs_version == 4:
                html.add_css_class(wrapper, f"custom-{input_type}")
            elif custom and input_type == TYPE_CHECKBOX:
                html.add_css_class(wrapper, "form-switch")
        elif not enclosed:
            html.add_css_class(wrapper, "not-enclosed")
        template = html.tag("div", template, wrapper)
        if self.form.is_horizontal() and not layout.skip_form_layout and self.override.auto_offset:
            css = [layout.input_css, layout.offset_css if layout.labels_visible else ""]
            template = html.tag("div", template, {"class": " ".join(filter(None, css))})
        self.template = template

        if label is not None:
            self._label_text = label
            self.parts["{labelTitle}"] = label
        if enclosed:
            self.parts["{beginLabel}"] = html.begin_tag("label", self._label_options(layout))
            self.parts["{endLabel}"] = html.end_tag("label")

        attrs = self._prepare(attrs)
        if input_type == TYPE_CHECKBOX:
            return self._render_widget(forms.CheckboxInput(), attrs)
        value = attrs.pop("value", "1")
        attrs.setdefault("id", self.input_id)
        attrs.update(type=TYPE_RADIO, name=self.bound_field.html_name, value=value)
        attrs["checked"] = str(self.bound_field.value()) == str(value)
        self.parts["{input}"] = html.tag("input", "", attrs)
        return self

    def checkbox_list(self, choices=None, **options):
        return self._toggle_field_list(TYPE_CHECKBOX, choices, options)

    def radio_list(self, choices=None, **options):
        return self._toggle_field_list(TYPE_RADIO, choices, options)

    def checkbox_button_group(self, choices=None, **options):
        return self._toggle_field_list(TYPE_CHECKBOX, choices, options, as_button_group=True)

    def radio_button_group(self, choices=None, **options):
        return self._toggle_field_list(TYPE_RADIO, choices, options, as_button_group=True)

    def multiselect(self, choices=None, *, height=MULTI_SELECT_HEIGHT, selector=TYPE_CHECKBOX, container=None, **options):
        """Render a scrolling checkbox (or radio) list inside a fixed height box."""

        container = dict(container or {})
        html.add_css_style(container, f"height:{height}")
        html.add_css_class(container, [self.add_class, "input-multiselect"])
        container["tabindex"] = 0
        self._multiselect = html.tag("div", "{input}", container)
        input_type = TYPE_RADIO if selector == TYPE_RADIO else TYPE_CHECKBOX
        return self._toggle_field_list(input_type, choices, options)

    def _toggle_field_list(self, input_type, choices, options, as_button_group=False):
        options = dict(options)
        custom = self._pop_custom(options)
        item = options.pop("item", None)
        inline = options.pop("inline", False)
        separator = options.pop("separator", "\n")
        disabled_items = options.pop("disabled_items", ())
        readonly_items = options.pop("readonly_items", ())
        item_options = dict(options.pop("item_options", None) or {})
        bs_version = self.bs_version

        options.setdefault("id", self.input_id)
        if bs_version >= 4:
            html.add_css_class(self.label_options, "pt-0")
            if self.bound_field.errors:
                html.add_css_class(options, "is-invalid")
        if as_button_group:
            inline = True
            html.add_css_class(options, "btn-group")
            if bs_version < 5:
                html.add_css_class(options, "btn-group-toggle")
                options["data-toggle"] = "buttons"
            options["role"] = "group"
        if item is None:
            item = ToggleItemRenderer(
                input_type,
                bs_version,
                list_id=self.input_id,
                as_button_group=as_button_group,
                inline=inline,
                custom=custom,
                disabled=self.form.disabled,
                readonly=self.form.readonly,
                disabled_items=disabled_items,
                readonly_items=readonly_items,
                item_options=item_options,
                btn_css=self.form.default_btn_css,
            )
        self.parts["{input}"] = render_toggle_list(
            self._choices(choices),
            self.bound_field.html_name,
            self.bound_field.value(),
            item,
            options,
            separator,
        )
        return self

    def auto_input(self):
        """Pick the input method matching the Django widget of the field."""

        widget = self.bound_field.field.widget
        logger.debug(f"Field '{self.bound_field.name}' rendered from {type(widget).__name__}")
        if isinstance(widget, forms.CheckboxInput):
            return self.checkbox()
        if isinstance(widget, forms.CheckboxSelectMultiple):
            return self.checkbox_list()
        if isinstance(widget, forms.RadioSelect):
            return self.radio_list()
        if isinstance(widget, forms.Select):
            multiple = isinstance(widget, forms.SelectMultiple)
            return self.dropdown_list(multiple=True) if multiple else self.dropdown_list()
        if isinstance(widget, forms.FileInput):
            return self.file_input()
        if isinstance(widget, forms.HiddenInput):
            return self.widget()
        return self.widget(with_class=True)

    # Label, hint and error parts

    def label(self, label=None, **options):
        """Set the label text (markup, not escaped) or hide it with ``label(False)``."""

        self._label_text = False if label is False else (label if label is not None else self._label_text)
        self._label_extra = options
        return self

    def hint(self, content=None, **options):
        self._hint_content = content
        self._hint_extra = options
        return self

    def error(self, **options):
        self._error_extra = options
        return self

    def has_label(self):
        if self._label_text is False:
            return False
        text = self._label_text if self._label_text is not None else self.bound_field.label
        return bool(text)

    def _label_options(self, layout):
        options = html.merge_attrs(self.label_options, self._label_extra)
        if layout.screen_reader and not (self._toggle and self.form.is_inline()):
            html.add_css_class(options, self.css("screen_reader"))
        elif layout.label_css and not self._toggle:
            html.add_css_class(options, layout.label_css)
        options.setdefault("for", self.input_id)
        return options

    def _label_content(self, layout):
        if self._label_text is not None:
            text = mark_safe(self._label_text)
        else:
            text = conditional_escape(self.bound_field.label or "")
        settings = self.hint_settings
        if (
            settings is not None
            and layout.labels_visible
            and (settings.on_label_click or settings.on_label_hover)
        ):
            text = hints.hintable_label(settings, text)
        return text

    def _error_markup(self, layout):
        options = html.merge_attrs(self.error_options, self._error_extra)
        html.add_css_class(options, layout.error_css)
        tag_name = options.pop("tag", "div")
        errors = self.bound_field.errors
        return html.tag(tag_name, conditional_escape(errors[0]) if errors else "", options)

    def _hint_markup(self, layout):
        if not layout.show_hints or self._hint_content is False:
            return ""
        content = self._hint_content if self._hint_content is not None else self.bound_field.help_text
        if not content:
            return ""
        options = html.merge_attrs(self.hint_options, self._hint_extra)
        html.add_css_class(options, [self.css("hint"), layout.hint_css])
        if self.hint_settings is not None:
            html.add_css_class(options, "kv-hint-block")
        options.setdefault("id", f"{self.input_id}_helptext")
        tag_name = options.pop("tag", "div")
        body = f"{self.content['content_before_hint']}{content}{self.content['content_after_hint']}"
        return html.tag(tag_name, body, options)

    def _field_parts(self, layout, template):
        parts = dict(self.parts)
        if "{label}" not in parts:
            parts["{label}"] = "" if layout.is_offset or self._label_text is False else html.tag(
                "label", self._label_content(layout), self._label_options(layout)
            )
        if "{beginLabel}" in template:
            parts.setdefault("{beginLabel}", html.begin_tag("label", self._label_options(layout)))
            parts.setdefault("{endLabel}", html.end_tag("label"))
            parts.setdefault("{labelTitle}", self._label_content(layout))
        parts.setdefault("{error}", self._error_markup(layout))
        parts.setdefault("{hint}", self._hint_markup(layout))
        return parts

    def decorations(self) -> Decorations:
        hint_template = ""
        if self.hint_settings is not None:
            hint_template = hints.input_template(self.hint_settings, f"{self.input_id}-table")
        return Decorations(
            **self.content,
            addon=self.override.addon,
            feedback_icon=self.override.feedback_icon,
            input_id=self.input_id,
            hint_input_template=hint_template,
        )

    def _wrapper_options(self, layout):
        options = dict(self.wrapper_options)
        if self.form.is_floating() and not layout.is_toggle and not layout.skip_form_layout:
            html.add_css_class(options, "form-floating")
        return options

    # Rendering

    def begin(self, layout=None):
        layout = layout or self.layout
        options = dict(self.options)
        tag_name = options.pop("tag", "div")
        html.add_css_class(options, [self.css("field"), f"field-{self.input_id}"])
        if (
            self.form.is_horizontal()
            and self.bs_version >= 4
            and not layout.skip_form_layout
            and not (layout.is_toggle and not self.override.auto_offset)
        ):
            html.add_css_class(options, "row")
        if self.bound_field.field.required:
            html.add_css_class(options, "required")
        if self.bound_field.errors and self.css("has_error"):
            html.add_css_class(options, self.css("has_error"))
        if self.override.feedback_icon:
            html.add_css_class(options, "has-feedback")
        html.add_css_class(options, self._size_css)
        if not effective_show_errors(layout, self._is_static):
            html.add_css_class(options, "hide-errors")
        if self.hint_settings is not None:
            html.add_css_class(options, "kv-hint-special")
            options.update(hints.data_attributes(self.hint_settings))
        return mark_safe(html.begin_tag(tag_name, options) + self.content["content_before_field"])

    def end(self):
        tag_name = self.options.get("tag", "div")
        return mark_safe(self.content["content_after_field"] + html.end_tag(tag_name))

    def build(self):
        """Resolve the layout and return the ``(template, parts)`` pair for this field."""

        if self.form.static_only:
            self.static_input()
        elif "{input}" not in self.parts:
            self.auto_input()
        layout = self.layout = self.resolve_layout()
        template = self.template or select_base_template(
            layout.layout_type, layout.is_toggle, layout.enclosed_by_label
        )
        builder = TemplateBuilder(self.bs_version)
        return builder.build(
            template,
            layout,
            self.decorations(),
            self._is_static,
            has_label=self.has_label(),
            multiselect=self._multiselect,
            parts=self._field_parts(layout, template),
            wrapper_options=self._wrapper_options(layout),
        )

    def render(self, content=None):
        if content is None:
            template, parts = self.build()
            content = substitute(template, parts)
        return mark_safe(f"{self.begin()}\n{content}\n{self.end()}")

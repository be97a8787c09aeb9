"""Form level host for :class:`~activeform.fields.ActiveField`.

``ActiveForm`` wraps a Django form instance and holds the layout shared by all
of its fields: the layout type, the label grid, the Bootstrap version and the
disabled/readonly/static states.
"""

from __future__ import annotations

import logging

from django.middleware.csrf import get_token
from django.utils.html import conditional_escape
from django.utils.safestring import mark_safe

from . import html
from .conf import get_setting
from .config import FormLayoutConfig
from .constants import BS_CSS, FULL_SPAN, SCREEN_READER, DeviceSize, LayoutType
from .fields import ActiveField
from .layout import LayoutResolver

logger = logging.getLogger(__name__)


class ActiveForm:
    TYPE_VERTICAL = LayoutType.VERTICAL
    TYPE_HORIZONTAL = LayoutType.HORIZONTAL
    TYPE_INLINE = LayoutType.INLINE
    TYPE_FLOATING = LayoutType.FLOATING

    SIZE_TINY = DeviceSize.TINY
    SIZE_SMALL = DeviceSize.SMALL
    SIZE_MEDIUM = DeviceSize.MEDIUM
    SIZE_LARGE = DeviceSize.LARGE

    SCREEN_READER = SCREEN_READER

    field_class = ActiveField

    def __init__(
        self,
        form,
        type=None,
        form_config=None,
        *,
        full_span=FULL_SPAN,
        bs_version=None,
        disabled=False,
        readonly=False,
        static_only=False,
        tooltip_style_feedback=None,
        field_config=None,
        options=None,
        action="",
        method="post",
    ):
        self.form = form
        extra = dict(
            full_span=full_span,
            bs_version=bs_version if bs_version is not None else get_setting("BS_VERSION"),
            disabled=disabled,
            readonly=readonly,
            static_only=static_only,
            tooltip_style_feedback=(
                tooltip_style_feedback
                if tooltip_style_feedback is not None
                else get_setting("TOOLTIP_STYLE_FEEDBACK")
            ),
        )
        if type is not None:
            extra["layout_type"] = type
        self.config = FormLayoutConfig.from_options(
            {**get_setting("FORM_CONFIG"), **(form_config or {})}, **extra
        )
        self.resolver = LayoutResolver(self.config)
        self.field_config = {**get_setting("FIELD_CONFIG"), **(field_config or {})}
        self.action = action
        self.method = method
        self.options = dict(options or {})
        self._init_form()

    def _init_form(self):
        self.options.setdefault("id", f"{self.form.prefix or type(self.form).__name__.lower()}-form")
        self.options.setdefault("role", "form")
        html.add_css_class(self.options, self.form_css())
        if self.tooltip_style_feedback:
            html.add_css_class(self.options, "tooltip-feedback")

    def __str__(self):
        return self.render()

    def __html__(self):
        return self.render()

    def __iter__(self):
        for bound_field in self.form.visible_fields():
            yield self.field(bound_field.name)

    # Configuration accessors

    @property
    def type(self):
        return self.config.layout_type

    @property
    def bs_version(self):
        return self.config.bs_version

    @property
    def full_span(self):
        return self.config.full_span

    @property
    def disabled(self):
        return self.config.disabled

    @property
    def readonly(self):
        return self.config.readonly

    @property
    def static_only(self):
        return self.config.static_only

    @property
    def tooltip_style_feedback(self):
        return self.config.tooltip_style_feedback

    @property
    def default_btn_css(self):
        return BS_CSS[self.bs_version]["default_btn"]

    @property
    def default_icon_prefix(self):
        return BS_CSS[self.bs_version]["icon_prefix"]

    def is_horizontal(self):
        return self.config.is_horizontal

    def is_inline(self):
        return self.config.is_inline

    def is_floating(self):
        return self.config.is_floating

    def is_vertical(self):
        return self.config.is_vertical

    def get_css_class(self, key):
        """Version specific class name, e.g. ``get_css_class("screen_reader")``."""

        return BS_CSS[self.bs_version][key]

    def form_css(self):
        css = [f"form-{self.type}"]
        if self.is_horizontal():
            css.append("kv-form-horizontal")
        if self.bs_version >= 4:
            css.append("kv-form-bs4")
        return css

    def col_css(self, size=None, span=None):
        """Grid class such as ``col-md-10``; ``span`` defaults to the full span."""

        return f"{self.resolver.grid_prefix(size or DeviceSize.MEDIUM)}{span or self.full_span}"

    def get_form_layout_style(self):
        """Label and input grid classes of a default field in this form."""

        layout = self.resolver.resolve()
        return {"label_css": layout.label_css, "input_css": layout.input_css, "offset_css": layout.offset_css}

    # Rendering

    def field(self, name, **options):
        bound_field = self.form[name]
        logger.debug(f"Rendering field '{name}' of {type(self.form).__name__} as {self.type}")
        return self.field_class(self, bound_field, **{**self.field_config, **options})

    def begin(self, request=None):
        attrs = {"action": self.action, "method": self.method, **self.options}
        if self.form.is_multipart():
            attrs.setdefault("enctype", "multipart/form-data")
        markup = html.begin_tag("form", attrs)
        if request is not None and self.method.lower() == "post":
            markup += html.tag(
                "input", "", {"type": "hidden", "name": "csrfmiddlewaretoken", "value": get_token(request)}
            )
        return mark_safe(markup)

    def end(self):
        return html.end_tag("form")

    def error_summary(self, header="", **options):
        """Alert box listing every form error, or ``""`` when the form is valid."""

        messages = list(self.form.non_field_errors())
        for bound_field in self.form:
            messages.extend(bound_field.errors)
        if not messages:
            return ""
        html.add_css_class(options, "alert alert-danger")
        items = "".join(html.tag("li", conditional_escape(message)) for message in messages)
        return html.tag("div", f"{header}{html.tag('ul', items)}", options)

    def render(self, request=None):
        hidden = "".join(str(bound_field) for bound_field in self.form.hidden_fields())
        fields = "\n".join(str(field) for field in self)
        return mark_safe(f"{self.begin(request)}\n{hidden}{fields}\n{self.end()}")

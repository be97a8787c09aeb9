"""Typed configuration objects for forms and fields.

Every object is a frozen dataclass built either directly or through
``from_options()``, which accepts a plain ``dict`` (as found in Django settings or
template tag arguments) and rejects keys it does not know about.
"""

from __future__ import annotations

from dataclasses import dataclass, field, fields
from types import MappingProxyType
from typing import Any, Mapping, Optional, Tuple, Union

from django.core.exceptions import ImproperlyConfigured

from .constants import (
    BS_VERSIONS,
    FORM_TYPE_DEFAULTS,
    FULL_SPAN,
    HINT_DEFAULT,
    HINT_SPECIAL,
    SCREEN_READER,
    DeviceSize,
    LayoutType,
)

ShowLabels = Union[bool, str]
SHOW_LABEL_VALUES = (True, False, SCREEN_READER)


def checked_options(cls, options: Optional[Mapping], context: str) -> dict:
    """Return ``options`` as a dict after rejecting keys unknown to ``cls``."""

    options = dict(options or {})
    allowed = {item.name for item in fields(cls)}
    unknown = sorted(set(options) - allowed)
    if unknown:
        raise ImproperlyConfigured(f"Unknown {context} option(s): {', '.join(unknown)}")
    return options


def _mapping(value) -> Mapping:
    return MappingProxyType(dict(value or {}))


def _validate_show_labels(value, context):
    if value is not None and value not in SHOW_LABEL_VALUES:
        raise ImproperlyConfigured(
            f"{context} 'show_labels' must be True, False or '{SCREEN_READER}', got {value!r}."
        )


def _validate_grid(label_span, device_size, context):
    if label_span is not None and (isinstance(label_span, bool) or not isinstance(label_span, int)):
        raise ImproperlyConfigured(f"{context} 'label_span' must be an integer, got {label_span!r}.")
    if device_size is not None and device_size not in DeviceSize.values:
        raise ImproperlyConfigured(
            f"{context} 'device_size' must be one of {', '.join(DeviceSize.values)}, got {device_size!r}."
        )


@dataclass(frozen=True)
class HorizontalCssClasses:
    label: Optional[str] = None
    wrapper: Optional[str] = None
    offset: Optional[str] = None
    error: Optional[str] = None
    hint: Optional[str] = None

    @classmethod
    def from_options(cls, options):
        if isinstance(options, cls) or options is None:
            return options
        return cls(**checked_options(cls, options, "horizontal_css_classes"))


@dataclass(frozen=True)
class AddonPart:
    content: str = ""
    as_button: bool = False
    options: Mapping = field(default_factory=dict)

    def __post_init__(self):
        object.__setattr__(self, "options", _mapping(self.options))

    @classmethod
    def from_options(cls, options):
        if isinstance(options, cls):
            return options
        if isinstance(options, str):
            return cls(content=options)
        return cls(**checked_options(cls, options, "addon part"))


def _addon_parts(value) -> Tuple[AddonPart, ...]:
    if not value:
        return ()
    if isinstance(value, (list, tuple)):
        return tuple(AddonPart.from_options(item) for item in value)
    return (AddonPart.from_options(value),)


@dataclass(frozen=True)
class Addon:
    """Input group decoration placed around a text input."""

    prepend: Tuple[AddonPart, ...] = ()
    append: Tuple[AddonPart, ...] = ()
    group_options: Mapping = field(default_factory=dict)
    content_before: str = ""
    content_after: str = ""

    def __post_init__(self):
        object.__setattr__(self, "prepend", _addon_parts(self.prepend))
        object.__setattr__(self, "append", _addon_parts(self.append))
        object.__setattr__(self, "group_options", _mapping(self.group_options))

    @classmethod
    def from_options(cls, options):
        if isinstance(options, cls) or not options:
            return options or None
        return cls(**checked_options(cls, options, "addon"))


@dataclass(frozen=True)
class FeedbackIcon:
    type: str = "icon"
    prefix: Optional[str] = None
    default: Optional[str] = None
    success: Optional[str] = None
    error: Optional[str] = None
    default_options: Mapping = field(default_factory=dict)
    success_options: Mapping = field(default_factory=dict)
    error_options: Mapping = field(default_factory=dict)

    def __post_init__(self):
        if self.type not in ("icon", "raw"):
            raise ImproperlyConfigured(f"Feedback icon type must be 'icon' or 'raw', got {self.type!r}.")
        for name in ("default_options", "success_options", "error_options"):
            object.__setattr__(self, name, _mapping(getattr(self, name)))

    @classmethod
    def from_options(cls, options):
        if isinstance(options, cls) or not options:
            return options or None
        return cls(**checked_options(cls, options, "feedback_icon"))


@dataclass(frozen=True)
class HintSettings:
    """Settings for ``HINT_SPECIAL`` hints shown through an icon or the label."""

    show_icon: bool = True
    icon_beside_input: bool = False
    label_template: str = "{label}{help}"
    input_template: str = (
        '<table style="width:100%"{id}><tr><td>{input}</td><td style="width:5%">{help}</td></tr></table>'
    )
    on_label_click: bool = False
    on_label_hover: bool = True
    on_icon_click: bool = True
    on_icon_hover: bool = False
    label_css_class: str = "kv-hint-label"
    icon_css_class: str = "kv-hint-icon"
    content_css_class: str = "kv-hint-content"
    icon: Optional[str] = None
    hide_on_escape: bool = True
    hide_on_click_out: bool = True
    title: Optional[str] = None
    placement: str = "top"
    container: Optional[str] = None
    animation: bool = True
    delay: Any = 0
    template: Optional[str] = None
    selector: Any = False
    viewport: Mapping = field(default_factory=lambda: {"selector": "body", "padding": 0})

    def __post_init__(self):
        object.__setattr__(self, "viewport", _mapping(self.viewport))

    @classmethod
    def from_options(cls, options):
        if isinstance(options, cls) or options is None:
            return options
        return cls(**checked_options(cls, options, "hint_settings"))


@dataclass(frozen=True)
class FormLayoutConfig:
    """Form level layout settings shared by every field of one form."""

    layout_type: str = LayoutType.VERTICAL
    label_span: Optional[int] = None
    device_size: Optional[str] = None
    show_labels: Optional[ShowLabels] = None
    show_errors: Optional[bool] = None
    show_hints: Optional[bool] = None
    full_span: int = FULL_SPAN
    disabled: bool = False
    readonly: bool = False
    static_only: bool = False
    bs_version: int = 5
    tooltip_style_feedback: bool = False

    def __post_init__(self):
        layout_type = self.layout_type or LayoutType.VERTICAL
        if layout_type not in LayoutType.values:
            raise ImproperlyConfigured(f"Invalid layout type: {layout_type}")
        object.__setattr__(self, "layout_type", LayoutType(layout_type))
        if isinstance(self.full_span, bool) or not isinstance(self.full_span, int) or self.full_span < 1:
            raise ImproperlyConfigured("The 'full_span' property must be a valid positive integer.")
        if self.bs_version not in BS_VERSIONS:
            raise ImproperlyConfigured(
                f"Unsupported Bootstrap version {self.bs_version!r}; expected one of {BS_VERSIONS}."
            )
        if layout_type == LayoutType.FLOATING and self.bs_version < 5:
            raise ImproperlyConfigured("The floating layout requires Bootstrap 5.")
        _validate_show_labels(self.show_labels, "Form")
        _validate_grid(self.label_span, self.device_size, "Form")
        for name, value in FORM_TYPE_DEFAULTS[self.layout_type].items():
            if getattr(self, name) is None:
                object.__setattr__(self, name, value)

    @classmethod
    def from_options(cls, options=None, **extra):
        return cls(**checked_options(cls, {**dict(options or {}), **extra}, "form_config"))

    @property
    def is_horizontal(self):
        return self.layout_type == LayoutType.HORIZONTAL

    @property
    def is_inline(self):
        return self.layout_type == LayoutType.INLINE

    @property
    def is_floating(self):
        return self.layout_type == LayoutType.FLOATING

    @property
    def is_vertical(self):
        return self.layout_type == LayoutType.VERTICAL


@dataclass(frozen=True)
class FieldLayoutOverride:
    """Per field overrides; ``None`` means "inherit from the form"."""

    show_labels: Optional[ShowLabels] = None
    show_errors: Optional[bool] = None
    show_hints: Optional[bool] = None
    label_span: Optional[int] = None
    device_size: Optional[str] = None
    enable_label: Optional[bool] = None
    enable_error: Optional[bool] = None
    auto_placeholder: Optional[bool] = None
    skip_form_layout: bool = False
    horizontal_css_classes: Optional[HorizontalCssClasses] = None
    enclosed_by_label: Optional[bool] = None
    addon: Optional[Addon] = None
    feedback_icon: Optional[FeedbackIcon] = None
    hint_type: int = HINT_DEFAULT
    hint_settings: Optional[HintSettings] = None
    auto_offset: bool = True
    render_empty_wrapper: bool = False

    def __post_init__(self):
        _validate_show_labels(self.show_labels, "Field")
        _validate_grid(self.label_span, self.device_size, "Field")
        if self.hint_type not in (HINT_DEFAULT, HINT_SPECIAL):
            raise ImproperlyConfigured(f"Invalid hint type: {self.hint_type!r}")
        object.__setattr__(
            self, "horizontal_css_classes", HorizontalCssClasses.from_options(self.horizontal_css_classes)
        )
        object.__setattr__(self, "addon", Addon.from_options(self.addon))
        object.__setattr__(self, "feedback_icon", FeedbackIcon.from_options(self.feedback_icon))
        hint_settings = HintSettings.from_options(self.hint_settings)
        if hint_settings is None and self.hint_type == HINT_SPECIAL:
            hint_settings = HintSettings()
        object.__setattr__(self, "hint_settings", hint_settings)

    @classmethod
    def from_options(cls, options=None):
        return cls(**checked_options(cls, options, "field"))

    @property
    def is_hint_special(self):
        return self.hint_type == HINT_SPECIAL

    @property
    def errors_forced(self):
        return self.show_errors is True or self.enable_error is True

"""Resolution of the effective layout of a single field.

The resolver combines the form level :class:`FormLayoutConfig` with a field's
:class:`FieldLayoutOverride` and produces a :class:`ResolvedLayout`: the display
flags plus the Bootstrap grid classes for the label, input wrapper, error and
hint blocks.  Resolution is a pure function of its inputs.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional, Union

from .config import FieldLayoutOverride, FormLayoutConfig
from .constants import (
    COL_CSS_PREFIXES,
    DEFAULT_LABEL_SPAN,
    OFFSET_CSS_PREFIXES,
    SCREEN_READER,
    DeviceSize,
    LayoutType,
)

logger = logging.getLogger(__name__)


def _pick(value, default):
    return default if value is None else value


def _join(*classes):
    return " ".join(css for css in classes if css)


@dataclass(frozen=True)
class ResolvedLayout:
    layout_type: str
    show_labels: Union[bool, str]
    show_errors: bool
    show_hints: bool
    auto_placeholder: bool
    label_span: Optional[int] = None
    device_size: str = DeviceSize.MEDIUM
    label_css: str = ""
    input_css: str = ""
    offset_css: str = ""
    error_css: str = ""
    hint_css: str = ""
    full_css: str = ""
    is_toggle: bool = False
    enclosed_by_label: bool = False
    is_offset: bool = False
    skip_form_layout: bool = False
    errors_forced: bool = False
    render_empty_wrapper: bool = False

    @property
    def screen_reader(self):
        return self.show_labels == SCREEN_READER

    @property
    def labels_visible(self):
        return self.show_labels is True

    @property
    def is_horizontal(self):
        return self.layout_type == LayoutType.HORIZONTAL


class LayoutResolver:
    """Computes :class:`ResolvedLayout` instances for the fields of one form."""

    def __init__(self, form_config: FormLayoutConfig):
        self.form_config = form_config

    def grid_prefix(self, size) -> str:
        prefixes = COL_CSS_PREFIXES[self.form_config.bs_version]
        return prefixes.get(size, prefixes[DeviceSize.MEDIUM])

    def offset_prefix(self, size) -> str:
        prefixes = OFFSET_CSS_PREFIXES[self.form_config.bs_version]
        return prefixes.get(size, prefixes[DeviceSize.MEDIUM])

    def enclosed_by_label(self, override: FieldLayoutOverride, custom: bool = False) -> bool:
        """Whether toggle inputs sit inside their label; Bootstrap 3 encloses by default."""

        if override.enclosed_by_label is not None:
            return override.enclosed_by_label
        return self.form_config.bs_version < 4 and not custom

    def resolve(
        self,
        override: Optional[FieldLayoutOverride] = None,
        is_toggle_input: bool = False,
        custom: bool = False,
    ) -> ResolvedLayout:
        config = self.form_config
        override = override or FieldLayoutOverride()

        show_labels = _pick(override.show_labels, config.show_labels)
        show_errors = _pick(override.show_errors, config.show_errors)
        show_hints = _pick(override.show_hints, config.show_hints)

        # Blunt on/off switches win over the show_* flags.
        if override.enable_label is not None:
            show_labels = override.enable_label
        if override.enable_error is not None:
            show_errors = override.enable_error

        auto_placeholder = override.auto_placeholder
        if auto_placeholder is None:
            auto_placeholder = config.is_inline and show_labels is not True
        if auto_placeholder and show_labels != SCREEN_READER:
            show_labels = False

        enclosed = is_toggle_input and self.enclosed_by_label(override, custom)
        base = dict(
            layout_type=config.layout_type,
            show_labels=show_labels,
            show_errors=bool(show_errors),
            show_hints=bool(show_hints),
            auto_placeholder=bool(auto_placeholder),
            is_toggle=is_toggle_input,
            enclosed_by_label=enclosed,
            errors_forced=override.errors_forced,
            render_empty_wrapper=override.render_empty_wrapper,
        )
        if override.skip_form_layout:
            return ResolvedLayout(skip_form_layout=True, **base)

        grid = self._resolve_grid(override, show_labels) if config.is_horizontal else {}
        return ResolvedLayout(is_offset=enclosed, **grid, **base)

    def _resolve_grid(self, override: FieldLayoutOverride, show_labels) -> dict:
        config = self.form_config
        hor = override.horizontal_css_classes
        wrapper = hor.wrapper if hor else None
        span = _pick(override.label_span, config.label_span)
        size = _pick(override.device_size, config.device_size)

        if wrapper and "col-" in wrapper:
            span = None
        elif not span and wrapper is None:
            span = DEFAULT_LABEL_SPAN
        size = size or DeviceSize.MEDIUM

        prefix = self.grid_prefix(size)
        full_css = f"{prefix}{config.full_span}"
        label_css = input_css = offset_css = ""
        if span:
            if span <= 0 or span >= config.full_span:
                logger.debug(f"label_span {span} outside [1, {config.full_span}), using full width")
                span = config.full_span
            label_css = f"{prefix}{span}"
            if span < config.full_span:
                input_css = f"{prefix}{config.full_span - span}"
                offset_css = f"{self.offset_prefix(size)}{span}"
            else:
                input_css = full_css

        if wrapper:
            input_css = wrapper if "col-" in wrapper else _join(input_css, wrapper)
        if show_labels is False or show_labels == SCREEN_READER:
            input_css = full_css

        return dict(
            label_span=span or None,
            device_size=size,
            label_css=_join(label_css, hor.label if hor else None),
            input_css=input_css,
            offset_css=_join(offset_css, hor.offset if hor else None),
            error_css=(hor.error or "") if hor else "",
            hint_css=(hor.hint or "") if hor else "",
            full_css=full_css,
        )


def resolve_layout(form_config, override=None, is_toggle_input=False, custom=False) -> ResolvedLayout:
    return LayoutResolver(form_config).resolve(override, is_toggle_input, custom)

"""Project level settings, read from the ``ACTIVEFORM`` dict in Django settings.

Example::

    ACTIVEFORM = {
        "BS_VERSION": 4,
        "FORM_CONFIG": {"label_span": 3, "device_size": "sm"},
        "FIELD_CONFIG": {"show_required_indicator": False},
    }
"""

from __future__ import annotations

from types import MappingProxyType

from django.conf import settings
from django.core.exceptions import ImproperlyConfigured

from .constants import BS_VERSIONS

DEFAULTS = MappingProxyType({
    "BS_VERSION": 5,
    "FORM_CONFIG": MappingProxyType({}),
    "FIELD_CONFIG": MappingProxyType({}),
    "TOOLTIP_STYLE_FEEDBACK": False,
})


def user_settings() -> dict:
    configured = getattr(settings, "ACTIVEFORM", None) or {}
    unknown = sorted(set(configured) - set(DEFAULTS))
    if unknown:
        raise ImproperlyConfigured(f"Unknown ACTIVEFORM setting(s): {', '.join(unknown)}")
    return dict(configured)


def get_setting(name: str):
    if name not in DEFAULTS:
        raise KeyError(name)
    return user_settings().get(name, DEFAULTS[name])


def check_settings() -> None:
    """Validate the ``ACTIVEFORM`` setting; called when the app is loaded."""

    if get_setting("BS_VERSION") not in BS_VERSIONS:
        raise ImproperlyConfigured(f"ACTIVEFORM['BS_VERSION'] must be one of {BS_VERSIONS}.")
    for name in ("FORM_CONFIG", "FIELD_CONFIG"):
        if not hasattr(get_setting(name), "items"):
            raise ImproperlyConfigured(f"ACTIVEFORM['{name}'] must be a dict.")

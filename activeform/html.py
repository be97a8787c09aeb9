"""Small HTML helpers used to assemble field markup.

Attribute dictionaries follow Django's widget conventions: ``True`` renders a
boolean attribute, ``False``/``None`` drops it and ``class`` is kept as a single
space separated string.  Content passed to :func:`tag` is treated as markup and
is not escaped; callers escape user supplied text before handing it over.
"""

from __future__ import annotations

from django.forms.utils import flatatt
from django.utils.safestring import mark_safe

VOID_ELEMENTS = frozenset(
    ["area", "base", "br", "col", "embed", "hr", "img", "input", "link", "meta", "source", "track", "wbr"]
)


def _split(classes) -> list[str]:
    if not classes:
        return []
    if isinstance(classes, str):
        return classes.split()
    names = []
    for item in classes:
        names.extend(_split(item))
    return names


def merge_attrs(base: dict, extra: dict) -> dict:
    """Copy of ``base`` with ``extra`` applied; ``class`` values accumulate, other keys are replaced."""

    merged = dict(base)
    for attr, value in extra.items():
        if attr == "class" and attr in merged:
            add_css_class(merged, value)
        else:
            merged[attr] = value
    return merged


def has_css_class(attrs: dict, name: str) -> bool:
    return name in _split(attrs.get("class"))


def add_css_class(attrs: dict, classes) -> dict:
    """Append ``classes`` to ``attrs['class']``; already present names are skipped."""

    current = _split(attrs.get("class"))
    for name in _split(classes):
        if name not in current:
            current.append(name)
    if current:
        attrs["class"] = " ".join(current)
    return attrs


def remove_css_class(attrs: dict, classes) -> dict:
    removed = set(_split(classes))
    remaining = [name for name in _split(attrs.get("class")) if name not in removed]
    if remaining:
        attrs["class"] = " ".join(remaining)
    else:
        attrs.pop("class", None)
    return attrs


def add_css_style(attrs: dict, style: str, overwrite: bool = True) -> dict:
    """Merge a ``"prop: value; ..."`` declaration list into ``attrs['style']``."""

    def parse(value):
        declarations = {}
        for chunk in (value or "").split(";"):
            if ":" in chunk:
                prop, _, val = chunk.partition(":")
                declarations[prop.strip()] = val.strip()
        return declarations

    current = parse(attrs.get("style"))
    for prop, val in parse(style).items():
        if overwrite or prop not in current:
            current[prop] = val
    if current:
        attrs["style"] = ";".join(f"{prop}:{val}" for prop, val in current.items())
    return attrs


def begin_tag(name: str, attrs: dict | None = None) -> str:
    return mark_safe(f"<{name}{flatatt(attrs or {})}>")


def end_tag(name: str) -> str:
    return mark_safe(f"</{name}>")


def tag(name: str, content="", attrs: dict | None = None) -> str:
    if name in VOID_ELEMENTS:
        return begin_tag(name, attrs)
    return mark_safe(f"{begin_tag(name, attrs)}{content}{end_tag(name)}")

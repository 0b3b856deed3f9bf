"""Small HTML helpers for building tags from attribute dictionaries.

These helpers cover the handful of serialisation concerns the wizard needs:
merging attribute mappings with override semantics, rendering an attribute
mapping into ``key="value"`` pairs, and wrapping content in a tag. Values are
escaped with :mod:`markupsafe`, so content that is already
:class:`~markupsafe.Markup` passes through untouched.

Examples
--------
>>> from bootstrap_wizard.markup import merge_attributes, tag
>>> merge_attributes({"class": "a"}, {"class": "b", "data-x": "1"})
{'class': 'b', 'data-x': '1'}
>>> str(tag("div", "Thanks", {"class": "tab-pane", "id": "w1-wizard0"}))
'<div id="w1-wizard0" class="tab-pane">Thanks</div>'
"""

from __future__ import annotations

import typing as typ

from markupsafe import Markup, escape

if typ.TYPE_CHECKING:
    import collections.abc as cabc

Attributes = dict[str, typ.Any]

ATTRIBUTE_ORDER: tuple[str, ...] = (
    "type",
    "id",
    "class",
    "name",
    "value",
    "href",
    "src",
    "srcset",
    "form",
    "action",
    "method",
    "selected",
    "checked",
    "readonly",
    "disabled",
    "multiple",
    "size",
    "maxlength",
    "width",
    "height",
    "rows",
    "cols",
    "alt",
    "title",
    "rel",
    "media",
)
DATA_ATTRIBUTES: tuple[str, ...] = ("data", "data-ng", "ng", "aria")
VOID_ELEMENTS = frozenset(
    {
        "area",
        "base",
        "br",
        "col",
        "embed",
        "hr",
        "img",
        "input",
        "link",
        "meta",
        "source",
        "track",
        "wbr",
    }
)


def merge_attributes(
    base: cabc.Mapping[str, typ.Any] | None,
    override: cabc.Mapping[str, typ.Any] | None,
) -> Attributes:
    """Return ``base`` updated key-wise by ``override``.

    The merge is shallow: a key present in ``override`` replaces the whole
    value from ``base``. Neither input is mutated and keys keep the order in
    which they were first seen.
    """
    merged: Attributes = dict(base or {})
    if override:
        merged.update(override)
    return merged


def add_css_class(options: Attributes, css_class: str | cabc.Iterable[str]) -> None:
    """Append ``css_class`` to ``options["class"]`` without duplicating names."""
    wanted = _split_classes(css_class)
    current = _split_classes(options.get("class"))
    for name in wanted:
        if name not in current:
            current.append(name)
    if current:
        options["class"] = " ".join(current)


def _split_classes(value: object) -> list[str]:
    match value:
        case None:
            return []
        case str() as text:
            return [segment for segment in text.split() if segment]
        case list() | tuple() | set() | frozenset():
            names: list[str] = []
            for segment in value:
                names.extend(_split_classes(segment))
            return names
        case _:
            return _split_classes(str(value))


def _ordered_items(attributes: cabc.Mapping[str, typ.Any]) -> list[tuple[str, typ.Any]]:
    ordered = [(key, attributes[key]) for key in ATTRIBUTE_ORDER if key in attributes]
    ordered.extend(
        (key, value) for key, value in attributes.items() if key not in ATTRIBUTE_ORDER
    )
    return ordered


def render_tag_attributes(attributes: cabc.Mapping[str, typ.Any] | None) -> Markup:
    """Render an attribute mapping into an HTML attribute string.

    Parameters
    ----------
    attributes : Mapping[str, Any] or None
        Attribute names mapped to values. ``True`` renders a bare attribute,
        ``False`` and ``None`` drop it. ``class`` accepts a list of names,
        ``style`` accepts a mapping of properties and ``data``/``aria``
        mappings expand into prefixed attributes.

    Returns
    -------
    Markup
        The attributes with a leading space each, or an empty string.
    """
    if not attributes:
        return Markup("")
    parts: list[str] = []
    for name, value in _ordered_items(attributes):
        if value is None or value is False:
            continue
        if name in DATA_ATTRIBUTES and isinstance(value, dict):
            for sub_name, sub_value in value.items():
                parts.extend(_render_single(f"{name}-{sub_name}", sub_value))
            continue
        if name == "class":
            classes = " ".join(_split_classes(value))
            if classes:
                parts.append(f' class="{escape(classes)}"')
            continue
        if name == "style" and isinstance(value, dict):
            style = " ".join(f"{key}: {item};" for key, item in value.items())
            if style:
                parts.append(f' style="{escape(style)}"')
            continue
        parts.extend(_render_single(name, value))
    return Markup("".join(parts))


def _render_single(name: str, value: object) -> list[str]:
    if value is None or value is False:
        return []
    if value is True:
        return [f" {escape(name)}"]
    return [f' {escape(name)}="{escape(value)}"']


def begin_tag(
    name: str, attributes: cabc.Mapping[str, typ.Any] | None = None
) -> Markup:
    """Return the opening tag for ``name`` with rendered attributes."""
    return Markup(f"<{name}{render_tag_attributes(attributes)}>")


def end_tag(name: str) -> Markup:
    """Return the closing tag for ``name``."""
    return Markup(f"</{name}>")


def tag(
    name: str,
    content: object = "",
    attributes: cabc.Mapping[str, typ.Any] | None = None,
) -> Markup:
    """Wrap ``content`` in a ``name`` element.

    ``content`` is inserted verbatim: callers escape untrusted text first, or
    pass :class:`~markupsafe.Markup`. Void elements never receive content or
    a closing tag.
    """
    opening = begin_tag(name, attributes)
    if name.lower() in VOID_ELEMENTS:
        return opening
    return Markup(f"{opening}{content}{end_tag(name)}")


def encode(text: object) -> Markup:
    """HTML-escape ``text``; :class:`Markup` values are returned unchanged."""
    return escape(text)


__all__ = [
    "ATTRIBUTE_ORDER",
    "Attributes",
    "add_css_class",
    "begin_tag",
    "encode",
    "end_tag",
    "merge_attributes",
    "render_tag_attributes",
    "tag",
]

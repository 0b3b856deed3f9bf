"""Resolve loosely typed step descriptors into :data:`StepSpec` variants.

Steps arrive as ``(key, value)`` pairs. The key is either a position or a
string that doubles as the tab label; the value is either a bare content
string or a mapping of step fields. :func:`parse_step` turns each pair into a
:class:`PlainText` or :class:`StepFields` once, so the renderer never branches
on input shape.

Examples
--------
>>> from bootstrap_wizard.steps import iter_step_pairs, parse_step
>>> pairs = iter_step_pairs({"Finished": "Thanks"})
>>> parse_step(*pairs[0])
PlainText(content='Thanks')
"""

from __future__ import annotations

import re
import typing as typ

from .models import ConfigurationError, PlainText, StepFields, StepKey, StepSpec

if typ.TYPE_CHECKING:
    import collections.abc as cabc

FIELD_ALIASES: dict[str, str] = {
    "labelOptions": "label_options",
    "linkOptions": "link_options",
}
OPTION_FIELDS = ("options", "label_options", "link_options")
CANONICAL_INTEGER = re.compile(r"0|-?[1-9][0-9]*")


def iter_step_pairs(items: object) -> list[tuple[StepKey, typ.Any]]:
    """Return ``items`` as an ordered list of ``(key, value)`` pairs.

    Mappings keep their keys; sequences are keyed by position. Anything else
    is a configuration error.
    """
    match items:
        case None:
            return []
        case dict():
            return list(items.items())
        case list() | tuple():
            if all(_is_pair(entry) for entry in items) and items:
                return [(entry[0], entry[1]) for entry in items]
            return list(enumerate(items))
        case _:
            msg = "Wizard 'items' must be a mapping or a list."
            raise ConfigurationError(msg)


def _is_pair(entry: object) -> bool:
    return (
        isinstance(entry, tuple)
        and len(entry) == 2  # noqa: PLR2004 - key/value pair
        and isinstance(entry[0], str | int)
    )


def is_label_key(key: object) -> bool:
    """Return whether a collection key can serve as the step label."""
    if not isinstance(key, str) or not key:
        return False
    return CANONICAL_INTEGER.fullmatch(key) is None


def parse_step(key: StepKey, value: object) -> StepSpec | None:
    """Resolve one step descriptor, returning ``None`` for hidden steps.

    Parameters
    ----------
    key : str or int
        Collection key of the step. A non-numeric string is used as the label.
    value : object
        Bare content (usually a string) or a mapping of step fields. A
        :class:`StepFields` or :class:`PlainText` instance is accepted as is.

    Returns
    -------
    StepSpec or None
        The resolved step, or ``None`` when the step sets ``visible: false``.

    Raises
    ------
    ConfigurationError
        If the key cannot serve as a label and the step has no ``label`` key.
        An explicit ``label: null`` counts as present and yields an empty label.
    """
    match value:
        case StepFields() | PlainText():
            spec: StepSpec = value
        case dict():
            fields = {
                FIELD_ALIASES.get(name, name): item for name, item in value.items()
            }
            if not fields.pop("visible", True):
                return None
            spec = _build_fields(key, fields)
        case _:
            spec = PlainText(content=value)

    has_label = isinstance(spec, StepFields) and spec.label is not None
    if not is_label_key(key) and not has_label:
        msg = "The 'label' option is required."
        raise ConfigurationError(msg)
    return spec


def _build_fields(key: StepKey, fields: cabc.Mapping[str, typ.Any]) -> StepFields:
    for name in OPTION_FIELDS:
        payload = fields.get(name)
        if payload is not None and not isinstance(payload, dict):
            msg = f"Step {key!r} option '{name}' must be a mapping."
            raise ConfigurationError(msg)
    label = fields.get("label")
    if label is None and "label" in fields:
        label = ""
    encode = fields.get("encode")
    return StepFields(
        label=None if label is None else str(label),
        content=fields.get("content", ""),
        url=fields.get("url") or None,
        encode=None if encode is None else bool(encode),
        options=dict(fields.get("options") or {}),
        label_options=dict(fields.get("label_options") or {}),
        link_options=dict(fields.get("link_options") or {}),
    )


__all__ = ["FIELD_ALIASES", "is_label_key", "iter_step_pairs", "parse_step"]

"""Utility helpers shared by the wizard configuration loader."""

from __future__ import annotations

import dataclasses as dc
import typing as typ

from bootstrap_wizard.markup import merge_attributes
from bootstrap_wizard.models import ConfigurationError, FooterConfig

OPTION_BLOCKS: tuple[str, ...] = (
    "options",
    "item_options",
    "label_options",
    "link_options",
    "header_options",
    "tab_options",
    "nav_options",
    "client_options",
    "client_events",
)
KEY_ALIASES: dict[str, str] = {
    "itemOptions": "item_options",
    "labelOptions": "label_options",
    "linkOptions": "link_options",
    "headerOptions": "header_options",
    "tabOptions": "tab_options",
    "navOptions": "nav_options",
    "encodeLabels": "encode_labels",
    "clientOptions": "client_options",
    "clientEvents": "client_events",
}


def _canonical_keys(payload: typ.Mapping[str, typ.Any]) -> dict[str, typ.Any]:
    """Rename camelCase widget keys to their snake_case equivalents."""
    return {
        KEY_ALIASES.get(str(key), str(key)): value for key, value in payload.items()
    }


def _option_block(payload: typ.Mapping[str, typ.Any], name: str) -> dict[str, typ.Any]:
    """Return the option mapping ``name`` from ``payload`` or an empty dict."""
    value = payload.get(name)
    match value:
        case None:
            return {}
        case dict():
            return dict(value)
        case _:
            msg = f"Wizard option '{name}' must be a mapping."
            raise ConfigurationError(msg)


def _merge_defaults(
    defaults: typ.Mapping[str, typ.Any], payload: typ.Mapping[str, typ.Any]
) -> dict[str, typ.Any]:
    """Layer ``payload`` over ``defaults``; option blocks merge key-wise."""
    combined: dict[str, typ.Any] = {**defaults, **payload}
    for name in (*OPTION_BLOCKS, "footer"):
        if name in defaults and name in payload:
            combined[name] = merge_attributes(
                _option_block(defaults, name), _option_block(payload, name)
            )
    return combined


def _build_footer_config(payload: typ.Mapping[str, typ.Any] | None) -> FooterConfig:
    """Build a FooterConfig from ``payload``, keeping defaults for gaps."""
    if not payload:
        return FooterConfig()
    known = {field.name for field in dc.fields(FooterConfig)}
    unknown = sorted(set(payload) - known)
    if unknown:
        msg = f"Unknown footer option(s): {', '.join(map(str, unknown))}"
        raise ConfigurationError(msg)
    return FooterConfig(**{name: str(value) for name, value in payload.items()})


__all__ = [
    "KEY_ALIASES",
    "OPTION_BLOCKS",
    "_build_footer_config",
    "_canonical_keys",
    "_merge_defaults",
    "_option_block",
]

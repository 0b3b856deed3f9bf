"""Load wizard configuration YAML into typed dataclasses."""

from __future__ import annotations

import dataclasses as dc
import typing as typ
from pathlib import Path

from ruamel.yaml import YAML

from bootstrap_wizard.models import (
    ConfigurationError,
    PageConfig,
    WizardConfig,
)
from bootstrap_wizard.steps import iter_step_pairs

from .helpers import (
    _build_footer_config,
    _canonical_keys,
    _merge_defaults,
    _option_block,
)


@dc.dataclass(slots=True)
class WizardDocument:
    """A parsed configuration file: the widget plus its standalone page."""

    wizard: WizardConfig
    page: PageConfig


def load_wizard_config(path: Path) -> WizardDocument:
    """Load the YAML file describing a wizard and the page that hosts it.

    Parameters
    ----------
    path : Path
        Filesystem path to the YAML configuration (for example,
        ``config/wizard.yaml``).

    Returns
    -------
    WizardDocument
        The widget configuration with ``defaults`` applied, and the page
        settings used when rendering a standalone document.

    Raises
    ------
    FileNotFoundError
        If the configuration file does not exist at ``path``.
    TypeError
        If the top-level YAML structure is not a mapping.
    ConfigurationError
        If the ``wizard`` block is missing, has no container ``id``, or holds
        malformed items or option blocks.

    Examples
    --------
    >>> from pathlib import Path
    >>> document = load_wizard_config(Path("config/wizard.yaml"))  # doctest: +SKIP
    >>> document.wizard.container_id  # doctest: +SKIP
    'payroll-wizard'
    """
    if not path.exists():
        msg = f"Configuration file '{path}' not found."
        raise FileNotFoundError(msg)

    loader = YAML(typ="safe")
    loader.version = (1, 2)
    with path.open("r", encoding="utf-8") as handle:
        loaded = loader.load(handle) or {}
    if not isinstance(loaded, dict):  # pragma: no cover - config error guard
        msg = "Top-level YAML structure must be a mapping."
        raise TypeError(msg)
    raw: dict[str, typ.Any] = dict(loaded)

    wizard_raw = raw.get("wizard")
    if not isinstance(wizard_raw, dict):
        msg = "Configuration requires a 'wizard' mapping."
        raise ConfigurationError(msg)
    defaults = _canonical_keys(raw.get("defaults", {}) or {})
    payload = _merge_defaults(defaults, _canonical_keys(wizard_raw))

    return WizardDocument(
        wizard=build_wizard_config(payload),
        page=_build_page_config(raw.get("page") or {}),
    )


def build_wizard_config(payload: typ.Mapping[str, typ.Any]) -> WizardConfig:
    """Build a WizardConfig from a plain mapping.

    The container id may be given as ``id`` or inside ``options``; ``items``
    may be a mapping (keys become labels) or a list. camelCase keys such as
    ``itemOptions`` are accepted alongside their snake_case forms.

    Raises
    ------
    ConfigurationError
        If no container id is present or a block has the wrong shape.
    """
    data = _canonical_keys(payload)
    options = _option_block(data, "options")
    container_id = data.get("id", options.get("id"))
    if not container_id:
        msg = "Wizard configuration requires an 'id'."
        raise ConfigurationError(msg)
    options["id"] = str(container_id)

    return WizardConfig(
        options=options,
        items=iter_step_pairs(data.get("items")),
        item_options=_option_block(data, "item_options"),
        label_options=_option_block(data, "label_options"),
        link_options=_option_block(data, "link_options"),
        header_options=_option_block(data, "header_options"),
        tab_options=_option_block(data, "tab_options"),
        nav_options=_option_block(data, "nav_options"),
        encode_labels=bool(data.get("encode_labels", True)),
        client_options=_option_block(data, "client_options"),
        client_events={
            str(event): str(handler)
            for event, handler in _option_block(data, "client_events").items()
        },
        footer=_build_footer_config(_option_block(data, "footer")),
    )


def _build_page_config(payload: typ.Mapping[str, typ.Any]) -> PageConfig:
    """Build the standalone page settings, keeping defaults for gaps."""
    if not isinstance(payload, dict):
        msg = "Page configuration must be a mapping."
        raise ConfigurationError(msg)
    base = PageConfig()
    form_action = payload.get("form_action")
    return PageConfig(
        output=Path(payload.get("output", base.output)),
        title=str(payload.get("title", base.title)),
        lang=str(payload.get("lang", base.lang)),
        form_action=str(form_action) if form_action else None,
    )


__all__ = ["WizardDocument", "build_wizard_config", "load_wizard_config"]

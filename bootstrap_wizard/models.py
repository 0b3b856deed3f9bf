"""Typed dataclasses describing wizard configuration and render results."""

from __future__ import annotations

import dataclasses as dc
import typing as typ
from pathlib import Path

from markupsafe import Markup  # noqa: TC002 - used for runtime type metadata

from .markup import Attributes  # noqa: TC001 - used for runtime type metadata

StepKey = str | int
StepContent = typ.Any


class ConfigurationError(ValueError):
    """Raised when the wizard configuration is invalid or incomplete."""


@dc.dataclass(slots=True, frozen=True)
class PlainText:
    """Shorthand step given as bare content, usually a string."""

    content: StepContent


@dc.dataclass(slots=True)
class StepFields:
    """Fully specified step mapping.

    Attributes
    ----------
    label : str or None
        Tab header label; may be omitted when the step is keyed by a string.
    content : Any
        Pane body: raw HTML, :class:`~markupsafe.Markup`, an object exposing
        ``__html__`` or ``render()``, or a zero-argument callable.
    url : str or None
        External link target. When set, the tab links away instead of
        toggling a pane.
    encode : bool or None
        Per-step override of the widget's ``encode_labels`` flag.
    options : dict
        Attributes of the content pane; the special ``tag`` key names the
        element.
    label_options : dict
        Attributes of the tab header ``<li>``.
    link_options : dict
        Attributes of the tab header ``<a>``.
    """

    label: str | None = None
    content: StepContent = ""
    url: str | None = None
    encode: bool | None = None
    options: Attributes = dc.field(default_factory=dict)
    label_options: Attributes = dc.field(default_factory=dict)
    link_options: Attributes = dc.field(default_factory=dict)


StepSpec = PlainText | StepFields


@dc.dataclass(slots=True)
class NavEntry:
    """One tab header handed to the nav renderer."""

    label: Markup
    target: str
    link_options: Attributes
    options: Attributes


@dc.dataclass(slots=True)
class ContentPane:
    """One content pane; ``attributes`` always carries the anchor ``id``."""

    tag: str
    body: Markup
    attributes: Attributes

    @property
    def id(self) -> str:
        """Return the anchor identifier of the pane."""
        return str(self.attributes["id"])


@dc.dataclass(slots=True)
class RenderPlan:
    """Nav entries and panes produced by one normalisation pass."""

    nav_entries: list[NavEntry]
    panes: list[ContentPane]


@dc.dataclass(slots=True)
class FooterConfig:
    """Captions and form field of the wizard's trailing control bar."""

    previous_label: str = "Previous"
    next_label: str = "Next"
    finish_label: str = "Finish"
    previous_icon: str = "zmdi zmdi-chevron-left"
    next_icon: str = "zmdi zmdi-chevron-right"
    finish_icon: str = "zmdi zmdi-check"
    finish_name: str = "save_payrolls"
    finish_value: str = "true"


@dc.dataclass(slots=True)
class PageConfig:
    """Standalone HTML page wrapped around a rendered wizard."""

    output: Path = Path("public/wizard.html")
    title: str = "Wizard"
    lang: str = "en"
    form_action: str | None = None


@dc.dataclass(slots=True)
class WizardConfig:
    """Everything needed to render one wizard widget.

    ``options`` holds the outer container attributes and must contain an
    ``id``; the anchor identifiers of the panes derive from it.
    """

    options: Attributes
    items: list[tuple[StepKey, typ.Any]] = dc.field(default_factory=list)
    item_options: Attributes = dc.field(default_factory=dict)
    label_options: Attributes = dc.field(default_factory=dict)
    link_options: Attributes = dc.field(default_factory=dict)
    header_options: Attributes = dc.field(default_factory=dict)
    tab_options: Attributes = dc.field(default_factory=dict)
    nav_options: Attributes = dc.field(default_factory=dict)
    encode_labels: bool = True
    client_options: dict[str, typ.Any] = dc.field(default_factory=dict)
    client_events: dict[str, str] = dc.field(default_factory=dict)
    footer: FooterConfig = dc.field(default_factory=FooterConfig)

    @property
    def container_id(self) -> str:
        """Return the outer container id, failing when it is missing."""
        container_id = self.options.get("id")
        if not container_id:
            msg = "The wizard container requires an 'id' option."
            raise ConfigurationError(msg)
        return str(container_id)


__all__ = [
    "ConfigurationError",
    "ContentPane",
    "FooterConfig",
    "NavEntry",
    "PageConfig",
    "PlainText",
    "RenderPlan",
    "StepFields",
    "StepKey",
    "StepSpec",
    "WizardConfig",
]

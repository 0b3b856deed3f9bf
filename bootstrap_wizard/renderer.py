"""Normalise wizard steps and assemble the tab list, panes and footer.

:class:`WizardRenderer` makes a single pass over the configured steps. Each
visible step yields one :class:`~bootstrap_wizard.models.NavEntry` and one
:class:`~bootstrap_wizard.models.ContentPane` that share an anchor id, which
is what lets the ``bootstrapWizard`` plugin switch panes when a tab is
clicked. The nav list is produced by an injected
:class:`~bootstrap_wizard.nav.NavRenderer`; the footer control bar comes from
the ``wizard_footer.jinja`` template.

Example
-------
>>> from bootstrap_wizard.config import build_wizard_config
>>> from bootstrap_wizard.renderer import WizardRenderer
>>> config = build_wizard_config({"id": "w1", "items": {"Finished": "Thanks"}})
>>> plan = WizardRenderer(config).build()
>>> plan.nav_entries[0].target
'#w1-wizard0'
>>> str(plan.panes[0].body)
'Thanks'
"""

from __future__ import annotations

import typing as typ
from pathlib import Path

from jinja2 import Environment, FileSystemLoader
from markupsafe import Markup

from .markup import encode, merge_attributes, tag
from .models import ContentPane, NavEntry, RenderPlan, StepFields
from .nav import BootstrapNav
from .steps import is_label_key, parse_step

if typ.TYPE_CHECKING:
    from .markup import Attributes
    from .models import StepKey, StepSpec, WizardConfig
    from .nav import NavRenderer

DEFAULT_PANE_TAG = "div"
DEFAULT_TAB_OPTIONS: dict[str, str] = {"class": "tab-content"}
TOGGLE_ATTRIBUTE = "data-toggle"
TOGGLE_VALUE = "tab"
ANCHOR_TEMPLATE = "{container_id}-wizard{index}"
FOOTER_TEMPLATE = "wizard_footer.jinja"
TEMPLATES_DIR = Path(__file__).parent / "templates"


def render_content(content: object) -> Markup:
    """Return pane content as markup without escaping it.

    Strings are treated as HTML. Objects implementing ``__html__`` are
    rendered through it, zero-argument callables are invoked and objects
    with a ``render()`` method are rendered. ``None`` yields empty markup.
    """
    match content:
        case None:
            return Markup("")
        case str():
            return Markup(content)
        case _ if hasattr(content, "__html__"):
            return Markup(content)
        case _ if callable(content):
            return render_content(content())
        case _ if callable(getattr(content, "render", None)):
            return render_content(content.render())
        case _:
            return Markup(str(content))


class WizardRenderer:
    """Render the tab headers, panes and footer of one wizard."""

    def __init__(
        self,
        config: WizardConfig,
        *,
        nav_renderer: NavRenderer | None = None,
        templates_dir: Path | None = None,
    ) -> None:
        """Initialize the renderer and its Jinja environment.

        Parameters
        ----------
        config : WizardConfig
            Widget configuration; ``config.options`` must contain an ``id``.
        nav_renderer : NavRenderer, optional
            Renders the tab header list. Defaults to :class:`BootstrapNav`
            using the ``tag`` from ``config.header_options``.
        templates_dir : Path, optional
            Directory holding ``wizard_footer.jinja``; defaults to the
            package templates so the footer can be swapped per project.
        """
        self.config = config
        header_tag = config.header_options.get("tag", "ul")
        self.nav_renderer = nav_renderer or BootstrapNav(tag_name=header_tag)
        self.templates_dir = templates_dir or TEMPLATES_DIR
        self.env = Environment(
            loader=FileSystemLoader(str(self.templates_dir)),
            autoescape=True,
            trim_blocks=True,
            lstrip_blocks=True,
        )
        self.footer_template = self.env.get_template(FOOTER_TEMPLATE)

    def build(self) -> RenderPlan:
        """Normalise every visible step into a nav entry and a pane.

        Returns
        -------
        RenderPlan
            Nav entries and panes in input order, one of each per visible
            step.

        Raises
        ------
        ConfigurationError
            If a step has neither a string key nor a ``label``, or the
            container has no ``id``.
        """
        container_id = self.config.container_id
        nav_entries: list[NavEntry] = []
        panes: list[ContentPane] = []
        index = 0
        for key, value in self.config.items:
            spec = parse_step(key, value)
            if spec is None:
                continue
            anchor = ANCHOR_TEMPLATE.format(container_id=container_id, index=index)
            entry, pane = self._normalize(key, spec, anchor)
            nav_entries.append(entry)
            panes.append(pane)
            index += 1
        return RenderPlan(nav_entries=nav_entries, panes=panes)

    def _normalize(
        self, key: StepKey, spec: StepSpec, anchor: str
    ) -> tuple[NavEntry, ContentPane]:
        match spec:
            case StepFields():
                fields = spec
            case _:
                fields = StepFields(content=spec.content)
        label = self._resolve_label(key, fields)

        config = self.config
        item_options = merge_attributes(config.item_options, fields.options)
        label_options = merge_attributes(config.label_options, fields.label_options)
        link_options = merge_attributes(config.link_options, fields.link_options)
        if item_options.get("id") is None:
            item_options["id"] = anchor

        if fields.url:
            target = fields.url
        else:
            target = f"#{item_options['id']}"
            link_options[TOGGLE_ATTRIBUTE] = TOGGLE_VALUE

        pane_tag = str(item_options.pop("tag", None) or DEFAULT_PANE_TAG)
        entry = NavEntry(
            label=label,
            target=target,
            link_options=link_options,
            options=label_options,
        )
        pane = ContentPane(
            tag=pane_tag, body=render_content(fields.content), attributes=item_options
        )
        return entry, pane

    def _resolve_label(self, key: StepKey, fields: StepFields) -> Markup:
        label = str(key) if is_label_key(key) else str(fields.label)
        should_encode = (
            self.config.encode_labels if fields.encode is None else fields.encode
        )
        return encode(label) if should_encode else Markup(label)

    def render_nav(self, plan: RenderPlan) -> Markup:
        """Return the tab header list for ``plan``."""
        return Markup(
            self.nav_renderer.render(plan.nav_entries, dict(self.config.nav_options))
        )

    def render_panes(self, plan: RenderPlan) -> Markup:
        """Return the pane container wrapping every pane of ``plan``."""
        rendered = [tag(pane.tag, pane.body, pane.attributes) for pane in plan.panes]
        tab_options = self.config.tab_options or DEFAULT_TAB_OPTIONS
        return tag("div", Markup("\n").join(rendered), tab_options)

    def render_footer(self) -> Markup:
        """Return the previous/next/finish control bar."""
        return Markup(self.footer_template.render(footer=self.config.footer).strip())

    def render_items(self) -> Markup:
        """Render tab headers, panes and the footer as one fragment."""
        plan = self.build()
        return self.render_nav(plan) + self.render_panes(plan) + self.render_footer()


__all__ = [
    "ANCHOR_TEMPLATE",
    "DEFAULT_TAB_OPTIONS",
    "TOGGLE_ATTRIBUTE",
    "WizardRenderer",
    "render_content",
]

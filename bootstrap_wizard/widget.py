"""Top-level wizard widget: asset registration plus the outer container."""

from __future__ import annotations

import typing as typ

from markupsafe import Markup

from .assets import WIZARD_ASSET, AssetCollector
from .markup import begin_tag, end_tag
from .renderer import WizardRenderer

if typ.TYPE_CHECKING:
    from pathlib import Path

    from .assets import AssetRegistrar
    from .models import WizardConfig
    from .nav import NavRenderer

PLUGIN_NAME = "bootstrapWizard"


class Wizard:
    """Render a wizard and register the client-side plugin that drives it."""

    def __init__(
        self,
        config: WizardConfig,
        *,
        assets: AssetRegistrar | None = None,
        nav_renderer: NavRenderer | None = None,
        templates_dir: Path | None = None,
    ) -> None:
        """Initialize the widget with its collaborators.

        Parameters
        ----------
        config : WizardConfig
            Widget configuration; ``config.options`` must contain an ``id``.
        assets : AssetRegistrar, optional
            Receives the wizard bundle and the plugin bootstrap call; a fresh
            :class:`AssetCollector` is used when omitted.
        nav_renderer : NavRenderer, optional
            Tab header renderer handed to :class:`WizardRenderer`.
        templates_dir : Path, optional
            Template directory override for the footer.
        """
        self.config = config
        self.assets: AssetRegistrar = assets if assets is not None else AssetCollector()
        self.renderer = WizardRenderer(
            config, nav_renderer=nav_renderer, templates_dir=templates_dir
        )

    def run(self) -> Markup:
        """Register assets and return the complete widget markup.

        Raises
        ------
        ConfigurationError
            Propagated from rendering when a step lacks a label or the
            container has no ``id``.
        """
        container_id = self.config.container_id
        self.assets.register(WIZARD_ASSET)
        self.assets.register_plugin(
            PLUGIN_NAME,
            container_id,
            self.config.client_options,
            self.config.client_events,
        )
        return Markup("\n").join(
            [
                begin_tag("div", self.config.options),
                self.renderer.render_items(),
                end_tag("div"),
            ]
        )


def render_wizard(config: WizardConfig, **kwargs: typ.Any) -> Markup:
    """Render ``config`` with a throwaway :class:`Wizard`."""
    return Wizard(config, **kwargs).run()


__all__ = ["PLUGIN_NAME", "Wizard", "render_wizard"]

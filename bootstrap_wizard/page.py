"""Standalone wizard page rendering pipeline.

This module turns a loaded wizard configuration into a complete HTML document:
the widget markup inside an optional ``<form>``, preceded by the stylesheets
and followed by the scripts and plugin bootstrap that rendering registered.
The main entry point is :class:`WizardPageBuilder`.

>>> from pathlib import Path
>>> from bootstrap_wizard.config import load_wizard_config
>>> document = load_wizard_config(Path("config/wizard.yaml"))  # doctest: +SKIP
>>> WizardPageBuilder(document.wizard, document.page).run()  # doctest: +SKIP
PosixPath('public/wizard.html')
"""

from __future__ import annotations

import datetime as dt
import typing as typ
from pathlib import Path

from jinja2 import Environment, FileSystemLoader

from .assets import AssetCollector
from .renderer import TEMPLATES_DIR
from .widget import Wizard

if typ.TYPE_CHECKING:
    from .models import PageConfig, WizardConfig


class WizardPageBuilder:
    """Render a wizard into a standalone HTML page on disk."""

    def __init__(
        self,
        wizard: WizardConfig,
        page: PageConfig,
        *,
        templates_dir: Path | None = None,
    ) -> None:
        """Initialize the builder and Jinja environment.

        Parameters
        ----------
        wizard : WizardConfig
            Widget configuration to render.
        page : PageConfig
            Output path, title, language and optional form action.
        templates_dir : Path, optional
            Directory containing ``wizard_page.jinja`` and
            ``wizard_footer.jinja``; defaults to the package templates.
        """
        self.wizard = wizard
        self.page = page
        self.templates_dir = templates_dir or TEMPLATES_DIR
        self.env = Environment(
            loader=FileSystemLoader(str(self.templates_dir)),
            autoescape=True,
            trim_blocks=True,
            lstrip_blocks=True,
        )
        self.template = self.env.get_template("wizard_page.jinja")

    def render(self) -> str:
        """Return the page HTML, always terminated by a newline."""
        assets = AssetCollector()
        wizard_html = Wizard(
            self.wizard, assets=assets, templates_dir=self.templates_dir
        ).run()
        html = self.template.render(
            page=self.page,
            wizard_html=wizard_html,
            assets=assets,
            generated_at=dt.datetime.now(dt.UTC),
        )
        if not html.endswith("\n"):
            html += "\n"
        return html

    def run(self) -> Path:
        """Render and write the page, returning the output path."""
        output_path = self.page.output
        output_path.parent.mkdir(parents=True, exist_ok=True)
        output_path.write_text(self.render(), encoding="utf-8")
        return output_path


__all__ = ["WizardPageBuilder"]

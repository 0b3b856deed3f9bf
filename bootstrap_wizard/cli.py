"""Cyclopts CLI entrypoint for rendering bootstrap wizards from YAML.

The ``wizard`` console script defined here renders the wizard described by a
YAML configuration either as an embeddable HTML fragment or as a standalone
page, and lists the client-side assets and plugin bootstrap the widget
needs.

Examples
--------
Render the default configuration as a standalone page:

>>> from bootstrap_wizard.cli import main
>>> main()  # doctest: +SKIP

Render only the widget fragment into a custom file:

>>> from bootstrap_wizard.cli import app
>>> app(
...     ["render", "--no-page", "--output", "dist/wizard.html"]
... )  # doctest: +SKIP
"""

from __future__ import annotations

import typing as typ
from pathlib import Path

import cyclopts
from cyclopts import App, Parameter

from .assets import AssetCollector
from .config import load_wizard_config
from .page import WizardPageBuilder
from .widget import Wizard

DEFAULT_CONFIG = Path("config/wizard.yaml")

app = App(name="wizard", config=cyclopts.config.Env("INPUT_", command=False))  # type: ignore[unknown-argument]


def _format_path(path: Path) -> str:
    """Return a cwd-relative path when possible, otherwise the absolute path."""
    if path.is_absolute():
        try:
            return str(path.relative_to(Path.cwd()))
        except ValueError:  # pragma: no cover - fallback for different roots
            return str(path)
    return str(path)


@app.command(help="Render the configured wizard to an HTML file.")
def render(
    *,
    config: typ.Annotated[
        Path, Parameter(help="Path to wizard config", env_var="INPUT_CONFIG")
    ] = DEFAULT_CONFIG,
    output: typ.Annotated[
        Path | None,
        Parameter(help="Override the output file", env_var="INPUT_OUTPUT"),
    ] = None,
    page: typ.Annotated[
        bool, Parameter(help="Wrap the widget in a standalone HTML page")
    ] = True,
) -> None:
    """Render the wizard described by ``config``.

    Parameters
    ----------
    config : Path, optional
        Path to the wizard YAML file (overridable via ``INPUT_CONFIG``).
    output : Path or None, optional
        Destination file; defaults to the ``page.output`` setting.
    page : bool, optional
        When ``True`` (default) write a full HTML document with assets;
        otherwise write only the widget markup.

    Raises
    ------
    ConfigurationError
        If the configuration is invalid, for example a step without a label.
    """
    document = load_wizard_config(config)
    if output is not None:
        document.page.output = output

    if page:
        written = WizardPageBuilder(document.wizard, document.page).run()
    else:
        written = document.page.output
        written.parent.mkdir(parents=True, exist_ok=True)
        written.write_text(f"{Wizard(document.wizard).run()}\n", encoding="utf-8")
    print(f"wrote {_format_path(written)}")


@app.command(help="List the assets and plugin bootstrap the wizard registers.")
def assets(
    *,
    config: typ.Annotated[
        Path, Parameter(help="Path to wizard config", env_var="INPUT_CONFIG")
    ] = DEFAULT_CONFIG,
) -> None:
    """Print stylesheet URLs, script URLs and plugin statements in load order."""
    document = load_wizard_config(config)
    collector = AssetCollector()
    Wizard(document.wizard, assets=collector).run()
    for url in collector.css_urls():
        print(f"css {url}")
    for url in collector.js_urls():
        print(f"js {url}")
    for statement in collector.scripts:
        print(statement)


def main() -> None:
    """Invoke the Cyclopts application that powers the ``wizard`` command."""
    app()


if __name__ == "__main__":  # pragma: no cover - manual invocation helper
    main()

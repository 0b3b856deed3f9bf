"""Server-side rendering of Bootstrap tab wizards.

This package renders the markup expected by the ``bootstrapWizard`` jQuery
plugin: a tab header list, the stacked content panes and a previous/next/
finish control bar, all wired together by per-step anchor ids. It also
exposes the ``wizard`` CLI used to render a wizard described in YAML.

Exports
-------
- ``Wizard``: widget that registers assets and renders the full markup.
- ``WizardRenderer``: the step normalisation and markup assembly core.
- ``build_wizard_config`` / ``load_wizard_config``: configuration builders.
- ``app`` / ``main``: Cyclopts application entry points.

Examples
--------
>>> from bootstrap_wizard import Wizard, build_wizard_config
>>> config = build_wizard_config({"id": "w1", "items": {"Finished": "Thanks"}})
>>> 'id="w1-wizard0"' in Wizard(config).run()
True
"""

from __future__ import annotations

from .cli import app, main
from .config import build_wizard_config, load_wizard_config
from .models import ConfigurationError, FooterConfig, WizardConfig
from .renderer import WizardRenderer
from .widget import Wizard, render_wizard

__all__ = [
    "ConfigurationError",
    "FooterConfig",
    "Wizard",
    "WizardConfig",
    "WizardRenderer",
    "app",
    "build_wizard_config",
    "load_wizard_config",
    "main",
    "render_wizard",
]

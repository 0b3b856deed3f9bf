"""Load and validate wizard configuration YAML.

This subpackage parses a wizard YAML file, layers the ``defaults`` block under
the ``wizard`` block, and produces the dataclasses the renderer consumes
(:class:`~bootstrap_wizard.models.WizardConfig`,
:class:`~bootstrap_wizard.models.PageConfig`). :func:`build_wizard_config`
performs the same normalisation for mappings built in Python.

Examples
--------
>>> from bootstrap_wizard.config import build_wizard_config
>>> config = build_wizard_config({"id": "w1", "items": {"Finished": "Thanks"}})
>>> config.items
[('Finished', 'Thanks')]
"""

from .loader import WizardDocument, build_wizard_config, load_wizard_config

__all__ = ["WizardDocument", "build_wizard_config", "load_wizard_config"]

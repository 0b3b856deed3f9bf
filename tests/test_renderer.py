"""Tests for step normalisation and markup assembly in ``WizardRenderer``.

These tests pin down the contract the ``bootstrapWizard`` plugin depends on:
every tab header targets the id of the pane at the same position, hidden
steps never consume an index, and labels are escaped unless a step or the
widget opts out.

Usage
-----
Run ``pytest tests/test_renderer.py -v``. HTML assertions parse the output
with BeautifulSoup so they do not depend on whitespace.
"""

from __future__ import annotations

import typing as typ

import pytest
from bs4 import BeautifulSoup
from markupsafe import Markup

from bootstrap_wizard.config import build_wizard_config
from bootstrap_wizard.models import ConfigurationError, FooterConfig, WizardConfig
from bootstrap_wizard.renderer import WizardRenderer, render_content

if typ.TYPE_CHECKING:
    import collections.abc as cabc

    from bootstrap_wizard.models import NavEntry


def _renderer(**payload: typ.Any) -> WizardRenderer:
    """Build a renderer for container ``w1`` with the given widget settings."""
    return WizardRenderer(build_wizard_config({"id": "w1", **payload}))


class RecordingNav:
    """Nav renderer stub that records what the wizard hands over."""

    def __init__(self) -> None:
        self.calls: list[tuple[list[NavEntry], dict[str, typ.Any]]] = []

    def render(
        self, items: cabc.Sequence[NavEntry], options: dict[str, typ.Any]
    ) -> Markup:
        self.calls.append((list(items), options))
        return Markup("<ul></ul>")


def test_shorthand_step_end_to_end() -> None:
    """A ``label => content`` shorthand yields one linked entry and pane."""
    plan = _renderer(items={"Finished": "Thanks"}).build()
    assert len(plan.nav_entries) == 1
    assert len(plan.panes) == 1
    entry = plan.nav_entries[0]
    assert entry.label == "Finished"
    assert entry.target == "#w1-wizard0"
    pane_html = _renderer(items={"Finished": "Thanks"}).render_panes(plan)
    assert '<div id="w1-wizard0">Thanks</div>' in pane_html, (
        f"unexpected pane markup {pane_html!r}"
    )


def test_targets_match_pane_ids() -> None:
    plan = _renderer(
        items=[
            {"label": "One", "content": "1"},
            {"label": "Two", "content": "2", "options": {"id": "custom"}},
            {"label": "Three", "content": "3"},
        ]
    ).build()
    targets = [entry.target for entry in plan.nav_entries]
    ids = [f"#{pane.id}" for pane in plan.panes]
    assert targets == ids == ["#w1-wizard0", "#custom", "#w1-wizard2"]
    assert all(
        entry.link_options.get("data-toggle") == "tab" for entry in plan.nav_entries
    ), "expected every in-page tab to carry the toggle attribute"


def test_null_pane_id_falls_back_to_anchor() -> None:
    renderer = _renderer(
        items=[{"label": "A", "content": "a", "options": {"id": None}}]
    )
    plan = renderer.build()
    assert plan.panes[0].id == "w1-wizard0"
    assert plan.nav_entries[0].target == "#w1-wizard0", (
        f"unexpected target {plan.nav_entries[0].target!r}"
    )
    assert '<div id="w1-wizard0">a</div>' in renderer.render_panes(plan)


def test_null_label_renders_empty_tab() -> None:
    plan = _renderer(items=[{"label": None, "content": "x"}]).build()
    assert plan.nav_entries[0].label == ""
    assert plan.nav_entries[0].target == "#w1-wizard0"


def test_external_url_skips_toggle() -> None:
    plan = _renderer(
        items=[{"label": "Docs", "url": "https://example.invalid/docs"}]
    ).build()
    entry = plan.nav_entries[0]
    assert entry.target == "https://example.invalid/docs"
    assert "data-toggle" not in entry.link_options
    assert plan.panes[0].id == "w1-wizard0"


def test_hidden_steps_do_not_consume_indices() -> None:
    plan = _renderer(
        items=[
            {"label": "A", "visible": False},
            {"label": "B"},
            {"label": "C"},
        ]
    ).build()
    assert [str(entry.label) for entry in plan.nav_entries] == ["B", "C"]
    assert [pane.id for pane in plan.panes] == ["w1-wizard0", "w1-wizard1"]


def test_missing_label_raises() -> None:
    with pytest.raises(ConfigurationError, match="label"):
        _renderer(items=[{"content": "no label"}]).build()


def test_label_field_fixes_missing_label() -> None:
    plan = _renderer(items=[{"label": "Named", "content": "x"}]).build()
    assert plan.nav_entries[0].label == "Named"


def test_string_key_wins_over_label_field() -> None:
    plan = _renderer(items={"Key": {"label": "Field", "content": "x"}}).build()
    assert plan.nav_entries[0].label == "Key"


def test_labels_escaped_by_default() -> None:
    plan = _renderer(items=[{"label": "Q&A <b>"}]).build()
    assert plan.nav_entries[0].label == "Q&amp;A &lt;b&gt;"


def test_step_encode_false_leaves_label_raw() -> None:
    plan = _renderer(items=[{"label": "<b>Bold</b>", "encode": False}]).build()
    assert plan.nav_entries[0].label == "<b>Bold</b>"


def test_global_encode_false_and_step_override() -> None:
    plan = _renderer(
        encode_labels=False,
        items=[
            {"label": "<i>raw</i>"},
            {"label": "<i>escaped</i>", "encode": True},
        ],
    ).build()
    labels = [str(entry.label) for entry in plan.nav_entries]
    assert labels == ["<i>raw</i>", "&lt;i&gt;escaped&lt;/i&gt;"]


def test_attribute_merge_precedence() -> None:
    plan = _renderer(
        item_options={"class": "a", "role": "tabpanel"},
        label_options={"class": "tab"},
        link_options={"class": "link", "title": "t"},
        items=[
            {
                "label": "One",
                "options": {"class": "b", "data-x": "1"},
                "label_options": {"class": "first"},
                "link_options": {"class": "go"},
            }
        ],
    ).build()
    pane = plan.panes[0]
    entry = plan.nav_entries[0]
    assert pane.attributes == {
        "class": "b",
        "role": "tabpanel",
        "data-x": "1",
        "id": "w1-wizard0",
    }
    assert entry.options == {"class": "first"}
    assert entry.link_options == {"class": "go", "title": "t", "data-toggle": "tab"}


def test_pane_tag_option_is_not_an_attribute() -> None:
    renderer = _renderer(items=[{"label": "One", "options": {"tag": "section"}}])
    plan = renderer.build()
    assert plan.panes[0].tag == "section"
    assert "tag" not in plan.panes[0].attributes
    assert '<section id="w1-wizard0"></section>' in renderer.render_panes(plan)


def test_default_and_custom_tab_options() -> None:
    default_html = _renderer(items={"A": "a"}).render_items()
    soup = BeautifulSoup(default_html, "html.parser")
    assert soup.select_one("div.tab-content #w1-wizard0") is not None
    custom_html = _renderer(tab_options={"class": "panes"}, items={"A": "a"})
    soup = BeautifulSoup(custom_html.render_items(), "html.parser")
    assert soup.select_one("div.panes #w1-wizard0") is not None
    assert soup.select_one("div.tab-content") is None


def test_nav_renderer_receives_entries_and_options() -> None:
    nav = RecordingNav()
    config = build_wizard_config(
        {"id": "w1", "nav_options": {"class": "nav-pills"}, "items": {"A": "a"}}
    )
    html = WizardRenderer(config, nav_renderer=nav).render_items()
    assert html.startswith("<ul></ul><div class=\"tab-content\">")
    (entries, options), = nav.calls
    assert [entry.target for entry in entries] == ["#w1-wizard0"]
    assert options == {"class": "nav-pills"}


def test_render_is_idempotent() -> None:
    renderer = _renderer(items=[{"label": "One"}, {"label": "Two"}])
    assert renderer.render_items() == renderer.render_items()


def test_footer_controls() -> None:
    html = _renderer(items={"A": "a"}).render_footer()
    soup = BeautifulSoup(html, "html.parser")
    previous = soup.select_one("button.previous")
    following = soup.select_one("button.next")
    finish = soup.select_one("button.finish")
    assert previous is not None
    assert "disabled" in previous["class"]
    assert following is not None
    assert "disabled" not in following["class"]
    assert finish is not None
    assert finish["type"] == "submit"
    assert finish["name"] == "save_payrolls"
    assert finish["value"] == "true"


def test_footer_captions_are_configurable_and_escaped() -> None:
    config = WizardConfig(
        options={"id": "w1"},
        items=[("A", "a")],
        footer=FooterConfig(finish_label="Save <all>", finish_name="save"),
    )
    soup = BeautifulSoup(WizardRenderer(config).render_footer(), "html.parser")
    finish = soup.select_one("button.finish")
    assert finish is not None
    assert finish.get_text(strip=True) == "Save <all>"
    assert finish["name"] == "save"


def test_missing_container_id_raises() -> None:
    config = WizardConfig(options={}, items=[("A", "a")])
    with pytest.raises(ConfigurationError, match="'id'"):
        WizardRenderer(config).build()


class _Widget:
    def __html__(self) -> str:
        return "<em>widget</em>"


class _Renderable:
    def render(self) -> str:
        return "<strong>rendered</strong>"


@pytest.mark.parametrize(
    ("content", "expected"),
    [
        (None, ""),
        ("<p>raw</p>", "<p>raw</p>"),
        (_Widget(), "<em>widget</em>"),
        (lambda: "<i>called</i>", "<i>called</i>"),
        (_Renderable(), "<strong>rendered</strong>"),
        (42, "42"),
    ],
)
def test_render_content(content: object, expected: str) -> None:
    assert render_content(content) == expected

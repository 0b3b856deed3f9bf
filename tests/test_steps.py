"""Unit tests for step descriptor parsing."""

from __future__ import annotations

import pytest

from bootstrap_wizard.models import ConfigurationError, PlainText, StepFields
from bootstrap_wizard.steps import is_label_key, iter_step_pairs, parse_step


@pytest.mark.parametrize(
    ("key", "expected"),
    [
        ("Finished", True),
        ("", False),
        ("3", False),
        ("-1", False),
        ("Step 3", True),
        ("03", True),
        ("+3", True),
        ("--3", True),
        ("٣", True),
        ("-0", True),
        (0, False),
    ],
)
def test_is_label_key(key: object, expected: bool) -> None:  # noqa: FBT001
    assert is_label_key(key) is expected, f"unexpected verdict for {key!r}"


def test_iter_step_pairs_keeps_mapping_keys() -> None:
    pairs = iter_step_pairs({"One": "a", "Two": {"content": "b"}})
    assert pairs == [("One", "a"), ("Two", {"content": "b"})]


def test_iter_step_pairs_numbers_sequences() -> None:
    pairs = iter_step_pairs([{"label": "A"}, {"label": "B"}])
    assert [key for key, _ in pairs] == [0, 1]


def test_iter_step_pairs_accepts_explicit_pairs() -> None:
    pairs = iter_step_pairs([("Finished", "Thanks"), (3, {"label": "X"})])
    assert pairs == [("Finished", "Thanks"), (3, {"label": "X"})]


def test_iter_step_pairs_rejects_scalars() -> None:
    with pytest.raises(ConfigurationError):
        iter_step_pairs("not a list")


def test_bare_string_becomes_plain_text() -> None:
    assert parse_step("Finished", "Thanks") == PlainText(content="Thanks")


def test_mapping_becomes_step_fields_with_aliases() -> None:
    spec = parse_step(
        0,
        {
            "label": "Account",
            "content": "<p>form</p>",
            "labelOptions": {"class": "first"},
            "link_options": {"title": "Go"},
            "encode": False,
        },
    )
    assert spec == StepFields(
        label="Account",
        content="<p>form</p>",
        encode=False,
        label_options={"class": "first"},
        link_options={"title": "Go"},
    )


def test_hidden_step_is_skipped_before_label_check() -> None:
    """Hidden steps never trip the label requirement."""
    assert parse_step(0, {"visible": False}) is None


def test_missing_label_on_numeric_key_raises() -> None:
    with pytest.raises(ConfigurationError, match="'label' option is required"):
        parse_step(0, {"content": "orphan"})


def test_zero_padded_key_is_a_label() -> None:
    """Only canonical integers count as positions; ``"03"`` stays a label."""
    assert parse_step("03", "x") == PlainText(content="x")


def test_null_label_counts_as_present() -> None:
    spec = parse_step(0, {"label": None, "content": "x"})
    assert isinstance(spec, StepFields)
    assert spec.label == "", f"expected an empty label, got {spec.label!r}"


def test_bare_string_on_numeric_key_raises() -> None:
    with pytest.raises(ConfigurationError):
        parse_step(1, "orphan")


def test_non_mapping_option_block_raises() -> None:
    with pytest.raises(ConfigurationError, match="must be a mapping"):
        parse_step("Step", {"options": "class=x"})

from __future__ import annotations

from household_tree.inference.labels import (
    child_label,
    get_relationship_label,
    sibling_child_label,
    sibling_label,
)


def test_known_codes() -> None:
    assert get_relationship_label("daughter-in-law") == "बहू"
    assert get_relationship_label("head") == "मुखिया"
    assert get_relationship_label("nephew") == "भतीजा"


def test_unknown_code_returned_unchanged() -> None:
    assert get_relationship_label("unrecognized_code") == "unrecognized_code"
    assert get_relationship_label("") == ""


def test_spouse_label_follows_gender() -> None:
    assert get_relationship_label("spouse", "Female") == "पत्नी"
    assert get_relationship_label("spouse", "Male") == "पति"
    assert get_relationship_label("spouse") == "पति"


def test_gendered_helpers() -> None:
    assert child_label("म") == "पुत्री"
    assert child_label("Male") == "पुत्र"
    assert sibling_label("Female") == "बहन"
    assert sibling_label("Male") == "भाई"
    assert sibling_child_label("F") == "भतीजी"

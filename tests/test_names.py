from __future__ import annotations

from household_tree.inference.gender import is_female_gender
from household_tree.inference.names import normalize_name


def test_missing_name_is_empty_key() -> None:
    assert normalize_name(None) == ""
    assert normalize_name("") == ""
    assert normalize_name("   ") == ""


def test_case_and_whitespace_removed() -> None:
    assert normalize_name("  Ram  Kumar Das ") == normalize_name("ramkumardas")
    assert normalize_name("SHYAM") == "shyam"


def test_honorifics_stripped() -> None:
    assert normalize_name("श्री राम") == normalize_name("राम")
    assert normalize_name("राम प्रसाद") == "राम"
    assert normalize_name("सीता देवी") == "सीता"


def test_longer_honorific_wins_over_prefix() -> None:
    assert normalize_name("श्रीमती सीता") == "सीता"
    assert normalize_name("कुमारी पूजा") == "पूजा"


def test_female_encodings() -> None:
    for value in ("Female", "female", "F", " f ", "म", "महिला", "स्त्री"):
        assert is_female_gender(value), value


def test_unknown_encodings_are_not_female() -> None:
    for value in ("Male", "M", "पु", "", None, "unknown"):
        assert not is_female_gender(value), value

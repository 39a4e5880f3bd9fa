from __future__ import annotations

from typing import Any

import pytest

from household_tree.assembly import build_simple_view
from household_tree.schemas.members import HeadRecord


def test_first_member_is_head_by_default(three_generations: list[dict[str, Any]]) -> None:
    view = build_simple_view(three_generations, ward_no="5")
    assert view.head.name == "Shyam"
    assert view.head.role_label == "मुखिया"
    assert [c.name for c in view.head.children] == ["Ram", "Sita"]
    assert all(c.role_label is None for c in view.head.children)
    assert view.member_count == 3
    assert view.house_no == "12"


def test_named_head_is_found_among_members(three_generations: list[dict[str, Any]]) -> None:
    view = build_simple_view(three_generations, head=HeadRecord(id="2", name="Ram"))
    assert view.head.id == "2"
    assert [c.name for c in view.head.children] == ["Shyam", "Sita"]


def test_absent_head_keeps_every_member_as_child(three_generations: list[dict[str, Any]]) -> None:
    view = build_simple_view(three_generations, head=HeadRecord(id="99", name="Dashrath", age=80))
    assert view.head.id == "99"
    assert view.head.age == 80
    assert len(view.head.children) == 3


def test_empty_household_without_head_rejected() -> None:
    with pytest.raises(ValueError):
        build_simple_view([])

from __future__ import annotations

from typing import Any

from household_tree.inference import infer_from_flat_records
from household_tree.inference.grouping import (
    VIRTUAL_PARENT_FALLBACK_AGE,
    collect_root_groups,
    group_virtual_roots,
)
from household_tree.inference.relationships import link_household_members


def _member(id: str, name: str, relative: str | None, gender: str = "Male", age: int | None = None) -> dict[str, Any]:
    return {"id": id, "name": name, "relative_name": relative, "gender": gender, "age": age, "house_no": "7"}


def test_siblings_of_absent_father_get_virtual_ancestor(absent_father: list[dict[str, Any]]) -> None:
    forest = infer_from_flat_records(absent_father)

    assert len(forest.roots) == 1
    ancestor = forest.root_nodes()[0]
    assert ancestor.is_virtual
    assert ancestor.name == "Mohan (पितृपुरुष)"
    assert ancestor.id == "v-mohan"
    assert ancestor.gender == "Male"
    assert ancestor.age == 30 + 25
    assert ancestor.house_no == "7"
    assert [c.id for c in forest.children_of(ancestor)] == ["a", "b"]


def test_virtual_children_labelled_by_gender(absent_father: list[dict[str, Any]]) -> None:
    forest = infer_from_flat_records(absent_father)
    assert forest.get("a").relation_label == "पुत्र"
    assert forest.get("b").relation_label == "पुत्री"
    assert not forest.get("a").is_root


def test_single_citation_creates_no_virtual_node() -> None:
    forest = infer_from_flat_records([_member("a", "Suresh", "Mohan", age=30)])
    assert forest.roots == [0]
    assert not any(n.is_virtual for n in forest.nodes)
    assert forest.get("a").is_root


def test_empty_relative_name_never_grouped() -> None:
    forest = infer_from_flat_records([_member("a", "Suresh", None), _member("b", "Ramesh", "  ")])
    assert forest.roots == [0, 1]
    assert len(forest.nodes) == 2


def test_resolved_relative_is_not_grouped() -> None:
    # Both name Hari, who is on the roll, but the age gaps are too small to link them.
    forest = infer_from_flat_records(
        [
            _member("h", "Hari", None, age=40),
            _member("a", "Ajay", "Hari", age=35),
            _member("b", "Vijay", "Hari", age=33),
        ]
    )
    assert not any(n.is_virtual for n in forest.nodes)
    assert [n.id for n in forest.root_nodes()] == ["h", "a", "b"]


def test_fallback_age_when_children_ages_unknown() -> None:
    forest = infer_from_flat_records([_member("a", "Suresh", "Mohan"), _member("b", "Ramesh", "Mohan")])
    assert forest.root_nodes()[0].age == VIRTUAL_PARENT_FALLBACK_AGE


def test_age_estimate_uses_eldest_known_child() -> None:
    forest = infer_from_flat_records(
        [_member("a", "Suresh", "Mohan", age=20), _member("b", "Ramesh", "Mohan", age=34), _member("c", "Dinesh", "Mohan")]
    )
    assert forest.root_nodes()[0].age == 59


def test_groups_follow_first_seen_order() -> None:
    forest = link_household_members(
        [
            _member("x", "Ajay", "Gopal"),
            _member("y", "Vijay", None),
            _member("z", "Sanjay", "Gopal"),
            _member("w", "Manoj", "Hari"),
        ]
    )
    assert collect_root_groups(forest) == [("gopal", [0, 2]), ("", [1]), ("hari", [3])]

    group_virtual_roots(forest)
    assert [n.id for n in forest.root_nodes()] == ["v-gopal", "y", "w"]


def test_numeric_keys_do_not_jump_ahead() -> None:
    forest = infer_from_flat_records(
        [
            _member("x", "Ajay", "Gopal"),
            _member("y", "Vijay", "Gopal"),
            _member("z", "Sanjay", "12"),
            _member("w", "Manoj", "12"),
        ]
    )
    assert [n.id for n in forest.root_nodes()] == ["v-gopal", "v-12"]


def test_placeholder_id_avoids_real_ids() -> None:
    forest = infer_from_flat_records(
        [_member("v-mohan", "Suresh", "Mohan"), _member("b", "Ramesh", "Mohan")]
    )
    ancestor = forest.root_nodes()[0]
    assert ancestor.is_virtual
    assert ancestor.id == "v-mohan#1"


def test_custom_marker() -> None:
    forest = link_household_members([_member("a", "Suresh", "Mohan"), _member("b", "Ramesh", "Mohan")])
    group_virtual_roots(forest, marker="ancestor")
    assert forest.root_nodes()[0].name == "Mohan (ancestor)"


def test_grouping_can_be_disabled(absent_father: list[dict[str, Any]]) -> None:
    forest = infer_from_flat_records(absent_father, group_virtual=False)
    assert forest.roots == [0, 1]

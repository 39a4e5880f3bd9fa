"""Flat fallback view for households without classified relationships."""

from collections.abc import Iterable, Mapping
from typing import Any

from household_tree.inference.labels import HEAD_LABEL
from household_tree.inference.relationships import coerce_members
from household_tree.schemas.members import HeadRecord, InputMember
from household_tree.schemas.tree import FamilyTreeView, FamilyTreeViewNode


def _member_node(member: InputMember, position: int, role_label: str | None = None) -> FamilyTreeViewNode:
    return FamilyTreeViewNode(
        id=member.node_id(position),
        name=member.name,
        age=member.age,
        gender=member.gender,
        role_label=role_label,
        house_no=member.house_no or None,
        serial_no=member.serial_no,
    )


def build_simple_view(
    members: Iterable[InputMember | Mapping[str, Any]],
    head: HeadRecord | None = None,
    ward_no: str = "",
    house_no: str = "",
) -> FamilyTreeView:
    """Place every member directly under the head of household.

    The head is the member whose name equals ``head.name``, or the first
    member when no head is given. If the named head is not among the members,
    a head node is built from the record itself and every member becomes a
    child.

    Args:
        members: Members of one household, in roll order
        head: Designated head of household, if known
        ward_no: Ward number
        house_no: House number within the ward

    Returns:
        A one-level tree with no relation labels below the head

    Raises:
        ValueError: If there are neither members nor a head record
    """
    records = coerce_members(members)
    if not records and head is None:
        raise ValueError("Cannot build a household view without members or a head")

    if head is not None:
        head_position = next(
            (i for i, member in enumerate(records) if member.name == head.name), None
        )
    else:
        head_position = 0

    if head_position is not None:
        head_node = _member_node(records[head_position], head_position, HEAD_LABEL)
    else:
        head_node = FamilyTreeViewNode(
            id=head.id,
            name=head.name,
            age=head.age,
            gender=head.gender,
            role_label=HEAD_LABEL,
        )

    head_node.children = [
        _member_node(member, i) for i, member in enumerate(records) if i != head_position
    ]

    return FamilyTreeView(
        head=head_node,
        ward_no=ward_no,
        house_no=house_no or (records[0].house_no if records else ""),
        member_count=len(records),
    )

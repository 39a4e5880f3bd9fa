"""Heuristic family inference from flat household member records."""

from collections.abc import Iterable, Mapping
from typing import Any

from household_tree.inference.forest import HouseholdForest, TreeMember
from household_tree.inference.gender import is_female_gender
from household_tree.inference.grouping import group_virtual_roots
from household_tree.inference.labels import get_relationship_label
from household_tree.inference.names import normalize_name
from household_tree.inference.relationships import link_household_members
from household_tree.schemas.members import InputMember


def infer_from_flat_records(
    members: Iterable[InputMember | Mapping[str, Any]],
    group_virtual: bool = True,
) -> HouseholdForest:
    """Build a household forest from flat member records.

    Every member is reachable exactly once from the returned roots, spouse
    links are symmetric, and synthesized ancestors are never counted as
    members. Identical input gives an identical forest.

    Args:
        members: Members of one household, in roll order
        group_virtual: Insert virtual ancestors for siblings of an absent parent

    Returns:
        The household forest

    Raises:
        ValueError: If two members share an id
    """
    forest = link_household_members(members)
    if group_virtual:
        group_virtual_roots(forest)
    return forest


__all__ = [
    "HouseholdForest",
    "TreeMember",
    "infer_from_flat_records",
    "link_household_members",
    "group_virtual_roots",
    "normalize_name",
    "is_female_gender",
    "get_relationship_label",
]

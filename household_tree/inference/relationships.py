"""Heuristic relationship inference for household members.

Members of one house are linked into parent/child and spouse pairs by matching
each member's stated relative name against the other members' names, then
using age and gender to decide what the relation is.
"""

import logging
from collections.abc import Iterable, Mapping
from typing import Any, Literal

from household_tree.inference.forest import HouseholdForest, TreeMember
from household_tree.inference.gender import is_female_gender
from household_tree.inference.labels import WIFE_LABEL, child_label
from household_tree.inference.names import normalize_name
from household_tree.schemas.members import InputMember

logger = logging.getLogger(__name__)

# A woman naming a relative within this many years of her own age is read as
# his wife.
SPOUSE_MAX_AGE_GAP = 20

# A relative must be more than this many years older to be read as a parent.
PARENT_MIN_AGE_GAP = 15

Relation = Literal["spouse", "child"]


def coerce_members(members: Iterable[InputMember | Mapping[str, Any]]) -> list[InputMember]:
    """Validate raw member dicts, passing InputMember instances through."""
    return [
        m if isinstance(m, InputMember) else InputMember.model_validate(m) for m in members
    ]


def build_member_nodes(members: Iterable[InputMember]) -> HouseholdForest:
    """Create one root node per member, in input order.

    Raises:
        ValueError: If two members share an id
    """
    forest = HouseholdForest()
    for position, member in enumerate(members):
        forest.add_node(
            id=member.node_id(position),
            name=member.name,
            gender=member.gender,
            relative_name=member.relative_name,
            age=member.age,
            house_no=member.house_no,
            serial_no=member.serial_no,
        )
    return forest


def build_name_index(forest: HouseholdForest) -> dict[str, int]:
    """Map normalized member names to node indices.

    When two members normalize to the same key the later one wins.
    """
    index: dict[str, int] = {}
    for node in forest.nodes:
        if node.is_virtual:
            continue
        key = normalize_name(node.name)
        if not key:
            continue
        if key in index:
            logger.warning(
                "Name collision in house %s: %r and %r both normalize to %r; using the latter",
                node.house_no,
                forest.nodes[index[key]].name,
                node.name,
                key,
            )
        index[key] = node.index
    return index


def classify_pair(member: TreeMember, relative: TreeMember) -> Relation | None:
    """Decide how a member relates to the relative they named.

    Returns:
        "spouse", "child" or None when the heuristics do not apply. A missing
        age on either side always gives None.
    """
    if member.age is None or relative.age is None:
        return None

    age_diff = relative.age - member.age
    if is_female_gender(member.gender) and abs(age_diff) < SPOUSE_MAX_AGE_GAP:
        return "spouse"
    if age_diff > PARENT_MIN_AGE_GAP:
        return "child"
    return None


def link_household_members(
    members: Iterable[InputMember | Mapping[str, Any]],
) -> HouseholdForest:
    """Link household members into a forest of parent/child and spouse trees.

    Args:
        members: Members of one household, in roll order

    Returns:
        Forest whose roots are every member not attached as a child or spouse

    Raises:
        ValueError: If two members share an id
    """
    forest = build_member_nodes(coerce_members(members))
    name_index = build_name_index(forest)

    for member in forest.nodes:
        match = name_index.get(normalize_name(member.relative_name))
        if match is None:
            continue
        if match == member.index:
            logger.debug("%s names themself as relative; skipped", member.name)
            continue

        relative = forest.nodes[match]
        relation = classify_pair(member, relative)
        if relation is None:
            logger.debug(
                "No relation inferred between %s (%s) and %s (%s)",
                member.name,
                member.age,
                relative.name,
                relative.age,
            )
            continue

        if forest.hangs_from(relative.index, member.index):
            logger.debug(
                "Linking %s under %s would form a cycle; skipped", member.name, relative.name
            )
            continue

        if relation == "spouse":
            if member.spouse is not None or relative.spouse is not None:
                logger.debug(
                    "%s or %s already has a spouse; skipped", member.name, relative.name
                )
                continue
            forest.attach_spouse(relative.index, member.index, WIFE_LABEL)
        else:
            forest.attach_child(relative.index, member.index, child_label(member.gender))

        logger.debug("Inferred %s is %s of %s", member.name, relation, relative.name)

    forest.roots = [node.index for node in forest.nodes if node.is_root]
    return forest

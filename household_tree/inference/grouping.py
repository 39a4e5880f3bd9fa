"""Virtual ancestor synthesis for unlinked household roots.

Siblings often name a father who is not on the roll himself (deceased or
registered elsewhere). When two or more unlinked roots name the same absent
relative, a placeholder ancestor is inserted so they render as one family.
"""

import logging

from household_tree.config import settings
from household_tree.inference.forest import HouseholdForest, TreeMember
from household_tree.inference.labels import child_label
from household_tree.inference.names import normalize_name

logger = logging.getLogger(__name__)

VIRTUAL_ID_PREFIX = "v-"

# Assumed generation gap between a synthesized ancestor and its eldest child
VIRTUAL_PARENT_AGE_OFFSET = 25

# Used when none of the grouped children has a known age
VIRTUAL_PARENT_FALLBACK_AGE = 75

VIRTUAL_GENDER = "Male"


def collect_root_groups(forest: HouseholdForest) -> list[tuple[str, list[int]]]:
    """Group root indices by normalized relative name, in first-seen key order."""
    groups: list[tuple[str, list[int]]] = []
    positions: dict[str, int] = {}
    for index in forest.roots:
        key = normalize_name(forest.nodes[index].relative_name)
        if key not in positions:
            positions[key] = len(groups)
            groups.append((key, []))
        groups[positions[key]][1].append(index)
    return groups


def _placeholder_id(forest: HouseholdForest, key: str) -> str:
    base = f"{VIRTUAL_ID_PREFIX}{key}"
    candidate = base
    suffix = 1
    while forest.index_of(candidate) is not None:
        candidate = f"{base}#{suffix}"
        suffix += 1
    return candidate


def estimate_ancestor_age(children: list[TreeMember]) -> int:
    """Estimate a synthesized ancestor's age from the eldest known child."""
    ages = [child.age for child in children if child.age is not None]
    if not ages:
        return VIRTUAL_PARENT_FALLBACK_AGE
    return max(ages) + VIRTUAL_PARENT_AGE_OFFSET


def group_virtual_roots(forest: HouseholdForest, marker: str | None = None) -> HouseholdForest:
    """Insert virtual ancestors above roots that name the same absent relative.

    The forest is updated in place and returned. A group gets an ancestor only
    when its key is non-empty, does not resolve to a member of the household,
    and holds at least two roots.

    Args:
        forest: Forest produced by relationship linking
        marker: Suffix for the ancestor's display name, defaults to settings

    Returns:
        The same forest with ``roots`` rewritten
    """
    marker = marker if marker is not None else settings.virtual_marker
    resolved = {normalize_name(node.name) for node in forest.nodes if not node.is_virtual}

    roots: list[int] = []
    for key, group in collect_root_groups(forest):
        if not key or key in resolved or len(group) < 2:
            roots.extend(group)
            continue

        members = [forest.nodes[i] for i in group]
        first = members[0]
        ancestor = forest.add_node(
            id=_placeholder_id(forest, key),
            name=f"{(first.relative_name or '').strip()} ({marker})",
            gender=VIRTUAL_GENDER,
            age=estimate_ancestor_age(members),
            house_no=first.house_no,
            is_virtual=True,
        )
        for member in members:
            forest.attach_child(ancestor.index, member.index, child_label(member.gender))
        roots.append(ancestor.index)
        logger.debug(
            "Grouped %d roots under virtual ancestor %s", len(members), ancestor.name
        )

    forest.roots = roots
    return forest

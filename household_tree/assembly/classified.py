"""Head-centric tree assembly from classified relationship edges.

The upstream classifier tags every member of a household with a relationship
code and, where it can, the member that relationship is anchored on. This
module places those edges around the head of household: spouse, own children
(with their spouses), siblings (with spouses and children) and other relatives.
"""

import logging
from collections.abc import Callable, Iterable

from household_tree.inference.labels import (
    HEAD_LABEL,
    RELATIVE_LABEL,
    child_label,
    get_relationship_label,
    sibling_child_label,
    sibling_label,
)
from household_tree.schemas.members import (
    RELATIONSHIP_TYPES,
    HouseholdDescriptor,
    RelationalEdge,
)
from household_tree.schemas.tree import FamilyTreeView, FamilyTreeViewNode, OrphanEdge

logger = logging.getLogger(__name__)

CHILD_TYPES = ("son", "daughter")
SIBLING_TYPES = ("brother", "sister")
SIBLING_CHILD_TYPES = ("niece", "nephew")
SIBLING_SPOUSE_TYPES = (
    "spouse",
    "sister-in-law",
    "brother-in-law",
    "daughter-in-law",
    "son-in-law",
)
CHILD_SPOUSE_TYPES = ("son-in-law", "daughter-in-law")


class EdgePool:
    """Classified edges with per-edge bookkeeping so each is placed once."""

    def __init__(self, edges: Iterable[RelationalEdge]):
        self.edges = list(edges)
        self._used = [False] * len(self.edges)

    def take_where(self, predicate: Callable[[RelationalEdge], bool]) -> list[RelationalEdge]:
        """Claim every unused edge matching ``predicate``, in input order."""
        taken = []
        for i, edge in enumerate(self.edges):
            if not self._used[i] and predicate(edge):
                self._used[i] = True
                taken.append(edge)
        return taken

    def take_first_where(
        self, predicate: Callable[[RelationalEdge], bool]
    ) -> RelationalEdge | None:
        """Claim only the first unused edge matching ``predicate``."""
        for i, edge in enumerate(self.edges):
            if not self._used[i] and predicate(edge):
                self._used[i] = True
                return edge
        return None

    def take_first(self, types: tuple[str, ...], related_id: str) -> RelationalEdge | None:
        """Claim the first unused edge of one of ``types`` pointing at ``related_id``."""
        return self.take_first_where(
            lambda edge: edge.relationship_type in types and edge.related_id == related_id
        )

    def take_all(self, types: tuple[str, ...], related_id: str) -> list[RelationalEdge]:
        """Claim every unused edge of one of ``types`` pointing at ``related_id``."""
        return self.take_where(
            lambda edge: edge.relationship_type in types and edge.related_id == related_id
        )

    def remaining(self) -> list[RelationalEdge]:
        return [edge for i, edge in enumerate(self.edges) if not self._used[i]]


def _edge_node(
    edge: RelationalEdge,
    role_label: str | None,
    spouse: FamilyTreeViewNode | None = None,
    children: list[FamilyTreeViewNode] | None = None,
) -> FamilyTreeViewNode:
    return FamilyTreeViewNode(
        id=edge.member_id,
        name=edge.name,
        age=edge.age,
        gender=edge.gender,
        role_label=role_label,
        spouse=spouse,
        children=children or [],
        serial_no=edge.serial_no,
    )


def _spouse_node(edge: RelationalEdge | None) -> FamilyTreeViewNode | None:
    if edge is None:
        return None
    return _edge_node(edge, get_relationship_label(edge.relationship_type, edge.gender))


def _orphan_reason(edge: RelationalEdge, head_id: str, anchors: set[str]) -> str:
    if edge.is_head():
        return "conflicting head edge"
    if edge.member_id == head_id:
        return f"{edge.relationship_type} edge carries the head's id"
    if edge.related_id is None:
        return "edge has no related_to target"
    if edge.related_id not in anchors:
        return "related_to target is not the head, a child or a sibling"
    return f"no open {edge.relationship_type} slot on the related member"


def assemble_from_classified_edges(household: HouseholdDescriptor) -> FamilyTreeView:
    """Build a head-centric family tree from classified relationship edges.

    Every input edge is placed in the tree exactly once or is reported in
    ``warnings``. Orphan edges never raise.

    Args:
        household: Head record plus classified edges for one household

    Returns:
        The assembled tree with any dropped edges listed as warnings
    """
    head = household.head
    pool = EdgePool(household.relationships)

    # The head may be listed under its own id or only by a head/self tag
    head_edges = pool.take_where(
        lambda edge: edge.member_id == head.id
        and (edge.is_head() or edge.relationship_type == "other")
    )
    if not head_edges:
        fallback = pool.take_first_where(lambda edge: edge.is_head())
        if fallback is not None:
            logger.warning(
                "Head edge for house %s carries id %s, expected %s",
                household.house_no,
                fallback.member_id,
                head.id,
            )
            head_edges = [fallback]
    head_edge = next((edge for edge in head_edges if edge.is_head()), None)

    # Any other edge naming the head as its member is mis-tagged
    mistagged = pool.take_where(lambda edge: edge.member_id == head.id)

    head_spouse = pool.take_first(("spouse",), head.id)
    own_children = pool.take_all(CHILD_TYPES, head.id)
    siblings = pool.take_all(SIBLING_TYPES, head.id)

    child_nodes = []
    for child in own_children:
        spouse = pool.take_first(CHILD_SPOUSE_TYPES, child.member_id)
        child_nodes.append(
            _edge_node(child, child_label(child.gender), spouse=_spouse_node(spouse))
        )

    sibling_nodes = []
    for sibling in siblings:
        spouse = pool.take_first(SIBLING_SPOUSE_TYPES, sibling.member_id)
        nieces_nephews = pool.take_all(SIBLING_CHILD_TYPES, sibling.member_id)
        sibling_nodes.append(
            _edge_node(
                sibling,
                sibling_label(sibling.gender),
                spouse=_spouse_node(spouse),
                children=[
                    _edge_node(kid, sibling_child_label(kid.gender)) for kid in nieces_nephews
                ],
            )
        )

    others = pool.take_where(
        lambda edge: not edge.is_head()
        and (
            edge.relationship_type == "other"
            or edge.relationship_type not in RELATIONSHIP_TYPES
        )
    )
    other_nodes = [
        _edge_node(
            edge,
            RELATIVE_LABEL
            if edge.relationship_type == "other"
            else get_relationship_label(edge.relationship_type, edge.gender),
        )
        for edge in others
    ]

    head_node = FamilyTreeViewNode(
        id=head.id,
        name=head.name,
        age=head.age,
        gender=head.gender,
        role_label=HEAD_LABEL,
        spouse=_spouse_node(head_spouse),
        children=[*child_nodes, *sibling_nodes, *other_nodes],
        serial_no=head_edge.serial_no if head_edge else None,
    )

    anchors = {head.id, *(e.member_id for e in own_children), *(e.member_id for e in siblings)}
    warnings = []
    for edge in [*mistagged, *pool.remaining()]:
        orphan = OrphanEdge(
            member_id=edge.member_id,
            name=edge.name,
            relationship_type=edge.relationship_type,
            related_to_id=edge.related_id,
            reason=_orphan_reason(edge, head.id, anchors),
        )
        logger.warning("Dropped edge in house %s: %s", household.house_no, orphan)
        warnings.append(orphan)

    member_ids = {head.id, *(edge.member_id for edge in household.relationships)}
    member_count = (
        household.member_count if household.member_count is not None else len(member_ids)
    )

    return FamilyTreeView(
        head=head_node,
        ward_no=household.ward_no,
        house_no=household.house_no,
        member_count=member_count,
        warnings=warnings,
    )

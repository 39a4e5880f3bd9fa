"""Arena model for household forests.

All nodes of one household live in a single ordered list and refer to each
other by index. A spouse pair is a symmetric pair of indices rather than two
live references, so walking or serializing a forest can never loop.
"""

from collections.abc import Iterator
from dataclasses import dataclass, field
from typing import Any

from household_tree.schemas.tree import FamilyTreeViewNode


@dataclass
class TreeMember:
    """A person (or synthesized ancestor) in a household forest."""

    index: int
    id: str
    name: str
    gender: str = ""
    relative_name: str | None = None
    age: int | None = None
    house_no: str = ""
    serial_no: str | None = None
    children: list[int] = field(default_factory=list)
    spouse: int | None = None
    # Node this one hangs from: parent, spouse anchor or virtual ancestor
    anchor: int | None = None
    is_root: bool = True
    is_virtual: bool = False
    relation_label: str | None = None


@dataclass
class HouseholdForest:
    """Ordered node arena plus the ordered list of top-level nodes."""

    nodes: list[TreeMember] = field(default_factory=list)
    roots: list[int] = field(default_factory=list)
    _ids: dict[str, int] = field(default_factory=dict, repr=False, compare=False)

    def add_node(self, **fields: Any) -> TreeMember:
        """Append a node to the arena.

        Args:
            **fields: TreeMember fields except ``index``

        Returns:
            The new node

        Raises:
            ValueError: If a node with the same id already exists
        """
        node_id = fields["id"]
        if node_id in self._ids:
            raise ValueError(f"Duplicate member id in household: {node_id}")
        node = TreeMember(index=len(self.nodes), **fields)
        self.nodes.append(node)
        self._ids[node_id] = node.index
        return node

    def index_of(self, node_id: str) -> int | None:
        """Look up a node index by its stable id."""
        return self._ids.get(node_id)

    def get(self, node_id: str) -> TreeMember | None:
        """Look up a node by its stable id."""
        index = self._ids.get(node_id)
        return None if index is None else self.nodes[index]

    def spouse_of(self, node: TreeMember) -> TreeMember | None:
        return None if node.spouse is None else self.nodes[node.spouse]

    def children_of(self, node: TreeMember) -> list[TreeMember]:
        return [self.nodes[i] for i in node.children]

    def root_nodes(self) -> list[TreeMember]:
        return [self.nodes[i] for i in self.roots]

    def hangs_from(self, index: int, ancestor: int) -> bool:
        """Check whether a node is ``ancestor`` or sits anywhere below it."""
        seen: set[int] = set()
        current: int | None = index
        while current is not None and current not in seen:
            if current == ancestor:
                return True
            seen.add(current)
            current = self.nodes[current].anchor
        return False

    def attach_child(self, parent: int, child: int, label: str | None) -> None:
        """Hang ``child`` below ``parent``."""
        self.nodes[parent].children.append(child)
        node = self.nodes[child]
        node.anchor = parent
        node.is_root = False
        node.relation_label = label

    def attach_spouse(self, anchor: int, member: int, label: str | None) -> None:
        """Link two nodes as spouses, with ``member`` hanging from ``anchor``."""
        self.nodes[anchor].spouse = member
        node = self.nodes[member]
        node.spouse = anchor
        node.anchor = anchor
        node.is_root = False
        node.relation_label = label

    def anchored_spouse(self, node: TreeMember) -> TreeMember | None:
        """The spouse that hangs from this node, if any."""
        spouse = self.spouse_of(node)
        if spouse is not None and spouse.anchor == node.index:
            return spouse
        return None

    def iter_subtree(self, index: int) -> Iterator[TreeMember]:
        """Yield a node, its anchored spouse subtree and its children, depth first."""
        node = self.nodes[index]
        yield node
        spouse = self.anchored_spouse(node)
        if spouse is not None:
            yield from self.iter_subtree(spouse.index)
        for child in node.children:
            yield from self.iter_subtree(child)

    def iter_reachable(self) -> Iterator[TreeMember]:
        """Yield every node reachable from the roots, in display order."""
        for root in self.roots:
            yield from self.iter_subtree(root)

    def member_count(self) -> int:
        """Number of real household members in the arena."""
        return sum(1 for node in self.nodes if not node.is_virtual)

    def reachable_member_ids(self) -> list[str]:
        """Ids of real members reachable from the roots, in display order."""
        return [node.id for node in self.iter_reachable() if not node.is_virtual]

    def _node_to_dict(self, node: TreeMember) -> dict[str, Any]:
        spouse = self.anchored_spouse(node)
        return {
            "id": node.id,
            "name": node.name,
            "relative_name": node.relative_name,
            "gender": node.gender,
            "age": node.age,
            "house_no": node.house_no,
            "serial_no": node.serial_no,
            "is_root": node.is_root,
            "is_virtual": node.is_virtual,
            "relation_label": node.relation_label,
            "spouse_id": None if node.spouse is None else self.nodes[node.spouse].id,
            "spouse": None if spouse is None else self._node_to_dict(spouse),
            "children": [self._node_to_dict(self.nodes[i]) for i in node.children],
        }

    def to_nested(self) -> list[dict[str, Any]]:
        """Serialize the forest as nested JSON-compatible dicts.

        A spouse is embedded only under the node it hangs from; the other side
        carries just ``spouse_id``.
        """
        return [self._node_to_dict(node) for node in self.root_nodes()]

    def _node_to_view(self, node: TreeMember) -> FamilyTreeViewNode:
        spouse = self.anchored_spouse(node)
        return FamilyTreeViewNode(
            id=node.id,
            name=node.name,
            age=node.age,
            gender=node.gender,
            role_label=node.relation_label,
            spouse=None if spouse is None else self._node_to_view(spouse),
            children=[self._node_to_view(self.nodes[i]) for i in node.children],
            is_virtual=node.is_virtual,
            house_no=node.house_no or None,
            serial_no=node.serial_no,
        )

    def to_view_nodes(self) -> list[FamilyTreeViewNode]:
        """Convert the forest to the shared render-ready node shape."""
        return [self._node_to_view(node) for node in self.root_nodes()]

"""Pydantic schemas for render-ready family trees.

Both builders (heuristic inference and classified assembly) can express their
output as ``FamilyTreeViewNode`` trees, so the renderer deals with one shape.
"""

from collections.abc import Iterator

from pydantic import BaseModel, Field


class FamilyTreeViewNode(BaseModel):
    """One person (or synthesized ancestor) in a rendered tree."""

    id: str = Field(description="Member id, or a placeholder id for virtual nodes")
    name: str = Field(description="Display name")
    age: int | None = Field(default=None, description="Age in years, if known")
    gender: str = Field(default="", description="Gender as encoded by the source")
    role_label: str | None = Field(
        default=None, description="Human-readable (Hindi) role, e.g. पुत्र"
    )
    spouse: "FamilyTreeViewNode | None" = Field(default=None, description="Spouse node")
    children: list["FamilyTreeViewNode"] = Field(
        default_factory=list, description="Child nodes in display order"
    )
    is_virtual: bool = Field(default=False, description="True for synthesized ancestors")
    house_no: str | None = Field(default=None, description="House number")
    serial_no: str | None = Field(default=None, description="Serial number on the roll")

    def walk(self) -> Iterator["FamilyTreeViewNode"]:
        """Yield this node, its spouse subtree and its children, depth first."""
        yield self
        if self.spouse is not None:
            yield from self.spouse.walk()
        for child in self.children:
            yield from child.walk()

    def member_ids(self) -> list[str]:
        """Ids of every real (non-virtual) member in this subtree."""
        return [node.id for node in self.walk() if not node.is_virtual]


class OrphanEdge(BaseModel):
    """A classified edge that could not be placed in the tree."""

    member_id: str = Field(description="Identifier of the dropped member")
    name: str = Field(default="", description="Name of the dropped member")
    relationship_type: str = Field(description="Relationship code of the edge")
    related_to_id: str | None = Field(
        default=None, description="Identifier the edge pointed at"
    )
    reason: str = Field(description="Why the edge was dropped")

    def __str__(self) -> str:
        """Format orphan edge for display."""
        target = self.related_to_id or "nobody"
        return (
            f"{self.name or self.member_id} (ID: {self.member_id}) "
            f"[{self.relationship_type} -> {target}]: {self.reason}"
        )


class FamilyTreeView(BaseModel):
    """A head-centric tree for one household."""

    head: FamilyTreeViewNode = Field(description="Head of household node")
    ward_no: str = Field(default="", description="Ward number")
    house_no: str = Field(default="", description="House number within the ward")
    member_count: int = Field(default=0, ge=0, description="Members in the household")
    warnings: list[OrphanEdge] = Field(
        default_factory=list, description="Edges dropped during assembly"
    )

    def has_warnings(self) -> bool:
        """Check if any edges were dropped."""
        return bool(self.warnings)


FamilyTreeViewNode.model_rebuild()

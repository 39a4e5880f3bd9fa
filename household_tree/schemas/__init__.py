"""Pydantic schemas for household records and family trees."""

from household_tree.schemas.members import (
    RELATIONSHIP_TYPES,
    HeadRecord,
    HouseholdDescriptor,
    InputMember,
    RelatedTo,
    RelationalEdge,
)
from household_tree.schemas.tree import FamilyTreeView, FamilyTreeViewNode, OrphanEdge

__all__ = [
    "RELATIONSHIP_TYPES",
    "InputMember",
    "RelatedTo",
    "RelationalEdge",
    "HeadRecord",
    "HouseholdDescriptor",
    "FamilyTreeViewNode",
    "FamilyTreeView",
    "OrphanEdge",
]

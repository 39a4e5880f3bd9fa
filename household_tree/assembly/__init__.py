"""Head-centric tree assembly for households with classified relationships."""

from household_tree.assembly.classified import EdgePool, assemble_from_classified_edges
from household_tree.assembly.simple import build_simple_view

__all__ = ["EdgePool", "assemble_from_classified_edges", "build_simple_view"]

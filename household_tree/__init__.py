"""
Household Tree - Reconstruct family hierarchies for the members of one household.

This package infers parent/child and spouse links from flat voter-roll style
member records, or assembles a head-centric tree from relationship edges that
were already classified upstream, and produces nested trees ready for rendering.
"""

__version__ = "0.1.0"
__author__ = "Household Tree Contributors"

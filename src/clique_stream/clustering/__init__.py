"""Incremental maximal-clique clustering over the verified graph.

Runs a localized Bron-Kerbosch search whenever a mutual edge is confirmed
and prunes clusters that later turn out to be subsets of larger ones.
"""

from .clique_engine import CliqueEngine

__all__ = ["CliqueEngine"]

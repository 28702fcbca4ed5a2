"""Directed adjacency-set graph on top of networkx.

A thin wrapper around ``networkx.DiGraph`` that exposes just the edge
operations the detector needs, rejects ``None`` node ids, and treats
lookups on unknown nodes as empty rather than as errors.
"""

from __future__ import annotations

from collections.abc import Hashable, Set

import networkx as nx

from clique_stream.errors import InvalidArgumentError

_EMPTY: frozenset = frozenset()


def _require_nodes(*nodes: Hashable | None) -> None:
    if any(node is None for node in nodes):
        raise InvalidArgumentError("node id must not be None")


class Graph:
    """Mapping from node id to the set of its direct out-neighbours."""

    def __init__(self) -> None:
        self._graph = nx.DiGraph()

    def contains_edge(self, a: Hashable, b: Hashable) -> bool:
        _require_nodes(a, b)
        return self._graph.has_edge(a, b)

    def add_edge(self, a: Hashable, b: Hashable) -> None:
        """Add ``a -> b``.  Adding an existing edge is a no-op."""
        _require_nodes(a, b)
        self._graph.add_edge(a, b)

    def remove_edge(self, a: Hashable, b: Hashable) -> None:
        """Remove ``a -> b`` if present."""
        _require_nodes(a, b)
        if self._graph.has_edge(a, b):
            self._graph.remove_edge(a, b)

    def neighbors(self, a: Hashable) -> Set:
        """Out-neighbours of ``a`` as a read-only, live set view.

        Unknown nodes have no neighbours.  Copy the result before mutating
        the graph if a stable snapshot is needed.
        """
        _require_nodes(a)
        if a not in self._graph:
            return _EMPTY
        return self._graph.succ[a].keys()

    @property
    def node_count(self) -> int:
        return self._graph.number_of_nodes()

    @property
    def edge_count(self) -> int:
        return self._graph.number_of_edges()

    def to_networkx(self) -> nx.DiGraph:
        """Return an independent copy of the underlying graph."""
        return self._graph.copy()

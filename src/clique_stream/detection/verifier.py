"""Mutual-interaction verification.

A directed observation ``a -> b`` is only recorded as pending.  Once the
reverse observation ``b -> a`` arrives the pair is promoted into the
verified graph in both directions.  Only promotions can create new
clusters, so only they are reported as changes.
"""

from __future__ import annotations

from collections.abc import Hashable

import structlog

from clique_stream.graph import Graph

logger = structlog.get_logger()


class EdgeVerifier:
    """Owns the unverified (directed) and verified (symmetric) graphs.

    Attributes:
        unverified: Directed observations still waiting for their reverse.
        verified: Confirmed mutual interactions; ``a -> b`` iff ``b -> a``.
    """

    def __init__(self) -> None:
        self.unverified = Graph()
        self.verified = Graph()

    def observe(self, source: Hashable, target: Hashable) -> bool:
        """Record a directed interaction ``source -> target``.

        Returns:
            ``True`` if the pair was promoted to a verified edge by this
            observation, ``False`` if the state did not change in a way
            that can affect clusters (repeat, first sighting, self loop).
        """
        if self.verified.contains_edge(source, target):
            return False
        if source == target:
            return False

        if self.unverified.contains_edge(target, source):
            self.verified.add_edge(source, target)
            self.verified.add_edge(target, source)
            self.unverified.remove_edge(target, source)
            logger.debug("edge_verified", source=source, target=target)
            return True

        self.unverified.add_edge(source, target)
        return False

"""Adjacency-set graphs used to track interaction edges."""

from .adjacency import Graph

__all__ = ["Graph"]

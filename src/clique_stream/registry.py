"""Stable node ids for external keys (e.g. email addresses)."""

from __future__ import annotations

from collections.abc import Hashable


class NodeRegistry:
    """Assigns dense integer ids to external keys in first-seen order."""

    def __init__(self) -> None:
        self._ids: dict[Hashable, int] = {}
        self._keys: list[Hashable] = []

    def node_id(self, key: Hashable) -> int:
        """Return the id for ``key``, assigning the next free one if new."""
        node_id = self._ids.get(key)
        if node_id is None:
            node_id = len(self._keys)
            self._ids[key] = node_id
            self._keys.append(key)
        return node_id

    def key_for(self, node_id: int) -> Hashable:
        """Reverse lookup.  Raises ``KeyError`` for unknown ids."""
        if not 0 <= node_id < len(self._keys):
            raise KeyError(node_id)
        return self._keys[node_id]

    def __contains__(self, key: Hashable) -> bool:
        return key in self._ids

    def __len__(self) -> int:
        return len(self._keys)

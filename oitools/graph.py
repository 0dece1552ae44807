"""Directed weighted graph that tracks its number of weakly connected components."""

from __future__ import annotations

from collections import deque
from collections.abc import Hashable, Iterable
from dataclasses import dataclass, field


@dataclass
class _Node:
    outs: set[Hashable] = field(default_factory=set)
    ins: set[Hashable] = field(default_factory=set)


class Graph:
    """Directed graph keyed by hashable node names.

    ``components`` counts the weakly connected components and is kept up to
    date as nodes and edges come and go.
    """

    def __init__(self) -> None:
        self._nodes: dict[Hashable, _Node] = {}
        self._edges: dict[tuple[Hashable, Hashable], int] = {}
        self._components = 0

    @property
    def components(self) -> int:
        """Number of weakly connected components."""
        return self._components

    @property
    def edges(self) -> dict[tuple[Hashable, Hashable], int]:
        """A copy of the edges as ``{(src, dst): weight}``."""
        return dict(self._edges)

    def __contains__(self, key: object) -> bool:
        return key in self._nodes

    def __len__(self) -> int:
        return len(self._nodes)

    def add_node(self, key: Hashable) -> None:
        """Add ``key`` as an isolated node if it is not present yet."""
        if key not in self._nodes:
            self._nodes[key] = _Node()
            self._components += 1

    def connect(self, src: Hashable, dst: Hashable, weight: int = 0) -> None:
        """Add (or re-weight) the edge ``src -> dst``, creating missing nodes."""
        self.add_node(src)
        self.add_node(dst)
        if not self.is_weakly_connected(src, dst):
            self._components -= 1
        self._edges[(src, dst)] = weight
        self._nodes[src].outs.add(dst)
        self._nodes[dst].ins.add(src)

    def remove_edge(self, src: Hashable, dst: Hashable) -> None:
        """Remove the edge ``src -> dst``; raise ``KeyError`` if there is none."""
        if (src, dst) not in self._edges:
            raise KeyError((src, dst))
        del self._edges[(src, dst)]
        self._nodes[src].outs.discard(dst)
        self._nodes[dst].ins.discard(src)
        if not self.is_weakly_connected(src, dst):
            self._components += 1

    def remove_node(self, key: Hashable) -> None:
        """Remove ``key`` and all its edges; missing keys are ignored."""
        node = self._nodes.get(key)
        if node is None:
            return
        for dst in list(node.outs):
            self.remove_edge(key, dst)
        for src in list(node.ins):
            self.remove_edge(src, key)
        del self._nodes[key]
        self._components -= 1

    def _search(self, src: Hashable, dst: Hashable, directed: bool) -> bool:
        if src == dst:
            return True
        if src not in self._nodes or dst not in self._nodes:
            return False
        seen = {src}
        queue = deque([src])
        while queue:
            current = queue.popleft()
            if current == dst:
                return True
            node = self._nodes[current]
            neighbours: Iterable[Hashable] = node.outs if directed else node.outs | node.ins
            for nxt in neighbours:
                if nxt not in seen:
                    seen.add(nxt)
                    queue.append(nxt)
        return False

    def is_reachable(self, src: Hashable, dst: Hashable) -> bool:
        """True when ``dst`` can be reached from ``src`` following edge directions."""
        return self._search(src, dst, directed=True)

    def is_weakly_connected(self, a: Hashable, b: Hashable) -> bool:
        """True when ``a`` and ``b`` are linked ignoring edge directions."""
        return self._search(a, b, directed=False)
"""Per-sentence dependency graph.

Nodes are 1-based token indices into the sentence's token list; edges live in
adjacency lists keyed by node index. Graphs are read-only once built.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, Iterable, List, Optional


@dataclass(frozen=True)
class GrammaticalRelation:
    """Dependency relation name split into short name and specific label."""

    short_name: str
    specific: Optional[str] = None

    @classmethod
    def parse(cls, label: str) -> "GrammaticalRelation":
        """Parse labels such as ``nmod:of`` or ``flat:name``."""
        short, sep, specific = label.partition(":")
        return cls(short_name=short, specific=specific if sep and specific else None)

    @property
    def label(self) -> str:
        if self.specific:
            return f"{self.short_name}:{self.specific}"
        return self.short_name


@dataclass(frozen=True)
class TokenNode:
    index: int
    text: str
    tag: Optional[str] = None


@dataclass(frozen=True)
class DependencyEdge:
    governor: int
    dependent: int
    relation: GrammaticalRelation


class GraphKind(str, Enum):
    """Dependency representations, most informative first."""

    ENHANCED = "enhanced"
    COLLAPSED = "collapsed"
    BASIC = "basic"


class DependencyGraph:
    """Adjacency structure over a sentence's token arena."""

    def __init__(self, tokens: List[TokenNode], edges: Iterable[DependencyEdge] = ()) -> None:
        self.tokens = tokens
        self._outgoing: Dict[int, List[DependencyEdge]] = {}
        self._incoming: Dict[int, List[DependencyEdge]] = {}
        for edge in edges:
            self.add_edge(edge)

    def __len__(self) -> int:
        return len(self.tokens)

    def add_edge(self, edge: DependencyEdge) -> None:
        self._outgoing.setdefault(edge.governor, []).append(edge)
        self._incoming.setdefault(edge.dependent, []).append(edge)

    def node(self, index: int) -> Optional[TokenNode]:
        """Return the node for a 1-based index, or None when out of range."""
        if index < 1 or index > len(self.tokens):
            return None
        return self.tokens[index - 1]

    def outgoing_edges(self, index: int) -> List[DependencyEdge]:
        return list(self._outgoing.get(index, ()))

    def incoming_edges(self, index: int) -> List[DependencyEdge]:
        return list(self._incoming.get(index, ()))


@dataclass
class ParsedSentence:
    """Tokens of one sentence plus whichever graph variants the parser produced."""

    tokens: List[TokenNode]
    graphs: Dict[GraphKind, Optional[DependencyGraph]] = field(default_factory=dict)

    def best_graph(self) -> Optional[DependencyGraph]:
        for kind in GraphKind:
            graph = self.graphs.get(kind)
            if graph is not None:
                return graph
        return None

"""
Graph construction for overlapping numeric tokens.

A directed edge A -> B exists when A != B and the last ``overlap``
characters of A equal the first ``overlap`` characters of B.

Vertices are keyed by token value. Repeated values in the input collapse
into one vertex, so the same number can never appear twice in one path.
"""

from collections import defaultdict
from types import MappingProxyType
from typing import Dict, Iterable, List, Mapping, Optional, Tuple

from token_chains.constants import OVERLAP
from token_chains.types import Adjacency, Token
from token_chains.utils import check_overlap, prefix, suffix, unique_in_order


class TokenGraph:
    """
    Adjacency list keyed by token, neighbours kept in discovery order.

    Neighbour sequences are tuples, so nothing handed out by the graph can
    be used to change it.
    """

    def __init__(self, adjacency: Optional[Mapping[Token, Iterable[Token]]] = None) -> None:
        self._adjacency: Adjacency = {
            token: tuple(targets) for token, targets in (adjacency or {}).items()
        }

    def add_vertex(self, token: Token) -> None:
        self._adjacency.setdefault(token, ())

    def add_edge(self, source: Token, target: Token) -> None:
        self._adjacency[source] = self.neighbors(source) + (target,)

    def neighbors(self, vertex: Token) -> Tuple[Token, ...]:
        """Out-neighbours of ``vertex``; empty for unknown vertices."""
        return self._adjacency.get(vertex, ())

    def vertices(self) -> List[Token]:
        return list(self._adjacency)

    def edge_count(self) -> int:
        return sum(len(targets) for targets in self._adjacency.values())

    def as_dict(self) -> Mapping[Token, Tuple[Token, ...]]:
        """Read-only view of the adjacency mapping."""
        return MappingProxyType(self._adjacency)

    def __contains__(self, vertex: object) -> bool:
        return vertex in self._adjacency

    def __len__(self) -> int:
        return len(self._adjacency)

    def __repr__(self) -> str:
        return f"TokenGraph(vertices={len(self)}, edges={self.edge_count()})"


def _group_by_prefix(tokens: List[Token], overlap: int) -> Dict[str, List[Token]]:
    groups: Dict[str, List[Token]] = defaultdict(list)
    for token in tokens:
        groups[prefix(token, overlap)].append(token)
    return groups


def build_graph(tokens: Iterable[Token], overlap: int = OVERLAP) -> TokenGraph:
    """
    Build the overlap graph for a sequence of tokens.

    Equivalent to checking every (from, to) pair of the input, but tokens
    are bucketed by prefix first so each source only scans candidates that
    can match. Within a bucket the input order is kept, which makes the
    neighbour order identical to the full cross product.

    Args:
        tokens: Token values; repeated values collapse into one vertex
        overlap: Number of characters shared between consecutive tokens

    Returns:
        A TokenGraph in which every input token is a vertex
    """
    check_overlap(overlap)

    unique_tokens = unique_in_order(tokens)
    by_prefix = _group_by_prefix(unique_tokens, overlap)

    adjacency = {
        source: [
            target
            for target in by_prefix.get(suffix(source, overlap), ())
            if target != source
        ]
        for source in unique_tokens
    }

    return TokenGraph(adjacency)

"""
Reference longest-path computation by enumerating permutations.

Only usable for a handful of tokens; it exists to check the DFS search.
"""

from itertools import permutations
from typing import Dict, List, Set, Tuple

from token_chains.core.graph_builder import TokenGraph


def edges_by_rule(tokens: List[str], overlap: int = 2) -> Set[Tuple[str, str]]:
    """Every (from, to) pair of distinct token values that satisfies the overlap rule."""
    values = set(tokens)
    return {
        (source, target)
        for source in values
        for target in values
        if source != target and source[-overlap:] == target[:overlap]
    }


def is_simple_path(graph: TokenGraph, path: List[str]) -> bool:
    if len(set(path)) != len(path):
        return False
    return all(b in graph.neighbors(a) for a, b in zip(path, path[1:]))


def brute_force_longest(graph: TokenGraph) -> Tuple[int, Set[Tuple[str, ...]]]:
    """Longest simple path length and the set of all paths of that length."""
    vertices = graph.vertices()
    best = 0
    best_paths: Set[Tuple[str, ...]] = set()

    for size in range(1, len(vertices) + 1):
        found = {
            candidate
            for candidate in permutations(vertices, size)
            if is_simple_path(graph, list(candidate))
        }
        if not found:
            # No simple path of this size means none of any larger size
            break
        best, best_paths = size, found

    return best, best_paths


def cross_product_adjacency(tokens: List[str], overlap: int = 2) -> Dict[str, List[str]]:
    """Adjacency built by checking every (from, to) pair, duplicates dropped first."""
    values = list(dict.fromkeys(tokens))
    return {
        source: [
            target
            for target in values
            if source != target and source[-overlap:] == target[:overlap]
        ]
        for source in values
    }

"""
Longest simple path search using exhaustive depth-first search.

Every vertex is tried as a root. The visited set is scoped to the current
path, so a vertex excluded from one branch may appear in another. All
paths that reach the best length are kept; a strictly longer path evicts
them.

IMPORTANT: Path length is measured in vertices, not edges. A single
isolated token is a path of length 1.

The search is exponential in the worst case (dense graphs have
factorially many simple paths).
"""

from typing import Iterable, Iterator, List, Set

from tqdm import tqdm

from token_chains.constants import DEFAULT_STRATEGY, SEARCH_STRATEGIES, STRATEGY_RECURSIVE
from token_chains.core.graph_builder import TokenGraph
from token_chains.types import Path, SearchResult, Token


class SearchContext:
    """Mutable state of one search: the current branch and the best paths so far."""

    def __init__(self) -> None:
        self.current_path: Path = []
        self.visited: Set[Token] = set()
        self.max_length = 0
        self.longest_paths: List[Path] = []

    def reset_for_root(self) -> None:
        """Forget the branch state before starting from a new root."""
        self.current_path.clear()
        self.visited.clear()

    def enter(self, vertex: Token) -> None:
        self.visited.add(vertex)
        self.current_path.append(vertex)
        self._record_current_path()

    def leave(self) -> None:
        vertex = self.current_path.pop()
        self.visited.remove(vertex)

    def _record_current_path(self) -> None:
        length = len(self.current_path)
        if length > self.max_length:
            self.max_length = length
            self.longest_paths = [self.current_path[:]]
        elif length == self.max_length:
            self.longest_paths.append(self.current_path[:])

    def result(self) -> SearchResult:
        return SearchResult(
            max_length=self.max_length,
            paths=[path[:] for path in self.longest_paths],
        )


def _depth_first_search(graph: TokenGraph, vertex: Token, context: SearchContext) -> None:
    """Recursive DFS; recursion depth equals the length of the current path."""
    context.enter(vertex)

    for neighbor in graph.neighbors(vertex):
        if neighbor not in context.visited:
            _depth_first_search(graph, neighbor, context)

    context.leave()


def _depth_first_search_iterative(
    graph: TokenGraph, root: Token, context: SearchContext
) -> None:
    """
    Stack-based DFS with the same visit order as the recursive version.

    Each stack frame is an iterator over the neighbours of the vertex at
    the same depth of the current path, so resuming a frame continues
    exactly where the recursive loop would after returning from a child.
    """
    context.enter(root)
    stack: List[Iterator[Token]] = [iter(graph.neighbors(root))]

    while stack:
        for neighbor in stack[-1]:
            if neighbor not in context.visited:
                context.enter(neighbor)
                stack.append(iter(graph.neighbors(neighbor)))
                break
        else:
            stack.pop()
            context.leave()


class LongestPathSearch:
    """Runs the per-root traversal over a graph and collects the longest paths."""

    def __init__(self, graph: TokenGraph, strategy: str = DEFAULT_STRATEGY):
        if strategy not in SEARCH_STRATEGIES:
            raise ValueError(
                f"Unknown search strategy '{strategy}', expected one of {SEARCH_STRATEGIES}"
            )
        self.graph = graph
        self.strategy = strategy

    def run(self, show_progress: bool = False) -> SearchResult:
        context = SearchContext()
        traverse = (
            _depth_first_search
            if self.strategy == STRATEGY_RECURSIVE
            else _depth_first_search_iterative
        )

        roots: Iterable[Token] = self.graph.vertices()
        if show_progress:
            roots = tqdm(roots, desc="Searching from roots", unit="root")

        for root in roots:
            context.reset_for_root()
            traverse(self.graph, root, context)

        return context.result()


def find_longest_paths(
    graph: TokenGraph, strategy: str = DEFAULT_STRATEGY, show_progress: bool = False
) -> SearchResult:
    """
    Find all maximum-length simple paths in the graph.

    Args:
        graph: The token graph, not modified
        strategy: "iterative" (explicit stack) or "recursive"
        show_progress: Show a progress bar over the roots

    Returns:
        SearchResult with the longest length and every path of that length,
        in discovery order
    """
    return LongestPathSearch(graph, strategy).run(show_progress=show_progress)

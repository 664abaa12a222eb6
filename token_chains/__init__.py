"""
Longest chains of overlapping numeric tokens.

Tokens are vertices of a directed graph; A -> B when the last two digits
of A are the first two digits of B. The search finds every longest simple
path through that graph.
"""

from .types import (
    Token,
    Path,
    Adjacency,
    SearchResult,
    GraphSummary,
    RenderSettings,
    TokenFile,
)

from .core.graph_builder import TokenGraph, build_graph

from .core.longest_path import SearchContext, LongestPathSearch, find_longest_paths

from .core.path_rendering import render_path, render_paths

from .core.progress import ProgressTicker

from .core.graph_stats import summarize_graph

from .input_reader import NoValidTokensError, read_tokens, is_valid_token

from .analyzer import LongestChainAnalyzer

__version__ = "1.0.0"

__all__ = [
    # Types
    "Token",
    "Path",
    "Adjacency",
    "SearchResult",
    "GraphSummary",
    "RenderSettings",
    "TokenFile",
    # Graph
    "TokenGraph",
    "build_graph",
    # Search
    "SearchContext",
    "LongestPathSearch",
    "find_longest_paths",
    # Rendering
    "render_path",
    "render_paths",
    # Progress
    "ProgressTicker",
    # Statistics
    "summarize_graph",
    # Input
    "NoValidTokensError",
    "read_tokens",
    "is_valid_token",
    # High-level
    "LongestChainAnalyzer",
]

from typing import Dict, List, NamedTuple, Tuple

from token_chains.constants import OVERLAP, TOKEN_LENGTH


# Type aliases for clarity
Token = str
Path = List[Token]
Adjacency = Dict[Token, Tuple[Token, ...]]


class SearchResult(NamedTuple):
    """Outcome of a longest-path search.

    Every path in ``paths`` has exactly ``max_length`` vertices.
    """

    max_length: int
    paths: List[Path]


class GraphSummary(NamedTuple):
    """Shape statistics of a token graph."""

    vertex_count: int
    edge_count: int
    max_out_degree: int
    isolated_count: int


class RenderSettings(NamedTuple):
    """Token geometry used to collapse a path back into one digit sequence."""

    token_length: int = TOKEN_LENGTH
    overlap: int = OVERLAP


class TokenFile(NamedTuple):
    """Tokens read from an input file."""

    tokens: List[Token]
    skipped: int

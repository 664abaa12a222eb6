"""
Graph statistics computed with numpy.

Kept apart from the search itself: these helpers describe the shape of
the graph (size, degrees, isolated tokens) for reporting.
"""

import numpy as np

from token_chains.core.graph_builder import TokenGraph
from token_chains.types import GraphSummary


def summarize_graph(graph: TokenGraph) -> GraphSummary:
    """
    Count vertices, edges, the largest out-degree and the isolated tokens.

    Works on degree vectors rather than the full matrix, so it stays
    cheap for inputs far too large for an n x n array.
    """
    tokens = graph.vertices()
    if not tokens:
        return GraphSummary(vertex_count=0, edge_count=0, max_out_degree=0, isolated_count=0)

    token_to_idx = {token: i for i, token in enumerate(tokens)}
    out_degree = np.array([len(graph.neighbors(token)) for token in tokens], dtype=int)
    targets = [token_to_idx[target] for token in tokens for target in graph.neighbors(token)]
    in_degree = np.bincount(np.array(targets, dtype=int), minlength=len(tokens))
    isolated = np.logical_and(out_degree == 0, in_degree == 0)

    return GraphSummary(
        vertex_count=len(tokens),
        edge_count=int(out_degree.sum()),
        max_out_degree=int(out_degree.max()),
        isolated_count=int(isolated.sum()),
    )

"""
Main orchestration module for the longest chain search.

This module composes the graph builder, the search and the ticker into
one workflow, keeping the console reporting out of the algorithms.
"""

import time
from typing import List, Optional

from token_chains.constants import DEFAULT_STRATEGY, TICKER_INTERVAL_SECONDS
from token_chains.core.graph_builder import TokenGraph, build_graph
from token_chains.core.graph_stats import summarize_graph
from token_chains.core.longest_path import find_longest_paths
from token_chains.core.progress import ProgressTicker
from token_chains.display import ProgressReporter, StatisticsDisplay
from token_chains.types import RenderSettings, SearchResult, Token


class LongestChainAnalyzer:
    """
    High-level orchestrator for the longest chain search.

    The graph is built at the start of run() and is read-only afterwards,
    so the ticker thread started after it never races with it.
    """

    def __init__(
        self,
        tokens: List[Token],
        settings: RenderSettings = RenderSettings(),
        strategy: str = DEFAULT_STRATEGY,
        ticker_interval: float = TICKER_INTERVAL_SECONDS,
        verbose: bool = True,
        show_progress: bool = False,
    ):
        self.settings = settings
        self.strategy = strategy
        self.ticker_interval = ticker_interval
        self.verbose = verbose
        self.show_progress = show_progress
        self.tokens = tokens
        self.graph: Optional[TokenGraph] = None
        self.elapsed_seconds: Optional[float] = None

    def run(self) -> SearchResult:
        """Search the graph for its longest chains and report progress."""
        reporter = ProgressReporter(self.verbose)
        started = time.perf_counter()

        self.graph = build_graph(self.tokens, overlap=self.settings.overlap)

        if self.verbose:
            StatisticsDisplay.display_graph_summary(summarize_graph(self.graph))

        reporter.report_search_started()
        ticker = ProgressTicker(interval=self.ticker_interval, emit=reporter.report)
        with ticker:
            result = find_longest_paths(
                self.graph, strategy=self.strategy, show_progress=self.show_progress
            )
        reporter.report_search_completed()

        self.elapsed_seconds = time.perf_counter() - started
        return result

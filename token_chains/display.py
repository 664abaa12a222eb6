"""
Display and formatting utilities for search results.

This module handles all presentation concerns, keeping them separate
from the graph and search logic.
"""

from typing import List

from token_chains.core.path_rendering import render_path
from token_chains.types import GraphSummary, Path, RenderSettings, SearchResult
from token_chains.utils import seconds_to_minutes


class PathFormatter:
    """Responsible for formatting paths in various ways."""

    @staticmethod
    def format_sequence(path: Path, settings: RenderSettings = RenderSettings()) -> str:
        """Format a path as its compact digit sequence."""
        return render_path(path, settings.token_length, settings.overlap)

    @staticmethod
    def format_numbered(index: int, path: Path, settings: RenderSettings = RenderSettings()) -> str:
        return f"{index}. \n{PathFormatter.format_sequence(path, settings)}\n"


class StatisticsDisplay:
    """Responsible for displaying graph and search statistics."""

    @staticmethod
    def display_header(title: str, width: int = 70) -> None:
        """Display a formatted header."""
        print(f"\n{title}")
        print("=" * width)

    @staticmethod
    def display_graph_summary(summary: GraphSummary) -> None:
        print(f"Graph construction completed. Total elements: {summary.vertex_count}")
        print(f"  Edges: {summary.edge_count:,}")
        print(f"  Largest out-degree: {summary.max_out_degree}")
        print(f"  Isolated elements: {summary.isolated_count}")

    @staticmethod
    def display_search_summary(result: SearchResult, elapsed_seconds: float) -> None:
        print(f"Execution time: {seconds_to_minutes(elapsed_seconds)} minutes")
        print(f"Length of the longest sequence: {result.max_length}")
        print(f"Number of longest sequences: {len(result.paths)}")

    @staticmethod
    def display_longest_paths(
        paths: List[Path], settings: RenderSettings = RenderSettings()
    ) -> None:
        """Display every path as a numbered compact sequence."""
        print("Longest sequence(s):")
        for i, path in enumerate(paths, 1):
            print(PathFormatter.format_numbered(i, path, settings))


class ProgressReporter:
    """Handles status messages for long-running operations."""

    def __init__(self, verbose: bool = True):
        self.verbose = verbose

    def report(self, message: str) -> None:
        if self.verbose:
            print(message)

    def report_loaded(self, token_count: int, skipped: int) -> None:
        self.report(f"File successfully read. Loaded {token_count} elements.")
        if skipped:
            self.report(f"Skipped {skipped} malformed entries.")

    def report_search_started(self) -> None:
        self.report("Starting the search for the longest sequence(s)...")

    def report_search_completed(self) -> None:
        self.report("Search for the longest sequence(s) completed successfully.")

"""
Tests for collapsing token paths into compact digit sequences.
"""

import pytest

from token_chains.core.path_rendering import render_path, render_paths
from token_chains.types import RenderSettings


class TestRenderPath:
    """Overlap rendering with the default and custom token geometry."""

    def test_three_token_chain(self):
        """First four digits of each token, then the last two of the final token."""
        path = ["341256", "563412", "123456"]

        assert render_path(path) == "3412" + "5634" + "1234" + "56"

    def test_single_token_is_unchanged(self):
        assert render_path(["123456"]) == "123456"

    def test_empty_path(self):
        assert render_path([]) == ""

    def test_custom_geometry(self):
        """Four-digit tokens overlapping by one digit advance three digits per token."""
        path = ["1234", "4567", "7890"]

        assert render_path(path, token_length=4, overlap=1) == "1234567890"

    def test_render_paths_uses_settings(self):
        paths = [["1234", "4567"], ["9991", "1000"]]

        assert render_paths(paths, RenderSettings(token_length=4, overlap=1)) == [
            "1234567",
            "9991000",
        ]

    @pytest.mark.parametrize(
        "token_length, overlap",
        [(0, 1), (6, 0), (2, 3)],
    )
    def test_rejects_bad_geometry(self, token_length, overlap):
        with pytest.raises(ValueError):
            render_path(["123456"], token_length=token_length, overlap=overlap)

"""
Rendering of token paths.

Consecutive tokens in a path share ``overlap`` characters, so a path can
be written as one compact digit sequence: the leading ``token_length -
overlap`` characters of every token but the last, followed by the whole
last token. For 6-digit tokens with a 2-digit overlap this is the first
four digits of each token plus the final two digits of the last one.
"""

from typing import Iterable, List

from token_chains.constants import OVERLAP, TOKEN_LENGTH
from token_chains.types import Path, RenderSettings
from token_chains.utils import check_geometry


def render_path(path: Path, token_length: int = TOKEN_LENGTH, overlap: int = OVERLAP) -> str:
    """
    Collapse a path of overlapping tokens into a single digit sequence.

    Example:
        >>> render_path(["341256", "563412", "123456"])
        '34125634123456'
    """
    check_geometry(token_length, overlap)
    if not path:
        return ""

    step = token_length - overlap
    return "".join(token[:step] for token in path[:-1]) + path[-1]


def render_paths(paths: Iterable[Path], settings: RenderSettings = RenderSettings()) -> List[str]:
    return [render_path(path, settings.token_length, settings.overlap) for path in paths]

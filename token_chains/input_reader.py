"""
Reading and validating token files.

A token file is plain text; tokens are separated by any whitespace.
Only tokens made of exactly ``token_length`` ASCII digits are kept, the
rest are counted as skipped.
"""

import re
from functools import lru_cache
from pathlib import Path
from typing import Pattern, Union

from token_chains.constants import TOKEN_LENGTH, TOKEN_PATTERN
from token_chains.types import TokenFile


class NoValidTokensError(ValueError):
    """Raised when an input file contains no token of the expected shape."""


@lru_cache(maxsize=None)
def _token_regex(token_length: int) -> Pattern[str]:
    if token_length < 1:
        raise ValueError(f"Token length must be positive, got {token_length}")
    return re.compile(TOKEN_PATTERN.format(length=token_length))


def is_valid_token(token: str, token_length: int = TOKEN_LENGTH) -> bool:
    return _token_regex(token_length).fullmatch(token) is not None


def read_tokens(file_path: Union[str, Path], token_length: int = TOKEN_LENGTH) -> TokenFile:
    """
    Read the valid tokens of a file, in file order.

    Bytes outside ASCII are decoded as U+FFFD, so they can only spoil the
    word they sit in.

    Raises:
        OSError: If the file cannot be opened
        NoValidTokensError: If the file holds no valid token
    """
    path = Path(file_path)
    with open(path, "r", encoding="ascii", errors="replace") as f:
        words = f.read().split()

    tokens = [word for word in words if is_valid_token(word, token_length)]
    if not tokens:
        raise NoValidTokensError(f"{path} is empty or contains no valid data")

    return TokenFile(tokens=tokens, skipped=len(words) - len(tokens))

from typing import Iterable, List

from token_chains.types import Token


def prefix(token: Token, size: int) -> str:
    return token[:size]


def suffix(token: Token, size: int) -> str:
    # token[-0:] would be the whole token
    return token[len(token) - size :] if size <= len(token) else token


def unique_in_order(tokens: Iterable[Token]) -> List[Token]:
    """Drop repeated token values, keeping the first occurrence of each."""
    return list(dict.fromkeys(tokens))


def check_overlap(overlap: int) -> None:
    if overlap < 1:
        raise ValueError(f"Overlap must be at least 1, got {overlap}")


def check_geometry(token_length: int, overlap: int) -> None:
    """Validate a token length / overlap pair used for rendering and reading."""
    if token_length < 1:
        raise ValueError(f"Token length must be positive, got {token_length}")
    check_overlap(overlap)
    if overlap > token_length:
        raise ValueError(
            f"Overlap {overlap} is longer than the token length {token_length}"
        )


def seconds_to_minutes(seconds: float) -> float:
    return seconds / 60

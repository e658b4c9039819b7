"""Whitespace tokenizer and word statistics."""

import re
from typing import Iterable

from corpusops.models import WordStats

# Optionally signed base-10 integer, ASCII digits only
INTEGER_TOKEN_PATTERN = re.compile(r"[+-]?[0-9]+")


def is_integer_token(token: str) -> bool:
    """Check if a token is a whole base-10 integer such as "42" or "-7"."""
    return INTEGER_TOKEN_PATTERN.fullmatch(token) is not None


def compute_stats(units: Iterable[str]) -> WordStats:
    """Count words and their total length across a corpus.

    Tokens are runs of non-whitespace characters. Integer tokens are skipped
    entirely, so "3.14" counts as a word but "42" does not.

    Args:
        units: Lines or paragraphs to tokenize

    Returns:
        WordStats; its average is None when no word was counted
    """
    total_words = 0
    total_length = 0

    for unit in units:
        for token in unit.split():
            if is_integer_token(token):
                continue
            total_words += 1
            total_length += len(token)

    return WordStats(total_words=total_words, total_length=total_length)

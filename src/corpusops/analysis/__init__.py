"""Statistics, keyword filtering and slicing over a corpus."""

from corpusops.analysis.keyword_filter import filter_by_keyword
from corpusops.analysis.slicing import head_tail, parse_slice_length
from corpusops.analysis.stats import compute_stats, is_integer_token

__all__ = [
    "compute_stats",
    "is_integer_token",
    "filter_by_keyword",
    "head_tail",
    "parse_slice_length",
]

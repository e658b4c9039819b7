"""Keyword partitioning of text units."""

from typing import Iterable

from corpusops.models import FilterResult


def filter_by_keyword(
    units: Iterable[str], keyword: str, case_sensitive: bool = True
) -> FilterResult:
    """Split units into those containing the keyword and the rest.

    The partition is stable on both sides. An empty keyword matches
    every unit.

    Args:
        units: Lines or paragraphs to partition
        keyword: Substring to look for
        case_sensitive: When False, both sides are case-folded first

    Returns:
        FilterResult with matching and non-matching units
    """
    needle = keyword if case_sensitive else keyword.casefold()

    matching: list[str] = []
    non_matching: list[str] = []
    for unit in units:
        haystack = unit if case_sensitive else unit.casefold()
        if needle in haystack:
            matching.append(unit)
        else:
            non_matching.append(unit)

    return FilterResult(matching=matching, non_matching=non_matching)

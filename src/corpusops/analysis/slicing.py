"""Head/tail slices of a corpus."""

from typing import Sequence

from corpusops.models import Slice


def parse_slice_length(text: str) -> int:
    """Parse a requested slice length typed by the user.

    Unparsable or negative input yields 0, which produces empty slices.
    """
    try:
        value = int(text.strip())
    except ValueError:
        return 0
    return max(value, 0)


def head_tail(units: Sequence[str], n: int) -> Slice:
    """Take the first and last n units.

    n is clamped to [0, len(units)]. When it reaches len(units) both
    slices are the whole corpus.

    Args:
        units: Ordered corpus
        n: Requested slice length

    Returns:
        Slice with head and tail of equal length
    """
    size = len(units)
    n = min(max(n, 0), size)
    return Slice(head=list(units[:n]), tail=list(units[size - n :]))

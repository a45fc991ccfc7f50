"""Binary search over sorted sequences in two interval conventions.

Both functions expect `sequence` sorted ascending; sortedness is not checked.
When the target occurs more than once, any matching index may be returned.
"""
from typing import Any, Callable, Dict, Sequence

NOT_FOUND = -1


def binary_search_closed(sequence: Sequence[Any], target: Any) -> int:
    """Search the closed interval [lo, hi]. Return index or NOT_FOUND."""
    lo, hi = 0, len(sequence) - 1
    while lo <= hi:
        # Not (lo + hi) // 2: the sum overflows fixed-width indices.
        mid = lo + (hi - lo) // 2
        if sequence[mid] < target:
            lo = mid + 1
        elif sequence[mid] > target:
            hi = mid - 1
        else:
            return mid
    return NOT_FOUND


def binary_search_half_open(sequence: Sequence[Any], target: Any) -> int:
    """Search the half-open interval [lo, hi). Return index or NOT_FOUND."""
    lo, hi = 0, len(sequence)
    while lo < hi:
        mid = lo + (hi - lo) // 2
        if sequence[mid] < target:
            lo = mid + 1
        elif sequence[mid] > target:
            hi = mid
        else:
            return mid
    return NOT_FOUND


SEARCH_FUNCTIONS: Dict[str, Callable[[Sequence[Any], Any], int]] = {
    'closed': binary_search_closed,
    'half_open': binary_search_half_open,
}

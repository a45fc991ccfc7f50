"""Sorted dictionary lookup using binary search."""
from typing import Iterable, List
from binary_search import NOT_FOUND, SEARCH_FUNCTIONS


class SortedDictionary:
    """Exact-match word lookup over a sorted, de-duplicated word list."""

    def __init__(self, words: Iterable[str]):
        self.words = sorted(set(words))

    def __len__(self) -> int:
        return len(self.words)

    def lookup(self, word: str, convention: str = 'closed') -> int:
        """Return the index of a word, or NOT_FOUND."""
        search = SEARCH_FUNCTIONS[convention]
        return search(self.words, word)

    def contains(self, word: str) -> bool:
        """Check if a word is in the dictionary."""
        return self.lookup(word) != NOT_FOUND

    def cross_check(self, probes: Iterable[str]) -> List[str]:
        """Return probes on which the search conventions disagree."""
        mismatches = []
        for probe in probes:
            results = {self.lookup(probe, name) for name in SEARCH_FUNCTIONS}
            if len(results) != 1:
                mismatches.append(probe)
        return mismatches

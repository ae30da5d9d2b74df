"""Word frequency ranking for log lines."""

import re
from typing import Iterable, Optional

from config import Config

# ASCII-only case folding: non-ASCII letters pass through untouched
_ASCII_LOWER = str.maketrans(
    "ABCDEFGHIJKLMNOPQRSTUVWXYZ",
    "abcdefghijklmnopqrstuvwxyz",
)

# Maximal runs of ASCII letters/digits. Everything else is a delimiter.
_TOKEN_RE = re.compile(r"[a-z0-9]+")


def fold_case(line: str) -> str:
    """Lowercase ASCII letters only."""
    return line.translate(_ASCII_LOWER)


def tokenize(line: str) -> list[str]:
    """
    Split a log line into lowercase ASCII alphanumeric tokens.

    Any run of non-alphanumeric characters, whatever its length, acts as a
    single boundary. Non-ASCII characters are never part of a token.

    Args:
        line: Raw log line

    Returns:
        Tokens in order of appearance (duplicates kept)
    """
    return _TOKEN_RE.findall(fold_case(line))


def count_words(lines: Iterable[str]) -> dict[str, int]:
    """Count token occurrences across all lines combined."""
    word_counts = {}  # token -> count
    for line in lines:
        for word in tokenize(line):
            word_counts[word] = word_counts.get(word, 0) + 1
    return word_counts


def rank_key(entry: tuple[str, int]) -> tuple[int, str]:
    """Sort key: count descending, then word ascending."""
    word, count = entry
    return (-count, word)


def compare_entries(a: tuple[str, int], b: tuple[str, int]) -> int:
    """
    Compare two (word, count) entries by rank.

    Returns:
        -1 if a ranks before b, 1 if after, 0 only for identical entries
    """
    if a[1] != b[1]:
        return -1 if a[1] > b[1] else 1
    if a[0] != b[0]:
        return -1 if a[0] < b[0] else 1
    return 0


def top_k_words(lines: Iterable[str], k: int) -> list[tuple[str, int]]:
    """
    Find the K most frequent words in a list of log lines.

    Ties on count are broken by ascending word order, so the result does
    not depend on dict iteration order.

    Args:
        lines: Log lines (may be empty)
        k: Number of entries to return (non-negative)

    Returns:
        List of (word, count) tuples, at most k long
    """
    if k == 0:
        return []

    word_counts = sorted(count_words(lines).items(), key=rank_key)
    return word_counts[:k]


# The ranking operation under its short name
rank = top_k_words


class WordFrequencyRanker:
    """Ranks words in log lines by frequency.

    Holds only a default K; every call builds its own frequency table.
    """

    def __init__(self, k: Optional[int] = None):
        """
        Initialize ranker.

        Args:
            k: Default number of entries returned by rank(),
               falls back to Config.default_k
        """
        self.k = Config().default_k if k is None else k

    def rank(self, lines: Iterable[str], k: Optional[int] = None) -> list[tuple[str, int]]:
        """Top-K (word, count) entries; k overrides the default if given."""
        return top_k_words(lines, self.k if k is None else k)

    def count(self, lines: Iterable[str]) -> dict[str, int]:
        """Full frequency table for lines."""
        return count_words(lines)

    def total_tokens(self, lines: Iterable[str]) -> int:
        """Number of tokens extracted from all lines."""
        return sum(len(tokenize(line)) for line in lines)

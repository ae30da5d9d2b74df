"""Analysis modules for log word frequency."""

from .word_frequency import WordFrequencyRanker, top_k_words, rank

__all__ = ["WordFrequencyRanker", "top_k_words", "rank"]

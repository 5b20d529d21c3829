"""A sentence held as a list of words joined by single spaces."""

from __future__ import annotations

from collections.abc import Iterable
from itertools import groupby


class SplittedSentence:
    """Words of a sentence, as produced by splitting on whitespace."""

    def __init__(self, words: Iterable[str]) -> None:
        self._words = list(words)

    @property
    def words(self) -> list[str]:
        """The words, in order."""
        return self._words

    @property
    def word_count(self) -> int:
        """Number of words."""
        return len(self._words)

    def dedupe(self) -> int:
        """Collapse runs of equal neighbouring words; return how many were removed."""
        old_count = self.word_count
        self._words = [word for word, _ in groupby(self._words)]
        return old_count - self.word_count

    def __len__(self) -> int:
        """Length of the joined sentence, counting one space between words."""
        if not self._words:
            return 0
        return len(self._words) - 1 + sum(len(word) for word in self._words)

    def __bool__(self) -> bool:
        return bool(self._words)

    def join(self) -> str:
        """Join the words with single spaces."""
        return " ".join(self._words)

    def __repr__(self) -> str:
        return f"SplittedSentence({self._words!r})"
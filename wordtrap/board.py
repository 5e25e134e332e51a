"""The game board: a fixed word list, the one-letter links between words, and used-word sets."""

from __future__ import annotations

from collections import defaultdict
from collections.abc import Iterable, Iterator
from pathlib import Path


class UnknownWordError(KeyError):
    """Raised when a word is not on the board."""


class WordSet:
    """A set of word ids drawn from a board of a fixed size."""

    def __init__(self, size: int) -> None:
        if size < 0:
            raise ValueError("size must not be negative")
        self._size = size
        self._members: set[int] = set()

    @property
    def size(self) -> int:
        """The number of word ids this set can hold."""
        return self._size

    def _check(self, word_id: int) -> None:
        if not 0 <= word_id < self._size:
            raise IndexError(f"word id {word_id} is outside 0..{self._size - 1}")

    def mark(self, word_id: int) -> None:
        """Mark a word as used."""
        self._check(word_id)
        self._members.add(word_id)

    def unmark(self, word_id: int) -> None:
        """Mark a word as unused."""
        self._check(word_id)
        self._members.discard(word_id)

    def __contains__(self, word_id: object) -> bool:
        return word_id in self._members

    def reset(self) -> None:
        """Mark every word as unused."""
        self._members.clear()

    def __len__(self) -> int:
        return len(self._members)

    def __iter__(self) -> Iterator[int]:
        return iter(sorted(self._members))


class WordBoard:
    """Words of equal length, linked when they differ in exactly one letter."""

    def __init__(self, words: list[str], connections: list[tuple[int, ...]]) -> None:
        self._words = words
        self._ids = {word: index for index, word in enumerate(words)}
        self._connections = connections

    @classmethod
    def from_words(cls, words: Iterable[str]) -> WordBoard:
        """Build a board from words; duplicates are dropped, order is kept."""
        unique: list[str] = []
        seen: set[str] = set()
        for raw in words:
            word = raw.strip().lower()
            if word and word not in seen:
                seen.add(word)
                unique.append(word)
        if not unique:
            raise ValueError("a board needs at least one word")
        length = len(unique[0])
        if any(len(word) != length for word in unique):
            raise ValueError("all words on a board must have the same length")

        buckets: dict[str, list[int]] = defaultdict(list)
        for index, word in enumerate(unique):
            for pos in range(length):
                buckets[word[:pos] + "_" + word[pos + 1:]].append(index)

        neighbours: list[set[int]] = [set() for _ in unique]
        for members in buckets.values():
            for index in members:
                neighbours[index].update(members)
        connections = [
            tuple(sorted(linked - {index})) for index, linked in enumerate(neighbours)
        ]
        return cls(unique, connections)

    @classmethod
    def from_file(cls, path: str | Path, num_letters: int) -> WordBoard:
        """Build a board from a file holding one word per line.

        Only alphabetic words of exactly ``num_letters`` letters are kept.
        """
        text = Path(path).read_text(encoding="utf-8")
        words = (
            line.strip().lower()
            for line in text.splitlines()
        )
        return cls.from_words(
            word for word in words if len(word) == num_letters and word.isalpha()
        )

    @property
    def num_letters(self) -> int:
        """The length of every word on the board."""
        return len(self._words[0])

    def word(self, word_id: int) -> str:
        """The word with the given id."""
        if not 0 <= word_id < len(self._words):
            raise IndexError(f"word id {word_id} is not on the board")
        return self._words[word_id]

    def word_id(self, word: str) -> int:
        """The id of the given word."""
        try:
            return self._ids[word.strip().lower()]
        except KeyError:
            raise UnknownWordError(word) from None

    def connections(self, word_id: int) -> tuple[int, ...]:
        """Ids of the words one letter away, in ascending order."""
        if not 0 <= word_id < len(self._words):
            raise IndexError(f"word id {word_id} is not on the board")
        return self._connections[word_id]

    def num_connections(self, word_id: int) -> int:
        """How many words are one letter away."""
        return len(self.connections(word_id))

    def new_word_set(self) -> WordSet:
        """An empty word set sized for this board."""
        return WordSet(len(self._words))

    def __len__(self) -> int:
        return len(self._words)

    def __iter__(self) -> Iterator[str]:
        return iter(self._words)
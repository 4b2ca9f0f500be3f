"""
Frequency Table Module

Holds the next-character statistics for a single context window. Entries keep
the order in which their characters were first observed; cumulative
probabilities are defined relative to that order, and the sampler walks it.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator


def check_character(character: object) -> str:
    """Return `character` if it is a one-character string, else raise ValueError."""
    if not isinstance(character, str) or len(character) != 1:
        raise ValueError(f"Expected a single character, got {character!r}")
    return character


@dataclass
class CharEntry:
    """
    One character observed after a context window.

    Attributes:
        character: The following character
        count: Number of times it followed the window during training
        probability: count / total count of the window (0.0 until finalized)
        cumulative_probability: Running sum of probabilities in insertion order
    """
    character: str
    count: int = 1
    probability: float = 0.0
    cumulative_probability: float = 0.0

    def __str__(self) -> str:
        return f"({self.character} {self.count} {self.probability} {self.cumulative_probability})"


class FrequencyTable:
    """
    Insertion-ordered collection of CharEntry, one per distinct character.

    Usage:
        table = FrequencyTable()
        for c in "hello":
            table.observe(c)
        table.finalize_probabilities()
        entry = table.sample(0.42)
    """

    def __init__(self) -> None:
        self._entries: list[CharEntry] = []

    def observe(self, character: str) -> None:
        """Count one more occurrence of `character`, appending it if new."""
        check_character(character)

        entry = self.get(character)
        if entry is None:
            self._entries.append(CharEntry(character))
        else:
            entry.count += 1

    def get(self, character: str) -> CharEntry | None:
        """Return the entry for `character`, or None if it was never observed."""
        for entry in self._entries:
            if entry.character == character:
                return entry
        return None

    def index_of(self, character: str) -> int:
        """Position of `character` in insertion order, -1 when absent."""
        for i, entry in enumerate(self._entries):
            if entry.character == character:
                return i
        return -1

    def size(self) -> int:
        return len(self._entries)

    def total_count(self) -> int:
        return sum(entry.count for entry in self._entries)

    def finalize_probabilities(self) -> None:
        """
        Compute probability and cumulative probability for every entry.

        Entries are visited in insertion order, so the last entry always ends
        up with a cumulative probability of (approximately) 1.0.

        Raises:
            RuntimeError: If the table has no entries
        """
        if not self._entries:
            raise RuntimeError("cannot finalize an empty frequency table")

        total = self.total_count()
        running = 0.0
        for entry in self._entries:
            entry.probability = entry.count / total
            entry.cumulative_probability = running + entry.probability
            running = entry.cumulative_probability

    def sample(self, random_value: float) -> CharEntry:
        """
        Pick an entry by inverse-CDF lookup.

        Args:
            random_value: A draw from [0, 1)

        Returns:
            The first entry whose cumulative probability exceeds `random_value`,
            or the last entry when rounding leaves none that does.
        """
        for entry in self._entries:
            if random_value < entry.cumulative_probability:
                return entry
        return self._entries[-1]

    def __getitem__(self, index: int) -> CharEntry:
        return self._entries[index]

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[CharEntry]:
        return iter(self._entries)

    def __contains__(self, character: object) -> bool:
        return any(entry.character == character for entry in self._entries)

    def __str__(self) -> str:
        return "(" + " ".join(str(entry) for entry in self._entries) + ")"

"""Dictionary lookup of the closest word by edit distance."""

from __future__ import annotations

import os
from pathlib import Path

MAX_DISTANCE = 1000


class DictionaryError(Exception):
    """Raised when the dictionary file cannot be loaded."""


def edit_distance(a: str, b: str) -> int:
    """Return the Levenshtein distance between two strings (Wagner-Fischer)."""
    previous = list(range(len(b) + 1))
    for i, char_a in enumerate(a, start=1):
        current = [i]
        for j, char_b in enumerate(b, start=1):
            current.append(
                min(
                    previous[j] + 1,
                    current[j - 1] + 1,
                    previous[j - 1] + (char_a != char_b),
                )
            )
        previous = current
    return previous[-1]


class Spellchecker:
    """Finds the dictionary word closest to a given word."""

    def __init__(self, dictionary_file: str | os.PathLike[str] = "dictionary.txt") -> None:
        path = Path(dictionary_file)
        if not path.exists():
            raise DictionaryError(f"Dictionary file '{dictionary_file}' not found")
        try:
            with path.open(encoding="utf-8", newline="") as handle:
                self.words: tuple[str, ...] = tuple(
                    line.removesuffix("\n").removesuffix("\r") for line in handle
                )
        except (OSError, UnicodeDecodeError) as exc:
            raise DictionaryError(f"Could not open file: {exc}") from exc

    def spellcheck(self, word: str) -> str | None:
        """Return the closest dictionary word, or None for an empty word or no match."""
        if not word:
            return None
        closest = None
        closest_distance = MAX_DISTANCE
        for candidate in self.words:
            distance = edit_distance(word, candidate)
            if distance < closest_distance:
                closest_distance = distance
                closest = candidate
        return closest
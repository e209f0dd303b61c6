"""Splitting text into tokens and spellchecking each of them."""

from __future__ import annotations

import logging
import os
from itertools import groupby

from autocorrect.spellchecked import Spellchecked
from autocorrect.spellchecker import Spellchecker

logger = logging.getLogger(__name__)


def _is_alphabetic(text: str) -> bool:
    return all(char.isalpha() for char in text)


def capitalize_if_needed(original_word: str, spellchecked_word: str) -> str:
    """Capitalise the corrected word when the original started with a capital."""
    if not original_word or not spellchecked_word:
        return spellchecked_word
    if original_word[0].isupper():
        return spellchecked_word[0].upper() + spellchecked_word[1:]
    return spellchecked_word


def split_by_alphabetic(text: str) -> list[str]:
    """Split text into alternating runs of alphabetic and non-alphabetic characters."""
    return ["".join(run) for _, run in groupby(text, key=str.isalpha)]


class SpellcheckParser:
    """Parses input text and spellchecks it word by word."""

    def __init__(self, dictionary_file: str | os.PathLike[str] = "dictionary.txt") -> None:
        self.spellchecker = Spellchecker(dictionary_file)

    def spellcheck_all(self, text: str) -> list[Spellchecked]:
        """Spellcheck every whitespace-separated token of the text, in order."""
        return [self.process_word(word) for word in text.split()]

    def process_word(self, original_word: str) -> Spellchecked:
        """Spellcheck one token, keeping any punctuation it carries."""
        logger.debug("Processing word: %s", original_word)
        if not original_word:
            raise ValueError("cannot process an empty word")
        if _is_alphabetic(original_word):
            result = self.spellcheck_word(original_word)
            assert result is not None
            return result
        return Spellchecked(
            original=original_word,
            spellchecked=self.spellcheck_with_punctuation(original_word),
        )

    def spellcheck_word(self, original_word: str) -> Spellchecked | None:
        """Spellcheck a purely alphabetic word; None for an empty word."""
        if not original_word:
            return None
        corrected = self.spellchecker.spellcheck(original_word.lower())
        if corrected is None:
            corrected = original_word
        return Spellchecked(
            original=original_word,
            spellchecked=capitalize_if_needed(original_word, corrected),
        )

    def spellcheck_with_punctuation(self, original_word: str) -> str:
        """Correct the alphabetic runs of a token and leave everything else as is."""
        pieces = []
        for piece in split_by_alphabetic(original_word):
            if _is_alphabetic(piece):
                checked = self.spellcheck_word(piece)
                if checked is not None:
                    pieces.append(checked.spellchecked)
            else:
                pieces.append(piece)
        return "".join(pieces)
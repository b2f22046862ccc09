# vntext/data/lexicon.py
"""
Loaders for the word list shipped with the package.
"""

from typing import Tuple
from importlib import resources
import functools
import logging

logger = logging.getLogger(__name__)

WORDS_FILE = 'words.txt'


@functools.lru_cache(maxsize=None)
def load_words() -> Tuple[str, ...]:
    """
    Load the list of known single words, one per line, in file order.

    Returns:
        Tuple[str, ...]: Known words (lowercase, with accents)
    """
    text = resources.files(__package__).joinpath(WORDS_FILE).read_text(encoding='utf-8')
    words = tuple(line.strip() for line in text.splitlines() if line.strip())
    logger.debug(f"Loaded {len(words)} words from {WORDS_FILE}")
    return words


@functools.lru_cache(maxsize=None)
def load_word_index() -> str:
    """Space-joined word list, used for substring lookups."""
    return ' '.join(load_words())


__all__ = ['WORDS_FILE', 'load_words', 'load_word_index']

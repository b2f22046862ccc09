# vntext/text/scanner.py
"""
Detect words that are not Vietnamese.
"""

from typing import List
import re

from ..data.lexicon import load_word_index
from .accents import ACCENT_LETTERS

_ACCENTED = ''.join(char + char.upper() for char in ACCENT_LETTERS)

# Anything but a letter or a space
NON_LETTER_PATTERN = re.compile(f'[^A-Za-z{_ACCENTED} ]')
WHITESPACE_PATTERN = re.compile(r'\s+')


def tokenize(text: str) -> List[str]:
    """
    Keep only letters and spaces, then split into unique tokens, in order of
    first appearance.
    """
    if not text:
        return []
    text = WHITESPACE_PATTERN.sub(' ', text)
    text = NON_LETTER_PATTERN.sub('', text)
    return list(dict.fromkeys(text.split()))


def scan_words(text: str, want_incorrect: bool = True) -> List[str]:
    """
    Find incorrect (or correct) words of a text.

    A token counts as correct when its lowercase form appears anywhere in the
    space-joined word list, so a token that is only part of a known word
    (e.g. "gh") is also accepted.

    Args:
        text (str): Input text
        want_incorrect (bool): True: return incorrect words. False: return correct words.

    Returns:
        List[str]: Found tokens, as written in the text

    Example:
        >>> scan_words('Xứ Wales thắng Nga, đứng nhất bảng B')
        ['Wales']
    """
    index = load_word_index()
    return [token for token in tokenize(text) if (token.lower() not in index) == want_incorrect]


__all__ = ['tokenize', 'scan_words']

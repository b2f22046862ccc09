# Syllable structure, tone placement and spelling

from .syllable import (
    InvalidSyllableError,
    Syllable,
    parse,
    decompose,
    place_accent,
    generate_words,
)
from .speller import speak

__all__ = [
    'InvalidSyllableError',
    'Syllable',
    'parse',
    'decompose',
    'place_accent',
    'generate_words',
    'speak',
]

"""
Vietnamese text normalization: tone placement, accent correction, i/y
correction, sorting, spelling and number reading.
"""

from .phonology import (
    InvalidSyllableError,
    Syllable,
    parse,
    decompose,
    place_accent,
    generate_words,
    speak,
)
from .text import (
    remove_accent,
    get_tone,
    check_char,
    sort_word,
    format_name,
    sort_people_name,
    scan_words,
    number_to_text,
)
from .correction import fix_accent, fix_i_or_y, Normalizer

__version__ = '1.0.0'

__all__ = [
    'InvalidSyllableError',
    'Syllable',
    'parse',
    'decompose',
    'place_accent',
    'generate_words',
    'speak',
    'remove_accent',
    'get_tone',
    'check_char',
    'sort_word',
    'format_name',
    'sort_people_name',
    'scan_words',
    'number_to_text',
    'fix_accent',
    'fix_i_or_y',
    'Normalizer',
]

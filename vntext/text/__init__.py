# Text-level transforms: accents, names, collation, scanning and numbers

from .accents import remove_accent, remove_tone, get_tone, check_char
from .collation import collation_key, sort_word
from .names import format_name, sort_people_name
from .scanner import scan_words
from .numbers import number_to_text

__all__ = [
    'remove_accent',
    'remove_tone',
    'get_tone',
    'check_char',
    'collation_key',
    'sort_word',
    'format_name',
    'sort_people_name',
    'scan_words',
    'number_to_text',
]

# Static tables and lexicon

from .constants import LETTERS, CONSONANTS, TONED_VOWELS, TONE_NAMES, VOWELS
from .syllables import SYLLABLE_TO_CONSONANTS
from .accent_placements import ACCENT_PLACEMENTS
from .i_or_y import I_OR_Y
from .lexicon import load_words, load_word_index

__all__ = [
    'LETTERS', 'CONSONANTS', 'TONED_VOWELS', 'TONE_NAMES', 'VOWELS',
    'SYLLABLE_TO_CONSONANTS',
    'ACCENT_PLACEMENTS',
    'I_OR_Y',
    'load_words', 'load_word_index',
]

# vntext/text/accents.py
"""
Character-level accent transforms: stripping tones, converting accented
letters to plain Latin or to NCR Decimal, and tone detection.
"""

from types import MappingProxyType
from typing import Dict
import logging

from ..data.constants import TONED_VOWELS, MARKED_LETTERS, LETTERS, TONE_FLAT

logger = logging.getLogger(__name__)

ACCENT_MODES = ('remove', 'alphabet', 'ncr_decimal')


def _build_accent_letters() -> Dict[str, tuple]:
    """Lowercase accented letter -> (plain Latin letter, alphabet letter without tone)."""
    letters = {}
    for base, toned in TONED_VOWELS.items():
        latin = MARKED_LETTERS.get(base, base)
        if base in MARKED_LETTERS:
            letters[base] = (latin, base)
        for char in toned:
            letters[char] = (latin, base)
    letters['đ'] = (MARKED_LETTERS['đ'], 'đ')
    return letters


# 60 toned vowels + 6 marked vowels + "đ"
ACCENT_LETTERS = MappingProxyType(_build_accent_letters())


def _build_translation(mode: str) -> Dict[int, str]:
    mapping = {}
    for lower, (latin, alphabet) in ACCENT_LETTERS.items():
        upper = lower.upper()
        if mode == 'remove':
            mapping[lower], mapping[upper] = latin, latin.upper()
        elif mode == 'alphabet':
            mapping[lower], mapping[upper] = alphabet, alphabet.upper()
        else:
            mapping[lower], mapping[upper] = f'&#{ord(lower)};', f'&#{ord(upper)};'
    return str.maketrans(mapping)


_TRANSLATIONS = MappingProxyType({mode: _build_translation(mode) for mode in ACCENT_MODES})

# Toned vowel (both cases) -> tone code
TONE_OF = MappingProxyType({
    char: tone
    for toned in TONED_VOWELS.values()
    for tone, lower in enumerate(toned, start=1)
    for char in (lower, lower.upper())
})


def remove_accent(text: str, mode: str = 'remove') -> str:
    """
    Remove accents from every character of a text, or re-encode them.

    Args:
        text (str): Input text
        mode (str): One of
            'remove': accented letters become plain Latin letters ("ệ" -> "e", "đ" -> "d")
            'alphabet': only tones are removed, Vietnamese letters are kept ("ệ" -> "ê")
            'ncr_decimal': accented letters become NCR Decimal ("ệ" -> "&#7879;")

    Returns:
        str: Transformed text. Characters outside the accent table pass through.
            An unknown mode falls back to 'remove'.
    """
    if not text:
        return text
    if mode not in _TRANSLATIONS:
        logger.warning(f"Unknown accent mode: {mode}, using 'remove'. Supported: {', '.join(ACCENT_MODES)}")
        mode = 'remove'
    return text.translate(_TRANSLATIONS[mode])


def remove_tone(text: str) -> str:
    """Strip tone marks only, keeping ă/â/ê/ô/ơ/ư/đ. Length is preserved."""
    return remove_accent(text, 'alphabet')


def get_tone(word: str) -> int:
    """
    Tone code carried by a word.

    Returns TONE_FLAT when the word has no toned vowel, or when it carries
    more than one (which is not a valid single word).
    """
    tones = [TONE_OF[char] for char in word if char in TONE_OF]
    if len(tones) != 1:
        return TONE_FLAT
    return tones[0]


def check_char(char: str) -> bool:
    """Whether `char` is exactly one letter of the Vietnamese alphabet, with or without accent."""
    if not isinstance(char, str) or len(char) != 1:
        return False
    lower = char.lower()
    return lower in LETTERS or lower in ACCENT_LETTERS


__all__ = [
    'ACCENT_MODES', 'ACCENT_LETTERS', 'TONE_OF',
    'remove_accent', 'remove_tone', 'get_tone', 'check_char',
]

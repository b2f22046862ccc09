# vntext/phonology/speller.py
"""
Spell out a Vietnamese text the way it is taught when learning to read.

    speak("Việt Nam")
    -> "i ê tờ iêt, vờ iêt viêt nặng /việt/; a mờ am, nờ am /nam/; /việt nam/"

Each word is read as: the vowels of its nucleus, then the ending consonant
with the rhyme, then the leading consonant, then the whole word without
tone, the tone name, and finally the word itself.
"""

from ..data.constants import CONSONANTS, LETTERS, TONE_NAMES
from ..text.accents import get_tone, remove_tone
from .syllable import decompose


def _speak_word(word: str) -> str:
    syllable = decompose(word)
    vowels = remove_tone(syllable.nucleus)
    rhyme = vowels + syllable.ending
    spoken = ''

    if syllable.nucleus:
        for letter in vowels:
            spoken += LETTERS.get(letter, letter) + ' '
        if syllable.ending:
            spoken += CONSONANTS[syllable.ending] + ' '
            spoken += rhyme + ', '

    if syllable.leading:
        spoken += CONSONANTS[syllable.leading] + ' '

    tone = get_tone(word)
    # A single vowel is not repeated
    if tone:
        if len(word) > 1:
            spoken += f'{rhyme} {remove_tone(word)} {TONE_NAMES[tone]} /{word}/; '
        else:
            spoken += f' {TONE_NAMES[tone]} /{word}/; '
    elif len(word) > 1:
        spoken += f'{rhyme} /{word}/; '
    else:
        spoken += f' /{word}/; '

    return spoken


def speak(text: str) -> str:
    """
    Print out the way to spell a Vietnamese text.

    A text made of one letter or one consonant is only named, e.g. "ngh" -> "/ngờ/".

    Args:
        text (str): Input text, one or more words

    Returns:
        str: Spelling transcript, lowercase
    """
    text = ' '.join(text.split()).lower() if text else ''
    if not text:
        return ''

    if text in CONSONANTS:
        return f'/{CONSONANTS[text]}/'
    if text in LETTERS:
        return f'/{LETTERS[text]}/'

    spoken = ''.join(_speak_word(word) for word in text.split(' '))
    return spoken + f'/{text}/'


__all__ = ['speak']

# vntext/phonology/syllable.py
"""
Word-structure decomposition and tone placement.

A single Vietnamese word is split into
    {leading consonant} + {vowel nucleus} + {ending consonant}
where the nucleus plus the ending consonant (the rhyme) must be one of the
157 canonical rhymes. The tone mark is then placed on one vowel of the nucleus:

    (1) "ê" first, then "ơ", wherever they are.
    (2) Otherwise by nucleus length:
            1 -> the vowel itself            (má)
            2 -> first vowel if the word ends with the nucleus (hỏa, mùa),
                 second vowel if an ending consonant follows (hoán)
            3 -> second vowel                (ngoái, khuỷu)

The "modern" style differs from the classic one for three open nuclei only:
"oa", "oe" and "uy" take the tone on their second vowel (hoả, khoẻ, thuỷ).
"""

from typing import Iterator, List, NamedTuple, Optional, Sequence
import logging

from ..data.constants import (
    CONSONANTS,
    LEADING_CONSONANTS_DESC,
    ENDING_CONSONANTS_DESC,
    TONED_VOWELS,
    TONE_FLAT,
    TONE_DOT,
    MAX_WORD_LENGTH,
    MAX_NUCLEUS_LENGTH,
)
from ..data.syllables import SYLLABLE_TO_CONSONANTS
from ..text.accents import remove_tone

logger = logging.getLogger(__name__)

ACCENT_STYLES = ('classic', 'modern')

# Open nuclei toned on their second vowel in the modern style
MODERN_NUCLEI = ('oa', 'oe', 'uy')


class InvalidSyllableError(ValueError):
    """Raised in strict mode when a word does not fit the syllable grammar."""

    def __init__(self, word: str, reason: str):
        super().__init__(f"Invalid syllable '{word}': {reason}")
        self.word = word
        self.reason = reason


class Syllable(NamedTuple):
    """Parts of a single word. Each part keeps the case and tone of the input."""
    leading: str
    nucleus: str
    ending: str

    @property
    def rhyme(self) -> str:
        return self.nucleus + self.ending

    def __str__(self) -> str:
        return self.leading + self.nucleus + self.ending


def iter_clusters(text: str, clusters: Sequence[str], at_end: bool = False) -> Iterator[str]:
    """
    Yield every cluster found at the start (or the end) of a text, longest first.

    The match is case-insensitive and must leave at least one character of
    `text` unmatched. Yielded values are slices of `text`, so they keep its case.

    Args:
        text (str): Text to match against
        clusters (Sequence[str]): Lowercase clusters, sorted by length DESC
        at_end (bool): Match a suffix instead of a prefix
    """
    lowered = text.lower()
    for cluster in clusters:
        size = len(cluster)
        if len(lowered) <= size:
            continue
        if at_end and lowered.endswith(cluster):
            yield text[-size:]
        elif not at_end and lowered.startswith(cluster):
            yield text[:size]


def match_cluster(text: str, clusters: Sequence[str], at_end: bool = False) -> str:
    """Longest cluster at the start (or the end) of a text, or '' when none matches."""
    return next(iter_clusters(text, clusters, at_end), '')


def is_rhyme(nucleus: str, ending: str) -> bool:
    """Whether nucleus + ending is one of the canonical rhymes."""
    if not 0 < len(nucleus) <= MAX_NUCLEUS_LENGTH:
        return False
    return (nucleus + ending).lower() in SYLLABLE_TO_CONSONANTS


def _split(word: str, leading: str) -> Syllable:
    rest = word[len(leading):]
    ending = match_cluster(rest, ENDING_CONSONANTS_DESC, at_end=True)
    return Syllable(leading, rest[:len(rest) - len(ending)], ending)


def parse(word: str) -> Optional[Syllable]:
    """
    Split a word into leading consonant, nucleus and ending consonant.

    Leading clusters are tried longest first ("ngh" before "ng" before "n").
    A shorter cluster is only used when the longer one leaves a rhyme outside
    the grammar, e.g. "giêng" is g + iêng since "êng" is not a rhyme.

    Args:
        word (str): Word, with or without tone

    Returns:
        Optional[Syllable]: Parts of the word, or None if it does not fit the grammar
    """
    if not word:
        return None
    bare = remove_tone(word)
    for leading in (*iter_clusters(bare, LEADING_CONSONANTS_DESC), ''):
        parts = _split(bare, leading)
        if is_rhyme(parts.nucleus, parts.ending):
            size, nucleus_size = len(parts.leading), len(parts.nucleus)
            return Syllable(
                word[:size],
                word[size:size + nucleus_size],
                word[size + nucleus_size:],
            )
    return None


def decompose(word: str) -> Syllable:
    """
    Split a word into its parts, best effort.

    Same as `parse` for words inside the grammar. Other words are split by
    plain longest match at both edges, without validation.
    """
    syllable = parse(word)
    if syllable is not None:
        return syllable
    leading = match_cluster(word, LEADING_CONSONANTS_DESC)
    return _split(word, leading)


def tone_position(syllable: Syllable, style: str = 'classic') -> int:
    """
    Index inside the nucleus of the vowel that carries the tone mark.

    Args:
        syllable (Syllable): Parsed word
        style (str): 'classic' or 'modern'
    """
    nucleus = remove_tone(syllable.nucleus).lower()

    for marked in ('ê', 'ơ'):
        if marked in nucleus:
            return nucleus.index(marked)

    if len(nucleus) == 1:
        return 0
    if len(nucleus) == 2:
        if syllable.ending:
            return 1
        if style == 'modern' and nucleus in MODERN_NUCLEI:
            return 1
        return 0
    return 1


def place_accent(word: str, tone: int, style: str = 'classic', strict: bool = False) -> str:
    """
    Place a tone mark on the right vowel of a single word.

    Any tone already carried by the word is removed first, so the call can
    also move a misplaced tone or reset it with TONE_FLAT.

    Args:
        word (str): A single word, 1 to 7 letters (e.g. "nghiêng")
        tone (int): 0 flat, 1 huyền, 2 hỏi, 3 ngã, 4 sắc, 5 nặng
        style (str): 'classic' (hỏa, thủy) or 'modern' (hoả, thuỷ)
        strict (bool): Raise instead of returning the word unchanged

    Returns:
        str: Word with the tone placed. Same length as the input.
            Out-of-grammar words, out-of-range tones and lengths return the input unchanged.

    Raises:
        ValueError: If style is unknown, or in strict mode if tone is out of range
        InvalidSyllableError: In strict mode, if the word does not fit the grammar

    Example:
        >>> place_accent("hoa", 2)
        'hỏa'
        >>> place_accent("hoa", 2, style="modern")
        'hoả'
    """
    if style not in ACCENT_STYLES:
        raise ValueError(f"Invalid style: {style}. Must be one of: {', '.join(ACCENT_STYLES)}")

    if not isinstance(tone, int) or not TONE_FLAT <= tone <= TONE_DOT:
        if strict:
            raise ValueError(f"Invalid tone: {tone}. Must be between {TONE_FLAT} and {TONE_DOT}")
        return word

    if not word or len(word) > MAX_WORD_LENGTH:
        if strict:
            raise InvalidSyllableError(word, f"length must be between 1 and {MAX_WORD_LENGTH}")
        return word

    syllable = parse(remove_tone(word))
    if syllable is None:
        if strict:
            raise InvalidSyllableError(word, "rhyme is not part of the syllable grammar")
        return word

    if tone == TONE_FLAT:
        return str(syllable)

    pos = tone_position(syllable, style)
    vowel = syllable.nucleus[pos]
    toned = TONED_VOWELS[vowel.lower()][tone - 1]
    if vowel.isupper():
        toned = toned.upper()

    nucleus = syllable.nucleus[:pos] + toned + syllable.nucleus[pos + 1:]
    return syllable.leading + nucleus + syllable.ending


def generate_words(strict: bool = True, style: str = 'classic') -> List[str]:
    """
    Generate single words from the rhyme table, with all 6 tones.

    Args:
        strict (bool): True: only the leading consonants attested for each rhyme.
            False: every leading consonant, for all words possible in theory.
        style (str): Tone placement style

    Returns:
        List[str]: Generated words, grouped by rhyme then tone
    """
    words = []
    for rhyme, attested in SYLLABLE_TO_CONSONANTS.items():
        leadings = attested if strict else tuple(CONSONANTS)
        for tone in range(TONE_FLAT, TONE_DOT + 1):
            words.append(place_accent(rhyme, tone, style))
            for leading in leadings:
                words.append(place_accent(leading + rhyme, tone, style))

    logger.debug(f"Generated {len(words)} words (strict={strict}, style={style})")
    return words


__all__ = [
    'ACCENT_STYLES',
    'InvalidSyllableError',
    'Syllable',
    'iter_clusters',
    'match_cluster',
    'is_rhyme',
    'parse',
    'decompose',
    'tone_position',
    'place_accent',
    'generate_words',
]

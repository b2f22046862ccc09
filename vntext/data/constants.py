# vntext/data/constants.py
"""
Phonology tables of the Vietnamese alphabet: letters, consonant clusters,
vowels with their tone variants and the collation order.

Every table is read-only for the lifetime of the process.
"""

from types import MappingProxyType


# Tone codes
TONE_FLAT, TONE_GRAVE, TONE_HOOK, TONE_TILDE, TONE_ACUTE, TONE_DOT = range(6)

TONE_NAMES = MappingProxyType({
    TONE_GRAVE: 'huyền',
    TONE_HOOK: 'hỏi',
    TONE_TILDE: 'ngã',
    TONE_ACUTE: 'sắc',
    TONE_DOT: 'nặng',
})

# Vowel base -> toned variants, in tone code order (grave, hook, tilde, acute, dot)
TONED_VOWELS = MappingProxyType({
    'a': 'àảãáạ',
    'ă': 'ằẳẵắặ',
    'â': 'ầẩẫấậ',
    'e': 'èẻẽéẹ',
    'ê': 'ềểễếệ',
    'i': 'ìỉĩíị',
    'o': 'òỏõóọ',
    'ô': 'ồổỗốộ',
    'ơ': 'ờởỡớợ',
    'u': 'ùủũúụ',
    'ư': 'ừửữứự',
    'y': 'ỳỷỹýỵ',
})

VOWELS = tuple(TONED_VOWELS)

# The 29 letters of the alphabet and the way each one is spoken
LETTERS = MappingProxyType({
    'a': 'a', 'ă': 'á', 'â': 'ớ', 'b': 'bờ', 'c': 'cờ', 'd': 'dờ', 'đ': 'đờ',
    'e': 'e', 'ê': 'ê', 'g': 'gờ', 'h': 'hờ', 'i': 'i', 'k': 'k', 'l': 'lờ',
    'm': 'mờ', 'n': 'nờ', 'o': 'o', 'ô': 'ô', 'ơ': 'ơ', 'p': 'bờ', 'q': 'quờ',
    'r': 'rờ', 's': 'sờ', 't': 'tờ', 'u': 'u', 'ư': 'ư', 'v': 'vờ', 'x': 'xờ',
    'y': 'y',
})

# The 27 leading consonants (16 single letters + 11 clusters) and how they are spoken
CONSONANTS = MappingProxyType({
    'b': 'bờ', 'c': 'cờ', 'ch': 'chờ', 'd': 'dờ', 'đ': 'đờ', 'g': 'gờ',
    'gh': 'gờ', 'gi': 'giờ', 'h': 'hờ', 'k': 'k', 'kh': 'khờ', 'l': 'lờ',
    'm': 'mờ', 'n': 'nờ', 'ng': 'ngờ', 'ngh': 'ngờ', 'nh': 'nhờ', 'p': 'bờ',
    'ph': 'phờ', 'qu': 'quờ', 'r': 'rờ', 's': 'sờ', 't': 'tờ', 'th': 'thờ',
    'tr': 'trờ', 'v': 'vờ', 'x': 'xờ',
})

ENDING_CONSONANTS = ('c', 'ch', 'm', 'n', 'ng', 'nh', 'p', 't')

# Longest first, so that "ngh" is tried before "ng" before "n"
LEADING_CONSONANTS_DESC = tuple(sorted(CONSONANTS, key=len, reverse=True))
ENDING_CONSONANTS_DESC = tuple(sorted(ENDING_CONSONANTS, key=len, reverse=True))

# Letters carrying a quality mark (breve, circumflex, horn, bar) -> plain Latin letter
MARKED_LETTERS = MappingProxyType({
    'ă': 'a', 'â': 'a', 'đ': 'd', 'ê': 'e', 'ô': 'o', 'ơ': 'o', 'ư': 'u',
})

# Word and nucleus bounds, e.g. "nghiêng" and "uyê"
MAX_WORD_LENGTH = 7
MAX_NUCLEUS_LENGTH = 3

# Collation families: each base letter followed by its variants in sorting order.
# A character sorts as its base letter plus its rank inside the family ('a', 'b', ...).
SORT_FAMILIES = MappingProxyType({
    'a': 'aàảãáạăằẳẵắặâầẩẫấậ',
    'd': 'dđ',
    'e': 'eèẻẽéẹêềểễếệ',
    'i': 'iìỉĩíị',
    'o': 'oòỏõóọôồổỗốộơờởỡớợ',
    'u': 'uùủũúụưừửữứự',
    'y': 'yỳỷỹýỵ',
})

# Number reading
DIGIT_WORDS = ('không', 'một', 'hai', 'ba', 'bốn', 'năm', 'sáu', 'bảy', 'tám', 'chín')
TEN_WORD = 'mười'
TENS_WORD = 'mươi'
HUNDRED_WORD = 'trăm'
ODD_WORD = 'lẻ'
# Unit digit read after a tens digit: 1 -> mốt (from 21), 5 -> lăm (from 15), 4 -> tư (only 44)
ONE_AFTER_TENS = 'mốt'
FIVE_AFTER_TENS = 'lăm'
FOUR_AFTER_TENS = 'tư'
SCALE_WORDS = ('tỉ', 'triệu', 'nghìn')

__all__ = [
    'TONE_FLAT', 'TONE_GRAVE', 'TONE_HOOK', 'TONE_TILDE', 'TONE_ACUTE', 'TONE_DOT',
    'TONE_NAMES', 'TONED_VOWELS', 'VOWELS', 'LETTERS', 'CONSONANTS',
    'ENDING_CONSONANTS', 'LEADING_CONSONANTS_DESC', 'ENDING_CONSONANTS_DESC',
    'MARKED_LETTERS', 'MAX_WORD_LENGTH', 'MAX_NUCLEUS_LENGTH', 'SORT_FAMILIES',
    'DIGIT_WORDS', 'TEN_WORD', 'TENS_WORD', 'HUNDRED_WORD', 'ODD_WORD', 'SCALE_WORDS',
    'ONE_AFTER_TENS', 'FIVE_AFTER_TENS', 'FOUR_AFTER_TENS',
]

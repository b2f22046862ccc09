# vntext/data/syllables.py
"""
Rhyme (vowel nucleus + optional ending consonant) table.

Each key is one of the 157 canonical rhymes of Vietnamese; its value lists the
leading consonants that may legally precede it. An empty tuple means the rhyme
only occurs on its own (e.g. "ă", "â") or is not attested with any consonant.
"""

from types import MappingProxyType


SYLLABLE_TO_CONSONANTS = MappingProxyType({
    # 1-char syllables
    'a': ('b', 'c', 'ch', 'd', 'đ', 'g', 'gi', 'h', 'kh', 'l', 'm', 'n', 'ng', 'nh', 'p', 'ph', 'qu', 'r', 's', 't', 'th', 'tr', 'v', 'x'),
    'ă': (),
    'â': (),
    'e': ('b', 'ch', 'd', 'đ', 'gh', 'gi', 'h', 'k', 'kh', 'l', 'm', 'n', 'ngh', 'nh', 'ph', 'qu', 'r', 's', 't', 'th', 'tr', 'v', 'x'),
    'ê': ('b', 'ch', 'd', 'đ', 'gh', 'h', 'k', 'kh', 'l', 'm', 'n', 'ngh', 'nh', 'ph', 'qu', 'r', 's', 't', 'th', 'tr', 'v', 'x'),
    'i': ('b', 'ch', 'd', 'đ', 'g', 'gh', 'h', 'k', 'kh', 'l', 'm', 'n', 'ngh', 'nh', 'ph', 'qu', 'r', 's', 't', 'th', 'tr', 'v', 'x'),
    'o': ('b', 'c', 'ch', 'd', 'đ', 'g', 'gi', 'h', 'kh', 'l', 'm', 'n', 'ng', 'nh', 'ph', 'qu', 'r', 's', 't', 'th', 'tr', 'v', 'x'),
    'ô': ('b', 'c', 'ch', 'd', 'đ', 'g', 'gi', 'h', 'kh', 'l', 'm', 'n', 'ng', 'nh', 'ph', 'r', 's', 't', 'th', 'tr', 'v', 'x'),
    'ơ': ('b', 'c', 'ch', 'd', 'đ', 'g', 'gi', 'h', 'kh', 'l', 'm', 'n', 'ng', 'nh', 'ph', 'qu', 'r', 's', 't', 'th', 'tr', 'v', 'x'),
    'u': ('b', 'c', 'ch', 'd', 'đ', 'g', 'gi', 'h', 'kh', 'l', 'm', 'n', 'ng', 'nh', 'ph', 'qu', 'r', 's', 't', 'th', 'tr', 'v', 'x'),
    'ư': ('b', 'c', 'ch', 'd', 'đ', 'g', 'gi', 'h', 'kh', 'l', 'n', 'ng', 'nh', 'r', 's', 't', 'th', 'tr', 'v', 'x'),
    'y': ('h', 'k', 'l', 'm', 'ngh', 'qu', 's', 't', 'th', 'v'),

    # 2-char syllables
    'ac': ('b', 'c', 'ch', 'd', 'đ', 'g', 'gi', 'h', 'kh', 'l', 'm', 'n', 'ng', 'nh', 'ph', 'qu', 'r', 's', 't', 'th', 'tr', 'v', 'x'),
    'ai': ('b', 'c', 'ch', 'd', 'đ', 'g', 'gi', 'h', 'kh', 'l', 'm', 'n', 'ng', 'nh', 'ph', 'qu', 'r', 's', 't', 'th', 'tr', 'v', 'x'),
    'am': ('b', 'c', 'ch', 'd', 'đ', 'g', 'gi', 'h', 'kh', 'l', 'n', 'ng', 'nh', 'ph', 'r', 's', 't', 'th', 'tr', 'v', 'x'),
    'an': ('b', 'c', 'ch', 'd', 'đ', 'g', 'gi', 'h', 'kh', 'l', 'm', 'n', 'ng', 'nh', 'ph', 'qu', 'r', 's', 't', 'th', 'tr', 'v', 'x'),
    'ao': ('b', 'c', 'ch', 'd', 'đ', 'g', 'gi', 'h', 'kh', 'l', 'm', 'n', 'ng', 'nh', 'ph', 'qu', 'r', 's', 't', 'th', 'tr', 'v', 'x'),
    'ap': ('b', 'c', 'ch', 'd', 'đ', 'g', 'gi', 'h', 'kh', 'l', 'm', 'n', 'ng', 'nh', 'ph', 'qu', 'r', 's', 't', 'th', 'tr', 'v', 'x'),
    'at': ('b', 'c', 'ch', 'd', 'đ', 'g', 'gi', 'h', 'kh', 'l', 'm', 'n', 'ng', 'nh', 'ph', 'qu', 'r', 's', 't', 'th', 'tr', 'v', 'x'),
    'au': ('b', 'c', 'ch', 'd', 'đ', 'g', 'gi', 'h', 'kh', 'l', 'm', 'n', 'ng', 'nh', 'qu', 'r', 's', 't', 'th', 'tr', 'v', 'x'),
    'ay': ('b', 'c', 'ch', 'd', 'đ', 'g', 'gi', 'h', 'kh', 'l', 'm', 'n', 'ng', 'nh', 'ph', 'qu', 'r', 's', 't', 'th', 'tr', 'v', 'x'),
    'ăc': ('b', 'c', 'ch', 'd', 'đ', 'gi', 'h', 'kh', 'l', 'm', 'n', 'ng', 'nh', 'ph', 'qu', 'r', 's', 't', 'th', 'tr', 'v'),
    'ăm': ('b', 'c', 'ch', 'd', 'đ', 'g', 'h', 'kh', 'l', 'm', 'n', 'ng', 'nh', 'qu', 'r', 's', 't', 'th', 'tr', 'x'),
    'ăn': ('b', 'c', 'ch', 'd', 'đ', 'g', 'h', 'kh', 'l', 'm', 'n', 'ng', 'nh', 'ph', 'qu', 'r', 's', 't', 'th', 'tr', 'v'),
    'ăp': ('b', 'c', 'ch', 'đ', 'g', 'kh', 'l', 'n', 'ph', 'qu', 'r', 's', 't', 'th'),
    'ăt': ('b', 'c', 'ch', 'd', 'đ', 'g', 'gi', 'h', 'kh', 'l', 'm', 'ng', 'nh', 'r', 's', 't', 'th', 'v', 'x'),
    'âc': ('b', 'g', 'gi', 'kh', 'n', 'nh', 't', 'x'),
    'âm': ('b', 'c', 'ch', 'd', 'đ', 'g', 'gi', 'h', 'kh', 'l', 'm', 'n', 'ng', 'nh', 'ph', 'r', 's', 't', 'th', 'tr', 'x'),
    'ân': ('b', 'c', 'ch', 'd', 'đ', 'g', 'gi', 'h', 'l', 'm', 'ng', 'nh', 'ph', 'qu', 'r', 's', 't', 'th', 'tr', 'v', 'x'),
    'âp': ('b', 'c', 'ch', 'd', 'đ', 'g', 'gi', 'h', 'kh', 'l', 'm', 'n', 'ng', 'nh', 'ph', 'r', 's', 't', 'th', 'v', 'x'),
    'ât': ('b', 'c', 'ch', 'd', 'đ', 'g', 'gi', 'h', 'kh', 'l', 'm', 'ng', 'nh', 'ph', 'qu', 'r', 's', 't', 'th', 'tr', 'v'),
    'âu': ('b', 'c', 'ch', 'd', 'đ', 'g', 'gi', 'h', 'kh', 'l', 'm', 'n', 'ng', 'nh', 'ph', 'r', 's', 't', 'th', 'tr', 'v', 'x'),
    'ây': ('b', 'c', 'ch', 'd', 'đ', 'g', 'gi', 'h', 'kh', 'l', 'm', 'n', 'ng', 'nh', 'ph', 'qu', 'r', 's', 't', 'th', 'tr', 'v', 'x'),
    'ec': ('kh', 'l', 'm', 'r', 's'),
    'em': ('ch', 'đ', 'gh', 'gi', 'h', 'k', 'l', 'n', 'nh', 'r', 't', 'th', 'x'),
    'en': ('b', 'ch', 'đ', 'gh', 'gi', 'h', 'k', 'kh', 'l', 'm', 'n', 'ngh', 'nh', 'ph', 'qu', 'r', 's', 't', 'th', 'v', 'x'),
    'eo': ('b', 'ch', 'd', 'đ', 'gh', 'gi', 'h', 'k', 'kh', 'l', 'm', 'n', 'ngh', 'nh', 'ph', 'qu', 'r', 's', 't', 'th', 'tr', 'v', 'x'),
    'ep': ('b', 'ch', 'd', 'đ', 'gh', 'h', 'k', 'kh', 'l', 'm', 'n', 'nh', 'ph', 't', 'th', 'x'),
    'et': ('b', 'ch', 'd', 'đ', 'gh', 'h', 'k', 'kh', 'l', 'm', 'n', 'ngh', 'nh', 'ph', 'qu', 'r', 's', 't', 'tr', 'v', 'x'),
    'êm': ('ch', 'đ', 'k', 'n', 'th', 'x'),
    'ên': ('b', 'đ', 'h', 'k', 'l', 'm', 'n', 'nh', 'ph', 'qu', 'r', 's', 't', 'tr', 'v'),
    'êp': ('b', 'n', 'r', 's', 'th', 'x'),
    'êt': ('b', 'ch', 'd', 'h', 'k', 'l', 'm', 'n', 'qu', 'r', 's', 't', 'v', 'x'),
    'êu': ('b', 'đ', 'k', 'l', 'm', 'n', 'ngh', 'r', 's', 't', 'th', 'tr'),
    'ia': ('b', 'ch', 'd', 'đ', 'k', 'kh', 'l', 'm', 'n', 'ngh', 'p', 'ph', 'r', 't', 'th', 'v', 'x'),
    'ic': ('h', 't'),
    'im': ('b', 'ch', 'd', 'gh', 'h', 'k', 'l', 'm', 'nh', 'ph', 's', 't', 'th'),
    'in': ('b', 'ch', 'k', 'm', 'n', 'nh', 'ph', 't', 'th', 'v', 'x'),
    'ip': ('b', 'ch', 'd', 'k', 'm', 'nh', 's'),
    'it': ('b', 'ch', 'đ', 'h', 'k', 'kh', 'm', 'n', 'ngh', 'r', 's', 't', 'th', 'v', 'x'),
    'iu': ('b', 'ch', 'd', 'h', 'l', 'n', 'r', 't', 'th', 'x'),
    'oa': ('d', 'đ', 'g', 'h', 'kh', 'l', 'ng', 't', 'th', 'x'),
    'oc': ('b', 'c', 'ch', 'd', 'đ', 'g', 'h', 'kh', 'l', 'm', 'n', 'ng', 'nh', 'ph', 'r', 's', 't', 'th', 'tr', 'v'),
    'oe': ('h', 'kh', 'l', 'ng', 'nh', 't', 'x'),
    'oi': ('b', 'c', 'ch', 'd', 'đ', 'g', 'gi', 'h', 'kh', 'l', 'm', 'n', 'ng', 'nh', 'r', 's', 't', 'th', 'tr', 'v', 'x'),
    'om': ('b', 'c', 'ch', 'd', 'đ', 'g', 'h', 'kh', 'l', 'n', 'ng', 'nh', 'ph', 'r', 's', 't', 'v', 'x'),
    'on': ('b', 'c', 'ch', 'đ', 'g', 'gi', 'h', 'l', 'm', 'n', 'ng', 'nh', 'r', 's', 't', 'th', 'tr', 'v'),
    'op': ('b', 'c', 'ch', 'g', 'h', 'm', 'ng', 'nh', 'th'),
    'ot': ('b', 'c', 'ch', 'đ', 'gi', 'kh', 'l', 'm', 'n', 'ng', 'nh', 'r', 's', 't', 'th', 'tr', 'v', 'x'),
    'ôc': ('b', 'c', 'ch', 'd', 'đ', 'g', 'gi', 'h', 'kh', 'l', 'm', 'n', 'ng', 'ph', 'qu', 'r', 's', 't', 'th', 'x'),
    'ôi': ('b', 'c', 'ch', 'd', 'đ', 'g', 'h', 'kh', 'l', 'm', 'n', 'ng', 'nh', 'ph', 'r', 's', 't', 'th', 'tr', 'v', 'x'),
    'ôm': ('c', 'ch', 'đ', 'g', 'h', 'n', 'nh', 't', 'tr', 'x'),
    'ôn': ('b', 'c', 'ch', 'd', 'đ', 'g', 'h', 'kh', 'l', 'm', 'n', 'ng', 'nh', 'r', 't', 'th', 'tr', 'v', 'x'),
    'ôp': ('b', 'c', 'ch', 'đ', 'g', 'l', 'n', 'ng', 'r', 's', 't', 'th', 'x'),
    'ôt': ('b', 'c', 'ch', 'd', 'đ', 'g', 'h', 'l', 'm', 'n', 'ng', 'nh', 'ph', 'r', 's', 't', 'th', 'x'),
    'ơi': ('b', 'c', 'ch', 'd', 'đ', 'g', 'gi', 'h', 'kh', 'l', 'm', 'n', 'ng', 'ph', 'qu', 'r', 's', 't', 'th', 'tr', 'v', 'x'),
    'ơm': ('b', 'c', 'ch', 'đ', 'n', 'r', 's', 'th'),
    'ơn': ('b', 'c', 'ch', 'đ', 'g', 'gi', 'h', 'l', 'm', 'nh', 'r', 's', 't', 'tr'),
    'ơp': ('b', 'ch', 'd', 'đ', 'h', 'kh', 'l', 'n', 'ng', 'r'),
    'ơt': ('b', 'c', 'ch', 'd', 'đ', 'h', 'l', 'ng', 'nh', 'ph', 'qu', 'r', 's', 'th', 'v'),
    'ua': ('b', 'c', 'ch', 'd', 'đ', 'h', 'kh', 'l', 'm', 'n', 'nh', 'r', 's', 't', 'th', 'v', 'x'),
    'uc': ('b', 'c', 'ch', 'd', 'đ', 'g', 'gi', 'h', 'kh', 'l', 'm', 'n', 'ng', 'nh', 'ph', 'r', 's', 't', 'th', 'tr', 'x'),
    'uê': ('d', 'h', 'kh', 's', 't', 'th', 'v', 'x'),
    'ui': ('b', 'c', 'ch', 'd', 'đ', 'g', 'h', 'kh', 'l', 'm', 'n', 'nh', 'ph', 'r', 's', 't', 'th', 'tr', 'v', 'x'),
    'um': ('b', 'c', 'ch', 'd', 'đ', 'gi', 'kh', 'l', 'm', 'n', 'ng', 'nh', 's', 't', 'tr', 'x'),
    'un': ('b', 'c', 'ch', 'đ', 'gi', 'h', 'l', 'm', 'ng', 'nh', 'ph', 'r', 's', 't', 'th', 'v'),
    'up': ('b', 'c', 'ch', 'gi', 'h', 'l', 'm', 'n', 'ng', 'r', 's', 't', 'th'),
    'uơ': ('th',),
    'ut': ('b', 'c', 'ch', 'h', 'l', 'm', 'n', 'ng', 'ph', 'r', 's', 't', 'th', 'tr', 'v'),
    'uy': ('d', 'h', 'kh', 'l', 'ng', 'nh', 'ph', 's', 't', 'th', 'tr', 'x'),
    'ưa': ('b', 'c', 'ch', 'd', 'đ', 'gi', 'h', 'kh', 'l', 'm', 'n', 'ng', 'nh', 'r', 's', 't', 'th', 'tr', 'v', 'x'),
    'ưc': ('b', 'c', 'ch', 'đ', 'h', 'l', 'm', 'n', 'ng', 'nh', 'ph', 'r', 's', 't', 'th', 'tr', 'v', 'x'),
    'ưi': ('c', 'ch', 'g', 'ng'),
    'ưm': ('h', 'ng'),
    'ưt': ('b', 'c', 'd', 'đ', 'gi', 'm', 'n', 'nh', 's', 'v', 'x'),
    'ưu': ('b', 'c', 'h', 'kh', 'l', 'm', 'ng', 's', 't', 'tr'),
    'yt': ('qu',),

    # 3-char syllables
    'ach': ('b', 'c', 'ch', 'd', 'đ', 'g', 'h', 'kh', 'l', 'm', 'n', 'ng', 'ph', 'qu', 'r', 's', 't', 'th', 'tr', 'v', 'x'),
    'ang': ('b', 'c', 'ch', 'd', 'đ', 'g', 'gi', 'h', 'kh', 'l', 'm', 'n', 'ng', 'nh', 'ph', 'qu', 'r', 's', 't', 'th', 'tr', 'v', 'x'),
    'anh': ('b', 'c', 'ch', 'd', 'đ', 'g', 'gi', 'h', 'kh', 'l', 'm', 'n', 'ng', 'nh', 'ph', 'qu', 'r', 's', 't', 'th', 'tr', 'v', 'x'),
    'ăng': ('b', 'c', 'ch', 'd', 'đ', 'g', 'gi', 'h', 'kh', 'l', 'm', 'n', 'ng', 'nh', 'ph', 'qu', 'r', 's', 't', 'th', 'tr', 'v', 'x'),
    'âng': ('b', 'd', 'l', 'n', 't', 'v'),
    'eng': ('b', 'k', 'l', 'x'),
    'êch': ('ch', 'k', 'l', 'ng', 'nh', 'ph', 'th', 'x'),
    'ênh': ('b', 'ch', 'd', 'đ', 'gh', 'h', 'k', 'l', 'm', 'ngh', 't', 'th', 'v'),
    'ich': ('b', 'ch', 'd', 'đ', 'h', 'k', 'kh', 'l', 'm', 'n', 'ngh', 'nh', 'ph', 'r', 't', 'th', 'tr', 'x'),
    'iêc': ('b', 'ch', 'd', 'đ', 'gh', 'l', 'nh', 't', 'th', 'v', 'x'),
    'iêm': ('b', 'ch', 'd', 'đ', 'h', 'k', 'kh', 'l', 'n', 'ngh', 'nh', 'ph', 't', 'th', 'v', 'x'),
    'iên': ('b', 'ch', 'd', 'đ', 'gh', 'h', 'k', 'kh', 'l', 'm', 'n', 'ngh', 'nh', 'ph', 't', 'th', 'tr', 'v', 'x'),
    'iêp': ('d', 'đ', 'h', 'ngh', 'nh', 't', 'th'),
    'iêt': ('b', 'ch', 'd', 'g', 'k', 'kh', 'l', 'm', 'n', 'ngh', 'nh', 'ph', 'r', 's', 't', 'th', 'tr', 'v', 'x'),
    'iêu': ('b', 'ch', 'd', 'đ', 'h', 'k', 'kh', 'l', 'm', 'n', 'nh', 'ph', 'r', 's', 't', 'th', 'tr', 'x'),
    'inh': ('b', 'ch', 'd', 'đ', 'h', 'k', 'kh', 'l', 'm', 'n', 'ngh', 'nh', 'ph', 'r', 's', 't', 'th', 'tr', 'v', 'x'),
    'oac': ('ch', 'kh', 'ng'),
    'oai': ('ch', 'đ', 'h', 'kh', 'l', 'ng', 'nh', 's', 't', 'th', 'x'),
    'oam': ('ng',),
    'oan': ('d', 'đ', 'h', 'kh', 'l', 'ng', 's', 't', 'x'),
    'oat': ('đ', 'h', 'kh', 'l', 's', 't', 'th'),
    'oay': ('h', 'kh', 'l', 'ng', 'x'),
    'oăc': ('h', 'ng'),
    'oăm': (),
    'oăn': ('th', 'x'),
    'oăt': ('h', 'th'),
    'oen': ('h', 'kh'),
    'oeo': ('ng',),
    'oet': ('kh', 'l', 't'),
    'ong': ('b', 'c', 'ch', 'd', 'đ', 'gi', 'h', 'l', 'm', 'n', 'ng', 'ph', 'r', 's', 't', 'th', 'tr', 'v', 'x'),
    'ông': ('b', 'c', 'ch', 'd', 'đ', 'g', 'gh', 'gi', 'h', 'kh', 'l', 'm', 'n', 'ng', 'nh', 'ph', 'r', 's', 't', 'th', 'tr', 'v', 'x'),
    'uân': ('ch', 'd', 'h', 'kh', 'l', 'nh', 't', 'th', 'x'),
    'uât': ('d', 'kh', 'l', 's', 't', 'th', 'tr', 'x'),
    'uây': ('kh', 'ng'),
    'ung': ('b', 'c', 'ch', 'd', 'đ', 'h', 'kh', 'l', 'm', 'n', 'nh', 'ph', 'r', 's', 't', 'th', 'tr', 'v', 'x'),
    'uôc': ('b', 'c', 'ch', 'đ', 'g', 'gi', 'l', 'nh', 'r', 't', 'th'),
    'uôi': ('c', 'ch', 'd', 'đ', 'm', 'n', 'ng', 's', 'x'),
    'uôm': ('b', 'c', 'nh', 'th'),
    'uôn': ('b', 'c', 'ch', 'kh', 'l', 'm', 'ng', 'r', 's', 't', 'th'),
    'uôt': ('b', 'ch', 'r', 't', 'th', 'tr'),
    'uya': ('kh',),
    'uyt': ('h', 's', 't'),
    'uyu': ('kh',),
    'ưng': ('b', 'c', 'ch', 'd', 'đ', 'g', 'h', 'kh', 'l', 'm', 'n', 'ng', 'nh', 'r', 's', 't', 'th', 'tr', 'v', 'x'),
    'ươc': ('b', 'c', 'ch', 'd', 'đ', 'kh', 'l', 'ng', 'nh', 'ph', 'r', 't', 'th', 'tr', 'x'),
    'ươi': ('b', 'c', 'd', 'đ', 'kh', 'l', 'm', 'ng', 'r', 's', 't'),
    'ươm': ('ch', 'g', 'l', 't'),
    'ươn': ('b', 'l', 'tr', 'v'),
    'ươp': ('c', 'm'),
    'ươt': ('l', 'm', 'ph', 'r', 's', 't', 'th', 'tr', 'v'),
    'ươu': ('b', 'h', 'kh', 'r'),
    'yên': ('qu',),
    'yêt': ('qu',),
    'yêu': (),
    'ynh': ('qu',),

    # 4-char syllables
    'iêng': ('b', 'ch', 'đ', 'g', 'k', 'kh', 'l', 'ngh', 'r', 's', 't', 'th', 'v'),
    'oach': ('x',),
    'oang': ('ch', 'đ', 'h', 'kh', 'l', 'nh', 'th', 'x'),
    'oanh': ('d', 'h', 'l', 't', 'x'),
    'oăng': ('gi', 'h'),
    'oong': ('b', 'c', 'đ', 'k', 'x'),
    'uâng': ('kh',),
    'uêch': ('kh',),
    'uênh': ('h',),
    'uông': ('b', 'c', 'ch', 'đ', 'h', 'kh', 'l', 'm', 'n', 't', 'th', 'tr', 'v', 'x'),
    'uych': (),
    'uyên': ('ch', 'd', 'h', 'kh', 'l', 'ng', 'nh', 's', 't', 'th', 'tr', 'x'),
    'uyêt': ('d', 'h', 'kh', 'ng', 't', 'th', 'x'),
    'uynh': ('h', 'kh'),
    'ương': ('b', 'c', 'ch', 'd', 'đ', 'g', 'gi', 'h', 'kh', 'l', 'm', 'n', 'ng', 'nh', 'ph', 'r', 's', 't', 'th', 'tr', 'v', 'x'),
})

__all__ = ['SYLLABLE_TO_CONSONANTS']

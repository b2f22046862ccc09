"""
Tests for word decomposition and tone placement.
"""
import sys
from pathlib import Path

import pytest

# Add project root to path
project_root = Path(__file__).parent
sys.path.insert(0, str(project_root))

from vntext.data.constants import LEADING_CONSONANTS_DESC, ENDING_CONSONANTS_DESC, CONSONANTS
from vntext.data.syllables import SYLLABLE_TO_CONSONANTS
from vntext.phonology.syllable import (
    InvalidSyllableError,
    Syllable,
    match_cluster,
    parse,
    decompose,
    tone_position,
    place_accent,
    generate_words,
)


def test_rhyme_table_size():
    assert len(SYLLABLE_TO_CONSONANTS) == 157
    assert len(CONSONANTS) == 27


def test_match_cluster_longest_first():
    assert match_cluster('nghe', LEADING_CONSONANTS_DESC) == 'ngh'
    assert match_cluster('nga', LEADING_CONSONANTS_DESC) == 'ng'
    assert match_cluster('na', LEADING_CONSONANTS_DESC) == 'n'
    assert match_cluster('anh', ENDING_CONSONANTS_DESC, at_end=True) == 'nh'
    assert match_cluster('ach', ENDING_CONSONANTS_DESC, at_end=True) == 'ch'
    assert match_cluster('ac', ENDING_CONSONANTS_DESC, at_end=True) == 'c'
    assert match_cluster('NGHE', LEADING_CONSONANTS_DESC) == 'NGH'


def test_match_cluster_leaves_one_character():
    # "ng" cannot take the whole text
    assert match_cluster('ng', LEADING_CONSONANTS_DESC) == 'n'
    assert match_cluster('ch', ENDING_CONSONANTS_DESC, at_end=True) == ''
    assert match_cluster('a', LEADING_CONSONANTS_DESC) == ''


def test_parse():
    assert parse('nghiêng') == Syllable('ngh', 'iê', 'ng')
    assert parse('Việt') == Syllable('V', 'iệ', 't')
    assert parse('oanh') == Syllable('', 'oa', 'nh')
    assert parse('quy') == Syllable('qu', 'y', '')
    assert parse('xyz') is None
    assert parse('') is None


def test_parse_falls_back_to_shorter_leading_cluster():
    # "êng" and a bare "n" are not rhymes, so "gi" gives way to "g"
    assert parse('giêng') == Syllable('g', 'iê', 'ng')
    assert parse('gin') == Syllable('g', 'i', 'n')
    assert parse('gia') == Syllable('gi', 'a', '')


def test_decompose_out_of_grammar():
    assert decompose('xyz') == Syllable('x', 'yz', '')
    assert str(decompose('nam')) == 'nam'


def test_place_accent_documented_example():
    assert place_accent('hoa', 2) == 'hỏa'


def test_place_accent_by_nucleus_length():
    assert place_accent('ma', 4) == 'má'
    assert place_accent('mua', 1) == 'mùa'
    assert place_accent('hoan', 4) == 'hoán'
    assert place_accent('ngoai', 4) == 'ngoái'
    assert place_accent('khuyu', 2) == 'khuỷu'
    assert place_accent('xoong', 1) == 'xoòng'


def test_place_accent_marked_vowel_priority():
    assert place_accent('viêt', 5) == 'việt'
    assert place_accent('thuyên', 1) == 'thuyền'
    assert place_accent('ngươi', 1) == 'người'
    assert place_accent('thuơ', 2) == 'thuở'
    for word in ('viêt', 'thuyên', 'nghiêng', 'yêu'):
        toned = place_accent(word, 4)
        assert toned[word.index('ê')] == 'ế'


def test_place_accent_keeps_case():
    assert place_accent('Hoa', 2) == 'Hỏa'
    assert place_accent('VIÊT', 5) == 'VIỆT'
    assert place_accent('NAM', 1) == 'NÀM'


def test_place_accent_gi_words():
    assert place_accent('gi', 1) == 'gì'
    assert place_accent('gin', 1) == 'gìn'
    assert place_accent('giêng', 4) == 'giếng'


def test_place_accent_moves_and_resets_tone():
    assert place_accent('hóa', 4) == 'hóa'
    assert place_accent('hoá', 4) == 'hóa'
    assert place_accent('Việt', 0) == 'Viêt'
    assert place_accent('việt', 1) == 'viềt'


def test_place_accent_modern_style():
    assert place_accent('hoa', 2, style='modern') == 'hoả'
    assert place_accent('khoe', 2, style='modern') == 'khoẻ'
    assert place_accent('thuy', 2, style='modern') == 'thuỷ'
    # Only open nuclei change
    assert place_accent('hoan', 4, style='modern') == 'hoán'
    assert place_accent('mua', 1, style='modern') == 'mùa'
    with pytest.raises(ValueError):
        place_accent('hoa', 2, style='new')


def test_place_accent_no_op():
    assert place_accent('', 1) == ''
    assert place_accent('xyz', 1) == 'xyz'
    assert place_accent('hoa', 6) == 'hoa'
    assert place_accent('hoa', -1) == 'hoa'
    assert place_accent('nghiêngg', 1) == 'nghiêngg'


def test_place_accent_strict():
    with pytest.raises(InvalidSyllableError) as exc_info:
        place_accent('xyz', 1, strict=True)
    assert exc_info.value.word == 'xyz'
    assert isinstance(exc_info.value, ValueError)

    with pytest.raises(ValueError):
        place_accent('hoa', 9, strict=True)
    with pytest.raises(InvalidSyllableError):
        place_accent('nghiêngg', 1, strict=True)

    assert place_accent('hoa', 2, strict=True) == 'hỏa'


def test_place_accent_length_and_reset():
    words = ['a', 'ba', 'hoa', 'hoan', 'nghiêng', 'khuyu', 'người', 'quy', 'giêng', 'oanh']
    for word in words:
        for tone in range(6):
            toned = place_accent(word, tone)
            assert len(toned) == len(word)
            assert place_accent(place_accent(toned, 0), tone) == toned


def test_tone_position():
    assert tone_position(Syllable('h', 'oa', '')) == 0
    assert tone_position(Syllable('h', 'oa', ''), 'modern') == 1
    assert tone_position(Syllable('h', 'oa', 'n')) == 1
    assert tone_position(Syllable('ng', 'oai', '')) == 1
    assert tone_position(Syllable('ng', 'uyê', 'n')) == 2


def test_generate_words_strict():
    words = generate_words()
    expected = sum(6 * (1 + len(attested)) for attested in SYLLABLE_TO_CONSONANTS.values())
    assert len(words) == expected
    for word in ('việt', 'nam', 'giếng', 'người', 'hỏa'):
        assert word in words


def test_generate_words_all_consonants():
    words = generate_words(strict=False)
    assert len(words) == len(SYLLABLE_TO_CONSONANTS) * 6 * (1 + len(CONSONANTS))
    assert 'hoả' in generate_words(style='modern')

"""
Tests for word scanning and spelling.
"""
import sys
from pathlib import Path

# Add project root to path
project_root = Path(__file__).parent
sys.path.insert(0, str(project_root))

from vntext.data.lexicon import load_words, load_word_index
from vntext.text.scanner import tokenize, scan_words
from vntext.phonology.speller import speak


def test_word_list():
    words = load_words()
    assert len(words) == 17809
    assert 'việt' in words
    assert ' nam ' in f' {load_word_index()} '


def test_tokenize():
    assert tokenize('Xin chào,\nViệt Nam! 2024') == ['Xin', 'chào', 'Việt', 'Nam']
    assert tokenize('a a b a') == ['a', 'b']
    assert tokenize('') == []
    assert tokenize('123 !?') == []


def test_scan_words_documented_example():
    text = 'Xứ Wales thắng Nga, đứng nhất bảng B'
    assert scan_words(text) == ['Wales']
    assert scan_words(text, want_incorrect=False) == ['Xứ', 'thắng', 'Nga', 'đứng', 'nhất', 'bảng', 'B']


def test_scan_words_unique_and_ordered():
    assert scan_words('hello xin chào hello') == ['hello']
    assert scan_words('') == []


def test_scan_words_accepts_part_of_a_known_word():
    # Lookup is substring containment in the joined word list
    assert scan_words('gh') == []
    assert scan_words('gh', want_incorrect=False) == ['gh']


def test_scan_words_line_breaks_separate_words():
    assert scan_words('xin\nchào') == []
    assert scan_words('xin\nchào', want_incorrect=False) == ['xin', 'chào']


def test_speak_documented_example():
    expected = 'i ê tờ iêt, vờ iêt viêt nặng /việt/; a mờ am, nờ am /nam/; /việt nam/'
    assert speak('Việt Nam') == expected
    assert speak('  VIỆT   nam ') == expected


def test_speak_open_syllable():
    assert speak('ba') == 'a bờ a /ba/; /ba/'
    assert speak('hỏa') == 'o a hờ oa hoa hỏi /hỏa/; /hỏa/'


def test_speak_letter_or_consonant():
    assert speak('b') == '/bờ/'
    assert speak('NGH') == '/ngờ/'
    assert speak('ă') == '/á/'


def test_speak_blank():
    assert speak('') == ''
    assert speak('   ') == ''

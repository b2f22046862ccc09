"""
Tests for reading numbers in Vietnamese.
"""
import sys
from decimal import Decimal
from pathlib import Path

import pytest

# Add project root to path
project_root = Path(__file__).parent
sys.path.insert(0, str(project_root))

from vntext.text.numbers import MAX_AMOUNT, NUMBER_WORDS, read_hundreds, number_to_text


def test_number_words():
    assert len(NUMBER_WORDS) == 100
    assert NUMBER_WORDS[0] == 'không'
    assert NUMBER_WORDS[10] == 'mười'
    assert NUMBER_WORDS[11] == 'mười một'
    assert NUMBER_WORDS[15] == 'mười lăm'
    assert NUMBER_WORDS[20] == 'hai mươi'
    assert NUMBER_WORDS[21] == 'hai mươi mốt'
    assert NUMBER_WORDS[24] == 'hai mươi bốn'
    assert NUMBER_WORDS[44] == 'bốn mươi tư'
    assert NUMBER_WORDS[55] == 'năm mươi lăm'


def test_read_hundreds():
    assert read_hundreds(100) == 'một trăm'
    assert read_hundreds(105) == 'một trăm lẻ năm'
    assert read_hundreds(115) == 'một trăm mười lăm'
    assert read_hundreds(999) == 'chín trăm chín mươi chín'
    assert read_hundreds(45) == 'bốn mươi lăm'
    with pytest.raises(ValueError):
        read_hundreds(1000)


def test_number_to_text_documented_example():
    assert number_to_text(1452369) == 'một triệu bốn trăm năm mươi hai nghìn ba trăm sáu mươi chín'


def test_number_to_text_small():
    assert number_to_text(0) == 'không'
    assert number_to_text(7) == 'bảy'
    assert number_to_text(21) == 'hai mươi mốt'


def test_number_to_text_skips_empty_groups():
    assert number_to_text(1000) == 'một nghìn'
    assert number_to_text(1000000) == 'một triệu'
    assert number_to_text(1045000) == 'một triệu bốn mươi lăm nghìn'
    assert number_to_text(2000000005) == 'hai tỉ năm'
    assert number_to_text(10 ** 9) == 'một tỉ'


def test_number_to_text_input_types():
    assert number_to_text('1452369') == number_to_text(1452369)
    assert number_to_text(Decimal('105')) == 'một trăm lẻ năm'
    assert number_to_text(-105) == 'một trăm lẻ năm'


def test_number_to_text_rounding():
    assert number_to_text(2.5) == 'ba'
    assert number_to_text(2.4) == 'hai'
    assert number_to_text(999.5) == 'một nghìn'


def test_number_to_text_out_of_range():
    assert number_to_text(MAX_AMOUNT - 1) == (
        'chín trăm chín mươi chín tỉ chín trăm chín mươi chín triệu '
        'chín trăm chín mươi chín nghìn chín trăm chín mươi chín'
    )
    assert number_to_text(MAX_AMOUNT) == ''
    assert number_to_text('999999999999.5') == ''
    assert number_to_text(float('nan')) == ''
    assert number_to_text(float('inf')) == ''
    assert number_to_text('abc') == ''

"""
Tests for accent removal, tone detection, character checks and name formatting.
"""
import sys
from pathlib import Path

import pytest

# Add project root to path
project_root = Path(__file__).parent
sys.path.insert(0, str(project_root))

from vntext.text.accents import ACCENT_LETTERS, remove_accent, remove_tone, get_tone, check_char
from vntext.text.names import format_name, split_name


def test_accent_letter_table():
    assert len(ACCENT_LETTERS) == 67
    assert ACCENT_LETTERS['ệ'] == ('e', 'ê')
    assert ACCENT_LETTERS['đ'] == ('d', 'đ')
    assert ACCENT_LETTERS['ư'] == ('u', 'ư')


def test_remove_accent():
    assert remove_accent('Việt Nam') == 'Viet Nam'
    assert remove_accent('Việt Nam', 'remove') == 'Viet Nam'
    assert remove_accent('ĐƯỜNG ĐI') == 'DUONG DI'
    assert remove_accent('Tiếng Việt có dấu') == 'Tieng Viet co dau'


def test_remove_accent_alphabet():
    assert remove_accent('Việt Nam', 'alphabet') == 'Viêt Nam'
    assert remove_accent('Đường', 'alphabet') == 'Đương'
    assert remove_accent('ăâêôơưđ', 'alphabet') == 'ăâêôơưđ'


def test_remove_accent_ncr_decimal():
    assert remove_accent('Việt Nam', 'ncr_decimal') == 'Vi&#7879;t Nam'
    assert remove_accent('Đ', 'ncr_decimal') == '&#272;'


def test_remove_accent_passthrough():
    assert remove_accent('') == ''
    assert remove_accent('abc 123 !?') == 'abc 123 !?'
    assert remove_accent('Ñoño çß') == 'Ñoño çß'


def test_remove_accent_idempotent():
    text = 'Thi tuổi Kỷ Tỵ, người Việt Nam ở Đà Nẵng'
    once = remove_accent(text)
    assert remove_accent(once) == once
    assert remove_tone(remove_tone(text)) == remove_tone(text)


def test_remove_accent_unknown_mode_falls_back():
    assert remove_accent('Việt', 'ascii') == 'Viet'
    assert remove_accent('', 'ascii') == ''


def test_get_tone():
    assert get_tone('việt') == 5
    assert get_tone('người') == 1
    assert get_tone('hỏa') == 2
    assert get_tone('ngã') == 3
    assert get_tone('NÓI') == 4
    assert get_tone('nam') == 0
    # Two toned vowels is not a single word
    assert get_tone('àá') == 0


def test_check_char():
    assert check_char('đ') is True
    assert check_char('Đ') is True
    assert check_char('a') is True
    assert check_char('Ự') is True
    assert check_char('w') is False
    assert check_char('f') is False
    assert check_char('') is False
    assert check_char('ab') is False
    assert check_char(' ') is False
    assert check_char('1') is False


def test_format_name():
    assert format_name('ViỆt NaM') == 'Việt Nam'
    assert format_name('  nguYỄn   văn   đàn ') == 'Nguyễn Văn Đàn'
    assert format_name('') == ''
    assert format_name('ĐÀ NẴNG') == 'Đà Nẵng'


def test_split_name():
    assert split_name('Nguyễn Văn Đàn') == ('Đàn', 'Nguyễn Văn')
    assert split_name('Đàn') == ('Đàn', '')

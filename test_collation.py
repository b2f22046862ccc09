"""
Tests for Vietnamese sorting of words, records and people names.
"""
import sys
from pathlib import Path

import pytest

# Add project root to path
project_root = Path(__file__).parent
sys.path.insert(0, str(project_root))

from vntext.text.collation import SORT_INDEX, collation_key, sort_word
from vntext.text.names import sort_people_name


def test_sort_index():
    assert SORT_INDEX['a'] == 'aa'
    assert SORT_INDEX['à'] == 'ab'
    assert SORT_INDEX['Â'] == 'AM'
    assert SORT_INDEX['đ'] == 'db'
    assert collation_key('Đà') == 'DBab'
    assert collation_key('xyz 123') == 'xyaz 123'


def test_sort_word_vowel_family():
    assert sort_word(['Ă', 'A', 'Â', 'À', 'Á']) == ['A', 'À', 'Á', 'Ă', 'Â']


def test_sort_word_letters_outside_code_point_order():
    assert sort_word(['e', 'đ', 'd']) == ['d', 'đ', 'e']
    assert sort_word(['ư', 'v', 'u']) == ['u', 'ư', 'v']
    assert sort_word(['b', '1']) == ['1', 'b']


def test_sort_word_provinces():
    provinces = ['Đà Nẵng', 'Cần Thơ', 'Cà Mau', 'An Giang', 'Bạc Liêu']
    assert sort_word(provinces) == ['An Giang', 'Bạc Liêu', 'Cà Mau', 'Cần Thơ', 'Đà Nẵng']
    # Input is left untouched
    assert provinces[0] == 'Đà Nẵng'


def test_sort_word_empty():
    assert sort_word([]) == []


def test_sort_word_records():
    rows = [
        {'name': 'Cần Thơ', 'valid_date': 2},
        {'name': 'Cà Mau', 'valid_date': 3},
        {'name': 'Cà Mau', 'valid_date': 1},
    ]
    result = sort_word(rows, ['name', 'valid_date'])
    assert [(row['name'], row['valid_date']) for row in result] == [
        ('Cà Mau', 1), ('Cà Mau', 3), ('Cần Thơ', 2),
    ]


def test_sort_word_records_stable():
    rows = [
        {'name': 'Huế', 'id': 1},
        {'name': 'Hà Nội', 'id': 2},
        {'name': 'Huế', 'id': 3},
        {'name': 'Hà Nội', 'id': 4},
    ]
    assert [row['id'] for row in sort_word(rows, ['name'])] == [2, 4, 1, 3]
    # Records without keys keep their order
    assert [row['id'] for row in sort_word(rows)] == [1, 2, 3, 4]


def test_sort_word_records_with_missing_values():
    rows = [
        {'name': 'An', 'nick': 'Bé'},
        {'name': 'An', 'nick': None},
        {'name': 'An', 'nick': 'Anh'},
    ]
    assert [row['nick'] for row in sort_word(rows, ['name', 'nick'])] == [None, 'Anh', 'Bé']


def test_sort_word_records_with_mixed_types():
    rows = [{'k': 2}, {'k': 'b'}, {'k': 1}, {'k': 'a'}]
    assert [row['k'] for row in sort_word(rows, ['k'])] == ['a', 'b', 1, 2]


def test_sort_people_name():
    names = [
        'Nguyễn Văn Đảnh',
        'nguyễn văn đàng',
        'Nguyễn Văn Đàn',
        'Nguyễn   Văn Đang',
        'Nguyễn Anh Đang',
    ]
    assert sort_people_name(names) == [
        'Nguyễn Anh Đang',
        'Nguyễn Văn Đang',
        'Nguyễn Văn Đàn',
        'Nguyễn Văn Đàng',
        'Nguyễn Văn Đảnh',
    ]


def test_sort_people_name_given_name_first():
    assert sort_people_name(['Trần Bình', 'Lê An']) == ['Lê An', 'Trần Bình']
    assert sort_people_name([]) == []


def test_sort_people_name_records():
    rows = [
        {'name': 'trần văn an', 'birth': 1990},
        {'name': 'Lê Bình', 'birth': 1985},
        {'name': 'Nguyễn An', 'birth': 1980},
        {'name': 'Nguyễn An', 'birth': 1970},
    ]
    result = sort_people_name(rows, ['name', 'birth'])
    assert [(row['name'], row['birth']) for row in result] == [
        ('Nguyễn An', 1970),
        ('Nguyễn An', 1980),
        ('Trần Văn An', 1990),
        ('Lê Bình', 1985),
    ]
    # Records are copied, not formatted in place
    assert rows[0]['name'] == 'trần văn an'


def test_sort_people_name_records_with_missing_values():
    rows = [
        {'name': 'Lê An', 'city': 'Huế'},
        {'name': 'Trần An', 'city': None},
        {'name': 'Lê An', 'city': None},
    ]
    result = sort_people_name(rows, ['name', 'city'])
    assert [(row['name'], row['city']) for row in result] == [
        ('Lê An', None), ('Lê An', 'Huế'), ('Trần An', None),
    ]


def test_sort_people_name_records_without_keys():
    with pytest.raises(ValueError):
        sort_people_name([{'name': 'Lê An'}])

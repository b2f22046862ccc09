"""
Tests for the accent placement corrector, the i/y corrector and the normalizer.
"""
import sys
import unicodedata
from pathlib import Path

import pytest

# Add project root to path
project_root = Path(__file__).parent
sys.path.insert(0, str(project_root))

from configs.config import Config
from vntext.data.accent_placements import ACCENT_PLACEMENTS
from vntext.correction import (
    AccentPlacementCorrector,
    Boundedness,
    IYCorrector,
    IYRule,
    Normalizer,
    ReplacementRule,
    fix_accent,
    fix_i_or_y,
)
from vntext.correction.i_or_y import compile_schedule


def test_replacement_rule_variants():
    rule = ReplacementRule('oá', 'óa')
    assert rule.variants() == (('oá', 'óa'), ('Oá', 'Óa'), ('OÁ', 'ÓA'))
    assert rule.apply('hoá Hoá HOÁ') == 'hóa Hóa HÓA'


def test_fix_accent_documented_example():
    assert fix_accent('Vịêt Nam') == 'Việt Nam'


def test_fix_accent_reform_placements():
    assert fix_accent('hoá học') == 'hóa học'
    assert fix_accent('Hoá') == 'Hóa'
    assert fix_accent('HOÁ') == 'HÓA'
    assert fix_accent('thuý') == 'thúy'


def test_fix_accent_keeps_correct_text():
    for text in ('Việt Nam', 'hoàn thành', 'khoảng', 'người', ''):
        assert fix_accent(text) == text


def test_accent_corrector_rules():
    corrector = AccentPlacementCorrector()
    assert len(corrector.rules) == len(ACCENT_PLACEMENTS) == 410
    assert corrector('Vịêt') == 'Việt'
    assert corrector.correct_all(['hoá', 'thuý']) == ['hóa', 'thúy']
    assert repr(corrector) == "AccentPlacementCorrector(name='accent_placement')"

    custom = AccentPlacementCorrector([('ab', 'ba')])
    assert custom.correct('ab Ab AB') == 'ba Ba BA'


def test_fix_i_or_y_documented_example():
    assert fix_i_or_y('Thi tuổi Kỉ Tị') == 'Thi tuổi Kỷ Tỵ'


def test_fix_i_or_y_major_and_fix_tiers():
    assert fix_i_or_y('Tý') == 'Tí'
    # The fix tier restores the year name after the major tier
    assert fix_i_or_y('tuổi Tý') == 'tuổi Tý'
    assert fix_i_or_y('hi hi') == 'hi hi'


def test_fix_i_or_y_word_boundaries():
    assert fix_i_or_y('kỉ niệm') == 'kỷ niệm'
    # Bounded rules do not apply inside longer words
    assert fix_i_or_y('lỉnh kỉnh') == 'lỉnh kỉnh'
    assert fix_i_or_y('tinh thần') == 'tinh thần'
    assert fix_i_or_y('quí giá') == 'quý giá'
    assert fix_i_or_y('') == ''


def test_iy_rule_boundedness():
    bounded = IYRule('hì', 'hỳ', Boundedness.WORD_BOUNDARY)
    literal = IYRule('hì', 'hỳ', Boundedness.LITERAL)
    assert bounded.apply('hì hình') == 'hỳ hình'
    assert literal.apply('hì hình') == 'hỳ hỳnh'
    assert bounded.apply('hì,hì') == 'hỳ,hỳ'
    assert bounded.apply('Hì HÌ') == 'Hỳ HỲ'


def test_iy_schedule_order():
    corrector = IYCorrector()
    assert corrector.order == [
        ('i', 'only'), ('i', 'major'), ('i', 'fix'),
        ('y', 'only'), ('y', 'major'), ('y', 'fix'),
    ]


def test_iy_tiers_run_in_declared_order():
    empty = {'only': (), 'major': (), 'fix': ()}
    table = {
        'i': {'only': (('ab', 'ac', False),), 'major': (('ac', 'ad', False),), 'fix': ()},
        'y': empty,
    }
    assert IYCorrector(table).correct('ab') == 'ad'

    # Reversed tiers give a different result
    text = 'ab'
    for group in compile_schedule(table, tier_order=('major', 'only', 'fix')):
        for rule in group.rules:
            text = rule.apply(text)
    assert text == 'ac'


def test_normalizer_default_steps():
    normalizer = Normalizer()
    assert list(normalizer.steps) == ['unicode', 'fix_accent', 'fix_i_or_y']
    assert normalizer.normalize('Vịêt Nam, tuổi Kỉ Tị') == 'Việt Nam, tuổi Kỷ Tỵ'
    assert normalizer.normalize('') == ''


def test_normalizer_unicode_step():
    decomposed = unicodedata.normalize('NFD', 'Việt Nam')
    assert decomposed != 'Việt Nam'
    assert Normalizer(['unicode']).normalize(decomposed) == 'Việt Nam'


def test_normalizer_custom_steps():
    normalizer = Normalizer(['fix_accent', 'remove_accent'], remove_mode='alphabet')
    assert normalizer.normalize('Vịêt') == 'Viêt'
    assert Normalizer(['format_name']).normalize('nguYỄn văn   đàn') == 'Nguyễn Văn Đàn'
    assert Normalizer(['remove_accent']).normalize_lines(['Việt', 'Nam']) == ['Viet', 'Nam']
    assert repr(Normalizer(['unicode'])) == "Normalizer(steps=['unicode'])"


def test_normalizer_unknown_step():
    with pytest.raises(ValueError):
        Normalizer(['spell_check'])


def test_normalizer_from_config():
    config = Config()
    config.normalizer.steps = ['fix_accent', 'remove_accent']
    config.accent.remove_mode = 'ncr_decimal'
    normalizer = Normalizer.from_config(config)
    assert normalizer.normalize('Vịêt') == 'Vi&#7879;t'

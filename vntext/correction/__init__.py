"""
Text correctors
"""
from .base_corrector import BaseCorrector, ReplacementRule
from .accent_placement import AccentPlacementCorrector, fix_accent
from .i_or_y import Boundedness, IYRule, IYCorrector, fix_i_or_y
from .normalizer import Normalizer, NORMALIZER_STEPS

__all__ = [
    'BaseCorrector',
    'ReplacementRule',
    'AccentPlacementCorrector',
    'fix_accent',
    'Boundedness',
    'IYRule',
    'IYCorrector',
    'fix_i_or_y',
    'Normalizer',
    'NORMALIZER_STEPS',
]

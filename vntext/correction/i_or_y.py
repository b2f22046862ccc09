"""
I/Y corrector
"""
from dataclasses import dataclass
from enum import Enum
from typing import List, Mapping, Optional, Tuple
import functools
import re

from ..data.i_or_y import I_OR_Y
from .base_corrector import BaseCorrector, ReplacementRule

# Rules restoring "i" run before rules restoring "y"
LETTER_ORDER = ('i', 'y')
# Each tier assumes the previous ones already ran
TIER_ORDER = ('only', 'major', 'fix')


class Boundedness(str, Enum):
    LITERAL = 'literal'
    WORD_BOUNDARY = 'word_boundary'


@functools.lru_cache(maxsize=None)
def _word_pattern(word: str) -> 're.Pattern':
    return re.compile(rf'(?<!\w){re.escape(word)}(?!\w)')


@dataclass(frozen=True)
class IYRule(ReplacementRule):
    """
    A wrong -> right i/y spelling.

    Attributes:
        boundedness (Boundedness): LITERAL rules replace every occurrence.
            WORD_BOUNDARY rules only replace whole words, since the pattern
            may also occur inside a longer word ("hì" in "hình").
    """
    boundedness: Boundedness = Boundedness.LITERAL

    def apply(self, text: str) -> str:
        if self.boundedness is Boundedness.LITERAL:
            return super().apply(text)
        for wrong, right in self.variants():
            text = _word_pattern(wrong).sub(right, text)
        return text


@dataclass(frozen=True)
class RuleGroup:
    letter: str
    tier: str
    rules: Tuple[IYRule, ...]


def compile_schedule(
    table: Mapping[str, Mapping[str, tuple]],
    letter_order: Tuple[str, ...] = LETTER_ORDER,
    tier_order: Tuple[str, ...] = TIER_ORDER,
) -> List[RuleGroup]:
    """
    Build the ordered list of rule groups: every tier of "i", then every tier of "y".

    Args:
        table: letter -> tier -> (wrong, right, boundable) entries
        letter_order: Order of letters
        tier_order: Order of tiers within a letter

    Returns:
        List[RuleGroup]: Groups in application order
    """
    schedule = []
    for letter in letter_order:
        for tier in tier_order:
            rules = tuple(
                IYRule(
                    wrong,
                    right,
                    Boundedness.WORD_BOUNDARY if boundable else Boundedness.LITERAL,
                )
                for wrong, right, boundable in table[letter][tier]
            )
            schedule.append(RuleGroup(letter, tier, rules))
    return schedule


class IYCorrector(BaseCorrector):
    """
    Correct the use of "i" and "y" at the end of syllables.

    -> Thi tuổi Kỉ Tị  =>  Thi tuổi Kỷ Tỵ

    For each letter, three tiers run in order:
        only:  spellings where only one letter is correct (by -> bi, kỉ -> kỷ)
        major: spellings where one letter is the common choice (tý -> tí)
        fix:   phrases the major tier must not change (tuổi Tí -> tuổi Tý)

    Attributes:
        schedule (List[RuleGroup]): Rule groups, in application order
    """
    def __init__(self, table: Optional[Mapping[str, Mapping[str, tuple]]] = None):
        """
        Args:
            table: letter -> tier -> (wrong, right, boundable) entries.
                Defaults to the built-in table.
        """
        super().__init__('i_or_y')
        self.schedule = compile_schedule(I_OR_Y if table is None else table)

    @property
    def order(self) -> List[Tuple[str, str]]:
        """(letter, tier) pairs in application order."""
        return [(group.letter, group.tier) for group in self.schedule]

    def correct(self, text: str) -> str:
        if not text:
            return text
        for group in self.schedule:
            for rule in group.rules:
                text = rule.apply(text)
        return text


@functools.lru_cache(maxsize=None)
def default_iy_corrector() -> IYCorrector:
    return IYCorrector()


def fix_i_or_y(text: str) -> str:
    """
    Correct wrong uses of "i" and "y".

    Example:
        >>> fix_i_or_y('Thi tuổi Kỉ Tị')
        'Thi tuổi Kỷ Tỵ'
    """
    return default_iy_corrector().correct(text)

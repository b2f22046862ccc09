"""
Accent placement corrector
"""
from typing import Iterable, Optional, Tuple
import functools

from ..data.accent_placements import ACCENT_PLACEMENTS
from .base_corrector import BaseCorrector, ReplacementRule


class AccentPlacementCorrector(BaseCorrector):
    """
    Rewrite misplaced tone marks to the classic placement.

    -> "Vịêt" -> "Việt", "hoá" -> "hóa", "thuý" -> "thúy"

    Rules are applied by plain substring replacement, in order, on the whole
    text: every rule key is a sequence that cannot occur in a correct word.

    Attributes:
        rules (Tuple[ReplacementRule, ...]): Rules, in application order
    """
    def __init__(self, placements: Optional[Iterable[Tuple[str, str]]] = None):
        """
        Args:
            placements: (wrong, right) lowercase pairs. Defaults to the built-in table.
        """
        super().__init__('accent_placement')
        if placements is None:
            placements = ACCENT_PLACEMENTS
        self.rules = tuple(ReplacementRule(wrong, right) for wrong, right in placements)

    def correct(self, text: str) -> str:
        if not text:
            return text
        for rule in self.rules:
            text = rule.apply(text)
        return text


@functools.lru_cache(maxsize=None)
def default_accent_corrector() -> AccentPlacementCorrector:
    return AccentPlacementCorrector()


def fix_accent(text: str) -> str:
    """
    Correct wrong accent placements.

    Example:
        >>> fix_accent('Vịêt Nam')
        'Việt Nam'
    """
    return default_accent_corrector().correct(text)

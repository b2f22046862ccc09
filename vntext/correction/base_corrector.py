"""
Base class for text correctors
"""
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Iterable, Tuple


def upper_first(text: str) -> str:
    """Upper the first character only, keep the rest as is."""
    return text[:1].upper() + text[1:]


@dataclass(frozen=True)
class ReplacementRule:
    """
    A wrong -> right pair, stored in lowercase.

    Attributes:
        pattern (str): Wrong spelling
        replacement (str): Right spelling
    """
    pattern: str
    replacement: str

    def variants(self) -> Tuple[Tuple[str, str], ...]:
        """(wrong, right) pairs for lowercase, upper-first and UPPERCASE text, in that order."""
        return (
            (self.pattern, self.replacement),
            (upper_first(self.pattern), upper_first(self.replacement)),
            (self.pattern.upper(), self.replacement.upper()),
        )

    def apply(self, text: str) -> str:
        for wrong, right in self.variants():
            text = text.replace(wrong, right)
        return text


class BaseCorrector(ABC):
    def __init__(self, name: str):
        """
        Initialize the base corrector.

        Args:
            name (str): Name of the corrector
        """
        self.name = name

    @abstractmethod
    def correct(self, text: str) -> str:
        """
        Correct a text.

        Args:
            text (str): Input text

        Returns:
            str: Corrected text
        """
        pass

    def correct_all(self, texts: Iterable[str]) -> list:
        """Correct several texts, in order."""
        return [self.correct(text) for text in texts]

    def __call__(self, text: str) -> str:
        """Callable interface for correcting a text."""
        return self.correct(text)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(name='{self.name}')"

"""
Main normalization class
"""
from typing import Any, Callable, Dict, Iterable, List, Optional
import logging
import unicodedata

from ..text.accents import remove_accent
from ..text.names import format_name
from .accent_placement import AccentPlacementCorrector
from .i_or_y import IYCorrector

# Steps in the order they run by default
NORMALIZER_STEPS = ('unicode', 'fix_accent', 'fix_i_or_y', 'remove_accent', 'format_name')
DEFAULT_STEPS = ('unicode', 'fix_accent', 'fix_i_or_y')


class Normalizer:
    """
    Main normalization class for Vietnamese text.

    -> Runs configured steps over a text, in the given order.

    Attributes:
        steps (Dict[str, Callable[[str], str]]): Step name -> callable
    """
    def __init__(
        self,
        steps: Optional[List[str]] = None,
        logger: Optional[logging.Logger] = None,
        **step_kwargs
    ):
        """
        Initialize normalizer with specified steps.

        Args:
            steps (List[str], optional): Step names, in order
                Options: 'unicode', 'fix_accent', 'fix_i_or_y', 'remove_accent', 'format_name'
                If None, uses 'unicode', 'fix_accent', 'fix_i_or_y'
            logger (logging.Logger, optional): Logger for step tracing
            **step_kwargs: Additional keyword arguments for the steps
                - unicode_form: Unicode normalization form (default: 'NFC')
                - remove_mode: Mode of 'remove_accent' (default: 'remove')
        """
        if steps is None:
            steps = list(DEFAULT_STEPS)

        self.logger = logger or logging.getLogger(__name__)
        self.steps = {}
        self._initialize_steps(steps, step_kwargs)

    def _initialize_steps(self, steps: List[str], step_kwargs: Dict[str, Any]):
        """
        Initialize step callables.

        Args:
            steps (List[str]): Step names
            step_kwargs (Dict[str, Any]): Additional keyword arguments for the steps

        Raises:
            ValueError: If a step name is unknown
        """
        for step_name in steps:
            if step_name == 'unicode':
                form = step_kwargs.get('unicode_form', 'NFC')
                self.steps[step_name] = lambda text, form=form: unicodedata.normalize(form, text)

            elif step_name == 'fix_accent':
                self.steps[step_name] = AccentPlacementCorrector()

            elif step_name == 'fix_i_or_y':
                self.steps[step_name] = IYCorrector()

            elif step_name == 'remove_accent':
                mode = step_kwargs.get('remove_mode', 'remove')
                self.steps[step_name] = lambda text, mode=mode: remove_accent(text, mode)

            elif step_name == 'format_name':
                self.steps[step_name] = format_name

            else:
                raise ValueError(f"Unknown step: {step_name}. "
                                 f"Supported: {', '.join(NORMALIZER_STEPS)}")

    @classmethod
    def from_config(cls, config: Any, logger: Optional[logging.Logger] = None) -> 'Normalizer':
        """
        Create a normalizer from a configuration object.

        Args:
            config: Object with `normalizer.steps`, `normalizer.unicode_form`
                and `accent.remove_mode` attributes
            logger (logging.Logger, optional): Logger for step tracing
        """
        return cls(
            steps=list(config.normalizer.steps),
            logger=logger,
            unicode_form=config.normalizer.unicode_form,
            remove_mode=config.accent.remove_mode,
        )

    def normalize(self, text: str) -> str:
        """
        Run every step over a text.

        Args:
            text (str): Input text

        Returns:
            str: Normalized text
        """
        if not text:
            return text

        for step_name, step in self.steps.items():
            result = step(text)
            if result != text:
                self.logger.debug(f"{step_name}: {text!r} -> {result!r}")
            text = result

        return text

    def normalize_lines(self, lines: Iterable[str]) -> List[str]:
        """
        Normalize several lines, keeping their order.

        Args:
            lines (Iterable[str]): Input lines, without line breaks

        Returns:
            List[str]: Normalized lines
        """
        results = [self.normalize(line) for line in lines]
        self.logger.info(f"Normalized {len(results)} lines with steps: {', '.join(self.steps)}")
        return results

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(steps={list(self.steps)})"

# vntext/text/numbers.py
"""
Convert a number into Vietnamese words.

Digits are read by groups of three, each group followed by its scale word:

    1452369 -> một triệu | bốn trăm năm mươi hai nghìn | ba trăm sáu mươi chín
"""

from decimal import Decimal, InvalidOperation, ROUND_HALF_UP
from typing import Union

from ..data.constants import (
    DIGIT_WORDS,
    TEN_WORD,
    TENS_WORD,
    HUNDRED_WORD,
    ODD_WORD,
    SCALE_WORDS,
    ONE_AFTER_TENS,
    FIVE_AFTER_TENS,
    FOUR_AFTER_TENS,
)

# Amounts are read up to hundreds of billions
MAX_AMOUNT = 10 ** 12


def _read_two_digits(number: int) -> str:
    if number < 10:
        return DIGIT_WORDS[number]

    tens, units = divmod(number, 10)
    head = TEN_WORD if tens == 1 else f'{DIGIT_WORDS[tens]} {TENS_WORD}'
    if units == 0:
        return head
    if units == 1 and tens > 1:
        return f'{head} {ONE_AFTER_TENS}'
    if units == 5:
        return f'{head} {FIVE_AFTER_TENS}'
    if number == 44:
        return f'{head} {FOUR_AFTER_TENS}'
    return f'{head} {DIGIT_WORDS[units]}'


# 0..99
NUMBER_WORDS = tuple(_read_two_digits(number) for number in range(100))


def read_hundreds(number: int) -> str:
    """
    Read a group of three digits (0..999).

    A group without hundreds is read from its tens: 45 -> "bốn mươi lăm".
    """
    if not 0 <= number <= 999:
        raise ValueError(f"Invalid group: {number}. Must be between 0 and 999")

    hundreds, rest = divmod(number, 100)
    if hundreds == 0:
        return NUMBER_WORDS[rest]

    head = f'{DIGIT_WORDS[hundreds]} {HUNDRED_WORD}'
    if rest == 0:
        return head
    if rest < 10:
        return f'{head} {ODD_WORD} {DIGIT_WORDS[rest]}'
    return f'{head} {NUMBER_WORDS[rest]}'


def number_to_text(amount: Union[int, float, Decimal, str]) -> str:
    """
    Convert a number into Vietnamese text.

    The magnitude is rounded half up to an integer. Groups of three zeros are
    skipped: 1000000 -> "một triệu".

    Args:
        amount: Number to read

    Returns:
        str: Vietnamese text, or '' if the amount is not a finite number or
            its magnitude is 10^12 or more

    Example:
        >>> number_to_text(1452369)
        'một triệu bốn trăm năm mươi hai nghìn ba trăm sáu mươi chín'
    """
    try:
        value = Decimal(str(amount))
    except InvalidOperation:
        return ''
    if not value.is_finite():
        return ''

    number = int(abs(value).quantize(Decimal(1), rounding=ROUND_HALF_UP))
    if number >= MAX_AMOUNT:
        return ''
    if number < 1000:
        return read_hundreds(number)

    groups = []
    while number:
        number, group = divmod(number, 1000)
        groups.append(group)
    groups.reverse()

    scales = (*SCALE_WORDS, '')[-len(groups):]
    words = []
    for group, scale in zip(groups, scales):
        if group == 0:
            continue
        text = read_hundreds(group)
        words.append(f'{text} {scale}' if scale else text)

    return ' '.join(words)


__all__ = ['MAX_AMOUNT', 'NUMBER_WORDS', 'read_hundreds', 'number_to_text']

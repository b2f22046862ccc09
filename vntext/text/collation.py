# vntext/text/collation.py
"""
Vietnamese alphabetical order.

Code point order puts "ă", "đ" and every toned vowel after "z". Each letter
of a vowel family (or "d"/"đ") is remapped to its base letter plus its rank in
the family, so that plain ordinal comparison gives:

    (1) Numbers first, letters last.
    (2) UPPER first, lower last, as in code point order.
    (3) Tone order: a à ả ã á ạ, then ă ..., then â ...
"""

from string import ascii_lowercase
from types import MappingProxyType
from typing import Any, Dict, Iterable, List, Mapping, Optional, Sequence, Tuple, Union

from ..data.constants import SORT_FAMILIES


def _build_sort_index() -> Dict[str, str]:
    index = {}
    for base, family in SORT_FAMILIES.items():
        for rank, char in enumerate(family):
            code = base + ascii_lowercase[rank]
            index[char] = code
            index[char.upper()] = code.upper()
    return index


SORT_INDEX = MappingProxyType(_build_sort_index())

_SORT_TRANSLATION = str.maketrans(dict(SORT_INDEX))


def collation_key(text: str) -> str:
    """Comparison key of a text: every character is remapped independently."""
    return text.translate(_SORT_TRANSLATION)


def _field_key(value: Any) -> Tuple[int, Any]:
    # None reads as an empty string; strings sort before other values
    if value is None:
        return 0, ''
    if isinstance(value, str):
        return 0, collation_key(value)
    return 1, value


def record_key(record: Mapping[str, Any], keys: Sequence[str]) -> tuple:
    """Comparison key of a record over several fields. The first non-equal field decides."""
    return tuple(_field_key(record[key]) for key in keys)


def is_records(items: Sequence[Any]) -> bool:
    return bool(items) and isinstance(items[0], Mapping)


def sort_word(
    items: Iterable[Union[str, Mapping[str, Any]]],
    keys: Optional[Sequence[str]] = None,
) -> List[Union[str, Mapping[str, Any]]]:
    """
    Sort words, or records by one or more fields, in Vietnamese order.

    The sort is stable. String fields are compared through `collation_key`,
    other fields (numbers, dates) natively and after strings. None reads as ''.

    Args:
        items: Strings, or mappings (e.g. dicts) holding the fields in `keys`
        keys: Fields to sort records by, in order. Ignored for strings.
            Records without keys keep their order.

    Returns:
        List: A new sorted list. The input is not modified.

    Example:
        >>> sort_word(['Cần Thơ', 'Cà Mau'])
        ['Cà Mau', 'Cần Thơ']
        >>> sort_word(rows, ['name', 'valid_date'])
    """
    items = list(items)
    if not is_records(items):
        return sorted(items, key=collation_key)
    if not keys:
        return items
    return sorted(items, key=lambda record: record_key(record, keys))


__all__ = ['SORT_INDEX', 'collation_key', 'record_key', 'is_records', 'sort_word']

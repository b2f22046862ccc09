# vntext/text/names.py
"""
People names: formatting and sorting.
"""

from typing import Any, Dict, Iterable, List, Mapping, Optional, Sequence, Tuple, Union

from .collation import collation_key, record_key, is_records


def format_name(text: str) -> str:
    """
    Upper the first character of each word, lower the rest, and collapse whitespace.
    Used for people names, administrative unit names...

    Example:
        >>> format_name('  ViỆt   NaM ')
        'Việt Nam'
    """
    if not text:
        return ''
    return ' '.join(word[:1].upper() + word[1:] for word in text.lower().split())


def split_name(name: str) -> Tuple[str, str]:
    """
    Split a full name into (given name, surname + middle name).

    The given name is the last word: "Nguyễn Văn Đàn" -> ("Đàn", "Nguyễn Văn").
    """
    surname, _, given = name.rpartition(' ')
    return given, surname


def _name_key(name: str) -> Tuple[str, str]:
    given, surname = split_name(name)
    return collation_key(given), collation_key(surname)


def sort_people_name(
    items: Iterable[Union[str, Mapping[str, Any]]],
    keys: Optional[Sequence[str]] = None,
) -> List[Union[str, Dict[str, Any]]]:
    """
    Sort Vietnamese people names: by given name, then by surname + middle name.

    Names are passed through `format_name` first, and come back formatted.
    If the given name and the surname are in two different fields, use
    `sort_word(items, ['given_name', 'surname'])` instead.

    Args:
        items: Full names, or records holding a full name
        keys: For records only. The first key is the field holding the name,
            the others are extra fields to sort by, in order.

    Returns:
        List: A new sorted list. Records are shallow copies with the name formatted.

    Raises:
        ValueError: If records are given without keys

    Example:
        >>> sort_people_name(['Nguyễn Văn Đảnh', 'nguyễn anh đang'])
        ['Nguyễn Anh Đang', 'Nguyễn Văn Đảnh']
    """
    items = list(items)
    if not items:
        return []

    if not is_records(items):
        return sorted((format_name(name) for name in items), key=_name_key)

    if not keys:
        raise ValueError("keys must start with the field holding the people name")

    name_key, extra_keys = keys[0], tuple(keys[1:])
    rows = []
    for record in items:
        row = dict(record)
        row[name_key] = format_name(row[name_key])
        rows.append(row)

    return sorted(rows, key=lambda row: _name_key(row[name_key]) + record_key(row, extra_keys))


__all__ = ['format_name', 'split_name', 'sort_people_name']

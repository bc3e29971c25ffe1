"""
Key grammar for query string filters.

A filter key has the form ``[prefix-]base[-postfix]``:

- ``prefix`` is optional and drawn from ``PREFIXES``
- ``postfix`` is optional and drawn from ``POSTFIXES``
- ``base`` is what remains

Example:
    >>> decompose_key("age-min")
    KeyParts(prefix=None, base='age', postfix='min')
    >>> decompose_key("not-title")
    KeyParts(prefix='not', base='title', postfix=None)
    >>> parse_segment("status-not=null").operator
    <Comparator.NOT_NULL: 'NOT NULL'>
"""

from __future__ import annotations

from typing import List, NamedTuple, Optional, Tuple

from ..core.condition import Comparator, FilterCondition
from ..core.exceptions import MalformedSegmentError


SEGMENT_SEPARATOR = "&"
PAIR_SEPARATOR = "="
TOKEN_SEPARATOR = "-"

# Recognized prefixes. A prefix is stripped from the key but does not change
# the comparator.
PREFIXES: Tuple[str, ...] = ("not",)

# Recognized postfixes in match priority order.
POSTFIXES: Tuple[Tuple[str, Comparator], ...] = (
    ("st", Comparator.LT),
    ("gt", Comparator.GT),
    ("min", Comparator.GTE),
    ("max", Comparator.LTE),
    ("lk", Comparator.LIKE),
    ("not-lk", Comparator.NOT_LIKE),
    ("in", Comparator.IN),
    ("not-in", Comparator.NOT_IN),
    ("not", Comparator.NE),
)

POSTFIX_COMPARATORS = dict(POSTFIXES)

NULL_LITERAL = "null"

# Only ASCII whitespace and NUL around a null literal are ignored.
NULL_TRIM_CHARS = " \t\n\r\0\x0b"


class KeyParts(NamedTuple):
    """A filter key split into its grammar parts."""
    prefix: Optional[str]
    base: str
    postfix: Optional[str]


def _match_prefix(key: str) -> Tuple[Optional[str], str]:
    for prefix in PREFIXES:
        marker = prefix + TOKEN_SEPARATOR
        if key.startswith(marker):
            return prefix, key[len(marker):]
    return None, key


def _match_postfix(rest: str) -> Tuple[str, Optional[str]]:
    # The base ends at the first position where "-<postfix>" matches; any text
    # after the matched postfix is dropped.
    for pos in range(len(rest)):
        if rest[pos] != TOKEN_SEPARATOR:
            continue
        for postfix, _ in POSTFIXES:
            if rest.startswith(postfix, pos + 1):
                return rest[:pos], postfix
    return rest, None


def decompose_key(key: str) -> KeyParts:
    """
    Split a filter key into prefix, base and postfix.

    The prefix is matched first, so ``not-name`` is the prefix ``not`` applied
    to ``name`` while ``name-not`` is ``name`` with the postfix ``not``.

    Args:
        key: Key text before the '=' of a segment

    Returns:
        KeyParts with ``None`` for absent prefix/postfix
    """
    prefix, rest = _match_prefix(key)
    base, postfix = _match_postfix(rest)
    return KeyParts(prefix, base, postfix)


def is_null_literal(value: str) -> bool:
    """Whether a raw value is the literal ``null`` (trimmed, any case)."""
    return value.strip(NULL_TRIM_CHARS).lower() == NULL_LITERAL


def resolve_comparator(postfix: Optional[str], value: str) -> Comparator:
    """
    Resolve the comparator for a key postfix and its value.

    A ``null`` value always wins over the postfix: without a postfix it yields
    ``NULL``, with any postfix it yields ``NOT NULL``.
    """
    if postfix is None:
        if is_null_literal(value):
            return Comparator.NULL
        return Comparator.EQ

    if is_null_literal(value):
        return Comparator.NOT_NULL
    return POSTFIX_COMPARATORS[postfix]


def split_query_string(query_string: Optional[str]) -> List[str]:
    """Split a query string at '&', dropping empty segments."""
    if not query_string:
        return []
    return [s for s in query_string.split(SEGMENT_SEPARATOR) if s]


def split_segment(segment: str) -> Tuple[str, str]:
    """
    Split a ``key=value`` segment.

    Raises:
        MalformedSegmentError: If the segment has zero or several '='
    """
    parts = segment.split(PAIR_SEPARATOR)
    if len(parts) != 2:
        raise MalformedSegmentError(segment)
    return parts[0], parts[1]


def parse_segment(segment: str) -> FilterCondition:
    """
    Parse one ``key=value`` segment into a FilterCondition.

    Raises:
        MalformedSegmentError: If the segment has zero or several '='
    """
    raw_key, value = split_segment(segment)
    parts = decompose_key(raw_key)
    return FilterCondition(
        key=parts.base,
        operator=resolve_comparator(parts.postfix, value),
        value=value,
        raw_key=raw_key,
    )

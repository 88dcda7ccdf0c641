"""
# CSSJanus: utilities.py

Licensed under "MIT No Attribution" (MIT-0), see LICENSE.

Common utility functions.
"""

import decimal
import re
from typing import Callable, Optional

from cssjanus.constants import PLACEHOLDER_DELIMITER


def parse_leading_number(string: str) -> Optional[float]:
    """
    Parse the number at the start of a string, ignoring whatever follows it (e.g. a unit).

    Returns None if the string does not begin with a number.
    """
    match = re.match(
        pattern=r'''
            [\s]*
            [+-]?
            (?: [0-9]+ (?: [.] [0-9]* )? | [.] [0-9]+ )
            (?: [eE] [+-]? [0-9]+ )?
        ''',
        string=string,
        flags=re.ASCII | re.VERBOSE,
    )

    if match is None:
        return None

    return float(match.group())


def flip_sign(value: str) -> str:
    """
    Flip the sign of a CSS value, possibly with a unit.

    Zeroes are left alone, as are keywords (such as `auto`) which carry no sign.
    Placeholders (such as those of protected `calc()` expressions) are negated with a leading minus,
    which is resolved when the placeholder is restored.
    """
    number = parse_leading_number(value)
    if number is not None and number == 0:
        return value

    if value.startswith('-'):
        return value[1:]

    if value.startswith('+'):
        return '-' + value[1:]

    if number is None and not value.startswith(PLACEHOLDER_DELIMITER):
        return value

    return '-' + value


def preserve_case(replacement: str, original: str) -> str:
    """
    Give a replacement keyword the letter case of the original keyword.

    An all-uppercase original (e.g. `LEFT`) gives an all-uppercase replacement,
    and a capitalised original (e.g. `Left`) gives a capitalised replacement.
    Any other original leaves the replacement as is.
    """
    if original.isupper():
        return replacement.upper()

    if original[:1].isupper() and original == original.capitalize():
        return replacement[:1].upper() + replacement[1:]

    return replacement


def apply_sign(value: str, sign: int) -> str:
    if sign < 0:
        return flip_sign(value)

    return value


def flip_background_position_value(value: str) -> str:
    """
    Invert a percentage position, i.e. `«v»%` becomes `«100 - v»%`.

    The number of decimal places of the input is preserved.
    Values that are not percentages are returned unchanged.
    """
    if not value.endswith('%'):
        return value

    try:
        number = decimal.Decimal(value[:-1])
    except decimal.InvalidOperation:
        return value

    return format(decimal.Decimal(100) - number, 'f') + '%'


def format_number(number: float) -> str:
    """
    Format a number with at most 6 decimal places, dropping trailing zeroes.
    """
    string = f'{number:.6f}'.rstrip('0').rstrip('.')

    if string in ('', '-0'):
        return '0'

    return string


def rewrite_outside_parentheses(string: str, rewrite_function: Callable[[str], str]) -> str:
    """
    Apply a rewrite function to those segments of a string which lie outside of any parentheses.

    Parenthesised groups (e.g. `url(...)`, `rgba(...)`) are passed through untouched.
    An unbalanced closing parenthesis is treated as ordinary text;
    an unclosed opening parenthesis protects the rest of the string.
    """
    pieces = []
    depth = 0
    segment_start = 0

    for index, character in enumerate(string):
        if character == '(':
            if depth == 0:
                pieces.append(rewrite_function(string[segment_start:index]))
                segment_start = index
            depth += 1
        elif character == ')' and depth > 0:
            depth -= 1
            if depth == 0:
                pieces.append(string[segment_start:index + 1])
                segment_start = index + 1

    if depth == 0:
        pieces.append(rewrite_function(string[segment_start:]))
    else:
        pieces.append(string[segment_start:])

    return ''.join(pieces)

"""
# CSSJanus: idioms.py

Licensed under "MIT No Attribution" (MIT-0), see LICENSE.

Common idioms.

The building blocks below are safe for use in patterns compiled with `re.VERBOSE`:
they contain no literal whitespace outside of character classes, and no unescaped `#`.
Patterns are intended to be compiled with `re.IGNORECASE`.
"""

import re
from typing import NamedTuple, Optional, Sequence


NON_ASCII_REGEX = r'[^ -~]'
UNICODE_ESCAPE_REGEX = r'(?:\\[0-9a-f]{1,6}(?:\r\n|\s)?)'
ESCAPE_REGEX = rf'(?:{UNICODE_ESCAPE_REGEX}|\\[^\r\n\f0-9a-f])'
NAME_START_REGEX = rf'(?:[_a-z]|{NON_ASCII_REGEX}|{ESCAPE_REGEX})'
NAME_CHARACTER_REGEX = rf'(?:[_a-z0-9-]|{NON_ASCII_REGEX}|{ESCAPE_REGEX})'
IDENTIFIER_REGEX = rf'-?{NAME_START_REGEX}{NAME_CHARACTER_REGEX}*'

NUMBER_REGEX = r'(?:[0-9]*\.[0-9]+|[0-9]+)'
UNIT_REGEX = r'(?:em|ex|px|cm|mm|in|pt|pc|deg|rad|grad|ms|s|hz|khz|%)'
NOT_NAME_CHARACTER_LOOKAHEAD_REGEX = r'(?![_a-z0-9-])'
QUANTITY_REGEX = rf'(?:{NUMBER_REGEX}(?:{UNIT_REGEX}|{IDENTIFIER_REGEX})?{NOT_NAME_CHARACTER_LOOKAHEAD_REGEX})'
CALC_PLACEHOLDER_REGEX = r'(?:`CALC_[0-9]+`)'
SIGNED_QUANTITY_REGEX = rf'(?:-?{QUANTITY_REGEX}|inherit|auto|-?{CALC_PLACEHOLDER_REGEX})'
POSITION_QUANTITY_REGEX = rf'(?:-?{QUANTITY_REGEX}|-?{CALC_PLACEHOLDER_REGEX})'
COLOR_REGEX = rf'(?:\#?{NAME_CHARACTER_REGEX}+|(?:rgba?|hsla?)\([ \d.,%-]+\))'

SIDE_REGEX = r'(?:top|right|bottom|left)'
EDGE_REGEX = r'(?:top|right|bottom|left|center)'

NOT_LETTER_LOOKAHEAD_REGEX = r'(?![a-z])'
URL_CHARACTER_REGEX = rf'(?:[!\#$%&*-~]|{NON_ASCII_REGEX})'
NOT_CLOSING_PARENTHESIS_LOOKAHEAD_REGEX = rf'''(?!{URL_CHARACTER_REGEX}*?['"]?\s*\))'''
CLOSING_PARENTHESIS_LOOKAHEAD_REGEX = rf'''(?={URL_CHARACTER_REGEX}*?['"]?\s*\))'''
SELECTOR_CHARACTER_REGEX = (
    rf'''(?:[_a-z0-9\s\#:.,+>()\[\]=-]|{NON_ASCII_REGEX}|{ESCAPE_REGEX}|\*=|~=|\^=|'[^']*'|"[^"]*")'''
)
NOT_OPENING_BRACE_LOOKAHEAD_REGEX = rf'(?!{SELECTOR_CHARACTER_REGEX}*?\{{)'
DECLARATION_SUFFIX_REGEX = r'(?:\s*(?:!important\s*)?(?:[;}]|\Z))'

NOFLIP_MARKER_REGEX = r'(?:/\*!?\s*@noflip\s*\*/)'
COMMENT_REGEX = r'(?:/\*[^*]*\*+(?:[^/*][^*]*\*+)*/)'


class FourNotation(NamedTuple):
    """
    The values and separators of a one-to-four-value notation such as `padding: 1px 2px 3px 4px`.

    Missing values and separators are None.
    """
    values: tuple[Optional[str], Optional[str], Optional[str], Optional[str]]
    separators: tuple[Optional[str], Optional[str], Optional[str]]


def build_four_notation_regex(group_name: str, value_regex: str, separator_regex: str = r'\s+',
                              minimum_value_count: int = 1) -> str:
    """
    Build regex for a one-to-four-value notation.

    Values are captured in the groups `«group_name»_value_«index»`,
    separators in the groups `«group_name»_separator_«index»`.
    """
    regex = (
        f'(?: (?P<{group_name}_separator_2> {separator_regex} ) (?P<{group_name}_value_3> {value_regex} ) )?'
    )
    regex = (
        f'(?: (?P<{group_name}_separator_1> {separator_regex} ) (?P<{group_name}_value_2> {value_regex} ) {regex} )?'
    )
    regex = f'(?P<{group_name}_separator_0> {separator_regex} ) (?P<{group_name}_value_1> {value_regex} ) {regex}'

    if minimum_value_count < 2:
        regex = f'(?: {regex} )?'

    return f'(?P<{group_name}_value_0> {value_regex} ) {regex}'


def extract_four_notation(match: re.Match, group_name: str) -> FourNotation:
    values = tuple(match.group(f'{group_name}_value_{index}') for index in range(4))
    separators = tuple(match.group(f'{group_name}_separator_{index}') for index in range(3))

    return FourNotation(values, separators)


def resolve_four_notation(four_notation: FourNotation, point_map: Sequence[int], turned: bool) -> str:
    """
    Rearrange a four-value notation according to a point map.

    The value at (target) index `i` is taken from (source) index `point_map[i]`.
    Since a shorthand may list fewer than four values, a missing source value falls back to
    the value opposite to it (index XOR 2), and then to the first value,
    which reproduces the expansion of one-, two-, and three-value shorthands.
    The number of values in the output is that of the input,
    except that a three-value notation becomes a four-value notation if `turned`
    (the left and right values are no longer equal after the transformation).
    """
    values, separators = four_notation

    def source_value(index: int) -> str:
        source_index = point_map[index]
        return values[source_index] or values[source_index ^ 2] or values[0]

    has_synthesised_value = turned and values[2] is not None and values[3] is None

    pieces = []
    for index in range(4):
        if values[index] is not None or (index == 3 and has_synthesised_value):
            pieces.append(source_value(index))

        if index < 3:
            separator = separators[index]
            if separator is not None:
                pieces.append(separator)
            elif index == 2 and has_synthesised_value:
                pieces.append(' ')

    return ''.join(pieces)

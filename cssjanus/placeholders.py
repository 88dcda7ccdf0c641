"""
# CSSJanus: placeholders.py

Licensed under "MIT No Attribution" (MIT-0), see LICENSE.

Placeholder protection.
"""

import re
import warnings

from cssjanus.constants import ESCAPED_PLACEHOLDER_DELIMITER, PLACEHOLDER_DELIMITER
from cssjanus.idioms import COMMENT_REGEX, NOFLIP_MARKER_REGEX, NOT_OPENING_BRACE_LOOKAHEAD_REGEX
from cssjanus.utilities import flip_sign


NOFLIP_SINGLE_PATTERN_COMPILED = re.compile(
    pattern=rf'{NOFLIP_MARKER_REGEX} {NOT_OPENING_BRACE_LOOKAHEAD_REGEX} [^;}}]+ ;?',
    flags=re.IGNORECASE | re.VERBOSE,
)
NOFLIP_CLASS_PATTERN_COMPILED = re.compile(
    pattern=rf'{NOFLIP_MARKER_REGEX} [^}}]*? \}}',
    flags=re.IGNORECASE | re.VERBOSE,
)
COMMENT_PATTERN_COMPILED = re.compile(
    pattern=COMMENT_REGEX,
    flags=re.IGNORECASE | re.VERBOSE,
)


def escape_placeholder_delimiters(css: str) -> str:
    """
    Percent-escape occurrences of the placeholder delimiter.

    The delimiter (a backtick) is not a legal character in CSS outside of URLs,
    where `%60` is equivalent, so real content can never be confounded with a placeholder.
    """
    return css.replace(PLACEHOLDER_DELIMITER, ESCAPED_PLACEHOLDER_DELIMITER)


class Tokenizer:
    """
    Object protecting strings by replacing them temporarily with placeholders.

    Every match of the pattern is replaced by a placeholder of the form `` `«NAME»_«index»` ``,
    where «index» increases monotonically from 0.
    `detokenize(...)` restores the matched strings by index lookup.
    One tokenizer is used for a single stylesheet only.
    """
    _pattern_compiled: re.Pattern
    _name: str
    _matched_strings: list[str]
    _placeholder_pattern_compiled: re.Pattern

    def __init__(self, pattern_compiled: re.Pattern, name: str):
        self._pattern_compiled = pattern_compiled
        self._name = name
        self._matched_strings = []
        self._placeholder_pattern_compiled = re.compile(
            pattern=f'(?P<sign> -? ) {PLACEHOLDER_DELIMITER} {name} _ (?P<index> [0-9]+ ) {PLACEHOLDER_DELIMITER}',
            flags=re.VERBOSE,
        )

    @property
    def name(self) -> str:
        return self._name

    @property
    def matched_strings(self) -> list[str]:
        return self._matched_strings

    def build_placeholder(self, index: int) -> str:
        return f'{PLACEHOLDER_DELIMITER}{self._name}_{index}{PLACEHOLDER_DELIMITER}'

    def protect(self, string: str) -> str:
        """
        Store a string and return the placeholder standing in for it.
        """
        index = len(self._matched_strings)
        self._matched_strings.append(string)

        return self.build_placeholder(index)

    def tokenize(self, css: str) -> str:
        """
        Replace matching strings with placeholders.
        """
        return self._pattern_compiled.sub(
            lambda match: self.protect(match.group()),
            css,
        )

    def detokenize(self, css: str) -> str:
        """
        Restore placeholders to their original strings.
        """
        return self._placeholder_pattern_compiled.sub(self._detokenize_substitute_function, css)

    def _detokenize_substitute_function(self, placeholder_match: re.Match) -> str:
        index = int(placeholder_match.group('index'))

        try:
            string = self._matched_strings[index]
        except IndexError:
            warnings.warn(
                f'warning: placeholder `{placeholder_match.group()}` has no stored string '
                f'(only {len(self._matched_strings)} stored by tokenizer `{self._name}`); left as is'
            )
            return placeholder_match.group()

        return self.restore(placeholder_match.group('sign'), string)

    def restore(self, sign: str, string: str) -> str:
        return sign + string


class CalcTokenizer(Tokenizer):
    """
    Tokenizer protecting `calc()` expressions.

    Since a `calc()` expression may contain nested parentheses,
    which no single regular expression can balance,
    the parentheses of the whole stylesheet are first paired up in a single pass with a stack.
    A `;`, `{`, or `}` (none of which may occur in an expression) discards every parenthesis still open,
    so the cost is linear in the length of the stylesheet however many occurrences are unterminated.
    An unterminated occurrence is left unprotected.

    A placeholder may have acquired a leading minus sign (from a sign-flipping rewrite);
    on restoration, the minus is dropped and every quantity in the expression has its sign flipped instead.
    """
    NAME = 'CALC'

    _OPENING_PATTERN_COMPILED = re.compile(
        pattern=r'(?<! [\w-] ) (?: -moz- | -webkit- )? calc \(',
        flags=re.IGNORECASE | re.VERBOSE,
    )
    _QUANTITY_PATTERN_COMPILED = re.compile(
        pattern=r'''
            (?<! [\w.-] )
            -?
            (?: [0-9]* [.] [0-9]+ | [0-9]+ )
            (?: % | [a-z]+ )
        ''',
        flags=re.IGNORECASE | re.VERBOSE,
    )
    _SCAN_STOP_CHARACTERS = ';{}'

    def __init__(self):
        super().__init__(self._OPENING_PATTERN_COMPILED, CalcTokenizer.NAME)

    @staticmethod
    def build_closing_parenthesis_table(css: str) -> dict[int, int]:
        """
        Pair up parentheses, mapping the index of each opening parenthesis
        to the index just past its balancing closing parenthesis.

        Unterminated opening parentheses are absent from the table.
        """
        closing_index_from_opening_index = {}
        opening_indices = []

        for index, character in enumerate(css):
            if character == '(':
                opening_indices.append(index)
            elif character == ')':
                if opening_indices:
                    closing_index_from_opening_index[opening_indices.pop()] = index + 1
            elif character in CalcTokenizer._SCAN_STOP_CHARACTERS:
                opening_indices.clear()

        return closing_index_from_opening_index

    def tokenize(self, css: str) -> str:
        closing_index_from_opening_index = CalcTokenizer.build_closing_parenthesis_table(css)
        unterminated_starts = []
        pieces = []
        position = 0

        for opening_match in self._pattern_compiled.finditer(css):
            start = opening_match.start()
            if start < position:
                continue

            end = closing_index_from_opening_index.get(opening_match.end() - 1)
            if end is None:
                unterminated_starts.append(start)
                continue

            pieces.append(css[position:start])
            pieces.append(self.protect(css[start:end]))
            position = end

        pieces.append(css[position:])

        if unterminated_starts:
            warnings.warn(
                f'warning: {len(unterminated_starts)} unterminated `calc(` occurrence(s) '
                f'(first at index {unterminated_starts[0]}); left unprotected'
            )

        return ''.join(pieces)

    def restore(self, sign: str, string: str) -> str:
        if sign:
            return CalcTokenizer.flip_expression_signs(string)

        return string

    @staticmethod
    def flip_expression_signs(expression: str) -> str:
        return CalcTokenizer._QUANTITY_PATTERN_COMPILED.sub(
            lambda quantity_match: flip_sign(quantity_match.group()),
            expression,
        )

"""
# CSSJanus: test_placeholders.py

Licensed under "MIT No Attribution" (MIT-0), see LICENSE.

Perform unit testing for `placeholders.py`.
"""

import time
import unittest

from cssjanus.placeholders import (
    COMMENT_PATTERN_COMPILED,
    NOFLIP_CLASS_PATTERN_COMPILED,
    NOFLIP_SINGLE_PATTERN_COMPILED,
    CalcTokenizer,
    Tokenizer,
    escape_placeholder_delimiters,
)


class TestPlaceholders(unittest.TestCase):
    def test_escape_placeholder_delimiters(self):
        self.assertEqual(escape_placeholder_delimiters(''), '')
        self.assertEqual(escape_placeholder_delimiters('float: left'), 'float: left')
        self.assertEqual(escape_placeholder_delimiters('a`b`c'), 'a%60b%60c')
        self.assertEqual(escape_placeholder_delimiters('`COMMENT_0`'), '%60COMMENT_0%60')

    def test_tokenizer_comments(self):
        tokenizer = Tokenizer(COMMENT_PATTERN_COMPILED, 'COMMENT')
        css = 'a /* x */ b /** y **/'

        tokenized_css = tokenizer.tokenize(css)
        self.assertEqual(tokenized_css, 'a `COMMENT_0` b `COMMENT_1`')
        self.assertEqual(tokenizer.matched_strings, ['/* x */', '/** y **/'])
        self.assertEqual(tokenizer.detokenize(tokenized_css), css)

    def test_tokenizer_nested_looking_comment(self):
        tokenizer = Tokenizer(COMMENT_PATTERN_COMPILED, 'COMMENT')
        css = '/* left /* right */ float: left'

        tokenized_css = tokenizer.tokenize(css)
        self.assertEqual(tokenized_css, '`COMMENT_0` float: left')
        self.assertEqual(tokenizer.matched_strings, ['/* left /* right */'])
        self.assertEqual(tokenizer.detokenize(tokenized_css), css)

    def test_tokenizer_build_placeholder(self):
        tokenizer = Tokenizer(COMMENT_PATTERN_COMPILED, 'COMMENT')

        self.assertEqual(tokenizer.name, 'COMMENT')
        self.assertEqual(tokenizer.build_placeholder(7), '`COMMENT_7`')
        self.assertEqual(tokenizer.protect('/* z */'), '`COMMENT_0`')
        self.assertEqual(tokenizer.protect('/* z */'), '`COMMENT_1`')

    def test_tokenizer_unknown_index(self):
        tokenizer = Tokenizer(COMMENT_PATTERN_COMPILED, 'COMMENT')

        with self.assertWarns(UserWarning):
            self.assertEqual(tokenizer.detokenize('a `COMMENT_3` b'), 'a `COMMENT_3` b')

    def test_tokenizer_other_names_untouched(self):
        tokenizer = Tokenizer(COMMENT_PATTERN_COMPILED, 'COMMENT')
        tokenizer.tokenize('/* x */')

        self.assertEqual(tokenizer.detokenize('`NOFLIP_SINGLE_0` `COMMENT_0`'), '`NOFLIP_SINGLE_0` /* x */')

    def test_noflip_single(self):
        tokenizer = Tokenizer(NOFLIP_SINGLE_PATTERN_COMPILED, 'NOFLIP_SINGLE')

        self.assertEqual(
            tokenizer.tokenize('/* @noflip */ float: left; margin: 0'),
            '`NOFLIP_SINGLE_0` margin: 0',
        )
        self.assertEqual(
            tokenizer.tokenize('.a { /*! @noflip */ float: left }'),
            '.a { `NOFLIP_SINGLE_1`}',
        )
        self.assertEqual(
            tokenizer.tokenize('/* @noflip */ .a { float: left }'),
            '/* @noflip */ .a { float: left }',
        )

    def test_noflip_class(self):
        tokenizer = Tokenizer(NOFLIP_CLASS_PATTERN_COMPILED, 'NOFLIP_CLASS')

        self.assertEqual(
            tokenizer.tokenize('/* @noflip */ .a { float: left; } .b { float: left; }'),
            '`NOFLIP_CLASS_0` .b { float: left; }',
        )

    def test_calc_tokenizer(self):
        tokenizer = CalcTokenizer()
        css = 'width: calc(100% - (2 * 10px)); margin: -webkit-calc(1px + 2px)'

        tokenized_css = tokenizer.tokenize(css)
        self.assertEqual(tokenized_css, 'width: `CALC_0`; margin: `CALC_1`')
        self.assertEqual(tokenizer.matched_strings, ['calc(100% - (2 * 10px))', '-webkit-calc(1px + 2px)'])
        self.assertEqual(tokenizer.detokenize(tokenized_css), css)

    def test_calc_tokenizer_not_function(self):
        tokenizer = CalcTokenizer()

        self.assertEqual(tokenizer.tokenize('--my-calc(1px)'), '--my-calc(1px)')
        self.assertEqual(tokenizer.tokenize('.calc { color: red }'), '.calc { color: red }')

    def test_calc_tokenizer_unterminated(self):
        tokenizer = CalcTokenizer()
        css = 'width: calc(100% - 10px; margin: 0'

        with self.assertWarns(UserWarning):
            self.assertEqual(tokenizer.tokenize(css), css)

    def test_calc_tokenizer_negated(self):
        tokenizer = CalcTokenizer()

        self.assertEqual(tokenizer.tokenize('calc(-1em + 2px)'), '`CALC_0`')
        self.assertEqual(tokenizer.detokenize('-`CALC_0`'), 'calc(1em + -2px)')
        self.assertEqual(tokenizer.detokenize('`CALC_0`'), 'calc(-1em + 2px)')

    def test_calc_tokenizer_partly_unterminated(self):
        tokenizer = CalcTokenizer()

        with self.assertWarns(UserWarning):
            self.assertEqual(tokenizer.tokenize('width: calc(calc(1px)'), 'width: calc(`CALC_0`')
        self.assertEqual(tokenizer.matched_strings, ['calc(1px)'])

    def test_calc_tokenizer_many_unterminated(self):
        tokenizer = CalcTokenizer()
        css = 'margin-left: ' + 'calc(' * 5000 + '1px'

        start_time = time.perf_counter()
        with self.assertWarns(UserWarning):
            tokenized_css = tokenizer.tokenize(css)
        elapsed_time = time.perf_counter() - start_time

        self.assertEqual(tokenized_css, css)
        self.assertLess(elapsed_time, 1.0)

    def test_build_closing_parenthesis_table(self):
        self.assertEqual(CalcTokenizer.build_closing_parenthesis_table(''), {})
        self.assertEqual(CalcTokenizer.build_closing_parenthesis_table('calc(1px)'), {4: 9})
        self.assertEqual(CalcTokenizer.build_closing_parenthesis_table('calc((1px))'), {4: 11, 5: 10})
        self.assertEqual(CalcTokenizer.build_closing_parenthesis_table('calc(1px'), {})
        self.assertEqual(CalcTokenizer.build_closing_parenthesis_table('calc(1px; }'), {})
        self.assertEqual(CalcTokenizer.build_closing_parenthesis_table('a(b; (c)'), {5: 8})
        self.assertEqual(CalcTokenizer.build_closing_parenthesis_table(')('), {})

    def test_flip_expression_signs(self):
        self.assertEqual(CalcTokenizer.flip_expression_signs('calc(100% - 10px)'), 'calc(-100% - -10px)')
        self.assertEqual(CalcTokenizer.flip_expression_signs('calc(-1em + 2px)'), 'calc(1em + -2px)')
        self.assertEqual(CalcTokenizer.flip_expression_signs('calc(2 * 10px)'), 'calc(2 * -10px)')
        self.assertEqual(CalcTokenizer.flip_expression_signs('calc(0px + 1px)'), 'calc(0px + -1px)')


if __name__ == '__main__':
    unittest.main()

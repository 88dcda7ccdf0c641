"""
# CSSJanus: test_utilities.py

Licensed under "MIT No Attribution" (MIT-0), see LICENSE.

Perform unit testing for `utilities.py`.
"""

import unittest

from cssjanus.utilities import (
    apply_sign,
    flip_background_position_value,
    flip_sign,
    format_number,
    parse_leading_number,
    preserve_case,
    rewrite_outside_parentheses,
)


class TestUtilities(unittest.TestCase):
    def test_parse_leading_number(self):
        self.assertEqual(parse_leading_number('12px'), 12)
        self.assertEqual(parse_leading_number('-0.5em'), -0.5)
        self.assertEqual(parse_leading_number('.5'), 0.5)
        self.assertEqual(parse_leading_number('+3'), 3)
        self.assertEqual(parse_leading_number('1e2px'), 100)
        self.assertIsNone(parse_leading_number('auto'))
        self.assertIsNone(parse_leading_number(''))
        self.assertIsNone(parse_leading_number('`CALC_0`'))

    def test_flip_sign(self):
        self.assertEqual(flip_sign('12px'), '-12px')
        self.assertEqual(flip_sign('-12px'), '12px')
        self.assertEqual(flip_sign('+3px'), '-3px')
        self.assertEqual(flip_sign('.5em'), '-.5em')
        self.assertEqual(flip_sign('0'), '0')
        self.assertEqual(flip_sign('0px'), '0px')
        self.assertEqual(flip_sign('-0'), '-0')
        self.assertEqual(flip_sign('auto'), 'auto')
        self.assertEqual(flip_sign('inherit'), 'inherit')
        self.assertEqual(flip_sign('`CALC_0`'), '-`CALC_0`')
        self.assertEqual(flip_sign('-`CALC_0`'), '`CALC_0`')

    def test_preserve_case(self):
        self.assertEqual(preserve_case('right', 'left'), 'right')
        self.assertEqual(preserve_case('right', 'Left'), 'Right')
        self.assertEqual(preserve_case('right', 'LEFT'), 'RIGHT')
        self.assertEqual(preserve_case('right', 'lEFT'), 'right')
        self.assertEqual(preserve_case('nwse-resize', 'NESW-resize'), 'nwse-resize')
        self.assertEqual(preserve_case('Y', 'x'), 'Y')
        self.assertEqual(preserve_case('y', 'X'), 'Y')
        self.assertEqual(preserve_case('foo', ''), 'foo')

    def test_apply_sign(self):
        self.assertEqual(apply_sign('5px', 1), '5px')
        self.assertEqual(apply_sign('5px', -1), '-5px')
        self.assertEqual(apply_sign('-5px', -1), '5px')

    def test_flip_background_position_value(self):
        self.assertEqual(flip_background_position_value('25%'), '75%')
        self.assertEqual(flip_background_position_value('0%'), '100%')
        self.assertEqual(flip_background_position_value('100%'), '0%')
        self.assertEqual(flip_background_position_value('33.5%'), '66.5%')
        self.assertEqual(flip_background_position_value('12.50%'), '87.50%')
        self.assertEqual(flip_background_position_value('-25%'), '125%')
        self.assertEqual(flip_background_position_value('10px'), '10px')
        self.assertEqual(flip_background_position_value('center'), 'center')

    def test_format_number(self):
        self.assertEqual(format_number(315.0), '315')
        self.assertEqual(format_number(0), '0')
        self.assertEqual(format_number(0.5), '0.5')
        self.assertEqual(format_number(1 / 3), '0.333333')
        self.assertEqual(format_number(-0.0000001), '0')
        self.assertEqual(format_number(-12.25), '-12.25')

    def test_rewrite_outside_parentheses(self):
        self.assertEqual(rewrite_outside_parentheses('', str.upper), '')
        self.assertEqual(rewrite_outside_parentheses('abc', str.upper), 'ABC')
        self.assertEqual(rewrite_outside_parentheses('a(b)c', str.upper), 'A(b)C')
        self.assertEqual(rewrite_outside_parentheses('a(b(c)d)e', str.upper), 'A(b(c)d)E')
        self.assertEqual(rewrite_outside_parentheses('a(b', str.upper), 'A(b')
        self.assertEqual(rewrite_outside_parentheses('a)b', str.upper), 'A)B')
        self.assertEqual(
            rewrite_outside_parentheses('url(left.png) left, rgba(0, 0, 0, 0.5)', str.upper),
            'URL(left.png) LEFT, RGBA(0, 0, 0, 0.5)',
        )


if __name__ == '__main__':
    unittest.main()

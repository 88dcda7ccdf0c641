"""
# CSSJanus: test_core.py

Licensed under "MIT No Attribution" (MIT-0), see LICENSE.

Perform unit testing for `core.py`.
"""

import unittest

from cssjanus.core import TransformOptions, parse_options, transform
from cssjanus.exceptions import UnrecognisedDirectionException, UnrecognisedOptionException


class TestCore(unittest.TestCase):
    def test_parse_options(self):
        self.assertEqual(parse_options(), TransformOptions())
        self.assertEqual(parse_options(None), TransformOptions(False, False, 'lr-tb', 'rl-tb'))
        self.assertEqual(parse_options(True), TransformOptions(transform_dir_in_url=True))
        self.assertEqual(
            parse_options(True, True),
            TransformOptions(transform_dir_in_url=True, transform_edge_in_url=True),
        )
        self.assertEqual(
            parse_options({'transformEdgeInUrl': 1, 'targetDir': 'tb-rl'}),
            TransformOptions(transform_edge_in_url=True, target_dir='tb-rl'),
        )
        self.assertEqual(
            parse_options({'source_dir': '', 'target_dir': None}),
            TransformOptions(),
        )
        self.assertEqual(
            parse_options(TransformOptions(source_dir='rl-tb'), transform_edge_in_url=True),
            TransformOptions(transform_edge_in_url=True, source_dir='rl-tb'),
        )

        with self.assertRaises(UnrecognisedOptionException) as context:
            parse_options({'swapLeftRightInUrl': True})
        self.assertEqual(context.exception.option_name, 'swapLeftRightInUrl')

        with self.assertRaises(UnrecognisedOptionException):
            parse_options('lr-tb')

    def test_transform_identity(self):
        css = '.a { float: left; padding: 1px 2px 3px 4px }'

        self.assertEqual(transform(css, source_dir='lr-tb', target_dir='lr-tb'), css)
        self.assertEqual(transform(css, source_dir='lr-tb', target_dir=' LR-TB '), css)
        self.assertEqual(transform(''), '')
        self.assertEqual(transform('.a { color: red }'), '.a { color: red }')
        self.assertEqual(transform('float: left', source_dir='RL-TB', target_dir='rl-tb'), 'float: left')

    def test_transform_invalid_direction(self):
        with self.assertRaises(UnrecognisedDirectionException):
            transform('a {}', source_dir='lr-rl')
        with self.assertRaises(UnrecognisedDirectionException):
            transform('a {}', {'targetDir': 'up-down'})
        with self.assertRaises(UnrecognisedDirectionException):
            transform('a {}', source_dir='lr-rl', target_dir='lr-rl')

    def test_transform_mirror(self):
        self.assertEqual(transform('padding: 1px 2px 3px 4px'), 'padding: 1px 4px 3px 2px')
        self.assertEqual(transform('direction: ltr'), 'direction: rtl')
        self.assertEqual(transform('cursor: nw-resize'), 'cursor: ne-resize')
        self.assertEqual(transform('float: left'), 'float: right')
        self.assertEqual(transform('Float: Left'), 'Float: Right')
        self.assertEqual(transform('PADDING-LEFT: 0'), 'PADDING-RIGHT: 0')
        self.assertEqual(transform('background-position: 25% 50%'), 'background-position: 75% 50%')
        self.assertEqual(transform('border-radius: 15px 10px 15px 0px'), 'border-radius: 10px 15px 0px 15px')
        self.assertEqual(transform('margin-left: 10px'), 'margin-right: 10px')
        self.assertEqual(transform('text-align: right'), 'text-align: left')
        self.assertEqual(
            transform('border-left: 1px solid red; border-right: none'),
            'border-right: 1px solid red; border-left: none',
        )
        self.assertEqual(transform('border-color: red green blue black'), 'border-color: red black blue green')
        self.assertEqual(transform('margin: 1px 2px 3px'), 'margin: 1px 2px 3px')
        self.assertEqual(
            transform('padding: 1px 2px 3px 4px !important;'),
            'padding: 1px 4px 3px 2px !important;',
        )
        self.assertEqual(transform('margin-left: calc(100% - 10px)'), 'margin-right: calc(100% - 10px)')

    def test_transform_noflip(self):
        self.assertEqual(transform('/* @noflip */ float: left;'), '/* @noflip */ float: left;')
        self.assertEqual(
            transform('.foo { /* @noflip */ float: left; float: left }'),
            '.foo { /* @noflip */ float: left; float: right }',
        )
        self.assertEqual(transform('/* @noflip */ .foo { float: left; }'), '/* @noflip */ .foo { float: left; }')
        self.assertEqual(transform('/* left */ .a { margin-left: 0 }'), '/* left */ .a { margin-right: 0 }')
        self.assertEqual(transform('/* left /* right */ float: left'), '/* left /* right */ float: right')

    def test_transform_urls(self):
        css = '.a { background: url(arrow-left.png) }'
        self.assertEqual(transform(css), css)
        self.assertEqual(transform(css, {'transformEdgeInUrl': True}), '.a { background: url(arrow-right.png) }')
        self.assertEqual(transform(css, False, True), '.a { background: url(arrow-right.png) }')

        css = '.a { background: url(icon-ltr.png) }'
        self.assertEqual(transform(css), css)
        self.assertEqual(transform(css, True), '.a { background: url(icon-rtl.png) }')

        self.assertEqual(
            transform('background: url(left.png) no-repeat 10% 50%'),
            'background: url(left.png) no-repeat 90% 50%',
        )

    def test_transform_shadows(self):
        self.assertEqual(transform('box-shadow: 1px 2px 3px red'), 'box-shadow: -1px 2px 3px red')
        self.assertEqual(
            transform('box-shadow: -1px 2px 3px rgba(0, 0, 0, 0.5), 4px 5px blue'),
            'box-shadow: 1px 2px 3px rgba(0, 0, 0, 0.5), -4px 5px blue',
        )
        self.assertEqual(transform('box-shadow: calc(1px + 2px) 3px red'), 'box-shadow: calc(-1px + -2px) 3px red')

    def test_transform_cursors(self):
        self.assertEqual(transform('cursor: se-resize'), 'cursor: sw-resize')
        self.assertEqual(transform('cursor: nesw-resize'), 'cursor: nwse-resize')
        self.assertEqual(transform('cursor: ew-resize'), 'cursor: ew-resize')

    def test_transform_functions(self):
        self.assertEqual(transform('transform: translate(10px, 20px)'), 'transform: translate(-10px, 20px)')
        self.assertEqual(transform('transform: rotate(45deg)'), 'transform: rotate(-45deg)')
        self.assertEqual(
            transform('transform: matrix(1, 0.5, -0.5, 1, 10, 20)'),
            'transform: matrix(1, -0.5, 0.5, 1, -10, 20)',
        )
        self.assertEqual(
            transform('transform: translateX(5px) scale(2, 3)'),
            'transform: translateX(-5px) scale(2, 3)',
        )
        self.assertEqual(transform('transform: rotate3d(1, 2, 10deg)'), 'transform: rotate3d(1, 2, 10deg)')

    def test_transform_gradients_and_images(self):
        self.assertEqual(
            transform('background-image: linear-gradient(45deg, red, blue)'),
            'background-image: linear-gradient(315deg, red, blue)',
        )
        self.assertEqual(
            transform('background-image: linear-gradient(to right, red, blue)'),
            'background-image: linear-gradient(to left, red, blue)',
        )
        self.assertEqual(
            transform('background-image: radial-gradient(circle at 25% 50%, red, blue)'),
            'background-image: radial-gradient(circle at 75% 50%, red, blue)',
        )
        self.assertEqual(
            transform('border-image: url(a.png) 10 20 30 40 / 1px 2px 3px 4px'),
            'border-image: url(a.png) 10 40 30 20 / 1px 4px 3px 2px',
        )
        self.assertEqual(
            transform('border-image: url(a.png) 10 20 30 40 stretch'),
            'border-image: url(a.png) 10 40 30 20 stretch',
        )

    def test_transform_quarter_turn(self):
        def transform_vertical(css):
            return transform(css, source_dir='lr-tb', target_dir='tb-rl')

        self.assertEqual(transform_vertical('padding-left: 1px'), 'padding-top: 1px')
        self.assertEqual(transform_vertical('width: 10px'), 'height: 10px')
        self.assertEqual(transform_vertical('.a { width: 10px }'), '.a { height: 10px }')
        self.assertEqual(transform_vertical('margin: 1px 2px 3px 4px'), 'margin: 4px 1px 2px 3px')
        self.assertEqual(transform_vertical('float: left'), 'float: left')
        self.assertEqual(transform_vertical('cursor: n-resize'), 'cursor: e-resize')
        self.assertEqual(transform_vertical('cursor: col-resize'), 'cursor: row-resize')
        self.assertEqual(transform_vertical('overflow-x: hidden'), 'overflow-y: hidden')
        self.assertEqual(transform_vertical('writing-mode: horizontal-tb'), 'writing-mode: vertical-rl')
        self.assertEqual(transform_vertical('background-position: 20% 30%'), 'background-position: 70% 20%')
        self.assertEqual(transform_vertical('background-position-x: 20%'), 'background-position-y: 20%')
        self.assertEqual(transform_vertical('transform: translate(10px, 20px)'), 'transform: translate(-20px, 10px)')
        self.assertEqual(transform_vertical('transform: scale(2, 3)'), 'transform: scale(3, 2)')
        self.assertEqual(
            transform_vertical('@media (max-width: 600px) { .a { float: left } }'),
            '@media (max-height: 600px) { .a { float: left } }',
        )
        self.assertEqual(transform_vertical('border-radius: 1px / 2px'), 'border-radius: 2px / 1px')
        self.assertEqual(
            transform_vertical('background: url(a.png) 10% 0 scroll'),
            'background: url(a.png) 0 10% scroll',
        )

    def test_transform_round_trip(self):
        css = (
            '.a { margin: 1px 2px 3px 4px; padding-left: 5px; float: left; direction: ltr; '
            'cursor: ne-resize; border-radius: 1px 2px 3px 4px; box-shadow: 1px 2px red }'
        )

        self.assertEqual(transform(transform(css), source_dir='rl-tb', target_dir='lr-tb'), css)
        self.assertEqual(
            transform(
                transform(css, source_dir='lr-tb', target_dir='tb-rl'),
                source_dir='tb-rl',
                target_dir='lr-tb',
            ),
            css,
        )

    def test_transform_idempotent_protection(self):
        css = '.a { float: left }'
        once = transform(css)
        self.assertEqual(once, '.a { float: right }')
        self.assertEqual(transform(once), css)


if __name__ == '__main__':
    unittest.main()

"""
# CSSJanus: test_cli.py

Licensed under "MIT No Attribution" (MIT-0), see LICENSE.

Perform unit testing for `cli.py`.
"""

import contextlib
import io
import os
import tempfile
import unittest

from cssjanus.cli import extract_css_name, generate_css_file, validate_direction
from cssjanus.core import TransformOptions


class TestCli(unittest.TestCase):
    def test_extract_css_name(self):
        self.assertEqual(extract_css_name('file.css'), 'file')
        self.assertEqual(extract_css_name('file.'), 'file')
        self.assertEqual(extract_css_name('file'), 'file')
        self.assertEqual(extract_css_name('file.rl-tb.css'), 'file.rl-tb')

        if os.sep == '/':
            self.assertEqual(extract_css_name('./././file.css'), 'file')
            self.assertEqual(extract_css_name('./dir/../file.css'), 'file')
            self.assertEqual(extract_css_name('./file.'), 'file')
            self.assertEqual(extract_css_name('./file'), 'file')
        elif os.sep == '\\':
            self.assertEqual(extract_css_name(r'.\.\.\file.css'), 'file')
            self.assertEqual(extract_css_name(r'.\dir\..\file.css'), 'file')
            self.assertEqual(extract_css_name(r'.\file.'), 'file')
            self.assertEqual(extract_css_name(r'.\file'), 'file')

    def test_validate_direction(self):
        validate_direction('lr-tb', '-s (or --source-dir)')

        stderr = io.StringIO()
        with contextlib.redirect_stderr(stderr):
            with self.assertRaises(SystemExit) as context:
                validate_direction('lr-rl', '-s (or --source-dir)')

        self.assertEqual(context.exception.code, 2)
        self.assertIn('unrecognised direction `lr-rl`', stderr.getvalue())

    def test_generate_css_file(self):
        with tempfile.TemporaryDirectory() as temporary_directory:
            css_name = os.path.join(temporary_directory, 'style')
            with open(f'{css_name}.css', 'w', encoding='utf-8') as css_file:
                css_file.write('.a { float: left; padding: 1px 2px 3px 4px }')

            stdout = io.StringIO()
            with contextlib.redirect_stdout(stdout):
                generate_css_file(f'{css_name}.css', TransformOptions(), verbose_mode_enabled=False)
                generate_css_file(css_name, TransformOptions(target_dir='TB-RL'), verbose_mode_enabled=False)

            with open(f'{css_name}.rl-tb.css', 'r', encoding='utf-8') as transformed_css_file:
                self.assertEqual(transformed_css_file.read(), '.a { float: right; padding: 1px 4px 3px 2px }')
            with open(f'{css_name}.tb-rl.css', 'r', encoding='utf-8') as transformed_css_file:
                self.assertEqual(transformed_css_file.read(), '.a { float: left; padding: 4px 1px 2px 3px }')

            self.assertIn('success: wrote to', stdout.getvalue())

    def test_generate_css_file_not_found(self):
        with tempfile.TemporaryDirectory() as temporary_directory:
            css_name = os.path.join(temporary_directory, 'missing')

            stderr = io.StringIO()
            with contextlib.redirect_stderr(stderr):
                with self.assertRaises(SystemExit) as context:
                    generate_css_file(css_name, TransformOptions(), verbose_mode_enabled=False)

            self.assertEqual(context.exception.code, 2)
            self.assertIn('not found', stderr.getvalue())


if __name__ == '__main__':
    unittest.main()

"""
# CSSJanus: cli.py

Licensed under "MIT No Attribution" (MIT-0), see LICENSE.

Command-line interface.
"""

import argparse
import os
import re
import sys

from cssjanus._version import __version__
from cssjanus.constants import (
    COMMAND_LINE_ERROR_EXIT_CODE,
    DEFAULT_SOURCE_DIR,
    DEFAULT_TARGET_DIR,
    GENERIC_ERROR_EXIT_CODE,
)
from cssjanus.core import TransformOptions, transform
from cssjanus.exceptions import UnrecognisedDirectionException
from cssjanus.orientation import parse_direction

DESCRIPTION = '''
    Transform a CSS stylesheet from one writing direction to another
    (by default, from left-to-right to right-to-left).
'''
CSS_FILE_NAME_HELP = '''
    name of CSS file to be transformed
    (if none given, the stylesheet is read from standard input and written to standard output)
'''
SOURCE_DIR_HELP = f'''
    source writing direction, `«inline»-«block»` (default `{DEFAULT_SOURCE_DIR}`)
'''
TARGET_DIR_HELP = f'''
    target writing direction, `«inline»-«block»` (default `{DEFAULT_TARGET_DIR}`)
'''
DIR_IN_URL_HELP = '''
    also transform directions and writing modes in URLs (e.g. `ltr` in `url(arrow-ltr.png)`)
'''
EDGE_IN_URL_HELP = '''
    also transform sides in URLs (e.g. `left` in `url(arrow-left.png)`)
'''
VERBOSE_MODE_HELP = '''
    run in verbose mode (prints every rewrite applied)
'''


def extract_css_name(css_file_name_argument: str) -> str:
    """
    Extract name-without-extension from a CSS file name argument.

    Here, CSS file name argument may be of the form `«css_name».css`, `«css_name».`, or `«css_name»`.
    The path is normalised by resolving `./` and `../`.
    """
    css_file_name_argument = os.path.normpath(css_file_name_argument)
    css_name = re.sub(pattern=r'[.](css)? \Z', repl='', string=css_file_name_argument, flags=re.VERBOSE)

    return css_name


def parse_command_line_arguments() -> argparse.Namespace:
    argument_parser = argparse.ArgumentParser(description=DESCRIPTION)
    argument_parser.add_argument(
        '-v', '--version',
        action='version',
        version=f'{argument_parser.prog} version {__version__}',
    )
    argument_parser.add_argument(
        '-s', '--source-dir',
        dest='source_dir',
        default=DEFAULT_SOURCE_DIR,
        help=SOURCE_DIR_HELP,
        metavar='DIR',
    )
    argument_parser.add_argument(
        '-t', '--target-dir',
        dest='target_dir',
        default=DEFAULT_TARGET_DIR,
        help=TARGET_DIR_HELP,
        metavar='DIR',
    )
    argument_parser.add_argument(
        '-d', '--dir-in-url',
        dest='transform_dir_in_url',
        action='store_true',
        help=DIR_IN_URL_HELP,
    )
    argument_parser.add_argument(
        '-e', '--edge-in-url',
        dest='transform_edge_in_url',
        action='store_true',
        help=EDGE_IN_URL_HELP,
    )
    argument_parser.add_argument(
        '-x', '--verbose',
        dest='verbose_mode_enabled',
        action='store_true',
        help=VERBOSE_MODE_HELP,
    )
    argument_parser.add_argument(
        'css_file_name_arguments',
        default=[],
        help=CSS_FILE_NAME_HELP,
        metavar='file.css',
        nargs='*',
    )

    return argument_parser.parse_args()


def validate_direction(direction: str, option_string: str):
    try:
        parse_direction(direction)
    except UnrecognisedDirectionException:
        print(f'error: option {option_string}: unrecognised direction `{direction}`', file=sys.stderr)
        sys.exit(COMMAND_LINE_ERROR_EXIT_CODE)


def generate_css_file(css_file_name_argument: str, options: TransformOptions, verbose_mode_enabled: bool):
    css_name = extract_css_name(css_file_name_argument)
    css_file_name = f'{css_name}.css'
    try:
        with open(css_file_name, 'r', encoding='utf-8') as css_file:
            css = css_file.read()
    except FileNotFoundError:
        print(f'error: argument `{css_file_name_argument}`: file `{css_file_name}` not found', file=sys.stderr)
        sys.exit(COMMAND_LINE_ERROR_EXIT_CODE)

    transformed_css = transform(css, options, verbose_mode_enabled=verbose_mode_enabled)

    transformed_css_file_name = f'{css_name}.{options.target_dir.lower()}.css'
    try:
        with open(transformed_css_file_name, 'w', encoding='utf-8') as transformed_css_file:
            transformed_css_file.write(transformed_css)
        print(f'success: wrote to `{transformed_css_file_name}`')
    except IOError:
        print(f'error: cannot write to `{transformed_css_file_name}`', file=sys.stderr)
        sys.exit(GENERIC_ERROR_EXIT_CODE)


def main():
    parsed_arguments = parse_command_line_arguments()
    css_file_name_arguments = parsed_arguments.css_file_name_arguments
    verbose_mode_enabled = parsed_arguments.verbose_mode_enabled

    validate_direction(parsed_arguments.source_dir, '-s (or --source-dir)')
    validate_direction(parsed_arguments.target_dir, '-t (or --target-dir)')

    options = TransformOptions(
        transform_dir_in_url=parsed_arguments.transform_dir_in_url,
        transform_edge_in_url=parsed_arguments.transform_edge_in_url,
        source_dir=parsed_arguments.source_dir,
        target_dir=parsed_arguments.target_dir,
    )

    if len(css_file_name_arguments) == 0:
        css = sys.stdin.read()
        sys.stdout.write(transform(css, options, verbose_mode_enabled=verbose_mode_enabled))
        return

    for css_file_name_argument in css_file_name_arguments:
        generate_css_file(css_file_name_argument, options, verbose_mode_enabled)


if __name__ == '__main__':
    main()

"""
# CSSJanus: constants.py

Licensed under "MIT No Attribution" (MIT-0), see LICENSE.

Constants.
"""

GENERIC_ERROR_EXIT_CODE = 1
COMMAND_LINE_ERROR_EXIT_CODE = 2
VERBOSE_MODE_DIVIDER_SYMBOL_COUNT = 48

DEFAULT_SOURCE_DIR = 'lr-tb'
DEFAULT_TARGET_DIR = 'rl-tb'

# Sides in the standard top > right > bottom > left order; a direction's ordinal indexes into each table.
DIRECTION_ORDINAL_FROM_NAME = {
    'tb': 0,
    'rl': 1,
    'bt': 2,
    'lr': 3,
}
SIDES = ('top', 'right', 'bottom', 'left')
CURSOR_DIRECTIONS = ('n', 'e', 's', 'w')
WRITING_MODE_DIRECTIONS = ('tb', 'rl', 'bt', 'lr')

PLACEHOLDER_DELIMITER = '`'
ESCAPED_PLACEHOLDER_DELIMITER = '%60'

DIR_FLIPPED_FLAG_NAME = 'DIR_FLIPPED'
QUARTER_TURNED_FLAG_NAME = 'QUARTER_TURNED'
CORNERS_FLIPPED_FLAG_NAME = 'CORNERS_FLIPPED'
REFLECTED_FLAG_NAME = 'REFLECTED'
TRANSFORM_DIR_IN_URL_FLAG_NAME = 'TRANSFORM_DIR_IN_URL'
TRANSFORM_EDGE_IN_URL_FLAG_NAME = 'TRANSFORM_EDGE_IN_URL'

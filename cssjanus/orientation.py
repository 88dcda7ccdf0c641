"""
# CSSJanus: orientation.py

Licensed under "MIT No Attribution" (MIT-0), see LICENSE.

Orientation algebra.

A writing direction `«inline»-«block»` (e.g. `lr-tb`) is decomposed into two ordinals,
using the standard top > right > bottom > left order (tb = 0, rl = 1, bt = 2, lr = 3),
so that `lr-tb` is (3, 0).
Stepping an ordinal by 1 rotates by a quarter turn; stepping by 2 reverses.
"""

import re
from typing import NamedTuple, Optional

from cssjanus.constants import (
    CORNERS_FLIPPED_FLAG_NAME,
    CURSOR_DIRECTIONS,
    DIRECTION_ORDINAL_FROM_NAME,
    DIR_FLIPPED_FLAG_NAME,
    QUARTER_TURNED_FLAG_NAME,
    REFLECTED_FLAG_NAME,
    SIDES,
    WRITING_MODE_DIRECTIONS,
)
from cssjanus.exceptions import UnrecognisedDirectionException
from cssjanus.utilities import flip_sign, preserve_case


def parse_direction(direction: str) -> tuple[int, int]:
    """
    Parse a writing direction `«inline»-«block»` into its pair of ordinals.

    The inline and block tokens must lie on different axes,
    so that `lr-tb` and `tb-rl` are valid whereas `lr-rl` is not.
    """
    match = re.fullmatch(
        pattern=r'(?P<inline> lr | rl | tb | bt ) - (?P<block> lr | rl | tb | bt )',
        string=direction.strip().lower(),
        flags=re.VERBOSE,
    )
    if match is None:
        raise UnrecognisedDirectionException(direction)

    inline = DIRECTION_ORDINAL_FROM_NAME[match.group('inline')]
    block = DIRECTION_ORDINAL_FROM_NAME[match.group('block')]
    if inline & 1 == block & 1:
        raise UnrecognisedDirectionException(direction)

    return inline, block


class Orientation(NamedTuple):
    """
    The change of orientation from a source writing direction to a target writing direction.

    - `dir_flipped`: whether the inline direction is mirrored (as between `ltr` and `rtl`).
    - `quarter_turned`: whether the inline and block axes are swapped (width and height swap).
    - `corners_flipped`: whether the diagonal corner axes (ne/sw versus nw/se) are swapped.
    - `reflected`: whether the change is a mirroring rather than a pure rotation.
    - `side_map`: source side index for each target side index.
    - `corner_map`: source corner index for each target corner index.
    - `flip_x`, `flip_y`: whether horizontal and vertical positions are complemented.
    """
    source: tuple[int, int]
    target: tuple[int, int]
    dir_flipped: bool
    quarter_turned: bool
    corners_flipped: bool
    reflected: bool
    side_map: tuple[int, int, int, int]
    corner_map: tuple[int, int, int, int]
    flip_x: bool
    flip_y: bool

    @property
    def is_identity(self) -> bool:
        return self.source == self.target

    @property
    def flag_names(self) -> set[str]:
        flag_names = set()

        if self.dir_flipped:
            flag_names.add(DIR_FLIPPED_FLAG_NAME)
        if self.quarter_turned:
            flag_names.add(QUARTER_TURNED_FLAG_NAME)
        if self.corners_flipped:
            flag_names.add(CORNERS_FLIPPED_FLAG_NAME)
        if self.reflected:
            flag_names.add(REFLECTED_FLAG_NAME)

        return flag_names

    @staticmethod
    def compute_offset_component(side_index: int, x: str, y: str) -> str:
        """
        Compute the offset component pointing towards a target side.

        The offset (x, y) points right-and-down in source coordinates;
        `side_index` is the source side which has become the target side of interest.
        """
        if side_index == 0:
            return flip_sign(y)
        if side_index == 1:
            return x
        if side_index == 2:
            return y

        return flip_sign(x)

    def map_offset(self, x: str, y: str) -> tuple[str, str]:
        """
        Map a two-dimensional offset (e.g. of a shadow or translation) to target coordinates.
        """
        return (
            Orientation.compute_offset_component(self.side_map[1], x, y),
            Orientation.compute_offset_component(self.side_map[2], x, y),
        )

    @property
    def axis_signs(self) -> tuple[int, int]:
        """
        Signs (±1) of the target x and y axes relative to the source axes mapped onto them.
        """
        x_sign = -1 if self.side_map[1] in (0, 3) else 1
        y_sign = -1 if self.side_map[2] in (0, 3) else 1

        return x_sign, y_sign

    @property
    def skew_sign(self) -> int:
        x_sign, y_sign = self.axis_signs
        return x_sign * y_sign

    def map_axis(self, axis: str) -> tuple[str, int]:
        """
        Map a source axis name (`x`, `y`, or `z`) to the target axis name and sign.
        """
        x_sign, y_sign = self.axis_signs
        axis = axis.lower()

        if axis == 'x':
            if self.quarter_turned:
                return 'y', y_sign
            return 'x', x_sign

        if axis == 'y':
            if self.quarter_turned:
                return 'x', x_sign
            return 'y', y_sign

        return axis, 1

    def compute_matrix_sources_and_signs(self, dimension: int) -> tuple[list[int], list[int]]:
        """
        Compute the signed permutation conjugating a (homogeneous) transformation matrix.

        Row/column `i` of the target matrix is taken from row/column `sources[i]` of the source matrix,
        multiplied by `signs[i]`.
        """
        x_sign, y_sign = self.axis_signs
        sources = [1, 0] if self.quarter_turned else [0, 1]
        signs = [x_sign, y_sign]

        for index in range(2, dimension):
            sources.append(index)
            signs.append(1)

        return sources, signs


def solve_orientation(source_dir: str, target_dir: str) -> Orientation:
    source = parse_direction(source_dir)
    target = parse_direction(target_dir)

    dir_flipped = (source[0] ^ target[0]) % 3 != 0
    quarter_turned = source[0] & 1 != target[0] & 1
    corners_flipped = (source[0] + source[1]) % 3 != (target[0] + target[1]) % 3
    reflected = (source[0] - source[1]) & 3 != (target[0] - target[1]) & 3

    side_map = [0, 0, 0, 0]
    corner_map = [0, 0, 0, 0]
    for index in range(4):
        key = target[index & 1] ^ (index & 2)
        side_map[key] = source[index & 1] ^ (index & 2)
        corner_map[key] = (side_map[key] + int(reflected)) & 3

    flip_x = side_map[3] == 1 or side_map[0] == 1
    flip_y = side_map[2] == 0 or side_map[1] == 0

    return Orientation(
        source=source,
        target=target,
        dir_flipped=dir_flipped,
        quarter_turned=quarter_turned,
        corners_flipped=corners_flipped,
        reflected=reflected,
        side_map=tuple(side_map),
        corner_map=tuple(corner_map),
        flip_x=flip_x,
        flip_y=flip_y,
    )


QUARTER_TURN_SWAPS = (
    ('background-position-x', 'background-position-y'),
    ('horizontal', 'vertical'),
    ('text', 'vertical-text'),
    ('row-resize', 'col-resize'),
    ('ew-resize', 'ns-resize'),
    ('width', 'height'),
    ('landscape', 'portrait'),
    ('x', 'y'),
)
DIR_FLIP_SWAPS = (
    ('ltr', 'rtl'),
)
CORNER_FLIP_SWAPS = (
    ('nesw-resize', 'nwse-resize'),
)


class TextChanges:
    """
    Case-insensitive keyword substitution table for an orientation change.

    Side names, cursor compass letters, and writing-mode tokens are mapped according to the side map.
    Axis-dependent keywords are swapped if quarter-turned,
    `ltr` and `rtl` are swapped if the direction is flipped,
    and the diagonal resize cursors are swapped if the corners are flipped.
    Keywords absent from the table map to themselves.
    """
    _target_from_source: dict[str, str]

    def __init__(self, orientation: Orientation):
        self._target_from_source = {}

        for index in range(4):
            source_index = orientation.side_map[index]
            for names in (SIDES, CURSOR_DIRECTIONS, WRITING_MODE_DIRECTIONS):
                self._target_from_source[names[source_index]] = names[index]

        if orientation.quarter_turned:
            self.add_swaps(QUARTER_TURN_SWAPS)
        if orientation.dir_flipped:
            self.add_swaps(DIR_FLIP_SWAPS)
        if orientation.corners_flipped:
            self.add_swaps(CORNER_FLIP_SWAPS)

    def add_swaps(self, swaps: tuple[tuple[str, str], ...]):
        for first, second in swaps:
            self._target_from_source[first] = second
            self._target_from_source[second] = first

    def lookup(self, text: Optional[str]) -> str:
        if text is None:
            return ''

        return preserve_case(self._target_from_source.get(text.lower(), text), text)

"""
# CSSJanus: rewrites.py

Licensed under "MIT No Attribution" (MIT-0), see LICENSE.

Rewrite passes.

Each pass rewrites one orientation-sensitive construct of a (tokenized) stylesheet,
leaving everything else untouched.
Patterns are compiled with `flags=re.IGNORECASE | re.VERBOSE`.
"""

import math
import re
from typing import Optional

from cssjanus.bases import PatternRewrite, TemplateRewrite
from cssjanus.idioms import (
    CLOSING_PARENTHESIS_LOOKAHEAD_REGEX,
    COLOR_REGEX,
    DECLARATION_SUFFIX_REGEX,
    EDGE_REGEX,
    NOT_CLOSING_PARENTHESIS_LOOKAHEAD_REGEX,
    NOT_LETTER_LOOKAHEAD_REGEX,
    NOT_OPENING_BRACE_LOOKAHEAD_REGEX,
    NUMBER_REGEX,
    POSITION_QUANTITY_REGEX,
    QUANTITY_REGEX,
    SIDE_REGEX,
    SIGNED_QUANTITY_REGEX,
    build_four_notation_regex,
    extract_four_notation,
    resolve_four_notation,
)
from cssjanus.orientation import Orientation, TextChanges
from cssjanus.utilities import (
    apply_sign,
    flip_background_position_value,
    flip_sign,
    format_number,
    preserve_case,
    rewrite_outside_parentheses,
)


BACKGROUND_POSITION_VALUES_PATTERN_COMPILED = re.compile(
    pattern=rf'''
        (?P<prefix> ^ | \s | , )
        (?P<x>
            (?P<x_edge> {EDGE_REGEX} {NOT_LETTER_LOOKAHEAD_REGEX} (?: \s+ -? {QUANTITY_REGEX} (?= \s+ {EDGE_REGEX} ) )? )
              |
            {POSITION_QUANTITY_REGEX}
        )
        (?:
            (?P<space> \s+ )
            (?P<y>
                (?P<y_edge> {EDGE_REGEX} {NOT_LETTER_LOOKAHEAD_REGEX} (?: \s+ -? {QUANTITY_REGEX} )? )
                  |
                {POSITION_QUANTITY_REGEX}
            )
        )?
        (?:
            (?P<slash> \s* / \s* )
            (?P<size_x> {QUANTITY_REGEX} ) (?P<size_space> \s+ ) (?P<size_y> {QUANTITY_REGEX} )
        )?
    ''',
    flags=re.IGNORECASE | re.VERBOSE,
)
BACKGROUND_REPEAT_VALUE_PATTERN_COMPILED = re.compile(
    pattern=rf'''
        (?:
            repeat-[xy]
              |
            (?P<first> (?: no- )? repeat | space | round )
            (?P<separator> \s+ )
            (?P<second> (?: no- )? repeat | space | round )
        )
        {NOT_CLOSING_PARENTHESIS_LOOKAHEAD_REGEX}
    ''',
    flags=re.IGNORECASE | re.VERBOSE,
)
BACKGROUND_SIZE_VALUE_PATTERN_COMPILED = re.compile(
    pattern=rf'''
        (?<! [\w.-] )
        (?P<first> auto | {POSITION_QUANTITY_REGEX} )
        (?P<separator> \s+ )
        (?P<second> auto | {POSITION_QUANTITY_REGEX} )
    ''',
    flags=re.IGNORECASE | re.VERBOSE,
)

BORDER_RADIUS_BEFORE_REGEX = build_four_notation_regex('before', SIGNED_QUANTITY_REGEX)
BORDER_RADIUS_AFTER_REGEX = build_four_notation_regex('after', SIGNED_QUANTITY_REGEX)
BORDER_IMAGE_SLICE_REGEX = build_four_notation_regex(
    'slice',
    SIGNED_QUANTITY_REGEX,
    separator_regex=r'\s+ (?: fill \s+ )?',
)
BORDER_IMAGE_WIDTH_REGEX = build_four_notation_regex('width', SIGNED_QUANTITY_REGEX)
BORDER_IMAGE_OUTSET_REGEX = build_four_notation_regex('outset', SIGNED_QUANTITY_REGEX)


def substitute_background_position(match: re.Match, orientation: Orientation) -> str:
    """
    Rewrite a background position (with optional `/ «size_x» «size_y»`).

    Percentages are complemented where the axis is flipped, but edge offsets (e.g. `right 10px`) are kept.
    If quarter-turned, the components are transposed,
    and a lone horizontal component is given a vertical counterpart of `center`.
    """
    x = match.group('x')
    x_edge = match.group('x_edge')
    space = match.group('space')
    y = match.group('y')
    y_edge = match.group('y_edge')

    if x_edge is None or y_edge is None:
        if y is None:
            if orientation.quarter_turned and x_edge is None:
                y = 'center'
                space = ' '
            else:
                y = space = ''
        elif y_edge is None and orientation.flip_y:
            y = flip_background_position_value(y)

        if x_edge is None and orientation.flip_x:
            x = flip_background_position_value(x)

    if orientation.quarter_turned:
        position = y + space + x
    else:
        position = x + space + y

    size = ''
    size_y = match.group('size_y')
    if size_y is not None:
        size_x = match.group('size_x')
        size_space = match.group('size_space')
        if orientation.quarter_turned:
            size = match.group('slash') + size_y + size_space + size_x
        else:
            size = match.group('slash') + size_x + size_space + size_y

    return match.group('prefix') + position + size


def swap_pair(match: re.Match) -> str:
    """
    Swap a pair of values, or toggle `repeat-x` and `repeat-y`.
    """
    second = match.group('second')
    if second is None:
        return 'repeat-y' if match.group().lower() == 'repeat-x' else 'repeat-x'

    return second + match.group('separator') + match.group('first')


class DirectionInUrlRewrite(PatternRewrite):
    """
    Rewrite directions and writing modes (e.g. `ltr`, `vertical-rl`, `lr-tb`) in URLs.
    """
    PATTERN_COMPILED = re.compile(
        pattern=rf'''
            (?P<prefix> ^ | [^a-z] )
            (?P<direction>
                ltr | rtl
                  |
                (?: tb | bt | vertical ) - (?: lr | rl | inline )
                  |
                (?: lr | rl | horizontal ) - (?: tb | bt | inline )
            )
            {NOT_LETTER_LOOKAHEAD_REGEX}
            {CLOSING_PARENTHESIS_LOOKAHEAD_REGEX}
        ''',
        flags=re.IGNORECASE | re.VERBOSE,
    )

    def _substitute(self, match: re.Match, orientation: Orientation, text_changes: TextChanges) -> str:
        direction = '-'.join(text_changes.lookup(part) for part in match.group('direction').split('-'))
        return match.group('prefix') + direction


class EdgeInUrlRewrite(PatternRewrite):
    """
    Rewrite sides (`top`, `right`, `bottom`, `left`) in URLs.
    """
    PATTERN_COMPILED = re.compile(
        pattern=rf'''
            (?P<prefix> ^ | [^a-z] )
            (?P<side> {SIDE_REGEX} )
            {NOT_LETTER_LOOKAHEAD_REGEX}
            {CLOSING_PARENTHESIS_LOOKAHEAD_REGEX}
        ''',
        flags=re.IGNORECASE | re.VERBOSE,
    )

    def _substitute(self, match: re.Match, orientation: Orientation, text_changes: TextChanges) -> str:
        return match.group('prefix') + text_changes.lookup(match.group('side'))


class SidesRewrite(PatternRewrite):
    """
    Rewrite sides in property names and values (e.g. `padding-left`, `left: 0`).

    The values of `float`, `clear`, `text-align`, and `vertical-align` never rotate;
    they only swap `left` and `right` when the direction is flipped.
    The values of `vertical-align: text-*`, `text-orientation: sideways-*`, and `caption-side` never change.
    """
    PATTERN_COMPILED = re.compile(
        pattern=rf'''
            (?P<prefix> ^ | [^a-z] )
            (?P<no_rotate>
                (?: float | clear | text-align | vertical-align ) \s* : \s*
                  |
                (?P<suppress_change>
                    vertical-align \s* : \s* (?: text- )?
                      |
                    text-orientation \s* : \s* sideways-
                      |
                    caption-side \s* : \s*
                )
            )?
            (?P<side> {SIDE_REGEX} )
            {NOT_LETTER_LOOKAHEAD_REGEX}
            {NOT_CLOSING_PARENTHESIS_LOOKAHEAD_REGEX}
            {NOT_OPENING_BRACE_LOOKAHEAD_REGEX}
        ''',
        flags=re.IGNORECASE | re.VERBOSE,
    )

    def _substitute(self, match: re.Match, orientation: Orientation, text_changes: TextChanges) -> str:
        prefix = match.group('prefix')
        no_rotate = match.group('no_rotate')
        side = match.group('side')

        if no_rotate is None:
            return prefix + text_changes.lookup(side)

        if match.group('suppress_change') is None and orientation.dir_flipped:
            if side.lower() == 'left':
                side = preserve_case('right', side)
            elif side.lower() == 'right':
                side = preserve_case('left', side)

        return prefix + no_rotate + side


class CursorRewrite(PatternRewrite):
    """
    Rewrite compass cursors (e.g. `cursor: nw-resize`) and axis cursors (e.g. `cursor: col-resize`).

    Diagonal cursors (`nesw-resize`, `nwse-resize`) swap only when the corners are flipped.
    """
    PATTERN_COMPILED = re.compile(
        pattern=r'''
            (?P<property> cursor \s* : \s* )
            (?:
                (?P<north_south> [ns] )? (?P<east_west> [ew] )? (?P<diagonal> s[ew] )? -resize
                  |
                (?P<other> row-resize | col-resize | ew-resize | ns-resize | vertical-text | text )
            )
        ''',
        flags=re.IGNORECASE | re.VERBOSE,
    )

    def _substitute(self, match: re.Match, orientation: Orientation, text_changes: TextChanges) -> str:
        other = match.group('other')
        north_south = match.group('north_south')
        east_west = match.group('east_west')
        diagonal = match.group('diagonal')

        if other is not None:
            cursor = text_changes.lookup(other)
        elif diagonal is not None:
            cursor = text_changes.lookup(f'{north_south or ""}{east_west or ""}{diagonal}-resize')
        else:
            if orientation.quarter_turned:
                first, second = east_west, north_south
            else:
                first, second = north_south, east_west
            cursor = text_changes.lookup(first) + text_changes.lookup(second) + '-resize'

        return match.group('property') + cursor


class BorderRadiusRewrite(PatternRewrite):
    """
    Rewrite `border-radius`, whose one-to-four values (before and after an optional slash) are corners.

    If quarter-turned, the horizontal and vertical radii (before and after the slash) are swapped.
    """
    PATTERN_COMPILED = re.compile(
        pattern=rf'''
            (?P<property> border-radius \s* : \s* )
            {BORDER_RADIUS_BEFORE_REGEX}
            (?:
                (?P<slash> \s* / \s* )
                {BORDER_RADIUS_AFTER_REGEX}
            )?
            (?P<suffix> {DECLARATION_SUFFIX_REGEX} )
        ''',
        flags=re.IGNORECASE | re.VERBOSE,
    )

    def _substitute(self, match: re.Match, orientation: Orientation, text_changes: TextChanges) -> str:
        corner_map = orientation.corner_map
        corners_flipped = orientation.corners_flipped
        before = resolve_four_notation(extract_four_notation(match, 'before'), corner_map, corners_flipped)

        slash = match.group('slash')
        if slash is None:
            value = before
        else:
            after = resolve_four_notation(extract_four_notation(match, 'after'), corner_map, corners_flipped)
            if orientation.quarter_turned:
                value = after + slash + before
            else:
                value = before + slash + after

        return match.group('property') + value + match.group('suffix')


class ShadowRewrite(PatternRewrite):
    """
    Rewrite the offsets of each layer of `box-shadow` and `text-shadow`.
    """
    PATTERN_COMPILED = re.compile(
        pattern=r'(?P<property> (?: box | text ) -shadow \s* : \s* ) (?P<value> [^;{}]+ )',
        flags=re.IGNORECASE | re.VERBOSE,
    )
    OFFSETS_PATTERN_COMPILED = re.compile(
        pattern=rf'''
            (?<! [\w\#.-] )
            (?P<x> {SIGNED_QUANTITY_REGEX} )
            (?P<space> \s+ )
            (?P<y> {SIGNED_QUANTITY_REGEX} )
            (?P<end> [^,;}}]* )
        ''',
        flags=re.IGNORECASE | re.VERBOSE,
    )

    def _substitute(self, match: re.Match, orientation: Orientation, text_changes: TextChanges) -> str:
        def substitute_offsets(offsets_match: re.Match) -> str:
            x, y = orientation.map_offset(offsets_match.group('x'), offsets_match.group('y'))
            return x + offsets_match.group('space') + y + offsets_match.group('end')

        def rewrite_segment(segment: str) -> str:
            return ShadowRewrite.OFFSETS_PATTERN_COMPILED.sub(substitute_offsets, segment)

        return match.group('property') + rewrite_outside_parentheses(match.group('value'), rewrite_segment)


class FourNotationRewrite(PatternRewrite):
    """
    Base rewrite for a one-to-four-value notation of sides (e.g. `padding: 1px 2px 3px 4px`).

    Only notations of two or more values need rewriting.
    """
    GROUP_NAME: str

    def _substitute(self, match: re.Match, orientation: Orientation, text_changes: TextChanges) -> str:
        four_notation = extract_four_notation(match, self.GROUP_NAME)
        value = resolve_four_notation(four_notation, orientation.side_map, orientation.quarter_turned)

        return match.group('property') + value + match.group('suffix')


class FourNotationQuantityRewrite(FourNotationRewrite):
    GROUP_NAME = 'quantity'
    PATTERN_COMPILED = re.compile(
        pattern=rf'''
            (?P<property>
                (?: margin | padding | border-width | border-image-width | border-image-outset ) \s* : \s*
            )
            {build_four_notation_regex(GROUP_NAME, SIGNED_QUANTITY_REGEX, minimum_value_count=2)}
            (?P<suffix> {DECLARATION_SUFFIX_REGEX} )
        ''',
        flags=re.IGNORECASE | re.VERBOSE,
    )


class FourNotationColorRewrite(FourNotationRewrite):
    GROUP_NAME = 'color'
    PATTERN_COMPILED = re.compile(
        pattern=rf'''
            (?P<property> (?: border-color | border-style ) \s* : \s* )
            {build_four_notation_regex(GROUP_NAME, COLOR_REGEX, minimum_value_count=2)}
            (?P<suffix> {DECLARATION_SUFFIX_REGEX} )
        ''',
        flags=re.IGNORECASE | re.VERBOSE,
    )


class BackgroundRewrite(PatternRewrite):
    """
    Rewrite `background` and `background-position`.

    Positions (with any `/ «size_x» «size_y»`) are rewritten,
    and repeat pairs are swapped if quarter-turned.
    Parenthesised parts of the value (`url(...)`, colour functions, gradients) are left alone.
    """
    PATTERN_COMPILED = re.compile(
        pattern=r'''
            (?P<property> background (?: -position )? )
            (?P<colon> \s* : \s* )
            (?P<value> [^;{}]+ )
        ''',
        flags=re.IGNORECASE | re.VERBOSE,
    )

    def _substitute(self, match: re.Match, orientation: Orientation, text_changes: TextChanges) -> str:
        def substitute_function(position_match: re.Match) -> str:
            return substitute_background_position(position_match, orientation)

        def rewrite_segment(segment: str) -> str:
            if orientation.quarter_turned:
                segment = BACKGROUND_REPEAT_VALUE_PATTERN_COMPILED.sub(swap_pair, segment)

            return BACKGROUND_POSITION_VALUES_PATTERN_COMPILED.sub(substitute_function, segment)

        value = rewrite_outside_parentheses(match.group('value'), rewrite_segment)

        return match.group('property') + match.group('colon') + value


class BackgroundPositionAxisRewrite(PatternRewrite):
    """
    Rewrite `background-position-x` and `background-position-y`.

    The property name is swapped if quarter-turned,
    and percentages are complemented if the (source) axis is flipped.
    A bare property name (e.g. in `transition-property`) is renamed only.
    """
    PATTERN_COMPILED = re.compile(
        pattern=rf'''
            (?P<property> background-position-[xy] )
            (?:
                (?P<colon> \s* : \s* )
                (?P<value> [^;{{}}]+? )
                (?P<suffix> {DECLARATION_SUFFIX_REGEX} )
            )?
        ''',
        flags=re.IGNORECASE | re.VERBOSE,
    )
    PERCENTAGE_PATTERN_COMPILED = re.compile(
        pattern=rf'(?P<prefix> ^ | \s | , ) (?P<position> -? {NUMBER_REGEX} % )',
        flags=re.IGNORECASE | re.VERBOSE,
    )

    def _substitute(self, match: re.Match, orientation: Orientation, text_changes: TextChanges) -> str:
        property_ = match.group('property')
        renamed_property = text_changes.lookup(property_)

        if match.group('colon') is None:
            return renamed_property

        if property_.lower().endswith('x'):
            is_flipped = orientation.flip_x
        else:
            is_flipped = orientation.flip_y

        def substitute_percentage(percentage_match: re.Match) -> str:
            position = percentage_match.group('position')
            if is_flipped:
                position = flip_background_position_value(position)
            return percentage_match.group('prefix') + position

        def rewrite_segment(segment: str) -> str:
            return BackgroundPositionAxisRewrite.PERCENTAGE_PATTERN_COMPILED.sub(substitute_percentage, segment)

        value = rewrite_outside_parentheses(match.group('value'), rewrite_segment)

        return renamed_property + match.group('colon') + value + match.group('suffix')


class LinearGradientRewrite(PatternRewrite):
    """
    Rewrite the explicit angle of a linear gradient.

    Standard angles run clockwise from north.
    Legacy vendor-prefixed angles run counter-clockwise from east,
    and are converted to the standard convention and back.
    An explicit zero angle is passed through unchanged.
    """
    PATTERN_COMPILED = re.compile(
        pattern=rf'''
            (?P<function>
                (?P<vendor_prefix> - (?: moz | webkit | o | ms ) - )?
                (?: repeating- )?
                linear-gradient \( \s*
            )
            (?P<angle> [+-]? {NUMBER_REGEX} )
            (?P<unit> deg | grad | rad | turn )
            (?= \s* [,)] )
        ''',
        flags=re.IGNORECASE | re.VERBOSE,
    )
    FULL_TURN_FROM_UNIT = {
        'deg': 360,
        'grad': 400,
        'rad': 2 * math.pi,
        'turn': 1,
    }

    def _substitute(self, match: re.Match, orientation: Orientation, text_changes: TextChanges) -> str:
        angle = float(match.group('angle'))
        if angle == 0:
            return match.group()

        unit = match.group('unit')
        full_turn = LinearGradientRewrite.FULL_TURN_FROM_UNIT[unit.lower()]
        quarter_turn = full_turn / 4
        is_legacy = match.group('vendor_prefix') is not None

        if is_legacy:
            angle = quarter_turn - angle

        offset = orientation.side_map[0] * quarter_turn
        if orientation.reflected:
            angle = (full_turn + (offset - angle)) % full_turn
        else:
            angle = (full_turn - (offset - angle)) % full_turn

        if is_legacy:
            angle = (quarter_turn - angle) % full_turn

        return match.group('function') + format_number(angle) + unit


class RadialGradientRewrite(PatternRewrite):
    """
    Rewrite the first argument of a radial gradient.

    The position after `at` is rewritten like a background position,
    and an explicit two-length size is transposed if quarter-turned.
    Legacy vendor-prefixed gradients may instead lead with a bare position.
    """
    PATTERN_COMPILED = re.compile(
        pattern=r'''
            (?P<function>
                (?P<vendor_prefix> - (?: moz | webkit | o | ms ) - )?
                (?: repeating- )?
                radial-gradient \( \s*
            )
            (?P<first_argument> [^,()]+? )
            (?= \s* , )
        ''',
        flags=re.IGNORECASE | re.VERBOSE,
    )
    AT_PATTERN_COMPILED = re.compile(
        pattern=r'(?P<shape> .*? ) (?P<at> (?: ^ | \s+ ) at \s+ ) (?P<position> .* )',
        flags=re.DOTALL | re.IGNORECASE | re.VERBOSE,
    )
    SIZE_PATTERN_COMPILED = re.compile(
        pattern=rf'''
            (?<! [\w.-] )
            (?P<first> {POSITION_QUANTITY_REGEX} )
            (?P<separator> \s+ )
            (?P<second> {POSITION_QUANTITY_REGEX} )
        ''',
        flags=re.IGNORECASE | re.VERBOSE,
    )
    LEGACY_POSITION_PATTERN_COMPILED = re.compile(
        pattern=rf'''
            (?: {EDGE_REGEX} | {POSITION_QUANTITY_REGEX} )
            (?: \s+ (?: {EDGE_REGEX} | {POSITION_QUANTITY_REGEX} ) )*
        ''',
        flags=re.IGNORECASE | re.VERBOSE,
    )

    def _substitute(self, match: re.Match, orientation: Orientation, text_changes: TextChanges) -> str:
        first_argument = match.group('first_argument')

        at_match = RadialGradientRewrite.AT_PATTERN_COMPILED.fullmatch(first_argument)
        if at_match is not None:
            shape = self.rewrite_shape(at_match.group('shape'), orientation)
            position = self.rewrite_position(at_match.group('position'), orientation)
            first_argument = shape + at_match.group('at') + position
        elif (
            match.group('vendor_prefix') is not None
            and RadialGradientRewrite.LEGACY_POSITION_PATTERN_COMPILED.fullmatch(first_argument)
        ):
            first_argument = self.rewrite_position(first_argument, orientation)
        else:
            first_argument = self.rewrite_shape(first_argument, orientation)

        return match.group('function') + first_argument

    @staticmethod
    def rewrite_shape(shape: str, orientation: Orientation) -> str:
        if not orientation.quarter_turned:
            return shape

        return RadialGradientRewrite.SIZE_PATTERN_COMPILED.sub(swap_pair, shape, count=1)

    @staticmethod
    def rewrite_position(position: str, orientation: Orientation) -> str:
        return BACKGROUND_POSITION_VALUES_PATTERN_COMPILED.sub(
            lambda position_match: substitute_background_position(position_match, orientation),
            position,
            count=1,
        )


class BorderImageRewrite(PatternRewrite):
    """
    Rewrite `border-image` and `border-image-slice`.

    The slice, `/ «width»`, and `/ «outset»` groups are each a one-to-four-value notation of sides.
    """
    PATTERN_COMPILED = re.compile(
        pattern=rf'''
            (?P<property> border-image (?: -slice )? \s* : \s* [^;}}]*? )
            {BORDER_IMAGE_SLICE_REGEX}
            (?:
                (?P<width_slash> (?: \s+ fill )? \s* / \s* )
                (?: {BORDER_IMAGE_WIDTH_REGEX} )?
                (?:
                    (?P<outset_slash> \s* / \s* )
                    (?: {BORDER_IMAGE_OUTSET_REGEX} )?
                )?
            )?
            {NOT_CLOSING_PARENTHESIS_LOOKAHEAD_REGEX}
        ''',
        flags=re.IGNORECASE | re.VERBOSE,
    )

    def _substitute(self, match: re.Match, orientation: Orientation, text_changes: TextChanges) -> str:
        pieces = [match.group('property')]

        for group_name, slash_group_name in (('slice', None), ('width', 'width_slash'), ('outset', 'outset_slash')):
            if slash_group_name is not None:
                pieces.append(match.group(slash_group_name) or '')
            pieces.append(
                resolve_four_notation(
                    extract_four_notation(match, group_name),
                    orientation.side_map,
                    orientation.quarter_turned,
                )
            )

        return ''.join(pieces)


class TransformFunctionRewrite(PatternRewrite):
    """
    Rewrite the functions of a `transform` declaration.

    Each function is conjugated by the orientation change,
    i.e. the transformation is re-expressed in target coordinates.
    Functions with an unexpected number of arguments are left unchanged.
    """
    PATTERN_COMPILED = re.compile(
        pattern=r'''
            (?<! [\w-] )
            (?P<property> (?: - (?: webkit | moz | ms | o ) - )? transform \s* : \s* )
            (?P<value> [^;{}]+ )
        ''',
        flags=re.IGNORECASE | re.VERBOSE,
    )
    FUNCTION_PATTERN_COMPILED = re.compile(
        pattern=r'''
            (?<! [\w-] )
            (?P<name>
                translate3d | translate[xyz]?
                  |
                scale3d | scale[xyz]?
                  |
                rotate3d | rotate[xyz]?
                  |
                skew[xy]?
                  |
                matrix3d | matrix
            )
            \(
            (?P<leading_space> \s* )
            (?P<arguments> [^()]*? )
            (?P<trailing_space> \s* )
            \)
        ''',
        flags=re.IGNORECASE | re.VERBOSE,
    )
    ARGUMENT_SEPARATOR_PATTERN_COMPILED = re.compile(
        pattern=r'( \s* , \s* | \s+ )',
        flags=re.VERBOSE,
    )

    def _substitute(self, match: re.Match, orientation: Orientation, text_changes: TextChanges) -> str:
        def substitute_function(function_match: re.Match) -> str:
            return self.rewrite_function(function_match, orientation)

        value = TransformFunctionRewrite.FUNCTION_PATTERN_COMPILED.sub(substitute_function, match.group('value'))

        return match.group('property') + value

    def rewrite_function(self, function_match: re.Match, orientation: Orientation) -> str:
        arguments = function_match.group('arguments')
        if arguments == '':
            return function_match.group()

        pieces = TransformFunctionRewrite.ARGUMENT_SEPARATOR_PATTERN_COMPILED.split(arguments)
        values = pieces[0::2]
        separators = pieces[1::2]

        name = function_match.group('name')
        result = TransformFunctionRewrite.compute_function(name, values, orientation)
        if result is None:
            return function_match.group()

        new_name, new_values = result

        if len(new_values) == len(values):
            new_pieces = [new_values[0]]
            for separator, value in zip(separators, new_values[1:]):
                new_pieces.append(separator)
                new_pieces.append(value)
            new_arguments = ''.join(new_pieces)
        else:
            new_arguments = ', '.join(new_values)

        return (
            new_name
            + '('
            + function_match.group('leading_space')
            + new_arguments
            + function_match.group('trailing_space')
            + ')'
        )

    @staticmethod
    def rename_axis(name: str, axis: str) -> str:
        return name[:-1] + preserve_case(axis, name[-1])

    @staticmethod
    def compute_function(name: str, values: list[str], orientation: Orientation) -> Optional[tuple[str, list[str]]]:
        """
        Compute the conjugated function name and arguments.

        Returns None if the function is unchanged.
        """
        function = name.lower()
        count = len(values)
        quarter_turned = orientation.quarter_turned
        reflected = orientation.reflected

        if function == 'translate':
            if count == 1:
                x, y = orientation.map_offset(values[0], '0')
                return name, [x, y] if quarter_turned else [x]
            if count == 2:
                return name, list(orientation.map_offset(values[0], values[1]))
            return None

        if function == 'translate3d':
            if count == 3:
                return name, [*orientation.map_offset(values[0], values[1]), values[2]]
            return None

        if function in ('translatex', 'translatey'):
            if count == 1:
                axis, sign = orientation.map_axis(function[-1])
                return TransformFunctionRewrite.rename_axis(name, axis), [apply_sign(values[0], sign)]
            return None

        if function == 'scale':
            if count == 2 and quarter_turned:
                return name, [values[1], values[0]]
            return None

        if function == 'scale3d':
            if count == 3 and quarter_turned:
                return name, [values[1], values[0], values[2]]
            return None

        if function in ('scalex', 'scaley'):
            if count == 1 and quarter_turned:
                axis, _ = orientation.map_axis(function[-1])
                return TransformFunctionRewrite.rename_axis(name, axis), values
            return None

        if function in ('rotate', 'rotatez'):
            if count == 1 and reflected:
                return name, [flip_sign(values[0])]
            return None

        if function in ('rotatex', 'rotatey'):
            if count == 1:
                axis, sign = orientation.map_axis(function[-1])
                if reflected:
                    sign = -sign
                return TransformFunctionRewrite.rename_axis(name, axis), [apply_sign(values[0], sign)]
            return None

        if function == 'rotate3d':
            if count == 4:
                x, y = orientation.map_offset(values[0], values[1])
                z = values[2]
                if reflected:
                    x, y, z = flip_sign(x), flip_sign(y), flip_sign(z)
                return name, [x, y, z, values[3]]
            return None

        if function == 'skew':
            skew_sign = orientation.skew_sign
            if count == 1:
                angle = apply_sign(values[0], skew_sign)
                return name, ['0', angle] if quarter_turned else [angle]
            if count == 2:
                x_angle = apply_sign(values[0], skew_sign)
                y_angle = apply_sign(values[1], skew_sign)
                return name, [y_angle, x_angle] if quarter_turned else [x_angle, y_angle]
            return None

        if function in ('skewx', 'skewy'):
            if count == 1:
                axis, _ = orientation.map_axis(function[-1])
                return TransformFunctionRewrite.rename_axis(name, axis), [apply_sign(values[0], orientation.skew_sign)]
            return None

        if function == 'matrix':
            if count == 6:
                a, b, c, d, e, f = values
                rows = conjugate_matrix([[a, c, e], [b, d, f], ['0', '0', '1']], orientation)
                return name, [rows[0][0], rows[1][0], rows[0][1], rows[1][1], rows[0][2], rows[1][2]]
            return None

        if function == 'matrix3d':
            if count == 16:
                rows = [[values[column * 4 + row] for column in range(4)] for row in range(4)]
                rows = conjugate_matrix(rows, orientation)
                return name, [rows[row][column] for column in range(4) for row in range(4)]
            return None

        return None


def conjugate_matrix(rows: list[list[str]], orientation: Orientation) -> list[list[str]]:
    """
    Conjugate a square (homogeneous) transformation matrix by the orientation change.
    """
    dimension = len(rows)
    sources, signs = orientation.compute_matrix_sources_and_signs(dimension)

    return [
        [
            apply_sign(rows[sources[row]][sources[column]], signs[row] * signs[column])
            for column in range(dimension)
        ]
        for row in range(dimension)
    ]


class TransformOriginRewrite(PatternRewrite):
    """
    Rewrite the position of `transform-origin` and `perspective-origin`.
    """
    PATTERN_COMPILED = re.compile(
        pattern=r'''
            (?<! [\w-] )
            (?P<property>
                (?: - (?: webkit | moz | ms | o ) - )?
                (?: transform | perspective ) -origin \s* : \s*
            )
            (?P<value> [^;{}]+ )
        ''',
        flags=re.IGNORECASE | re.VERBOSE,
    )

    def _substitute(self, match: re.Match, orientation: Orientation, text_changes: TextChanges) -> str:
        value = BACKGROUND_POSITION_VALUES_PATTERN_COMPILED.sub(
            lambda position_match: substitute_background_position(position_match, orientation),
            match.group('value'),
            count=1,
        )

        return match.group('property') + value


class WritingModeRewrite(PatternRewrite):
    PATTERN_COMPILED = re.compile(
        pattern=r'''
            (?P<property> writing-mode \s* : \s* )
            (?P<inline> tb | bt | rl | lr | horizontal | vertical )
            -
            (?P<block> tb | bt | rl | lr )
        ''',
        flags=re.IGNORECASE | re.VERBOSE,
    )

    def _substitute(self, match: re.Match, orientation: Orientation, text_changes: TextChanges) -> str:
        inline = text_changes.lookup(match.group('inline'))
        block = text_changes.lookup(match.group('block'))

        return match.group('property') + inline + '-' + block


class DirectionRewrite(PatternRewrite):
    PATTERN_COMPILED = re.compile(
        pattern=r'(?P<property> direction \s* : \s* ) (?P<direction> ltr | rtl )',
        flags=re.IGNORECASE | re.VERBOSE,
    )

    def _substitute(self, match: re.Match, orientation: Orientation, text_changes: TextChanges) -> str:
        direction = match.group('direction')
        if direction.lower() == 'ltr':
            return match.group('property') + preserve_case('rtl', direction)

        return match.group('property') + preserve_case('ltr', direction)


class ResizeRewrite(PatternRewrite):
    PATTERN_COMPILED = re.compile(
        pattern=r'(?P<property> resize \s* : \s* ) (?P<value> horizontal | vertical )',
        flags=re.IGNORECASE | re.VERBOSE,
    )

    def _substitute(self, match: re.Match, orientation: Orientation, text_changes: TextChanges) -> str:
        return match.group('property') + text_changes.lookup(match.group('value'))


class AxisPropertyRewrite(PatternRewrite):
    """
    Rewrite the axis of `overflow-*`, `scroll-snap-points-*`, and `scroll-snap-type-*`.
    """
    PATTERN_COMPILED = re.compile(
        pattern=rf'''
            (?P<property> overflow | scroll-snap-points | scroll-snap-type )
            -
            (?P<axis> [xy] )
            {NOT_LETTER_LOOKAHEAD_REGEX}
            {NOT_CLOSING_PARENTHESIS_LOOKAHEAD_REGEX}
            {NOT_OPENING_BRACE_LOOKAHEAD_REGEX}
        ''',
        flags=re.IGNORECASE | re.VERBOSE,
    )

    def _substitute(self, match: re.Match, orientation: Orientation, text_changes: TextChanges) -> str:
        axis = match.group('axis')
        return match.group('property') + '-' + text_changes.lookup(axis)


class SizeRewrite(PatternRewrite):
    """
    Rewrite `width` and `height` (including `min-*` and `max-*`).
    """
    PATTERN_COMPILED = re.compile(
        pattern=rf'''
            (?P<prefix> ^ | max- | min- | [^-a-z] )
            (?P<property> height | width )
            {NOT_LETTER_LOOKAHEAD_REGEX}
            {NOT_CLOSING_PARENTHESIS_LOOKAHEAD_REGEX}
            {NOT_OPENING_BRACE_LOOKAHEAD_REGEX}
        ''',
        flags=re.IGNORECASE | re.VERBOSE,
    )

    def _substitute(self, match: re.Match, orientation: Orientation, text_changes: TextChanges) -> str:
        return match.group('prefix') + text_changes.lookup(match.group('property'))


class BackgroundRepeatRewrite(PatternRewrite):
    PATTERN_COMPILED = re.compile(
        pattern=rf'''
            (?P<property> background-repeat \s* : \s* )
            (?P<value> [a-z, -]+ )
            (?P<suffix> {DECLARATION_SUFFIX_REGEX} )
        ''',
        flags=re.IGNORECASE | re.VERBOSE,
    )

    def _substitute(self, match: re.Match, orientation: Orientation, text_changes: TextChanges) -> str:
        value = BACKGROUND_REPEAT_VALUE_PATTERN_COMPILED.sub(swap_pair, match.group('value'))
        return match.group('property') + value + match.group('suffix')


class BackgroundSizeRewrite(PatternRewrite):
    PATTERN_COMPILED = re.compile(
        pattern=r'(?P<property> background-size \s* : \s* ) (?P<value> [^;{}]+ )',
        flags=re.IGNORECASE | re.VERBOSE,
    )

    def _substitute(self, match: re.Match, orientation: Orientation, text_changes: TextChanges) -> str:
        def rewrite_segment(segment: str) -> str:
            return BACKGROUND_SIZE_VALUE_PATTERN_COMPILED.sub(swap_pair, segment)

        return match.group('property') + rewrite_outside_parentheses(match.group('value'), rewrite_segment)


class MediaQueryRewrite(PatternRewrite):
    """
    Rewrite the features of `@media` queries.

    Widths and heights swap, orientations swap, and aspect ratios are inverted.
    """
    PATTERN_COMPILED = re.compile(
        pattern=r'(?P<at_rule> @media \s+ ) (?P<query> [^{]+ ) (?P<brace> \{ )',
        flags=re.IGNORECASE | re.VERBOSE,
    )
    FEATURE_PATTERN_COMPILED = re.compile(
        pattern=r'''
            (?P<feature> width | height | aspect-ratio | orientation )
            (?P<colon> \s* : \s* )
            (?P<value> [^{/()\s]+ )
            (?:
                (?P<slash> \s* / \s* )
                (?P<denominator> [0-9]+ )
            )?
        ''',
        flags=re.IGNORECASE | re.VERBOSE,
    )

    def _substitute(self, match: re.Match, orientation: Orientation, text_changes: TextChanges) -> str:
        def substitute_feature(feature_match: re.Match) -> str:
            slash = feature_match.group('slash')
            if slash is None:
                value = text_changes.lookup(feature_match.group('value'))
            else:
                value = feature_match.group('denominator') + slash + feature_match.group('value')

            return text_changes.lookup(feature_match.group('feature')) + feature_match.group('colon') + value

        query = MediaQueryRewrite.FEATURE_PATTERN_COMPILED.sub(substitute_feature, match.group('query'))

        return match.group('at_rule') + query + match.group('brace')


class BorderImageRepeatRewrite(TemplateRewrite):
    PATTERN_COMPILED = re.compile(
        pattern=rf'''
            (?P<prefix> border-image (?: -repeat )? \s* : \s* [^;}}]*? )
            (?P<first> stretch | repeat | round | space )
            (?P<space> \s+ )
            (?P<second> stretch | repeat | round | space )
            {NOT_LETTER_LOOKAHEAD_REGEX}
            {NOT_CLOSING_PARENTHESIS_LOOKAHEAD_REGEX}
        ''',
        flags=re.IGNORECASE | re.VERBOSE,
    )
    TEMPLATE = r'\g<prefix>\g<second>\g<space>\g<first>'


class BorderCornerRadiusRewrite(TemplateRewrite):
    """
    Rewrite the non-standard corner longhands `border-«horizontal»-«vertical»-radius`.
    """
    PATTERN_COMPILED = re.compile(
        pattern=rf'''
            border- (?P<horizontal> left | right ) - (?P<vertical> top | bottom ) -radius
            (?:
                (?P<colon> \s* : \s* )
                (?P<first> {QUANTITY_REGEX} )
                (?P<space> \s+ )
                (?P<second> {QUANTITY_REGEX} )
            )?
            {NOT_OPENING_BRACE_LOOKAHEAD_REGEX}
            {NOT_CLOSING_PARENTHESIS_LOOKAHEAD_REGEX}
        ''',
        flags=re.IGNORECASE | re.VERBOSE,
    )
    TEMPLATE = r'border-\g<vertical>-\g<horizontal>-radius\g<colon>\g<second>\g<space>\g<first>'

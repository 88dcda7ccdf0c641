"""
# CSSJanus: core.py

Licensed under "MIT No Attribution" (MIT-0), see LICENSE.

Core transformation logic.

A stylesheet written for a source writing direction (by default `lr-tb`, i.e. left-to-right)
is rewritten for a target writing direction (by default `rl-tb`, i.e. right-to-left).
Only orientation-sensitive constructs are rewritten; everything else is left byte-identical.
Declarations and rules preceded by `/* @noflip */` are left alone.
"""

from typing import Any, Mapping, NamedTuple, Optional, Union

from cssjanus.authorities import RewriteAuthority
from cssjanus.constants import (
    DEFAULT_SOURCE_DIR,
    DEFAULT_TARGET_DIR,
    TRANSFORM_DIR_IN_URL_FLAG_NAME,
    TRANSFORM_EDGE_IN_URL_FLAG_NAME,
)
from cssjanus.exceptions import UnrecognisedOptionException
from cssjanus.orientation import solve_orientation


class TransformOptions(NamedTuple):
    transform_dir_in_url: bool = False
    transform_edge_in_url: bool = False
    source_dir: str = DEFAULT_SOURCE_DIR
    target_dir: str = DEFAULT_TARGET_DIR


OPTION_NAME_FROM_ALIAS = {
    'transformDirInUrl': 'transform_dir_in_url',
    'transformEdgeInUrl': 'transform_edge_in_url',
    'sourceDir': 'source_dir',
    'targetDir': 'target_dir',
}


def parse_options(options: Union[None, bool, Mapping[str, Any], TransformOptions] = None,
                  transform_edge_in_url: Optional[bool] = None) -> TransformOptions:
    """
    Parse transformation options.

    `options` may be None, a `TransformOptions`, a mapping (with snake_case or camelCase keys),
    or a boolean (`transform_dir_in_url`, with `transform_edge_in_url` following it).
    Empty directions fall back to the defaults.
    """
    if options is None:
        parsed_options = TransformOptions()
    elif isinstance(options, TransformOptions):
        parsed_options = options
    elif isinstance(options, bool):
        parsed_options = TransformOptions(transform_dir_in_url=options)
    elif isinstance(options, Mapping):
        option_values = {}
        for option_name, value in options.items():
            option_name = OPTION_NAME_FROM_ALIAS.get(option_name, option_name)
            if option_name not in TransformOptions._fields:
                raise UnrecognisedOptionException(option_name)
            option_values[option_name] = value
        parsed_options = TransformOptions(**option_values)
    else:
        raise UnrecognisedOptionException(type(options).__name__)

    if transform_edge_in_url is not None:
        parsed_options = parsed_options._replace(transform_edge_in_url=transform_edge_in_url)

    return parsed_options._replace(
        transform_dir_in_url=bool(parsed_options.transform_dir_in_url),
        transform_edge_in_url=bool(parsed_options.transform_edge_in_url),
        source_dir=parsed_options.source_dir or DEFAULT_SOURCE_DIR,
        target_dir=parsed_options.target_dir or DEFAULT_TARGET_DIR,
    )


def transform(css: str, options: Union[None, bool, Mapping[str, Any], TransformOptions] = None,
              transform_edge_in_url: Optional[bool] = None, *,
              source_dir: Optional[str] = None, target_dir: Optional[str] = None,
              verbose_mode_enabled: bool = False) -> str:
    """
    Transform a stylesheet from one writing direction to another.
    """
    parsed_options = parse_options(options, transform_edge_in_url)
    if source_dir:
        parsed_options = parsed_options._replace(source_dir=source_dir)
    if target_dir:
        parsed_options = parsed_options._replace(target_dir=target_dir)

    orientation = solve_orientation(parsed_options.source_dir, parsed_options.target_dir)
    if orientation.is_identity:
        return css

    enabled_flag_names = orientation.flag_names
    if parsed_options.transform_dir_in_url:
        enabled_flag_names.add(TRANSFORM_DIR_IN_URL_FLAG_NAME)
    if parsed_options.transform_edge_in_url:
        enabled_flag_names.add(TRANSFORM_EDGE_IN_URL_FLAG_NAME)

    rewrite_authority = RewriteAuthority(verbose_mode_enabled)
    css = rewrite_authority.execute(css, orientation, enabled_flag_names)

    return css

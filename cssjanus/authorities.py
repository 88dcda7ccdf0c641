"""
# CSSJanus: authorities.py

Licensed under "MIT No Attribution" (MIT-0), see LICENSE.

The higher power that governs the rewrite logic.
"""

from typing import Optional

from cssjanus.bases import Rewrite
from cssjanus.constants import (
    DIR_FLIPPED_FLAG_NAME,
    QUARTER_TURNED_FLAG_NAME,
    TRANSFORM_DIR_IN_URL_FLAG_NAME,
    TRANSFORM_EDGE_IN_URL_FLAG_NAME,
)
from cssjanus.orientation import Orientation, TextChanges
from cssjanus.placeholders import (
    COMMENT_PATTERN_COMPILED,
    NOFLIP_CLASS_PATTERN_COMPILED,
    NOFLIP_SINGLE_PATTERN_COMPILED,
    CalcTokenizer,
    Tokenizer,
    escape_placeholder_delimiters,
)
from cssjanus.rewrites import (
    AxisPropertyRewrite,
    BackgroundPositionAxisRewrite,
    BackgroundRepeatRewrite,
    BackgroundRewrite,
    BackgroundSizeRewrite,
    BorderCornerRadiusRewrite,
    BorderImageRepeatRewrite,
    BorderImageRewrite,
    BorderRadiusRewrite,
    CursorRewrite,
    DirectionInUrlRewrite,
    DirectionRewrite,
    EdgeInUrlRewrite,
    FourNotationColorRewrite,
    FourNotationQuantityRewrite,
    LinearGradientRewrite,
    MediaQueryRewrite,
    RadialGradientRewrite,
    ResizeRewrite,
    ShadowRewrite,
    SidesRewrite,
    SizeRewrite,
    TransformFunctionRewrite,
    TransformOriginRewrite,
    WritingModeRewrite,
)


class RewriteAuthority:
    """
    Object governing the application of rewrite passes.

    ## `execute`

    1. Escapes placeholder delimiters.
    2. Protects `@noflip` declarations, `@noflip` rules, comments, and `calc()` expressions (in that order).
    3. Applies the rewrite passes in queue order, skipping those whose flag is not enabled.
    4. Restores the protected strings (in the reverse order).
    """
    _rewrite_queue: list['Rewrite']
    _verbose_mode_enabled: bool

    def __init__(self, verbose_mode_enabled: bool = False):
        self._verbose_mode_enabled = verbose_mode_enabled
        self._rewrite_queue = self.build_rewrite_queue()

    @property
    def rewrite_queue(self) -> list['Rewrite']:
        return self._rewrite_queue

    def build_rewrite_queue(self) -> list['Rewrite']:
        verbose_mode_enabled = self._verbose_mode_enabled

        return [
            DirectionInUrlRewrite('direction-in-url', TRANSFORM_DIR_IN_URL_FLAG_NAME, verbose_mode_enabled),
            EdgeInUrlRewrite('edge-in-url', TRANSFORM_EDGE_IN_URL_FLAG_NAME, verbose_mode_enabled),
            SidesRewrite('sides', None, verbose_mode_enabled),
            CursorRewrite('cursors', None, verbose_mode_enabled),
            BorderRadiusRewrite('border-radius', None, verbose_mode_enabled),
            ShadowRewrite('shadows', None, verbose_mode_enabled),
            FourNotationQuantityRewrite('four-notation-quantities', None, verbose_mode_enabled),
            FourNotationColorRewrite('four-notation-colors', None, verbose_mode_enabled),
            BackgroundRewrite('backgrounds', None, verbose_mode_enabled),
            BackgroundPositionAxisRewrite('background-position-axes', None, verbose_mode_enabled),
            LinearGradientRewrite('linear-gradients', None, verbose_mode_enabled),
            RadialGradientRewrite('radial-gradients', None, verbose_mode_enabled),
            BorderImageRewrite('border-images', None, verbose_mode_enabled),
            TransformFunctionRewrite('transform-functions', None, verbose_mode_enabled),
            TransformOriginRewrite('transform-origins', None, verbose_mode_enabled),
            WritingModeRewrite('writing-modes', None, verbose_mode_enabled),
            DirectionRewrite('directions', DIR_FLIPPED_FLAG_NAME, verbose_mode_enabled),
            ResizeRewrite('resizes', QUARTER_TURNED_FLAG_NAME, verbose_mode_enabled),
            AxisPropertyRewrite('axis-properties', QUARTER_TURNED_FLAG_NAME, verbose_mode_enabled),
            SizeRewrite('sizes', QUARTER_TURNED_FLAG_NAME, verbose_mode_enabled),
            BackgroundRepeatRewrite('background-repeats', QUARTER_TURNED_FLAG_NAME, verbose_mode_enabled),
            BackgroundSizeRewrite('background-sizes', QUARTER_TURNED_FLAG_NAME, verbose_mode_enabled),
            MediaQueryRewrite('media-queries', QUARTER_TURNED_FLAG_NAME, verbose_mode_enabled),
            BorderImageRepeatRewrite('border-image-repeats', QUARTER_TURNED_FLAG_NAME, verbose_mode_enabled),
            BorderCornerRadiusRewrite('border-corner-radii', QUARTER_TURNED_FLAG_NAME, verbose_mode_enabled),
        ]

    @staticmethod
    def build_tokenizers() -> list['Tokenizer']:
        """
        Build fresh tokenizers, in tokenizing order.
        """
        return [
            Tokenizer(NOFLIP_SINGLE_PATTERN_COMPILED, 'NOFLIP_SINGLE'),
            Tokenizer(NOFLIP_CLASS_PATTERN_COMPILED, 'NOFLIP_CLASS'),
            Tokenizer(COMMENT_PATTERN_COMPILED, 'COMMENT'),
            CalcTokenizer(),
        ]

    def execute(self, css: str, orientation: Orientation,
                enabled_flag_names: Optional[set[str]] = None) -> str:
        if enabled_flag_names is None:
            enabled_flag_names = orientation.flag_names

        text_changes = TextChanges(orientation)
        tokenizers = RewriteAuthority.build_tokenizers()

        css = escape_placeholder_delimiters(css)
        for tokenizer in tokenizers:
            css = tokenizer.tokenize(css)

        for rewrite in self._rewrite_queue:
            css = rewrite.apply(css, orientation, text_changes, enabled_flag_names)

        for tokenizer in reversed(tokenizers):
            css = tokenizer.detokenize(css)

        return css

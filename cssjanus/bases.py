"""
# CSSJanus: bases.py

Licensed under "MIT No Attribution" (MIT-0), see LICENSE.

Base classes for rewrite passes.
"""

import abc
import re
from typing import Optional

from cssjanus.constants import VERBOSE_MODE_DIVIDER_SYMBOL_COUNT
from cssjanus.orientation import Orientation, TextChanges


class Rewrite(abc.ABC):
    """
    Base class for a rewrite pass.

    A pass with a positive flag is skipped unless its flag is among the enabled flag names.
    """
    _id: str
    _positive_flag_name: Optional[str]
    _verbose_mode_enabled: bool

    def __init__(self, id_: str, positive_flag_name: Optional[str] = None, verbose_mode_enabled: bool = False):
        self._id = id_
        self._positive_flag_name = positive_flag_name
        self._verbose_mode_enabled = verbose_mode_enabled

    @property
    def id_(self) -> str:
        return self._id

    @property
    def positive_flag_name(self) -> Optional[str]:
        return self._positive_flag_name

    def apply(self, css: str, orientation: Orientation, text_changes: TextChanges,
              enabled_flag_names: Optional[set[str]] = None) -> str:
        if enabled_flag_names is not None:
            positive_flag_name = self._positive_flag_name
            if positive_flag_name is not None and positive_flag_name not in enabled_flag_names:
                return css

        css_before = css
        css = self._apply(css, orientation, text_changes)
        css_after = css

        if self._verbose_mode_enabled:
            if css_before == css_after:
                no_change_indicator = ' (no change)'
            else:
                no_change_indicator = ''

            print('<' * VERBOSE_MODE_DIVIDER_SYMBOL_COUNT + f' BEFORE #{self._id}')
            print(css_before)
            print('=' * VERBOSE_MODE_DIVIDER_SYMBOL_COUNT + no_change_indicator)
            print(css_after)
            print('>' * VERBOSE_MODE_DIVIDER_SYMBOL_COUNT + f' AFTER #{self._id}')
            print('\n\n\n\n')

        return css_after

    @abc.abstractmethod
    def _apply(self, css: str, orientation: Orientation, text_changes: TextChanges) -> str:
        """
        Apply the rewrite to a (tokenized) stylesheet.
        """
        raise NotImplementedError


class PatternRewrite(Rewrite, abc.ABC):
    """
    Base class for a rewrite pass substituting every match of a compiled pattern.

    Subclasses set `PATTERN_COMPILED` and implement `_substitute(...)`.
    """
    PATTERN_COMPILED: re.Pattern

    def _apply(self, css: str, orientation: Orientation, text_changes: TextChanges) -> str:
        def substitute_function(match: re.Match) -> str:
            return self._substitute(match, orientation, text_changes)

        return self.PATTERN_COMPILED.sub(substitute_function, css)

    @abc.abstractmethod
    def _substitute(self, match: re.Match, orientation: Orientation, text_changes: TextChanges) -> str:
        """
        Compute the replacement for a match.
        """
        raise NotImplementedError


class TemplateRewrite(PatternRewrite, abc.ABC):
    """
    Base class for a rewrite pass substituting every match of a compiled pattern by a fixed template.

    Subclasses set `PATTERN_COMPILED` and `TEMPLATE` (in the syntax of `re.Match.expand`).
    """
    TEMPLATE: str

    def _substitute(self, match: re.Match, orientation: Orientation, text_changes: TextChanges) -> str:
        return match.expand(self.TEMPLATE)

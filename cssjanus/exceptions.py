"""
# CSSJanus: exceptions.py

Licensed under "MIT No Attribution" (MIT-0), see LICENSE.

Exception classes.
"""


class UnrecognisedDirectionException(Exception):
    _direction: str

    def __init__(self, direction: str):
        super().__init__(f'error: unrecognised direction `{direction}` (expected e.g. `lr-tb` or `tb-rl`)')
        self._direction = direction

    @property
    def direction(self) -> str:
        return self._direction


class UnrecognisedOptionException(Exception):
    _option_name: str

    def __init__(self, option_name: str):
        super().__init__(f'error: unrecognised option `{option_name}`')
        self._option_name = option_name

    @property
    def option_name(self) -> str:
        return self._option_name

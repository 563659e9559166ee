# -*- encoding: utf-8 -*-
# @File   : errors.py
# @Time   : 2024/11/02 21:40:17
# @Author : Kariko Lin

"""Exceptions raised by `sini`.

Three kinds, all synchronous, none recovered internally:
- `ParseError`: malformed INI text.
- `ConversionError`: a stored string is not readable as the requested type.
- `ProxyError`: a section or property required to exist does not.
"""


class SiniError(Exception):
    """Base of every error raised by this package."""
    pass


class ParseError(SiniError, ValueError):
    """To record the first structural error met when parsing INI text."""

    def __init__(
        self, message: str, *,
        pos: int | None = None,
        lineno: int | None = None,
        colno: int | None = None,
        line: str | None = None
    ) -> None:
        super().__init__(message)
        self.message = message
        self.pos = pos
        self.lineno = lineno
        self.colno = colno
        self.line = line

    def __str__(self) -> str:
        if self.lineno is None:
            return self.message
        ret = f'{self.message} (line {self.lineno}, column {self.colno})'
        if self.line is not None:
            ret += f'\n    {self.line}\n    {" " * (self.colno - 1)}^'
        return ret


class ConversionError(ParseError):
    """A value's text can not be read as the requested type.

    Still a `ParseError`, but never raised for malformed documents,
    so `except ConversionError` tells "wrong type" apart.
    """

    def __init__(self, text: str, type_: type, reason: str = '') -> None:
        message = f'cannot read {text!r} as {type_.__name__}'
        if reason:
            message += f': {reason}'
        super().__init__(message)
        self.text = text
        self.type_ = type_


class ProxyError(SiniError, KeyError):
    """Requested property (or section) does not exist."""

    def __init__(self, key: str, section: str | None = None) -> None:
        super().__init__(key)
        self.key = key
        self.section = section

    def __str__(self) -> str:
        if self.section is None:
            return f'section [{self.key}] does not exist'
        return f'property "{self.key}" does not exist in [{self.section}]'

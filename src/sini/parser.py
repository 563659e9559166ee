# -*- encoding: utf-8 -*-
# @File   : parser.py
# @Time   : 2024/11/04 00:31:26
# @Author : Kariko Lin

"""INI text -> `Document`, in a single linear pass.

Grammar (whitespace = space/tab, skipped between tokens):

    file     := line (eol line)*
    line     := [section | property] [comment]
    section  := '[' name ']'
    property := key '=' value
    value    := "'" ... "'" | '"' ... '"' | raw | <empty>
    comment  := ';' ... eol

Value alternatives are tried in the order above. Once an opening
quote, a `[` or a key has been seen, a missing closing part is an
error rather than a fallback to another alternative.
"""

import logging

from .consts import BLANKS, BOM, EOL, KEY_HEAD, KEY_TAIL
from .errors import ParseError
from .model import Document, Section


class IniParser:
    def __init__(self, text: str) -> None:
        # editors on Windows like to lead utf-8 files with a BOM.
        self._text = text.removeprefix(BOM)
        self._pos = 0
        self._lineno = 1
        self._line_start = 0
        self._doc = Document()
        self._cur: Section = self._doc.default

    # -- cursor ---------------------------------------------------------

    @property
    def _eof(self) -> bool:
        return self._pos >= len(self._text)

    def _peek(self) -> str:
        return '' if self._eof else self._text[self._pos]

    def _skip_blanks(self) -> None:
        while not self._eof and self._text[self._pos] in BLANKS:
            self._pos += 1

    def _error(self, expecting: str, pos: int | None = None) -> ParseError:
        if pos is None:
            pos = self._pos
        end = self._pos
        while end < len(self._text) and self._text[end] not in EOL:
            end += 1
        return ParseError(
            f'expecting {expecting}',
            pos=pos,
            lineno=self._lineno,
            colno=pos - self._line_start + 1,
            line=self._text[self._line_start:end])

    # -- rules ------------------------------------------------------------

    def _eol(self) -> bool:
        if self._text.startswith('\r\n', self._pos):
            self._pos += 2
        elif self._peek() in ('\n', '\r'):
            self._pos += 1
        else:
            return False
        self._lineno += 1
        self._line_start = self._pos
        return True

    def _comment(self) -> None:
        # ';' to end of line, dropped.
        while not self._eof and self._text[self._pos] not in EOL:
            self._pos += 1

    def _section(self) -> None:
        self._pos += 1  # '['
        start = self._pos
        while not self._eof and self._text[self._pos] not in ']\r\n':
            self._pos += 1
        if self._peek() != ']':
            raise self._error('"]" to close section header')
        name = self._text[start:self._pos].strip(BLANKS)
        if not name:
            raise self._error('section name', start)
        self._pos += 1
        logging.debug(f'INI line {self._lineno}: enter section [{name}]')
        self._cur = self._doc.section(name)

    def _key(self) -> str:
        start = self._pos
        while not self._eof and self._text[self._pos] in KEY_TAIL:
            self._pos += 1
        # inner blanks are part of the key, trailing ones are not.
        return self._text[start:self._pos].rstrip(' ')

    def _quoted(self) -> str:
        mark, start = self._text[self._pos], self._pos
        self._pos += 1
        chars: list[str] = []
        while not self._eof and self._text[self._pos] not in EOL:
            ch = self._text[self._pos]
            if ch == '\\' and self._text.startswith(mark, self._pos + 1):
                chars.append(mark)
                self._pos += 2
                continue
            if ch == mark:
                self._pos += 1
                return ''.join(chars)
            chars.append(ch)
            self._pos += 1
        raise self._error(
            f'closing {mark} of value quoted at column '
            f'{start - self._line_start + 1}')

    def _raw(self) -> str:
        chunks: list[str] = []
        while not self._eof:
            self._skip_blanks()
            # a chunk led by ';' starts the comment.
            if self._eof or self._text[self._pos] in EOL + ';':
                break
            start = self._pos
            while not self._eof and self._text[self._pos] not in BLANKS + EOL:
                self._pos += 1
            chunks.append(self._text[start:self._pos])
        return ' '.join(chunks)

    def _value(self) -> str:
        if self._peek() in ('\'', '"'):
            return self._quoted()
        return self._raw()

    def _property(self) -> None:
        key = self._key()
        self._skip_blanks()
        if self._peek() != '=':
            raise self._error(f'"=" after key "{key}"')
        self._pos += 1
        self._skip_blanks()
        value = self._value()
        if key in self._cur:
            logging.debug(
                f'INI line {self._lineno}: [{self._cur.name}] "{key}" '
                'overridden by later value.')
        self._cur._set_value(key, value)

    def _line(self) -> None:
        self._skip_blanks()
        ch = self._peek()
        if ch == '[':
            self._section()
        elif ch in KEY_HEAD:
            self._property()
        elif ch and ch not in EOL + ';':
            raise self._error('section header, property key or comment')
        self._skip_blanks()
        if self._peek() == ';':
            self._comment()
        if not self._eof and self._peek() not in EOL:
            raise self._error('end of line')

    def parse(self) -> Document:
        self._line()
        while self._eol():
            self._line()
        return self._doc


def parse(text: str) -> Document:
    """读取解码好的 INI 字符串。

    Raises:
        ParseError: at the first structural error, no partial result.
    """
    return IniParser(text).parse()

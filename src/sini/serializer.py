# -*- encoding: utf-8 -*-
# @File   : serializer.py
# @Time   : 2024/11/03 16:48:30
# @Author : Kariko Lin

"""Render a `Document` back to INI text.

Output is normalized: sections and keys in key order, and quoting
derived from the value's shape only (the source quote style is lost).
"""

from typing import TYPE_CHECKING

from .consts import BLANKS, EOL, KEY_HEAD, KEY_TAIL

if TYPE_CHECKING:
    from .model import Document, Section


def _chunks(value: str) -> list[str]:
    # the way raw values get split when read back.
    return [i for i in value.replace('\t', ' ').split(' ') if i]


def _needs_quotes(value: str) -> bool:
    if not value:
        return False
    if value[0] in BLANKS or value[-1] in BLANKS:
        return True
    # the rest would not read back as a raw value:
    # opening quotes, a chunk taken as comment, or blanks raw values collapse.
    chunks = _chunks(value)
    return (value[0] in '\'"'
            or any(i.startswith(';') for i in chunks)
            or ' '.join(chunks) != value)


def check_key(key: str) -> None:
    """Raise `ValueError` if `key` would not read back as the same key."""
    if (not key or key[0] not in KEY_HEAD or key[-1] == ' '
            or not KEY_TAIL.issuperset(key)):
        raise ValueError(f'invalid property key {key!r}')


def check_section_name(name: str) -> None:
    """Raise `ValueError` if `[name]` would not read back as `name`.

    The default section "" is never written as a header.
    """
    if (not name or name[0] in BLANKS or name[-1] in BLANKS
            or any(i in name for i in ']' + EOL)):
        raise ValueError(f'invalid section name {name!r}')


def check_value(value: str) -> None:
    """Raise `ValueError` if no single INI line can hold `value`."""
    if any(i in value for i in EOL):
        raise ValueError(f'value {value!r} spans more than one line')
    # only \" is an escape, so a closing quote after '\' is lost.
    if value.endswith('\\') and _needs_quotes(value):
        raise ValueError(f'quoted value {value!r} can not end with "\\"')


def quote(value: str) -> str:
    """Wrap in double quotes when led or trailed by blanks.

    Values that would not survive re-parsing bare get quoted too,
    everything else is emitted as is (no escaping of `;` or `=`).
    """
    check_value(value)
    if _needs_quotes(value):
        return '"%s"' % value.replace('"', r'\"')
    return value


def _output_section(
    section: 'Section', blank_lines: int, delimiter: str
) -> str:
    lines = [] if section.name == '' else [f'[{section.name}]\n']
    for key, value in section.items():
        lines.append(f'{key}{delimiter}{quote(value)}\n')
    lines.append('\n' * blank_lines)
    return ''.join(lines)


def dumps(
    doc: 'Document', *,
    blank_lines: int = 1,
    delimiter: str = '='
) -> str:
    """保存为 INI 文本。

    Args:
        blank_lines: how many lines after each section?
        delimiter: how to connect key with value? Blanks around `=` only.
    """
    if blank_lines < 0:
        raise ValueError(f'blank_lines must be >= 0, got {blank_lines}')
    if delimiter.strip(BLANKS) != '=':
        raise ValueError(f'delimiter must be "=" padded by blanks, got {delimiter!r}')

    buffers = []
    for name, section in doc.items():
        # an empty default section gets no block at all.
        if name == '' and not len(section):
            continue
        buffers.append(_output_section(section, blank_lines, delimiter))
    return ''.join(buffers)

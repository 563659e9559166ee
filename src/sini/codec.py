# -*- encoding: utf-8 -*-
# @File   : codec.py
# @Time   : 2024/11/02 22:05:43
# @Author : Kariko Lin

"""String <-> typed value conversion, independent of storage.

Quoting is *not* done here; see `serializer.quote()`.
"""

import math
import warnings
from re import compile as regex
from typing import Any, Callable, TypeVar

from .errors import ConversionError

T = TypeVar('T')

FALSEY = frozenset(('0', 'f', 'n', 'off', 'no', 'false'))
TRUTHY = frozenset(('1', 't', 'y', 'on', 'yes', 'true'))

# digits allowed after the prefix, per base.
_DIGITS = {
    16: regex(r'[0-9a-fA-F]+'),
    8: regex(r'[0-7]+'),
    2: regex(r'[01]+'),
    10: regex(r'[0-9]+'),
}
_FLOAT = regex(r'[+-]?(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?')


def _str2bool(text: str) -> bool:
    token = text.lower()
    if token in FALSEY:
        return False
    if token in TRUTHY:
        return True
    raise ConversionError(text, bool, 'not a boolean token')


def _str2int(text: str) -> int:
    negative = text.startswith('-')
    digits = text[1:] if negative else text
    if digits[:2] in ('0x', '0X'):
        base, digits = 16, digits[2:]
    elif digits[:2] in ('0b', '0B'):
        base, digits = 2, digits[2:]
    elif len(digits) > 1 and digits[0] == '0':
        base, digits = 8, digits[1:]
    else:
        base = 10
    if negative and base != 10:
        raise ConversionError(text, int, 'sign only allowed on decimals')
    # int() itself would also take '_' and blanks, so check first.
    if not _DIGITS[base].fullmatch(digits):
        raise ConversionError(text, int, f'invalid digits for base {base}')
    value = int(digits, base)
    return -value if negative else value


def _str2float(text: str) -> float:
    if not _FLOAT.fullmatch(text):
        raise ConversionError(text, float)
    return float(text)


def _bool2str(value: bool) -> str:
    return 'true' if value else 'false'


def _float2str(value: float) -> str:
    if not math.isfinite(value):
        raise ConversionError(str(value), float, 'not a finite number')
    return repr(value)


# type -> (stringify, destringify)
_CODECS: dict[type, tuple[Callable[[Any], str], Callable[[str], Any]]] = {
    str: (str, str),
    bool: (_bool2str, _str2bool),
    int: (str, _str2int),
    float: (_float2str, _str2float),
}


def register_codec(
    type_: type[T],
    to_str: Callable[[T], str],
    from_str: Callable[[str], T]
) -> None:
    """注册自定义类型的编解码函数。

    `from_str` 无法解析时应抛出`ConversionError`（或`ValueError`，会被转换）。
    """
    if type_ in _CODECS:
        warnings.warn(f'类型 {type_.__name__} 的编解码函数已存在，将被覆盖。')
    _CODECS[type_] = (to_str, from_str)


def _lookup(type_: type) -> tuple[Callable[[Any], str], Callable[[str], Any]]:
    try:
        return _CODECS[type_]
    except KeyError:
        raise TypeError(f'no codec for type {type_.__name__}') from None


def stringify(value: object) -> str:
    """Canonical text of `value`. Strings pass through unchanged."""
    # exact type first, then bases; bool before int, as bool is an int.
    for type_ in (type(value), bool, *_CODECS):
        if type_ in _CODECS and isinstance(value, type_):
            return _CODECS[type_][0](value)
    raise TypeError(f'no codec for type {type(value).__name__}')


def destringify(text: str, type_: type[T]) -> T:
    """Read `text` as `type_`, raising `ConversionError` on failure."""
    from_str = _lookup(type_)[1]
    try:
        return from_str(text)
    except ConversionError:
        raise
    except ValueError as e:
        raise ConversionError(text, type_, str(e)) from e

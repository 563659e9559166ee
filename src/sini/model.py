# -*- encoding: utf-8 -*-
# @File   : model.py
# @Time   : 2024/11/03 13:20:51
# @Author : Kariko Lin

"""
Basically INI structure: a document of sections, each of `key=value` pairs.

Every value is kept as a string. Sections and keys iterate in key order
(plain `str` comparison), never in insertion order.
"""

from typing import Any, Iterator, TypeVar

from .codec import stringify
from .errors import ProxyError
from .proxy import ConstPropertyProxy, PropertyProxy
from .serializer import check_key, check_section_name, check_value, dumps

T = TypeVar('T')


class Section:
    """INI 小节。

    `section[key]` 返回读写句柄（键不存在也不会报错），
    `section.at(key)` 返回只读句柄（键不存在立即抛出`ProxyError`）。
    取值请用句柄的`as_()`，例如`section['a'].as_(int)`。
    """

    def __init__(self, name: str) -> None:
        if name != '':
            check_section_name(name)
        self._name = name
        self.__props: dict[str, str] = {}

    @property
    def name(self) -> str:
        return self._name

    # the only write path to the collection.
    # refuses what could not be written out and read back unchanged.
    def _set_value(self, key: str, value: str) -> None:
        check_key(key)
        check_value(value)
        self.__props[key] = value

    def _raw(self, key: str) -> str:
        return self.__props[key]

    def property(self, key: str) -> PropertyProxy:
        return PropertyProxy(self, key)

    def property_or_fail(self, key: str) -> ConstPropertyProxy:
        if key not in self.__props:
            raise ProxyError(key, self._name)
        return ConstPropertyProxy(self, key)

    __getitem__ = property
    at = property_or_fail

    def __setitem__(self, key: str, value: Any) -> None:
        self._set_value(key, stringify(value))

    def __delitem__(self, key: str) -> None:
        if key not in self.__props:
            raise ProxyError(key, self._name)
        del self.__props[key]

    def __contains__(self, key: object) -> bool:
        return key in self.__props

    def __len__(self) -> int:
        return len(self.__props)

    def __iter__(self) -> Iterator[str]:
        return iter(sorted(self.__props))

    def items(self) -> list[tuple[str, str]]:
        return sorted(self.__props.items())

    def get(self, key: str, type_: type[T] = str) -> T:
        """一次性读取，等价于`self.at(key).as_(type_)`。"""
        return self.property_or_fail(key).as_(type_)

    def set(self, key: str, value: Any) -> None:
        self._set_value(key, stringify(value))

    def to_dict(self) -> dict[str, str]:
        return dict(self.items())

    def __str__(self) -> str:
        return f'[{self._name}]'

    def __repr__(self) -> str:
        return '[%s] { .cnt = %d }' % (self._name, len(self))


class Document:
    """INI 文件表示。支持以下形式的小节和键值对：

        ```ini
        key = val  ; 位于任何小节之前，归入名为 "" 的默认小节。

        [section]
        Scientific Notation 1 = 1.5e3
        quoted = "  keeps blanks  "
        ```

    默认小节`self['']`总是存在。小节在首次访问时创建，不会被隐式删除。
    """
    DEFAULT = ''

    def __init__(self) -> None:
        self.__sections: dict[str, Section] = {self.DEFAULT: Section(self.DEFAULT)}

    @property
    def default(self) -> Section:
        """位于文件头部的，不属于任何小节的键值对。"""
        return self.__sections[self.DEFAULT]

    def section(self, name: str) -> Section:
        if name not in self.__sections:
            self.__sections[name] = Section(name)
        return self.__sections[name]

    def section_or_fail(self, name: str) -> Section:
        if name not in self.__sections:
            raise ProxyError(name)
        return self.__sections[name]

    __getitem__ = section
    at = section_or_fail
    add_section = section

    def __contains__(self, name: object) -> bool:
        return name in self.__sections

    def __len__(self) -> int:
        return len(self.__sections)

    def __iter__(self) -> Iterator[str]:
        return iter(sorted(self.__sections))

    def items(self) -> list[tuple[str, Section]]:
        return sorted(self.__sections.items())

    def update(self, another: 'Document') -> None:
        """To merge `another` into self. Later values win."""
        for name, sect in another.items():
            this = self.section(name)
            for key, value in sect.items():
                this._set_value(key, value)

    def read_string(self, text: str) -> None:
        """Parse `text` and merge it in.

        Parsing goes into a fresh document first,
        so a `ParseError` leaves self untouched.
        """
        from .parser import parse
        self.update(parse(text))

    def to_dict(self) -> dict[str, dict[str, str]]:
        return {name: sect.to_dict() for name, sect in self.items()}

    def serialize(self, *, blank_lines: int = 1, delimiter: str = '=') -> str:
        return dumps(self, blank_lines=blank_lines, delimiter=delimiter)

    def __str__(self) -> str:
        return self.serialize()

    def __repr__(self) -> str:
        return '<Document { .sections = %d }>' % len(self)

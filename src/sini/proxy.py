# -*- encoding: utf-8 -*-
# @File   : proxy.py
# @Time   : 2024/11/03 14:12:09
# @Author : Kariko Lin

"""Existence-aware property handles.

A handle is either "found" or "not found" *at the time it is read*:
existence is checked again on every read, since another handle
may have created the key in between. Handles borrow their section
and must not outlive it.
"""

from typing import TYPE_CHECKING, Any, TypeVar

from .codec import destringify, stringify
from .errors import ProxyError

if TYPE_CHECKING:
    from .model import Section

T = TypeVar('T')


class ConstPropertyProxy:
    """只读句柄。`Section.property_or_fail()` 即返回此类。"""

    def __init__(self, section: 'Section', key: str) -> None:
        self._section = section
        self._key = key

    @property
    def key(self) -> str:
        return self._key

    @property
    def section(self) -> 'Section':
        return self._section

    @property
    def exists(self) -> bool:
        return self._key in self._section

    @property
    def raw(self) -> str:
        """The stored string, exactly as kept in the section."""
        if not self.exists:
            raise ProxyError(self._key, self._section.name)
        return self._section._raw(self._key)

    def as_(self, type_: type[T] = str) -> T:
        """Read the value as `type_`.

        Raises `ProxyError` if the key is absent, and `ConversionError`
        if the stored text is not a valid `type_`.
        """
        return destringify(self.raw, type_)

    def __int__(self) -> int:
        return self.as_(int)

    def __float__(self) -> float:
        return self.as_(float)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, ConstPropertyProxy):
            return (self.exists == other.exists
                    and (not self.exists or self.raw == other.raw))
        if isinstance(other, str):
            return self.exists and self.raw == other
        return NotImplemented

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        state = repr(self.raw) if self.exists else '<undefined>'
        return f'<{type(self).__name__} [{self._section.name}] {self._key}={state}>'


class PropertyProxy(ConstPropertyProxy):
    """读写句柄。键不存在时也能构造，写入时才创建。"""

    def set(self, value: Any) -> 'PropertyProxy':
        """Stringify `value` and store it, creating the key if absent."""
        self._section._set_value(self._key, stringify(value))
        return self

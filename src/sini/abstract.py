# -*- encoding: utf-8 -*-
# @File   : abstract.py
# @Time   : 2024/11/05 19:02:44
# @Author : Kariko Lin

import logging
from abc import ABCMeta, abstractmethod
from typing import Any, Generic, TypeVar

import chardet

T = TypeVar('T')


class FileHandler(Generic[T], metaclass=ABCMeta):
    """Text file <-> `T`.

    The handler does the disk and encoding work,
    subclasses only convert between text and `T`.
    """

    def __init__(self, filename: str, encoding: str | None = None) -> None:
        self._fn = filename
        self._codec = encoding

    @abstractmethod
    def loads(self, text: str) -> T:
        raise NotImplementedError

    @abstractmethod
    def dumps(self, instance: T, **options: Any) -> str:
        raise NotImplementedError

    @staticmethod
    def _decode_file(filename: str) -> str:
        with open(filename, 'rb') as fp:
            raw = fp.read()

        codec = chardet.detect(raw)
        if codec['encoding'] is None or codec['confidence'] < 0.8:
            logging.warning(
                f'Unsure about encoding of `{filename}` ({codec}), '
                'assuming utf-8.')
            return raw.decode('utf-8')
        logging.info(f'`{filename}` decoded as {codec["encoding"]}.')
        return raw.decode(codec['encoding'])

    def read(self) -> T:
        """May raise `OSError` or `UnicodeDecodeError`,
        besides what `self.loads()` raises."""
        try:
            # when encoding is None, `open()` would fallback to system default.
            # and when encoding got wrong,
            # just `UnicodeDecodeError` and fallback to `chardet`.
            with open(self._fn, 'r', encoding=self._codec) as fp:
                text = fp.read()
        except UnicodeDecodeError:
            text = self._decode_file(self._fn)
        return self.loads(text)

    def write(self, instance: T, **options: Any) -> None:
        text = self.dumps(instance, **options)
        with open(self._fn, 'w', encoding=self._codec or 'utf-8') as fp:
            fp.write(text)

    def __str__(self) -> str:
        return f'{self._fn} ({self._codec})'

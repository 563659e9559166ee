# -*- encoding: utf-8 -*-
# @File   : fileio.py
# @Time   : 2024/11/05 19:10:02
# @Author : Kariko Lin

"""Read / write INI files. The parser itself never touches the disk."""

from typing import Any

from .abstract import FileHandler
from .model import Document
from .parser import parse


class IniFile(FileHandler[Document]):
    """单个 INI 文件。

    `encoding=None` 时先按系统默认编码读取，失败再交给`chardet`猜测；
    写入时则默认`utf-8`。原有注释与排版不会保留。
    """

    def loads(self, text: str) -> Document:
        return parse(text)

    def dumps(self, instance: Document, **options: Any) -> str:
        """`options`: `blank_lines`, `delimiter`, see `Document.serialize()`."""
        return instance.serialize(**options)

    def __str__(self) -> str:
        return 'INI file: ' + super().__str__()

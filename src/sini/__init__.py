# -*- encoding: utf-8 -*-
# @File   : __init__.py
# @Time   : 2024/11/02 21:31:08
# @Author : Kariko Lin

from .codec import destringify, register_codec, stringify
from .errors import ConversionError, ParseError, ProxyError, SiniError
from .fileio import IniFile
from .model import Document, Section
from .parser import IniParser, parse
from .proxy import ConstPropertyProxy, PropertyProxy
from .serializer import dumps, quote

__all__ = [
    'Document', 'Section', 'parse', 'dumps', 'quote', 'IniParser',
    'ConstPropertyProxy', 'PropertyProxy', 'IniFile',
    'stringify', 'destringify', 'register_codec',
    'SiniError', 'ParseError', 'ConversionError', 'ProxyError'
]

__version__ = '0.2.0'

# -*- encoding: utf-8 -*-
# @File   : consts.py
# @Time   : 2024/11/09 15:27:40
# @Author : Kariko Lin

"""Character classes of the INI grammar, shared by reader and writer."""

BLANKS = ' \t'
EOL = '\r\n'
BOM = '\ufeff'

KEY_HEAD = frozenset(
    'abcdefghijklmnopqrstuvwxyzABCDEFGHIJKLMNOPQRSTUVWXYZ.$:')
# inner blanks are spaces only; a tab ends the key.
KEY_TAIL = KEY_HEAD | frozenset('0123456789_~- ')

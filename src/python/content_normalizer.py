"""
Text normalization for downloaded dictionary files.

Copyright (c) 2025 John Byrd

SPDX-License-Identifier: BSD-3-Clause
"""
import re

BOM = '\ufeff'

_TRAILING_WHITESPACE = re.compile(r'[ \t]+$', re.MULTILINE)
_TRAILING_NEWLINES = re.compile(r'\n*\Z')
# First "SET <encoding>" line; lines may end in LF or a bare CR
_SET_PRAGMA = re.compile(r'(?:\A\ufeff*|(?<=[\r\n]))SET [^\r\n]*')


def normalize_content(text: str) -> str:
    """Remove BOM, unify line endings, strip trailing blanks, end with one newline."""
    text = text.lstrip(BOM)
    text = text.replace('\r\n', '\n').replace('\r', '\n')
    text = _TRAILING_WHITESPACE.sub('', text)
    return _TRAILING_NEWLINES.sub('\n', text, count=1)


def force_utf8_encoding(text: str) -> str:
    """Rewrite the affix file's SET pragma to declare UTF-8."""
    return _SET_PRAGMA.sub('SET UTF-8', text, count=1)

# -*- coding: utf-8 -*-
#
# This file is part of `orgtree`, a library to read Org-mode element trees
#
# Copyright © 2026 by the orgtree authors
#
# This module is free software: you can redistribute it and/or modify
# it under the terms of the GNU General Public License as published by
# the Free Software Foundation, either version 3 of the License, or
# (at your option) any later version.
#
# This module is distributed in the hope that it will be useful,
# but WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
# GNU General Public License for more details.
#
# You should have received a copy of the GNU General Public License
# along with this program.  If not, see <https://www.gnu.org/licenses/>.


"""
Functions to read Lisp printer syntax into :class:`~orgtree.sexp.Token`
nodes.

Both functions return a two-tuple (``remaining``, ``token``), where
``remaining`` is the text after the token. It is up to the caller to decide
whether there may be text after the token. For example::

    >>> from orgtree import read
    >>> remaining, token = read.read_padded(' (a "b(c)" #<buffer x>) rest')
    >>> remaining
    'rest'
    >>> token.dump()
    <sexp.List (3 children) [1:23]>
     ├╴<sexp.Atom 'a' [2:3]>
     ├╴<sexp.Atom '"b(c)"' [4:10]>
     ╰╴<sexp.Atom '#<buffer x>' [11:22]>

A :class:`~orgtree.error.ReadError` is raised when the text does not start
with a valid token.

"""

import re

from parce.transform import transform_text

from .error import ReadError
from .lang.lisp import LispPrinter


_whitespace = re.compile(r'[ \t\r\n]*')


def _first_token(text):
    """Return the first Token read from text; raises ReadError."""
    for token in transform_text(LispPrinter.root, text) or ():
        if isinstance(token, ReadError):
            raise token
        return token
    raise ReadError("no token found", len(text))


def read(text):
    """Read one token from the beginning of the text.

    The token must start at the very beginning of the text, whitespace is not
    skipped.

    """
    token = _first_token(text)
    if token.pos:
        raise ReadError("unexpected whitespace", 0)
    return text[token.end:], token


def read_padded(text):
    """Read one token, skipping whitespace before and after it."""
    token = _first_token(text)
    end = _whitespace.match(text, token.end).end()
    return text[end:], token

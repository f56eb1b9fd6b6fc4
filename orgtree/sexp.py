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
The token types the Lisp printer syntax is read into.

The reader (see :mod:`orgtree.read`) turns text like::

    (paragraph (:begin 1 :end 7 :contents-begin 1 :contents-end 7)
      #("hello\n" 0 6 (:parent (paragraph ...))))

into a tree of :class:`Token` nodes: an :class:`Atom` for every symbol,
number, string or ``#<...>`` object, a :class:`List` for ``( ... )``, a
:class:`Vector` for ``[ ... ]`` and a :class:`TextWithProperties` for the
``#("text" ...)`` form.

Atoms keep their text exactly as it appears in the source, strings including
their quotes and escapes. Every token knows its position in the text it was
read from, in the ``pos`` and ``end`` attributes.

The ``as_*`` accessor methods are used to check the shape of a token tree;
they raise :class:`~orgtree.error.SchemaError` when a token is not of the
expected type.

"""

from .error import SchemaError
from .node import Node


class Token(Node):
    """Base class for all tokens.

    The ``pos`` and ``end`` attributes are the position of the token in the
    text it was read from, or None for tokens that were created manually.

    """
    __slots__ = ('pos', 'end')

    def __init__(self, *children, pos=None, end=None):
        super().__init__(*children)
        self.pos = pos
        self.end = end

    def __repr__(self):
        def result():
            yield "{}.{}".format(self.__module__.split('.')[-1], type(self).__name__)
            head = self.repr_head()
            if head is not None:
                yield head
            if len(self):
                yield "({} child{})".format(len(self), '' if len(self) == 1 else 'ren')
            if self.pos is not None:
                yield '[{}:{}]'.format(self.pos, self.end)
        return "<{}>".format(" ".join(result()))

    def repr_head(self):
        """Return a short text for the repr of this token, or None."""
        return None

    def write(self):
        """Return the token (and its children) in Lisp printer syntax."""
        raise NotImplementedError

    def _wrong_type(self, expected):
        return SchemaError("expected {}, got {}".format(expected, self.describe()))

    def describe(self):
        """Return a short description of this token, used in error messages."""
        text = self.write()
        if len(text) > 40:
            text = text[:37] + '...'
        return "{} {}".format(type(self).__name__, text)

    def as_atom(self):
        """Return the text of an Atom; raises SchemaError for other tokens."""
        raise self._wrong_type("atom")

    def as_list(self):
        """Return the children of a List; raises SchemaError for other tokens."""
        raise self._wrong_type("list")

    def as_vector(self):
        """Return the children of a Vector; raises SchemaError for other tokens."""
        raise self._wrong_type("vector")

    def as_text(self):
        """Return a TextWithProperties; raises SchemaError for other tokens."""
        raise self._wrong_type("text with properties")

    def as_map(self):
        """Return a dictionary mapping the keys of a property list to the values.

        The token must be a List with an even number of children, and every
        key must be an Atom. When a key occurs more than once, the last value
        is used. Raises SchemaError otherwise.

        """
        children = self.as_list()
        if len(children) % 2:
            raise SchemaError("expected an even number of children in property list, got {}".format(
                len(children)))
        return {key.as_atom(): value for key, value in zip(children[::2], children[1::2])}


class Atom(Token):
    """A symbol, number, quoted string or ``#<...>`` object.

    The ``text`` is kept verbatim: a quoted string includes its quotes and
    escape characters.

    """
    __slots__ = ('text',)

    def __init__(self, text, pos=None, end=None):
        super().__init__(pos=pos, end=end)
        self.text = text

    def repr_head(self):
        return repr(self.text)

    def body_equals(self, other):
        return self.text == other.text

    def write(self):
        return self.text

    def as_atom(self):
        return self.text


class List(Token):
    """A list ``( ... )``."""
    __slots__ = ()

    def write(self):
        return "({})".format(" ".join(n.write() for n in self))

    def as_list(self):
        return self


class Vector(Token):
    """A vector ``[ ... ]``."""
    __slots__ = ()

    def write(self):
        return "[{}]".format(" ".join(n.write() for n in self))

    def as_vector(self):
        return self


class TextWithProperties(Token):
    """A text with properties ``#("text" start end plist ...)``.

    The ``text`` is the quoted string verbatim, the child nodes are the
    properties.

    """
    __slots__ = ('text',)

    def __init__(self, text, *properties, pos=None, end=None):
        super().__init__(*properties, pos=pos, end=end)
        self.text = text

    @property
    def properties(self):
        """The property tokens (the same as the children)."""
        return self[:]

    def repr_head(self):
        return repr(self.text)

    def body_equals(self, other):
        return self.text == other.text

    def write(self):
        return "#({})".format(" ".join((self.text, *(n.write() for n in self))))

    def as_text(self):
        return self

    def unquote(self):
        r"""Return the text with the quotes removed and the escapes resolved.

        Only the escapes ``\n``, ``\\`` and ``\"`` are recognized. Raises
        ValueError if the text is not a quoted string or contains another
        escape sequence.

        """
        if not self.text.startswith('"'):
            raise ValueError("quoted text does not start with a quote")
        if len(self.text) < 2 or not self.text.endswith('"'):
            raise ValueError("quoted text does not end with a quote")
        result = []
        escape = False
        for char in self.text[1:-1]:
            if escape:
                try:
                    result.append(_unescape[char])
                except KeyError:
                    raise ValueError("unknown escape sequence: \\{}".format(char)) from None
                escape = False
            elif char == '\\':
                escape = True
            else:
                result.append(char)
        if escape:
            raise ValueError("quoted text ends with an unfinished escape sequence")
        return ''.join(result)


_unescape = {
    'n': '\n',
    '\\': '\\',
    '"': '"',
}

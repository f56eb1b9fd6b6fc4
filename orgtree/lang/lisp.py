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
Lisp printer syntax language and transformation definition.

This reads the text Emacs prints for Lisp data, such as the result of
``(pp-to-string (org-element-parse-buffer))``. Only the data syntax is
supported: lists, vectors, symbols, strings, ``#<...>`` objects and texts
with properties ``#("text" ...)``. There are no reader macros.

The :class:`LispPrinterTransform` turns the parce tree into
:class:`~orgtree.sexp.Token` nodes. Contrary to parce, which happily lexes
any text, reading Lisp data is strict: every syntax problem is turned into a
:class:`~orgtree.error.ReadError`. Such an error is not raised by the
transform methods, but returned as the result of the context it was found
in, so that it travels up to the context where the token is actually needed.
Only the first (innermost) error is kept.

"""

from parce import Language, lexicon, skip, default_action
from parce.transform import Transform
import parce.action as a

from ..error import ReadError
from ..sexp import Atom, List, Vector, TextWithProperties


class LispPrinter(Language):
    """Lisp printer syntax language definition."""
    @lexicon
    def root(cls):
        yield from cls.common()

    @classmethod
    def common(cls):
        """Yield the rules for whitespace and all tokens."""
        yield r'[ \t\r\n]+', skip
        yield r'\(', a.Delimiter.OpenParen, cls.list
        yield r'\[', a.Delimiter.OpenBracket, cls.vector
        yield r'#\(', a.Delimiter.OpenParen, cls.text_with_properties
        yield r'#<[^>]+>', a.Literal.Object
        yield r'"', a.String, cls.string
        yield r'[^ \t\r\n)\]]+', a.Name.Symbol
        yield default_action, a.Invalid

    @lexicon(consume=True)
    def list(cls):
        """A list ( ... )."""
        yield r'\)', a.Delimiter.CloseParen, -1
        yield from cls.common()

    @lexicon(consume=True)
    def vector(cls):
        """A vector [ ... ]."""
        yield r'\]', a.Delimiter.CloseBracket, -1
        yield from cls.common()

    @lexicon(consume=True)
    def text_with_properties(cls):
        """A text with properties #("text" ... )."""
        yield r'\)', a.Delimiter.CloseParen, -1
        yield from cls.common()

    @lexicon(consume=True)
    def string(cls):
        """A quoted string; only a few escape sequences are valid."""
        yield r'"', a.String, -1
        yield r'\\[\\"n]', a.String.Escape
        yield r'\\', a.Invalid
        yield default_action, a.String


class LispPrinterTransform(Transform):
    """Transform Lisp printer syntax to :class:`~orgtree.sexp.Token` nodes.

    Every method returns either a Token or a ReadError instance.

    """
    ## helper methods
    def token(self, item):
        """Return the Token for a parce token or transformed item.

        Raises ReadError for invalid text or when the item is an error.

        """
        if item.is_token:
            if item.action is a.Invalid:
                raise ReadError("unexpected {}".format(repr(item.text)), item.pos)
            return Atom(item.text, item.pos, item.end)
        elif isinstance(item.obj, ReadError):
            raise item.obj
        return item.obj

    def sequence(self, items, closer, what):
        """Return the Tokens in a list, vector or text with properties.

        The first of the items is the opening delimiter. Tokens must be
        separated by whitespace and the sequence must be terminated with the
        ``closer`` and may not be empty. Raises ReadError otherwise.

        """
        head = items[0]
        closed = len(items) > 1 and items[-1] == closer
        children = []
        for item in items[1:-1] if closed else items[1:]:
            token = self.token(item)
            if children and token.pos == children[-1].end:
                raise ReadError("expected whitespace before {}".format(
                    token.describe()), token.pos)
            children.append(token)
        if not closed:
            raise ReadError("unterminated {}".format(what), head.pos)
        if not children:
            raise ReadError("empty {}".format(what), head.pos)
        return children

    ### transforming methods
    def root(self, items):
        """Return a list with the top-level Tokens.

        Reading stops at the first error, which then ends the list.

        """
        result = []
        for item in items:
            try:
                result.append(self.token(item))
            except ReadError as e:
                result.append(e)
                break
        return result

    def list(self, items):
        """Build a List ``(`` ... ``)``."""
        try:
            children = self.sequence(items, ')', "list")
        except ReadError as e:
            return e
        return List(*children, pos=items[0].pos, end=items[-1].end)

    def vector(self, items):
        """Build a Vector ``[`` ... ``]``."""
        try:
            children = self.sequence(items, ']', "vector")
        except ReadError as e:
            return e
        return Vector(*children, pos=items[0].pos, end=items[-1].end)

    def text_with_properties(self, items):
        """Build a TextWithProperties ``#(`` ... ``)``.

        The first child must be a quoted string, the remaining children are
        the properties.

        """
        if len(items) < 2 or items[1].is_token or items[1].name != "string":
            return ReadError("expected a quoted string after '#('", items[0].end)
        try:
            text, *properties = self.sequence(items, ')', "text with properties")
        except ReadError as e:
            return e
        return TextWithProperties(text.text, *properties, pos=items[0].pos, end=items[-1].end)

    def string(self, items):
        """Build an Atom for a quoted string, keeping quotes and escapes."""
        for t in items:
            if t.action is a.Invalid:
                return ReadError("invalid escape sequence", t.pos)
        if len(items) < 2 or items[-1] != '"':
            return ReadError("unterminated string", items[0].pos)
        return Atom(''.join(t.text for t in items), items[0].pos, items[-1].end)

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
Reconstruct the Org element tree from the text Emacs prints for the result
of ``org-element-parse-buffer``.

The printed tree looks like this::

    (org-data (:begin 1 :contents-begin 1 :contents-end 13 :end 13 ...)
      (section (:begin 1 :end 13 :contents-begin 1 :contents-end 13 ...)
        (paragraph (:begin 1 :end 13 :contents-begin 1 :contents-end 13 ...)
          #("Hello world\n" 0 12 (:parent (paragraph ...))))))

Every element is a list with the element type, a property list and the child
elements. The positions of an element are found in the property list, either
as separate ``:begin``, ``:end``, etc. properties, or, in newer Org versions,
packed in a ``:standard-properties`` vector.

Plain text is printed as a text with properties. Its offsets are relative:
the first text in an element starts at the ``:contents-begin`` of the
element, every following one after the end of its preceding sibling.

The :func:`build` function returns an :class:`AstNode` tree, where each node
has a ``name`` and a ``position``, a :class:`SourceRange` in the original Org
document.

"""

import collections
import logging
import re

from .error import ReadError, SchemaError, PropertyValueError
from .node import Node
from .read import read_padded
from .sexp import TextWithProperties
from .util import line_number, end_line_number


logger = logging.getLogger(__name__)


#: The name of the root element.
ROOT_NAME = "org-data"

#: The name of plain text nodes, Emacs does not give them a type name.
TEXT_NAME = "plain-text"


#: A SourceRange describes the span of an element in the Org document.
SourceRange = collections.namedtuple("SourceRange", "start_line end_line start_character end_character")
SourceRange.start_line.__doc__ = "The 1-based line the element starts on."
SourceRange.end_line.__doc__ = "The line after the last line of the element."
SourceRange.start_character.__doc__ = "The 1-based position of the first character."
SourceRange.end_character.__doc__ = "The position after the last character."


#: The positions of an element as found in its property list.
StandardProperties = collections.namedtuple("StandardProperties",
    "begin end contents_begin contents_end post_affiliated post_blank", defaults=(None,) * 6)


# slot order of the :standard-properties vector
_vector_slots = (
    'begin',
    'post_affiliated',
    'contents_begin',
    'contents_end',
    'end',
    'post_blank',
)

# keyword properties used when there is no :standard-properties vector
_keywords = {
    ':begin': 'begin',
    ':end': 'end',
    ':contents-begin': 'contents_begin',
    ':contents-end': 'contents_end',
    ':post-affiliated': 'post_affiliated',
    ':post-blank': 'post_blank',
}

_integer = re.compile(r'[0-9]+')


class AstNode(Node):
    """An element of the reconstructed Org tree.

    The ``name`` is the Org element type, such as ``headline`` or
    ``paragraph``, and ``position`` is a :class:`SourceRange`. The child
    nodes are the contained elements and texts.

    """
    __slots__ = ('name', 'position')

    def __init__(self, name, position, *children):
        super().__init__(*children)
        self.name = name
        self.position = position

    def __repr__(self):
        def result():
            yield "{}.{}".format(self.__module__.split('.')[-1], type(self).__name__)
            yield repr(self.name)
            if len(self):
                yield "({} child{})".format(len(self), '' if len(self) == 1 else 'ren')
            p = self.position
            yield '[{}:{}]'.format(p.start_character, p.end_character)
        return "<{}>".format(" ".join(result()))

    def body_equals(self, other):
        return self.name == other.name and self.position == other.position

    def to_dict(self):
        """Return a dictionary with the name, position and children.

        The children are converted recursively, so the result can directly
        be serialized to JSON.

        """
        return {
            'name': self.name,
            'position': dict(self.position._asdict()),
            'children': [n.to_dict() for n in self],
        }


class OwnerTree:
    """The original Org document text together with its reconstructed tree."""
    __slots__ = ('input_source', 'tree')

    def __init__(self, input_source, tree):
        self.input_source = input_source
        self.tree = tree

    def __repr__(self):
        return "<{} {} ({} characters)>".format(
            type(self).__name__, repr(self.tree), len(self.input_source))

    def to_dict(self):
        """Return a dictionary with the ``input`` text and the ``tree``."""
        return {
            'input': self.input_source,
            'tree': self.tree.to_dict(),
        }


def parse_integer(token):
    """Return the integer value of an atom token, or None for ``nil``.

    Raises PropertyValueError for another value, and SchemaError if the
    token is not an atom.

    """
    text = token.as_atom()
    if text == "nil":
        return None
    if not _integer.fullmatch(text):
        raise PropertyValueError("expected an integer or nil, got {}".format(repr(text)))
    return int(text)


def standard_properties(token):
    """Return the StandardProperties from the property list token.

    The ``:standard-properties`` vector is used if present, otherwise the
    separate keyword properties. Missing values are None.

    """
    properties = token.as_map()
    try:
        vector = properties[':standard-properties']
    except KeyError:
        return StandardProperties(**{field: parse_integer(properties[key])
            for key, field in _keywords.items() if key in properties})
    values = vector.as_vector()
    return StandardProperties(**{field: parse_integer(value)
        for field, value in zip(_vector_slots, values)})


class TreeBuilder:
    """Build AstNode trees for one Org ``source`` text.

    The ``source`` is the text of the Org document, it is used to compute the
    line numbers of all elements.

    """
    def __init__(self, source):
        self.source = source

    def source_range(self, begin, end):
        """Return a SourceRange for the Emacs positions begin and end."""
        if begin > end:
            raise PropertyValueError("begin {} is after end {}".format(begin, end))
        return SourceRange(
            line_number(self.source, begin),
            end_line_number(self.source, end),
            begin,
            end,
        )

    def build(self, token, reference=None):
        """Return an AstNode for the token.

        The ``reference`` is the position relative offsets of plain text are
        counted from; None if the parent element has no contents.

        """
        if isinstance(token, TextWithProperties):
            return self.plain_text(token, reference)
        return self.element(token)

    def element(self, token):
        """Return an AstNode for an element list ``(type (properties...) children...)``."""
        children = token.as_list()
        if len(children) < 2:
            raise SchemaError("element has no property list: {}".format(token.describe()))
        name = children[0].as_atom()
        props = standard_properties(children[1])
        if props.begin is None or props.end is None:
            raise SchemaError("element {} has no begin or end position".format(name))
        node = AstNode(name, self.source_range(props.begin, props.end))
        reference = props.contents_begin
        for child in children[2:]:
            n = self.build(child, reference)
            node.append(n)
            if reference is not None:
                reference = n.position.end_character
        return node

    def plain_text(self, token, reference):
        """Return an AstNode for a text with properties.

        The first two properties are the start and end offset relative to
        ``reference``.

        """
        if reference is None:
            raise SchemaError("plain text in an element without contents: {}".format(token.describe()))
        if len(token) < 2:
            raise SchemaError("plain text has no start and end offset: {}".format(token.describe()))
        start, end = (parse_integer(t) for t in token[:2])
        if start is None or end is None:
            raise PropertyValueError("plain text offsets can't be nil: {}".format(token.describe()))
        return AstNode(TEXT_NAME, self.source_range(reference + start, reference + end))


def build(source, lisp_text):
    """Return the AstNode tree for the Org ``source`` from the ``lisp_text``
    Emacs printed for it.

    Raises ReadError if the lisp_text can't be read, SchemaError (or
    PropertyValueError) if it is no valid Org element tree.

    """
    remaining, token = read_padded(lisp_text)
    if remaining:
        raise ReadError("unexpected text after the element tree", len(lisp_text) - len(remaining))
    children = token.as_list()
    name = children[0].as_atom()
    if name != ROOT_NAME:
        raise SchemaError("expected {} as root element, got {}".format(ROOT_NAME, name))
    root = TreeBuilder(source).build(token)
    logger.debug("built tree of %d nodes for %d characters of Org text",
                 root.count(), len(source))
    return root


def build_owner_tree(source, lisp_text):
    """Return an OwnerTree with the source and its tree built by :func:`build`."""
    return OwnerTree(source, build(source, lisp_text))

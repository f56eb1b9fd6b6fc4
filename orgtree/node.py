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
A small list-based tree, shared by the token tree the reader creates
(:mod:`orgtree.sexp`) and the reconstructed Org element tree
(:mod:`orgtree.tree`).

"""

import itertools
import weakref


DUMP_STYLES = {
    "ascii":   (" | ", "   ", " |-", " `-"),
    "round":   (" │ ", "   ", " ├╴", " ╰╴"),
}

DUMP_STYLE_DEFAULT = "round"


def _orphan():
    return None


class Node(list):
    """A list of child nodes with a weakly referenced :attr:`parent`.

    Nodes compare by identity and are always true, also when empty. Use
    :meth:`equals` to compare two trees by their contents.

    ``node // cls`` yields the descendants that are an instance of ``cls``
    (a class or tuple of classes), in document order.

    """
    __slots__ = ('__weakref__', '_parent')

    def __init__(self, *children):
        self._parent = _orphan
        for child in children:
            self.append(child)

    def __repr__(self):
        return '<{} ({} {})>'.format(type(self).__name__, len(self),
            "child" if len(self) == 1 else "children")

    def __bool__(self):
        return True

    __hash__ = object.__hash__

    def __eq__(self, other):
        return self is other

    def __ne__(self, other):
        return self is not other

    def __floordiv__(self, cls):
        if not isinstance(cls, (type, tuple)):
            return NotImplemented
        return (n for n in self.descendants() if isinstance(n, cls))

    @property
    def parent(self):
        """The parent node, None for the root."""
        return self._parent()

    def append(self, node):
        """Add a child node and make us its parent."""
        node._parent = weakref.ref(self)
        list.append(self, node)

    def equals(self, other):
        """Return True if other is a tree of the same shape and contents.

        Types and child counts must match and :meth:`body_equals` must return
        True, recursively for all children.

        """
        return (type(self) is type(other)
                and len(self) == len(other)
                and self.body_equals(other)
                and all(a.equals(b) for a, b in zip(self, other)))

    def body_equals(self, other):
        """Compare the own contents of a node, not its children.

        Subclasses reimplement this; the default returns True.

        """
        return True

    def is_last(self):
        """Return True if we are the last child of our parent."""
        return self.parent[-1] is self

    def descendants(self):
        """Yield all nodes below this one, depth first, in document order."""
        pending = [iter(self)]
        while pending:
            for n in pending[-1]:
                yield n
                if len(n):
                    pending.append(iter(n))
                    break
            else:
                pending.pop()

    def count(self, cls=None):
        """Return the number of nodes in the tree, ourselves included.

        With ``cls``, count only the instances of that class.

        """
        nodes = itertools.chain((self,), self.descendants())
        return sum(1 for n in nodes if cls is None or isinstance(n, cls))

    def dump(self, file=None, style=None, depth=0):
        """Print the tree, one node per line, to file (default stdout).

        The style is a key of ``DUMP_STYLES``, "round" by default.

        """
        vertical, blank, tee, corner = DUMP_STYLES[style or DUMP_STYLE_DEFAULT]
        prefix = []
        node, branch = self, (tee, corner)
        for _ in range(depth):
            prefix.append(branch[node.is_last()])
            node, branch = node.parent, (vertical, blank)
        print(''.join(reversed(prefix)) + repr(self), file=file)
        for n in self:
            n.dump(file, style, depth + 1)

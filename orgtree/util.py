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
Some utility functions to map Emacs character positions to line numbers.

Emacs counts buffer positions from 1, and an Org element spans the positions
``begin`` upto but not including ``end``. The functions in this module use
that convention.

"""


def rtrim(iterable, needle='\n'):
    r"""Yield the items of ``iterable``, but drop the last item if it equals
    ``needle``.

    Only one item is dropped. This works with one item lookahead, so it can
    be used on any iterable, not only on strings. For example::

        >>> ''.join(rtrim('abcd\n\n'))
        'abcd\n'
        >>> ''.join(rtrim('ab\ncd'))
        'ab\ncd'

    """
    buffered = False
    for item in iterable:
        if buffered:
            yield held
            buffered = False
        if item == needle:
            held = item
            buffered = True
        else:
            yield item


def line_number(text, position):
    """Return the 1-based number of the line the Emacs ``position`` is on.

    This is one more than the number of newlines before ``position``.

    """
    return text.count('\n', 0, max(position - 1, 0)) + 1


def end_line_number(text, position):
    """Return the exclusive line number for a range ending at ``position``.

    One newline at the end of the range is ignored, so that an element ending
    with a newline does not extend to the next line. The returned line number
    is the one after the last line of the range.

    """
    prefix = text[:max(position - 1, 0)]
    return sum(1 for c in rtrim(prefix) if c == '\n') + 2

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
Exceptions raised by :mod:`orgtree`.

There are two main families: a :class:`ReadError` means that the text
printed by Emacs could not be read as Lisp printer syntax at all, while a
:class:`SchemaError` (and its subclass :class:`PropertyValueError`) means
that the text was read fine, but does not describe an Org element tree.

"""


class Error(Exception):
    """Base class for all exceptions raised by orgtree."""


class ReadError(Error):
    """Raised when the text does not match the Lisp printer syntax.

    The ``pos`` attribute is the position in the text where reading failed,
    the ``message`` attribute describes what was wrong.

    """
    def __init__(self, message, pos):
        super().__init__(message, pos)
        self.message = message
        self.pos = pos

    def __str__(self):
        return "{} (at position {})".format(self.message, self.pos)


class SchemaError(Error):
    """Raised when a token tree does not have the shape of an Org element tree."""


class PropertyValueError(SchemaError, ValueError):
    """Raised when a position property has a value that is not an integer or ``nil``."""


class EmacsError(Error):
    """Raised when running Emacs to parse an Org document failed."""

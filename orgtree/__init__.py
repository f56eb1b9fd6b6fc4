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
The orgtree module.

Reads the Org-mode element tree, as printed by Emacs for the result of
``org-element-parse-buffer``, and reconstructs it as a tree of nodes that
know their line and character positions in the original Org document.

"""

from .pkginfo import version, version_string
from .tree import build, build_owner_tree


__all__ = ('build', 'build_owner_tree', 'load', 'version', 'version_string')


def load(filename, lisp_filename, encoding='utf-8'):
    """Convenience function to read an Org document and the Lisp text Emacs
    printed for it from two files, and return the :class:`~.tree.AstNode`
    tree.

    Raises :class:`OSError` if a file can't be read.

    """
    with open(filename, encoding=encoding) as f:
        source = f.read()
    with open(lisp_filename, encoding=encoding) as f:
        lisp_text = f.read()
    return build(source, lisp_text)

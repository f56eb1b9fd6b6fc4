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
Test the node module.
"""

### find orgtree
import sys
sys.path.insert(0, '.')

import importlib
import io
import re

import pytest

from orgtree import node
from orgtree.node import Node
from orgtree.read import read_padded
from orgtree.sexp import Atom, List


class N1(Node):
    pass


class N2(Node):
    pass


class N3(Node):
    pass


class M1(N1):
    pass


class M2(N2):
    pass


class M3(N3):
    pass


def make_tree():
    return \
    N1(
        N2(
            N3(),
            M3(),
            N2(),
            M1(),
        ),
        N1(
            M2(),
        ),
    )


def test_main():
    tree = make_tree()
    assert next(tree//M3) is tree[0][1]
    assert sum(1 for _ in tree//N2) == 3     # M2 inherits from N2 :-)
    assert sum(1 for _ in tree//(M1, M2)) == 2
    assert tree[0][2].parent is tree[0]
    assert tree.parent is None
    assert tree[1][0].parent.parent is tree
    assert tree.count() == 8
    assert tree.count(N2) == 3

    assert tree.equals(make_tree())
    tree2 = make_tree()
    tree2[1].append(N3())
    assert not tree.equals(tree2)
    assert tree2[1][1].parent is tree2[1]


def test_descendants_order():
    tree = make_tree()
    names = [type(n).__name__ for n in tree.descendants()]
    assert names == ['N2', 'N3', 'M3', 'N2', 'M1', 'N1', 'M2']


def test_dump():
    tree = N1(N2(N3()), N3())
    f = io.StringIO()
    tree.dump(f, "ascii")
    assert f.getvalue().splitlines() == [
        "<N1 (2 children)>",
        " |-<N2 (1 child)>",
        " |  `-<N3 (0 children)>",
        " `-<N3 (0 children)>",
    ]


def test_query_needs_class():
    tree = make_tree()
    with pytest.raises(TypeError):
        tree // "N2"


def test_documented_modules_exist():
    names = re.findall(r":mod:`([\w.]+)`", node.__doc__)
    assert "orgtree.tree" in names
    for name in names:
        importlib.import_module(name)


def test_token_parents():
    token = read_padded("(a (b c) d)")[1]
    assert token.parent is None
    inner = token[1]
    assert inner.parent is token
    assert all(t.parent is inner for t in inner)
    assert [t.text for t in token // Atom] == ["a", "b", "c", "d"]
    assert token.count(List) == 2
    assert inner.is_last() is False and token[2].is_last()


if __name__ == "__main__" and 'test_main' in globals():
    test_main()

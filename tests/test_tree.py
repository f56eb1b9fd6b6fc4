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
Test reconstructing the Org element tree.
"""

### find orgtree
import sys
sys.path.insert(0, '.')

import json

import pytest

import orgtree
from orgtree.error import ReadError, SchemaError, PropertyValueError
from orgtree.read import read_padded
from orgtree.tree import (
    AstNode, SourceRange, StandardProperties, build, build_owner_tree,
    standard_properties,
)


org_source = "Hello\nworld\n\nNext\n"

# mixes the old keyword properties with the newer :standard-properties vector
org_lisp = r"""
(org-data
 (:standard-properties
  [1 1 1 19 19 0 nil org-data nil nil nil 3 19 nil #<buffer  *temp*> nil nil nil]
  :path nil :CATEGORY nil)
 (section
  (:begin 1 :end 19 :contents-begin 1 :contents-end 19 :robust-begin nil
          :robust-end nil :post-blank 0 :post-affiliated 1 :mode first-section
          :granularity nil :cached nil :parent
          (org-data (:standard-properties [1 1 1 19 19 0 nil org-data nil nil nil 3 19 nil #<buffer  *temp*> nil nil nil])))
  (paragraph
   (:begin 1 :end 14 :contents-begin 1 :contents-end 13 :post-blank 1
           :post-affiliated 1 :mode nil :granularity nil :parent #2)
   #("Hello\nworld\n" 0 12 (:parent #3)))
  (paragraph
   (:standard-properties [14 14 14 19 19 0 nil nil nil nil nil 2 19 nil nil nil nil nil])
   #("Next\n" 0 5 (:parent #4)))))
"""


def test_main():
    root = build(org_source, org_lisp)
    assert isinstance(root, AstNode)
    assert root.name == "org-data"
    assert root.position == SourceRange(1, 5, 1, 19)

    section = root[0]
    assert section.name == "section"
    assert section.position == SourceRange(1, 5, 1, 19)

    p1, p2 = section
    assert p1.name == p2.name == "paragraph"
    assert p1.position == SourceRange(1, 4, 1, 14)
    assert p2.position == SourceRange(4, 5, 14, 19)

    assert p1[0].name == "plain-text"
    assert p1[0].position == SourceRange(1, 3, 1, 13)
    assert p2[0].position == SourceRange(4, 5, 14, 19)
    assert len(p1[0]) == 0

    assert root.count() == 6
    assert sum(1 for n in root // AstNode if n.name == "plain-text") == 2


def test_to_dict():
    tree = build_owner_tree(org_source, org_lisp)
    d = tree.to_dict()
    assert d["input"] == org_source
    assert d["tree"]["name"] == "org-data"
    assert d["tree"]["position"] == {
        "start_line": 1,
        "end_line": 5,
        "start_character": 1,
        "end_character": 19,
    }
    text = d["tree"]["children"][0]["children"][1]["children"][0]
    assert text == {
        "name": "plain-text",
        "position": {"start_line": 4, "end_line": 5, "start_character": 14, "end_character": 19},
        "children": [],
    }
    assert json.loads(json.dumps(d)) == d


def test_relative_text_offsets():
    source = "x" * 100
    lisp = """(org-data (:begin 1 :end 101 :contents-begin 1 :contents-end 101)
      (paragraph (:begin 50 :end 70 :contents-begin 50 :contents-end 70)
        #("hello" 0 5 nil)
        #("abc" 0 3 nil)
        (bold (:begin 58 :end 63 :contents-begin 59 :contents-end 62)
          #("b" 0 3 nil))
        #("tail" 0 4 nil)))"""
    paragraph = build(source, lisp)[0]
    positions = [(n.position.start_character, n.position.end_character) for n in paragraph]
    assert positions == [(50, 55), (55, 58), (58, 63), (63, 67)]
    bold = paragraph[2]
    assert (bold[0].position.start_character, bold[0].position.end_character) == (59, 62)


def test_offset_lines():
    # position 10 starts line 2, the character at 0-based index 19 is a newline
    source = "abcdefgh\n0123456789\nmore\n"
    lisp = """(org-data (:begin 1 :end 26)
      (paragraph (:begin 10 :end 20))
      (paragraph (:begin 10 :end 21)))"""
    p1, p2 = build(source, lisp)
    assert p1.position == SourceRange(2, 3, 10, 20)
    assert p2.position == SourceRange(2, 3, 10, 21)


def test_standard_properties():
    def props(text):
        return standard_properties(read_padded(text)[1])

    assert props("(:begin 1 :end 5 :contents-begin nil :post-blank 2)") == \
        StandardProperties(begin=1, end=5, post_blank=2)
    assert props("(:standard-properties [3 4 5 6 7 8 extra slots])") == \
        StandardProperties(begin=3, post_affiliated=4, contents_begin=5,
                           contents_end=6, end=7, post_blank=8)
    assert props("(:standard-properties [3 nil 5])") == \
        StandardProperties(begin=3, contents_begin=5)
    # the vector wins over keyword properties
    assert props("(:begin 1 :standard-properties [3 nil nil nil 9])") == \
        StandardProperties(begin=3, end=9)
    assert props("(:path nil)") == StandardProperties()


def test_schema_errors():
    def error(lisp, exception=SchemaError):
        with pytest.raises(exception) as excinfo:
            build("some text\n", lisp)
        return excinfo.value

    error("(document (:begin 1 :end 2))")
    error("((org-data) (:begin 1 :end 2))")
    error("org-data")
    error("(org-data)")
    error("(org-data nil)")
    error("(org-data (:begin 1 :end))")
    error("(org-data (:begin 1))")
    error("(org-data (:standard-properties (1 2 3 4 5)))")
    error("(org-data (:begin 1 :end 2) (paragraph))")
    error("(org-data (:begin 1 :end 2) foo)")
    error("(org-data (:begin 1 :end 2) [1 2])")
    error('(org-data (:begin 1 :end 2) #("x" 0 1 nil))')
    error('(org-data (:begin 1 :end 2 :contents-begin 1) #("x" 0))')
    error('(org-data (:begin (1) :end 2))')


def test_value_errors():
    def error(lisp):
        with pytest.raises(PropertyValueError) as excinfo:
            build("some text\n", lisp)
        return excinfo.value

    e = error("(org-data (:begin one :end 2))")
    assert isinstance(e, SchemaError)
    assert isinstance(e, ValueError)
    error("(org-data (:begin -1 :end 2))")
    error("(org-data (:standard-properties [1 1 x 5 5]))")
    error('(org-data (:begin 1 :end 2 :contents-begin 1) #("x" 0 nil nil))')
    error('(org-data (:begin 1 :end 2 :contents-begin 1) #("x" a 1 nil))')
    error("(org-data (:begin 5 :end 2))")


def test_read_errors():
    with pytest.raises(ReadError):
        build("text", "(org-data (:begin 1 :end 2)")
    with pytest.raises(ReadError):
        build("text", "(org-data (:begin 1 :end 2)) trailing")
    with pytest.raises(ReadError):
        build("text", "")
    # trailing whitespace is fine
    assert build("text", "\n(org-data (:begin 1 :end 5))\n\n").name == "org-data"


def test_load(tmp_path):
    org_file = tmp_path / "doc.org"
    lisp_file = tmp_path / "doc.el"
    org_file.write_text(org_source, encoding="utf-8")
    lisp_file.write_text(org_lisp, encoding="utf-8")
    root = orgtree.load(str(org_file), str(lisp_file))
    assert root.equals(build(org_source, org_lisp))


if __name__ == "__main__":
    test_main()
    test_to_dict()
    test_relative_text_offsets()
    test_offset_lines()

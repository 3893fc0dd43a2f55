# -*- coding: utf-8 -*-
#
# This file is part of `lilyvault`, a library to build LilyPond scores from notes
#
# Copyright © 2026 by the lilyvault authors
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

### find lilyvault
import sys
sys.path.insert(0, '.')

import io

import pytest

from lilyvault.node import REPEAT_COUNT, Composite, Repeat, Selection, Text


class Fixed:
    """Random source that always picks the same index."""
    def __init__(self, index):
        self.index = index

    def randrange(self, n):
        return self.index


class Alternate:
    """Random source that picks 0, 1, 0, 1, ... and counts the draws."""
    def __init__(self):
        self.draws = 0

    def randrange(self, n):
        self.draws += 1
        return (self.draws - 1) % n


def test_text():
    t = Text("c4 d e f")
    assert t.render() == "c4 d e f"
    assert t.render() == t.render()
    t.text = "g1"
    assert t.render() == "g1"


def test_composite():
    a, b = Text("a"), Text("b")
    c = Composite(a, b, a)
    assert c.render() == "a\nb\na\n"
    assert c[1] is b
    assert Composite().render() == ""

    # remove by identity, not by equal text
    a2 = Text("a")
    c.append(a2)
    c.remove(a2)
    assert len(c) == 3 and c[0] is a and c[2] is a
    with pytest.raises(ValueError):
        c.remove(Text("b"))


def test_selection():
    a, b, c = Text("A"), Text("B"), Text("C")
    s = Selection(a, b, c, random=Fixed(1))
    for _ in range(1000):
        assert s.render() == "B"
    assert Selection(random=Fixed(1)).render() == ""
    assert Selection().render() == ""

    # the default random source only picks children
    s = Selection(a, b, c)
    assert {s.render() for _ in range(200)} <= {"A", "B", "C"}


def test_repeat():
    assert REPEAT_COUNT == 32
    assert Repeat(Text("x")).render() == "x" * 32
    assert Repeat(Text("c4 ")).render() == "c4 " * 32
    assert Repeat(Composite(Text("x"))).render() == "x\n" * 32
    assert Repeat(Text("x"), 3).render() == "xxx"
    with pytest.raises(TypeError):
        Repeat(None)


def test_repeat_draws_every_time():
    source = Alternate()
    r = Repeat(Selection(Text("a"), Text("b"), random=source))
    assert r.render() == "ab" * 16
    assert source.draws == 32


def test_repeat_wraps_one_node():
    inner = Text("x")
    r = Repeat(inner)
    assert r.node is inner
    assert r.children() == (inner,)
    assert not hasattr(r, "append") and not hasattr(r, "remove")
    with pytest.raises(AttributeError):
        r.node = Text("y")
    assert r.render() == "x" * 32


def test_tree():
    tree = Composite(
        Selection(
            Composite(Text("a")),
            Repeat(Composite(Text("b"))),
            title="Intro",
        ),
        Text(r'\bar "||"'),
    )
    tree2 = tree.copy()
    assert tree.equals(tree2)
    assert tree2[0].title == "Intro"
    assert tree2[0][1].node is not tree[0][1].node
    tree2[0][0][0].text = "c"
    assert not tree.equals(tree2)
    assert not Repeat(Text("x")).equals(Repeat(Text("x"), 4))
    assert not Selection(title="A").equals(Selection(title="B"))

    f = io.StringIO()
    tree.dump(f, "ascii")
    assert f.getvalue() == (
        "<Composite (2 children)>\n"
        " |-<Selection (2 children) 'Intro'>\n"
        " |  |-<Composite (1 child)>\n"
        " |  |  `-<Text 'a'>\n"
        " |  `-<Repeat x32 (1 child)>\n"
        " |     `-<Composite (1 child)>\n"
        " |        `-<Text 'b'>\n"
        " `-<Text '\\\\bar \"||\"'>\n"
    )


if __name__ == "__main__" and 'test_main' in globals():
    test_main()

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
Test the Vault language definition and transform.
"""

### find lilyvault
import sys
sys.path.insert(0, '.')

from parce.transform import transform_text

from lilyvault.lang.vault import (
    Vault, Heading, Link, INCLUDE, RAW,
    INCLUDE_LINK, RAW_LINK, REFERENCE_LINK, link_target)


def lines(text):
    return transform_text(Vault.root, text)


def test_main():
    text = (
        "# Intro\n"
        "[[a]]\n"
        "plain text with a [[link]]\n"
        "![[b||?]]*\n"
        "  [[indented]]\n"
        "#nospace\n"
        "# Verse*\n"
    )
    assert lines(text) == [
        Heading("Intro"),
        Link(REFERENCE_LINK, "[[a]]", False, False, False, False),
        Link(REFERENCE_LINK, "[[b]]", True, True, True, True),
        Heading("Verse"),
    ]


def test_kinds():
    assert lines("[[drums]]####")[0].kind == INCLUDE_LINK
    assert lines("[[riff]]+")[0].kind == RAW_LINK
    assert lines("[[a+b####]]")[0].kind == INCLUDE_LINK
    assert lines("[[just|alias]]")[0].kind == REFERENCE_LINK


def test_directives():
    link = lines("[[a||]]")[0]
    assert link.barline and not link.linebreak and link.text == "[[a]]"
    link = lines("[[a|alias]]")[0]
    assert not link.barline and link.text == "[[a|alias]]"
    link = lines("[[a*b]]*")[0]
    assert link.repeat and link.text == "[[ab]]"
    link = lines("[[a*b]]")[0]
    assert not link.repeat and link.text == "[[a*b]]"
    link = lines("![[a]]")[0]
    assert link.mark and link.text == "[[a]]"


def test_link_target():
    assert link_target("[[Drums/groove|the groove]]") == "Drums/groove"
    assert link_target("[[ bass ####]]", INCLUDE) == "bass"
    assert link_target("[[riff]]+", RAW) == "riff"
    assert link_target("[[riff.md]]") == "riff.md"


def test_repeat_lines():
    # the stars are removed before the line is classified
    assert lines("*[[x]]*") == [Link(REFERENCE_LINK, "[[x]]", True, False, False, False)]
    assert lines("*![[x||]]*\n") == [Link(REFERENCE_LINK, "[[x]]", True, True, True, False)]
    assert lines("*# Chorus*") == [Heading("Chorus")]
    assert lines("*some text*\n**\n") == []



if __name__ == "__main__" and 'test_main' in globals():
    test_main()

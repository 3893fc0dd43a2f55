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
Vault (Obsidian-style markdown notes) language and transform definition.

Only two kinds of lines carry meaning: headings (``# Title``) and lines
starting with a link (``[[note]]`` or ``![[note]]``). All other lines are
lexed as plain text and ignored by the transform.

The :class:`VaultTransform` turns the lexed lines into a list of
:class:`Heading` and :class:`Link` tuples; the directives on a link line are
parsed into the fields of the Link tuple. Building a node tree from those
lines is done by the :mod:`~lilyvault.builder` module::

    >>> from parce.transform import transform_text
    >>> from lilyvault.lang.vault import Vault
    >>> transform_text(Vault.root, "# Intro\\n[[groove||]]*\\nsome text\\n")
    [Heading(title='Intro'), Link(kind='reference', text='[[groove]]', repeat=True, mark=False, barline=True, linebreak=False)]

"""

import collections
import re

from parce import Language, lexicon
from parce.transform import Transform
import parce.action as a


HEADING = "# "
REPEAT = "*"
MARK = "!"
BARLINE = "||"
LINEBREAK = "?"
INCLUDE = "####"
RAW = "+"
ALIAS = "|"

#: Link kinds
INCLUDE_LINK = "include"
RAW_LINK = "raw"
REFERENCE_LINK = "reference"


Heading = collections.namedtuple("Heading", "title")
Link = collections.namedtuple("Link", "kind text repeat mark barline linebreak")


class Vault(Language):
    """Line based language definition for notes in an Obsidian vault.

    A line ending with ``*`` is lexed as a whole; it is classified by the
    transform after the stars are removed.

    """
    @lexicon(re_flags=re.MULTILINE)
    def root(cls):
        yield r'^[^\n]*\*$', a.Name.Repeat
        yield r'^# [^\n]*', a.Name.Heading
        yield r'^!?\[\[[^\n]*', a.Name.Link
        yield r'[^\n]+', a.Text


class VaultTransform(Transform):
    """Transform Vault lines to Heading and Link tuples."""
    def root(self, items):
        """Return the list of Heading and Link tuples, in document order."""
        lines = []
        for t in items:
            if t.is_token:
                if t.action == a.Name.Repeat:
                    line = self.repeat(t.text)
                    if line:
                        lines.append(line)
                elif t.action == a.Name.Heading:
                    lines.append(self.heading(t.text))
                elif t.action == a.Name.Link:
                    lines.append(self.link(t.text))
        return lines

    def repeat(self, text):
        """Return a Heading or repeated Link for a line ending with ``*``.

        All stars are removed before looking at the start of the line.
        Returns None for other lines.

        """
        text = text.replace(REPEAT, "")
        if text.startswith(HEADING):
            return self.heading(text)
        elif text.startswith(("[[", "![[")):
            return self.link(text, True)

    def heading(self, text):
        """Return a Heading for a ``# Title`` line."""
        return Heading(text[len(HEADING):].strip())

    def link(self, text, repeat=False):
        """Return a Link, parsing the directives on the line.

        The directives are removed from the text in a fixed order: mark,
        barline and line break. Then the kind of link is determined: an
        include link if the line contains ``####``, a raw link if it contains
        ``+``, and otherwise a plain reference.

        """
        mark = MARK in text
        if mark:
            text = text.replace(MARK, "")
        barline = BARLINE in text
        if barline:
            text = text.replace(BARLINE, "")
        linebreak = LINEBREAK in text
        if linebreak:
            text = text.replace(LINEBREAK, "")
        if INCLUDE in text:
            kind = INCLUDE_LINK
        elif RAW in text:
            kind = RAW_LINK
        else:
            kind = REFERENCE_LINK
        return Link(kind, text, repeat, mark, barline, linebreak)


def link_target(text, marker=None):
    """Return the note name a link line refers to.

    The brackets and the ``marker`` (if given) are removed, an alias after
    ``|`` is discarded and surrounding whitespace is stripped::

        >>> link_target("[[Drums/groove|the groove]]")
        'Drums/groove'
        >>> link_target("[[ bass ####]]", INCLUDE)
        'bass'

    """
    text = text.replace("[[", "").replace("]]", "")
    if marker:
        text = text.replace(marker, "")
    return text.split(ALIAS, 1)[0].strip()


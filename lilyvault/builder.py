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
Build a :mod:`~lilyvault.node` tree from notes in a vault.

A note is read line by line. Every heading starts a new section, a
:class:`~lilyvault.node.Selection` that renders one of its items at random.
Every line starting with a link adds one item to the current section: a
:class:`~lilyvault.node.Composite` with the contents of the link, wrapped in
a :class:`~lilyvault.node.Repeat` if the line ends with ``*``.

The directives that may appear on a link line:

``!``
    prepend a rehearsal mark to the item
``||``
    add a double bar line to the document, before the current section
``?``
    add a line break to the document, before the current section
``####``
    include the linked note, built recursively into a node tree
``+``
    include the literal text of the linked note
(neither)
    add the link itself, turned into an embed (``![[note]]``)

For example::

    >>> from lilyvault.builder import Builder
    >>> doc = Builder().build_text("# A\\n[[intro]]\\n# B\\n[[verse|v]]*\\n")
    >>> doc.dump()
    <Composite (2 children)>
     ├╴<Selection (1 child) 'A'>
     │  ╰╴<Composite (1 child)>
     │     ╰╴<Text '![[intro]]'>
     ╰╴<Selection (1 child) 'B'>
        ╰╴<Repeat x32 (1 child)>
           ╰╴<Composite (1 child)>
              ╰╴<Text '![[verse|v]]'>

"""

import logging
import os.path

from parce.transform import Transformer

from .lang.vault import (
    Vault, Heading, INCLUDE, RAW, MARK,
    INCLUDE_LINK, RAW_LINK, link_target)
from .node import Composite, Repeat, Selection, Text
from .settings import settings


logger = logging.getLogger(__name__)

_transformer = Transformer()


REHEARSAL_MARK = r"\mark \default"
BARLINE = r'\bar "||"'
LINEBREAK = r"\break"
READ_ERROR = "ERROR_READING_FILE: "


class CyclicInclusionError(RuntimeError):
    """Raised when a note (indirectly) includes itself.

    The ``chain`` attribute holds the filenames from the note that was first
    included upto the one that is included again.

    """
    def __init__(self, chain):
        self.chain = chain
        super().__init__("cyclic inclusion: " + " -> ".join(chain))


class _State:
    """The sections of one document while it is being built."""
    def __init__(self, random):
        self.random = random
        self.document = Composite()
        self.section = Selection(random=random)
        self.reading_first_section = True

    def start_section(self, title):
        """Flush the current section, unless it's the first, and set the title."""
        if not self.reading_first_section:
            self.document.append(self.section)
            self.section = Selection(random=self.random)
        self.section.title = title
        self.reading_first_section = False

    def finish(self):
        """Flush the last section and return the document."""
        self.document.append(self.section)
        return self.document


class Builder:
    """Builds node trees from notes.

    ``vault_dir`` is the directory links are resolved against, ``extension``
    is appended to link names that don't end with it; both default to the
    values in :mod:`~lilyvault.settings`. The ``random`` source is given to
    all created :class:`~lilyvault.node.Selection` nodes; by default they use
    a process-local random generator.

    """
    def __init__(self, vault_dir=None, extension=None, random=None):
        self.vault_dir = settings.vault_dir if vault_dir is None else vault_dir
        self.extension = settings.extension if extension is None else extension
        self.random = random
        self._including = []

    def build(self, filename, header=None):
        """Read the note ``filename`` and return the root Composite.

        Raises :class:`OSError` if the file can't be read, and
        :class:`CyclicInclusionError` if the note includes itself, directly or
        via other notes. The ``header`` is currently not used.

        """
        path = os.path.realpath(filename)
        if path in self._including:
            chain = self._including[self._including.index(path):] + [path]
            raise CyclicInclusionError(chain)
        with open(filename, encoding="utf-8") as f:
            text = f.read()
        logger.debug("building %s", filename)
        self._including.append(path)
        try:
            return self.build_text(text, header)
        finally:
            self._including.pop()

    def build_text(self, text, header=None):
        """Build and return the root Composite from the text of a note."""
        state = _State(self.random)
        for line in _transformer.transform_text(Vault.root, text) or ():
            if isinstance(line, Heading):
                state.start_section(line.title)
            else:
                self.add_link(state, line)
        return state.finish()

    def add_link(self, state, link):
        """Add the item for a :class:`~lilyvault.lang.vault.Link` line."""
        item = Composite()
        if link.mark:
            item.insert(0, Text(REHEARSAL_MARK))
        if link.barline:
            state.document.append(Text(BARLINE))
        if link.linebreak:
            state.document.append(Text(LINEBREAK))
        if link.kind == INCLUDE_LINK:
            item.append(self.include(link.text))
        elif link.kind == RAW_LINK:
            item.append(self.include_raw(link.text))
        else:
            item.append(self.reference(link.text))
        if link.repeat:
            item = Repeat(item)
        state.section.append(item)

    def resolve(self, name):
        """Return the filename for the note ``name``."""
        if not name.endswith(self.extension):
            name += self.extension
        return os.path.join(self.vault_dir, name)

    def include(self, text):
        """Build the note a ``####`` link refers to; return its root node."""
        filename = self.resolve(link_target(text, INCLUDE))
        logger.debug("including %s", filename)
        return self.build(filename)

    def include_raw(self, text):
        """Return a Text node with the contents of the note a ``+`` link refers to.

        If the note can't be read, the Text node contains the error message.

        """
        filename = self.resolve(link_target(text, RAW))
        try:
            with open(filename, encoding="utf-8") as f:
                content = f.read()
        except (OSError, UnicodeDecodeError) as e:
            logger.warning("could not include %s: %s", filename, e)
            return Text(READ_ERROR + str(e))
        if content.endswith("\n"):
            content = content[:-1]
        return Text(content)

    def reference(self, text):
        """Return a Text node embedding the linked note."""
        if not text.startswith(MARK):
            text = MARK + text
        return Text(text)


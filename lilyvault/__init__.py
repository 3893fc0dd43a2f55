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
The lilyvault module.

Builds trees of text fragments from notes in an Obsidian vault, and assembles
the LilyPond voices in the rendered notes into a score::

    >>> import lilyvault
    >>> doc = lilyvault.load("Beat.md")
    >>> score = lilyvault.voices.assemble(doc.render())

"""

from . import builder, node, voices
from .builder import Builder, CyclicInclusionError
from .pkginfo import version, version_string


__all__ = ('Builder', 'CyclicInclusionError', 'load', 'version', 'version_string')


def load(filename, header=None, vault_dir=None, random=None):
    """Convenience function to read the note ``filename`` and return the root node.

    Links are resolved against ``vault_dir``, which defaults to the directory
    set in :mod:`~lilyvault.settings`. Raises :class:`OSError` if the file
    can't be read.

    """
    return Builder(vault_dir=vault_dir, random=random).build(filename, header)

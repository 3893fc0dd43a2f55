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
Meta-information about the lilyvault package.
"""

#: name of the package
name = "lilyvault"

#: the current version
version = (0, 1, 0)
version_suffix = ""
#: the current version as a string
version_string = "{}.{}.{}".format(*version) + version_suffix

#: short description
description = "Build LilyPond scores from notes in an Obsidian vault"

#: maintainer name
maintainer = "The lilyvault authors"

#: license
license = "GPL v3"

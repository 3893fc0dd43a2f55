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
Default paths and options, read from ``LILYVAULT_*`` environment variables.

E.g. ``LILYVAULT_VAULT_DIR=~/Obsidian/konrad`` sets the directory links are
resolved against. Every component also accepts these values as arguments.

"""

from pathlib import Path

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_prefix="LILYVAULT_", extra="ignore")

    #: directory note links are resolved against
    vault_dir: Path = Path(".")
    #: extension appended to links that do not have it
    extension: str = ".md"
    #: template with the music and date placeholders
    template: Path = Path("Template.md")
    #: file the assembled LilyPond source is written to
    score_file: Path = Path("score.ly")
    #: the LilyPond executable
    lilypond: str = "lilypond"
    #: seconds to wait for LilyPond
    timeout: float = 30.0


settings = Settings()

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
Command line interface, run as ``python -m lilyvault``.

Two commands are available::

    python -m lilyvault notes Informatik/_Index.md -o ws2526
    python -m lilyvault score Musik/Beat.md -o hello --template Musik/Template.md

The ``notes`` command writes the rendered notes to ``ws2526.txt``. The
``score`` command assembles the voices in the rendered notes into the template,
writes the LilyPond source to the score file and runs LilyPond to create
``hello.pdf`` and ``hello.mid``.

"""

import argparse
import logging
import sys

from . import load, pkginfo, voices
from .render import Renderer, RenderError
from .settings import settings


logger = logging.getLogger("lilyvault")


def notes(args):
    """Render the notes to NAME.txt."""
    doc = load(args.file, vault_dir=args.vault)
    filename = args.output + ".txt"
    with open(filename, "w", encoding="utf-8") as f:
        f.write(doc.render() + "\n")
    logger.info("notes written to %s", filename)


def score(args):
    """Assemble the voices into the template and engrave the score."""
    doc = load(args.file, vault_dir=args.vault)
    source = voices.assemble(doc.render(), args.template, args.score_file, args.nested)
    if not args.no_render:
        renderer = Renderer(args.lilypond, args.timeout)
        renderer.render_to_files(source, args.output + ".pdf", args.output + ".mid")


def get_parser():
    """Return the ArgumentParser."""
    parser = argparse.ArgumentParser(
        prog="lilyvault",
        description=pkginfo.description,
    )
    parser.add_argument("--version", action="version", version=pkginfo.version_string)
    parser.add_argument("-v", "--verbose", action="count", default=0,
        help="Show more messages (repeat for debug output).")
    parser.add_argument("--vault", default=None,
        help="Directory links are resolved against (default: %s)." % settings.vault_dir)
    commands = parser.add_subparsers(dest="command", required=True)

    p = commands.add_parser("notes", help="Render notes to a text file.")
    p.add_argument("file", help="The note to start from.")
    p.add_argument("-o", "--output", default="notes",
        help="Base name of the text file (default: notes).")
    p.set_defaults(func=notes)

    p = commands.add_parser("score", help="Assemble voices and engrave a score.")
    p.add_argument("file", help="The note to start from.")
    p.add_argument("-o", "--output", default="score",
        help="Base name of the PDF and MIDI files (default: score).")
    p.add_argument("--template", default=None,
        help="Template with the placeholders (default: %s)." % settings.template)
    p.add_argument("--score-file", default=None,
        help="LilyPond file to write (default: %s)." % settings.score_file)
    p.add_argument("--nested", action="store_true",
        help="Allow nested braces inside voice assignments.")
    p.add_argument("--lilypond", default=None,
        help="The LilyPond executable (default: %s)." % settings.lilypond)
    p.add_argument("--timeout", type=float, default=None,
        help="Seconds to wait for LilyPond (default: %s)." % settings.timeout)
    p.add_argument("--no-render", action="store_true",
        help="Only write the LilyPond file, do not run LilyPond.")
    p.set_defaults(func=score)
    return parser


def main(argv=None):
    """Run the command line interface; return the exit code."""
    args = get_parser().parse_args(argv)
    level = (logging.WARNING, logging.INFO, logging.DEBUG)[min(args.verbose, 2)]
    logging.basicConfig(level=level, format="%(levelname)s: %(message)s")
    try:
        args.func(args)
    except (OSError, RuntimeError, RenderError) as e:
        logger.error("%s", e)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())

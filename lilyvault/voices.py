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
Assemble the voice assignments in rendered notes into one LilyPond document.

Notes contain LilyPond fragments in fenced code blocks, with assignments like
``voiceOne = { c4 d e f }``. The same voice may be assigned many times,
throughout many notes. :func:`find_voices` collects the music of every voice,
in the order the voices are first encountered, and :func:`write_voices` writes
every voice once, with all its music::

    >>> from lilyvault.voices import find_voices, write_voices
    >>> text = "voiceA = { c d }\\nvoiceB = { g, }\\nvoiceA = { e f }\\n"
    >>> print(write_voices(find_voices(text)), end='')
    voiceA = {
      c d
      e f
    }
    <BLANKLINE>
    voiceB = {
      g,
    }
    <BLANKLINE>

The result is put in a template with :func:`fill_template`; :func:`assemble`
does all steps at once and writes the result to a file.

"""

import collections
import datetime
import logging
import re

from .settings import settings


logger = logging.getLogger(__name__)


MUSIC_PLACEHOLDER = "####MUSICGOESHERE####"
DATE_PLACEHOLDER = "###DATEGOESHERE###"

VOICE_PREFIX = "voice"

_fence_re = re.compile(r"```[\w+-]*")
_voice_re = re.compile(r"({}\w+)\s*=\s*\{{([\s\S]*?)\}}".format(VOICE_PREFIX))
_voice_start_re = re.compile(r"({}\w+)\s*=\s*\{{".format(VOICE_PREFIX))


class AssemblyError(RuntimeError):
    """Raised when assembling voices into the template fails.

    The original exception is available as ``__cause__``.

    """


def strip_fences(text):
    """Remove the code fence markers (```` ```lily ```` and ```` ``` ````) from text."""
    return _fence_re.sub("", text)


def _matches(text):
    """Yield (name, body) tuples, a body ends at the first closing brace."""
    for m in _voice_re.finditer(text):
        yield m.group(1), m.group(2)


def _balanced_matches(text):
    """Yield (name, body) tuples, a body ends at its matching closing brace.

    An assignment without matching closing brace is ignored.

    """
    pos = 0
    while True:
        m = _voice_start_re.search(text, pos)
        if not m:
            return
        depth = 1
        for i in range(m.end(), len(text)):
            if text[i] == '{':
                depth += 1
            elif text[i] == '}':
                depth -= 1
                if depth == 0:
                    yield m.group(1), text[m.end():i]
                    pos = i + 1
                    break
        else:
            return


def find_voices(text, nested=False):
    """Return a dictionary mapping voice names to a list of music bodies.

    Code fences are removed first. The voices are in the order they are first
    encountered, the bodies of every voice in the order they appear in the
    text. Bodies are stripped of surrounding whitespace.

    By default a body ends at the first closing brace, so braces can't be
    nested inside a voice assignment. If ``nested`` is True, braces are
    counted and a body ends at the matching closing brace.

    """
    voices = collections.defaultdict(list)
    matches = _balanced_matches if nested else _matches
    for name, body in matches(strip_fences(text)):
        voices[name].append(body.strip())
    return dict(voices)


def write_voices(voices):
    """Return LilyPond text with one assignment per voice.

    Every body of a voice is written on its own, indented line.

    """
    blocks = []
    for name, bodies in voices.items():
        blocks.append(name + " = {\n")
        blocks.extend("  " + body + "\n" for body in bodies)
        blocks.append("}\n\n")
    return "".join(blocks)


def fill_template(template, music, date=None):
    """Put the music and the date in the template text.

    The ``date`` defaults to today; it is written in ISO format.

    """
    if date is None:
        date = datetime.date.today()
    return template.replace(MUSIC_PLACEHOLDER, music).replace(DATE_PLACEHOLDER, date.isoformat())


def assemble(text, template=None, output=None, nested=False, date=None):
    """Assemble the voices in ``text`` into the template, write and return the result.

    ``template`` is the filename of the template and ``output`` the file to
    write to; they default to the ``template`` and ``score_file`` settings.
    Raises :class:`AssemblyError` if anything fails.

    """
    template = settings.template if template is None else template
    output = settings.score_file if output is None else output
    try:
        with open(template, encoding="utf-8") as f:
            template_text = f.read()
        voices = find_voices(text, nested)
        result = fill_template(template_text, write_voices(voices), date)
        with open(output, "w", encoding="utf-8") as f:
            f.write(result)
    except (OSError, UnicodeError, re.error) as e:
        raise AssemblyError("could not assemble voices: {}".format(e)) from e
    logger.info("wrote %d voices to %s", len(voices), output)
    return result


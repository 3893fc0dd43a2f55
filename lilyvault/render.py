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
Run LilyPond to engrave a source text to PDF and MIDI.

The score must contain both a ``\\layout`` and a ``\\midi`` block, otherwise
one of the output files is missing and :class:`MissingOutputError` is raised.

"""

import collections
import logging
import os.path
import subprocess
import tempfile

from .settings import settings
from .voices import strip_fences


logger = logging.getLogger(__name__)


Result = collections.namedtuple("Result", "pdf midi")


class RenderError(Exception):
    """Base class for errors running LilyPond.

    The ``output`` attribute contains the combined stdout and stderr text of
    the LilyPond process, as far as it was captured.

    """
    def __init__(self, message, output=""):
        self.output = output
        if output:
            message = "{}. Output:\n{}".format(message, output)
        super().__init__(message)


class ProcessStartError(RenderError):
    """LilyPond could not be started."""


class ProcessExitError(RenderError):
    """LilyPond exited with a non-zero exit code."""
    def __init__(self, returncode, output=""):
        self.returncode = returncode
        super().__init__("LilyPond exited with code {}".format(returncode), output)


class RenderTimeout(RenderError):
    """LilyPond did not finish in time and was killed."""


class MissingOutputError(RenderError):
    """LilyPond did not create an expected output file."""


def _decode(output):
    if isinstance(output, bytes):
        return output.decode("utf-8", "replace")
    return output or ""


class Renderer:
    """Runs the LilyPond ``executable``, waiting at most ``timeout`` seconds.

    Both default to the ``lilypond`` and ``timeout`` settings.

    """
    def __init__(self, executable=None, timeout=None):
        self.executable = settings.lilypond if executable is None else executable
        self.timeout = settings.timeout if timeout is None else timeout

    def render(self, source):
        """Engrave the LilyPond ``source`` text and return a Result(pdf, midi) of bytes.

        Code fence markers are removed from the source first. All files are
        created in a temporary directory that is removed afterwards.

        """
        with tempfile.TemporaryDirectory(prefix="lilypond-render-") as directory:
            input_ly = os.path.join(directory, "input.ly")
            prefix = os.path.join(directory, "output")
            with open(input_ly, "w", encoding="utf-8") as f:
                f.write(strip_fences(source))

            command = [self.executable, "-o", prefix, input_ly]
            logger.debug("running %s", " ".join(command))
            try:
                proc = subprocess.run(command,
                    cwd = directory,
                    stdout = subprocess.PIPE,
                    stderr = subprocess.STDOUT,
                    timeout = self.timeout,
                )
            except subprocess.TimeoutExpired as e:
                raise RenderTimeout("LilyPond timed out after {} seconds".format(self.timeout),
                                    _decode(e.output)) from e
            except OSError as e:
                raise ProcessStartError("could not start {}: {}".format(self.executable, e)) from e

            output = _decode(proc.stdout)
            if proc.returncode != 0:
                raise ProcessExitError(proc.returncode, output)

            files = []
            for ext, kind in (".pdf", "PDF"), (".mid", "MIDI"):
                filename = prefix + ext
                try:
                    with open(filename, "rb") as f:
                        files.append(f.read())
                except FileNotFoundError as e:
                    raise MissingOutputError("{} not generated".format(kind), output) from e
            return Result(*files)

    def render_to_files(self, source, pdf, midi):
        """Engrave the ``source`` and write the PDF and MIDI to the given filenames."""
        result = self.render(source)
        with open(pdf, "wb") as f:
            f.write(result.pdf)
        with open(midi, "wb") as f:
            f.write(result.midi)
        logger.info("wrote %s and %s", pdf, midi)
        return result


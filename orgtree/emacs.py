# -*- coding: utf-8 -*-
#
# This file is part of `orgtree`, a library to read Org-mode element trees
#
# Copyright © 2026 by the orgtree authors
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
Run Emacs to parse an Org document.

Emacs is started in batch mode; it inserts the document in a buffer, turns
on ``org-mode`` and prints the result of ``org-element-parse-buffer`` using
``message``, which writes to stderr.

The Emacs executable and the time to wait for it can be set using the
``ORGTREE_EMACS`` and ``ORGTREE_EMACS_TIMEOUT`` environment variables, or
with the ``emacs`` and ``timeout`` arguments.

"""

import logging
import os
import subprocess

from .error import EmacsError
from .tree import build_owner_tree


logger = logging.getLogger(__name__)


#: The Emacs command used when ORGTREE_EMACS is not set.
EMACS_DEFAULT = "emacs"

#: The number of seconds to wait when ORGTREE_EMACS_TIMEOUT is not set.
TIMEOUT_DEFAULT = 30


_script_template = r"""(progn
     (erase-buffer)
     (insert "{text}")
     (org-mode)
     (message "%s" (pp-to-string (org-element-parse-buffer)))
)"""


def escape_elisp_string(text):
    r"""Return text escaped to be put between double quotes in Elisp.

    Only ``"`` and ``\`` need a backslash.

    """
    return text.replace('\\', '\\\\').replace('"', '\\"')


def emacs_command():
    """Return the Emacs executable to run."""
    return os.environ.get("ORGTREE_EMACS") or EMACS_DEFAULT


def emacs_timeout():
    """Return the number of seconds to wait for Emacs."""
    value = os.environ.get("ORGTREE_EMACS_TIMEOUT")
    if not value:
        return TIMEOUT_DEFAULT
    try:
        return float(value)
    except ValueError:
        raise EmacsError("invalid ORGTREE_EMACS_TIMEOUT value: {}".format(repr(value))) from None


def parse_org_document(text, emacs=None, timeout=None):
    """Return the text Emacs prints for the Org element tree of the document.

    Raises EmacsError when Emacs could not be run, did not finish in time or
    exited with an error.

    """
    command = [
        emacs or emacs_command(),
        "-q",
        "--no-site-file",
        "--no-splash",
        "--batch",
        "--eval",
        _script_template.format(text=escape_elisp_string(text)),
    ]
    if timeout is None:
        timeout = emacs_timeout()
    logger.debug("running %s for %d characters of Org text", command[0], len(text))
    try:
        proc = subprocess.run(command, capture_output=True, timeout=timeout)
    except OSError as e:
        raise EmacsError("could not run {}: {}".format(command[0], e)) from e
    except subprocess.TimeoutExpired as e:
        raise EmacsError("{} did not finish within {} seconds".format(command[0], timeout)) from e
    if proc.returncode:
        raise EmacsError("{} exited with status {}: {}".format(
            command[0], proc.returncode, proc.stderr.decode('utf-8', 'replace').strip()))
    try:
        output = proc.stderr.decode('utf-8')
    except UnicodeDecodeError as e:
        raise EmacsError("{} printed invalid UTF-8".format(command[0])) from e
    logger.debug("%s printed %d characters", command[0], len(output))
    return output


def parse_org(text, emacs=None, timeout=None):
    """Parse the Org document text with Emacs and return an
    :class:`~orgtree.tree.OwnerTree`.

    """
    return build_owner_tree(text, parse_org_document(text, emacs, timeout))

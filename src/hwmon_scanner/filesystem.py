"""Filesystem access used by the scanner.

The scanner only ever expands patterns, walks directory trees and reads
small text attribute files.  Those three operations are described by the
``Filesystem`` protocol so tests can substitute an in-memory tree for the
host's ``/sys``.
"""

from __future__ import annotations

import glob
import logging
import os
import stat
from collections.abc import Callable
from pathlib import Path
from typing import Protocol

from .errors import PatternError

log = logging.getLogger(__name__)

# Called with (path, is_dir, is_regular) for every entry of a walk.
VisitFunc = Callable[[str, bool, bool], None]


class Filesystem(Protocol):
    """Protocol for the filesystem operations the scanner consumes."""

    def expand(self, pattern: str) -> list[str]: ...

    def walk(self, root: str, visit: VisitFunc) -> None: ...

    def read_text(self, path: str) -> str: ...


def _check_pattern(pattern: str) -> None:
    """Raise PatternError if *pattern* is empty or has an unclosed ``[``."""
    if not pattern:
        raise PatternError("Empty device pattern")

    in_class = False
    for ch in pattern:
        if ch == "[":
            in_class = True
        elif ch == "]":
            in_class = False
    if in_class:
        raise PatternError(f"Unclosed '[' in pattern {pattern!r}")


class SystemFilesystem:
    """Filesystem implementation backed by the host operating system."""

    def expand(self, pattern: str) -> list[str]:
        """Expand a wildcard pattern into the sorted list of matching paths.

        Raises:
            PatternError: If the pattern is malformed.
        """
        _check_pattern(pattern)
        return sorted(glob.glob(pattern))

    def walk(self, root: str, visit: VisitFunc) -> None:
        """Visit *root* and every entry below it, depth first.

        Symbolic links are reported to *visit* (as neither directory nor
        regular file) but never followed, so sysfs back-links such as
        ``device`` and ``subsystem`` do not cause cycles.

        Raises:
            OSError: If *root* itself cannot be stat'ed or listed.
        """
        st = os.stat(root)
        visit(root, stat.S_ISDIR(st.st_mode), stat.S_ISREG(st.st_mode))
        if stat.S_ISDIR(st.st_mode):
            self._walk_dir(root, visit, top=True)

    def _walk_dir(self, path: str, visit: VisitFunc, top: bool) -> None:
        try:
            with os.scandir(path) as it:
                entries = sorted(it, key=lambda e: e.name)
        except OSError as e:
            if top:
                raise
            log.debug("Skipping unreadable directory %s: %s", path, e)
            return

        for entry in entries:
            try:
                is_dir = entry.is_dir(follow_symlinks=False)
                is_regular = entry.is_file(follow_symlinks=False)
            except OSError as e:
                # Entry vanished between listing and stat (hot-unplug)
                log.debug("Skipping entry %s: %s", entry.path, e)
                continue

            visit(entry.path, is_dir, is_regular)
            if is_dir:
                self._walk_dir(entry.path, visit, top=False)

    def read_text(self, path: str) -> str:
        """Read a whole file and strip surrounding whitespace."""
        return Path(path).read_text(errors="replace").strip()

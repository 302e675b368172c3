#!/usr/bin/env python3
"""
KUBETINT SNAPSHOT - Screen Dump Writer
--------------------------------------
Persists the raw (unmarked) YAML shown in the viewer to a timestamped file.

File names are '<sanitized-name>--<unix-seconds>.yaml'. Two saves of the same
name within the same second land on the same file; the later one wins.

Author: KubeTint Team
Date: 2026-10-19
"""

import logging
import os
import re
import time
from dataclasses import dataclass
from pathlib import Path
from typing import Callable, List

from kubetint.core.errors import DirectoryError, SnapshotWriteError

logger = logging.getLogger("kubetint.snapshot")

DIR_MODE = 0o744
FILE_MODE = 0o600
SNAPSHOT_EXT = ".yaml"

INVALID_NAME_CHARS = re.compile(r'[^A-Za-z0-9_.\-]+')
SNAPSHOT_NAME_PATTERN = re.compile(r'\A(?P<name>.*)--(?P<stamp>\d+)\.yaml\Z')

@dataclass
class SnapshotInfo:
    """A snapshot found on disk."""
    name: str
    timestamp: int
    size: int
    path: str

def sanitize_file_name(name: str) -> str:
    """
    Collapses every run of characters outside [A-Za-z0-9_.-] into '_'.
    Example: "My Pod/1" -> "My_Pod_1"
    """
    return INVALID_NAME_CHARS.sub("_", name) or "snapshot"

def ensure_directory(path: str):
    """Creates path (and parents) when missing; raises DirectoryError otherwise."""
    target = Path(path)
    if target.is_dir():
        return
    try:
        target.mkdir(mode=DIR_MODE, parents=True, exist_ok=True)
    except OSError as e:
        raise DirectoryError(str(path), e.strerror or str(e)) from e

class SnapshotWriter:
    """
    Writes snapshot files. The clock is injectable so callers (and tests)
    control the timestamp that ends up in the file name.
    """

    def __init__(self, clock: Callable[[], float] = time.time):
        self.clock = clock

    def build_path(self, directory: str, name: str) -> str:
        file_name = f"{sanitize_file_name(name)}--{int(self.clock())}{SNAPSHOT_EXT}"
        return os.path.join(directory, file_name)

    def save(self, directory: str, name: str, raw: str) -> str:
        """
        Saves raw under directory and returns the file path.

        - DirectoryError: directory could not be ensured; nothing is written.
        - Open failure: logged, returns "" (callers treat it as nothing saved).
        - SnapshotWriteError: the write itself failed; the file may be partial.
        Close failures are logged and never change the result.
        """
        ensure_directory(directory)

        fpath = self.build_path(directory, name)
        flags = os.O_CREAT | os.O_WRONLY | os.O_TRUNC
        try:
            fd = os.open(fpath, flags, FILE_MODE)
        except OSError as e:
            logger.error(f"Unable to open YAML file: {fpath} ({e})",
                         extra={"path": fpath, "error": str(e)})
            return ""

        handle = os.fdopen(fd, "w", encoding="utf-8", newline="")
        try:
            handle.write(raw)
            handle.flush()
        except OSError as e:
            raise SnapshotWriteError(fpath, e.strerror or str(e)) from e
        finally:
            try:
                handle.close()
            except OSError as e:
                logger.error(f"Closing YAML file failed: {fpath} ({e})",
                             extra={"path": fpath, "error": str(e)})

        logger.debug(f"Snapshot saved to {fpath}")
        return fpath

def save_snapshot(directory: str, name: str, raw: str) -> str:
    """Functional entry point using the wall clock."""
    return SnapshotWriter().save(directory, name, raw)

def list_snapshots(directory: str) -> List[SnapshotInfo]:
    """Lists snapshots in directory, newest first. Missing directory -> []."""
    root = Path(directory)
    if not root.is_dir():
        return []

    found = []
    for entry in root.iterdir():
        match = SNAPSHOT_NAME_PATTERN.match(entry.name)
        if not match or not entry.is_file():
            continue
        found.append(SnapshotInfo(
            name=match.group("name"),
            timestamp=int(match.group("stamp")),
            size=entry.stat().st_size,
            path=str(entry),
        ))
    return sorted(found, key=lambda s: (s.timestamp, s.name), reverse=True)

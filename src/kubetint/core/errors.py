#!/usr/bin/env python3
"""
KUBETINT ERRORS
---------------
Exception hierarchy shared by the snapshot writer, the settings loader
and the CLI.

Author: KubeTint Team
Date: 2026-10-19
"""

class KubeTintError(RuntimeError):
    """Base class for every error raised by KubeTint."""

class DirectoryError(KubeTintError):
    """The snapshot directory does not exist and could not be created."""

    def __init__(self, path: str, reason: str):
        self.path = path
        self.reason = reason
        super().__init__(f"Unable to ensure directory '{path}': {reason}")

class SnapshotWriteError(KubeTintError):
    """The snapshot file was opened but its content could not be written."""

    def __init__(self, path: str, reason: str):
        self.path = path
        self.reason = reason
        super().__init__(f"Failed writing snapshot '{path}': {reason}")

class ConfigError(KubeTintError):
    """A settings or skin file is unreadable or malformed."""

class InputError(KubeTintError):
    """The manifest handed to the CLI could not be decoded."""

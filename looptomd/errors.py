"""Exception hierarchy for looptomd.

Only failures that stop a conversion are exceptions.  Anomalies inside the
document tree (missing attributes, odd styles, absent markers) fall back to
defaults in the extractors and never raise.
"""

from __future__ import annotations


class LoopToMdError(Exception):
    """Base class for all looptomd errors."""


# ---------------------------------------------------------------------------
# Command line
# ---------------------------------------------------------------------------

class UsageError(LoopToMdError):
    """Invalid command line; the CLI prints the message and the help text."""


class MissingArgumentError(UsageError):
    """A required option is absent or its value was omitted."""


class UnknownOptionError(UsageError):
    """An option that the CLI does not recognise."""


class UnexpectedArgumentError(UsageError):
    """A positional argument beyond the single optional input path."""


# ---------------------------------------------------------------------------
# Conversion
# ---------------------------------------------------------------------------

class InputNotFoundError(LoopToMdError, FileNotFoundError):
    """The input HTML file does not exist.

    Attributes:
        path -- the resolved path that was looked up
    """

    def __init__(self, path: str) -> None:
        super().__init__(f"HTML file not found: {path}")
        self.path = path


class InputReadError(LoopToMdError):
    """The input HTML file exists but cannot be read.

    Attributes:
        path -- the resolved path that was read
    """

    def __init__(self, path: str, reason: OSError) -> None:
        super().__init__(f"Cannot read HTML file {path}: {reason.strerror or reason}")
        self.path = path


class ContentNotFoundError(LoopToMdError):
    """Neither a page frame nor a ``<main>`` element exists in the document."""


class ConfigError(LoopToMdError, ValueError):
    """A settings file cannot be read or fails validation."""

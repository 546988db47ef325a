"""Exception hierarchy for tidy.

Startup errors are reported by the CLI and end the process with a non-zero
status. Wiring errors (unknown context ids or message payloads) are never
caught: they indicate a bug, not a runtime condition.
"""

from __future__ import annotations


class TidyError(Exception):
    """Base class for all tidy errors."""


class StartupError(TidyError):
    """Failure that prevents the interactive loop from starting."""


class DirectoryError(StartupError):
    """Target directory is missing, unreadable, or cannot be canonicalized."""


class HistoryStoreError(StartupError):
    """History database cannot be opened, migrated, or written."""


class TerminalError(StartupError):
    """Terminal could not be switched into interactive mode."""


class InputClosed(TidyError):
    """Standard input reached end-of-file while waiting for a key."""


class ContextNotFound(TidyError, LookupError):
    """A signal or message referenced a context id with no registered screen."""


class UnknownMessage(TidyError, TypeError):
    """A context received a message payload it does not declare."""

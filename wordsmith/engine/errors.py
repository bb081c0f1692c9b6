"""
Error types for the word game.

Only two things can go wrong outside of normal play:
  - a word list (root-word pool or dictionary file) cannot be read  -> LoadError
  - the engine is started without any root-word pool                -> ConfigurationError

Rejected submissions are NOT errors; they come back as SubmissionOutcome values.
"""


class LoadError(OSError):
    """A word list could not be loaded (missing file, unreadable, empty)."""


class ConfigurationError(RuntimeError):
    """The engine cannot start: no root-word pool was supplied."""

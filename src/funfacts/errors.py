"""Exceptions raised inside FunFacts.

Neither escapes the public API: the fact source and score manager turn them
into fallback values.
"""


class FactUnavailableError(Exception):
    """Every provider in a chain failed to produce a fact."""


class StorageError(Exception):
    """A key-value store could not be read or written."""

class TrieError(Exception):
    """Base class for recoverable trie errors."""


class EmptyInputError(TrieError, ValueError):
    """Raised when an empty string is added or searched."""


class WordNotFoundError(TrieError, LookupError):
    """Raised when a path is absent, or present but not a word."""


class InvalidStateError(TrieError):
    """Raised when deleting a node that is not a word terminus."""

"""Prefix trie with prefix/exact lookup, logical deletion and update."""

from typing import Optional

from wordtrie.errors import EmptyInputError, InvalidStateError, TrieError, WordNotFoundError
from wordtrie.node import Node, NodeMap
from wordtrie.trie import Trie


def new_trie(thread_safe: Optional[bool] = None) -> Trie:
    """Return an empty Trie."""
    return Trie(thread_safe=thread_safe)


__all__ = [
    "EmptyInputError",
    "InvalidStateError",
    "Node",
    "NodeMap",
    "Trie",
    "TrieError",
    "WordNotFoundError",
    "new_trie",
]

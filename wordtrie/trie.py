import contextlib
import logging
import os
import threading
from typing import Iterator, Optional

from wordtrie.errors import EmptyInputError, InvalidStateError, WordNotFoundError
from wordtrie.node import Node

log = logging.getLogger("wordtrie")


def _env_flag(value: Optional[str]) -> bool:
    """Return True for "1", "true", "yes" or "on", in any case and padding."""
    return (value or "").strip().lower() in ("1", "true", "yes", "on")


THREAD_SAFE = _env_flag(os.environ.get("WORDTRIE_THREAD_SAFE"))

NOT_FOUND_MSG = "word not in trie"


class Trie:
    """
    A trie (prefix tree) supporting insertion, prefix and exact-word
    lookup, logical deletion, update, and iteration over stored words.

    Deletion only unmarks the terminal node. Paths are never pruned, so
    a deleted word is still reachable through ``find``.
    """

    def __init__(self, thread_safe: Optional[bool] = None):
        """
        Initialize an empty trie.

        Args:
            thread_safe (bool | None): Guard every operation with a single
                re-entrant lock. Defaults to ``WORDTRIE_THREAD_SAFE``.
        """
        self.root = Node("")
        if thread_safe is None:
            thread_safe = THREAD_SAFE
        self.thread_safe = thread_safe
        self._lock = threading.RLock() if thread_safe else contextlib.nullcontext()

    # -------------------------------------------------------------
    # Core Operations
    # -------------------------------------------------------------

    def add_word(self, word: str) -> Node:
        """
        Add a word to the trie and mark its last node as terminal.

        Args:
            word (str): The word to add.

        Returns:
            Node: The terminal node for ``word``.

        Raises:
            EmptyInputError: if ``word`` is empty.
        """
        if not word:
            raise EmptyInputError("cannot add empty word to trie")

        with self._lock:
            node = self.root
            for ch in word:
                if node.children.contains(ch):
                    node = node.children.get(ch)
                else:
                    child = Node(ch)
                    node.children.add(ch, child)
                    node = child

            node.is_end = True
            node.word = word
        log.debug("added %r", word)
        return node

    def find(self, word: str) -> Node:
        """
        Walk the path for ``word`` and return the node it ends on.

        This is a prefix lookup: the node need not be terminal.

        Raises:
            EmptyInputError: if ``word`` is empty.
            WordNotFoundError: if any character of the path is missing.
        """
        if not word:
            raise EmptyInputError("cannot search empty word")

        with self._lock:
            node = self.root
            for ch in word:
                if not node.children.contains(ch):
                    log.debug("no path for %r", word)
                    raise WordNotFoundError(NOT_FOUND_MSG)
                node = node.children.get(ch)
            return node

    def find_word(self, word: str) -> Node:
        """
        Return the terminal node for an exact word match.

        Raises:
            EmptyInputError: if ``word`` is empty.
            WordNotFoundError: if the path is missing or is only a prefix.
        """
        with self._lock:
            node = self.find(word)
            if not node.is_end:
                log.debug("%r is a prefix, not a word", word)
                raise WordNotFoundError(NOT_FOUND_MSG)
            return node

    def delete_word(self, node: Node) -> None:
        """
        Unmark ``node`` so its word is no longer found by ``find_word``.

        The node and its path stay in the trie.

        Raises:
            InvalidStateError: if ``node`` is not a word terminus.
        """
        with self._lock:
            if not node.is_end:
                raise InvalidStateError("cannot delete a node if it is not a word")
            word = node.word
            node.is_end = False
            node.word = ""
        log.debug("deleted %r", word)

    def update_word(self, node: Node, new_word: str) -> Node:
        """
        Replace the word ending at ``node`` with ``new_word``.

        Runs ``delete_word`` then ``add_word``. If the delete fails nothing
        is added. If ``new_word`` is empty the old word stays deleted.

        Returns:
            Node: The terminal node for ``new_word``.
        """
        with self._lock:
            old_word = node.word
            self.delete_word(node)
            new_node = self.add_word(new_word)
        log.debug("updated %r -> %r", old_word, new_word)
        return new_node

    # -------------------------------------------------------------
    # Additional Functionalities
    # -------------------------------------------------------------

    def words_with_prefix(self, prefix: str) -> list[str]:
        """
        Retrieve every live word that starts with ``prefix``.

        Deleted words are skipped even though their paths remain in the
        trie. Words come back in child insertion order.

        Args:
            prefix (str): The prefix to match. "" matches every word.

        Returns:
            list[str]: The matching words, or [] if the prefix path is missing.
        """

        def _collect(start: Node, out: list[str]) -> None:
            stack = [start]
            while stack:
                node = stack.pop()
                if node.is_end:
                    out.append(node.word)
                stack.extend(reversed([nxt for _, nxt in node.children.items()]))

        with self._lock:
            node = self.root
            for ch in prefix:
                if ch not in node.children:
                    return []
                node = node.children.get(ch)

            result: list[str] = []
            _collect(node, result)
            return result

    def __iter__(self) -> Iterator[str]:
        """
        Iterate over the words currently marked in the trie.

        A deleted word is not yielded, although its path survives.

        Yields:
            str: Next live word, in child insertion order.
        """
        yield from self.words_with_prefix("")

    def __contains__(self, word: object) -> bool:
        if not isinstance(word, str) or not word:
            return False
        try:
            self.find_word(word)
        except WordNotFoundError:
            return False
        return True

    def __repr__(self) -> str:
        return f"Trie(thread_safe={self.thread_safe})"

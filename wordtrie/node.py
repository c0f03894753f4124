from typing import Iterator


class NodeMap:
    """
    Mapping from a single character to the child Node that owns it.

    A thin wrapper over a dict. ``get`` treats a missing key as a broken
    precondition, so callers are expected to check ``contains`` first.
    """

    __slots__ = ("_nodes",)

    def __init__(self) -> None:
        self._nodes: dict[str, "Node"] = {}

    def add(self, key: str, node: "Node") -> None:
        """Put ``node`` under ``key``, replacing any existing child."""
        self._nodes[key] = node

    def contains(self, key: str) -> bool:
        return key in self._nodes

    def get(self, key: str) -> "Node":
        """
        Return the child stored under ``key``.

        Raises:
            AssertionError: if ``key`` is not in the map.
        """
        if key not in self._nodes:
            raise AssertionError("node not in the nodemap")
        return self._nodes[key]

    def remove(self, key: str) -> None:
        self._nodes.pop(key, None)

    def items(self):
        return self._nodes.items()

    def __contains__(self, key: object) -> bool:
        return key in self._nodes

    def __iter__(self) -> Iterator[str]:
        return iter(self._nodes)

    def __len__(self) -> int:
        return len(self._nodes)


class Node:
    """
    A single node in the trie.

    Attributes:
        value (str):
            The character this node represents ("" for the root).
        children (NodeMap):
            Mapping from a character to the next Node.
        is_end (bool):
            True if a word currently ends at this node.
        word (str):
            The full word when ``is_end`` is set, otherwise "".
    """
    __slots__ = ("value", "children", "is_end", "word")

    def __init__(self, value: str = ""):
        self.value = value
        self.children = NodeMap()
        self.is_end = False
        self.word = ""

    def __repr__(self) -> str:
        end = f" word={self.word!r}" if self.is_end else ""
        return f"Node(value={self.value!r}{end}, children={len(self.children)})"

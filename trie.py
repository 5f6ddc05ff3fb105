"""
trie.py

In-memory word dictionary backed by a 26-way prefix tree. Words are folded to
lowercase and stripped of anything outside a–z before they touch the tree, so
"Sus", "SUS" and "s-u-s" all land on the same node.
"""

import logging

logger = logging.getLogger(__name__)

ALPHABET_SIZE = 26


class TrieAllocationError(MemoryError):
    """Raised when a node or description could not be created during insert."""


class TrieDestroyedError(RuntimeError):
    """Raised when a trie is used after `destroy()`."""


def normalize_word(word: str) -> str:
    """
    Lowercase `word` and drop every character that is not a–z.
    The empty result is a valid key: it addresses the root node.
    """
    return "".join(ch for ch in word.lower() if "a" <= ch <= "z")


class TrieNode:
    __slots__ = ("children", "description")

    def __init__(self):
        # children: slot i holds the child for letter chr(ord('a') + i), or None
        self.children = [None] * ALPHABET_SIZE
        # description: set only if some inserted word ends exactly here
        self.description = None

    def child(self, ch: str):
        return self.children[ord(ch) - ord("a")]


class Trie:
    """Word → description dictionary with alphabetical prefix enumeration."""

    def __init__(self):
        self.root = TrieNode()
        self.size = 0

    def __len__(self):
        self._live_root()
        return self.size

    def __contains__(self, word):
        return self.search(word) is not None

    def _live_root(self) -> TrieNode:
        if self.root is None:
            raise TrieDestroyedError("trie has been destroyed")
        return self.root

    def _walk(self, key: str):
        """Follow normalized `key` from the root; None if any slot is empty."""
        node = self._live_root()
        for ch in key:
            node = node.child(ch)
            if node is None:
                return None
        return node

    def insert(self, word: str, description: str):
        """
        Store `description` under `word`, replacing any earlier description.
        Missing nodes along the path are created on the way down.
        """
        if not isinstance(description, str):
            raise TypeError(f"description must be a str, not {type(description).__name__}")
        key = normalize_word(word)
        node = self._live_root()
        try:
            for ch in key:
                i = ord(ch) - ord("a")
                if node.children[i] is None:
                    node.children[i] = TrieNode()
                node = node.children[i]
        except MemoryError as e:
            raise TrieAllocationError(f"could not allocate trie storage for '{key}'") from e

        if node.description is None:
            self.size += 1
        else:
            logger.debug(f"insert: overwriting description for '{key}'")
        node.description = description

    def insert_many(self, pairs):
        """Insert each (word, description) pair in iteration order."""
        self._live_root()
        for word, description in pairs:
            self.insert(word, description)

    def search(self, word: str):
        """Return the description stored for `word`, or None if it is not a word."""
        node = self._walk(normalize_word(word))
        if node is None:
            return None
        return node.description

    def prefix_search(self, prefix: str):
        """
        Return every (word, description) whose word starts with `prefix`,
        in ascending alphabetical order. An unknown prefix gives [].
        """
        key = normalize_word(prefix)
        node = self._walk(key)
        if node is None:
            return []
        return list(self._iter_subtree(node, key))

    def list_all(self):
        return self.prefix_search("")

    def _iter_subtree(self, node: TrieNode, path: str):
        # Pre-order with an explicit stack. Children are pushed z→a so that
        # 'a' is popped first, and a word is emitted before its extensions.
        stack = [(node, path)]
        while stack:
            node, path = stack.pop()
            if node.description is not None:
                yield path, node.description
            for i in range(ALPHABET_SIZE - 1, -1, -1):
                child = node.children[i]
                if child is not None:
                    stack.append((child, path + chr(ord("a") + i)))

    def destroy(self):
        """
        Release every node and description, leaves first. The trie cannot be
        used afterwards; calling destroy again is a no-op.
        """
        if self.root is None:
            return
        released = 0
        stack = [(self.root, False)]
        while stack:
            node, expanded = stack.pop()
            if expanded:
                node.children = [None] * ALPHABET_SIZE
                node.description = None
                released += 1
                continue
            stack.append((node, True))
            for child in node.children:
                if child is not None:
                    stack.append((child, False))
        self.root = None
        self.size = 0
        logger.debug(f"destroy: released {released} nodes")

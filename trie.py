"""Prefix trie mapping byte strings to LZW codewords."""


class TrieNode:
    __slots__ = ('children', 'code')

    def __init__(self):
        self.children = {}
        self.code = None

    def child(self, byte):
        """Return the child reached by `byte`, or None."""
        return self.children.get(byte)


class Trie:
    """Dictionary used while compressing.

    Each node stands for the byte string spelled by the edge labels from
    the root. A node carries a code only if that exact string was
    inserted, so `lookup` returns None (never 0) for strings that are
    merely prefixes of other entries.
    """

    def __init__(self):
        self.root = TrieNode()
        self.size = 0

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_value, traceback):
        self.clear()
        return False

    def __len__(self):
        return self.size

    def __contains__(self, word):
        return self.lookup(word) is not None

    def insert(self, word, code):
        """Map `word` to `code`. An existing mapping is left unchanged."""
        node = self.root
        for byte in word:
            next_node = node.children.get(byte)
            if next_node is None:
                next_node = TrieNode()
                node.children[byte] = next_node
            node = next_node
        if node.code is None:
            node.code = code
            self.size += 1

    def find_node(self, word):
        node = self.root
        for byte in word:
            node = node.children.get(byte)
            if node is None:
                return None
        return node

    def lookup(self, word):
        """Return the code for exactly `word`, or None if it isn't present."""
        node = self.find_node(word)
        if node is None:
            return None
        return node.code

    def clear(self):
        self.root = TrieNode()
        self.size = 0

"""Codeword-indexed table of byte strings, used while decompressing."""


DEFAULT_CAPACITY = 257


class IndexedDictionary:
    """Growable array of entries addressed by codeword.

    Slots past the last assigned code, and any slot skipped with
    `reserve`, hold None. An empty bytes object is a real entry.
    """

    def __init__(self, capacity=DEFAULT_CAPACITY):
        if capacity < 1:
            raise ValueError(f'capacity must be positive, got {capacity}')
        self.entries = [None] * capacity
        self.next_code = 0

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_value, traceback):
        self.clear()
        return False

    def __len__(self):
        return sum(1 for e in self.entries[:self.next_code] if e is not None)

    def __contains__(self, code):
        return 0 <= code < self.next_code and self.entries[code] is not None

    @property
    def capacity(self):
        return len(self.entries)

    def _grow(self):
        # Double, keeping existing entries in place
        self.entries.extend([None] * len(self.entries))

    def get(self, code):
        if code not in self:
            raise KeyError(code)
        return self.entries[code]

    def append(self, entry):
        """Store `entry` under the next code and return that code."""
        if self.next_code == len(self.entries):
            self._grow()
        code = self.next_code
        self.entries[code] = bytes(entry)
        self.next_code += 1
        return code

    def reserve(self):
        """Skip the next code, leaving its slot unassigned."""
        if self.next_code == len(self.entries):
            self._grow()
        code = self.next_code
        self.next_code += 1
        return code

    def clear(self):
        self.entries = [None]
        self.next_code = 0

"""Deterministic byte stream: the pseudo-random source for one render."""


class ByteStream:
    """Cyclic reader over a digest.

    Every random decision made while drawing an avatar comes from one
    instance of this class, so the order of calls is part of the output.
    """

    def __init__(self, data: bytes):
        if not data:
            raise ValueError("ByteStream needs at least one byte")
        self.data = bytes(data)
        self.cursor = 0

    def next_byte(self) -> int:
        value = self.data[self.cursor % len(self.data)]
        self.cursor += 1
        return value

    def next_bounded(self, max_value: int) -> int:
        """Return a value in [0, max_value); 0 without consuming for max_value <= 0."""
        if max_value <= 0:
            return 0
        return self.next_byte() % max_value

    def __repr__(self) -> str:
        return f"ByteStream(len={len(self.data)}, cursor={self.cursor})"

from collections import deque


class ContextBuffer:
    """
    Bounded FIFO of the most recent lines not yet emitted as context.
    Pushing onto a full buffer silently drops the oldest line.
    """

    def __init__(self, capacity):
        if capacity < 0:
            raise ValueError(f"capacity must be non-negative, got {capacity}")
        self.capacity = capacity
        self._lines = deque(maxlen=capacity)

    def push(self, line):
        """
        Stores a line. Returns True if an older line was evicted to make room
        (always True for a zero-capacity buffer, where the line itself is dropped).
        """
        evicted = len(self._lines) == self.capacity
        self._lines.append(line)
        return evicted

    def drain_in_order(self):
        """
        Returns the buffered lines oldest-first as a one-shot iterator.
        The buffer is already empty when this returns.
        """
        lines = self._lines
        self._lines = deque(maxlen=self.capacity)
        return iter(lines)

    def current_size(self):
        return len(self._lines)

    def __len__(self):
        return len(self._lines)

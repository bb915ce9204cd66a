import logging

from scanner.context_buffer import ContextBuffer
from scanner.errors import ConfigurationError


class StreamScanner:
    """
    Single forward pass over a line stream, emitting each matching line with
    up to `before_lines` lines of preceding context and `after_lines` lines of
    trailing context.

    While trailing context is pending, lines are emitted without being matched,
    so a match inside an active after-window neither flushes before-context nor
    re-arms the counter.
    """

    def __init__(self, matcher, before_lines=0, after_lines=0):
        if before_lines < 0:
            raise ConfigurationError(f"before must be a non-negative integer, got {before_lines}")
        if after_lines < 0:
            raise ConfigurationError(f"after must be a non-negative integer, got {after_lines}")

        self.logger = logging.getLogger(__name__)
        self.matcher = matcher
        self.after_lines = after_lines
        self.buffer = ContextBuffer(before_lines)
        self._pending_after = 0
        self.stats = {
            "lines": 0,
            "matches": 0,
            "before_context": 0,
            "after_context": 0,
            "discarded": 0,
        }

    @property
    def pending_after(self):
        return self._pending_after

    def process_line(self, line):
        """Classifies one line and returns the lines to emit for it, in order."""
        self.stats["lines"] += 1

        if self._pending_after > 0:
            self._pending_after -= 1
            self.stats["after_context"] += 1
            return [line]

        if self.matcher.matches_any(line):
            emitted = list(self.buffer.drain_in_order())
            self.stats["before_context"] += len(emitted)
            self.stats["matches"] += 1
            emitted.append(line)
            self._pending_after = self.after_lines
            return emitted

        if self.buffer.push(line):
            self.stats["discarded"] += 1
        return []

    def scan(self, lines):
        for line in lines:
            yield from self.process_line(line)

        # Whatever is still buffered never belonged to a match window
        leftover = self.buffer.current_size()
        if leftover:
            self.stats["discarded"] += leftover
            self.buffer.drain_in_order()
        self.logger.debug(f"Scan finished: {self.stats}")

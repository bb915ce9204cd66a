import re

from scanner.errors import PatternError


class PatternMatcher:
    def __init__(self, patterns):
        self.patterns = list(patterns or [])
        self.compiled_patterns = []
        # Compile in supplied order so the first bad pattern is the one reported
        for index, regex in enumerate(self.patterns):
            try:
                self.compiled_patterns.append(re.compile(regex))
            except re.error as e:
                raise PatternError(regex, index, e) from e

    def matches_any(self, line):
        """True if any pattern matches somewhere in the line."""
        for pattern in self.compiled_patterns:
            if pattern.search(line):
                return True
        return False

    def __len__(self):
        return len(self.compiled_patterns)

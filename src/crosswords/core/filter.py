"""
Length and character-pattern filter for candidate words.

Patterns use "_" as a joker: "_a__" admits words at least four
characters long with "a" as the second character.
"""

WILDCARD = "_"


def normalize_pattern(pattern: str | None) -> str | None:
    """Upper-cased pattern, or None when it constrains nothing."""
    if not pattern or all(c == WILDCARD for c in pattern):
        return None
    return pattern.upper()


def matches_pattern(word: str, pattern: str | None) -> bool:
    if not pattern:
        return True
    word = word.upper()
    for i, c in enumerate(pattern):
        if c != WILDCARD and i < len(word) and word[i] != c:
            return False
    return True


class ResultFilter:
    def __init__(self, length: int = 0, pattern: str | None = None):
        self.length = length or 0
        self.pattern = normalize_pattern(pattern)

    @property
    def exact_length(self) -> bool:
        return self.length > 0

    def admits(self, word: str) -> bool:
        if self.exact_length:
            if len(word) != self.length:
                return False
        elif self.pattern and len(word) < len(self.pattern):
            return False
        return matches_pattern(word, self.pattern)

from enum import IntEnum

BROKEN_GLYPH = "💔"


class Hint(IntEnum):
    """Where a guessed character stands relative to the secret word"""
    ABSENT_CHARACTER = 0
    WRONG_POSITION = 1
    CORRECT_POSITION = 2

    def __str__(self):
        return glyph(self)


_GLYPHS = {
    Hint.ABSENT_CHARACTER: "⬜️",
    Hint.WRONG_POSITION: "🟡",
    Hint.CORRECT_POSITION: "💚",
}


def glyph(hint):
    return _GLYPHS.get(hint, BROKEN_GLYPH)


class Feedback(tuple):
    """
    The hints for one guess, one per character position.

    Feedback is a tuple, so it is immutable and compares equal to another
    feedback holding the same hints in the same order.
    """

    def __new__(cls, hints=()):
        return super().__new__(cls, (Hint(h) for h in hints))

    @classmethod
    def absent(cls, length):
        return cls((Hint.ABSENT_CHARACTER,) * length)

    def __str__(self):
        return ''.join(glyph(h) for h in self)

    def __repr__(self):
        return f"Feedback([{', '.join(h.name for h in self)}])"

    def equal(self, other):
        if len(self) != len(other):
            return False
        return all(a == b for a, b in zip(self, other))

    def is_solved(self):
        return bool(self) and all(h == Hint.CORRECT_POSITION for h in self)

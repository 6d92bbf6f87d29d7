"""
Shared value types for constraint tests.
"""


class Token:
    """Converts itself to a string."""

    def __init__(self, text):
        self.text = text

    def to_string(self):
        return self.text


class Symbol:
    """Compares itself against strings without converting."""

    def __init__(self, name):
        self.name = name
        self.compared_with = []

    def equals_string(self, other):
        self.compared_with.append(other)
        return other == self.name


class TokenSymbol(Token):
    """Both converts to a string and compares against strings."""

    def equals_string(self, other):
        return True


class NullToken(Symbol):
    """Declares a string conversion that yields nothing."""

    def to_string(self):
        return None


class Point:
    def __init__(self, x, y):
        self.x = x
        self.y = y

    def __repr__(self):
        return f"Point({self.x}, {self.y})"

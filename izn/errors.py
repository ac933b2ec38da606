class ParseError(Exception):
    """Base class for errors reported by the izn parser."""


class CannotOpenError(ParseError):

    def __init__(self, source: str, reason: str, *args):
        super().__init__(*args)

        self.source = source
        self.reason = reason

    def __str__(self):
        return f"Failed to open file '{self.source}': {self.reason}"


class TypeMismatchError(ParseError):
    """A typed lookup asked for a different kind than the one stored.

    Never escapes Document.get; it is logged and answered with a default.
    """

    def __init__(self, section: str, key: str, expected, actual, *args):
        super().__init__(*args)

        self.section = section
        self.key = key
        self.expected = expected
        self.actual = actual

    def __str__(self):
        return f"Type mismatch for {self.section}.{self.key}: expected {self.expected.value}, found {self.actual.value}"

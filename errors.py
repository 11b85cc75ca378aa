# errors.py
# Failures raised by the dictionary, graph and search layers. None of them is
# retried; the CLI reports them and exits.


class WordPathError(Exception):
    """Base class for all word path failures."""


class FormatError(WordPathError, ValueError):
    """Malformed word list: empty input or inconsistent word length."""


class DictIOError(WordPathError, OSError):
    """A word list or graph file could not be read or written."""

    def __init__(self, message, path=None):
        super().__init__(message)
        self.path = path

    def __str__(self):
        return self.args[0]


class WordNotFoundError(WordPathError, LookupError):
    def __init__(self, word):
        super().__init__(f"Word not found in dictionary: '{word}'")
        self.word = word


class PathNotFoundError(WordPathError):
    """Both words exist but no ladder connects them."""

    def __init__(self, start, goal):
        super().__init__(f"Path not found from '{start}' to '{goal}'")
        self.start = start
        self.goal = goal


class DecodeError(WordPathError, ValueError):
    """Persisted graph blob has a wrong header or a corrupt payload."""

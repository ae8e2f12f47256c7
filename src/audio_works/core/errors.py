"""Errors raised while reading the library from disk."""


class LibraryReadError(OSError):
    """A directory could not be read while scanning or listing tracks.

    The original filesystem error is kept as ``__cause__``.
    """
